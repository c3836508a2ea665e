from __future__ import annotations

import numpy as np
import pytest

from wavespectrum.report import (
    REPORT_HEADER,
    format_spectrum_report,
    frequency_resolution_hz,
    spectrum_rows,
)


def test_frequency_resolution() -> None:
    assert frequency_resolution_hz(0.1, 8) == pytest.approx(1.25)


def test_short_spectrum_lists_every_bin_up_to_nyquist() -> None:
    spectrum = np.arange(8, dtype=np.float32)
    rows = spectrum_rows(spectrum, 0.1)
    assert [round(f, 6) for f, _ in rows] == [0.0, 1.25, 2.5, 3.75, 5.0]
    assert [d for _, d in rows] == [0.0, 1.0, 2.0, 3.0, 4.0]


def test_long_spectrum_is_decimated() -> None:
    spectrum = np.arange(64, dtype=np.float32)
    rows = spectrum_rows(spectrum, 0.5, max_print_lines=9)
    # Nyquist index 32, step 32 // 8 == 4.
    assert [d for _, d in rows] == [float(i) for i in range(0, 33, 4)]
    assert len(rows) == 9


def test_empty_spectrum_has_no_rows() -> None:
    assert spectrum_rows(np.zeros(0, dtype=np.float32), 0.1) == []


def test_format_spectrum_report() -> None:
    text = format_spectrum_report([(0.0, 1.5), (1.25, float("inf"))])
    assert text.splitlines() == [
        REPORT_HEADER,
        "0.000000 Hz, 1.500000",
        "1.250000 Hz, inf",
    ]
