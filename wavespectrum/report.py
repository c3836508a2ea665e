"""Plain-text rendering of an estimated wave spectrum."""

from __future__ import annotations

import numpy as np

from .constants import DEFAULT_MAX_PRINT_LINES

REPORT_HEADER = "Wave spectrum: (frequency, wave energy spectral density)"


def frequency_resolution_hz(timestep_s: float, spectrum_size: int) -> float:
    """Bin spacing ``1 / (dt * N)`` of an *N*-point spectrum sampled every *dt* seconds."""
    return 1.0 / (timestep_s * spectrum_size)


def spectrum_rows(
    spectrum: np.ndarray,
    timestep_s: float,
    *,
    max_print_lines: int = DEFAULT_MAX_PRINT_LINES,
) -> list[tuple[float, float]]:
    """``(frequency_hz, density)`` pairs from DC up to Nyquist.

    Long spectra are decimated with a fixed bin step so roughly
    *max_print_lines* rows are produced.
    """
    size = int(spectrum.shape[0])
    if size == 0:
        return []
    max_index = size // 2
    step = 1
    if max_index > max_print_lines:
        step = max_index // (max_print_lines - 1)
    delta_f = frequency_resolution_hz(timestep_s, size)
    return [(delta_f * idx, float(spectrum[idx])) for idx in range(0, max_index + 1, step)]


def format_spectrum_report(rows: list[tuple[float, float]]) -> str:
    lines = [REPORT_HEADER]
    lines.extend(f"{freq_hz:f} Hz, {density:f}" for freq_hz, density in rows)
    return "\n".join(lines)
