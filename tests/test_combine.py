from __future__ import annotations

import math

import numpy as np
import pytest

from wavespectrum.errors import LengthMismatchError
from wavespectrum.processing.combine import (
    calculate_rao,
    calculate_wave_energy_spectrum,
    elementwise_divide,
)


def test_divide_by_zero_yields_positive_infinity() -> None:
    out = elementwise_divide([4.0, 0.0], [2.0, 0.0])
    assert out[0] == 2.0
    assert math.isinf(out[1]) and out[1] > 0


def test_divide_nonzero_over_zero_is_also_infinity() -> None:
    out = elementwise_divide([3.0, 1.0], [0.0, 4.0])
    assert out.tolist() == [math.inf, 0.25]
    assert out.dtype == np.float32


def test_mismatched_lengths_are_rejected_not_truncated() -> None:
    with pytest.raises(LengthMismatchError) as excinfo:
        elementwise_divide([1.0, 2.0, 3.0], [1.0, 2.0])
    assert excinfo.value.expected == 3
    assert excinfo.value.actual == 2


def test_rao_is_heave_over_wave() -> None:
    rao = calculate_rao([8.0, 3.0, 0.0], [2.0, 3.0, 1.0])
    assert rao.tolist() == [4.0, 1.0, 0.0]


def test_wave_spectrum_round_trips_through_rao() -> None:
    rng = np.random.default_rng(11)
    heave = rng.uniform(0.1, 5.0, 16).astype(np.float32)
    heave[3] = 0.0
    wave = rng.uniform(0.1, 5.0, 16).astype(np.float32)

    recovered = calculate_wave_energy_spectrum(heave, calculate_rao(heave, wave))

    nonzero = heave != 0
    np.testing.assert_allclose(recovered[nonzero], wave[nonzero], rtol=1e-5)


def test_wave_spectrum_is_zero_where_rao_is_infinite() -> None:
    out = calculate_wave_energy_spectrum([2.0, 5.0], [np.inf, 0.0])
    assert out[0] == 0.0
    assert math.isinf(out[1])
