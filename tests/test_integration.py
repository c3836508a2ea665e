from __future__ import annotations

import numpy as np
import pytest

from wavespectrum.integration import integrate_acceleration, subtract_mean
from wavespectrum.processing.buffers import SampleBuffer


def test_constant_acceleration_integrates_trapezoidally_then_centres() -> None:
    buf = SampleBuffer.from_values([1.0, 1.0, 1.0])
    integrate_acceleration(buf, 1.0)
    # Positions from rest are 0.25, 1.25, 3.25; their mean is then removed.
    mean = (0.25 + 1.25 + 3.25) / 3
    np.testing.assert_allclose(
        buf.values, [0.25 - mean, 1.25 - mean, 3.25 - mean], rtol=1e-5, atol=1e-6
    )


def test_zero_acceleration_stays_at_rest() -> None:
    buf = SampleBuffer.from_values([0.0] * 8)
    integrate_acceleration(buf, 0.1)
    assert not np.any(buf.values)


def test_result_is_zero_mean() -> None:
    rng = np.random.default_rng(5)
    buf = SampleBuffer.from_values(rng.standard_normal(64))
    integrate_acceleration(buf, 0.05)
    assert float(np.mean(buf.values)) == pytest.approx(0.0, abs=1e-4)


def test_empty_buffer_is_left_alone() -> None:
    buf = SampleBuffer.empty()
    integrate_acceleration(buf, 0.1)
    assert buf.size == 0


@pytest.mark.parametrize("dt", [0.0, -0.1, float("nan")])
def test_non_positive_timestep_is_rejected(dt: float) -> None:
    with pytest.raises(ValueError, match="timestep must be positive"):
        integrate_acceleration(SampleBuffer.from_values([1.0]), dt)


def test_subtract_mean_only_touches_logical_contents() -> None:
    buf = SampleBuffer(data=np.array([1.0, 3.0, 42.0], dtype=np.float32), size=2)
    subtract_mean(buf)
    assert buf.data.tolist() == [-1.0, 1.0, 42.0]
