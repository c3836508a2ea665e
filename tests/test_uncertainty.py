from __future__ import annotations

from wavespectrum.processing.buffers import SampleBuffer
from wavespectrum.uncertainty import UniformSampler, apply_uncertainty


def test_apply_uncertainty_samples_symmetric_bounds_per_value() -> None:
    calls: list[tuple[float, float]] = []

    def _recording_sampler(lower: float, upper: float) -> float:
        calls.append((lower, upper))
        return upper

    buf = SampleBuffer.from_values([1.0, -2.0])
    apply_uncertainty(buf, 0.5, _recording_sampler)

    assert calls == [(0.75, 1.25), (-2.25, -1.75)]
    assert buf.values.tolist() == [1.25, -1.75]


def test_uniform_sampler_stays_within_bounds() -> None:
    sampler = UniformSampler(seed=1)
    draws = [sampler(-0.5, 0.5) for _ in range(200)]
    assert all(-0.5 <= d < 0.5 for d in draws)


def test_uniform_sampler_is_reproducible_with_seed() -> None:
    first = UniformSampler(seed=42)
    second = UniformSampler(seed=42)
    assert [first(0.0, 1.0) for _ in range(5)] == [second(0.0, 1.0) for _ in range(5)]


def test_zero_uncertainty_keeps_values() -> None:
    buf = SampleBuffer.from_values([0.5, 1.5])
    apply_uncertainty(buf, 0.0, UniformSampler(seed=0))
    assert buf.values.tolist() == [0.5, 1.5]
