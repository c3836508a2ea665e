"""Measurement-uncertainty injection.

Each measured value ``v`` with uncertainty ``u`` is replaced by a draw from
``sampler(v - u/2, v + u/2)``.  The sampler is any ``(lower, upper) -> float``
callable; :class:`UniformSampler` is the default.
"""

from __future__ import annotations

from collections.abc import Callable

import numpy as np

from .processing.buffers import SampleBuffer

Sampler = Callable[[float, float], float]


class UniformSampler:
    """Uniform draws from a seeded NumPy generator."""

    __slots__ = ("_rng", "seed")

    def __init__(self, seed: int | None = None) -> None:
        self.seed = seed
        self._rng = np.random.default_rng(seed)

    def __call__(self, lower: float, upper: float) -> float:
        return float(self._rng.uniform(lower, upper))


def apply_uncertainty(buffer: SampleBuffer, uncertainty: float, sampler: Sampler) -> None:
    values = buffer.values
    half_width = float(uncertainty) / 2.0
    for idx in range(values.size):
        value = float(values[idx])
        values[idx] = sampler(value - half_width, value + half_width)
