"""Spectral-estimation core.

- :mod:`~wavespectrum.processing.buffers` — owned, growable sample buffers.
- :mod:`~wavespectrum.processing.complex_ops` — single-precision complex arithmetic.
- :mod:`~wavespectrum.processing.fft` — sizing, radix-2 transform and periodogram.
- :mod:`~wavespectrum.processing.combine` — RAO and wave-spectrum division.

Public symbols are re-exported here so callers can write
``from wavespectrum.processing import compute_power_spectrum``.
"""

from .buffers import SampleBuffer, grow_buffer, release_buffer
from .combine import calculate_rao, calculate_wave_energy_spectrum, elementwise_divide
from .fft import (
    compute_power_spectrum,
    magnitude_spectrum,
    periodogram,
    round_up_to_power_of_two,
    transform,
)

__all__ = [
    "SampleBuffer",
    "calculate_rao",
    "calculate_wave_energy_spectrum",
    "compute_power_spectrum",
    "elementwise_divide",
    "grow_buffer",
    "magnitude_spectrum",
    "periodogram",
    "release_buffer",
    "round_up_to_power_of_two",
    "transform",
]
