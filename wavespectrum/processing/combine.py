"""Bin-by-bin combination of spectra into an RAO or a wave energy spectrum."""

from __future__ import annotations

import numpy as np
from numpy.typing import ArrayLike

from ..constants import SAMPLE_DTYPE
from ..errors import LengthMismatchError


def elementwise_divide(numerator: ArrayLike, denominator: ArrayLike) -> np.ndarray:
    """``numerator / denominator`` per bin, ``+inf`` wherever the denominator is 0.

    Both inputs must have the same length; they are never truncated to fit.
    """
    num = np.asarray(numerator, dtype=SAMPLE_DTYPE)
    den = np.asarray(denominator, dtype=SAMPLE_DTYPE)
    if num.shape != den.shape:
        raise LengthMismatchError(
            "spectra must have the same number of bins",
            expected=int(num.size),
            actual=int(den.size),
        )
    result = np.full(num.shape, np.inf, dtype=SAMPLE_DTYPE)
    np.divide(num, den, out=result, where=den != 0)
    return result


def calculate_rao(heave_spectrum: ArrayLike, wave_spectrum: ArrayLike) -> np.ndarray:
    """Response amplitude operator: heave spectral density over wave spectral density."""
    return elementwise_divide(heave_spectrum, wave_spectrum)


def calculate_wave_energy_spectrum(heave_spectrum: ArrayLike, rao: ArrayLike) -> np.ndarray:
    return elementwise_divide(heave_spectrum, rao)
