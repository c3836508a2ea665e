"""Pure spectral-estimation functions: sizing, radix-2 FFT and periodogram.

All functions in this module are stateless: they take arrays (and scalar
parameters) and return new arrays without mutating their inputs.  Inputs are
zero-padded up to the next power of two, so a spectrum is always
``round_up_to_power_of_two(n)`` bins long.
"""

from __future__ import annotations

import logging
import math
from functools import lru_cache

import numpy as np
from numpy.typing import ArrayLike

from ..constants import COMPLEX_DTYPE, DEFAULT_MAX_SPECTRUM_SIZE, MAX_POWER_OF_TWO, SAMPLE_DTYPE
from ..errors import AllocationFailureError, LengthMismatchError, SizingOverflowError
from .buffers import SampleBuffer
from .complex_ops import add, magnitude, multiply, subtract, unit_rotation

LOGGER = logging.getLogger(__name__)

_TWIDDLE_CACHE_MAXSIZE = 64
"""Number of per-stage twiddle tables kept.  One table per transform length
seen, so this comfortably covers every stage of any realistic transform."""


def round_up_to_power_of_two(n: int) -> int | None:
    """Return the smallest power of two ``>= n``.

    ``0`` and ``1`` both give ``1``.  Returns ``None`` when no power of two
    that fits the 64-bit size type is large enough.
    """
    n = int(n)
    if n < 0:
        raise ValueError(f"size must be non-negative, got {n}")
    if n > MAX_POWER_OF_TWO:
        return None
    if n <= 1:
        return 1
    return 1 << (n - 1).bit_length()


def is_power_of_two(n: int) -> bool:
    return n > 0 and (n & (n - 1)) == 0


def padded_size(n: int, *, max_spectrum_size: int = DEFAULT_MAX_SPECTRUM_SIZE) -> int:
    """Padded transform length for *n* samples, or raise if it cannot be built."""
    size = round_up_to_power_of_two(n)
    if size is None:
        raise SizingOverflowError(n)
    if size > max_spectrum_size:
        raise AllocationFailureError(
            f"padded spectrum size {size} exceeds the limit of {max_spectrum_size} bins"
        )
    return size


@lru_cache(maxsize=_TWIDDLE_CACHE_MAXSIZE)
def _twiddles(n: int) -> np.ndarray:
    k = np.arange(n // 2, dtype=np.float64)
    table = np.asarray(unit_rotation(-2.0 * math.pi * k / n), dtype=COMPLEX_DTYPE)
    table.flags.writeable = False
    return table


def _dit2(x: np.ndarray, start: int, stride: int, n: int) -> np.ndarray:
    # Samples of this sub-transform live at x[start], x[start + stride], ...
    if n == 1:
        return x[start : start + 1].copy()
    half = n // 2
    even = _dit2(x, start, 2 * stride, half)
    odd = _dit2(x, start + stride, 2 * stride, half)
    product = multiply(_twiddles(n), odd)
    out = np.empty(n, dtype=COMPLEX_DTYPE)
    out[:half] = add(even, product)
    out[half:] = subtract(even, product)
    return out


def transform(values: ArrayLike) -> np.ndarray:
    """Radix-2 decimation-in-time DFT of a power-of-two length sequence.

    The input is never padded here; callers pad first (see
    :func:`magnitude_spectrum`).  Output is ``complex64`` in natural
    frequency order.
    """
    x = np.asarray(values, dtype=COMPLEX_DTYPE)
    if x.ndim != 1:
        raise ValueError(f"transform expects a 1-D sequence, got shape {x.shape}")
    n = int(x.shape[0])
    if not is_power_of_two(n):
        raise LengthMismatchError(
            "transform input length must be a power of two",
            expected=round_up_to_power_of_two(n) or 0,
            actual=n,
        )
    view = x.view()
    view.flags.writeable = False
    try:
        return _dit2(view, 0, 1, n)
    except MemoryError as exc:
        raise AllocationFailureError(f"out of memory in {n}-point transform") from exc


def _as_samples(time_series: ArrayLike | SampleBuffer) -> np.ndarray:
    if isinstance(time_series, SampleBuffer):
        return time_series.values
    samples = np.asarray(time_series, dtype=SAMPLE_DTYPE)
    if samples.ndim != 1:
        raise ValueError(f"time series must be 1-D, got shape {samples.shape}")
    return samples


def magnitude_spectrum(
    time_series: ArrayLike | SampleBuffer,
    n: int | None = None,
    *,
    max_spectrum_size: int = DEFAULT_MAX_SPECTRUM_SIZE,
) -> np.ndarray:
    """Magnitude of the FFT of the first *n* samples, zero-padded.

    The result has ``round_up_to_power_of_two(n)`` bins.  *n* defaults to the
    full length of *time_series*.
    """
    samples = _as_samples(time_series)
    count = samples.shape[0] if n is None else int(n)
    if count < 0:
        raise ValueError(f"sample count must be non-negative, got {count}")
    if count > samples.shape[0]:
        raise LengthMismatchError(
            "time series is shorter than the requested sample count",
            expected=count,
            actual=int(samples.shape[0]),
        )
    size = padded_size(count, max_spectrum_size=max_spectrum_size)
    if size != count:
        LOGGER.debug("Zero-padding %d samples to %d", count, size)
    try:
        padded = np.zeros(size, dtype=COMPLEX_DTYPE)
    except MemoryError as exc:
        raise AllocationFailureError(f"cannot allocate {size}-point padded buffer") from exc
    padded.real[:count] = samples[:count]
    return np.asarray(magnitude(transform(padded)), dtype=SAMPLE_DTYPE)


def periodogram(magnitudes: ArrayLike) -> np.ndarray:
    """Power spectrum: the elementwise square of a magnitude spectrum."""
    values = np.asarray(magnitudes, dtype=SAMPLE_DTYPE)
    return values * values


def compute_power_spectrum(
    time_series: ArrayLike | SampleBuffer,
    n: int | None = None,
    *,
    max_spectrum_size: int = DEFAULT_MAX_SPECTRUM_SIZE,
) -> np.ndarray:
    """Periodogram of the first *n* samples of *time_series*.

    Raises :class:`~wavespectrum.errors.SizingOverflowError` or
    :class:`~wavespectrum.errors.AllocationFailureError` before producing any
    output when the padded spectrum cannot be built.
    """
    return periodogram(
        magnitude_spectrum(time_series, n, max_spectrum_size=max_spectrum_size)
    )
