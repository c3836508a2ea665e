"""Single-precision complex arithmetic used by the radix-2 transform.

Every function accepts a scalar or an array (anything ``numpy.asarray`` can
turn into ``complex64``) and returns a result of the same shape.  Results are
always single precision; only :func:`unit_rotation` reads a float64 angle.
"""

from __future__ import annotations

import numpy as np
from numpy.typing import ArrayLike

from ..constants import COMPLEX_DTYPE, SAMPLE_DTYPE


def _as_complex(value: ArrayLike) -> np.ndarray:
    return np.asarray(value, dtype=COMPLEX_DTYPE)


def _pack(real: np.ndarray, imaginary: np.ndarray) -> np.ndarray:
    out = np.empty(np.shape(real), dtype=COMPLEX_DTYPE)
    out.real = real
    out.imag = imaginary
    return out[()]


def add(a: ArrayLike, b: ArrayLike) -> np.ndarray:
    a, b = _as_complex(a), _as_complex(b)
    return _pack(a.real + b.real, a.imag + b.imag)


def subtract(a: ArrayLike, b: ArrayLike) -> np.ndarray:
    a, b = _as_complex(a), _as_complex(b)
    return _pack(a.real - b.real, a.imag - b.imag)


def multiply(a: ArrayLike, b: ArrayLike) -> np.ndarray:
    """Standard complex product ``(ac - bd) + (ad + bc)i``."""
    a, b = _as_complex(a), _as_complex(b)
    re_a, im_a = a.real, a.imag
    re_b, im_b = b.real, b.imag
    return _pack(re_a * re_b - im_a * im_b, re_a * im_b + im_a * re_b)


def unit_rotation(angle: ArrayLike) -> np.ndarray:
    """Point on the unit circle at *angle* radians.

    The angle and its cosine/sine are evaluated in float64 and only the
    resulting pair is rounded to single precision.
    """
    theta = np.asarray(angle, dtype=np.float64)
    return _pack(
        np.cos(theta).astype(SAMPLE_DTYPE),
        np.sin(theta).astype(SAMPLE_DTYPE),
    )


def magnitude(a: ArrayLike) -> np.ndarray:
    a = _as_complex(a)
    re, im = a.real, a.imag
    return np.asarray(np.sqrt(re * re + im * im), dtype=SAMPLE_DTYPE)[()]
