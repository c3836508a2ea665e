"""Shared sizing and output constants — single source of truth."""

from __future__ import annotations

from typing import Final

SIZE_BITS: Final[int] = 64
"""Width of the unsigned size type spectra are measured in."""

MAX_POWER_OF_TWO: Final[int] = 1 << (SIZE_BITS - 1)
"""Largest power of two representable in the size type."""

MAX_SAMPLE_COUNT: Final[int] = MAX_POWER_OF_TWO
"""Sample counts above this cannot be padded to a power of two."""

DEFAULT_MAX_SPECTRUM_SIZE: Final[int] = 1 << 24
"""Largest padded transform length accepted before work starts."""

DEFAULT_MAX_PRINT_LINES: Final[int] = 9
"""Approximate number of spectrum rows printed by the CLI report."""

SAMPLE_DTYPE: Final[str] = "float32"
COMPLEX_DTYPE: Final[str] = "complex64"
