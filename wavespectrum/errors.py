"""Exception types raised by the spectral pipeline.

Every failure is terminal for the computation in progress: callers are
expected to let these propagate (or report them and stop), never to retry.
"""

from __future__ import annotations


class SpectrumError(Exception):
    """Base class for all wave-spectrum estimation failures."""


class SizingOverflowError(SpectrumError, OverflowError):
    """The requested spectrum size has no representable power of two."""

    def __init__(self, requested: int) -> None:
        super().__init__(f"requested spectrum size {requested} is too large to represent")
        self.requested = requested


class AllocationFailureError(SpectrumError, MemoryError):
    pass


class LengthMismatchError(SpectrumError, ValueError):
    """Two sequences that must line up bin-for-bin have different lengths."""

    def __init__(self, message: str, *, expected: int, actual: int) -> None:
        super().__init__(f"{message} (expected {expected}, got {actual})")
        self.expected = expected
        self.actual = actual


class InputDataError(SpectrumError, ValueError):
    pass
