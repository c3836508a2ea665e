"""Owned, growable sample storage.

``SampleBuffer`` pairs a ``float32`` array (the physical capacity) with a
logical ``size``.  Growing keeps existing values and zero-fills the new tail;
nothing ever shrinks a buffer short of releasing it.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field

import numpy as np

from ..constants import SAMPLE_DTYPE
from ..errors import AllocationFailureError

LOGGER = logging.getLogger(__name__)


def _empty_storage() -> np.ndarray:
    return np.zeros(0, dtype=SAMPLE_DTYPE)


@dataclass(slots=True)
class SampleBuffer:
    data: np.ndarray = field(default_factory=_empty_storage)
    size: int = 0

    def __post_init__(self) -> None:
        if (
            not isinstance(self.data, np.ndarray)
            or self.data.dtype != np.dtype(SAMPLE_DTYPE)
            or self.data.ndim != 1
        ):
            self.data = np.asarray(self.data, dtype=SAMPLE_DTYPE).ravel()
        if not 0 <= self.size <= self.data.shape[0]:
            raise ValueError(
                f"SampleBuffer.size must be within 0..{self.data.shape[0]}, got {self.size}"
            )

    @classmethod
    def empty(cls) -> SampleBuffer:
        return cls()

    @classmethod
    def from_values(cls, values: Iterable[float] | np.ndarray) -> SampleBuffer:
        """Copy *values* into a new buffer whose size is their count."""
        if isinstance(values, np.ndarray):
            data = np.array(values, dtype=SAMPLE_DTYPE).ravel()
        else:
            data = np.fromiter((float(v) for v in values), dtype=SAMPLE_DTYPE)
        return cls(data=data, size=int(data.shape[0]))

    @property
    def capacity(self) -> int:
        return int(self.data.shape[0])

    @property
    def values(self) -> np.ndarray:
        """Writable view of the logical contents (``data[:size]``)."""
        return self.data[: self.size]

    def __len__(self) -> int:
        return self.size

    def __enter__(self) -> SampleBuffer:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.release()

    def grow(self, new_size: int) -> None:
        """Extend the logical size to *new_size*, zero-filling the new tail.

        A no-op when *new_size* does not exceed the current size.  On
        allocation failure the buffer is left exactly as it was.
        """
        new_size = int(new_size)
        if new_size <= self.size:
            return
        if new_size <= self.capacity:
            self.data[self.size : new_size] = 0.0
            self.size = new_size
            return
        try:
            grown = np.zeros(new_size, dtype=SAMPLE_DTYPE)
        except (MemoryError, ValueError) as exc:
            raise AllocationFailureError(
                f"cannot grow sample buffer from {self.size} to {new_size} values"
            ) from exc
        grown[: self.size] = self.data[: self.size]
        LOGGER.debug("Grew sample buffer %d -> %d", self.size, new_size)
        self.data = grown
        self.size = new_size

    def release(self) -> None:
        """Drop the storage.  Safe to call more than once."""
        if self.capacity:
            self.data = _empty_storage()
        self.size = 0


def grow_buffer(buffer: SampleBuffer, new_size: int) -> None:
    buffer.grow(new_size)


def release_buffer(buffer: SampleBuffer) -> None:
    buffer.release()
