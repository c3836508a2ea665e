"""CSV readers producing :class:`~wavespectrum.processing.buffers.SampleBuffer` objects."""

from __future__ import annotations

import csv
import logging
from collections.abc import Iterator
from pathlib import Path

from .errors import InputDataError
from .processing.buffers import SampleBuffer

LOGGER = logging.getLogger(__name__)


def _iter_floats(lines: Iterator[str], path: Path) -> Iterator[float]:
    # Values may be split across rows and/or columns; a trailing comma leaves
    # an empty cell, which is skipped.  The first non-numeric cell ends the data.
    for row_idx, row in enumerate(csv.reader(lines), start=1):
        for cell in row:
            token = cell.strip()
            if not token:
                continue
            try:
                yield float(token)
            except ValueError:
                LOGGER.warning(
                    "Stopped reading %s at row %d: %r is not a number",
                    path,
                    row_idx,
                    token,
                )
                return


def read_floats_csv(path: Path | str) -> SampleBuffer:
    """Read every float in the CSV file at *path* into a new buffer."""
    path = Path(path)
    try:
        with path.open("r", encoding="utf-8", newline="") as f:
            buffer = SampleBuffer.from_values(_iter_floats(f, path))
    except FileNotFoundError:
        raise InputDataError(f"could not open file at path '{path}'") from None
    except (OSError, UnicodeDecodeError, csv.Error) as exc:
        raise InputDataError(f"failed to read data from file at path '{path}': {exc}") from exc
    if buffer.size == 0:
        raise InputDataError(f"no data found in the specified file ('{path}')")
    LOGGER.debug("Read %d values from %s", buffer.size, path)
    return buffer
