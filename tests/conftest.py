"""Shared test helpers for the wavespectrum test suite."""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path

import pytest


def write_csv(path: Path, values: Iterable[float]) -> Path:
    """Write *values* as a single comma-separated line (with trailing comma)."""
    path.write_text("".join(f"{v}," for v in values) + "\n", encoding="utf-8")
    return path


def midpoint_sampler(lower: float, upper: float) -> float:
    """Deterministic stand-in for an uncertainty sampler: returns the nominal value."""
    return (lower + upper) / 2.0


@pytest.fixture()
def calibration_files(tmp_path: Path) -> dict[str, Path]:
    """Five-sample calibration records plus a short at-sea acceleration record."""
    return {
        "heave": write_csv(tmp_path / "heave.csv", [2.0, 0.0, 0.0, 0.0, 0.0]),
        "wave": write_csv(tmp_path / "wave.csv", [1.0, 0.0, 0.0, 0.0, 0.0]),
        "accel": write_csv(tmp_path / "accel.csv", [0.5, -0.25, 0.0, 0.25, -0.5]),
    }
