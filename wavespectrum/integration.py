"""Time-domain integration of heave acceleration into displacement."""

from __future__ import annotations

import numpy as np

from .processing.buffers import SampleBuffer


def subtract_mean(buffer: SampleBuffer) -> None:
    """Remove the DC component of *buffer* in place."""
    values = buffer.values
    if values.size == 0:
        return
    values -= np.float32(values.mean(dtype=np.float32))


def integrate_acceleration(buffer: SampleBuffer, dt: float) -> None:
    """Replace accelerations in *buffer* with displacements, in place.

    Trapezoidal double integration starting from rest (zero position, zero
    speed, zero previous acceleration), followed by mean removal so the
    displacement record is centred on zero.
    """
    if not dt > 0:
        raise ValueError(f"timestep must be positive, got {dt!r}")
    values = buffer.values
    if values.size == 0:
        return
    step = np.float32(dt)
    half = np.float32(0.5)
    position = np.float32(0.0)
    speed = np.float32(0.0)
    previous_accel = np.float32(0.0)
    for idx in range(values.size):
        accel = values[idx]
        new_speed = speed + step * half * (accel + previous_accel)
        position = position + step * half * (new_speed + speed)
        speed = new_speed
        previous_accel = accel
        values[idx] = position
    subtract_mean(buffer)
