"""Two-stage wave spectrum estimation.

1. :func:`characterise_rao` — calibrate the vessel's response amplitude
   operator from heave displacement and wave elevation recorded together.
2. :func:`estimate_wave_spectrum` — turn heave acceleration measured at sea
   into a wave energy spectrum using that RAO.

Each stage owns the buffers it reads and releases them when it returns,
whether it succeeds or raises.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

import numpy as np

from .config import AppConfig
from .constants import DEFAULT_MAX_SPECTRUM_SIZE, MAX_SAMPLE_COUNT
from .errors import LengthMismatchError, SizingOverflowError
from .integration import integrate_acceleration
from .processing.buffers import SampleBuffer
from .processing.combine import calculate_rao, calculate_wave_energy_spectrum
from .processing.fft import compute_power_spectrum
from .readers import read_floats_csv
from .uncertainty import Sampler, UniformSampler, apply_uncertainty

LOGGER = logging.getLogger(__name__)


@dataclass(slots=True)
class EstimationResult:
    rao: np.ndarray
    wave_spectrum: np.ndarray
    timestep_s: float

    @property
    def spectrum_size(self) -> int:
        return int(self.rao.shape[0])


def characterise_rao(
    heave_displacement: SampleBuffer,
    wave_elevation: SampleBuffer,
    *,
    heave_uncertainty: float,
    wave_uncertainty: float,
    sampler: Sampler,
    max_spectrum_size: int = DEFAULT_MAX_SPECTRUM_SIZE,
) -> np.ndarray:
    """RAO from simultaneous heave displacement and wave elevation records.

    Both records must hold the same number of samples.  Uncertainty is
    applied to both buffers in place before their spectra are taken.
    """
    if heave_displacement.size != wave_elevation.size:
        raise LengthMismatchError(
            "heave motion and wave elevation measurements differ in sample count",
            expected=heave_displacement.size,
            actual=wave_elevation.size,
        )
    apply_uncertainty(heave_displacement, heave_uncertainty, sampler)
    apply_uncertainty(wave_elevation, wave_uncertainty, sampler)

    heave_spectrum = compute_power_spectrum(
        heave_displacement, max_spectrum_size=max_spectrum_size
    )
    wave_spectrum = compute_power_spectrum(wave_elevation, max_spectrum_size=max_spectrum_size)
    rao = calculate_rao(heave_spectrum, wave_spectrum)
    LOGGER.info(
        "Characterised RAO from %d samples (%d bins)",
        heave_displacement.size,
        rao.shape[0],
    )
    return rao


def estimate_wave_spectrum(
    rao: np.ndarray,
    heave_acceleration: SampleBuffer,
    *,
    accelerometer_resolution: float,
    timestep_s: float,
    sampler: Sampler,
    max_spectrum_size: int = DEFAULT_MAX_SPECTRUM_SIZE,
) -> np.ndarray:
    """Wave energy spectrum from at-sea heave acceleration and a calibrated RAO.

    The acceleration buffer is modified in place: uncertainty is applied, it
    is integrated to displacement and, when shorter than the RAO, zero-padded
    to the RAO length.  Only the first ``len(rao)`` samples feed the spectrum.
    """
    if heave_acceleration.size > MAX_SAMPLE_COUNT:
        raise SizingOverflowError(heave_acceleration.size)
    spectrum_size = int(rao.shape[0])

    apply_uncertainty(heave_acceleration, accelerometer_resolution, sampler)
    integrate_acceleration(heave_acceleration, timestep_s)

    if heave_acceleration.size < spectrum_size:
        LOGGER.debug(
            "Zero-padding %d heave samples to the RAO length %d",
            heave_acceleration.size,
            spectrum_size,
        )
        heave_acceleration.grow(spectrum_size)

    heave_spectrum = compute_power_spectrum(
        heave_acceleration, spectrum_size, max_spectrum_size=max_spectrum_size
    )
    if heave_spectrum.shape[0] != spectrum_size:
        raise LengthMismatchError(
            "heave spectrum does not line up with the RAO",
            expected=spectrum_size,
            actual=int(heave_spectrum.shape[0]),
        )
    wave_spectrum = calculate_wave_energy_spectrum(heave_spectrum, rao)
    LOGGER.info("Estimated wave spectrum over %d bins", spectrum_size)
    return wave_spectrum


def run_pipeline(config: AppConfig, sampler: Sampler | None = None) -> EstimationResult:
    """Read the configured CSV inputs and run both estimation stages."""
    if sampler is None:
        sampler = UniformSampler(config.uncertainty.seed)
    inputs = config.inputs
    max_size = config.processing.max_spectrum_size

    with (
        read_floats_csv(inputs.heave_displacement_path) as heave_displacement,
        read_floats_csv(inputs.wave_elevation_path) as wave_elevation,
    ):
        rao = characterise_rao(
            heave_displacement,
            wave_elevation,
            heave_uncertainty=inputs.heave_displacement_uncertainty,
            wave_uncertainty=inputs.wave_elevation_uncertainty,
            sampler=sampler,
            max_spectrum_size=max_size,
        )

    with read_floats_csv(inputs.heave_acceleration_path) as heave_acceleration:
        wave_spectrum = estimate_wave_spectrum(
            rao,
            heave_acceleration,
            accelerometer_resolution=inputs.accelerometer_resolution,
            timestep_s=config.processing.timestep_s,
            sampler=sampler,
            max_spectrum_size=max_size,
        )

    return EstimationResult(
        rao=rao,
        wave_spectrum=wave_spectrum,
        timestep_s=config.processing.timestep_s,
    )
