from __future__ import annotations

import logging
from copy import deepcopy
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

from .constants import DEFAULT_MAX_PRINT_LINES, DEFAULT_MAX_SPECTRUM_SIZE
from .processing.fft import round_up_to_power_of_two

LOGGER = logging.getLogger(__name__)

VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

DEFAULT_CONFIG: dict[str, Any] = {
    "inputs": {
        "heave_displacement_path": "testingHeave.csv",
        "heave_displacement_uncertainty": 0.1,
        "wave_elevation_path": "testingWaveElevation.csv",
        "wave_elevation_uncertainty": 0.1,
        "heave_acceleration_path": "oceanHeaveAcceleration.csv",
        "accelerometer_resolution": 0.1,
    },
    "processing": {
        "timestep_s": 0.1,
        "max_spectrum_size": DEFAULT_MAX_SPECTRUM_SIZE,
    },
    "output": {
        "max_print_lines": DEFAULT_MAX_PRINT_LINES,
    },
    "uncertainty": {
        "seed": None,
    },
    "logging": {
        "level": "INFO",
    },
}


def _deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    merged = dict(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _deep_merge(merged[key], value)
        else:
            merged[key] = value
    return merged


def _resolve_config_path(path_text: str, config_path: Path | None) -> Path:
    path = Path(path_text)
    if path.is_absolute() or config_path is None:
        return path
    return config_path.resolve().parent / path


@dataclass(slots=True)
class InputsConfig:
    heave_displacement_path: Path
    heave_displacement_uncertainty: float
    wave_elevation_path: Path
    wave_elevation_uncertainty: float
    heave_acceleration_path: Path
    accelerometer_resolution: float

    def __post_init__(self) -> None:
        for field_name in (
            "heave_displacement_uncertainty",
            "wave_elevation_uncertainty",
            "accelerometer_resolution",
        ):
            val = getattr(self, field_name)
            if val < 0:
                LOGGER.warning("inputs.%s=%s is negative — clamped to 0", field_name, val)
                object.__setattr__(self, field_name, 0.0)


@dataclass(slots=True)
class ProcessingConfig:
    timestep_s: float
    max_spectrum_size: int

    def __post_init__(self) -> None:
        if not self.timestep_s > 0:
            raise ValueError(f"processing.timestep_s must be positive, got {self.timestep_s!r}")
        if self.max_spectrum_size < 1:
            LOGGER.warning(
                "processing.max_spectrum_size=%s is below minimum 1 — clamped to 1",
                self.max_spectrum_size,
            )
            object.__setattr__(self, "max_spectrum_size", 1)
        rounded = round_up_to_power_of_two(self.max_spectrum_size)
        if rounded is None:
            raise ValueError(
                f"processing.max_spectrum_size={self.max_spectrum_size} is too large to represent"
            )
        if rounded != self.max_spectrum_size:
            LOGGER.warning(
                "processing.max_spectrum_size=%s is not a power of 2 — rounded up to %s",
                self.max_spectrum_size,
                rounded,
            )
            object.__setattr__(self, "max_spectrum_size", rounded)


@dataclass(slots=True)
class OutputConfig:
    max_print_lines: int

    def __post_init__(self) -> None:
        if self.max_print_lines < 2:
            LOGGER.warning(
                "output.max_print_lines=%s is below minimum 2 — clamped to 2",
                self.max_print_lines,
            )
            object.__setattr__(self, "max_print_lines", 2)


@dataclass(slots=True)
class UncertaintyConfig:
    seed: int | None


@dataclass(slots=True)
class LoggingConfig:
    level: str

    def __post_init__(self) -> None:
        level = str(self.level).upper()
        if level not in VALID_LOG_LEVELS:
            raise ValueError(
                f"logging.level must be one of {VALID_LOG_LEVELS}, got {self.level!r}"
            )
        object.__setattr__(self, "level", level)


@dataclass(slots=True)
class AppConfig:
    inputs: InputsConfig
    processing: ProcessingConfig
    output: OutputConfig
    uncertainty: UncertaintyConfig
    logging: LoggingConfig
    config_path: Path | None = None


def _read_config_file(path: Path) -> dict[str, Any]:
    if not path.exists():
        return {}
    with path.open("r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
        if not isinstance(data, dict):
            raise ValueError(f"{path} must contain a YAML object at the top level.")
        return data


def build_config(
    override: dict[str, Any] | None = None, *, config_path: Path | None = None
) -> AppConfig:
    """Materialise *override* merged over :data:`DEFAULT_CONFIG`."""
    merged = _deep_merge(DEFAULT_CONFIG, override or {})
    inputs = merged["inputs"]
    processing = merged["processing"]
    seed_raw = merged["uncertainty"].get("seed")
    return AppConfig(
        inputs=InputsConfig(
            heave_displacement_path=_resolve_config_path(
                str(inputs["heave_displacement_path"]), config_path
            ),
            heave_displacement_uncertainty=float(inputs["heave_displacement_uncertainty"]),
            wave_elevation_path=_resolve_config_path(
                str(inputs["wave_elevation_path"]), config_path
            ),
            wave_elevation_uncertainty=float(inputs["wave_elevation_uncertainty"]),
            heave_acceleration_path=_resolve_config_path(
                str(inputs["heave_acceleration_path"]), config_path
            ),
            accelerometer_resolution=float(inputs["accelerometer_resolution"]),
        ),
        processing=ProcessingConfig(
            timestep_s=float(processing["timestep_s"]),
            max_spectrum_size=int(
                processing.get("max_spectrum_size", DEFAULT_MAX_SPECTRUM_SIZE)
            ),
        ),
        output=OutputConfig(
            max_print_lines=int(
                merged["output"].get("max_print_lines", DEFAULT_MAX_PRINT_LINES)
            ),
        ),
        uncertainty=UncertaintyConfig(
            seed=int(seed_raw) if seed_raw is not None else None,
        ),
        logging=LoggingConfig(level=str(merged["logging"].get("level", "INFO"))),
        config_path=config_path,
    )


def documented_default_config() -> dict[str, Any]:
    """Return runtime defaults in the shape documented by config.example.yaml."""
    return deepcopy(DEFAULT_CONFIG)


def load_config(
    config_path: Path | None = None, overrides: dict[str, Any] | None = None
) -> AppConfig:
    """Load *config_path* (defaults when omitted), then apply *overrides* on top."""
    if config_path is None:
        app_config = build_config(overrides)
    else:
        path = config_path.resolve()
        file_config = _deep_merge(_read_config_file(path), overrides or {})
        app_config = build_config(file_config, config_path=path)
    LOGGER.info(
        "Loaded config=%s timestep_s=%s max_spectrum_size=%s",
        app_config.config_path,
        app_config.processing.timestep_s,
        app_config.processing.max_spectrum_size,
    )
    return app_config
