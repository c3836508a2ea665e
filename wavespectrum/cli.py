from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Any

import yaml

from .config import VALID_LOG_LEVELS, load_config
from .errors import SpectrumError
from .estimation import run_pipeline
from .report import format_spectrum_report, spectrum_rows

LOGGER = logging.getLogger(__name__)


def _positive_float(text: str) -> float:
    try:
        value = float(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid float value: {text!r}") from None
    if not value > 0:
        raise argparse.ArgumentTypeError(f"invalid timestep value: {text}")
    return value


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="wave-spectrum-estimation",
        description="Estimate an ocean wave energy spectrum from vessel heave acceleration",
    )
    parser.add_argument("--config", type=Path, default=None, help="Path to config YAML")
    parser.add_argument(
        "-d",
        dest="heave_displacement_path",
        type=Path,
        help="Path to heave displacement test measurements",
    )
    parser.add_argument(
        "-D",
        dest="heave_displacement_uncertainty",
        type=float,
        help="Heave measurement uncertainty",
    )
    parser.add_argument(
        "-e",
        dest="wave_elevation_path",
        type=Path,
        help="Path to wave elevation test measurements",
    )
    parser.add_argument(
        "-E",
        dest="wave_elevation_uncertainty",
        type=float,
        help="Wave elevation measurement uncertainty",
    )
    parser.add_argument(
        "-a",
        dest="heave_acceleration_path",
        type=Path,
        help="Path to heave acceleration measurements taken at sea",
    )
    parser.add_argument(
        "-A",
        dest="accelerometer_resolution",
        type=float,
        help="Accelerometer resolution",
    )
    parser.add_argument(
        "-t",
        dest="timestep_s",
        type=_positive_float,
        help="Time between successive measurements (seconds)",
    )
    parser.add_argument("--seed", type=int, default=None, help="Seed for uncertainty sampling")
    parser.add_argument(
        "--log-level",
        choices=[level.lower() for level in VALID_LOG_LEVELS],
        default=None,
        help="Logging verbosity (default: from config, else info)",
    )
    return parser


def _cli_overrides(args: argparse.Namespace) -> dict[str, Any]:
    inputs = {
        key: (str(value.resolve()) if isinstance(value, Path) else value)
        for key in (
            "heave_displacement_path",
            "heave_displacement_uncertainty",
            "wave_elevation_path",
            "wave_elevation_uncertainty",
            "heave_acceleration_path",
            "accelerometer_resolution",
        )
        if (value := getattr(args, key)) is not None
    }
    override: dict[str, Any] = {"inputs": inputs}
    if args.timestep_s is not None:
        override["processing"] = {"timestep_s": args.timestep_s}
    if args.seed is not None:
        override["uncertainty"] = {"seed": args.seed}
    if args.log_level is not None:
        override["logging"] = {"level": args.log_level}
    return override


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    try:
        config = load_config(args.config, overrides=_cli_overrides(args))
    except (OSError, TypeError, ValueError, yaml.YAMLError) as exc:
        print(f"Error: invalid configuration: {exc}", file=sys.stderr)
        return 1

    logging.basicConfig(
        level=getattr(logging, config.logging.level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        result = run_pipeline(config)
    except SpectrumError as exc:
        LOGGER.error("Wave spectrum estimation failed: %s", exc)
        return 1

    rows = spectrum_rows(
        result.wave_spectrum,
        result.timestep_s,
        max_print_lines=config.output.max_print_lines,
    )
    print(format_spectrum_report(rows))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
