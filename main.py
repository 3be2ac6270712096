"""Console demonstration of vector sums and field strength formulas."""
from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional, TextIO

from field import ElectricFieldSample, FieldSample, MagneticFieldSample
from logging_config import LOGGER_NAME, setup_logging
from simulation_config import DemoConfig, FieldType
from vector import Vector3, format_number

logger = logging.getLogger(f"{LOGGER_NAME}.main")


def _print_components(sample: FieldSample, stream: TextIO) -> None:
    print(f"Field Components: {sample.format()}", file=stream)
    print(f"Magnitude: {format_number(sample.magnitude())}", file=stream)


def run_demo(config: DemoConfig, stream: Optional[TextIO] = None) -> None:
    """Print the demonstration for the field types selected in ``config``."""

    if stream is None:
        stream = sys.stdout
    logger.info("Running demo: %s", config.describe())
    field_type = config.field_type

    e1 = ElectricFieldSample(Vector3.from_components(config.electric_a))
    e2 = ElectricFieldSample(Vector3.from_components(config.electric_b))
    m1 = MagneticFieldSample(Vector3.from_components(config.magnetic_a))
    m2 = MagneticFieldSample(Vector3.from_components(config.magnetic_b))

    if field_type.includes_electric:
        _print_components(e1, stream)
    if field_type.includes_magnetic:
        _print_components(m1, stream)

    if field_type.includes_electric:
        e1.compute_field_strength(config.charge, config.charge_distance)
        print(e1.report_field_strength(), file=stream)
    if field_type.includes_magnetic:
        m1.compute_field_strength(config.current, config.wire_distance)
        print(m1.report_field_strength(), file=stream)

    if field_type.includes_electric:
        print(e1.add(e2).describe(), file=stream)
    if field_type.includes_magnetic:
        print(m1.add(m2).describe(), file=stream)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Vector field arithmetic with Coulomb and Ampère field strengths."
    )
    parser.add_argument(
        "--field-type",
        type=FieldType.from_name,
        default=FieldType.COUPLED,
        metavar="{electrostatic,magnetostatic,coupled}",
        help="which fields to demonstrate (default: coupled)",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="logging verbosity (default: WARNING)",
    )
    parser.add_argument("--log-file", default=None, help="also write logs to this file")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(level=getattr(logging, args.log_level), log_file=args.log_file)

    config = DemoConfig()
    config.set_field_type(args.field_type)
    run_demo(config)
    return 0


if __name__ == "__main__":
    sys.exit(main())
