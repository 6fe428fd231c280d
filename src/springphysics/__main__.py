"""Command-line interface: simulate a unit step response and report its shape."""
from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

from springphysics import config
from springphysics.logging_config import setup_logging
from springphysics.model.parameters import PhysicsParameters, IntegrationParameters
from springphysics.model.presets import PresetLibrary
from springphysics.physics.exceptions import PhysicsException
from springphysics.physics.selector import select_model
from springphysics.physics.validator import validate
from springphysics.springs.response import (
    classify_damping,
    damping_ratio,
    peak_overshoot,
    sample_response,
    settle_time,
)

logger = logging.getLogger("springphysics.cli")


def build_parser() -> argparse.ArgumentParser:
    library = PresetLibrary()
    parser = argparse.ArgumentParser(
        prog="springphysics",
        description="Simulate the unit step response of a damped spring.",
    )
    source = parser.add_mutually_exclusive_group()
    source.add_argument("--preset", choices=library.get_names(), help="Named force/drag preset")
    source.add_argument("--force", type=float, default=None, help=f"Stiffness (default {config.DEFAULT_FORCE})")
    parser.add_argument("--drag", type=float, default=None, help=f"Damping (default {config.DEFAULT_DRAG})")
    parser.add_argument("--duration", type=float, default=3.0, help="Simulated time in seconds")
    parser.add_argument("--samples", type=int, default=512, help="Number of samples")
    parser.add_argument("--analytical", action="store_true", help="Always use the analytical solution")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    parser.add_argument("--log-file", default=None, help="Also write the log to this file")
    parser.add_argument("--quiet", action="store_true", help="Do not echo the log to stdout")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(
        level=logging.DEBUG if args.verbose else logging.INFO,
        log_file=args.log_file,
        console=not args.quiet,
    )

    force = config.DEFAULT_FORCE if args.force is None else args.force
    drag = config.DEFAULT_DRAG if args.drag is None else args.drag
    analytical = args.analytical
    if args.preset:
        preset = PresetLibrary().get_preset(args.preset)
        force, drag = preset.force, preset.drag
        analytical = analytical or preset.use_analytical_solution
        logger.info(f"Preset '{preset.name}': {preset.description}")

    parameters = PhysicsParameters(
        force=force,
        drag=drag,
        integration=IntegrationParameters(always_use_analytical_solution=analytical),
    )
    errors = validate(parameters)
    if errors:
        for error in errors:
            logger.error(error)
        return 2

    model = select_model(parameters)
    logger.info(f"Model: {model.name()} (force={force}, drag={drag})")
    logger.info(f"Damping ratio: {damping_ratio(force, drag):.4f} ({classify_damping(force, drag)})")

    try:
        times, values = sample_response(
            force,
            drag,
            duration=args.duration,
            samples=args.samples,
            always_use_analytical=analytical,
        )
    except (PhysicsException, ValueError) as e:
        logger.error(f"Simulation failed: {e}")
        return 2

    logger.info(f"Final value: {values[-1]:.6f}")
    logger.info(f"Peak overshoot: {peak_overshoot(values):.6f}")
    logger.info(f"Settle time: {settle_time(times, values):.3f} s")
    return 0


if __name__ == "__main__":
    sys.exit(main())
