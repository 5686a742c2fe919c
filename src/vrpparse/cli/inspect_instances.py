"""
CLI tool that parses instance files and prints a short summary of each.
"""
from __future__ import annotations
import argparse
import dataclasses
import logging
import sys
from pathlib import Path

from vrpparse.config.parameters import Parameters
from vrpparse.errors import ParseError
from vrpparse.models import Instance
from vrpparse.parsers import read_instance
from vrpparse.utils.logging import InspectionProgress, setup_logging


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        description="Routing Instance Inspection Tool"
    )
    p.add_argument(
        "paths",
        nargs="*",
        help="Instance file(s) to parse",
    )
    p.add_argument(
        "--config",
        help="Path to custom reader config file",
    )
    p.add_argument(
        "--strict",
        action="store_true",
        help="Require a final newline and no trailing blank lines",
    )
    p.add_argument(
        "--verbose",
        action="store_true",
        help="Log every classifier decision",
    )
    p.add_argument(
        "--info",
        action="store_true",
        help="Show tool information and exit",
    )
    return p


def _print_info() -> None:
    print("\nRouting Instance Inspection Tool")
    print("=" * 80)
    print("Supported layouts:")
    print("  Solomon / Gehring-Homberger VRPTW: 7 fields per row")
    print("  Li-Lim PDPTW: 9 fields per row (pickup and delivery indices)")
    print("    Example: vrpparse-inspect instances/C1_2_1.txt instances/LC1_2_1.txt")
    print("\nUse --help to see all available options.")


def load_parameters(args) -> Parameters:
    """Load reader parameters with command line overrides"""
    if args.config:
        params = Parameters.from_yaml(args.config)
    else:
        params = Parameters.from_yaml()

    if args.strict:
        params = dataclasses.replace(params, strict_line_endings=True)
    return params


def summarize(path: Path, instance: Instance) -> str:
    kind = "PDPTW" if instance.is_pdp else "VRPTW"
    text = (
        f"{path.name}: {instance.name or '<unnamed>'} ({kind}) "
        f"vehicles={instance.vehicle_count} capacity={instance.capacity} "
        f"rows={instance.row_count}"
    )
    if instance.warnings:
        text += f" warnings={len(instance.warnings)}"
    return text


def main(argv=None) -> None:
    parser = _build_parser()
    args = parser.parse_args(argv)
    setup_logging(logging.DEBUG if args.verbose else logging.WARNING)
    logger = logging.getLogger(__name__)

    if args.info:
        _print_info()
        return

    if not args.paths:
        parser.error("at least one instance path is required")

    paths = [Path(p) for p in args.paths]
    missing = [str(p) for p in paths if not p.exists()]
    if missing:
        parser.error(f"Instance file(s) not found: {', '.join(missing)}")

    params = load_parameters(args)
    tracker = InspectionProgress(paths) if len(paths) > 1 else None
    failures = 0

    for path in paths:
        try:
            instance = read_instance(path, params)
        except ParseError as e:
            failures += 1
            message = f"{path.name}: {e}"
            outcome = 'failed'
        else:
            message = summarize(path, instance)
            outcome = 'warnings' if instance.warnings else 'parsed'

        if tracker:
            tracker.record(message, outcome=outcome)
        elif outcome == 'failed':
            logger.error(message)
        else:
            print(message)

    if tracker:
        tracker.close()

    if failures:
        logger.error(f"{failures} of {len(paths)} instance(s) failed to parse")
        sys.exit(1)

if __name__ == "__main__":
    main()
