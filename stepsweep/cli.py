"""Command-line entry point for stepsweep."""

from __future__ import annotations

import argparse
import logging
import sys
import typing as t

from .config import (
    DEFAULT_CONCEPT_GLOB,
    DEFAULT_STEP_GLOB,
    DEFAULT_STEP_MARKER,
    ScanConfig,
)
from .errors import MissingProjectDirectoryError, StepSweepError
from .report import format_target, write_report
from .scan import scan

if t.TYPE_CHECKING:
    from collections.abc import Sequence

_logger = logging.getLogger(__name__)

_LOG_FORMAT: t.Final[str] = "%(levelname)s %(name)s: %(message)s"


def build_parser() -> argparse.ArgumentParser:
    """Return the argument parser for the ``stepsweep`` command."""
    parser = argparse.ArgumentParser(
        prog="stepsweep",
        description=(
            "Report Gauge step definitions and concepts that no specification "
            "refers to."
        ),
    )
    parser.add_argument(
        "project_dir", nargs="?", help="root directory of the Gauge project"
    )
    parser.add_argument(
        "--src-dir",
        help="step definition sources, relative to the project (src/test/kotlin)",
    )
    parser.add_argument(
        "--specs-dir", help="specifications, relative to the project (specs)"
    )
    parser.add_argument(
        "--step-marker",
        default=DEFAULT_STEP_MARKER,
        help="text opening a step annotation (%(default)s)",
    )
    parser.add_argument(
        "--step-glob",
        default=DEFAULT_STEP_GLOB,
        help="file name pattern for step sources (%(default)s)",
    )
    parser.add_argument(
        "--concept-glob",
        default=DEFAULT_CONCEPT_GLOB,
        help="file name pattern for concept files (%(default)s)",
    )
    parser.add_argument(
        "--workers", type=int, help="threads used for reading and matching"
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="log progress to stderr"
    )
    return parser


def configure_logging(config: ScanConfig) -> None:
    """Send log records to stderr, at DEBUG level for verbose configurations."""
    logging.basicConfig(
        level=logging.DEBUG if config.verbose else logging.WARNING,
        format=_LOG_FORMAT,
        stream=sys.stderr,
    )


def _config_from_args(args: argparse.Namespace) -> ScanConfig:
    if not args.project_dir:
        raise MissingProjectDirectoryError
    return ScanConfig.for_project(
        args.project_dir,
        src_dir=args.src_dir,
        specs_dir=args.specs_dir,
        max_workers=args.workers,
        step_marker=args.step_marker,
        step_glob=args.step_glob,
        concept_glob=args.concept_glob,
        verbose=args.verbose,
    )


def main(argv: Sequence[str] | None = None) -> int:
    """Run a scan and print the report; return the process exit code."""
    args = build_parser().parse_args(argv)

    try:
        config = _config_from_args(args)
    except MissingProjectDirectoryError as exc:
        print(f"ERROR: {exc}\nExecution aborted.", file=sys.stderr)
        return 1
    except StepSweepError as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        return 1

    configure_logging(config)
    print("\n".join(format_target(config)))
    try:
        report = scan(config)
    except StepSweepError as exc:
        _logger.debug("Scan aborted", exc_info=True)
        print(f"ERROR: {exc}", file=sys.stderr)
        return 1

    write_report(report, include_target=False)
    return 0


__all__ = ["build_parser", "configure_logging", "main"]
