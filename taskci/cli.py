"""Command-line entry point for task-time confidence intervals."""

from __future__ import annotations

import argparse
import logging
import sys

import pandas as pd

from .analysis import analyze_durations, compare_confidence_levels, print_summary
from .data_processing import load_duration_text
from .reporting import STATUS_OK, add_formatted_duration_columns
from .schema import RESULT_COLUMNS
from .stats.critical_values import CONFIDENCE_LEVELS, DEFAULT_CONFIDENCE_LEVEL

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"

logger = logging.getLogger(__name__)


def configure_logging(level: str = "WARNING", log_file: str | None = None) -> None:
    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    if log_file:
        handlers.append(logging.FileHandler(log_file, mode="w"))
    logging.basicConfig(
        level=getattr(logging, level.upper()),
        format=LOG_FORMAT,
        handlers=handlers,
        force=True,
    )


def _build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description=(
            "Geometric-mean confidence interval for task completion times "
            "(one duration in seconds per line)."
        )
    )
    parser.add_argument(
        "--input",
        default="-",
        help="Path to a text file of durations; '-' or omitted reads stdin.",
    )
    parser.add_argument(
        "--confidence",
        type=int,
        choices=CONFIDENCE_LEVELS,
        default=DEFAULT_CONFIDENCE_LEVEL,
        help=f"Confidence level in percent (default: {DEFAULT_CONFIDENCE_LEVEL}).",
    )
    parser.add_argument(
        "--compare",
        action="store_true",
        help="Also print the interval at every supported confidence level.",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging verbosity (default: WARNING).",
    )
    parser.add_argument(
        "--log-file",
        default=None,
        help="Optional file to mirror log output into.",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """CLI entrypoint; returns a process exit code."""
    parser = _build_arg_parser()
    args = parser.parse_args(argv)
    configure_logging(args.log_level, args.log_file)

    if args.input == "-":
        raw_text = sys.stdin.read()
    else:
        try:
            raw_text = load_duration_text(args.input)
        except OSError as exc:
            logger.error("Could not read %s: %s", args.input, exc)
            return 1

    analysis = analyze_durations(raw_text, args.confidence)
    print_summary(analysis)

    if args.compare and analysis.status == STATUS_OK:
        table = compare_confidence_levels(analysis.sample)
        table = add_formatted_duration_columns(
            table,
            [RESULT_COLUMNS.geometric_mean, RESULT_COLUMNS.ci_low, RESULT_COLUMNS.ci_high],
        )
        with pd.option_context("display.width", 200, "display.max_columns", None):
            print("\nConfidence level comparison:")
            print(table.to_string(index=False, float_format=lambda v: f"{v:.3f}"))

    return 0
