"""
Task completion time analysis.

This module ties the parser and the estimator together for callers:
- Parse raw text into a sample of positive durations (seconds).
- Estimate the geometric mean with a log-space Student's t interval:
    CI = exp(mean(ln x) -/+ t(df, alpha) * sd(ln x) / sqrt(n)), df = n - 1.
- Classify the outcome so callers can tell an empty sample (nothing to
  estimate) from a sample with a single observation (too small for an
  interval) and from a complete result.

Every call recomputes from scratch; nothing is carried between calls.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, Optional

import pandas as pd

from .data_processing import Sample, count_candidate_lines, parse_durations
from .reporting import (
    STATUS_EMPTY,
    STATUS_INSUFFICIENT,
    STATUS_OK,
    detailed_statistics,
    interpretation_text,
    interval_as_durations,
    status_message,
)
from .schema import RESULT_COLUMNS
from .stats.critical_values import CONFIDENCE_LEVELS, DEFAULT_CONFIDENCE_LEVEL
from .stats.estimator import EstimationResult, estimate
from .units import format_duration

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DurationAnalysis:
    """Outcome of one parse-and-estimate pass.

    Attributes:
        sample: Parsed observations in input order.
        result: Estimate, or ``None`` when the sample is too small.
        confidence_level: Level the estimate was requested at.
        lines_read: Lines that were non-empty after trimming.
        lines_dropped: Non-empty lines rejected by the parser.
    """

    sample: Sample
    result: Optional[EstimationResult]
    confidence_level: float
    lines_read: int
    lines_dropped: int

    @property
    def status(self) -> str:
        if len(self.sample) == 0:
            return STATUS_EMPTY
        if self.result is None:
            return STATUS_INSUFFICIENT
        return STATUS_OK


def analyze_durations(
    raw_text: str, confidence_level: float = DEFAULT_CONFIDENCE_LEVEL
) -> DurationAnalysis:
    """Parse ``raw_text`` and estimate at ``confidence_level``.

    Args:
        raw_text (str): One duration in seconds per line.
        confidence_level (float, optional): 95, 90 or 80. Defaults to ``95``.

    Returns:
        DurationAnalysis: Sample, optional result and line bookkeeping.
    """
    sample = parse_durations(raw_text)
    lines_read = count_candidate_lines(raw_text)
    lines_dropped = lines_read - len(sample)
    if lines_dropped:
        logger.debug("Dropped %d non-numeric or non-positive lines", lines_dropped)
    logger.info("Parsed %d valid durations from %d lines", len(sample), lines_read)

    result = estimate(sample, confidence_level)
    return DurationAnalysis(
        sample=sample,
        result=result,
        confidence_level=confidence_level,
        lines_read=lines_read,
        lines_dropped=lines_dropped,
    )


def create_results_dataframe(results: Iterable[EstimationResult]) -> pd.DataFrame:
    cols = RESULT_COLUMNS
    rows = []
    for res in results:
        rows.append(
            {
                cols.confidence: res.confidence_level,
                cols.n: res.n,
                cols.dof: res.degrees_of_freedom,
                cols.geometric_mean: res.geometric_mean,
                cols.arithmetic_mean: res.arithmetic_mean,
                cols.log_mean: res.log_mean,
                cols.log_sd: res.log_sd,
                cols.sem: res.standard_error_of_log_mean,
                cols.t_critical: res.t_critical,
                cols.margin: res.margin_in_log_space,
                cols.ci_low: res.ci_low,
                cols.ci_high: res.ci_high,
                cols.width: res.width,
                cols.fallback: res.t_fallback_used,
            }
        )
    columns = [
        cols.confidence,
        cols.n,
        cols.dof,
        cols.geometric_mean,
        cols.arithmetic_mean,
        cols.log_mean,
        cols.log_sd,
        cols.sem,
        cols.t_critical,
        cols.margin,
        cols.ci_low,
        cols.ci_high,
        cols.width,
        cols.fallback,
    ]
    return pd.DataFrame(rows, columns=columns)


def compare_confidence_levels(sample: Sample) -> pd.DataFrame:
    """Tabulate the estimate at every supported level, lowest level first.

    An empty table (with the standard columns) is returned when the sample is
    too small for an interval.
    """
    results = []
    for level in sorted(CONFIDENCE_LEVELS):
        res = estimate(sample, level)
        if res is None:
            return create_results_dataframe([])
        results.append(res)
    return create_results_dataframe(results)


def print_summary(analysis: DurationAnalysis):
    print("\nTask time analysis (geometric mean, log-space CI):")
    print(f"  Valid durations: {len(analysis.sample)} of {analysis.lines_read} lines")

    if analysis.status != STATUS_OK:
        print(f"  {status_message(analysis)}")
        return

    res = analysis.result
    print(
        f"  Geometric mean: {res.geometric_mean:.1f}s ({format_duration(res.geometric_mean)})"
    )
    print(
        f"  {res.confidence_level}% CI: {res.ci_low:.1f}s - {res.ci_high:.1f}s "
        f"({interval_as_durations(res)})"
    )
    print("\n  Detailed statistics:")
    for label, value in detailed_statistics(res):
        print(f"   - {label}: {value}")
    print(f"\n  {interpretation_text(res)}")
    print(f"\n  {status_message(analysis)}")
