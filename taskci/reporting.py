"""Format estimates into human-readable text and display columns.

This module sits after the numerical core: it never recomputes statistics,
it only renders an :class:`~taskci.stats.estimator.EstimationResult` (or the
absence of one) the way the task-time summary presents it.
"""

from __future__ import annotations

from typing import Iterable

import pandas as pd

from .stats.estimator import MIN_SAMPLE_SIZE, EstimationResult
from .units import format_duration

STATUS_EMPTY = "empty"
STATUS_INSUFFICIENT = "insufficient"
STATUS_OK = "ok"


def summary_line(result: EstimationResult) -> str:
    """Return the one-line results summary.

    Args:
        result (EstimationResult): Estimate to summarise.

    Returns:
        str: For example ``"Geometric mean = 158.7s with 95% CI: [89.8s, 280.4s]"``.
    """
    return (
        f"Geometric mean = {result.geometric_mean:.1f}s with "
        f"{result.confidence_level}% CI: [{result.ci_low:.1f}s, {result.ci_high:.1f}s]"
    )


def interpretation_text(result: EstimationResult) -> str:
    """Return the plain-language interpretation paragraph for an estimate.

    Note:
        Seconds are shown to one decimal place; the wording contrasts the
        geometric and arithmetic means because the data are assumed to be
        positively skewed.
    """
    return (
        f"We can be {result.confidence_level}% confident that the true geometric "
        f"mean task completion time falls between {result.ci_low:.1f} and "
        f"{result.ci_high:.1f} seconds. The geometric mean "
        f"({result.geometric_mean:.1f}s) is more appropriate than the arithmetic "
        f"mean ({result.arithmetic_mean:.1f}s) for positively skewed time data."
    )


def interval_as_durations(result: EstimationResult) -> str:
    """Return the interval bounds as ``"M:SS - M:SS"``."""
    return f"{format_duration(result.ci_low)} - {format_duration(result.ci_high)}"


def detailed_statistics(result: EstimationResult) -> list[tuple[str, str]]:
    """Return ``(label, value)`` pairs for the detailed statistics block."""
    rows = [
        ("Sample Size (n)", f"{result.n}"),
        ("Degrees of Freedom", f"{result.degrees_of_freedom}"),
        ("Arithmetic Mean", f"{result.arithmetic_mean:.1f}s"),
        ("t-Critical Value", f"{result.t_critical:.3f}"),
        ("Log Mean", f"{result.log_mean:.3f}"),
        ("Standard Error", f"{result.standard_error_of_log_mean:.3f}"),
    ]
    if result.t_fallback_used:
        rows.append(("Note", "t-critical fallback value used"))
    return rows


def status_message(analysis) -> str:
    """Return the guidance message that matches an analysis outcome.

    ``analysis`` is a :class:`~taskci.analysis.DurationAnalysis`; an empty
    sample, a sample too small for an interval and a full result each get
    their own message.
    """
    if analysis.status == STATUS_EMPTY:
        return "No valid durations found. Enter one positive duration (seconds) per line."
    if analysis.status == STATUS_INSUFFICIENT:
        return (
            f"Note: Need at least {MIN_SAMPLE_SIZE} data points to calculate "
            "confidence intervals."
        )
    return f"Results: {summary_line(analysis.result)}"


def add_formatted_duration_columns(
    df: pd.DataFrame,
    columns: Iterable[str],
    suffix: str = " (M:SS)",
) -> pd.DataFrame:
    """Add ``M:SS`` string columns alongside numeric duration columns.

    Args:
        df (pandas.DataFrame): Table with duration columns in seconds.
        columns (Iterable[str]): Names of the columns to format.
        suffix (str, optional): Suffix appended to generated columns.
            Defaults to ``" (M:SS)"``.

    Returns:
        pandas.DataFrame: Copy of ``df`` with formatted string columns added.
        Original numeric columns are preserved.

    Raises:
        KeyError: If a requested column is absent.
    """
    out = df.copy()
    for col in columns:
        if col not in out.columns:
            raise KeyError(f"Missing duration column '{col}' for reporting format.")
        values = pd.to_numeric(out[col], errors="coerce")
        out[f"{col}{suffix}"] = [format_duration(v) for v in values]
    return out
