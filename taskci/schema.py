"""Define standardized column names for sample and result DataFrames."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class SampleColumns:
    """Column labels used by :meth:`taskci.data_processing.Sample.to_frame`.

    Attributes:
        line: 1-based line of the raw input the observation came from.
        duration: Parsed duration in seconds.
        formatted: Duration rendered as ``M:SS`` for display.
    """

    line: str = "Line"
    duration: str = "Duration (s)"
    formatted: str = "Duration (M:SS)"


@dataclass(frozen=True)
class ResultColumns:
    """Container for standardized result column labels.

    These names are shared by the results table, the confidence-level
    comparison table and the console summary so that every view of an
    estimate reads the same.

    Attributes:
        confidence: Confidence level in percent (95, 90 or 80).
        n: Number of observations in the sample.
        dof: Degrees of freedom, ``n - 1``.
        geometric_mean: ``exp(mean(ln x))`` in seconds.
        arithmetic_mean: Plain mean of the raw durations in seconds. Reported
            for comparison only; it plays no part in the interval.
        log_mean: Mean of the natural-log durations.
        log_sd: Bessel-corrected standard deviation of the log durations.
        sem: Standard error of the log mean, ``log_sd / sqrt(n)``.
        t_critical: Two-tailed Student's t critical value from the table.
        margin: Half-width of the interval in log space.
        ci_low: Lower interval bound in seconds.
        ci_high: Upper interval bound in seconds.
        width: ``ci_high - ci_low`` in seconds. The interval is asymmetric
            about the geometric mean on the original scale.
        fallback: True when the table had no entry and 2.042 was used.
    """

    confidence: str = "Confidence Level (%)"
    n: str = "n"
    dof: str = "Degrees of Freedom"
    geometric_mean: str = "Geometric Mean (s)"
    arithmetic_mean: str = "Arithmetic Mean (s)"
    log_mean: str = "Log Mean"
    log_sd: str = "Log SD"
    sem: str = "Standard Error (log)"
    t_critical: str = "t-Critical Value"
    margin: str = "Margin (log)"
    ci_low: str = "CI Low (s)"
    ci_high: str = "CI High (s)"
    width: str = "CI Width (s)"
    fallback: str = "t Fallback Used"


SAMPLE_COLUMNS = SampleColumns()
RESULT_COLUMNS = ResultColumns()
