"""
A Python package for estimating typical task completion times.

Computes the geometric mean of positive, right-skewed durations together with
a log-space Student's t confidence interval.

Modules:
    - data_processing: Parses freeform text into a validated sample of durations.
    - stats: Critical-value table and the geometric-mean interval estimator.
    - analysis: Runs parse + estimate and classifies the outcome for callers.
    - reporting: Renders estimates as summary text and display columns.
    - units: Seconds/minutes conversion and M:SS formatting.
"""

__version__ = "1.0.0"

from .analysis import (
    DurationAnalysis,
    analyze_durations,
    compare_confidence_levels,
    create_results_dataframe,
    print_summary,
)
from .data_processing import Observation, Sample, parse_durations
from .stats import (
    CONFIDENCE_LEVELS,
    EstimationResult,
    estimate,
    estimate_all_levels,
    estimate_cached,
    t_critical,
)
from .units import format_duration

__all__ = [
    # Parsing
    "Observation",
    "Sample",
    "parse_durations",
    # Estimation
    "CONFIDENCE_LEVELS",
    "EstimationResult",
    "estimate",
    "estimate_all_levels",
    "estimate_cached",
    "t_critical",
    # Analysis
    "DurationAnalysis",
    "analyze_durations",
    "compare_confidence_levels",
    "create_results_dataframe",
    "print_summary",
    # Units
    "format_duration",
]
