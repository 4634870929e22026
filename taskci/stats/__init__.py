"""
Statistical core for task-time estimates.

This subpackage holds the numerical routines: the log-space geometric-mean
estimator and the Student's t critical-value table it draws its multiplier
from. All functions are pure and operate on samples and primitive types; no
formatting or I/O is included.

Modules:
    critical_values:
        Fixed two-tailed t table keyed by degrees-of-freedom anchors
        {1..10, 15, 20, 25, 30} and alpha {0.20, 0.10, 0.05}, with the
        upward bucketing policy for df above 10 and the 2.042 fallback.

    estimator:
        Geometric mean, arithmetic mean and log-space confidence interval
        for a sample of at least two positive durations.

Design Principle:
    This subpackage depends only on the parser's Sample contract. It can be
    tested independently of reporting and the command line.
"""

from .critical_values import (
    CONFIDENCE_LEVELS,
    DEFAULT_CONFIDENCE_LEVEL,
    FALLBACK_T_CRITICAL,
    T_CRITICAL_TABLE,
    alpha_for_confidence,
    df_table_key,
    lookup_t_critical,
    t_critical,
)
from .estimator import (
    MIN_SAMPLE_SIZE,
    EstimationResult,
    estimate,
    estimate_all_levels,
    estimate_cached,
)

__all__ = [
    "CONFIDENCE_LEVELS",
    "DEFAULT_CONFIDENCE_LEVEL",
    "FALLBACK_T_CRITICAL",
    "T_CRITICAL_TABLE",
    "alpha_for_confidence",
    "df_table_key",
    "lookup_t_critical",
    "t_critical",
    "MIN_SAMPLE_SIZE",
    "EstimationResult",
    "estimate",
    "estimate_all_levels",
    "estimate_cached",
]
