"""Provide two-tailed Student's t critical values from a fixed lookup table.

The table is a deliberate, bounded-accuracy approximation: degrees of freedom
above 10 are bucketed upward to the next anchor (15, 20, 25, 30) and
everything above 25 shares the df=30 row. No inverse-CDF is evaluated.
"""

from __future__ import annotations

import warnings
from typing import Dict, Tuple

CONFIDENCE_LEVELS: Tuple[int, ...] = (95, 90, 80)
DEFAULT_CONFIDENCE_LEVEL: int = 95

FALLBACK_T_CRITICAL: float = 2.042

# Keyed by df anchor, then by two-tailed alpha.
T_CRITICAL_TABLE: Dict[int, Dict[float, float]] = {
    1: {0.20: 3.078, 0.10: 6.314, 0.05: 12.706},
    2: {0.20: 1.886, 0.10: 2.920, 0.05: 4.303},
    3: {0.20: 1.638, 0.10: 2.353, 0.05: 3.182},
    4: {0.20: 1.533, 0.10: 2.132, 0.05: 2.776},
    5: {0.20: 1.476, 0.10: 2.015, 0.05: 2.571},
    6: {0.20: 1.440, 0.10: 1.943, 0.05: 2.447},
    7: {0.20: 1.415, 0.10: 1.895, 0.05: 2.365},
    8: {0.20: 1.397, 0.10: 1.860, 0.05: 2.306},
    9: {0.20: 1.383, 0.10: 1.833, 0.05: 2.262},
    10: {0.20: 1.372, 0.10: 1.812, 0.05: 2.228},
    15: {0.20: 1.341, 0.10: 1.753, 0.05: 2.131},
    20: {0.20: 1.325, 0.10: 1.725, 0.05: 2.086},
    25: {0.20: 1.316, 0.10: 1.708, 0.05: 2.060},
    30: {0.20: 1.310, 0.10: 1.697, 0.05: 2.042},
}


def alpha_for_confidence(confidence_level: float) -> float:
    """Return the two-tailed alpha for a confidence level in percent.

    ``95 -> 0.05``, ``90 -> 0.10``, ``80 -> 0.20``. The division is done as
    ``(100 - level) / 100`` so the results compare equal to the table's
    float keys.
    """
    return (100 - confidence_level) / 100


def df_table_key(degrees_of_freedom: int) -> int:
    """Map degrees of freedom to a table anchor.

    Args:
        degrees_of_freedom (int): ``n - 1``; must be at least 1.

    Returns:
        int: ``df`` itself for ``df <= 10``, otherwise the smallest anchor in
        ``{15, 20, 25, 30}`` that is ``>= df``, capped at 30.

    Raises:
        ValueError: If ``degrees_of_freedom < 1``.

    Note:
        Rounding upward within a band picks a smaller t-value than the exact
        quantile for df between anchors, so intervals for those df are
        slightly narrower than exact ones. The band edges are fixed:
        (10, 15] -> 15, (15, 20] -> 20, (20, 25] -> 25, (25, inf) -> 30.
    """
    df = int(degrees_of_freedom)
    if df < 1:
        raise ValueError(f"degrees_of_freedom must be >= 1, got {degrees_of_freedom!r}")
    if df <= 10:
        return df
    if df <= 15:
        return 15
    if df <= 20:
        return 20
    if df <= 25:
        return 25
    return 30


def lookup_t_critical(
    degrees_of_freedom: int, confidence_level: float
) -> Tuple[float, bool]:
    """Look up a critical value and report whether the fallback was used.

    Args:
        degrees_of_freedom (int): ``n - 1``; must be at least 1.
        confidence_level (float): Confidence level in percent. Only the
            levels in :data:`CONFIDENCE_LEVELS` have table entries.

    Returns:
        tuple[float, bool]: ``(t_value, fallback_used)``. On a table miss the
        value is :data:`FALLBACK_T_CRITICAL` and ``fallback_used`` is True.

    Raises:
        ValueError: If ``degrees_of_freedom < 1``.
    """
    key = df_table_key(degrees_of_freedom)
    alpha = alpha_for_confidence(confidence_level)
    value = T_CRITICAL_TABLE.get(key, {}).get(alpha)
    if value is None:
        warnings.warn(
            f"No tabulated t critical value for df={degrees_of_freedom} "
            f"(table key {key}) at {confidence_level}% confidence; "
            f"using fallback {FALLBACK_T_CRITICAL}.",
            RuntimeWarning,
            stacklevel=2,
        )
        return FALLBACK_T_CRITICAL, True
    return value, False


def t_critical(degrees_of_freedom: int, confidence_level: float) -> float:
    """Return the two-tailed t critical value for ``(df, confidence level)``.

    Total over ``df >= 1`` and the closed level set ``{95, 90, 80}``; any
    other level falls back to 2.042 with a ``RuntimeWarning``.

    Examples:
        >>> t_critical(4, 95)
        2.776
        >>> t_critical(11, 95)
        2.131
    """
    value, _ = lookup_t_critical(degrees_of_freedom, confidence_level)
    return value
