"""Geometric-mean confidence intervals for positive, right-skewed durations.

The interval is built on natural-log durations with a Student's t multiplier
and exponentiated back, so it is asymmetric about the geometric mean on the
original scale.
"""

from __future__ import annotations

import functools
import logging
import math
from dataclasses import asdict, dataclass
from typing import Dict, Optional, Sequence, Tuple, Union

import numpy as np

from ..data_processing import Sample
from .critical_values import (
    CONFIDENCE_LEVELS,
    DEFAULT_CONFIDENCE_LEVEL,
    lookup_t_critical,
)

logger = logging.getLogger(__name__)

MIN_SAMPLE_SIZE = 2


@dataclass(frozen=True)
class EstimationResult:
    n: int
    geometric_mean: float
    arithmetic_mean: float
    log_mean: float
    log_sd: float
    standard_error_of_log_mean: float
    degrees_of_freedom: int
    t_critical: float
    margin_in_log_space: float
    ci_low: float
    ci_high: float
    confidence_level: float
    t_fallback_used: bool = False

    @property
    def width(self) -> float:
        return self.ci_high - self.ci_low

    @property
    def log_interval(self) -> Tuple[float, float]:
        return (
            self.log_mean - self.margin_in_log_space,
            self.log_mean + self.margin_in_log_space,
        )

    def to_dict(self) -> Dict[str, float]:
        return asdict(self)


def _as_values(sample: Union[Sample, Sequence[float]]) -> np.ndarray:
    if isinstance(sample, Sample):
        return np.asarray(sample.values, dtype=float)
    values = np.asarray(list(sample), dtype=float)
    if values.size and (not np.all(np.isfinite(values)) or np.any(values <= 0)):
        raise ValueError(
            "All durations must be finite and strictly positive for a log-space "
            "estimate."
        )
    return values


def estimate(
    sample: Union[Sample, Sequence[float]],
    confidence_level: float = DEFAULT_CONFIDENCE_LEVEL,
) -> Optional[EstimationResult]:
    """Estimate the geometric mean and its log-space confidence interval.

    Args:
        sample (Sample | Sequence[float]): Parsed sample, or raw durations in
            seconds. Raw sequences are validated; a :class:`Sample` is already
            guaranteed positive by construction.
        confidence_level (float, optional): 95, 90 or 80 (percent). Defaults
            to ``95``. Other values use the 2.042 fallback multiplier and set
            ``t_fallback_used``.

    Returns:
        EstimationResult | None: Fully populated result, or ``None`` when the
        sample holds fewer than two observations (variance is undefined).
        ``None`` is an expected outcome, not a failure.

    Raises:
        ValueError: If a raw sequence contains a non-finite or non-positive
            value.

    Note:
        Computation order: ``ln`` each value, mean, Bessel-corrected variance
        (``n - 1``), SD, SE ``= SD / sqrt(n)``, ``df = n - 1``, t lookup,
        margin ``= t * SE``, bounds ``log_mean -/+ margin``, then ``exp`` of
        the mean and of both bounds. The arithmetic mean is computed from the
        raw values independently and is not part of the interval.
        The input is never mutated and identical inputs give bit-identical
        results.
        Logs use ``math.log`` to match ``math.exp`` on the way back. With
        identical values ``exp(ln x)`` may land one ulp above ``x``, so the
        geometric mean can exceed the arithmetic mean by that rounding.

    References:
        Log-normal (geometric mean) confidence interval with Student's t.
    """
    values = _as_values(sample)
    n = int(values.size)
    if n < MIN_SAMPLE_SIZE:
        logger.debug("Sample of size %d is too small for an interval", n)
        return None

    log_times = np.fromiter((math.log(v) for v in values), dtype=float, count=n)
    log_mean = float(np.mean(log_times))
    log_variance = float(np.sum((log_times - log_mean) ** 2) / (n - 1))
    log_sd = math.sqrt(log_variance)
    sem = log_sd / math.sqrt(n)

    dof = n - 1
    t_crit, fallback_used = lookup_t_critical(dof, confidence_level)
    margin = t_crit * sem

    log_low = log_mean - margin
    log_high = log_mean + margin

    geometric_mean = math.exp(log_mean)
    ci_low = math.exp(log_low)
    ci_high = math.exp(log_high)

    arithmetic_mean = float(np.mean(values))

    logger.debug(
        "n=%d GM=%.4f %s%% CI=[%.4f, %.4f] (t=%.3f, df=%d)",
        n,
        geometric_mean,
        confidence_level,
        ci_low,
        ci_high,
        t_crit,
        dof,
    )

    return EstimationResult(
        n=n,
        geometric_mean=geometric_mean,
        arithmetic_mean=arithmetic_mean,
        log_mean=log_mean,
        log_sd=log_sd,
        standard_error_of_log_mean=sem,
        degrees_of_freedom=dof,
        t_critical=t_crit,
        margin_in_log_space=margin,
        ci_low=ci_low,
        ci_high=ci_high,
        confidence_level=confidence_level,
        t_fallback_used=fallback_used,
    )


@functools.lru_cache(maxsize=128)
def estimate_cached(
    sample: Sample, confidence_level: float = DEFAULT_CONFIDENCE_LEVEL
) -> Optional[EstimationResult]:
    """Memoized :func:`estimate` keyed on the structural ``(sample, level)`` pair."""
    return estimate(sample, confidence_level)


def estimate_all_levels(
    sample: Union[Sample, Sequence[float]],
) -> Dict[int, EstimationResult]:
    """Estimate at every supported confidence level.

    Returns an empty dict when the sample is too small.
    """
    if not isinstance(sample, Sample):
        sample = Sample.from_values(sample)
    results = {}
    for level in CONFIDENCE_LEVELS:
        result = estimate(sample, level)
        if result is None:
            return {}
        results[level] = result
    return results
