"""Centralized duration conversion and formatting utilities."""

from __future__ import annotations

import math

SECONDS_PER_MINUTE: int = 60


def seconds_to_minutes(seconds: float) -> float:
    """Convert a duration from seconds to (fractional) minutes.

    Args:
        seconds (float): Duration in seconds.

    Returns:
        float: Duration in minutes.
    """
    return float(seconds) / SECONDS_PER_MINUTE


def format_duration(seconds: float) -> str:
    """Format a duration in seconds as ``M:SS``.

    Args:
        seconds (float): Non-negative duration in seconds. Fractional seconds
            are rounded to the nearest whole second before splitting, so
            ``59.6`` renders as ``1:00`` rather than ``0:60``.

    Returns:
        str: Minutes (unpadded) and zero-padded seconds, for example
        ``"2:37"``. Non-finite or negative input returns ``"n/a"``.

    Note:
        Display-only helper; estimates are always carried in seconds.
    """
    s = float(seconds)
    if not math.isfinite(s) or s < 0:
        return "n/a"
    total = int(round(s))
    minutes, remainder = divmod(total, SECONDS_PER_MINUTE)
    return f"{minutes}:{remainder:02d}"
