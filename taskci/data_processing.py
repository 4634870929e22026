"""
Parses freeform duration text into a validated, ordered sample.
"""

# Parsing summary: split on newlines, trim each line, read the leading numeric
# prefix of what remains and keep it only when it is a finite value greater
# than zero. Everything else is dropped without raising; the sample keeps the
# 1-based source line of each kept value for traceability.

from __future__ import annotations

import math
import re
from dataclasses import dataclass
from typing import Iterable, Iterator, Tuple

import pandas as pd

from .schema import SAMPLE_COLUMNS
from .units import format_duration

# Optional sign, then either digits with an optional fraction or a bare
# fraction, then an optional exponent. ``Infinity`` is matched so that it can
# be rejected as non-finite instead of falling through as "not a number".
_LEADING_NUMBER = re.compile(
    r"[+-]?(?:Infinity|(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?)"
)

# Byte-order marks are trimmed along with whitespace so a BOM-prefixed first
# line still parses.
_BOM = "\ufeff"


@dataclass(frozen=True)
class Observation:
    """One parsed duration.

    Attributes:
        value: Duration in seconds; finite and strictly positive.
        source_line: 1-based line of the raw input the value came from.
    """

    value: float
    source_line: int

    def __post_init__(self):
        if not math.isfinite(self.value) or self.value <= 0:
            raise ValueError(
                f"Observation value must be finite and > 0, got {self.value!r}"
            )
        if self.source_line < 1:
            raise ValueError(f"source_line must be >= 1, got {self.source_line!r}")


@dataclass(frozen=True)
class Sample:
    """Ordered, immutable sequence of observations feeding one estimate.

    Order is the order of valid lines in the input, never numeric order.
    Two samples compare equal when their observations (values and source
    lines) are equal, which makes a sample usable as a memoization key.
    """

    observations: Tuple[Observation, ...] = ()

    @classmethod
    def from_values(cls, values: Iterable[float]) -> "Sample":
        """Build a sample from raw durations, numbering lines from 1."""
        return cls(
            tuple(
                Observation(float(v), i) for i, v in enumerate(values, start=1)
            )
        )

    @property
    def values(self) -> Tuple[float, ...]:
        return tuple(obs.value for obs in self.observations)

    @property
    def source_lines(self) -> Tuple[int, ...]:
        return tuple(obs.source_line for obs in self.observations)

    def __len__(self) -> int:
        return len(self.observations)

    def __iter__(self) -> Iterator[Observation]:
        return iter(self.observations)

    def to_frame(self) -> pd.DataFrame:
        """Return the sample as a tidy table, one row per observation."""
        return pd.DataFrame(
            {
                SAMPLE_COLUMNS.line: [obs.source_line for obs in self.observations],
                SAMPLE_COLUMNS.duration: [obs.value for obs in self.observations],
                SAMPLE_COLUMNS.formatted: [
                    format_duration(obs.value) for obs in self.observations
                ],
            },
            columns=[
                SAMPLE_COLUMNS.line,
                SAMPLE_COLUMNS.duration,
                SAMPLE_COLUMNS.formatted,
            ],
        )


def _trim(line: str) -> str:
    return line.strip().strip(_BOM).strip()


def parse_leading_float(text: str) -> float:
    """Read the leading numeric prefix of ``text``.

    Leading whitespace is ignored and anything after the numeric prefix is
    discarded, so ``"5 seconds"`` reads as ``5.0`` and ``"1.5e2s"`` as
    ``150.0``.

    Args:
        text: Candidate string.

    Returns:
        float: The parsed value, ``inf``/``-inf`` for a leading
        ``Infinity``, or ``nan`` when there is no numeric prefix.
    """
    match = _LEADING_NUMBER.match(text.lstrip())
    if match is None:
        return math.nan
    token = match.group(0)
    if token.lstrip("+-") == "Infinity":
        return -math.inf if token.startswith("-") else math.inf
    return float(token)


def parse_durations(raw_text: str) -> Sample:
    """Convert raw freeform text into an ordered sample of positive durations.

    A line becomes an observation iff it is non-empty after trimming, has a
    finite leading numeric value, and that value is strictly greater than
    zero. Blank, unparseable, zero and negative lines are dropped silently;
    they are a data-cleaning policy, not errors.

    Args:
        raw_text: Newline-separated durations in seconds.

    Returns:
        Sample: Observations in input order, each tagged with its 1-based
        source line. Empty input yields an empty sample.

    Examples:
        >>> parse_durations("122\\n0\\n-5\\nabc\\n50.5\\n").values
        (122.0, 50.5)
    """
    observations = []
    for index, line in enumerate(raw_text.split("\n"), start=1):
        trimmed = _trim(line)
        if not trimmed:
            continue
        value = parse_leading_float(trimmed)
        if math.isfinite(value) and value > 0:
            observations.append(Observation(value, index))
    return Sample(tuple(observations))


def count_candidate_lines(raw_text: str) -> int:
    """Count lines that are non-empty after trimming."""
    return sum(1 for line in raw_text.split("\n") if _trim(line))


def load_duration_text(filepath):
    """
    Load raw duration text from a file.

    Args:
        filepath (str): Path to a UTF-8 text file, one duration per line. A
            leading byte-order mark is dropped.

    Returns:
        str: File contents.
    """
    with open(filepath, encoding="utf-8-sig") as fh:
        return fh.read()
