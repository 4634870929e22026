"""Tests for reporting-layer formatting."""

import pandas as pd
import pytest

from taskci.analysis import analyze_durations
from taskci.reporting import (
    add_formatted_duration_columns,
    detailed_statistics,
    interpretation_text,
    interval_as_durations,
    status_message,
    summary_line,
)
from taskci.stats.estimator import estimate
from taskci.units import format_duration, seconds_to_minutes

TIMES = [122, 293, 203, 156, 89]


def test_format_duration():
    assert format_duration(0) == "0:00"
    assert format_duration(65) == "1:05"
    assert format_duration(158.7) == "2:39"
    assert format_duration(59.6) == "1:00"
    assert format_duration(3600) == "60:00"
    assert format_duration(float("nan")) == "n/a"
    assert format_duration(-3) == "n/a"


def test_seconds_to_minutes():
    assert seconds_to_minutes(90) == 1.5


def test_summary_line():
    res = estimate(TIMES, 95)
    assert summary_line(res) == "Geometric mean = 158.7s with 95% CI: [89.8s, 280.4s]"


def test_interpretation_text_mentions_both_means():
    text = interpretation_text(estimate(TIMES, 90))
    assert text.startswith("We can be 90% confident")
    assert "(158.7s)" in text
    assert "(172.6s)" in text


def test_interval_as_durations():
    assert interval_as_durations(estimate(TIMES, 95)) == "1:30 - 4:40"


def test_detailed_statistics_labels():
    rows = dict(detailed_statistics(estimate(TIMES, 95)))
    assert rows["Sample Size (n)"] == "5"
    assert rows["Arithmetic Mean"] == "172.6s"
    assert rows["t-Critical Value"] == "2.776"
    assert "Note" not in rows


def test_detailed_statistics_flags_fallback():
    with pytest.warns(RuntimeWarning):
        res = estimate(TIMES, 99)
    assert dict(detailed_statistics(res))["Note"] == "t-critical fallback value used"


def test_status_messages():
    assert status_message(analyze_durations("")).startswith("No valid durations")
    assert "at least 2 data points" in status_message(analyze_durations("5\n"))
    assert status_message(analyze_durations("\n".join(map(str, TIMES)))).startswith(
        "Results: Geometric mean = 158.7s"
    )


def test_add_formatted_duration_columns():
    df = pd.DataFrame({"CI Low (s)": [89.84, None], "CI High (s)": [280.4, 61.0]})
    out = add_formatted_duration_columns(df, ["CI Low (s)", "CI High (s)"])
    assert list(out["CI Low (s) (M:SS)"]) == ["1:30", "n/a"]
    assert list(out["CI High (s) (M:SS)"]) == ["4:40", "1:01"]
    assert "CI Low (s) (M:SS)" not in df.columns


def test_add_formatted_duration_columns_missing_column():
    with pytest.raises(KeyError, match="Missing duration column"):
        add_formatted_duration_columns(pd.DataFrame({"a": [1.0]}), ["b"])
