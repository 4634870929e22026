import warnings

import pytest

from taskci.stats.critical_values import (
    CONFIDENCE_LEVELS,
    FALLBACK_T_CRITICAL,
    T_CRITICAL_TABLE,
    alpha_for_confidence,
    df_table_key,
    lookup_t_critical,
    t_critical,
)


def test_alpha_matches_table_keys():
    assert alpha_for_confidence(95) == 0.05
    assert alpha_for_confidence(90) == 0.10
    assert alpha_for_confidence(80) == 0.20
    for level in CONFIDENCE_LEVELS:
        assert alpha_for_confidence(level) in T_CRITICAL_TABLE[1]


@pytest.mark.parametrize(
    "df, key",
    [
        (1, 1),
        (10, 10),
        (11, 15),
        (15, 15),
        (16, 20),
        (20, 20),
        (21, 25),
        (25, 25),
        (26, 30),
        (30, 30),
        (500, 30),
    ],
)
def test_df_bucket_boundaries(df, key):
    assert df_table_key(df) == key


def test_bucketed_values_at_95():
    assert t_critical(10, 95) == 2.228
    assert t_critical(11, 95) == 2.131
    assert t_critical(30, 95) == 2.042
    assert t_critical(50, 95) == 2.042


def test_small_df_values():
    assert t_critical(1, 95) == 12.706
    assert t_critical(4, 95) == 2.776
    assert t_critical(4, 90) == 2.132
    assert t_critical(4, 80) == 1.533


def test_values_decrease_with_confidence_for_every_row():
    for key, row in T_CRITICAL_TABLE.items():
        assert row[0.20] < row[0.10] < row[0.05], key


def test_no_warning_for_supported_levels():
    with warnings.catch_warnings():
        warnings.simplefilter("error")
        for level in CONFIDENCE_LEVELS:
            for df in (1, 7, 12, 40):
                value, fallback = lookup_t_critical(df, level)
                assert not fallback
                assert value > 0


def test_unknown_level_falls_back_with_warning():
    with pytest.warns(RuntimeWarning, match="fallback"):
        value, fallback = lookup_t_critical(5, 99)
    assert value == FALLBACK_T_CRITICAL
    assert fallback is True
    with pytest.warns(RuntimeWarning):
        assert t_critical(5, 99) == 2.042


def test_df_below_one_raises():
    with pytest.raises(ValueError):
        df_table_key(0)
    with pytest.raises(ValueError):
        t_critical(0, 95)


def test_table_matches_student_t_quantiles():
    scipy_stats = pytest.importorskip("scipy.stats")
    for df, row in T_CRITICAL_TABLE.items():
        for alpha, value in row.items():
            exact = scipy_stats.t.ppf(1.0 - alpha / 2.0, df)
            assert value == pytest.approx(exact, abs=1e-3), (df, alpha)
