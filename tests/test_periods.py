import logging

import pytest

from multistl.analytics.errors import InvalidInputError
from multistl.analytics.periods import normalize_periods, seasonal_windows


def test_sorts_in_place():
    periods = [168, 24, 12]
    out = normalize_periods(periods, nobs=1000)
    assert periods == [12, 24, 168]
    assert out is periods


def test_drops_periods_longer_than_half_series():
    periods = [24, 600, 168, 500]
    normalize_periods(periods, nobs=1000)
    assert periods == [24, 168, 500]


def test_period_equal_to_half_series_is_kept():
    periods = [7, 4]
    normalize_periods(periods, nobs=8)
    assert periods == [4]


def test_odd_length_uses_floor_of_half():
    periods = [3, 4]
    normalize_periods(periods, nobs=7)
    assert periods == [3]


def test_all_periods_dropped_leaves_empty_list():
    periods = [50, 60]
    normalize_periods(periods, nobs=20)
    assert periods == []


def test_duplicates_are_kept():
    periods = [24, 12, 24]
    normalize_periods(periods, nobs=100)
    assert periods == [12, 24, 24]


@pytest.mark.parametrize("periods", [[], [1], [24, 1], [0, 12], [-3, 24]])
def test_rejects_empty_or_non_seasonal(periods):
    with pytest.raises(InvalidInputError):
        normalize_periods(periods, nobs=1000)


def test_invalid_check_runs_before_filtering():
    # the smallest period is checked on the sorted list, not the filtered one
    periods = [1, 5000]
    with pytest.raises(InvalidInputError):
        normalize_periods(periods, nobs=100)
    assert periods == [1, 5000]


def test_seasonal_windows_depend_only_on_rank():
    assert seasonal_windows([24, 168, 8766]) == [11, 15, 19]
    assert seasonal_windows([2, 3, 4]) == [11, 15, 19]
    assert seasonal_windows([]) == []


def test_seasonal_windows_are_odd():
    windows = seasonal_windows(list(range(2, 30)))
    assert all(w % 2 == 1 for w in windows)
    assert windows == sorted(windows)


def test_dropped_periods_are_logged(caplog):
    with caplog.at_level(logging.WARNING, logger="multistl.analytics.periods"):
        normalize_periods([24, 500], nobs=100)
    assert "500" in caplog.text
