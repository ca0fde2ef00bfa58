# pylint: disable=missing-module-docstring,missing-function-docstring,redefined-outer-name
import numpy as np
import pandas as pd
import pytest

from multistl.analytics.stl import StlFit


@pytest.fixture
def hourly_demand():
    """Six weeks of synthetic hourly demand with daily and weekly cycles."""
    rng = np.random.default_rng(42)
    t = np.arange(168 * 6)
    trend = 4000 + 0.5 * t
    daily = 300 * np.sin(2 * np.pi * t / 24)
    weekly = 500 * np.sin(2 * np.pi * t / 168)
    return trend + daily + weekly + rng.normal(0, 50, len(t))


@pytest.fixture
def hourly_demand_csv(tmp_path, hourly_demand):
    path = tmp_path / "demand.csv"
    pd.DataFrame(
        {
            "date": pd.date_range("2024-01-01", periods=len(hourly_demand), freq="h"),
            "y": hourly_demand,
        }
    ).to_csv(path, index=False)
    return path


class RecordingDecomposer:
    """Stub STL primitive: seasonal is the series' mean-removed copy scaled by 0.5."""

    def __init__(self, fail_on=None):
        self.calls = []
        self.fail_on = fail_on

    def __call__(self, series, period, seasonal_window, params):
        self.calls.append((period, seasonal_window, series.copy()))
        if period == self.fail_on:
            raise ValueError(f"period {period} is not supported")
        n = len(series)
        level = float(np.mean(series))
        seasonal = 0.5 * (series - level)
        trend = np.full(n, level)
        return StlFit(
            trend=trend,
            seasonal=seasonal,
            remainder=series - trend - seasonal,
            weights=np.full(n, float(len(self.calls))),
        )


@pytest.fixture
def recorder():
    return RecordingDecomposer()


@pytest.fixture
def failing_recorder():
    return RecordingDecomposer(fail_on=168)
