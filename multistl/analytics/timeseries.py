"""
Module `analytics.timeseries` provides the TimeSeries class, which wraps
a pandas DataFrame holding one equally spaced series and feeds it to MSTL.
"""

from dataclasses import dataclass
from typing import List, Literal, Optional

import numpy as np
import pandas as pd

from multistl.core.config import ConfigManager
from multistl.core.logger import Logger
from .decomposition import MSTL
from .errors import InvalidInputError
from .results import DecompositionResult
from .stl import StlParams

log = Logger.get_logger(__name__)


@dataclass
class TimeSeries:
    """Pandas DataFrame wrapper for a single variable time series."""

    df: pd.DataFrame
    value_col: str = ConfigManager.DEFAULT_VALUE_COL
    date_col: str = ConfigManager.DEFAULT_DATE_COL

    @classmethod
    def from_dataframe(
        cls,
        df: pd.DataFrame,
        value_col: str = ConfigManager.DEFAULT_VALUE_COL,
        date_col: str = ConfigManager.DEFAULT_DATE_COL,
    ) -> "TimeSeries":
        """
        Create a TimeSeries from a DataFrame with columns [date_col, value_col].
        Parses the date column and sorts by it.
        """
        missing = [c for c in (date_col, value_col) if c not in df.columns]
        if missing:
            raise InvalidInputError(f"Missing column(s): {', '.join(missing)}")
        df_copy = df[[date_col, value_col]].copy()
        try:
            df_copy[date_col] = pd.to_datetime(df_copy[date_col])
        except (ValueError, TypeError) as e:
            raise InvalidInputError(f"Cannot parse dates in column {date_col}: {e}") from e
        df_copy = df_copy.sort_values(date_col).reset_index(drop=True)
        return cls(df_copy, value_col, date_col)

    def is_regular(self) -> bool:
        """True when consecutive observations are equally spaced."""
        steps = self.df[self.date_col].diff().dropna().unique()
        return len(steps) <= 1

    def fill_gaps(self, method: Literal["linear", "time"] = "time") -> "TimeSeries":
        """Interpolate missing values; a ``gapfilled`` column marks filled rows."""
        grp = self.df.set_index(self.date_col)
        original_missing = grp[self.value_col].isna()
        grp[self.value_col] = grp[self.value_col].interpolate(method=method).ffill().bfill()
        grp["gapfilled"] = original_missing
        log.debug("Filled %d missing values", int(original_missing.sum()))
        return TimeSeries(grp.reset_index(), self.value_col, self.date_col)

    def values(self) -> np.ndarray:
        return self.df[self.value_col].to_numpy(dtype=float)

    def decompose(
        self, periods: List[int], stl_params: Optional[StlParams] = None
    ) -> DecompositionResult:
        """Run MSTL on the values. ``periods`` is sorted and filtered in place."""
        if not self.is_regular():
            log.warning("Series %s is not equally spaced", self.value_col)
        values = self.values()
        if np.isnan(values).any():
            raise InvalidInputError(
                f"Series {self.value_col} has missing values; call fill_gaps() first"
            )
        log.debug("Decomposing %s with periods %s", self.value_col, periods)
        return MSTL(values, periods, stl_params=stl_params).fit()

    def to_wide(self, result: DecompositionResult) -> pd.DataFrame:
        """Return the observed values alongside every component, one column each."""
        components = result.to_dataframe()
        observed = self.df[[self.date_col, self.value_col]].rename(
            columns={self.value_col: "observed"}
        )
        return pd.concat([observed, components], axis=1)


def decomp_to_long(ts: TimeSeries, result: DecompositionResult) -> pd.DataFrame:
    """Convert decomposition components to a long ``date, stat, value`` table.

    Parameters
    ----------
    ts:
        The decomposed series (dates and observed values).
    result:
        The decomposition of ``ts``.

    Returns
    -------
    pandas.DataFrame
        DataFrame with columns ``date, stat, value`` where ``stat`` is one of
        ``raw``, ``trend``, ``seasonal_<period>``, ``resid``.
    """
    wide = ts.to_wide(result).drop(columns=["robust_weight"])
    long_df = wide.melt(id_vars=[ts.date_col], var_name="stat", value_name="value")
    long_df["stat"] = long_df["stat"].replace({"observed": "raw"})
    return long_df.rename(columns={ts.date_col: "date"})[["date", "stat", "value"]]
