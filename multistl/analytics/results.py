from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping, Optional, Tuple

import numpy as np
import pandas as pd


def _frozen(values) -> np.ndarray:
    arr = np.array(values, dtype=float)
    arr.setflags(write=False)
    return arr


@dataclass(frozen=True)
class DecompositionResult:
    """Trend, per-period seasonal components, residuals and robust weights.

    Every array has the length of the decomposed series and is read-only.
    """

    trend: np.ndarray
    seasonals: Mapping[int, np.ndarray]
    residuals: np.ndarray
    robust_weights: np.ndarray

    def __post_init__(self):
        trend = _frozen(self.trend)
        nobs = len(trend)
        seasonals = {int(p): _frozen(s) for p, s in self.seasonals.items()}
        residuals = _frozen(self.residuals)
        weights = _frozen(self.robust_weights)

        lengths = {len(s) for s in seasonals.values()} | {
            len(residuals),
            len(weights),
        }
        if lengths - {nobs}:
            raise ValueError(
                f"All components must have length {nobs}, got lengths {sorted(lengths)}"
            )

        object.__setattr__(self, "trend", trend)
        object.__setattr__(self, "seasonals", MappingProxyType(seasonals))
        object.__setattr__(self, "residuals", residuals)
        object.__setattr__(self, "robust_weights", weights)

    @property
    def nobs(self) -> int:
        return len(self.trend)

    @property
    def periods(self) -> Tuple[int, ...]:
        """The decomposed periods, ascending."""
        return tuple(sorted(self.seasonals))

    def seasonal(self, period: int) -> Optional[np.ndarray]:
        """Return the seasonal component for ``period``, or None if it was not fitted."""
        return self.seasonals.get(period)

    def reconstruct(self) -> np.ndarray:
        """Return trend + every seasonal component + residuals."""
        total = self.trend + self.residuals
        for seasonal in self.seasonals.values():
            total = total + seasonal
        return total

    def to_dataframe(self, index=None) -> pd.DataFrame:
        """Return the components as a DataFrame.

        Columns are ``trend``, one ``seasonal_<period>`` per period, ``resid``
        and ``robust_weight``.
        """
        data = {"trend": self.trend}
        for period in self.periods:
            data[f"seasonal_{period}"] = self.seasonals[period]
        data["resid"] = self.residuals
        data["robust_weight"] = self.robust_weights
        return pd.DataFrame(data, index=index)
