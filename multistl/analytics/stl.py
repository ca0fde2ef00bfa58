"""
Module `analytics.stl` wraps the single-season STL decomposition from
statsmodels behind a narrow callable so the multi-seasonal engine can be
driven by any primitive with the same shape (including test stubs).
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, fields
from typing import Any, Callable, Dict, Optional

import numpy as np
from statsmodels.tsa.seasonal import STL  # type: ignore


@dataclass(frozen=True)
class StlParams:
    """Smoothing options shared by every single-season STL fit.

    ``trend_length`` and ``low_pass_length`` default to the lengths
    statsmodels derives from the period and seasonal window. ``inner_iter``
    and ``outer_iter`` default to statsmodels' choice for the ``robust`` flag.
    """

    seasonal_deg: int = 1
    trend_deg: int = 1
    low_pass_deg: int = 1
    seasonal_jump: int = 1
    trend_jump: int = 1
    low_pass_jump: int = 1
    trend_length: Optional[int] = None
    low_pass_length: Optional[int] = None
    robust: bool = False
    inner_iter: Optional[int] = None
    outer_iter: Optional[int] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "StlParams":
        """Build params from a mapping, rejecting unknown option names."""
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise KeyError(f"Unknown STL options: {', '.join(unknown)}")
        return cls(**data)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass
class StlFit:
    """Components of one single-season STL fit, each of the input's length."""

    trend: np.ndarray
    seasonal: np.ndarray
    remainder: np.ndarray
    weights: np.ndarray


SeasonalDecomposer = Callable[[np.ndarray, int, int, StlParams], StlFit]


def fit_stl(
    series: np.ndarray, period: int, seasonal_window: int, params: StlParams
) -> StlFit:
    """Run statsmodels' STL on ``series`` for one seasonal period.

    Errors raised by statsmodels (e.g. an incompatible period or window)
    propagate unchanged.
    """
    stl = STL(
        np.asarray(series, dtype=float),
        period=period,
        seasonal=seasonal_window,
        trend=params.trend_length,
        low_pass=params.low_pass_length,
        seasonal_deg=params.seasonal_deg,
        trend_deg=params.trend_deg,
        low_pass_deg=params.low_pass_deg,
        robust=params.robust,
        seasonal_jump=params.seasonal_jump,
        trend_jump=params.trend_jump,
        low_pass_jump=params.low_pass_jump,
    )
    res = stl.fit(inner_iter=params.inner_iter, outer_iter=params.outer_iter)
    return StlFit(
        trend=np.asarray(res.trend, dtype=float),
        seasonal=np.asarray(res.seasonal, dtype=float),
        remainder=np.asarray(res.resid, dtype=float),
        weights=np.asarray(res.weights, dtype=float),
    )
