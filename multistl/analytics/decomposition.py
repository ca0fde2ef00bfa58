"""
Module `analytics.decomposition` implements MSTL, the multiple
seasonal-trend decomposition.

The series is decomposed by running STL once per seasonal period in
ascending order of period, refitting every period on a second pass when
more than one period is requested. Each fit sees the series with the
latest estimate of every other seasonal component removed.
"""

from __future__ import annotations

from typing import Dict, MutableSequence, Optional, Sequence

import numpy as np

from multistl.core.logger import Logger
from .errors import DecompositionFailureError, InvalidInputError, NoFitProducedError
from .periods import normalize_periods, seasonal_windows
from .results import DecompositionResult
from .stl import SeasonalDecomposer, StlFit, StlParams, fit_stl

log = Logger.get_logger(__name__)


class MSTL:
    """
    Multiple seasonal-trend decomposition of a single time series.

    ``periods`` is borrowed, not copied: :meth:`fit` sorts it ascending and
    removes periods longer than half the series **in place**, so after a
    run the caller's list holds exactly the periods that were decomposed.

    Parameters:
        y: Equally spaced observations. Never modified.
        periods: Seasonal period lengths, in observations.
        stl_params: Options passed to every single-season STL fit.
        decomposer: The single-season primitive; defaults to statsmodels' STL.
    """

    def __init__(
        self,
        y: Sequence[float],
        periods: MutableSequence[int],
        stl_params: Optional[StlParams] = None,
        decomposer: SeasonalDecomposer = fit_stl,
    ):
        self.y = np.asarray(y, dtype=float)
        self.periods = periods
        self._stl_params = stl_params or StlParams()
        self._decomposer = decomposer

    def stl_params(self, params: StlParams) -> "MSTL":
        """Set the options for each individual STL fit and return self."""
        self._stl_params = params
        return self

    def fit(self) -> DecompositionResult:
        """
        Run the decomposition.

        Mutates ``self.periods`` (the caller's list) as described on the class.

        Raises:
            InvalidInputError: periods empty, smallest period <= 1, or ``y``
                not one-dimensional.
            NoFitProducedError: every period exceeded half the series length.
            DecompositionFailureError: the STL primitive failed.
        """
        if self.y.ndim != 1:
            raise InvalidInputError(
                f"series must be one-dimensional, got shape {self.y.shape}"
            )
        nobs = len(self.y)
        normalize_periods(self.periods, nobs)
        windows = seasonal_windows(self.periods)
        iterate = 1 if len(self.periods) == 1 else 2
        log.debug(
            "MSTL on %d observations: periods=%s windows=%s iterations=%d",
            nobs,
            list(self.periods),
            windows,
            iterate,
        )

        seasonals: Dict[int, np.ndarray] = {p: np.zeros(nobs) for p in self.periods}
        deseas = self.y.copy()
        res: Optional[StlFit] = None
        for i in range(iterate):
            for period, window in zip(self.periods, windows):
                # Put this period's seasonal effect back before refitting it.
                deseas += seasonals[period]
                log.debug(
                    "STL fit: iteration=%d period=%d seasonal_window=%d",
                    i,
                    period,
                    window,
                    extra={"iteration": i, "period": period, "seasonal_window": window},
                )
                res = self._fit_one(deseas, period, window)
                seasonals[period] = res.seasonal
                deseas -= res.seasonal

        if res is None:
            raise NoFitProducedError(
                f"no STL fit: every period exceeds half the series length ({nobs})"
            )
        return DecompositionResult(
            trend=res.trend,
            seasonals=seasonals,
            residuals=deseas - res.trend,
            robust_weights=res.weights,
        )

    def _fit_one(self, deseas: np.ndarray, period: int, window: int) -> StlFit:
        try:
            fit = self._decomposer(deseas.copy(), period, window, self._stl_params)
        except Exception as e:
            raise DecompositionFailureError(
                f"STL failed for period {period} (seasonal window {window}): {e}"
            ) from e
        checked = StlFit(
            trend=np.asarray(fit.trend, dtype=float),
            seasonal=np.asarray(fit.seasonal, dtype=float),
            remainder=np.asarray(fit.remainder, dtype=float),
            weights=np.asarray(fit.weights, dtype=float),
        )
        for name in ("trend", "seasonal", "remainder", "weights"):
            component = getattr(checked, name)
            if component.shape != deseas.shape:
                raise DecompositionFailureError(
                    f"STL for period {period} returned {name} of shape "
                    f"{component.shape}, expected {deseas.shape}"
                )
        return checked
