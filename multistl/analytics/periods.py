"""
Module `analytics.periods` validates the requested seasonal periods and
derives the seasonal smoothing window used for each of them.
"""

from typing import List, MutableSequence, Sequence

from multistl.core.logger import Logger
from .errors import InvalidInputError

log = Logger.get_logger(__name__)


def normalize_periods(periods: MutableSequence[int], nobs: int) -> MutableSequence[int]:
    """
    Sort, validate and filter ``periods`` **in place**.

    1. Periods are sorted ascending so short cycles are resolved before
       long ones.
    2. An empty collection, or one whose smallest period is <= 1, raises
       :class:`InvalidInputError`.
    3. Periods longer than half of ``nobs`` are removed.

    The caller's collection is mutated and also returned for convenience.
    Duplicates are kept.
    """
    periods[:] = sorted(periods)
    if not periods or periods[0] <= 1:
        raise InvalidInputError("non-seasonal data not supported")

    kept = [p for p in periods if p <= nobs // 2]
    dropped = [p for p in periods if p > nobs // 2]
    if dropped:
        log.warning(
            "Dropping periods %s: longer than half the series length (%d)",
            dropped,
            nobs,
        )
    periods[:] = kept
    return periods


def seasonal_windows(periods: Sequence[int]) -> List[int]:
    """Return the seasonal window for each period in the sorted list.

    The window depends only on the period's rank: ``7 + 4 * (rank + 1)``,
    giving 11, 15, 19, ...  Always odd.
    """
    # TODO: accept caller-supplied windows once MSTL exposes a windows option.
    return [7 + 4 * (i + 1) for i in range(len(periods))]
