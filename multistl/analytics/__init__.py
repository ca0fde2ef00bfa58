from .decomposition import MSTL
from .errors import (
    DecompositionFailureError,
    InvalidInputError,
    MSTLError,
    NoFitProducedError,
)
from .periods import normalize_periods, seasonal_windows
from .results import DecompositionResult
from .stl import StlFit, StlParams, fit_stl

__all__ = [
    "MSTL",
    "DecompositionResult",
    "DecompositionFailureError",
    "InvalidInputError",
    "MSTLError",
    "NoFitProducedError",
    "StlFit",
    "StlParams",
    "fit_stl",
    "normalize_periods",
    "seasonal_windows",
]
