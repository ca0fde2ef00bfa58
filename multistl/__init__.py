"""multistl: multiple seasonal-trend decomposition using STL."""

from .analytics import (
    MSTL,
    DecompositionResult,
    DecompositionFailureError,
    InvalidInputError,
    MSTLError,
    NoFitProducedError,
    StlParams,
)

__all__ = [
    "MSTL",
    "DecompositionResult",
    "DecompositionFailureError",
    "InvalidInputError",
    "MSTLError",
    "NoFitProducedError",
    "StlParams",
]
