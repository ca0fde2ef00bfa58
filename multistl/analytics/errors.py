"""Exceptions raised by the multi-seasonal decomposition."""


class MSTLError(Exception):
    """Base class for every decomposition failure."""


class InvalidInputError(MSTLError):
    """Raised when the series or requested periods cannot be decomposed."""


class NoFitProducedError(MSTLError):
    """Raised when no period survives normalization, so no STL fit was run."""


class DecompositionFailureError(MSTLError):
    """Raised when the single-season STL primitive fails.

    The original exception is available as ``__cause__``.
    """
