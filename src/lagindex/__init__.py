"""Shared lag indices for two overlapping, equally spaced time series."""

from .core import assign_lag_indices, lag_indices
from .errors import (
    AssignmentInvariantError,
    InputTypeError,
    IrregularSpacingError,
    LagIndexError,
    NoOverlapError,
    SpacingMismatchError,
    UnknownIntervalError,
)
from .types import IntervalMode, LagIndices

__all__ = [
    "assign_lag_indices",
    "lag_indices",
    "IntervalMode",
    "LagIndices",
    "LagIndexError",
    "InputTypeError",
    "NoOverlapError",
    "UnknownIntervalError",
    "IrregularSpacingError",
    "SpacingMismatchError",
    "AssignmentInvariantError",
]
