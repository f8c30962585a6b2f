"""Core algorithms for lagindex."""

from .assign import assign_lag_indices, lag_indices
from .spacing import GAP_STRATEGIES, compute_gaps, verify_spacing
from .validate import as_timestamp_array, common_timestamps, validate_series

__all__ = [
    "assign_lag_indices",
    "lag_indices",
    "GAP_STRATEGIES",
    "compute_gaps",
    "verify_spacing",
    "as_timestamp_array",
    "common_timestamps",
    "validate_series",
]
