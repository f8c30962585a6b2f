"""Input validation for timestamp series."""

from __future__ import annotations

from datetime import date, datetime, timezone
from typing import Any, Tuple

import numpy as np

from ..errors import InputTypeError, NoOverlapError
from ..types import TimestampSequence


def _to_datetime64(item: Any, name: str) -> np.datetime64:
    if isinstance(item, np.datetime64):
        return item
    if isinstance(item, datetime):
        if item.tzinfo is not None:
            item = item.astimezone(timezone.utc).replace(tzinfo=None)
        return np.datetime64(item)
    if isinstance(item, date):
        return np.datetime64(item)
    raise InputTypeError(
        f"expected timestamps, found element of type {type(item).__name__}", name=name
    )


def as_timestamp_array(series: TimestampSequence, name: str = "series") -> np.ndarray:
    """Return ``series`` as a one-dimensional ``datetime64`` array.

    ``datetime64`` arrays are passed through untouched; other sequences are
    converted element by element.  Aware datetimes are normalised to UTC.
    Strings are rejected rather than parsed, use
    :func:`lagindex.ingest.parse_timestamp` for text input.
    """

    if isinstance(series, np.ndarray):
        if series.ndim != 1:
            raise InputTypeError(
                f"expected a one-dimensional sequence, got shape {series.shape}", name=name
            )
        if series.dtype.kind == "M":
            return series
        items = series.tolist()
    elif isinstance(series, (str, bytes)) or not hasattr(series, "__iter__"):
        raise InputTypeError(
            f"expected a sequence of timestamps, got {type(series).__name__}", name=name
        )
    else:
        items = list(series)

    values = [_to_datetime64(item, name) for item in items]
    if not values:
        return np.array([], dtype="datetime64[us]")
    return np.array(values)


def common_timestamps(series_a: np.ndarray, series_b: np.ndarray) -> np.ndarray:
    """Return the sorted timestamps present in both series."""

    return np.intersect1d(series_a, series_b)


def validate_series(
    series_a: TimestampSequence, series_b: TimestampSequence
) -> Tuple[np.ndarray, np.ndarray]:
    """Coerce both series to a shared ``datetime64`` unit and check overlap.

    Raises
    ------
    InputTypeError
        If either input is not a one-dimensional timestamp sequence.
    NoOverlapError
        If no timestamp is common to both series.
    """

    a = as_timestamp_array(series_a, "series_a")
    b = as_timestamp_array(series_b, "series_b")

    unit = np.promote_types(a.dtype, b.dtype)
    a = a.astype(unit, copy=False)
    b = b.astype(unit, copy=False)

    if common_timestamps(a, b).size == 0:
        raise NoOverlapError("There are no overlapping timestamps")
    return a, b


__all__ = ["as_timestamp_array", "common_timestamps", "validate_series"]
