"""Common type helpers for lagindex.

This module defines the interval enumeration and the result container
returned by :func:`lagindex.core.lag_indices`.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from enum import Enum
from typing import Any, Iterator, Literal, Sequence, Union

import numpy as np

from .errors import UnknownIntervalError

TimestampLike = Union[datetime, date, np.datetime64]
TimestampSequence = Union[np.ndarray, Sequence[TimestampLike]]


class IntervalMode(str, Enum):
    """Spacing convention used to measure the gap between timestamps."""

    ANNUAL = "annual"
    MONTHLY = "monthly"
    DAILY = "daily"
    EXACT = "exact"

    @classmethod
    def parse(cls, value: Any) -> "IntervalMode":
        """Return the mode named by ``value`` (case-insensitive)."""

        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value.strip().lower())
            except ValueError:
                pass
        raise UnknownIntervalError(value)


@dataclass(frozen=True)
class LagIndices:
    """Lag indices for a pair of series.

    Attributes
    ----------
    indices_a, indices_b:
        Integer arrays with one element per input timestamp, zero at the
        shared anchor.
    base:
        ``"a"`` when the first timestamp of ``series_a`` is the anchor,
        ``"b"`` otherwise.
    anchor:
        The timestamp that receives index 0 in both series.
    step:
        Common spacing in the units of the interval mode, or ``None`` when
        neither series has two or more timestamps.
    """

    indices_a: np.ndarray
    indices_b: np.ndarray
    base: Literal["a", "b"]
    anchor: np.datetime64
    step: Any = None

    def __iter__(self) -> Iterator[np.ndarray]:
        yield self.indices_a
        yield self.indices_b
