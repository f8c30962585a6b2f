"""Gap computation and spacing checks for the four interval modes.

Each mode has its own strategy returning the ``n - 1`` consecutive gaps of
a ``datetime64`` series:

* ``annual`` counts calendar years only, so month and day are ignored.
* ``monthly`` encodes each timestamp as ``year * 12 + month``.
* ``daily`` measures elapsed days, so leap days and month lengths count.
* ``exact`` returns the raw ``timedelta64`` differences.
"""

from __future__ import annotations

from typing import Any, Callable, Dict, Optional

import numpy as np

from ..errors import IrregularSpacingError, SpacingMismatchError
from ..types import IntervalMode

GapStrategy = Callable[[np.ndarray], np.ndarray]

_EPOCH_YEAR = 1970


def calendar_years(series: np.ndarray) -> np.ndarray:
    """Return the calendar year of every timestamp."""

    return series.astype("datetime64[Y]").astype(np.int64) + _EPOCH_YEAR


def calendar_months(series: np.ndarray) -> np.ndarray:
    """Return ``year * 12 + month`` (month counted from 1) per timestamp."""

    since_epoch = series.astype("datetime64[M]").astype(np.int64)
    years, month0 = np.divmod(since_epoch, 12)
    return (years + _EPOCH_YEAR) * 12 + month0 + 1


def annual_gaps(series: np.ndarray) -> np.ndarray:
    return np.diff(calendar_years(series))


def monthly_gaps(series: np.ndarray) -> np.ndarray:
    return np.diff(calendar_months(series))


def daily_gaps(series: np.ndarray) -> np.ndarray:
    return np.diff(series) / np.timedelta64(1, "D")


def exact_gaps(series: np.ndarray) -> np.ndarray:
    return np.diff(series)


GAP_STRATEGIES: Dict[IntervalMode, GapStrategy] = {
    IntervalMode.ANNUAL: annual_gaps,
    IntervalMode.MONTHLY: monthly_gaps,
    IntervalMode.DAILY: daily_gaps,
    IntervalMode.EXACT: exact_gaps,
}


def compute_gaps(series: np.ndarray, interval: IntervalMode | str) -> np.ndarray:
    """Return the consecutive gaps of ``series`` under ``interval``.

    Raises :class:`~lagindex.errors.UnknownIntervalError` for an
    unsupported interval flag.
    """

    mode = IntervalMode.parse(interval)
    return GAP_STRATEGIES[mode](series)


def uniform_step(gaps: np.ndarray, label: str) -> Optional[Any]:
    """Return the single step in ``gaps`` or ``None`` if there are no gaps."""

    if gaps.size == 0:
        return None
    step = gaps[0]
    bad = np.flatnonzero(gaps != step)
    if bad.size:
        pos = int(bad[0])
        raise IrregularSpacingError(label, position=pos, expected=step, found=gaps[pos])
    return step


def verify_spacing(gaps_a: np.ndarray, gaps_b: np.ndarray) -> Optional[Any]:
    """Check both gap sequences are constant and equal; return the step.

    A series with a single timestamp has no gaps and takes the step of the
    other series.  ``None`` is returned when neither series has a gap.
    """

    step_a = uniform_step(gaps_a, "series_a")
    step_b = uniform_step(gaps_b, "series_b")
    if step_a is not None and step_b is not None and step_a != step_b:
        raise SpacingMismatchError(step_a, step_b)
    return step_a if step_a is not None else step_b


__all__ = [
    "GAP_STRATEGIES",
    "calendar_years",
    "calendar_months",
    "annual_gaps",
    "monthly_gaps",
    "daily_gaps",
    "exact_gaps",
    "compute_gaps",
    "uniform_step",
    "verify_spacing",
]
