"""Assign shared lag indices to two overlapping, equally spaced series."""

from __future__ import annotations

import logging
from typing import Tuple

import numpy as np

from ..errors import AssignmentInvariantError
from ..types import IntervalMode, LagIndices, TimestampSequence
from .spacing import compute_gaps, verify_spacing
from .validate import validate_series

logger = logging.getLogger(__name__)


def _shifted_indices(length: int, zero_at: int) -> np.ndarray:
    """Return ``length`` consecutive integers with 0 at position ``zero_at``."""

    return np.arange(-zero_at, length - zero_at, dtype=np.int64)


def lag_indices(
    series_a: TimestampSequence,
    series_b: TimestampSequence,
    interval: IntervalMode | str,
) -> LagIndices:
    """Compute lag indices and describe how they were anchored.

    The checks run in a fixed order: input types and overlap, then the
    interval flag, then the spacing of ``series_a``, ``series_b`` and their
    agreement.  The base series is ``series_a`` when ``series_b`` contains
    its first timestamp, otherwise ``series_b``.

    Parameters
    ----------
    series_a, series_b:
        Ordered timestamp sequences, equally spaced under ``interval``.
    interval:
        One of ``"annual"``, ``"monthly"``, ``"daily"`` or ``"exact"``
        (case-insensitive) or an :class:`IntervalMode`.

    Returns
    -------
    LagIndices
        Index arrays for both series plus the base, anchor and step.
    """

    a, b = validate_series(series_a, series_b)
    mode = IntervalMode.parse(interval)
    step = verify_spacing(compute_gaps(a, mode), compute_gaps(b, mode))

    hits = np.flatnonzero(b == a[0])
    if hits.size:
        base = "a"
        anchor = a[0]
        indices_a = np.arange(a.size, dtype=np.int64)
        indices_b = _shifted_indices(b.size, int(hits[0]))
    else:
        hits = np.flatnonzero(a == b[0])
        if not hits.size:
            raise AssignmentInvariantError(
                "neither series starts inside the other although they overlap"
            )
        base = "b"
        anchor = b[0]
        indices_a = _shifted_indices(a.size, int(hits[0]))
        indices_b = np.arange(b.size, dtype=np.int64)

    logger.debug(
        "Anchored %s-mode lag indices at %s (base series_%s, step %s)",
        mode.value,
        anchor,
        base,
        step,
    )
    return LagIndices(
        indices_a=indices_a,
        indices_b=indices_b,
        base=base,
        anchor=anchor,
        step=step,
    )


def assign_lag_indices(
    series_a: TimestampSequence,
    series_b: TimestampSequence,
    interval: IntervalMode | str,
) -> Tuple[np.ndarray, np.ndarray]:
    """Return ``(indices_a, indices_b)`` with 0 at the first shared timestamp.

    See :func:`lag_indices` for the full description.
    """

    result = lag_indices(series_a, series_b, interval)
    return result.indices_a, result.indices_b
