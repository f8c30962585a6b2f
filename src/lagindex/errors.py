"""Exception hierarchy for lagindex.

Every failure raised by the library derives from :class:`LagIndexError`
so callers can catch the whole family at once while still telling the
individual kinds apart.
"""

from __future__ import annotations

from typing import Any


class LagIndexError(ValueError):
    """Base class for all lag index assignment failures."""


class InputTypeError(LagIndexError, TypeError):
    """Raised when an input is not a one-dimensional timestamp sequence."""

    def __init__(self, message: str, *, name: str = "series"):
        self.name = name
        super().__init__(f"{name}: {message}")


class NoOverlapError(LagIndexError):
    """Raised when the two series share no timestamp."""


class UnknownIntervalError(LagIndexError):
    """Raised for an interval flag outside the supported set."""

    def __init__(self, value: Any):
        self.value = value
        super().__init__(
            f"Unrecognized interval {value!r}; expected one of "
            "'annual', 'monthly', 'daily', 'exact'"
        )


class IrregularSpacingError(LagIndexError):
    """Raised when the gaps of a single series are not constant."""

    def __init__(self, series: str, *, position: int, expected: Any, found: Any):
        self.series = series
        self.position = position
        self.expected = expected
        self.found = found
        super().__init__(
            f"spacing in {series} is not constant: gap {position} is {found}, "
            f"expected {expected}"
        )


class SpacingMismatchError(LagIndexError):
    """Raised when both series are regular but at different step sizes."""

    def __init__(self, step_a: Any, step_b: Any):
        self.step_a = step_a
        self.step_b = step_b
        super().__init__(
            f"series_a and series_b must have equal spacing ({step_a} != {step_b})"
        )


class AssignmentInvariantError(LagIndexError):
    """Raised when neither series starts inside the other."""


__all__ = [
    "LagIndexError",
    "InputTypeError",
    "NoOverlapError",
    "UnknownIntervalError",
    "IrregularSpacingError",
    "SpacingMismatchError",
    "AssignmentInvariantError",
]
