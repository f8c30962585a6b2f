import numpy as np
import pytest

from lagindex.core.spacing import (
    GAP_STRATEGIES,
    annual_gaps,
    calendar_months,
    calendar_years,
    compute_gaps,
    daily_gaps,
    exact_gaps,
    monthly_gaps,
    verify_spacing,
)
from lagindex.errors import IrregularSpacingError, SpacingMismatchError, UnknownIntervalError
from lagindex.types import IntervalMode


def dates(*values, unit="D"):
    return np.array(values, dtype=f"datetime64[{unit}]")


def test_every_mode_has_a_strategy():
    assert set(GAP_STRATEGIES) == set(IntervalMode)


def test_calendar_decomposition():
    series = dates("1960-03-01", "2000-01-15", "2001-12-31")
    assert calendar_years(series).tolist() == [1960, 2000, 2001]
    assert calendar_months(series).tolist() == [1960 * 12 + 3, 2000 * 12 + 1, 2001 * 12 + 12]


def test_annual_gaps_same_year_is_zero():
    series = dates("2000-01-01", "2000-07-01", "2002-01-01")
    assert annual_gaps(series).tolist() == [0, 2]


def test_monthly_gaps_cross_year():
    series = dates("2000-11-30", "2000-12-01", "2001-01-31")
    assert monthly_gaps(series).tolist() == [1, 1]


def test_daily_gaps_count_leap_days():
    series = dates("2000-02-28", "2000-03-01", "2001-02-28", "2001-03-01")
    np.testing.assert_allclose(daily_gaps(series), [2.0, 364.0, 1.0])


def test_daily_gaps_keep_time_of_day():
    series = dates("2000-01-01T00", "2000-01-01T12", unit="h")
    np.testing.assert_allclose(daily_gaps(series), [0.5])


def test_exact_gaps():
    series = dates("2000-01-01T00:00", "2000-01-01T00:15", "2000-01-01T00:30", unit="m")
    gaps = exact_gaps(series)
    assert gaps.dtype.kind == "m"
    assert (gaps == np.timedelta64(15, "m")).all()


def test_compute_gaps_dispatch():
    series = dates("2000-01-01", "2000-02-01", "2000-03-01")
    assert compute_gaps(series, "Monthly").tolist() == [1, 1]
    assert compute_gaps(series, IntervalMode.DAILY).tolist() == [31.0, 29.0]
    with pytest.raises(UnknownIntervalError):
        compute_gaps(series, "hourly")
    with pytest.raises(UnknownIntervalError):
        compute_gaps(series, 3)


def test_verify_spacing_returns_step():
    assert verify_spacing(np.array([2, 2]), np.array([2, 2, 2])) == 2
    assert verify_spacing(np.array([], dtype=int), np.array([3])) == 3
    assert verify_spacing(np.array([], dtype=int), np.array([], dtype=int)) is None


def test_verify_spacing_irregular_a_before_b():
    with pytest.raises(IrregularSpacingError) as exc:
        verify_spacing(np.array([1, 1, 2]), np.array([5, 6]))
    assert exc.value.series == "series_a"
    assert exc.value.position == 2


def test_verify_spacing_mismatch():
    with pytest.raises(SpacingMismatchError):
        verify_spacing(np.array([1, 1]), np.array([2, 2]))
