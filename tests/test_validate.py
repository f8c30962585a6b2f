import numpy as np
import pytest
from datetime import date, datetime

from lagindex.core.validate import as_timestamp_array, common_timestamps, validate_series
from lagindex.errors import InputTypeError, NoOverlapError


def test_datetime64_passthrough():
    arr = np.array(["2000-01-01", "2000-01-02"], dtype="datetime64[D]")
    assert as_timestamp_array(arr) is arr


def test_python_objects_converted():
    arr = as_timestamp_array([date(2000, 1, 1), datetime(2000, 1, 1, 6)])
    assert arr.dtype.kind == "M"
    assert arr[1] - arr[0] == np.timedelta64(6, "h")


@pytest.mark.parametrize(
    "value",
    [
        "2000-01-01",
        42,
        ["2000-01-01", "2000-01-02"],
        [1.0, 2.0],
        [[datetime(2000, 1, 1)]],
        np.zeros((2, 2), dtype="datetime64[D]"),
        np.array([1, 2]),
    ],
)
def test_rejects_non_timestamp_input(value):
    with pytest.raises(InputTypeError) as exc:
        as_timestamp_array(value, "series_a")
    assert isinstance(exc.value, TypeError)
    assert exc.value.name == "series_a"


def test_validate_series_promotes_units():
    a = np.array(["2000-01-01"], dtype="datetime64[D]")
    b = np.array(["2000-01-01T00:00"], dtype="datetime64[m]")
    va, vb = validate_series(a, b)
    assert va.dtype == vb.dtype == np.dtype("datetime64[m]")


def test_validate_series_without_overlap():
    with pytest.raises(NoOverlapError):
        validate_series([datetime(2000, 1, 1)], [datetime(2000, 1, 2)])


def test_common_timestamps_sorted():
    a = np.array(["2000-01-03", "2000-01-01", "2000-01-02"], dtype="datetime64[D]")
    b = np.array(["2000-01-02", "2000-01-03", "2000-01-04"], dtype="datetime64[D]")
    shared = common_timestamps(a, b)
    assert shared.tolist() == [date(2000, 1, 2), date(2000, 1, 3)]
