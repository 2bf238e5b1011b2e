import cftime
import numpy as np
import pytest

from nctable.core.exceptions import TimeDecodingError
from nctable.coordinates.time_handler import (
    decode_time_value, decode_time_values, is_time_units, normalize_time_units, parse_time_units
)


def test_parse_time_units():
    assert parse_time_units("days since 2000-01-01") == ("days", "2000-01-01")


def test_parse_time_units_is_case_insensitive():
    assert parse_time_units("Hours SINCE 1970-01-01 00:00:00") == ("hours", "1970-01-01 00:00:00")


@pytest.mark.parametrize("units", [None, "K", "days after 2000-01-01", "since 2000-01-01"])
def test_non_time_units(units):
    assert not is_time_units(units)


def test_normalize_time_units():
    assert normalize_time_units("DAYS Since 2000-01-01") == "days since 2000-01-01"


def test_zero_offset_is_reference_time():
    assert decode_time_value(0, "days since 2000-01-01", "standard") == "2000-01-01T00:00:00"


def test_decoding_matches_calendar_library():
    expected = cftime.num2date(36.25, "days since 1990-06-01", calendar="standard").isoformat()
    assert decode_time_value(np.float64(36.25), "days since 1990-06-01", "standard") == expected


def test_fractional_offset():
    assert decode_time_value(np.array([0.5]), "days since 2000-01-01", "standard") == "2000-01-01T12:00:00"


def test_integral_offset():
    assert decode_time_value(np.int32(36), "hours since 2000-01-01", "standard") == "2000-01-02T12:00:00"


def test_calendar_changes_result():
    assert decode_time_value(59, "days since 2000-01-01", "standard") == "2000-02-29T00:00:00"
    assert decode_time_value(59, "days since 2000-01-01", "noleap") == "2000-03-01T00:00:00"


def test_decode_time_values():
    assert decode_time_values([0, 1], "days since 2000-01-01", "standard") == [
        "2000-01-01T00:00:00", "2000-01-02T00:00:00"
    ]


def test_unknown_unit_raises():
    with pytest.raises(TimeDecodingError):
        decode_time_value(1, "furlongs since 2000-01-01", "standard")


def test_malformed_units_raise():
    with pytest.raises(TimeDecodingError):
        decode_time_value(1, "days after 2000-01-01", "standard")


def test_units_are_normalized_before_decoding():
    assert decode_time_value(1, "DAYS Since 2000-01-01", "standard") == "2000-01-02T00:00:00"


@pytest.mark.parametrize("value", [np.nan, np.inf, np.float32(np.nan)])
def test_non_finite_offset_raises(value):
    with pytest.raises(TimeDecodingError):
        decode_time_value(value, "days since 2000-01-01", "standard")


def test_fill_value_offset_raises():
    with pytest.raises(TimeDecodingError) as exc_info:
        decode_time_value(np.float64(9.969209968386869e36), "days since 2000-01-01", "standard")
    assert exc_info.value.units == "days since 2000-01-01"
