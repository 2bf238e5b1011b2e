import numpy as np
import pytest

from nctable.core.core_types import Dimension, SourceVariable
from nctable.core.exceptions import (
    DimensionMismatchError, IncompatibleDimensionsError, IncongruentVariableError
)
from nctable.table.congruence import axis_map, check_congruence, is_congruent

TIME = Dimension("time", 1, unlimited=True)
LAT = Dimension("lat", 3)
LON = Dimension("lon", 4)
STRLEN = Dimension("strlen", 8)


def variable(name, *dims, dtype="f4"):
    return SourceVariable(name, tuple(dims), np.dtype(dtype))


def test_same_dimensions_in_any_order_are_congruent():
    assert is_congruent([TIME, LAT, LON], variable("a", LON, TIME, LAT))


def test_different_dimension_sets_are_not_congruent():
    assert not is_congruent([TIME, LAT, LON], variable("a", LAT, LON))
    assert not is_congruent([LAT, LON], variable("a", TIME, LAT, LON))


def test_dimension_with_same_name_but_other_length_is_not_congruent():
    assert not is_congruent([LAT], variable("a", Dimension("lat", 5)))


def test_string_length_dimension_is_private():
    names = variable("names", LAT, STRLEN, dtype="S1")
    assert names.public_dimensions == (LAT,)
    assert is_congruent([LAT], names)


def test_check_congruence_raises():
    with pytest.raises(DimensionMismatchError) as exc_info:
        check_congruence([TIME, LAT, LON], variable("orog", LAT, LON))
    assert exc_info.value.variable == "orog"
    assert sorted(exc_info.value.expected) == ["lat", "lon", "time"]


def test_axis_map_follows_table_order():
    assert axis_map([TIME, LAT, LON], variable("a", LON, LAT, TIME)) == [2, 1, 0]


def test_axis_map_rejects_unknown_dimension():
    with pytest.raises(IncompatibleDimensionsError):
        axis_map([LAT], variable("a", LON))


def test_check_congruence_raises_requested_error():
    with pytest.raises(IncongruentVariableError):
        check_congruence([TIME, LAT, LON], variable("orog", LAT, LON), IncongruentVariableError)
    check_congruence([TIME, LAT, LON], variable("tas", LON, TIME, LAT), IncongruentVariableError)
