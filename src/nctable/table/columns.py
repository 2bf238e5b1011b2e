"""
NC Table Column Definitions

A table column is one of a closed set of kinds. Every kind reads its value for
a row from the row's coordinate tuple:

- INDEX: integer position along a dimension without a coordinate variable
- COORDINATE: resolved label of a dimension with a coordinate variable
- DATA: single element of a variable
- TIME: single element of a time variable, decoded to ISO 8601
- FIXED_STRING: single string of a character array variable
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Dict, Optional, Sequence, Tuple

import numpy as np

from ..core.config import DEFAULT_CALENDAR, INDEX_DTYPE, STRING_ENCODING
from ..core.core_types import CellValue, Origin, Shape, SourceVariable
from ..coordinates.resolver import decode_char_array
from ..coordinates.time_handler import decode_time_value

# ============================================================================
# Column Model
# ============================================================================

class ColumnKind(Enum):
    INDEX = "index"
    COORDINATE = "coordinate"
    DATA = "data"
    TIME = "time"
    FIXED_STRING = "fixed_string"


@dataclass(frozen=True)
class Column:
    """
    Table column.

    Attributes:
        kind: Column kind, selects how values are read
        label: Column label, unique within a table
        dtype: Declared type of the column values
        axes: Table axis of each public variable dimension
        shape: Read shape along each variable dimension
        variable: Backing variable (None for INDEX columns)
        values: Resolved labels (COORDINATE columns only)
        units: Time units (TIME columns only)
        calendar: Time calendar (TIME columns only)
        encoding: Text encoding (FIXED_STRING columns only)
    """
    kind: ColumnKind
    label: str
    dtype: type
    axes: Tuple[int, ...]
    shape: Shape = ()
    variable: Optional[SourceVariable] = None
    values: Tuple = field(default=(), compare=False, repr=False)
    units: Optional[str] = None
    calendar: Optional[str] = None
    encoding: str = STRING_ENCODING

    def origin(self, coords: Sequence[int]) -> Origin:
        """
        Translate a table coordinate tuple to a read origin for the variable.

        This is used in conjunction with ``shape`` to define the array section
        required to read a single value.
        """
        origin = tuple(coords[axis] for axis in self.axes)
        if self.kind is ColumnKind.FIXED_STRING:
            origin += (0,)
        return origin

    def read(self, source, coords: Sequence[int]) -> CellValue:
        """
        Get the column value at a table coordinate.

        Args:
            source: Open data source holding the column variable
            coords: Table coordinate tuple of the row

        Returns:
            CellValue: Column value
        """
        return _READERS[self.kind](self, source, coords)

# ============================================================================
# Readers
# ============================================================================

def _read_index(column: Column, source, coords: Sequence[int]) -> CellValue:
    return INDEX_DTYPE(coords[column.axes[0]])


def _read_coordinate(column: Column, source, coords: Sequence[int]) -> CellValue:
    return column.values[coords[column.axes[0]]]


def _read_element(column: Column, source, coords: Sequence[int]) -> np.ndarray:
    return source.read_slice(column.variable, column.origin(coords), column.shape)


def _read_data(column: Column, source, coords: Sequence[int]) -> CellValue:
    return _read_element(column, source, coords).reshape(-1)[0]


def _read_time(column: Column, source, coords: Sequence[int]) -> CellValue:
    return decode_time_value(_read_element(column, source, coords), column.units, column.calendar)


def _read_fixed_string(column: Column, source, coords: Sequence[int]) -> CellValue:
    return decode_char_array(_read_element(column, source, coords), column.encoding)


_READERS: Dict[ColumnKind, Callable[[Column, object, Sequence[int]], CellValue]] = {
    ColumnKind.INDEX: _read_index,
    ColumnKind.COORDINATE: _read_coordinate,
    ColumnKind.DATA: _read_data,
    ColumnKind.TIME: _read_time,
    ColumnKind.FIXED_STRING: _read_fixed_string,
}

# ============================================================================
# Column Construction
# ============================================================================

def column_kind(variable: SourceVariable) -> ColumnKind:
    """Select the column kind for a variable."""
    if variable.is_time:
        return ColumnKind.TIME
    if variable.is_array_string:
        return ColumnKind.FIXED_STRING
    return ColumnKind.DATA


def value_type(variable: SourceVariable) -> type:
    """Declared value type of a variable column."""
    if column_kind(variable) is ColumnKind.DATA:
        return variable.dtype.type
    return str


def index_column(label: str, axis: int) -> Column:
    """Create an integer index column for a dimension without a coordinate variable."""
    return Column(ColumnKind.INDEX, label, INDEX_DTYPE, (axis,))


def coordinate_column(variable: SourceVariable, axis: int, values: Sequence) -> Column:
    """Create a column of resolved coordinate labels."""
    return Column(
        ColumnKind.COORDINATE, variable.name, value_type(variable), (axis,),
        variable=variable, values=tuple(values)
    )


def variable_column(
    variable: SourceVariable,
    axes: Sequence[int],
    default_calendar: str = DEFAULT_CALENDAR,
    encoding: str = STRING_ENCODING
) -> Column:
    """
    Create a column reading a variable one element at a time.

    Args:
        variable: Backing variable
        axes: Table axis of each public variable dimension
        default_calendar: Calendar if a time variable does not declare one
        encoding: Text encoding of character array strings
    """
    kind = column_kind(variable)
    if kind is ColumnKind.FIXED_STRING:
        # The string length dimension is read in full.
        shape = (1,) * (variable.rank - 1) + (variable.string_length,)
    else:
        shape = (1,) * variable.rank
    if kind is ColumnKind.TIME:
        return Column(
            kind, variable.name, str, tuple(axes), shape, variable,
            units=variable.units, calendar=variable.calendar or default_calendar
        )
    return Column(kind, variable.name, value_type(variable), tuple(axes), shape, variable, encoding=encoding)
