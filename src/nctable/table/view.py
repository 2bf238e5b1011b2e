"""
NC Table View

This module presents n-dimensional variables as a two-dimensional table where
variables are mapped to columns in flattened row-major order. Values are read
from the data source one cell at a time.
"""

from enum import Enum
from typing import Dict, Iterator, List, Optional, Tuple, Union

from ..core.core_types import CellValue, Dimension, TableOptions
from ..core.exceptions import (
    IncongruentVariableError, SourceClosedError, UnknownColumnError
)
from ..core.logging_config import get_logger
from ..coordinates.resolver import CoordinateResolver
from .columns import Column, coordinate_column, index_column, variable_column
from .congruence import axis_map, check_congruence
from .index import RowIndex

logger = get_logger('table.view')


class TableState(Enum):
    EMPTY = "empty"
    BOUND = "bound"


class TableView:
    """
    Flattened table view of congruent variables.

    The first variable added fixes the table dimensions. A coordinate column
    is created for each dimension, followed by one column per variable. Every
    later variable must have the same set of dimensions, in any order.

    A failed ``add_variable`` call leaves the view as it was before the call.

    Examples:
        >>> view = TableView(source)
        >>> view.add_variables("pr", "tas")
        >>> view.labels
        ['time', 'lat', 'lon', 'pr', 'tas']
        >>> view.value(0, 0)
        '2000-01-01T00:00:00'
    """

    def __init__(self, source, options: Optional[TableOptions] = None):
        """
        Initialize an empty view.

        Args:
            source: Open data source, owned by the caller
            options: Decoding options
        """
        self.source = source
        self.options = options or TableOptions()
        self._resolver = CoordinateResolver(
            source, self.options.default_calendar, self.options.string_encoding
        )
        self._dimensions: Tuple[Dimension, ...] = ()
        self._columns: List[Column] = []
        self._index: Optional[RowIndex] = None

    # ------------------------------------------------------------------
    # Building
    # ------------------------------------------------------------------

    def add_variable(self, name: str) -> None:
        """
        Add a variable as a new column if it does not already exist in the table.

        Args:
            name: Full variable name

        Raises:
            UnknownVariableError: If the source has no such variable
            IncongruentVariableError: If the variable dimensions differ from the table
            InvalidCoordinateVariableError: If a dimension coordinate variable is not 1-D
        """
        if name in self.labels:
            # Includes variables already present as coordinate columns.
            return
        variable = self.source.get_variable(name)
        logger.debug("Adding variable %s from %s", name, getattr(self.source, "location", self.source))
        if self._index is None:
            dimensions = variable.public_dimensions
            columns = [self._dimension_column(dim, axis) for axis, dim in enumerate(dimensions)]
            index = RowIndex.from_dimensions(dimensions)
        else:
            check_congruence(self._dimensions, variable, IncongruentVariableError)
            dimensions, columns, index = self._dimensions, list(self._columns), self._index
        if all(column.label != name for column in columns):
            columns.append(variable_column(
                variable, axis_map(dimensions, variable),
                self.options.default_calendar, self.options.string_encoding
            ))
        self._dimensions, self._columns, self._index = dimensions, columns, index

    def add_variables(self, *names: str) -> None:
        """Add several variables in order, stopping at the first failure."""
        for name in names:
            self.add_variable(name)

    def reset(self) -> None:
        """Clear all dimensions, columns and rows."""
        self._dimensions = ()
        self._columns = []
        self._index = None

    def _dimension_column(self, dimension: Dimension, axis: int) -> Column:
        """
        Create the coordinate column for a dimension. If there is no coordinate
        variable for the dimension, the column is an integer index.
        """
        variable = self._resolver.coordinate_variable(dimension)
        if variable is None:
            return index_column(dimension.name, axis)
        return coordinate_column(variable, axis, self._resolver.resolve(dimension))

    # ------------------------------------------------------------------
    # Table Shape
    # ------------------------------------------------------------------

    @property
    def state(self) -> TableState:
        return TableState.EMPTY if self._index is None else TableState.BOUND

    @property
    def dimensions(self) -> Tuple[Dimension, ...]:
        return self._dimensions

    @property
    def labels(self) -> List[str]:
        return [column.label for column in self._columns]

    @property
    def row_count(self) -> int:
        return 0 if self._index is None else len(self._index)

    @property
    def column_count(self) -> int:
        return len(self._columns)

    def column(self, key: Union[int, str]) -> Column:
        """
        Get a column by position or label.

        Raises:
            IndexError: If the position is out of range
            UnknownColumnError: If no column has the label
        """
        if isinstance(key, str):
            for column in self._columns:
                if column.label == key:
                    return column
            raise UnknownColumnError(key, self.labels)
        return self._columns[self._check_column(key)]

    def column_label(self, column: int) -> str:
        return self._columns[self._check_column(column)].label

    def column_type(self, column: int) -> type:
        return self._columns[self._check_column(column)].dtype

    # ------------------------------------------------------------------
    # Values
    # ------------------------------------------------------------------

    def value(self, row: int, column: int) -> CellValue:
        """
        Get the value of a table cell.

        Args:
            row: Flattened row number
            column: Column position

        Returns:
            CellValue: Cell value

        Raises:
            IndexError: If the cell is outside of the table
            SourceClosedError: If the data source has been closed
        """
        col = self._columns[self._check_column(column)]
        coords = self._coords(row)
        return col.read(self.source, coords)

    def row(self, row: int) -> List[CellValue]:
        """Get all values of a table row."""
        coords = self._coords(row)
        return [column.read(self.source, coords) for column in self._columns]

    def records(self, start: int = 0, stop: Optional[int] = None) -> Iterator[Dict[str, CellValue]]:
        """
        Iterate over table rows as {label: value} records.

        Rows are read one at a time, so the caller can stop between rows.
        """
        stop = self.row_count if stop is None else min(stop, self.row_count)
        labels = self.labels
        for row in range(max(start, 0), stop):
            yield dict(zip(labels, self.row(row)))

    def _coords(self, row: int) -> Tuple[int, ...]:
        if self.source.is_closed:
            raise SourceClosedError(f"read row {row}")
        if not 0 <= row < self.row_count:
            raise IndexError(f"Row {row} out of range for {self.row_count} rows")
        return self._index[row]

    def _check_column(self, column: int) -> int:
        if not 0 <= column < len(self._columns):
            raise IndexError(f"Column {column} out of range for {len(self._columns)} columns")
        return column

    def __repr__(self) -> str:
        return f"<TableView {self.labels} rows={self.row_count}>"
