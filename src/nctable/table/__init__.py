"""
NC Table Views

This package maps n-dimensional variables to a flattened, paged table.
"""

from .index import RowIndex, cartesian_product
from .congruence import is_congruent, check_congruence, axis_map
from .columns import (
    Column,
    ColumnKind,
    column_kind,
    index_column,
    coordinate_column,
    variable_column,
)
from .view import TableView, TableState
from .paging import Pager

__all__ = [
    "RowIndex",
    "cartesian_product",
    "is_congruent",
    "check_congruence",
    "axis_map",
    "Column",
    "ColumnKind",
    "column_kind",
    "index_column",
    "coordinate_column",
    "variable_column",
    "TableView",
    "TableState",
    "Pager",
]
