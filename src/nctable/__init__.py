"""
NC Table - Flattened table views of gridded scientific data.

This package presents n-dimensional variables from self-describing gridded
data files (netCDF) as a single two-dimensional table with one row per
element of the cartesian product of the variable dimensions. Values are read
lazily, one cell at a time, so the full dataset is never loaded.

Key Features:
- Coordinate columns for every dimension (decoded time and string labels)
- Congruence checks between variables with reordered dimensions
- ISO 8601 decoding of time variables in any cftime calendar
- Fixed-length character array strings
- Fixed-size paging over large tables

Quick Start:
    >>> import nctable
    >>> source, view, pager = nctable.open_table("/path/to/file.nc", ["pr", "tas"])
    >>> view.labels
    ['time', 'lat', 'lon', 'pr', 'tas']
    >>> view.value(0, 0)
    '2000-01-01T00:00:00'
    >>> source.close()
"""

__version__ = "1.0.0"
__author__ = "NC Table Development Team"

# Import main interface functions
from .main import (
    open_table,
    load_table,
)

# Import data source
from .io.source import NetcdfSource, open_source

# Import table classes
from .table import (
    TableView,
    TableState,
    Pager,
    Column,
    ColumnKind,
    RowIndex,
    is_congruent,
    check_congruence,
)

from .coordinates import CoordinateResolver, decode_time_value

# Import data classes for structured interface
from .core.core_types import (
    Dimension,
    SourceVariable,
    TableOptions,
)

# Import configuration for advanced users
from .core.config import (
    DEFAULT_CALENDAR,
    KNOWN_CALENDARS,
    DEFAULT_PAGE_SIZE,
)

# Import exceptions for error handling
from .core.exceptions import (
    NcTableError,
    SourceOpenError,
    SourceClosedError,
    UnknownVariableError,
    DimensionMismatchError,
    IncongruentVariableError,
    IncompatibleDimensionsError,
    InvalidCoordinateVariableError,
    TimeDecodingError,
    UnknownColumnError,
    ParameterError,
)

# Import logging configuration
from .core.logging_config import setup_logging, set_log_level

from .utils import describe_variable, get_source_info, get_view_info

__all__ = [
    # Version info
    '__version__',

    # Main interface functions
    'open_table',
    'load_table',
    'open_source',
    'NetcdfSource',

    # Table classes
    'TableView',
    'TableState',
    'Pager',
    'Column',
    'ColumnKind',
    'RowIndex',
    'is_congruent',
    'check_congruence',
    'CoordinateResolver',
    'decode_time_value',

    # Data classes
    'Dimension',
    'SourceVariable',
    'TableOptions',

    # Configuration constants
    'DEFAULT_CALENDAR',
    'KNOWN_CALENDARS',
    'DEFAULT_PAGE_SIZE',

    # Exception classes
    'NcTableError',
    'SourceOpenError',
    'SourceClosedError',
    'UnknownVariableError',
    'DimensionMismatchError',
    'IncongruentVariableError',
    'IncompatibleDimensionsError',
    'InvalidCoordinateVariableError',
    'TimeDecodingError',
    'UnknownColumnError',
    'ParameterError',

    # Logging configuration
    'setup_logging',
    'set_log_level',

    # Information utilities
    'describe_variable',
    'get_source_info',
    'get_view_info',
]

# Package metadata
__doc_format__ = "restructuredtext"
