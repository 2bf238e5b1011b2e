"""
NC Table Type Definitions and Data Classes

This module defines all data structures and type aliases used throughout the codebase
for better type safety and code clarity.
"""

from __future__ import annotations
import codecs
from dataclasses import dataclass, field
from typing import Optional, Tuple, Union, Dict, Any, Mapping
import numpy as np

from .config import (
    CHAR_DTYPE_KIND, CHAR_ITEMSIZE, DEFAULT_CALENDAR, GROUP_SEPARATOR,
    KNOWN_CALENDARS, STRING_ENCODING, TIME_NAME_PREFIX, TIME_UNITS_REGEX
)

# ============================================================================
# Type Aliases
# ============================================================================

Origin = Tuple[int, ...]
Shape = Tuple[int, ...]
CellValue = Union[np.generic, str]
Attributes = Mapping[str, Any]

# ============================================================================
# Dimensions
# ============================================================================

@dataclass(frozen=True)
class Dimension:
    """
    Named axis shared by one or more variables.

    Attributes:
        name: Dimension name
        length: Number of elements along the axis
        unlimited: True for a record (unlimited) dimension
    """
    name: str
    length: int
    unlimited: bool = False

    def __post_init__(self):
        """Validate dimension length."""
        if self.length < 0:
            raise ValueError(f"Dimension '{self.name}' length must be non-negative")

# ============================================================================
# Variables
# ============================================================================

@dataclass(frozen=True)
class SourceVariable:
    """
    Read-only description of a variable in a data source.

    The data itself stays in the source; read it with ``source.read_slice``.

    Attributes:
        name: Full variable name
        dimensions: Ordered variable dimensions
        dtype: Stored element type
        attrs: Variable attributes (units, calendar, ...)
    """
    name: str
    dimensions: Tuple[Dimension, ...]
    dtype: np.dtype
    attrs: Dict[str, Any] = field(default_factory=dict, compare=False, hash=False)

    @property
    def shape(self) -> Shape:
        return tuple(dim.length for dim in self.dimensions)

    @property
    def rank(self) -> int:
        return len(self.dimensions)

    @property
    def local_name(self) -> str:
        """Variable name without group prefixes."""
        return self.name.split(GROUP_SEPARATOR)[-1]

    @property
    def units(self) -> Optional[str]:
        units = self.attrs.get("units")
        return None if units is None else str(units)

    @property
    def calendar(self) -> Optional[str]:
        """Calendar attribute, or None if the variable does not declare one."""
        calendar = self.attrs.get("calendar")
        return None if calendar is None else str(calendar).lower()

    @property
    def description(self) -> Optional[str]:
        text = self.attrs.get("description", self.attrs.get("long_name"))
        return None if text is None else str(text)

    @property
    def is_char(self) -> bool:
        return self.dtype.kind == CHAR_DTYPE_KIND and self.dtype.itemsize == CHAR_ITEMSIZE

    @property
    def is_array_string(self) -> bool:
        """
        True if variable appears to be a character array string.

        Prior to netCDF4, strings had to be stored as a 2D CHAR array where the
        second dimension extends along the length of each string.
        """
        return self.is_char and self.rank == 2

    @property
    def string_length(self) -> Optional[int]:
        return self.shape[-1] if self.is_array_string else None

    @property
    def public_dimensions(self) -> Tuple[Dimension, ...]:
        """Dimensions excluding the private length dimension of a character array string."""
        return self.dimensions[:-1] if self.is_array_string else self.dimensions

    @property
    def is_time(self) -> bool:
        """
        True if variable appears to be a time variable.

        The variable is assumed to contain time values if it is a numeric
        variable whose name starts with 'time' and has a 'units' attribute of
        the form '<units> since <timestamp>'.
        """
        units = self.units
        return (
            self.local_name.startswith(TIME_NAME_PREFIX)
            and np.issubdtype(self.dtype, np.number)
            and units is not None
            and TIME_UNITS_REGEX.match(units) is not None
        )

# ============================================================================
# Table Options
# ============================================================================

@dataclass
class TableOptions:
    """
    Decoding options for a table view.

    Attributes:
        default_calendar: Calendar for time variables without a 'calendar' attribute
        string_encoding: Text encoding of character array strings
    """
    default_calendar: str = DEFAULT_CALENDAR
    string_encoding: str = STRING_ENCODING

    def __post_init__(self):
        """Validate options."""
        self.default_calendar = self.default_calendar.lower()
        if self.default_calendar not in KNOWN_CALENDARS:
            raise ValueError(
                f"Unknown calendar '{self.default_calendar}'; expected one of {', '.join(KNOWN_CALENDARS)}"
            )
        codecs.lookup(self.string_encoding)
