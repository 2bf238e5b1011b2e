"""
NC Table Coordinate Handling

This package resolves dimension labels and decodes time coordinates.
"""

from .time_handler import (
    parse_time_units,
    is_time_units,
    normalize_time_units,
    decode_time_value,
    decode_time_values,
)

from .resolver import (
    CoordinateResolver,
    decode_char_array,
)

__all__ = [
    # Time coordinate functions
    "parse_time_units",
    "is_time_units",
    "normalize_time_units",
    "decode_time_value",
    "decode_time_values",
    # Coordinate resolution
    "CoordinateResolver",
    "decode_char_array",
]
