"""
NC Table Time Coordinate Processing

This module converts numeric time offsets stored as '<unit> since <reference>'
into ISO 8601 timestamps using cftime calendar arithmetic.

See: https://www.unidata.ucar.edu/software/netcdf/time/recs.html
"""

from typing import Iterable, List, Optional, Tuple
import cftime
import numpy as np

from ..core.config import TIME_UNITS_REGEX
from ..core.exceptions import ParameterError, TimeDecodingError

# ============================================================================
# Units Parsing
# ============================================================================

def parse_time_units(units: Optional[str]) -> Optional[Tuple[str, str]]:
    """
    Split time units into the unit and the reference timestamp.

    Examples:
        'Days since 2000-01-01' -> ('days', '2000-01-01')

    Args:
        units: Units attribute value

    Returns:
        Optional[Tuple[str, str]]: (unit, reference), or None if the units do
        not describe a time offset
    """
    if units is None:
        return None
    match = TIME_UNITS_REGEX.match(units)
    if not match:
        return None
    return match.group(1).lower(), match.group(2)

def is_time_units(units: Optional[str]) -> bool:
    """Check if units have the form '<unit> since <timestamp>'."""
    return parse_time_units(units) is not None

def normalize_time_units(units: str) -> str:
    """Rewrite time units in the canonical lower-case form cftime expects."""
    parsed = parse_time_units(units)
    if parsed is None:
        raise ParameterError("units", units, "Expected the form '<unit> since <timestamp>'")
    return "{} since {}".format(*parsed)

# ============================================================================
# Time Decoding
# ============================================================================

def decode_time_value(value, units: str, calendar: str) -> str:
    """
    Convert a numeric time offset to an ISO 8601 timestamp.

    Integral offsets are passed to the calendar as integers, everything else
    as floating point. Files are read without CF decoding, so fill values and
    NaN cells arrive here unmasked and are rejected.

    Args:
        value: Raw offset (Python or numpy scalar, or 1-element array)
        units: Units of the form '<unit> since <timestamp>'
        calendar: cftime calendar name

    Returns:
        str: ISO 8601 timestamp, e.g. '2000-01-01T00:00:00'

    Raises:
        TimeDecodingError: If the units or calendar are not understood, or the
        offset has no date in the calendar
    """
    if not is_time_units(units):
        raise TimeDecodingError(units, calendar, "Expected the form '<unit> since <timestamp>'")
    raw = np.asarray(value).reshape(-1)[0]
    if np.issubdtype(raw.dtype, np.integer):
        offset = int(raw)
    else:
        offset = float(raw)
        if not np.isfinite(offset):
            raise TimeDecodingError(units, calendar, f"Offset {offset} is not a finite number")
    try:
        date = cftime.num2date(offset, normalize_time_units(units), calendar=calendar)
    except (ValueError, TypeError, OverflowError) as e:
        raise TimeDecodingError(units, calendar, f"Cannot decode offset {offset}: {e}") from e
    return date.isoformat()

def decode_time_values(values: Iterable, units: str, calendar: str) -> List[str]:
    """Convert a sequence of time offsets to ISO 8601 timestamps."""
    return [decode_time_value(value, units, calendar) for value in values]
