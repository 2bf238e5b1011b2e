"""
NC Table Coordinate Resolution

This module produces the ordered label values for a dimension: decoded values
of its coordinate variable when there is one, otherwise the integer indexes
along the dimension.
"""

from typing import List, Optional

import numpy as np

from ..core.config import DEFAULT_CALENDAR, STRING_ENCODING
from ..core.core_types import Dimension, SourceVariable
from ..core.exceptions import InvalidCoordinateVariableError
from ..core.logging_config import get_logger
from .time_handler import decode_time_values

logger = get_logger('coordinates.resolver')

# ============================================================================
# Character Arrays
# ============================================================================

def decode_char_array(chars: np.ndarray, encoding: str = STRING_ENCODING) -> str:
    """
    Convert a slice of a character array variable to text.

    Padding characters are kept, so the result has the declared string length
    for single-byte text.
    """
    return np.ascontiguousarray(chars).tobytes().decode(encoding, errors="replace")

# ============================================================================
# Coordinate Resolver
# ============================================================================

class CoordinateResolver:
    """
    Resolve dimension label values from a data source.

    Args:
        source: Open data source
        default_calendar: Calendar for time variables without a 'calendar' attribute
        string_encoding: Text encoding of character array strings
    """

    def __init__(self, source, default_calendar: str = DEFAULT_CALENDAR,
                 string_encoding: str = STRING_ENCODING):
        self.source = source
        self.default_calendar = default_calendar
        self.string_encoding = string_encoding

    def coordinate_variable(self, dimension: Dimension) -> Optional[SourceVariable]:
        """
        Find the coordinate variable for a dimension.

        A coordinate variable shares the dimension's name and has the
        dimension as its only public dimension.

        Returns:
            Optional[SourceVariable]: Coordinate variable, or None if the
            dimension only has integer indexes

        Raises:
            InvalidCoordinateVariableError: If the namesake variable does not have a rank of 1
        """
        variable = self.source.find_variable(dimension.name)
        if variable is None:
            return None
        public = variable.public_dimensions
        if len(public) != 1:
            raise InvalidCoordinateVariableError(variable.name, len(public))
        if public[0] != dimension:
            logger.debug("Variable %s is not defined along %s", variable.name, dimension.name)
            return None
        return variable

    def resolve(self, dimension: Dimension) -> List:
        """
        Get the ordered label values for a dimension.

        Args:
            dimension: Dimension to resolve

        Returns:
            List: One value per dimension element; ISO 8601 strings for time
            coordinates, text for character array coordinates, raw values
            otherwise, or integer indexes if there is no coordinate variable
        """
        variable = self.coordinate_variable(dimension)
        if variable is None:
            return list(range(dimension.length))
        logger.debug("Resolving %s from coordinate variable %s", dimension.name, variable.name)
        if variable.is_array_string:
            return [self.read_string(variable, (i,)) for i in range(dimension.length)]
        values = self.source.read_slice(variable, (0,), (dimension.length,))
        if variable.is_time:
            calendar = self.calendar_for(variable)
            return decode_time_values(values, variable.units, calendar)
        return list(values)

    def calendar_for(self, variable: SourceVariable) -> str:
        """Calendar declared by a variable, or the resolver default."""
        return variable.calendar or self.default_calendar

    def read_string(self, variable: SourceVariable, origin) -> str:
        """Read one string from a character array variable."""
        shape = (1,) * (variable.rank - 1) + (variable.string_length,)
        chars = self.source.read_slice(variable, tuple(origin) + (0,), shape)
        return decode_char_array(chars, self.string_encoding)
