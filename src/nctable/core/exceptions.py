"""
NC Table Custom Exception Classes

This module defines all custom exception classes for better error handling
and more informative error messages.
"""

from typing import Optional, Sequence
from pathlib import Path

# ============================================================================
# Base Exception
# ============================================================================

class NcTableError(Exception):
    """Base exception class for all NC Table related errors."""

    def __init__(self, message: str, details: Optional[str] = None):
        self.message = message
        self.details = details
        full_message = f"{message}\nDetails: {details}" if details else message
        super().__init__(full_message)

# ============================================================================
# Source Errors
# ============================================================================

class SourceOpenError(NcTableError):
    """Data source could not be opened."""

    def __init__(self, path: Path, reason: str):
        super().__init__(f"Cannot open data source: {path}", reason)
        self.path = path

class SourceClosedError(NcTableError):
    """Operation attempted after the data source was closed."""

    def __init__(self, operation: str):
        super().__init__(f"Cannot {operation}: data source is closed")
        self.operation = operation

class UnknownVariableError(NcTableError):
    """Variables not found in the data source."""

    def __init__(self, missing_variables: Sequence[str], available_variables: Optional[Sequence[str]] = None):
        vars_str = ", ".join(missing_variables)
        super().__init__(
            f"Variables not found: {vars_str}",
            f"Available variables: {', '.join(sorted(available_variables))}" if available_variables else None
        )
        self.missing_variables = list(missing_variables)
        self.available_variables = list(available_variables) if available_variables else None

# ============================================================================
# Dimension Errors
# ============================================================================

class DimensionMismatchError(NcTableError):
    """Variable dimensions do not match the established table dimensions."""

    def __init__(self, variable: str, expected: Sequence[str], actual: Sequence[str]):
        super().__init__(
            f"Dimensions of '{variable}' do not match the table",
            f"Expected {{{', '.join(sorted(expected))}}}, got {{{', '.join(sorted(actual))}}}"
        )
        self.variable = variable
        self.expected = list(expected)
        self.actual = list(actual)

class IncongruentVariableError(DimensionMismatchError):
    """Variable cannot be added to a table with different dimensions."""

class IncompatibleDimensionsError(NcTableError):
    """A variable dimension is missing from the table dimensions.

    This indicates a broken invariant, not a user error.
    """

    def __init__(self, variable: str, dimension: str):
        super().__init__(f"Incompatible dimensions for '{variable}': '{dimension}' is not a table dimension")
        self.variable = variable
        self.dimension = dimension

# ============================================================================
# Coordinate Errors
# ============================================================================

class InvalidCoordinateVariableError(NcTableError):
    """Coordinate variable does not have a rank of 1."""

    def __init__(self, variable: str, rank: int):
        super().__init__(f"Coordinate variable '{variable}' does not have a rank of 1", f"Actual rank: {rank}")
        self.variable = variable
        self.rank = rank

class TimeDecodingError(NcTableError):
    """Time offsets cannot be converted with the given units and calendar."""

    def __init__(self, units: str, calendar: str, reason: str):
        super().__init__(f"Cannot decode time values with units '{units}' ({calendar} calendar)", reason)
        self.units = units
        self.calendar = calendar

# ============================================================================
# Table Errors
# ============================================================================

class UnknownColumnError(NcTableError):
    """Column label not found in the table."""

    def __init__(self, label: str, available_labels: Sequence[str]):
        super().__init__(
            f"Unknown column: {label}",
            f"Available columns: {', '.join(available_labels)}" if available_labels else None
        )
        self.label = label

class ParameterError(NcTableError):
    """Parameter validation errors."""

    def __init__(self, parameter: str, value: str, reason: str):
        super().__init__(f"Invalid parameter '{parameter}': {value}", reason)
        self.parameter = parameter
        self.value = value

# ============================================================================
# Utility Functions
# ============================================================================

def check_variables_availability(requested: Sequence[str], available: Sequence[str]) -> None:
    """Check if all requested variables are available."""
    missing = [v for v in requested if v not in available]
    if missing:
        raise UnknownVariableError(missing, available)
