"""
NC Table Utilities

This package provides descriptive helpers for data sources, variables and views.
"""

from .info import (
    type_string,
    dimension_labels,
    attribute_labels,
    describe_variable,
    get_source_info,
    get_view_info,
)

__all__ = [
    "type_string",
    "dimension_labels",
    "attribute_labels",
    "describe_variable",
    "get_source_info",
    "get_view_info",
]
