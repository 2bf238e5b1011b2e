"""
NC Table Information Utilities

This module provides functions for describing data sources, variables and
table views as plain text or dictionaries.
"""

from typing import Dict, List

from ..core.core_types import SourceVariable


# ============================================================================
# Variable Descriptions
# ============================================================================

def type_string(variable: SourceVariable) -> str:
    """
    Describe the data type of a variable.

    Examples:
        char array string of length 8 -> 'char[8]'
        time variable stored as doubles -> 'time<float64>'
    """
    if variable.is_array_string:
        text = f"char[{variable.string_length}]"
    else:
        text = variable.dtype.name
    return f"time<{text}>" if variable.is_time else text


def dimension_labels(variable: SourceVariable) -> List[str]:
    """Describe the public dimensions of a variable, e.g. 'time[4] (unlimited)'."""
    labels = []
    for dim in variable.public_dimensions:
        label = f"{dim.name}[{dim.length}]"
        labels.append(f"{label} (unlimited)" if dim.unlimited else label)
    return labels


def attribute_labels(variable: SourceVariable) -> List[str]:
    """Variable attributes as sorted 'name: value' strings."""
    return [f"{key}: {variable.attrs[key]}" for key in sorted(variable.attrs)]


def describe_variable(variable: SourceVariable) -> str:
    """
    One-line variable summary.

    Examples:
        >>> describe_variable(source.get_variable("tas"))
        'tas: float32[1, 128, 256]'
    """
    shape = ", ".join(str(dim.length) for dim in variable.public_dimensions)
    return f"{variable.local_name}: {type_string(variable)}[{shape}]"


# ============================================================================
# Source and Table Information
# ============================================================================

def get_source_info(source) -> Dict:
    """
    Get schema information about an open data source.

    Returns:
        Dict: Location, dimensions and per-variable descriptions
    """
    return {
        'location': source.location,
        'dimensions': {
            dim.name: {'length': dim.length, 'unlimited': dim.unlimited}
            for dim in source.dimensions
        },
        'variables': {
            name: {
                'summary': describe_variable(variable),
                'type': type_string(variable),
                'dimensions': dimension_labels(variable),
                'attributes': attribute_labels(variable),
                'description': variable.description,
            }
            for name, variable in sorted(source.variables.items())
        },
    }


def get_view_info(view) -> Dict:
    """Get the layout of a table view."""
    return {
        'state': view.state.value,
        'dimensions': [dim.name for dim in view.dimensions],
        'columns': [
            {'label': view.column_label(i), 'type': view.column_type(i).__name__,
             'kind': view.column(i).kind.value}
            for i in range(view.column_count)
        ],
        'row_count': view.row_count,
    }
