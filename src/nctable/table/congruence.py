"""
NC Table Congruence Checks

Two variables are congruent if their public dimensions are the same set,
irrespective of order.
"""

from typing import FrozenSet, Iterable, List, Sequence, Type

from ..core.core_types import Dimension, SourceVariable
from ..core.exceptions import DimensionMismatchError, IncompatibleDimensionsError


def dimension_set(dimensions: Iterable[Dimension]) -> FrozenSet[Dimension]:
    return frozenset(dimensions)


def is_congruent(dimensions: Sequence[Dimension], variable: SourceVariable) -> bool:
    """Test if a variable has the given dimensions, irrespective of order."""
    return dimension_set(dimensions) == dimension_set(variable.public_dimensions)


def check_congruence(
    dimensions: Sequence[Dimension],
    variable: SourceVariable,
    error: Type[DimensionMismatchError] = DimensionMismatchError,
) -> None:
    """
    Validate a variable against established dimensions.

    Args:
        dimensions: Established table dimensions
        variable: Candidate variable
        error: DimensionMismatchError subclass to raise

    Raises:
        DimensionMismatchError: If the public dimension sets differ
    """
    if not is_congruent(dimensions, variable):
        raise error(
            variable.name,
            [dim.name for dim in dimensions],
            [dim.name for dim in variable.public_dimensions],
        )


def axis_map(dimensions: Sequence[Dimension], variable: SourceVariable) -> List[int]:
    """
    Map each public variable dimension to its position in the table dimensions.

    Raises:
        IncompatibleDimensionsError: If a variable dimension is not a table dimension
    """
    positions = {dim: axis for axis, dim in enumerate(dimensions)}
    axes = []
    for dim in variable.public_dimensions:
        if dim not in positions:
            raise IncompatibleDimensionsError(variable.name, dim.name)
        axes.append(positions[dim])
    return axes
