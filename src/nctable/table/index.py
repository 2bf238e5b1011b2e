"""
NC Table Row Index Space

This module maps flattened table rows to multi-dimensional coordinates. Rows
enumerate the cartesian product of the dimension extents in row-major order
(last dimension varies fastest). Coordinates are computed on demand, so the
index never materializes the product.
"""

from itertools import product
from typing import Iterator, Sequence, Tuple

from ..core.core_types import Dimension, Origin


def cartesian_product(*extents: int) -> Iterator[Origin]:
    """
    Enumerate every coordinate tuple for the given extents.

    Examples:
        cartesian_product(2, 2) -> (0, 0), (0, 1), (1, 0), (1, 1)
    """
    return product(*(range(n) for n in extents))


class RowIndex:
    """
    Ordered sequence of per-dimension coordinate tuples, one per table row.

    An index without dimensions has a single row (a scalar table); an index
    with an empty dimension has no rows.
    """

    def __init__(self, extents: Sequence[int]):
        self.extents: Tuple[int, ...] = tuple(int(n) for n in extents)
        if any(n < 0 for n in self.extents):
            raise ValueError(f"Extents must be non-negative: {self.extents}")
        strides = []
        stride = 1
        for n in reversed(self.extents):
            strides.append(stride)
            stride *= n
        self.strides: Tuple[int, ...] = tuple(reversed(strides))
        self._size = stride

    @classmethod
    def from_dimensions(cls, dimensions: Sequence[Dimension]) -> "RowIndex":
        return cls([dim.length for dim in dimensions])

    def __len__(self) -> int:
        return self._size

    def __getitem__(self, row: int) -> Origin:
        """Translate a flattened row number to a coordinate tuple."""
        if not 0 <= row < self._size:
            raise IndexError(f"Row {row} out of range for {self._size} rows")
        return tuple((row // stride) % n for stride, n in zip(self.strides, self.extents))

    def __iter__(self) -> Iterator[Origin]:
        return cartesian_product(*self.extents)

    def __repr__(self) -> str:
        return f"RowIndex(extents={self.extents}, rows={self._size})"
