"""
NC Table Data Source

This module wraps an xarray dataset as a read-only array-data source. Files are
opened without CF decoding so that raw stored values (numeric time offsets,
character arrays) reach the table unchanged, and every read is a lazy slice of
the underlying file.
"""

from pathlib import Path
from typing import Dict, Optional, Sequence, Tuple, Union

import numpy as np
import xarray as xr

from ..core.config import DEFAULT_ENGINE
from ..core.core_types import Dimension, SourceVariable
from ..core.exceptions import (
    ParameterError, SourceClosedError, SourceOpenError, UnknownVariableError
)
from ..core.logging_config import get_logger

logger = get_logger('io.source')

# ============================================================================
# Data Source
# ============================================================================

class NetcdfSource:
    """
    Read-only access to the dimensions, variables and data of a dataset.

    The source is exclusively owned by the caller that opened it. Closing it
    invalidates every table built on top of it.
    """

    def __init__(self, dataset: xr.Dataset, location: Optional[str] = None):
        """
        Initialize the source.

        Args:
            dataset: Undecoded dataset
            location: File path or other description used in messages
        """
        self._dataset: Optional[xr.Dataset] = dataset
        self.location = location or "<memory>"
        unlimited = set(dataset.encoding.get("unlimited_dims", ()))
        self._dimensions = tuple(
            Dimension(str(name), int(length), str(name) in unlimited)
            for name, length in dataset.sizes.items()
        )
        by_name = {dim.name: dim for dim in self._dimensions}
        self._variables: Dict[str, SourceVariable] = {
            str(name): SourceVariable(
                name=str(name),
                dimensions=tuple(by_name[str(dim)] for dim in var.dims),
                dtype=var.dtype,
                attrs=dict(var.attrs),
            )
            for name, var in dataset.variables.items()
        }

    @classmethod
    def from_dataset(cls, dataset: xr.Dataset) -> "NetcdfSource":
        """Wrap an in-memory dataset."""
        return cls(dataset)

    # ------------------------------------------------------------------
    # Schema
    # ------------------------------------------------------------------

    @property
    def is_closed(self) -> bool:
        return self._dataset is None

    @property
    def dimensions(self) -> Tuple[Dimension, ...]:
        self._check_open("list dimensions")
        return self._dimensions

    @property
    def variables(self) -> Dict[str, SourceVariable]:
        self._check_open("list variables")
        return dict(self._variables)

    @property
    def attrs(self) -> Dict:
        self._check_open("read global attributes")
        return dict(self._dataset.attrs)

    def find_variable(self, name: str) -> Optional[SourceVariable]:
        """Return the named variable, or None if it does not exist."""
        self._check_open(f"find variable '{name}'")
        return self._variables.get(name)

    def get_variable(self, name: str) -> SourceVariable:
        """
        Return the named variable.

        Raises:
            UnknownVariableError: If the source has no such variable
        """
        variable = self.find_variable(name)
        if variable is None:
            raise UnknownVariableError([name], list(self._variables))
        return variable

    # ------------------------------------------------------------------
    # Data
    # ------------------------------------------------------------------

    def read_slice(
        self,
        variable: SourceVariable,
        origin: Sequence[int],
        shape: Sequence[int]
    ) -> np.ndarray:
        """
        Read a hyperslab of a variable.

        Args:
            variable: Variable to read
            origin: Start index along each variable dimension
            shape: Extent along each variable dimension

        Returns:
            np.ndarray: Raw values with the requested shape

        Raises:
            SourceClosedError: If the source has been closed
            ParameterError: If the window does not fit the variable
        """
        self._check_open(f"read variable '{variable.name}'")
        origin = tuple(int(i) for i in origin)
        shape = tuple(int(n) for n in shape)
        if len(origin) != variable.rank or len(shape) != variable.rank:
            raise ParameterError(
                "origin", str(origin),
                f"'{variable.name}' has rank {variable.rank}, got origin {origin} and shape {shape}"
            )
        for start, count, length in zip(origin, shape, variable.shape):
            if start < 0 or count < 0 or start + count > length:
                raise ParameterError(
                    "origin", str(origin),
                    f"Window {origin}/{shape} is outside of '{variable.name}' {variable.shape}"
                )
        key = tuple(slice(start, start + count) for start, count in zip(origin, shape))
        return np.asarray(self._dataset.variables[variable.name][key].values)

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def close(self) -> None:
        """Release the underlying dataset. Closing twice is harmless."""
        if self._dataset is not None:
            logger.info("Closing data source %s", self.location)
            self._dataset.close()
            self._dataset = None

    def __enter__(self) -> "NetcdfSource":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def __repr__(self) -> str:
        state = "closed" if self.is_closed else "open"
        return f"<NetcdfSource {self.location} ({state})>"

    def _check_open(self, operation: str) -> None:
        if self._dataset is None:
            raise SourceClosedError(operation)

# ============================================================================
# Convenience Functions
# ============================================================================

def open_source(path: Union[str, Path], engine: Optional[str] = DEFAULT_ENGINE) -> NetcdfSource:
    """
    Open a gridded data file as a data source.

    Args:
        path: File path
        engine: xarray backend engine (None lets xarray choose)

    Returns:
        NetcdfSource: Open source, owned by the caller

    Raises:
        SourceOpenError: If the file cannot be opened
    """
    path = Path(path)
    if not path.is_file():
        raise SourceOpenError(path, "File not found")
    logger.info("Opening data source %s", path)
    try:
        dataset = xr.open_dataset(path, decode_cf=False, cache=False, engine=engine)
    except Exception as e:
        raise SourceOpenError(path, str(e)) from e
    return NetcdfSource(dataset, str(path))
