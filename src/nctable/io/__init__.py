"""
NC Table I/O

This package provides read-only access to gridded data files.
"""

from .source import NetcdfSource, open_source

__all__ = [
    "NetcdfSource",
    "open_source",
]
