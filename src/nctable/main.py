"""
NC Table Main Interface

This module provides the main API functions for building table views from
gridded data files.
"""

import logging
from pathlib import Path
from typing import Optional, Sequence, Tuple, Union

from .core.config import DEFAULT_CALENDAR, DEFAULT_ENGINE, DEFAULT_PAGE_SIZE, STRING_ENCODING
from .core.core_types import TableOptions
from .core.exceptions import check_variables_availability
from .io.source import NetcdfSource, open_source
from .table.paging import Pager
from .table.view import TableView

logger = logging.getLogger('nctable.main')


def load_table(
    source: NetcdfSource,
    variables: Sequence[str],
    *,
    default_calendar: Optional[str] = None,
    string_encoding: Optional[str] = None,
) -> TableView:
    """
    Build a table view of variables from an open source.

    Args:
        source: Open data source
        variables: Congruent variable names, in column order
        default_calendar: Calendar for time variables without a 'calendar' attribute
        string_encoding: Text encoding of character array strings

    Returns:
        TableView: Table with coordinate columns followed by variable columns
    """
    options = TableOptions(
        default_calendar=default_calendar or DEFAULT_CALENDAR,
        string_encoding=string_encoding or STRING_ENCODING,
    )
    check_variables_availability(list(variables), list(source.variables))
    view = TableView(source, options)
    view.add_variables(*variables)
    logger.debug("Loaded %d columns and %d rows", view.column_count, view.row_count)
    return view


def open_table(
    path: Union[str, Path],
    variables: Sequence[str],
    *,
    engine: Optional[str] = DEFAULT_ENGINE,
    default_calendar: Optional[str] = None,
    page_size: Optional[int] = None,
) -> Tuple[NetcdfSource, TableView, Pager]:
    """
    Open a file and build a paged table view of its variables.

    The caller owns the returned source and must close it; closing it
    invalidates the view.

    Args:
        path: File path
        variables: Congruent variable names, in column order
        engine: xarray backend engine
        default_calendar: Calendar for time variables without a 'calendar' attribute
        page_size: Rows per page

    Returns:
        Tuple[NetcdfSource, TableView, Pager]: Source, view and pager

    Examples:
        >>> source, view, pager = open_table("/path/to/file.nc", ["pr", "tas"])
        >>> with source:
        ...     print(pager.value(0, 3))
    """
    source = open_source(path, engine)
    try:
        view = load_table(source, variables, default_calendar=default_calendar)
    except Exception:
        source.close()
        raise
    pager = Pager(view, page_size if page_size is not None else DEFAULT_PAGE_SIZE)
    return source, view, pager
