"""
NC Table Paging

This module exposes a row-counted data source as fixed-size pages. Only rows
on the current page are addressable.
"""

from math import ceil

from ..core.config import BIG_STEP, DEFAULT_PAGE_SIZE
from ..core.core_types import CellValue
from ..core.exceptions import ParameterError
from ..core.logging_config import get_logger

logger = get_logger('table.paging')


class Pager:
    """
    Fixed-size page window over a row-counted source.

    The page count follows the source's current ``row_count``. Page numbers
    start at 1 and are clamped to ``[1, page_count]``, or 0 if there are no
    pages.

    Args:
        source: Any object with a ``row_count`` (a TableView for cell access)
        page_size: Rows per page

    Examples:
        >>> pager = Pager(view, page_size=10)
        >>> pager.page_number = pager.page_count
        >>> pager.rows_on_current_page
        8
    """

    def __init__(self, source, page_size: int = DEFAULT_PAGE_SIZE):
        self.source = source
        self._page_size = self._validate_page_size(page_size)
        self._page_number = 1

    @staticmethod
    def _validate_page_size(page_size: int) -> int:
        if isinstance(page_size, bool) or not isinstance(page_size, int) or page_size <= 0:
            raise ParameterError("page_size", str(page_size), "Must be a positive integer")
        return page_size

    @property
    def total_rows(self) -> int:
        return max(int(self.source.row_count), 0)

    @property
    def page_size(self) -> int:
        return self._page_size

    @page_size.setter
    def page_size(self, value: int) -> None:
        self._page_size = self._validate_page_size(value)
        self._page_number = self._clamp(self._page_number)

    @property
    def page_count(self) -> int:
        return ceil(self.total_rows / self._page_size)

    @property
    def page_number(self) -> int:
        # Re-clamp in case the source changed size since the last update.
        return self._clamp(self._page_number)

    @page_number.setter
    def page_number(self, value: int) -> None:
        self._page_number = self._clamp(int(value))
        logger.debug("Page %d of %d", self._page_number, self.page_count)

    def _clamp(self, number: int) -> int:
        count = self.page_count
        if count == 0:
            return 0
        return min(max(number, 1), count)

    @property
    def rows_on_current_page(self) -> int:
        count = self.page_count
        if count == 0:
            return 0
        if self.page_number == count:
            return self.total_rows - (count - 1) * self._page_size
        return self._page_size

    # ------------------------------------------------------------------
    # Navigation
    # ------------------------------------------------------------------

    def first_page(self) -> int:
        self.page_number = 1
        return self.page_number

    def last_page(self) -> int:
        self.page_number = self.page_count
        return self.page_number

    def advance(self, step: int = 1) -> int:
        """Move forward (or back for a negative step), clamped to the valid pages."""
        self.page_number = self.page_number + step
        return self.page_number

    def next_page(self) -> int:
        return self.advance(1)

    def previous_page(self) -> int:
        return self.advance(-1)

    def skip_forward(self) -> int:
        return self.advance(BIG_STEP)

    def skip_back(self) -> int:
        return self.advance(-BIG_STEP)

    # ------------------------------------------------------------------
    # Rows
    # ------------------------------------------------------------------

    def global_row(self, page_row: int) -> int:
        """Translate a page row index to the corresponding source row."""
        return (self.page_number - 1) * self._page_size + page_row

    def page_rows(self) -> range:
        """Source rows on the current page."""
        start = self.global_row(0) if self.page_count else 0
        return range(start, start + self.rows_on_current_page)

    def value(self, page_row: int, column: int) -> CellValue:
        """
        Get a cell value on the current page.

        Raises:
            IndexError: If the row is not on the current page
        """
        if not 0 <= page_row < self.rows_on_current_page:
            raise IndexError(f"Row {page_row} is not on page {self.page_number}")
        return self.source.value(self.global_row(page_row), column)

    def __repr__(self) -> str:
        return f"<Pager page {self.page_number}/{self.page_count} size={self._page_size}>"
