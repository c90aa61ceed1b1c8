"""
Paged Source Module - Page-sized view over a sequence of rows

Handles:
- Total page count for the current page size
- Row offset and row count of the current page
- Mapping between page rows and source rows
- Keeping the current page valid when rows or page size change
"""
import logging
from typing import Callable, List, Optional, Sequence

from LogPager.pagination.config import DEFAULT_ITEMS_PER_PAGE


class PagedSource:
    """
    Paging view over a sequence of rows (e.g. filtered log entries)
    
    Pages are 1-based. With paging disabled every row is on page 1.
    """
    
    def __init__(self, items: Sequence = (), page_size: int = DEFAULT_ITEMS_PER_PAGE,
                 paging_enabled: bool = True):
        """
        Initialize the paged source
        
        Args:
            items: Rows to page over
            page_size: Rows per page, must be > 0
            paging_enabled: False to show all rows on a single page
        """
        self.logger = logging.getLogger(__name__)
        self._items: Sequence = items
        self._page_size = page_size if page_size > 0 else DEFAULT_ITEMS_PER_PAGE
        self._paging_enabled = paging_enabled
        self._current_page = 1
        self._reset_listeners: List[Callable[[], None]] = []
    
    @property
    def items(self) -> Sequence:
        return self._items
    
    @property
    def page_size(self) -> int:
        return self._page_size
    
    @property
    def current_page(self) -> int:
        return self._current_page
    
    @property
    def paging_enabled(self) -> bool:
        return self._paging_enabled
    
    @property
    def total_rows(self) -> int:
        return len(self._items)
    
    @property
    def total_pages(self) -> int:
        """Number of pages for the current rows and page size (at least 1)"""
        if not self._paging_enabled:
            return 1
        pages = (self.total_rows + self._page_size - 1) // self._page_size
        return max(pages, 1)
    
    @property
    def page_offset(self) -> int:
        """Source index of the first row on the current page"""
        if not self._paging_enabled:
            return 0
        return (self._current_page - 1) * self._page_size
    
    @property
    def row_count(self) -> int:
        """Number of rows on the current page"""
        if not self._paging_enabled:
            return self.total_rows
        return max(0, min(self._page_size, self.total_rows - self.page_offset))
    
    def on_reset(self, callback: Callable[[], None]) -> Callable[[], None]:
        """Subscribe to page content resets; returns an unsubscribe function"""
        self._reset_listeners.append(callback)
        
        def unsubscribe() -> None:
            if callback in self._reset_listeners:
                self._reset_listeners.remove(callback)
        
        return unsubscribe
    
    def set_items(self, items: Sequence) -> None:
        """Replace the rows; the current page is kept if still valid"""
        self._items = items
        self._validate_current_page()
        self._reset()
    
    def set_page_size(self, size: int) -> None:
        """Set rows per page; non-positive sizes are ignored"""
        if size <= 0 or size == self._page_size:
            return
        
        self._page_size = size
        self._validate_current_page()
        self._reset()
    
    def set_current_page(self, page: int) -> None:
        """Show page (1-based), clamped into [1, total_pages]"""
        new_page = min(max(page, 1), self.total_pages)
        
        if new_page == self._current_page:
            return
        
        self._current_page = new_page
        self._validate_current_page()
        self._reset()
    
    def set_paging_enabled(self, enabled: bool) -> None:
        if enabled == self._paging_enabled:
            return
        
        self._paging_enabled = enabled
        self._validate_current_page()
        self._reset()
    
    def page_items(self) -> List:
        """Rows on the current page"""
        start = self.page_offset
        return list(self._items[start:start + self.row_count])
    
    def map_to_source(self, row: int) -> Optional[int]:
        """
        Map a row on the current page to its source index
        
        Returns:
            Source index, or None when row is not on the current page
        """
        if not 0 <= row < self.row_count:
            return None
        return row + self.page_offset
    
    def map_from_source(self, source_row: int) -> Optional[int]:
        """
        Map a source index to its row on the current page
        
        Returns:
            Page row, or None when the source row is on another page
        """
        row = source_row - self.page_offset
        if not 0 <= row < self.row_count:
            return None
        return row
    
    def _validate_current_page(self) -> None:
        total_pages = self.total_pages
        
        if self._current_page < 1:
            self._current_page = 1
        
        if self._current_page > total_pages:
            self._current_page = total_pages
    
    def _reset(self) -> None:
        self.logger.debug(
            f"Page reset: page={self._current_page}/{self.total_pages} "
            f"page_size={self._page_size} rows={self.total_rows}"
        )
        for callback in list(self._reset_listeners):
            callback()
