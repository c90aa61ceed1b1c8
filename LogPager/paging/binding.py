"""
Pager Binding Module - Wires a pagination controller to a paged source

Handles:
- Page navigation from the controller moving the source's current page
- Items-per-page selection resizing the source and returning to page 1
- Source resets (new rows, new page size) updating the controller
"""
import logging
from typing import Callable, List

from LogPager.pagination.controller import PaginationController
from .paged_source import PagedSource


class PagerBinding:
    """Keeps a PaginationController and a PagedSource in step"""
    
    def __init__(self, controller: PaginationController, source: PagedSource):
        """
        Bind controller and source, then push the source state to the controller
        
        Args:
            controller: Pagination controller driving the navigation control
            source: Paged rows shown in the table
        """
        self.logger = logging.getLogger(__name__)
        self.controller = controller
        self.source = source
        
        self._unsubscribers: List[Callable[[], None]] = [
            controller.on_page_changed(self._handle_page_changed),
            controller.on_items_per_page_changed(self._handle_items_per_page_changed),
            source.on_reset(self.sync),
        ]
        
        source.set_page_size(controller.items_per_page)
        self.sync()
    
    def sync(self) -> None:
        """Push the source's current page and page count to the controller"""
        self.controller.set_pagination(self.source.current_page, self.source.total_pages)
    
    def detach(self) -> None:
        """Remove all subscriptions made by this binding"""
        for unsubscribe in self._unsubscribers:
            unsubscribe()
        self._unsubscribers.clear()
    
    def _handle_page_changed(self, page: int) -> None:
        self.source.set_current_page(page)
    
    def _handle_items_per_page_changed(self, items_per_page: int) -> None:
        self.logger.info(f"Reloading pages with {items_per_page} items per page")
        self.source.set_page_size(items_per_page)
        self.source.set_current_page(1)
        self.sync()
