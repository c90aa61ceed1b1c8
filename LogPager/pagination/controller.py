"""
Pagination Controller Module - State machine behind a page navigation control

Handles:
- Owning the pagination state and re-clamping it on every mutation
- Rebuilding the display model and button slots on each effective change
- Next/previous/first/last navigation, page-button selection and jump-to text
- Items-per-page selection
- Change notifications for the renderer and the data source
"""
import logging
import threading
from typing import Callable, List, Optional

from .config import DEFAULT_ITEMS_PER_PAGE, DEFAULT_MAX_PAGE_BUTTONS, ITEMS_PER_PAGE_CHOICES
from .display_model import build_display_model
from .page_range import clamp_max_buttons, clamp_page, clamp_pages, parse_page_text
from .slots import ButtonSlot, ButtonSlotPool, NavigationControls, navigation_controls
from .state import DisplayModel, PaginationState, describe_model


class PaginationController:
    """
    Pagination state machine
    
    Notifications:
    - model changed: every recomputation, called with (state, model)
    - page changed: user navigation that moved to another page
    - items per page changed: every items-per-page selection, even a repeat
    
    set_pagination() is driven by the data source and never reports a page
    change back to it. All operations run under one reentrant lock, and
    callbacks are invoked while it is held, so a callback may call back
    into the controller from the same thread.
    """
    
    def __init__(self, max_buttons: int = DEFAULT_MAX_PAGE_BUTTONS,
                 items_per_page: int = DEFAULT_ITEMS_PER_PAGE):
        """
        Initialize the controller on page 1 of 1
        
        Args:
            max_buttons: Button budget, floored to 3
            items_per_page: Initial page size, one of ITEMS_PER_PAGE_CHOICES
        """
        self.logger = logging.getLogger(__name__)
        self._lock = threading.RLock()
        
        self._check_items_per_page(items_per_page)
        self._state = PaginationState(
            max_buttons=clamp_max_buttons(max_buttons),
            items_per_page=items_per_page,
        )
        
        self._model_listeners: List[Callable[[PaginationState, DisplayModel], None]] = []
        self._page_listeners: List[Callable[[int], None]] = []
        self._items_per_page_listeners: List[Callable[[int], None]] = []
        
        self.slot_pool = ButtonSlotPool(self._state.max_buttons)
        self._model: DisplayModel = []
        self._update_pagination()
    
    # State accessors
    
    @property
    def state(self) -> PaginationState:
        return self._state
    
    @property
    def current_page(self) -> int:
        return self._state.current_page
    
    @property
    def total_pages(self) -> int:
        return self._state.total_pages
    
    @property
    def max_buttons(self) -> int:
        return self._state.max_buttons
    
    @property
    def items_per_page(self) -> int:
        return self._state.items_per_page
    
    @property
    def display_model(self) -> DisplayModel:
        return list(self._model)
    
    @property
    def slots(self) -> List[ButtonSlot]:
        """Visible button slots for the current display model"""
        return self.slot_pool.visible_slots()
    
    @property
    def controls(self) -> NavigationControls:
        return navigation_controls(self._state)
    
    # Subscriptions
    
    def on_model_changed(self, callback: Callable[[PaginationState, DisplayModel], None]) -> Callable[[], None]:
        """Subscribe to display model recomputations; returns an unsubscribe function"""
        return self._subscribe(self._model_listeners, callback)
    
    def on_page_changed(self, callback: Callable[[int], None]) -> Callable[[], None]:
        """Subscribe to user page navigation; returns an unsubscribe function"""
        return self._subscribe(self._page_listeners, callback)
    
    def on_items_per_page_changed(self, callback: Callable[[int], None]) -> Callable[[], None]:
        """Subscribe to items-per-page selections; returns an unsubscribe function"""
        return self._subscribe(self._items_per_page_listeners, callback)
    
    def _subscribe(self, listeners: list, callback: Callable) -> Callable[[], None]:
        with self._lock:
            listeners.append(callback)
        
        def unsubscribe() -> None:
            with self._lock:
                if callback in listeners:
                    listeners.remove(callback)
        
        return unsubscribe
    
    # Operations
    
    def set_pagination(self, current_page: int, total_pages: int) -> bool:
        """
        Set the current page and total number of pages
        
        Values are clamped first. Nothing happens when the clamped values
        match the stored ones.
        
        Args:
            current_page: Current page (1-based)
            total_pages: Total number of pages
            
        Returns:
            True if the state changed and the display model was rebuilt
        """
        with self._lock:
            current_page, total_pages = clamp_pages(current_page, total_pages)
            
            if (current_page, total_pages) == (self._state.current_page, self._state.total_pages):
                return False
            
            self._state = PaginationState(
                current_page=current_page,
                total_pages=total_pages,
                max_buttons=self._state.max_buttons,
                items_per_page=self._state.items_per_page,
            )
            self._update_pagination()
            return True
    
    def set_max_buttons(self, max_buttons: int) -> bool:
        """
        Set the button budget (total visible slots, including first/last and ellipses)
        
        Returns:
            True if the budget changed and the display model was rebuilt
        """
        with self._lock:
            max_buttons = clamp_max_buttons(max_buttons)
            
            if max_buttons == self._state.max_buttons:
                return False
            
            self._state = PaginationState(
                current_page=self._state.current_page,
                total_pages=self._state.total_pages,
                max_buttons=max_buttons,
                items_per_page=self._state.items_per_page,
            )
            self.slot_pool.ensure(max_buttons)
            self._update_pagination()
            return True
    
    def next(self) -> bool:
        """Go to the next page; no-op on the last page"""
        with self._lock:
            if not self._state.has_next:
                return False
            return self._navigate(self._state.current_page + 1)
    
    def prev(self) -> bool:
        """Go to the previous page; no-op on the first page"""
        with self._lock:
            if not self._state.has_previous:
                return False
            return self._navigate(self._state.current_page - 1)
    
    def first(self) -> bool:
        """Go to page 1; no-op when already there"""
        with self._lock:
            return self._navigate(1)
    
    def last(self) -> bool:
        """Go to the last page; no-op when already there"""
        with self._lock:
            return self._navigate(self._state.total_pages)
    
    def select_page(self, page: Optional[int]) -> bool:
        """
        Handle a click on a page button
        
        Ellipsis slots carry no page (None or -1) and are ignored, as is the
        current page.
        """
        if page is None or page < 1:
            return False
        return self._navigate(page)
    
    def jump_to(self, page_text: str) -> bool:
        """
        Jump to the page typed by the user
        
        Unparsable text is ignored. Parsed values are clamped into
        [1, total_pages].
        
        Args:
            page_text: Raw jump-to text
            
        Returns:
            True if the current page changed
        """
        page = parse_page_text(page_text)
        if page is None:
            self.logger.debug(f"Ignoring jump to non-numeric page text {page_text!r}")
            return False
        return self._navigate(page)
    
    def set_items_per_page(self, value: int) -> None:
        """
        Select the number of items per page
        
        The change is always reported, even when value is already active, so
        the data source reloads on every selection.
        
        Raises:
            ValueError: If value is not one of ITEMS_PER_PAGE_CHOICES
        """
        self._check_items_per_page(value)
        
        with self._lock:
            if value != self._state.items_per_page:
                self.logger.info(f"Items per page changed from {self._state.items_per_page} to {value}")
                self._state = PaginationState(
                    current_page=self._state.current_page,
                    total_pages=self._state.total_pages,
                    max_buttons=self._state.max_buttons,
                    items_per_page=value,
                )
            
            for callback in list(self._items_per_page_listeners):
                callback(value)
    
    def set_items_per_page_index(self, index: int) -> None:
        """
        Select the items-per-page choice at index
        
        Raises:
            IndexError: If index is outside ITEMS_PER_PAGE_CHOICES
        """
        if not 0 <= index < len(ITEMS_PER_PAGE_CHOICES):
            self.logger.warning(f"Items per page index {index} out of range")
            raise IndexError(f"items per page index {index} out of range")
        self.set_items_per_page(ITEMS_PER_PAGE_CHOICES[index])
    
    # Internals
    
    def _check_items_per_page(self, value: int) -> None:
        if value not in ITEMS_PER_PAGE_CHOICES:
            self.logger.warning(f"Rejected items per page value {value!r}")
            raise ValueError(
                f"items per page must be one of {ITEMS_PER_PAGE_CHOICES}, got {value!r}"
            )
    
    def _navigate(self, page: int) -> bool:
        """Move to page (clamped) and report it; no-op for the current page"""
        with self._lock:
            page = clamp_page(page, self._state.total_pages)
            
            if page == self._state.current_page:
                return False
            
            # The page is committed before model listeners run, so the page
            # listeners still hear about it if one of those raises
            try:
                self.set_pagination(page, self._state.total_pages)
            finally:
                for callback in list(self._page_listeners):
                    callback(page)
            return True
    
    def _update_pagination(self) -> None:
        """Rebuild the display model and slots, then notify listeners"""
        state = self._state
        model = build_display_model(state)
        
        if self.logger.isEnabledFor(logging.DEBUG):
            self.logger.debug(
                f"update_pagination: current_page={state.current_page} "
                f"total_pages={state.total_pages} max_buttons={state.max_buttons} "
                f"model={describe_model(model)}"
            )
        
        self._model = model
        self.slot_pool.apply(model)
        
        for callback in list(self._model_listeners):
            callback(state, list(model))
