"""
Pagination Package - Page navigation core for the log viewer

This package turns a current page, a page count and a button budget into the
ordered page buttons and ellipses of a navigation control, for example
"1 ... 9 [10] 11 ... 20".

Package Structure:
- config: Button budget and items-per-page defaults
- page_range: Clamping and jump-text parsing (clamp_pages, parse_page_text)
- state: Value objects (PaginationState, DisplayEntry, EntryKind)
- window: Middle window calculation for large page counts
- display_model: Display model builder (build_display_model)
- slots: Pooled button slot projection and navigation affordances
- controller: State machine with change notifications (PaginationController)
"""

from .config import (
    MIN_PAGE_BUTTONS,
    DEFAULT_MAX_PAGE_BUTTONS,
    ITEMS_PER_PAGE_CHOICES,
    DEFAULT_ITEMS_PER_PAGE,
)
from .page_range import clamp_pages, clamp_max_buttons, clamp_page, parse_page_text
from .state import PaginationState, DisplayEntry, DisplayModel, EntryKind, describe_model
from .window import MiddleWindow, calculate_middle_range, middle_window
from .display_model import build_display_model
from .slots import ButtonSlot, ButtonSlotPool, NavigationControls, navigation_controls
from .controller import PaginationController

__all__ = [
    # Controller
    'PaginationController',
    
    # Builder
    'build_display_model',
    'calculate_middle_range',
    'middle_window',
    'MiddleWindow',
    
    # Range helpers
    'clamp_pages',
    'clamp_max_buttons',
    'clamp_page',
    'parse_page_text',
    
    # Data models
    'PaginationState',
    'DisplayEntry',
    'DisplayModel',
    'EntryKind',
    'describe_model',
    
    # Renderer support
    'ButtonSlot',
    'ButtonSlotPool',
    'NavigationControls',
    'navigation_controls',
    
    # Defaults
    'MIN_PAGE_BUTTONS',
    'DEFAULT_MAX_PAGE_BUTTONS',
    'ITEMS_PER_PAGE_CHOICES',
    'DEFAULT_ITEMS_PER_PAGE',
]
