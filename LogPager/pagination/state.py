"""
Pagination State Module - Value objects exchanged with the pagination core

Handles:
- Pagination state (current page, page count, button budget, page size)
- Display entries (page buttons and ellipsis markers)
- Compact textual description of a display model for logs
"""
from dataclasses import dataclass, replace
from enum import Enum
from typing import List, Optional

from .config import DEFAULT_ITEMS_PER_PAGE, DEFAULT_MAX_PAGE_BUTTONS, ELLIPSIS_TEXT
from .page_range import clamp_max_buttons, clamp_pages


class EntryKind(Enum):
    """Kinds of slots in a display model"""
    PAGE = "page"
    ELLIPSIS = "ellipsis"


@dataclass(frozen=True)
class PaginationState:
    """Snapshot of a pagination control"""
    current_page: int = 1
    total_pages: int = 1
    max_buttons: int = DEFAULT_MAX_PAGE_BUTTONS
    items_per_page: int = DEFAULT_ITEMS_PER_PAGE
    
    def normalized(self) -> "PaginationState":
        """Return a copy with page range and button budget clamped"""
        current_page, total_pages = clamp_pages(self.current_page, self.total_pages)
        return replace(
            self,
            current_page=current_page,
            total_pages=total_pages,
            max_buttons=clamp_max_buttons(self.max_buttons),
        )
    
    @property
    def has_previous(self) -> bool:
        return self.current_page > 1
    
    @property
    def has_next(self) -> bool:
        return self.current_page < self.total_pages


@dataclass(frozen=True)
class DisplayEntry:
    """One slot of a display model: a page button or an ellipsis"""
    kind: EntryKind
    page: Optional[int] = None
    is_current: bool = False
    
    @classmethod
    def page_button(cls, page: int, is_current: bool = False) -> "DisplayEntry":
        return cls(EntryKind.PAGE, page, is_current)
    
    @classmethod
    def ellipsis(cls) -> "DisplayEntry":
        return cls(EntryKind.ELLIPSIS)
    
    @property
    def is_ellipsis(self) -> bool:
        return self.kind is EntryKind.ELLIPSIS
    
    @property
    def enabled(self) -> bool:
        """Page buttons are always clickable, including the current one"""
        return not self.is_ellipsis
    
    @property
    def label(self) -> str:
        if self.is_ellipsis:
            return ELLIPSIS_TEXT
        return str(self.page)
    
    def __str__(self) -> str:
        if self.is_current:
            return f"[{self.label}]"
        return self.label


DisplayModel = List[DisplayEntry]


def describe_model(model: DisplayModel) -> str:
    """
    Describe a display model in compact form
    
    Example: "1 ... 9 [10] 11 ... 20" (current page in brackets)
    """
    return " ".join(str(entry) for entry in model)
