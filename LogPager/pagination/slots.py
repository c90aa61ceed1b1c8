"""
Button Slots Module - Projection of a display model onto reusable button slots

A renderer keeps a fixed pool of clickable controls and reuses them by
position. This module computes what every slot should show so the renderer
only copies the values across.

Handles:
- Growing the slot pool to the button budget
- Mapping display entries 1:1 onto slots by position
- Enabled state of the first/prev/next/last/jump affordances
"""
from dataclasses import dataclass
from typing import List, NamedTuple

from .state import DisplayModel, PaginationState


@dataclass
class ButtonSlot:
    """State of one pooled page button"""
    index: int
    text: str = ""
    page: int = -1
    enabled: bool = False
    checked: bool = False
    visible: bool = False
    
    def hide(self) -> None:
        self.text = ""
        self.page = -1
        self.enabled = False
        self.checked = False
        self.visible = False


class ButtonSlotPool:
    """Pool of button slots reused across display model updates"""
    
    def __init__(self, size: int = 0):
        self.slots: List[ButtonSlot] = []
        self.ensure(size)
    
    def __len__(self) -> int:
        return len(self.slots)
    
    def ensure(self, size: int) -> None:
        """
        Grow the pool to at least size slots and hide every slot
        
        The pool never shrinks; surplus slots stay hidden.
        """
        for index in range(len(self.slots), size):
            self.slots.append(ButtonSlot(index))
        
        for slot in self.slots:
            slot.hide()
    
    def apply(self, model: DisplayModel) -> List[ButtonSlot]:
        """
        Apply a display model onto the pool
        
        Args:
            model: Display model to show
            
        Returns:
            The visible slots, in model order
        """
        assert len(model) <= len(self.slots), (
            f"display model of {len(model)} entries exceeds pool of {len(self.slots)}"
        )
        
        for slot, entry in zip(self.slots, model):
            slot.text = entry.label
            slot.enabled = entry.enabled
            slot.visible = True
            if entry.is_ellipsis:
                slot.page = -1
                slot.checked = False
            else:
                slot.page = entry.page
                slot.checked = entry.is_current
        
        for slot in self.slots[len(model):]:
            slot.hide()
        
        return self.visible_slots()
    
    def visible_slots(self) -> List[ButtonSlot]:
        return [slot for slot in self.slots if slot.visible]


class NavigationControls(NamedTuple):
    """Enabled state of the navigation affordances around the page buttons"""
    first_enabled: bool
    prev_enabled: bool
    next_enabled: bool
    last_enabled: bool
    jump_enabled: bool


def navigation_controls(state: PaginationState) -> NavigationControls:
    """Compute which navigation affordances are enabled for a state"""
    state = state.normalized()
    only_one_page = state.total_pages == 1
    
    backward = not only_one_page and state.has_previous
    forward = not only_one_page and state.has_next
    
    return NavigationControls(
        first_enabled=backward,
        prev_enabled=backward,
        next_enabled=forward,
        last_enabled=forward,
        jump_enabled=not only_one_page,
    )
