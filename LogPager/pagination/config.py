"""
Pagination Config Module - Defaults shared by the pagination core

Handles:
- Button budget limits
- Items-per-page choices offered to the user
- Ellipsis text used by button slots and model descriptions
"""

# A page control never shows fewer than first, current and last
MIN_PAGE_BUTTONS = 3
DEFAULT_MAX_PAGE_BUTTONS = 7

ITEMS_PER_PAGE_CHOICES = (25, 50, 100, 200)
DEFAULT_ITEMS_PER_PAGE = ITEMS_PER_PAGE_CHOICES[0]

ELLIPSIS_TEXT = "..."
