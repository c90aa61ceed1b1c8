"""
Page Range Module - Normalization of raw navigation input

Every function here corrects bad input in place instead of rejecting it,
so a pagination control always has a valid state to show.
"""
import re
from typing import Optional, Tuple

from .config import MIN_PAGE_BUTTONS

# Optional sign and ASCII digits only; no underscores or Unicode digits
PAGE_TEXT_PATTERN = re.compile(r'[+-]?[0-9]+')


def clamp_pages(current_page: int, total_pages: int) -> Tuple[int, int]:
    """
    Clamp a (current_page, total_pages) pair into a valid state
    
    Args:
        current_page: Requested page (1-based)
        total_pages: Number of pages reported by the data source
        
    Returns:
        Tuple of (current_page, total_pages) with 1 <= current_page <= total_pages
    """
    if total_pages < 1:
        total_pages = 1
    
    if current_page < 1:
        current_page = 1
    
    if current_page > total_pages:
        current_page = total_pages
    
    return current_page, total_pages


def clamp_max_buttons(max_buttons: int) -> int:
    """Floor the button budget to MIN_PAGE_BUTTONS"""
    return max(MIN_PAGE_BUTTONS, max_buttons)


def clamp_page(page: int, total_pages: int) -> int:
    """Clamp a navigation target into [1, total_pages]"""
    return clamp_pages(page, total_pages)[0]


def parse_page_text(text) -> Optional[int]:
    """
    Parse jump-to text into a page number
    
    Args:
        text: Raw text typed by the user
        
    Returns:
        Parsed integer, or None when the text is not a plain base-10 integer
    """
    if not isinstance(text, str):
        return None
    
    text = text.strip()
    if not PAGE_TEXT_PATTERN.fullmatch(text):
        return None
    
    return int(text, 10)
