"""
Window Module - Middle window of page numbers for the general case

The first and last pages are always shown. The remaining budget is spent on
a contiguous run of pages around the current page plus up to two ellipses.
When the run touches either end, the ellipsis slot on that side is handed
back to the run.
"""
from typing import NamedTuple, Tuple


class MiddleWindow(NamedTuple):
    """Inclusive range of middle pages and the ellipses around it"""
    start: int
    end: int
    left_ellipsis: bool
    right_ellipsis: bool


def calculate_middle_range(total_pages: int, max_buttons: int,
                           current_page: int) -> Tuple[int, int]:
    """
    Calculate the inclusive range of middle page buttons
    
    Args:
        total_pages: Total number of pages
        max_buttons: Button budget including first/last pages and ellipses
        current_page: Current page (1-based)
        
    Returns:
        Tuple of (start, end), both within [2, total_pages - 1]
    """
    num_required = 2  # first and last page
    num_ellipsis = 2
    
    if total_pages <= max_buttons:
        # All pages fit, no ellipsis needed
        return 2, total_pages - 1
    
    num_middle = max_buttons - num_required - num_ellipsis
    
    left = current_page - num_middle // 2
    right = current_page + (num_middle - 1) // 2
    
    if left < 2:
        right += 2 - left
        left = 2
    if right > total_pages - 1:
        left -= right - (total_pages - 1)
        right = total_pages - 1
    if left < 2:
        left = 2
    
    start, end = left, right
    
    if start == 2:
        num_ellipsis -= 1
    if end == total_pages - 1:
        num_ellipsis -= 1
    
    # Reclaim the unused ellipsis slot for another page
    if num_ellipsis == 1:
        num_middle = max_buttons - num_required - 1
        if start == 2:
            end = start + num_middle - 1
        else:
            start = end - num_middle + 1
    
    if num_ellipsis == 0:
        start, end = 2, total_pages - 1
    
    assert 2 <= start <= end <= total_pages - 1, (
        f"middle window [{start}, {end}] out of bounds for {total_pages} pages"
    )
    return start, end


def middle_window(total_pages: int, max_buttons: int, current_page: int) -> MiddleWindow:
    """Middle range plus the ellipsis flags derived from it"""
    start, end = calculate_middle_range(total_pages, max_buttons, current_page)
    return MiddleWindow(
        start=start,
        end=end,
        left_ellipsis=start > 2,
        right_ellipsis=end < total_pages - 1,
    )
