"""
Display Model Module - Ordered page buttons and ellipses for a pagination control

Handles:
- Normalizing the incoming state
- Dispatching to the single page, all-fit, three-button, four-button and
  general layouts (first match wins)
- Marking exactly one entry as the current page
"""
from .state import DisplayEntry, DisplayModel, PaginationState
from .window import middle_window


def build_display_model(state: PaginationState) -> DisplayModel:
    """
    Build the display model for a pagination state
    
    Out-of-range values are clamped first, so any integer state yields a
    valid model of at most max_buttons entries.
    
    Args:
        state: Pagination state to render
        
    Returns:
        Ordered list of DisplayEntry objects
    """
    state = state.normalized()
    
    if state.total_pages == 1:
        model = _single_page_entries(state)
    elif state.total_pages <= state.max_buttons:
        model = _simple_page_entries(state)
    elif state.max_buttons == 3:
        model = _three_page_entries(state)
    elif state.max_buttons == 4:
        model = _four_page_entries(state)
    else:
        model = _complex_page_entries(state)
    
    assert len(model) <= state.max_buttons
    return model


def _page(state: PaginationState, page: int) -> DisplayEntry:
    return DisplayEntry.page_button(page, page == state.current_page)


def _single_page_entries(state: PaginationState) -> DisplayModel:
    return [DisplayEntry.page_button(1, True)]


def _simple_page_entries(state: PaginationState) -> DisplayModel:
    """Every page fits, no ellipsis"""
    return [_page(state, page) for page in range(1, state.total_pages + 1)]


def _three_page_entries(state: PaginationState) -> DisplayModel:
    """First, one middle page, last"""
    current, last = state.current_page, state.total_pages
    
    if current == 1:
        middle = 2
    elif current == last:
        middle = last - 1
    else:
        middle = current
    
    return [_page(state, 1), _page(state, middle), _page(state, last)]


def _four_page_entries(state: PaginationState) -> DisplayModel:
    """First page plus one of three shapes depending on position"""
    current, last = state.current_page, state.total_pages
    ellipsis = DisplayEntry.ellipsis()
    model = [_page(state, 1)]
    
    if current in (1, 2):
        model += [_page(state, 2), ellipsis, _page(state, last)]
    elif current in (last - 1, last):
        model += [ellipsis, _page(state, last - 1), _page(state, last)]
    else:
        dist_to_start = current - 1
        dist_to_end = last - current
        if dist_to_start <= dist_to_end:
            model += [_page(state, current), ellipsis, _page(state, last)]
        else:
            model += [ellipsis, _page(state, current), _page(state, last)]
    
    return model


def _complex_page_entries(state: PaginationState) -> DisplayModel:
    """First, optional ellipsis, middle window, optional ellipsis, last"""
    window = middle_window(state.total_pages, state.max_buttons, state.current_page)
    
    model = [_page(state, 1)]
    if window.left_ellipsis:
        model.append(DisplayEntry.ellipsis())
    model.extend(_page(state, page) for page in range(window.start, window.end + 1))
    if window.right_ellipsis:
        model.append(DisplayEntry.ellipsis())
    model.append(_page(state, state.total_pages))
    
    return model
