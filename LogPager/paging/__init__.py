"""
Paging Package - Data-source side of pagination

Package Structure:
- paged_source: Page-sized view over a sequence of rows (PagedSource)
- binding: Wiring between PaginationController and PagedSource (PagerBinding)
"""

from .paged_source import PagedSource
from .binding import PagerBinding

__all__ = [
    'PagedSource',
    'PagerBinding',
]
