"""
LogPager - Pagination core for a log viewer

Package Structure:
- pagination: Display model builder and pagination controller
- paging: Paged data source and its binding to the controller
- log: Optional logging setup for host applications
"""

from .pagination import PaginationController, PaginationState, build_display_model
from .paging import PagedSource, PagerBinding

__all__ = [
    'PaginationController',
    'PaginationState',
    'build_display_model',
    'PagedSource',
    'PagerBinding',
]
