"""
Pagination - paged results and normalized search queries
"""

from codeflix.core.pagination.pagination import (
    DEFAULT_PER_PAGE,
    FIRST_PAGE,
    Pagination,
    PaginationException,
    Range,
    count_pages,
)
from codeflix.core.pagination.search_query import (
    DEFAULT_DIRECTION,
    DEFAULT_SORT,
    SearchQuery,
)

__all__ = [
    "FIRST_PAGE",
    "DEFAULT_PER_PAGE",
    "DEFAULT_SORT",
    "DEFAULT_DIRECTION",
    "Pagination",
    "PaginationException",
    "Range",
    "SearchQuery",
    "count_pages",
]
