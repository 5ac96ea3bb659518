"""
In-memory search helpers: terms filter, sort and page slicing.
"""

from collections.abc import Callable, Iterable
from typing import Any, TypeVar

from codeflix.core.pagination import DEFAULT_SORT, Pagination, SearchQuery

T = TypeVar("T")

SORT_KEYS: dict[str, Callable[[Any], Any]] = {
    "name": lambda aggregate: (aggregate.name or "").lower(),
    "createdAt": lambda aggregate: aggregate.created_at,
    "created_at": lambda aggregate: aggregate.created_at,
    "updatedAt": lambda aggregate: aggregate.updated_at,
    "updated_at": lambda aggregate: aggregate.updated_at,
}


def contains_terms(terms: str, *fields: str | None) -> bool:
    """Case-insensitive substring match on any of the given fields."""
    needle = terms.lower()
    return any(value is not None and needle in value.lower() for value in fields)


def search(
    items: Iterable[T],
    query: SearchQuery,
    matches: Callable[[T, str], bool],
) -> Pagination[T]:
    """
    Filter, sort and slice a collection of aggregates.

    Unknown sort keys sort by creation time. Ties keep id order so pages
    are stable.

    Raises:
        PaginationException: If the requested page is past the last page
    """
    filtered = [item for item in items if query.terms is None or matches(item, query.terms)]

    sort_key = SORT_KEYS.get(query.sort, SORT_KEYS[DEFAULT_SORT])
    ordered = sorted(filtered, key=lambda item: item.id.get_value())
    ordered.sort(key=sort_key, reverse=query.is_descending())

    start = (query.page - 1) * query.per_page
    page_items = ordered[start : start + query.per_page]
    return Pagination.from_page(query.page, query.per_page, len(ordered), page_items)
