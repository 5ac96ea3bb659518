"""
In-memory Category Gateway

Dictionary-backed gateway used by default by the API and by tests. Stored
aggregates are clones, so callers can never mutate the store by accident.
"""

import logging
import threading
from collections.abc import Iterable
from typing import TYPE_CHECKING, Optional

from codeflix.core.pagination import Pagination, SearchQuery
from codeflix.domains.catalog.application.ports import ICategoryGateway
from codeflix.domains.catalog.domain.category import Category, CategoryID

from .search import contains_terms, search

if TYPE_CHECKING:
    from .genre_gateway import InMemoryGenreGateway

logger = logging.getLogger(__name__)


class InMemoryCategoryGateway(ICategoryGateway):
    """
    Category gateway implementation over a dict.

    Single Responsibility: Data access for Category aggregates only
    Dependency Inversion: Implements ICategoryGateway
    """

    def __init__(
        self,
        categories: Iterable[Category] | None = None,
        genre_gateway: Optional["InMemoryGenreGateway"] = None,
    ):
        """
        Args:
            categories: Initial categories
            genre_gateway: Genre store whose references are dropped when a category is deleted
        """
        self._items: dict[CategoryID, Category] = {}
        self._lock = threading.RLock()
        self._genre_gateway = genre_gateway
        for category in categories or []:
            self._items[category.id] = category.clone()

    def create(self, aggregate: Category) -> Category:
        with self._lock:
            self._items[aggregate.id] = aggregate.clone()
        logger.debug(f"Category {aggregate.id} stored")
        return aggregate.clone()

    def update(self, aggregate: Category) -> Category:
        with self._lock:
            self._items[aggregate.id] = aggregate.clone()
        return aggregate.clone()

    def delete_by_id(self, id: CategoryID) -> None:
        with self._lock:
            self._items.pop(id, None)
        if self._genre_gateway is not None:
            self._genre_gateway.remove_category_references(id)

    def find_by_id(self, id: CategoryID) -> Optional[Category]:
        with self._lock:
            category = self._items.get(id)
        return category.clone() if category is not None else None

    def find_all(self, query: SearchQuery) -> Pagination[Category]:
        with self._lock:
            snapshot = [category.clone() for category in self._items.values()]
        return search(
            snapshot,
            query,
            lambda category, terms: contains_terms(terms, category.name, category.description),
        )

    def exists_by_ids(self, ids: Iterable[CategoryID]) -> list[CategoryID]:
        with self._lock:
            return [category_id for category_id in dict.fromkeys(ids) if category_id in self._items]

    def count(self) -> int:
        with self._lock:
            return len(self._items)
