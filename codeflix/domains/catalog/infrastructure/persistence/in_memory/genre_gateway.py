"""
In-memory Genre Gateway
"""

import logging
import threading
from collections.abc import Iterable
from typing import Optional

from codeflix.core.pagination import Pagination, SearchQuery
from codeflix.domains.catalog.application.ports import IGenreGateway
from codeflix.domains.catalog.domain.category import CategoryID
from codeflix.domains.catalog.domain.genre import Genre, GenreID

from .search import contains_terms, search

logger = logging.getLogger(__name__)


class InMemoryGenreGateway(IGenreGateway):
    """Genre gateway implementation over a dict."""

    def __init__(self, genres: Iterable[Genre] | None = None):
        self._items: dict[GenreID, Genre] = {}
        self._lock = threading.RLock()
        for genre in genres or []:
            self._items[genre.id] = genre.clone()

    def create(self, aggregate: Genre) -> Genre:
        with self._lock:
            self._items[aggregate.id] = aggregate.clone()
        logger.debug(f"Genre {aggregate.id} stored")
        return aggregate.clone()

    def update(self, aggregate: Genre) -> Genre:
        with self._lock:
            self._items[aggregate.id] = aggregate.clone()
        return aggregate.clone()

    def delete_by_id(self, id: GenreID) -> None:
        with self._lock:
            self._items.pop(id, None)

    def find_by_id(self, id: GenreID) -> Optional[Genre]:
        with self._lock:
            genre = self._items.get(id)
        return genre.clone() if genre is not None else None

    def remove_category_references(self, category_id: CategoryID) -> None:
        """Drop a deleted category from every stored genre, leaving updated_at as is."""
        with self._lock:
            for genre in self._items.values():
                if category_id in genre.categories:
                    genre.categories = tuple(c for c in genre.categories if c != category_id)

    def find_all(self, query: SearchQuery) -> Pagination[Genre]:
        with self._lock:
            snapshot = [genre.clone() for genre in self._items.values()]
        return search(snapshot, query, lambda genre, terms: contains_terms(terms, genre.name))

    def count(self) -> int:
        with self._lock:
            return len(self._items)
