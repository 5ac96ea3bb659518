"""
Catalog Application Ports

Gateway interfaces for the Catalog domain.
Uses Protocol for structural typing.
"""

from collections.abc import Iterable
from typing import Protocol, runtime_checkable

from codeflix.core.interfaces import IGateway
from codeflix.domains.catalog.domain.category import Category, CategoryID
from codeflix.domains.catalog.domain.genre import Genre, GenreID


@runtime_checkable
class ICategoryGateway(IGateway[Category, CategoryID], Protocol):
    """
    Interface for category gateway.

    Besides the common CRUD contract it answers which of a set of
    category ids exist, so genres can reference categories safely.
    """

    def exists_by_ids(self, ids: Iterable[CategoryID]) -> list[CategoryID]:
        """Return the subset of `ids` that exist"""
        ...


@runtime_checkable
class IGenreGateway(IGateway[Genre, GenreID], Protocol):
    """Interface for genre gateway."""


__all__ = ["ICategoryGateway", "IGenreGateway"]
