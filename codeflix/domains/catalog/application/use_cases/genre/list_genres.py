"""
List Genres Use Case
"""

import logging
from dataclasses import dataclass, field
from datetime import datetime

from codeflix.core.pagination import Pagination, SearchQuery
from codeflix.domains.catalog.application.ports import IGenreGateway
from codeflix.domains.catalog.application.use_cases.lookup import require_gateway
from codeflix.domains.catalog.domain.genre import Genre

logger = logging.getLogger(__name__)


@dataclass
class GenreListOutput:
    """Row of a genre listing."""

    id: str
    name: str
    is_active: bool
    created_at: datetime
    updated_at: datetime
    deleted_at: datetime | None
    categories: list[str] = field(default_factory=list)

    @classmethod
    def from_genre(cls, genre: Genre) -> "GenreListOutput":
        return cls(
            id=genre.id.get_value(),
            name=genre.name,
            is_active=genre.active,
            created_at=genre.created_at,
            updated_at=genre.updated_at,
            deleted_at=genre.deleted_at,
            categories=[category_id.get_value() for category_id in genre.categories],
        )


class ListGenresUseCase:
    """Returns one page of genres matching a search query."""

    def __init__(self, genre_gateway: IGenreGateway):
        self.genre_gateway = require_gateway(genre_gateway, "genre_gateway")

    def execute(self, query: SearchQuery) -> Pagination[GenreListOutput]:
        logger.debug(f"Listing genres: {query}")
        return self.genre_gateway.find_all(query).map(GenreListOutput.from_genre)
