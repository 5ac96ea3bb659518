"""
Get Genre By ID Use Case
"""

from dataclasses import dataclass, field
from datetime import datetime

from codeflix.core.domain import NotFoundException
from codeflix.domains.catalog.application.ports import IGenreGateway
from codeflix.domains.catalog.application.use_cases.lookup import parse_id_or_not_found, require_gateway
from codeflix.domains.catalog.domain.genre import Genre, GenreID


@dataclass
class GenreOutput:
    """Full view of a genre."""

    id: str
    name: str
    is_active: bool
    created_at: datetime
    updated_at: datetime
    deleted_at: datetime | None
    categories: list[str] = field(default_factory=list)

    @classmethod
    def from_genre(cls, genre: Genre) -> "GenreOutput":
        return cls(
            id=genre.id.get_value(),
            name=genre.name,
            is_active=genre.active,
            created_at=genre.created_at,
            updated_at=genre.updated_at,
            deleted_at=genre.deleted_at,
            categories=[category_id.get_value() for category_id in genre.categories],
        )


class GetGenreByIdUseCase:
    def __init__(self, genre_gateway: IGenreGateway):
        self.genre_gateway = require_gateway(genre_gateway, "genre_gateway")

    def execute(self, id: str) -> GenreOutput:
        """
        Raises:
            NotFoundException: If the id is malformed or unknown
        """
        genre_id = parse_id_or_not_found(GenreID, Genre, id)
        genre = self.genre_gateway.find_by_id(genre_id)
        if genre is None:
            raise NotFoundException.with_id(Genre, id)
        return GenreOutput.from_genre(genre)
