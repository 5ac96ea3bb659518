"""
Update Genre Use Case
"""

import logging
from dataclasses import dataclass, field

from codeflix.core.domain import NotFoundException, NotificationException
from codeflix.core.validation import Notification
from codeflix.domains.catalog.application.ports import ICategoryGateway, IGenreGateway
from codeflix.domains.catalog.application.use_cases.lookup import parse_id_or_not_found, require_gateway
from codeflix.domains.catalog.domain.genre import Genre, GenreID

from .category_references import to_category_ids, validate_categories

logger = logging.getLogger(__name__)

GENRE_UPDATE_ERROR = "Could not update Aggregate Genre {}"


@dataclass
class UpdateGenreCommand:
    """Command for updating a genre."""

    id: str
    name: str | None
    is_active: bool = True
    categories: list[str] = field(default_factory=list)

    @classmethod
    def with_(
        cls, id: str, name: str | None, is_active: bool | None, categories: list[str] | None
    ) -> "UpdateGenreCommand":
        return cls(id, name, True if is_active is None else is_active, list(categories or []))


@dataclass
class UpdateGenreOutput:
    """Identifier of the updated genre."""

    id: str

    @classmethod
    def from_genre(cls, genre: Genre) -> "UpdateGenreOutput":
        return cls(genre.id.get_value())


class UpdateGenreUseCase:
    """Replaces the name, active flag and categories of a genre."""

    def __init__(self, category_gateway: ICategoryGateway, genre_gateway: IGenreGateway):
        self.category_gateway = require_gateway(category_gateway, "category_gateway")
        self.genre_gateway = require_gateway(genre_gateway, "genre_gateway")

    def execute(self, command: UpdateGenreCommand) -> UpdateGenreOutput:
        """
        Execute update genre use case.

        Raises:
            NotFoundException: If no genre has the given id
            NotificationException: If categories are missing or the result is invalid
        """
        logger.debug(f"Updating genre {command.id}")
        genre_id = parse_id_or_not_found(GenreID, Genre, command.id)
        categories = to_category_ids(command.categories)

        genre = self.genre_gateway.find_by_id(genre_id)
        if genre is None:
            raise NotFoundException.with_id(Genre, genre_id)

        notification = Notification.create()
        notification.append(validate_categories(self.category_gateway, categories))
        notification.validate(lambda: genre.update(command.name, command.is_active, categories))

        if notification.has_errors():
            logger.warning(f"Genre {genre_id} update rejected: {[e.message for e in notification.get_errors()]}")
            raise NotificationException(GENRE_UPDATE_ERROR.format(genre_id.get_value()), notification)

        return UpdateGenreOutput.from_genre(self.genre_gateway.update(genre))
