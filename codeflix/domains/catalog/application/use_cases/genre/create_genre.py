"""
Create Genre Use Case

Category existence errors and genre validation errors are collected into one
Notification and raised together.
"""

import logging
from dataclasses import dataclass, field

from codeflix.core.domain import NotificationException
from codeflix.core.validation import Notification
from codeflix.domains.catalog.application.ports import ICategoryGateway, IGenreGateway
from codeflix.domains.catalog.application.use_cases.lookup import require_gateway
from codeflix.domains.catalog.domain.genre import Genre

from .category_references import to_category_ids, validate_categories

logger = logging.getLogger(__name__)

GENRE_CREATION_ERROR = "Could not create Aggregate Genre"


@dataclass
class CreateGenreCommand:
    """Command for creating a genre."""

    name: str | None
    is_active: bool = True
    categories: list[str] = field(default_factory=list)

    @classmethod
    def with_(cls, name: str | None, is_active: bool | None, categories: list[str] | None) -> "CreateGenreCommand":
        return cls(name, True if is_active is None else is_active, list(categories or []))


@dataclass
class CreateGenreOutput:
    """Identifier of the created genre."""

    id: str

    @classmethod
    def from_genre(cls, genre: Genre) -> "CreateGenreOutput":
        return cls(genre.id.get_value())


class CreateGenreUseCase:
    """
    Use case for creating a genre.

    Dependency Inversion: Depends on ICategoryGateway and IGenreGateway
    """

    def __init__(self, category_gateway: ICategoryGateway, genre_gateway: IGenreGateway):
        """
        Initialize use case with dependencies.

        Args:
            category_gateway: Gateway used to check category references
            genre_gateway: Gateway for genre persistence
        """
        self.category_gateway = require_gateway(category_gateway, "category_gateway")
        self.genre_gateway = require_gateway(genre_gateway, "genre_gateway")

    def execute(self, command: CreateGenreCommand) -> CreateGenreOutput:
        """
        Execute create genre use case.

        Raises:
            NotificationException: If categories are missing or the genre is invalid
            DomainException: If a category id is malformed
        """
        logger.debug(f"Creating genre: {command.name!r}")
        categories = to_category_ids(command.categories)

        notification = Notification.create()
        notification.append(validate_categories(self.category_gateway, categories))
        genre = notification.validate(lambda: Genre.new_genre(command.name, command.is_active, categories))

        if notification.has_errors():
            logger.warning(f"Genre rejected: {[e.message for e in notification.get_errors()]}")
            raise NotificationException(GENRE_CREATION_ERROR, notification)

        return CreateGenreOutput.from_genre(self.genre_gateway.create(genre))
