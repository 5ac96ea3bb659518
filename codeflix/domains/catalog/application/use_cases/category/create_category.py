"""
Create Category Use Case

Validation problems are returned to the caller inside a Notification instead
of being raised, so the API can report every error at once.
"""

import logging
from dataclasses import dataclass

from codeflix.core.validation import Notification
from codeflix.domains.catalog.application.ports import ICategoryGateway
from codeflix.domains.catalog.application.use_cases.lookup import require_gateway
from codeflix.domains.catalog.domain.category import Category

logger = logging.getLogger(__name__)


@dataclass
class CreateCategoryCommand:
    """Command for creating a category."""

    name: str | None
    description: str | None = None
    is_active: bool = True

    @classmethod
    def with_(cls, name: str | None, description: str | None, is_active: bool | None) -> "CreateCategoryCommand":
        return cls(name, description, True if is_active is None else is_active)


@dataclass
class CreateCategoryOutput:
    """Identifier of the created category."""

    id: str

    @classmethod
    def from_category(cls, category: Category) -> "CreateCategoryOutput":
        return cls(category.id.get_value())


@dataclass
class CreateCategoryResult:
    """Either the errors that rejected the command or the created category."""

    output: CreateCategoryOutput | None = None
    notification: Notification | None = None

    @property
    def success(self) -> bool:
        return self.notification is None


class CreateCategoryUseCase:
    """
    Use case for creating a category.

    Single Responsibility: Only handles category creation
    Dependency Inversion: Depends on ICategoryGateway
    """

    def __init__(self, category_gateway: ICategoryGateway):
        """
        Initialize use case with dependencies.

        Args:
            category_gateway: Gateway for category persistence
        """
        self.category_gateway = require_gateway(category_gateway, "category_gateway")

    def execute(self, command: CreateCategoryCommand) -> CreateCategoryResult:
        """
        Execute create category use case.

        Args:
            command: Name, description and active flag

        Returns:
            Result with the new id, or with the notification that rejected it
        """
        logger.debug(f"Creating category: {command.name!r}")
        notification = Notification.create()
        category = notification.validate(
            lambda: Category.new_category(command.name, command.description, command.is_active)
        )

        if notification.has_errors():
            logger.warning(f"Category rejected: {[e.message for e in notification.get_errors()]}")
            return CreateCategoryResult(notification=notification)

        try:
            created = self.category_gateway.create(category)
        except Exception as e:
            logger.error(f"Error creating category: {e}", exc_info=True)
            return CreateCategoryResult(notification=Notification.create(e))

        return CreateCategoryResult(output=CreateCategoryOutput.from_category(created))
