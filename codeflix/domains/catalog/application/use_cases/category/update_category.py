"""
Update Category Use Case
"""

import logging
from dataclasses import dataclass

from codeflix.core.domain import NotFoundException
from codeflix.core.validation import Notification
from codeflix.domains.catalog.application.ports import ICategoryGateway
from codeflix.domains.catalog.application.use_cases.lookup import parse_id_or_not_found, require_gateway
from codeflix.domains.catalog.domain.category import Category, CategoryID

logger = logging.getLogger(__name__)


@dataclass
class UpdateCategoryCommand:
    """Command for updating a category."""

    id: str
    name: str | None
    description: str | None = None
    is_active: bool = True

    @classmethod
    def with_(
        cls, id: str, name: str | None, description: str | None, is_active: bool | None
    ) -> "UpdateCategoryCommand":
        return cls(id, name, description, True if is_active is None else is_active)


@dataclass
class UpdateCategoryOutput:
    """Identifier of the updated category."""

    id: str

    @classmethod
    def from_category(cls, category: Category) -> "UpdateCategoryOutput":
        return cls(category.id.get_value())


@dataclass
class UpdateCategoryResult:
    """Either the errors that rejected the command or the updated category."""

    output: UpdateCategoryOutput | None = None
    notification: Notification | None = None

    @property
    def success(self) -> bool:
        return self.notification is None


class UpdateCategoryUseCase:
    """
    Use case for updating a category.

    The category is loaded, changed as one unit and stored again.
    """

    def __init__(self, category_gateway: ICategoryGateway):
        self.category_gateway = require_gateway(category_gateway, "category_gateway")

    def execute(self, command: UpdateCategoryCommand) -> UpdateCategoryResult:
        """
        Execute update category use case.

        Returns:
            Result with the category id, or with the notification that rejected it

        Raises:
            NotFoundException: If no category has the given id
        """
        logger.debug(f"Updating category {command.id}")
        category_id = parse_id_or_not_found(CategoryID, Category, command.id)
        category = self.category_gateway.find_by_id(category_id)
        if category is None:
            raise NotFoundException.with_id(Category, category_id)

        notification = Notification.create()
        notification.validate(lambda: category.update(command.name, command.description, command.is_active))

        if notification.has_errors():
            logger.warning(f"Category {category_id} update rejected: {[e.message for e in notification.get_errors()]}")
            return UpdateCategoryResult(notification=notification)

        try:
            updated = self.category_gateway.update(category)
        except Exception as e:
            logger.error(f"Error updating category {category_id}: {e}", exc_info=True)
            return UpdateCategoryResult(notification=Notification.create(e))

        return UpdateCategoryResult(output=UpdateCategoryOutput.from_category(updated))
