"""
Get Category By ID Use Case
"""

import logging
from dataclasses import dataclass
from datetime import datetime

from codeflix.core.domain import NotFoundException
from codeflix.domains.catalog.application.ports import ICategoryGateway
from codeflix.domains.catalog.application.use_cases.lookup import parse_id_or_not_found, require_gateway
from codeflix.domains.catalog.domain.category import Category, CategoryID

logger = logging.getLogger(__name__)


@dataclass
class CategoryOutput:
    """Full view of a category."""

    id: str
    name: str
    description: str | None
    is_active: bool
    created_at: datetime
    updated_at: datetime
    deleted_at: datetime | None

    @classmethod
    def from_category(cls, category: Category) -> "CategoryOutput":
        return cls(
            id=category.id.get_value(),
            name=category.name,
            description=category.description,
            is_active=category.active,
            created_at=category.created_at,
            updated_at=category.updated_at,
            deleted_at=category.deleted_at,
        )


class GetCategoryByIdUseCase:
    """
    Use case for getting a category by ID.

    Single Responsibility: Only handles single category retrieval
    """

    def __init__(self, category_gateway: ICategoryGateway):
        self.category_gateway = require_gateway(category_gateway, "category_gateway")

    def execute(self, id: str) -> CategoryOutput:
        """
        Execute get category by ID use case.

        Raises:
            NotFoundException: If the id is malformed or unknown
        """
        category_id = parse_id_or_not_found(CategoryID, Category, id)
        category = self.category_gateway.find_by_id(category_id)
        if category is None:
            raise NotFoundException.with_id(Category, id)
        return CategoryOutput.from_category(category)
