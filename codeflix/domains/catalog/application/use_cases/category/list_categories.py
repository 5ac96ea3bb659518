"""
List Categories Use Case
"""

import logging
from dataclasses import dataclass
from datetime import datetime

from codeflix.core.pagination import Pagination, SearchQuery
from codeflix.domains.catalog.application.ports import ICategoryGateway
from codeflix.domains.catalog.application.use_cases.lookup import require_gateway
from codeflix.domains.catalog.domain.category import Category

logger = logging.getLogger(__name__)


@dataclass
class CategoryListOutput:
    """Row of a category listing."""

    id: str
    name: str
    description: str | None
    is_active: bool
    created_at: datetime
    updated_at: datetime
    deleted_at: datetime | None

    @classmethod
    def from_category(cls, category: Category) -> "CategoryListOutput":
        return cls(
            id=category.id.get_value(),
            name=category.name,
            description=category.description,
            is_active=category.active,
            created_at=category.created_at,
            updated_at=category.updated_at,
            deleted_at=category.deleted_at,
        )


class ListCategoriesUseCase:
    """Returns one page of categories matching a search query."""

    def __init__(self, category_gateway: ICategoryGateway):
        self.category_gateway = require_gateway(category_gateway, "category_gateway")

    def execute(self, query: SearchQuery) -> Pagination[CategoryListOutput]:
        logger.debug(f"Listing categories: {query}")
        return self.category_gateway.find_all(query).map(CategoryListOutput.from_category)
