"""
Delete Category Use Case
"""

import logging

from codeflix.core.domain import DomainException
from codeflix.domains.catalog.application.ports import ICategoryGateway
from codeflix.domains.catalog.application.use_cases.lookup import require_gateway
from codeflix.domains.catalog.domain.category import CategoryID

logger = logging.getLogger(__name__)


class DeleteCategoryUseCase:
    """Removes a category; deleting an unknown id is a no-op."""

    def __init__(self, category_gateway: ICategoryGateway):
        self.category_gateway = require_gateway(category_gateway, "category_gateway")

    def execute(self, id: str) -> None:
        try:
            category_id = CategoryID.from_string(id)
        except DomainException:
            logger.debug(f"Ignoring delete of malformed category id {id!r}")
            return

        self.category_gateway.delete_by_id(category_id)
