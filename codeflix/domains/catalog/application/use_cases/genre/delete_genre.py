"""
Delete Genre Use Case
"""

import logging

from codeflix.core.domain import DomainException
from codeflix.domains.catalog.application.ports import IGenreGateway
from codeflix.domains.catalog.application.use_cases.lookup import require_gateway
from codeflix.domains.catalog.domain.genre import GenreID

logger = logging.getLogger(__name__)


class DeleteGenreUseCase:
    """Removes a genre; deleting an unknown id is a no-op."""

    def __init__(self, genre_gateway: IGenreGateway):
        self.genre_gateway = require_gateway(genre_gateway, "genre_gateway")

    def execute(self, id: str) -> None:
        try:
            genre_id = GenreID.from_string(id)
        except DomainException:
            logger.debug(f"Ignoring delete of malformed genre id {id!r}")
            return

        self.genre_gateway.delete_by_id(genre_id)
