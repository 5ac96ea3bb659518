"""
SQLAlchemy Genre Gateway

Category references are stored in `genres_categories`, keeping their order.
"""

import logging
from typing import Optional

from sqlalchemy import delete
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

from codeflix.core.pagination import Pagination, SearchQuery
from codeflix.domains.catalog.application.ports import IGenreGateway
from codeflix.domains.catalog.domain.category import CategoryID
from codeflix.domains.catalog.domain.genre import Genre, GenreID

from .models import GenreCategoryModel, GenreModel
from .search import as_utc, paginate

logger = logging.getLogger(__name__)


class SQLAlchemyGenreGateway(IGenreGateway):
    """Genre gateway backed by the `genres` and `genres_categories` tables."""

    def __init__(self, session_factory: sessionmaker[Session]):
        self._session_factory = session_factory

    def create(self, aggregate: Genre) -> Genre:
        try:
            with self._session_factory.begin() as session:
                model = GenreModel(id=aggregate.id.get_value())
                self._copy_into(aggregate, model)
                session.add(model)
            return aggregate
        except SQLAlchemyError as e:
            logger.error(f"Error creating genre {aggregate.id}: {e}", exc_info=True)
            raise

    def update(self, aggregate: Genre) -> Genre:
        try:
            with self._session_factory.begin() as session:
                model = session.get(GenreModel, aggregate.id.get_value())
                if model is None:
                    model = GenreModel(id=aggregate.id.get_value())
                    session.add(model)
                self._copy_into(aggregate, model)
            return aggregate
        except SQLAlchemyError as e:
            logger.error(f"Error updating genre {aggregate.id}: {e}", exc_info=True)
            raise

    def delete_by_id(self, id: GenreID) -> None:
        try:
            with self._session_factory.begin() as session:
                session.execute(delete(GenreCategoryModel).where(GenreCategoryModel.genre_id == id.get_value()))
                session.execute(delete(GenreModel).where(GenreModel.id == id.get_value()))
        except SQLAlchemyError as e:
            logger.error(f"Error deleting genre {id}: {e}", exc_info=True)
            raise

    def find_by_id(self, id: GenreID) -> Optional[Genre]:
        try:
            with self._session_factory() as session:
                model = session.get(GenreModel, id.get_value())
                return self._to_aggregate(model) if model is not None else None
        except SQLAlchemyError as e:
            logger.error(f"Error finding genre by ID {id}: {e}", exc_info=True)
            raise

    def find_all(self, query: SearchQuery) -> Pagination[Genre]:
        try:
            with self._session_factory() as session:
                page = paginate(session, GenreModel, query, [GenreModel.name])
                return page.map(self._to_aggregate)
        except SQLAlchemyError as e:
            logger.error(f"Error listing genres: {e}", exc_info=True)
            raise

    @staticmethod
    def _copy_into(genre: Genre, model: GenreModel) -> None:
        model.name = genre.name
        model.active = genre.active
        model.created_at = genre.created_at
        model.updated_at = genre.updated_at
        model.deleted_at = genre.deleted_at

        # Reuse existing links so unchanged references are not deleted and re-inserted
        existing = {link.category_id: link for link in model.categories}
        links = []
        for position, category_id in enumerate(genre.categories):
            link = existing.get(category_id.get_value()) or GenreCategoryModel(category_id=category_id.get_value())
            link.position = position
            links.append(link)
        model.categories = links

    @staticmethod
    def _to_aggregate(model: GenreModel) -> Genre:
        return Genre.with_(
            GenreID.from_string(model.id),
            model.name,
            model.active,
            [CategoryID.from_string(link.category_id) for link in model.categories],
            as_utc(model.created_at),
            as_utc(model.updated_at),
            as_utc(model.deleted_at),
        )
