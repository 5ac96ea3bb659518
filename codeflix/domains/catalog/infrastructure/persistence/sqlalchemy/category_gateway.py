"""
SQLAlchemy Category Gateway

Gateway implementation for the Category aggregate over a synchronous
SQLAlchemy session factory.
"""

import logging
from collections.abc import Iterable
from typing import Optional

from sqlalchemy import delete, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

from codeflix.core.pagination import Pagination, SearchQuery
from codeflix.domains.catalog.application.ports import ICategoryGateway
from codeflix.domains.catalog.domain.category import Category, CategoryID

from .models import CategoryModel, GenreCategoryModel
from .search import as_utc, paginate

logger = logging.getLogger(__name__)


class SQLAlchemyCategoryGateway(ICategoryGateway):
    """
    Category gateway backed by the `categories` table.

    Single Responsibility: Data access for Category aggregates only
    Dependency Inversion: Implements ICategoryGateway
    """

    def __init__(self, session_factory: sessionmaker[Session]):
        """
        Initialize gateway with a session factory.

        Args:
            session_factory: Factory creating synchronous SQLAlchemy sessions
        """
        self._session_factory = session_factory

    def create(self, aggregate: Category) -> Category:
        try:
            with self._session_factory.begin() as session:
                session.add(self._to_model(aggregate))
            return aggregate
        except SQLAlchemyError as e:
            logger.error(f"Error creating category {aggregate.id}: {e}", exc_info=True)
            raise

    def update(self, aggregate: Category) -> Category:
        try:
            with self._session_factory.begin() as session:
                session.merge(self._to_model(aggregate))
            return aggregate
        except SQLAlchemyError as e:
            logger.error(f"Error updating category {aggregate.id}: {e}", exc_info=True)
            raise

    def delete_by_id(self, id: CategoryID) -> None:
        try:
            with self._session_factory.begin() as session:
                session.execute(delete(GenreCategoryModel).where(GenreCategoryModel.category_id == id.get_value()))
                session.execute(delete(CategoryModel).where(CategoryModel.id == id.get_value()))
        except SQLAlchemyError as e:
            logger.error(f"Error deleting category {id}: {e}", exc_info=True)
            raise

    def find_by_id(self, id: CategoryID) -> Optional[Category]:
        try:
            with self._session_factory() as session:
                model = session.get(CategoryModel, id.get_value())
                return self._to_aggregate(model) if model is not None else None
        except SQLAlchemyError as e:
            logger.error(f"Error finding category by ID {id}: {e}", exc_info=True)
            raise

    def find_all(self, query: SearchQuery) -> Pagination[Category]:
        try:
            with self._session_factory() as session:
                page = paginate(session, CategoryModel, query, [CategoryModel.name, CategoryModel.description])
                return page.map(self._to_aggregate)
        except SQLAlchemyError as e:
            logger.error(f"Error listing categories: {e}", exc_info=True)
            raise

    def exists_by_ids(self, ids: Iterable[CategoryID]) -> list[CategoryID]:
        requested = list(dict.fromkeys(ids))
        if not requested:
            return []
        try:
            with self._session_factory() as session:
                found = set(
                    session.scalars(
                        select(CategoryModel.id).where(CategoryModel.id.in_([i.get_value() for i in requested]))
                    ).all()
                )
            return [category_id for category_id in requested if category_id.get_value() in found]
        except SQLAlchemyError as e:
            logger.error(f"Error checking category ids: {e}", exc_info=True)
            raise

    @staticmethod
    def _to_model(category: Category) -> CategoryModel:
        return CategoryModel(
            id=category.id.get_value(),
            name=category.name,
            description=category.description,
            active=category.active,
            created_at=category.created_at,
            updated_at=category.updated_at,
            deleted_at=category.deleted_at,
        )

    @staticmethod
    def _to_aggregate(model: CategoryModel) -> Category:
        return Category.with_(
            CategoryID.from_string(model.id),
            model.name,
            model.description,
            model.active,
            as_utc(model.created_at),
            as_utc(model.updated_at),
            as_utc(model.deleted_at),
        )
