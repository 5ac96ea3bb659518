"""
Shared query building for the SQLAlchemy gateways.
"""

from datetime import UTC, datetime
from typing import Any

from sqlalchemy import Select, func, or_, select
from sqlalchemy.orm import Session

from codeflix.core.pagination import DEFAULT_SORT, Pagination, SearchQuery


def as_utc(value: datetime | None) -> datetime | None:
    """Backends without timezone support hand back naive UTC values."""
    if value is None or value.tzinfo is not None:
        return value
    return value.replace(tzinfo=UTC)


def paginate(
    session: Session,
    model: Any,
    query: SearchQuery,
    search_columns: list[Any],
) -> Pagination[Any]:
    """
    Run a filtered, sorted and paged query over `model`.

    Raises:
        PaginationException: If the requested page is past the last page
    """
    sort_columns = {
        "name": model.name,
        "createdAt": model.created_at,
        "created_at": model.created_at,
        "updatedAt": model.updated_at,
        "updated_at": model.updated_at,
    }

    stmt: Select = select(model)
    if query.terms is not None:
        pattern = f"%{query.terms}%"
        stmt = stmt.where(or_(*(column.ilike(pattern) for column in search_columns)))

    total = session.scalar(select(func.count()).select_from(stmt.subquery())) or 0

    sort_column = sort_columns.get(query.sort, sort_columns[DEFAULT_SORT])
    if query.sort == "name":
        sort_column = func.lower(sort_column)
    order = sort_column.desc() if query.is_descending() else sort_column.asc()

    stmt = (
        stmt.order_by(order, model.id.asc())
        .offset((query.page - 1) * query.per_page)
        .limit(query.per_page)
    )
    rows = list(session.scalars(stmt).all())
    return Pagination.from_page(query.page, query.per_page, total, rows)
