"""
Catalog API Schemas

Pydantic schemas for API request/response validation. Request fields are
optional so that missing values reach the domain validators, which report
them with the domain error messages.
"""

from datetime import datetime
from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field

from codeflix.core.pagination import Pagination

T = TypeVar("T")


class CreateCategoryRequest(BaseModel):
    """Category creation request schema."""

    name: str | None = None
    description: str | None = None
    is_active: bool | None = None


class UpdateCategoryRequest(CreateCategoryRequest):
    """Category update request schema."""


class CategoryResponse(BaseModel):
    """Category response schema."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    description: str | None = None
    is_active: bool
    created_at: datetime
    updated_at: datetime
    deleted_at: datetime | None = None


class CreateGenreRequest(BaseModel):
    """Genre creation request schema."""

    name: str | None = None
    is_active: bool | None = None
    categories: list[str] = Field(default_factory=list, description="Category ids")


class UpdateGenreRequest(CreateGenreRequest):
    """Genre update request schema."""


class GenreResponse(BaseModel):
    """Genre response schema."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    is_active: bool
    categories: list[str] = Field(default_factory=list)
    created_at: datetime
    updated_at: datetime
    deleted_at: datetime | None = None


class IdResponse(BaseModel):
    """Identifier of a created or updated aggregate."""

    model_config = ConfigDict(from_attributes=True)

    id: str


class PageResponse(BaseModel, Generic[T]):
    """One page of a listing."""

    current_page: int
    per_page: int
    total: int
    total_pages: int
    items: list[T]

    @classmethod
    def from_pagination(cls, page: Pagination, item_schema: type[BaseModel]) -> "PageResponse":
        return cls(
            current_page=page.page,
            per_page=page.per_page,
            total=page.total,
            total_pages=page.total_pages,
            items=[item_schema.model_validate(item) for item in page.data],
        )
