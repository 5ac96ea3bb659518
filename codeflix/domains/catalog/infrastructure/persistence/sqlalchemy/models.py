"""
Catalog Domain SQLAlchemy Models

Database models for catalog persistence.
Uses SQLAlchemy 2.0 style with Mapped[] type annotations.
"""

from datetime import datetime

from sqlalchemy import Boolean, DateTime, ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from codeflix.database.base import Base

ID_LENGTH = 26


class CategoryModel(Base):
    """SQLAlchemy model for the Category aggregate."""

    __tablename__ = "categories"

    id: Mapped[str] = mapped_column(String(ID_LENGTH), primary_key=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    active: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)

    # Dates
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    updated_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    deleted_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)

    def __repr__(self) -> str:
        return f"<CategoryModel(id={self.id}, name={self.name})>"


class GenreCategoryModel(Base):
    """Ordered link between a genre and a referenced category."""

    __tablename__ = "genres_categories"

    genre_id: Mapped[str] = mapped_column(
        String(ID_LENGTH), ForeignKey("genres.id", ondelete="CASCADE"), primary_key=True
    )
    category_id: Mapped[str] = mapped_column(
        String(ID_LENGTH), ForeignKey("categories.id", ondelete="CASCADE"), primary_key=True
    )
    position: Mapped[int] = mapped_column(Integer, nullable=False, default=0)

    genre: Mapped["GenreModel"] = relationship(back_populates="categories")


class GenreModel(Base):
    """SQLAlchemy model for the Genre aggregate."""

    __tablename__ = "genres"

    id: Mapped[str] = mapped_column(String(ID_LENGTH), primary_key=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    active: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)

    # Dates
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    updated_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    deleted_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)

    categories: Mapped[list[GenreCategoryModel]] = relationship(
        back_populates="genre",
        cascade="all, delete-orphan",
        order_by=GenreCategoryModel.position,
        lazy="selectin",
    )

    def __repr__(self) -> str:
        return f"<GenreModel(id={self.id}, name={self.name})>"
