"""
Catalog Domain Layer

Aggregates:
- Category: name, description, active flag
- Genre: name, active flag, CategoryID references
"""

from codeflix.domains.catalog.domain.category import Category, CategoryID, CategoryValidator
from codeflix.domains.catalog.domain.genre import Genre, GenreID, GenreValidator

__all__ = [
    "Category",
    "CategoryID",
    "CategoryValidator",
    "Genre",
    "GenreID",
    "GenreValidator",
]
