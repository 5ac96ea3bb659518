"""
Category Use Cases
"""

from .create_category import (
    CreateCategoryCommand,
    CreateCategoryOutput,
    CreateCategoryResult,
    CreateCategoryUseCase,
)
from .delete_category import DeleteCategoryUseCase
from .get_category_by_id import CategoryOutput, GetCategoryByIdUseCase
from .list_categories import CategoryListOutput, ListCategoriesUseCase
from .update_category import (
    UpdateCategoryCommand,
    UpdateCategoryOutput,
    UpdateCategoryResult,
    UpdateCategoryUseCase,
)

__all__ = [
    "CreateCategoryCommand",
    "CreateCategoryOutput",
    "CreateCategoryResult",
    "CreateCategoryUseCase",
    "UpdateCategoryCommand",
    "UpdateCategoryOutput",
    "UpdateCategoryResult",
    "UpdateCategoryUseCase",
    "DeleteCategoryUseCase",
    "GetCategoryByIdUseCase",
    "CategoryOutput",
    "ListCategoriesUseCase",
    "CategoryListOutput",
]
