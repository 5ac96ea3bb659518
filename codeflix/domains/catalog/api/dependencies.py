"""
Catalog API Dependencies

FastAPI dependencies for the catalog domain. The container lives on the
application state, so every request shares the same gateways.
"""

from fastapi import Depends, Request

from codeflix.core.container import DependencyContainer
from codeflix.domains.catalog.application.use_cases.category import (
    CreateCategoryUseCase,
    DeleteCategoryUseCase,
    GetCategoryByIdUseCase,
    ListCategoriesUseCase,
    UpdateCategoryUseCase,
)
from codeflix.domains.catalog.application.use_cases.genre import (
    CreateGenreUseCase,
    DeleteGenreUseCase,
    GetGenreByIdUseCase,
    ListGenresUseCase,
    UpdateGenreUseCase,
)


def get_container(request: Request) -> DependencyContainer:
    """Get dependency container instance."""
    return request.app.state.container


def get_create_category_use_case(
    container: DependencyContainer = Depends(get_container),
) -> CreateCategoryUseCase:
    return container.create_create_category_use_case()


def get_update_category_use_case(
    container: DependencyContainer = Depends(get_container),
) -> UpdateCategoryUseCase:
    return container.create_update_category_use_case()


def get_delete_category_use_case(
    container: DependencyContainer = Depends(get_container),
) -> DeleteCategoryUseCase:
    return container.create_delete_category_use_case()


def get_get_category_by_id_use_case(
    container: DependencyContainer = Depends(get_container),
) -> GetCategoryByIdUseCase:
    return container.create_get_category_by_id_use_case()


def get_list_categories_use_case(
    container: DependencyContainer = Depends(get_container),
) -> ListCategoriesUseCase:
    return container.create_list_categories_use_case()


def get_create_genre_use_case(
    container: DependencyContainer = Depends(get_container),
) -> CreateGenreUseCase:
    return container.create_create_genre_use_case()


def get_update_genre_use_case(
    container: DependencyContainer = Depends(get_container),
) -> UpdateGenreUseCase:
    return container.create_update_genre_use_case()


def get_delete_genre_use_case(
    container: DependencyContainer = Depends(get_container),
) -> DeleteGenreUseCase:
    return container.create_delete_genre_use_case()


def get_get_genre_by_id_use_case(
    container: DependencyContainer = Depends(get_container),
) -> GetGenreByIdUseCase:
    return container.create_get_genre_by_id_use_case()


def get_list_genres_use_case(
    container: DependencyContainer = Depends(get_container),
) -> ListGenresUseCase:
    return container.create_list_genres_use_case()


__all__ = [
    "get_container",
    "get_create_category_use_case",
    "get_update_category_use_case",
    "get_delete_category_use_case",
    "get_get_category_by_id_use_case",
    "get_list_categories_use_case",
    "get_create_genre_use_case",
    "get_update_genre_use_case",
    "get_delete_genre_use_case",
    "get_get_genre_by_id_use_case",
    "get_list_genres_use_case",
]
