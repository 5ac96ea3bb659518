"""
Catalog API Routes

FastAPI routers for category and genre endpoints. Handlers are thin: they
translate HTTP input into commands and leave error mapping to the
registered exception handlers.
"""

from fastapi import APIRouter, Depends, Query, Response, status

from codeflix.core.container import DependencyContainer
from codeflix.core.domain import NotificationException
from codeflix.core.pagination import SearchQuery
from codeflix.core.shared import get_api_logger
from codeflix.domains.catalog.api.dependencies import (
    get_container,
    get_create_category_use_case,
    get_create_genre_use_case,
    get_delete_category_use_case,
    get_delete_genre_use_case,
    get_get_category_by_id_use_case,
    get_get_genre_by_id_use_case,
    get_list_categories_use_case,
    get_list_genres_use_case,
    get_update_category_use_case,
    get_update_genre_use_case,
)
from codeflix.domains.catalog.api.schemas import (
    CategoryResponse,
    CreateCategoryRequest,
    CreateGenreRequest,
    GenreResponse,
    IdResponse,
    PageResponse,
    UpdateCategoryRequest,
    UpdateGenreRequest,
)
from codeflix.domains.catalog.application.use_cases.category import (
    CreateCategoryCommand,
    CreateCategoryUseCase,
    DeleteCategoryUseCase,
    GetCategoryByIdUseCase,
    ListCategoriesUseCase,
    UpdateCategoryCommand,
    UpdateCategoryUseCase,
)
from codeflix.domains.catalog.application.use_cases.genre import (
    CreateGenreCommand,
    CreateGenreUseCase,
    DeleteGenreUseCase,
    GetGenreByIdUseCase,
    ListGenresUseCase,
    UpdateGenreCommand,
    UpdateGenreUseCase,
)

CATEGORY_CREATION_ERROR = "Could not create Aggregate Category"
CATEGORY_UPDATE_ERROR = "Could not update Aggregate Category {}"

category_router = APIRouter(prefix="/categories", tags=["Categories"])
genre_router = APIRouter(prefix="/genres", tags=["Genres"])

logger = get_api_logger("catalog")


def _search_query(
    container: DependencyContainer,
    search: str | None,
    page: int,
    per_page: int | None,
    sort: str | None,
    direction: str | None,
) -> SearchQuery:
    settings = container.settings
    return SearchQuery.of(
        page,
        per_page if per_page is not None and per_page > 0 else settings.DEFAULT_PER_PAGE,
        search,
        sort or settings.DEFAULT_SORT,
        direction or settings.DEFAULT_DIRECTION,
    )


# ============================================================
# CATEGORIES
# ============================================================


@category_router.post("", response_model=IdResponse, status_code=status.HTTP_201_CREATED)
def create_category(
    request: CreateCategoryRequest,
    response: Response,
    use_case: CreateCategoryUseCase = Depends(get_create_category_use_case),
):
    """Create a category."""
    command = CreateCategoryCommand.with_(request.name, request.description, request.is_active)
    result = use_case.execute(command)

    if not result.success:
        raise NotificationException(CATEGORY_CREATION_ERROR, result.notification)

    logger.info("Category created", category_id=result.output.id)
    response.headers["Location"] = f"/categories/{result.output.id}"
    return IdResponse(id=result.output.id)


@category_router.get("", response_model=PageResponse[CategoryResponse])
def list_categories(
    search: str | None = Query(None, description="Terms matched against name and description"),
    page: int = Query(1, description="1-based page number"),
    per_page: int | None = Query(None, alias="perPage"),
    sort: str | None = Query(None, description="name, createdAt or updatedAt"),
    direction: str | None = Query(None, alias="dir", description="asc or desc"),
    container: DependencyContainer = Depends(get_container),
    use_case: ListCategoriesUseCase = Depends(get_list_categories_use_case),
):
    """List categories."""
    query = _search_query(container, search, page, per_page, sort, direction)
    return PageResponse[CategoryResponse].from_pagination(use_case.execute(query), CategoryResponse)


@category_router.get("/{category_id}", response_model=CategoryResponse)
def get_category(
    category_id: str,
    use_case: GetCategoryByIdUseCase = Depends(get_get_category_by_id_use_case),
):
    """Get a category by id."""
    return CategoryResponse.model_validate(use_case.execute(category_id))


@category_router.put("/{category_id}", response_model=IdResponse)
def update_category(
    category_id: str,
    request: UpdateCategoryRequest,
    use_case: UpdateCategoryUseCase = Depends(get_update_category_use_case),
):
    """Update a category."""
    command = UpdateCategoryCommand.with_(category_id, request.name, request.description, request.is_active)
    result = use_case.execute(command)

    if not result.success:
        raise NotificationException(CATEGORY_UPDATE_ERROR.format(category_id), result.notification)

    return IdResponse(id=result.output.id)


@category_router.delete("/{category_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_category(
    category_id: str,
    use_case: DeleteCategoryUseCase = Depends(get_delete_category_use_case),
) -> Response:
    """Delete a category; unknown ids are ignored."""
    use_case.execute(category_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


# ============================================================
# GENRES
# ============================================================


@genre_router.post("", response_model=IdResponse, status_code=status.HTTP_201_CREATED)
def create_genre(
    request: CreateGenreRequest,
    response: Response,
    use_case: CreateGenreUseCase = Depends(get_create_genre_use_case),
):
    """Create a genre."""
    output = use_case.execute(CreateGenreCommand.with_(request.name, request.is_active, request.categories))
    logger.info("Genre created", genre_id=output.id)
    response.headers["Location"] = f"/genres/{output.id}"
    return IdResponse(id=output.id)


@genre_router.get("", response_model=PageResponse[GenreResponse])
def list_genres(
    search: str | None = Query(None, description="Terms matched against name"),
    page: int = Query(1, description="1-based page number"),
    per_page: int | None = Query(None, alias="perPage"),
    sort: str | None = Query(None, description="name, createdAt or updatedAt"),
    direction: str | None = Query(None, alias="dir", description="asc or desc"),
    container: DependencyContainer = Depends(get_container),
    use_case: ListGenresUseCase = Depends(get_list_genres_use_case),
):
    """List genres."""
    query = _search_query(container, search, page, per_page, sort, direction)
    return PageResponse[GenreResponse].from_pagination(use_case.execute(query), GenreResponse)


@genre_router.get("/{genre_id}", response_model=GenreResponse)
def get_genre(
    genre_id: str,
    use_case: GetGenreByIdUseCase = Depends(get_get_genre_by_id_use_case),
):
    """Get a genre by id."""
    return GenreResponse.model_validate(use_case.execute(genre_id))


@genre_router.put("/{genre_id}", response_model=IdResponse)
def update_genre(
    genre_id: str,
    request: UpdateGenreRequest,
    use_case: UpdateGenreUseCase = Depends(get_update_genre_use_case),
):
    """Update a genre."""
    command = UpdateGenreCommand.with_(genre_id, request.name, request.is_active, request.categories)
    return IdResponse(id=use_case.execute(command).id)


@genre_router.delete("/{genre_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_genre(
    genre_id: str,
    use_case: DeleteGenreUseCase = Depends(get_delete_genre_use_case),
) -> Response:
    """Delete a genre; unknown ids are ignored."""
    use_case.execute(genre_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


__all__ = ["category_router", "genre_router"]
