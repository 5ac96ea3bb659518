"""
Dependency Injection Container

Centralized container for creating and managing all application dependencies.
Wires the catalog use cases to in-memory gateways, or to SQLAlchemy gateways
when DATABASE_URL is configured.
"""

from typing import Optional

from codeflix.config.settings import Settings, get_settings
from codeflix.core.shared import get_logger
from codeflix.database import DatabaseManager
from codeflix.domains.catalog.application.ports import ICategoryGateway, IGenreGateway
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
from codeflix.domains.catalog.infrastructure.persistence.in_memory import (
    InMemoryCategoryGateway,
    InMemoryGenreGateway,
)
from codeflix.domains.catalog.infrastructure.persistence.sqlalchemy import (
    SQLAlchemyCategoryGateway,
    SQLAlchemyGenreGateway,
)

logger = get_logger(__name__)


class DependencyContainer:
    """
    Dependency Injection Container.

    Gateways are created once per container and shared by every use case,
    so the in-memory store lives as long as the application.
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        category_gateway: Optional[ICategoryGateway] = None,
        genre_gateway: Optional[IGenreGateway] = None,
    ):
        """
        Initialize container.

        Args:
            settings: Application settings (uses default if not provided)
            category_gateway: Override for the category gateway
            genre_gateway: Override for the genre gateway
        """
        self.settings = settings or get_settings()
        self.database: Optional[DatabaseManager] = None

        if category_gateway is None or genre_gateway is None:
            if self.settings.use_database:
                self.database = DatabaseManager(self.settings.DATABASE_URL, echo=self.settings.DB_ECHO)
                self.database.create_tables()
                category_gateway = category_gateway or SQLAlchemyCategoryGateway(self.database.session_factory)
                genre_gateway = genre_gateway or SQLAlchemyGenreGateway(self.database.session_factory)
            else:
                genre_gateway = genre_gateway or InMemoryGenreGateway()
                # Deleting a category must drop it from the genres that reference it
                references = genre_gateway if isinstance(genre_gateway, InMemoryGenreGateway) else None
                category_gateway = category_gateway or InMemoryCategoryGateway(genre_gateway=references)

        self.category_gateway: ICategoryGateway = category_gateway
        self.genre_gateway: IGenreGateway = genre_gateway

        logger.with_context(
            category_gateway=type(self.category_gateway).__name__,
            genre_gateway=type(self.genre_gateway).__name__,
        ).info("DependencyContainer initialized")

    # ============================================================
    # CATEGORY USE CASES
    # ============================================================

    def create_create_category_use_case(self) -> CreateCategoryUseCase:
        return CreateCategoryUseCase(self.category_gateway)

    def create_update_category_use_case(self) -> UpdateCategoryUseCase:
        return UpdateCategoryUseCase(self.category_gateway)

    def create_delete_category_use_case(self) -> DeleteCategoryUseCase:
        return DeleteCategoryUseCase(self.category_gateway)

    def create_get_category_by_id_use_case(self) -> GetCategoryByIdUseCase:
        return GetCategoryByIdUseCase(self.category_gateway)

    def create_list_categories_use_case(self) -> ListCategoriesUseCase:
        return ListCategoriesUseCase(self.category_gateway)

    # ============================================================
    # GENRE USE CASES
    # ============================================================

    def create_create_genre_use_case(self) -> CreateGenreUseCase:
        return CreateGenreUseCase(self.category_gateway, self.genre_gateway)

    def create_update_genre_use_case(self) -> UpdateGenreUseCase:
        return UpdateGenreUseCase(self.category_gateway, self.genre_gateway)

    def create_delete_genre_use_case(self) -> DeleteGenreUseCase:
        return DeleteGenreUseCase(self.genre_gateway)

    def create_get_genre_by_id_use_case(self) -> GetGenreByIdUseCase:
        return GetGenreByIdUseCase(self.genre_gateway)

    def create_list_genres_use_case(self) -> ListGenresUseCase:
        return ListGenresUseCase(self.genre_gateway)

    def close(self) -> None:
        """Release database connections, if any."""
        if self.database is not None:
            self.database.dispose()
