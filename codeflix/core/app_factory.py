"""
Application factory for FastAPI.

This module follows SRP by handling only FastAPI application creation and configuration.
"""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from codeflix.api.exception_handlers import register_exception_handlers
from codeflix.api.router import api_router
from codeflix.config.settings import Settings, get_settings
from codeflix.core.container import DependencyContainer

logger = logging.getLogger(__name__)


class AppFactory:
    """
    Factory for creating and configuring FastAPI applications.

    Separates application creation from configuration details.
    Each configuration step is handled by a dedicated method.
    """

    def __init__(self, settings: Settings | None = None, container: DependencyContainer | None = None) -> None:
        """
        Initialize app factory.

        Args:
            settings: Application settings (uses default if not provided)
            container: Pre-built dependency container (built from settings if not provided)
        """
        self._settings = settings or get_settings()
        self._container = container

    def create_app(self) -> FastAPI:
        """
        Create and configure the FastAPI application.

        Returns:
            Configured FastAPI application instance.
        """
        app = self._create_base_app()

        self._configure_container(app)
        self._configure_exception_handlers(app)
        self._configure_routes(app)
        self._configure_health_endpoint(app)

        logger.info(f"Application created: {self._settings.PROJECT_NAME}")
        return app

    def _create_base_app(self) -> FastAPI:
        """Create the base FastAPI application with lifespan."""
        return FastAPI(
            title=self._settings.PROJECT_NAME,
            description=self._settings.PROJECT_DESCRIPTION,
            version=self._settings.VERSION,
            docs_url=f"{self._settings.API_V1_STR}/docs" if self._settings.DEBUG else None,
            redoc_url=f"{self._settings.API_V1_STR}/redoc" if self._settings.DEBUG else None,
            lifespan=_lifespan,
        )

    def _configure_container(self, app: FastAPI) -> None:
        """Attach the dependency container shared by all requests."""
        app.state.container = self._container or DependencyContainer(self._settings)

    def _configure_exception_handlers(self, app: FastAPI) -> None:
        """Register exception handlers."""
        register_exception_handlers(app)

    def _configure_routes(self, app: FastAPI) -> None:
        """Configure API routes."""
        app.include_router(api_router, prefix=self._settings.API_V1_STR)

        logger.info("Routes configured")

    def _configure_health_endpoint(self, app: FastAPI) -> None:
        """Add health check endpoint."""

        @app.get("/health", tags=["health"])
        def health_check() -> dict[str, str]:
            """
            Verify application health status.

            Returns basic status and environment information.
            """
            return {
                "status": "ok",
                "environment": self._settings.ENVIRONMENT,
            }


@asynccontextmanager
async def _lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Release the container resources on shutdown."""
    yield
    app.state.container.close()
    logger.info("Application shutdown complete")


def create_app(settings: Settings | None = None, container: DependencyContainer | None = None) -> FastAPI:
    """
    Create FastAPI application using the factory.

    This is the main entry point for application creation.

    Args:
        settings: Optional settings override
        container: Optional dependency container override

    Returns:
        Configured FastAPI application
    """
    factory = AppFactory(settings, container)
    return factory.create_app()
