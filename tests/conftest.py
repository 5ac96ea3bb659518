"""
Shared pytest fixtures for all tests.

This module provides in-memory gateways, sample aggregates, settings and an
SQLite-backed database for the catalog tests.
"""

import os

import pytest

from codeflix.config.settings import Settings, reset_settings
from codeflix.database import DatabaseManager
from codeflix.domains.catalog.domain.category import Category
from codeflix.domains.catalog.domain.genre import Genre
from codeflix.domains.catalog.infrastructure.persistence.in_memory import (
    InMemoryCategoryGateway,
    InMemoryGenreGateway,
)

# Ensure test environment
os.environ["ENVIRONMENT"] = "test"


# ============================================================================
# SETTINGS
# ============================================================================


@pytest.fixture(autouse=True)
def _reset_settings():
    """Drop the cached settings between tests."""
    reset_settings()
    yield
    reset_settings()


@pytest.fixture
def test_settings() -> Settings:
    """Settings using the in-memory gateways."""
    return Settings(ENVIRONMENT="test", DEBUG=True, DATABASE_URL=None, _env_file=None)


# ============================================================================
# GATEWAYS
# ============================================================================


@pytest.fixture
def category_gateway() -> InMemoryCategoryGateway:
    """Empty in-memory category gateway."""
    return InMemoryCategoryGateway()


@pytest.fixture
def genre_gateway() -> InMemoryGenreGateway:
    """Empty in-memory genre gateway."""
    return InMemoryGenreGateway()


# ============================================================================
# SAMPLE AGGREGATES
# ============================================================================


@pytest.fixture
def movies_category() -> Category:
    """Active category."""
    return Category.new_category("Filmes", "A categoria mais assistida", True)


@pytest.fixture
def series_category() -> Category:
    """Second active category."""
    return Category.new_category("Séries", "Episódios semanais", True)


@pytest.fixture
def action_genre(movies_category: Category) -> Genre:
    """Active genre referencing one category."""
    return Genre.new_genre("Ação", True, [movies_category.id])


# ============================================================================
# DATABASE FIXTURES
# ============================================================================


@pytest.fixture
def database():
    """SQLite in-memory database with the catalog tables created."""
    manager = DatabaseManager("sqlite:///:memory:")
    manager.create_tables()
    yield manager
    manager.drop_tables()
    manager.dispose()
