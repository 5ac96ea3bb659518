"""
Genre Use Cases
"""

from .category_references import CATEGORIES_NOT_FOUND_ERROR
from .create_genre import GENRE_CREATION_ERROR, CreateGenreCommand, CreateGenreOutput, CreateGenreUseCase
from .delete_genre import DeleteGenreUseCase
from .get_genre_by_id import GenreOutput, GetGenreByIdUseCase
from .list_genres import GenreListOutput, ListGenresUseCase
from .update_genre import GENRE_UPDATE_ERROR, UpdateGenreCommand, UpdateGenreOutput, UpdateGenreUseCase

__all__ = [
    "CATEGORIES_NOT_FOUND_ERROR",
    "GENRE_CREATION_ERROR",
    "GENRE_UPDATE_ERROR",
    "CreateGenreCommand",
    "CreateGenreOutput",
    "CreateGenreUseCase",
    "UpdateGenreCommand",
    "UpdateGenreOutput",
    "UpdateGenreUseCase",
    "DeleteGenreUseCase",
    "GetGenreByIdUseCase",
    "GenreOutput",
    "ListGenresUseCase",
    "GenreListOutput",
]
