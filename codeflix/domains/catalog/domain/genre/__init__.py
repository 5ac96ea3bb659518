from .genre import GENRE_CREATION_ERROR, GENRE_UPDATE_ERROR, Genre
from .genre_id import GenreID
from .genre_validator import (
    EMPTY_NAME_ERROR,
    NAME_LENGTH_OUT_OF_RANGE_ERROR,
    NAME_MAX_LENGTH,
    NAME_MIN_LENGTH,
    NULL_NAME_ERROR,
    GenreValidator,
)

__all__ = [
    "Genre",
    "GenreID",
    "GenreValidator",
    "GENRE_CREATION_ERROR",
    "GENRE_UPDATE_ERROR",
    "NAME_MIN_LENGTH",
    "NAME_MAX_LENGTH",
    "NULL_NAME_ERROR",
    "EMPTY_NAME_ERROR",
    "NAME_LENGTH_OUT_OF_RANGE_ERROR",
]
