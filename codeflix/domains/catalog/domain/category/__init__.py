from .category import CATEGORY_CREATION_ERROR, CATEGORY_UPDATE_ERROR, Category
from .category_id import CategoryID
from .category_validator import (
    EMPTY_NAME_ERROR,
    NAME_LENGTH_OUT_OF_RANGE_ERROR,
    NAME_MAX_LENGTH,
    NAME_MIN_LENGTH,
    NULL_NAME_ERROR,
    CategoryValidator,
)

__all__ = [
    "Category",
    "CategoryID",
    "CategoryValidator",
    "CATEGORY_CREATION_ERROR",
    "CATEGORY_UPDATE_ERROR",
    "NAME_MIN_LENGTH",
    "NAME_MAX_LENGTH",
    "NULL_NAME_ERROR",
    "EMPTY_NAME_ERROR",
    "NAME_LENGTH_OUT_OF_RANGE_ERROR",
]
