from .category_gateway import SQLAlchemyCategoryGateway
from .genre_gateway import SQLAlchemyGenreGateway
from .models import CategoryModel, GenreCategoryModel, GenreModel

__all__ = [
    "SQLAlchemyCategoryGateway",
    "SQLAlchemyGenreGateway",
    "CategoryModel",
    "GenreModel",
    "GenreCategoryModel",
]
