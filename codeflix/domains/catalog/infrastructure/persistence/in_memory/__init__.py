from .category_gateway import InMemoryCategoryGateway
from .genre_gateway import InMemoryGenreGateway

__all__ = ["InMemoryCategoryGateway", "InMemoryGenreGateway"]
