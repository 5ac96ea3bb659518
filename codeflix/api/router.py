"""
Main API router aggregating the domain routers.
"""

from fastapi import APIRouter

from codeflix.domains.catalog.api.routes import category_router, genre_router

api_router = APIRouter()

api_router.include_router(category_router)
api_router.include_router(genre_router)
