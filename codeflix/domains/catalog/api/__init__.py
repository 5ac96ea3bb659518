"""
Catalog API - FastAPI routers for categories and genres.
"""
