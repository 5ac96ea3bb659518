"""
HTTP surface: exception handlers and the API router.
"""
