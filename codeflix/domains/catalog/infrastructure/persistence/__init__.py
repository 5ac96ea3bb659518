"""
Catalog persistence adapters: in-memory and SQLAlchemy gateways.
"""
