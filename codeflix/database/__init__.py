"""
Database - SQLAlchemy engine, sessions and declarative base
"""

from codeflix.database.base import Base
from codeflix.database.setup import DatabaseManager, create_database_engine

__all__ = ["Base", "DatabaseManager", "create_database_engine"]
