"""
Database Setup - creación del engine, sesiones y tablas.

Todas las operaciones son síncronas (SQLAlchemy 2.0).
"""

import logging
from collections.abc import Generator
from contextlib import contextmanager
from typing import Optional

from sqlalchemy import create_engine, text
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from codeflix.database.base import Base

logger = logging.getLogger(__name__)


def create_database_engine(database_url: str, echo: bool = False) -> Engine:
    """
    Crea el engine de base de datos.

    Una base SQLite en memoria comparte una única conexión, de lo contrario
    cada sesión vería una base vacía.
    """
    engine_config: dict = {"echo": echo, "future": True}

    if database_url.startswith("sqlite"):
        engine_config["connect_args"] = {"check_same_thread": False}
        if ":memory:" in database_url or database_url.rstrip("/") == "sqlite:":
            engine_config["poolclass"] = StaticPool
    else:
        engine_config["pool_pre_ping"] = True

    try:
        engine = create_engine(database_url, **engine_config)
        logger.info(f"Database engine created ({engine.dialect.name})")
        return engine
    except Exception as e:
        logger.error(f"Failed to create database engine: {e}")
        raise


class DatabaseManager:
    """
    Manager para el engine y las sesiones de base de datos.

    Example:
        ```python
        database = DatabaseManager("sqlite:///:memory:")
        database.create_tables()
        with database.session() as session:
            session.execute(text("SELECT 1"))
        ```
    """

    def __init__(self, database_url: str, echo: bool = False, engine: Optional[Engine] = None):
        self.engine = engine or create_database_engine(database_url, echo)
        self.session_factory = sessionmaker(bind=self.engine, autoflush=False, expire_on_commit=False)

    @contextmanager
    def session(self) -> Generator[Session, None, None]:
        """Context manager transaccional: commit al salir, rollback si falla."""
        session = self.session_factory()
        try:
            yield session
            session.commit()
        except Exception as e:
            logger.error(f"Database error: {e}")
            session.rollback()
            raise
        finally:
            session.close()

    def create_tables(self) -> None:
        """Crea todas las tablas registradas en Base."""
        # Registers the catalog tables on Base.metadata
        from codeflix.domains.catalog.infrastructure.persistence.sqlalchemy import models  # noqa: F401

        Base.metadata.create_all(bind=self.engine)
        logger.info("Database tables created successfully")

    def drop_tables(self) -> None:
        """Elimina todas las tablas (¡CUIDADO!)"""
        Base.metadata.drop_all(bind=self.engine)
        logger.warning("All database tables dropped")

    def check_connection(self) -> bool:
        """Verifica la conexión a la base de datos"""
        try:
            with self.session() as session:
                session.execute(text("SELECT 1"))
            return True
        except Exception as e:
            logger.error(f"Database connection failed: {e}")
            return False

    def dispose(self) -> None:
        self.engine.dispose()
