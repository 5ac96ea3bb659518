from typing import Any

from pydantic import Field, computed_field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Configuración de la aplicación utilizando Pydantic BaseSettings.
    Carga automáticamente las variables de entorno.
    """

    # API Configuration
    API_V1_STR: str = Field("", description="Prefijo de las rutas de la API")
    PROJECT_NAME: str = "Codeflix Catalog Admin"
    PROJECT_DESCRIPTION: str = "API de administración del catálogo de categorías y géneros"
    VERSION: str = "0.1.0"

    # Application Settings
    ENVIRONMENT: str = Field("development", description="Entorno de ejecución")
    DEBUG: bool = Field(False, description="Modo debug")

    # Logging
    LOG_LEVEL: str = Field("INFO", description="Nivel de logging")
    LOG_FORMAT: str = Field("colored", description="Formato de logs: colored, json o plain")
    LOG_FILE: str | None = Field(None, description="Archivo opcional para logs en formato JSON")

    # Persistence
    DATABASE_URL: str | None = Field(
        None, description="URL de SQLAlchemy; si no se define se usa el gateway en memoria"
    )
    DB_ECHO: bool = Field(False, description="Log SQL queries (solo para debug)")

    # Listing defaults for the API
    DEFAULT_PER_PAGE: int = Field(10, description="Elementos por página por defecto")
    DEFAULT_SORT: str = Field("createdAt", description="Campo de ordenamiento por defecto")
    DEFAULT_DIRECTION: str = Field("asc", description="Dirección de ordenamiento por defecto")

    model_config = SettingsConfigDict(
        case_sensitive=True,
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",  # Ignorar campos extras en lugar de generar un error
    )

    def __init__(self, **data: Any):
        super().__init__(**data)

    @field_validator("LOG_LEVEL")
    @classmethod
    def validate_log_level(cls, v):
        level = v.upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Invalid LOG_LEVEL: {v}")
        return level

    @field_validator("LOG_FORMAT")
    @classmethod
    def validate_log_format(cls, v):
        if v not in {"colored", "json", "plain"}:
            raise ValueError("LOG_FORMAT must be one of: colored, json, plain")
        return v

    @field_validator("DEFAULT_PER_PAGE")
    @classmethod
    def validate_default_per_page(cls, v):
        if v < 1:
            raise ValueError("DEFAULT_PER_PAGE must be at least 1")
        return v

    @field_validator("DEFAULT_DIRECTION")
    @classmethod
    def validate_default_direction(cls, v):
        if v.lower() not in {"asc", "desc"}:
            raise ValueError("DEFAULT_DIRECTION must be 'asc' or 'desc'")
        return v.lower()

    @computed_field
    @property
    def use_database(self) -> bool:
        """Determina si se persiste con SQLAlchemy"""
        return bool(self.DATABASE_URL)

    @computed_field
    @property
    def is_development(self) -> bool:
        """Determina si está en modo desarrollo"""
        return self.DEBUG or self.ENVIRONMENT.lower() in ["development", "dev", "local"]


# Singleton para configuración
_settings_instance = None


def get_settings() -> Settings:
    """
    Retorna una instancia cacheada de la configuración.
    Esto evita cargar las variables de entorno múltiples veces.
    """
    global _settings_instance
    if _settings_instance is None:
        _settings_instance = Settings()
    return _settings_instance


def reset_settings() -> None:
    """Descarta la instancia cacheada (usado en tests)."""
    global _settings_instance
    _settings_instance = None
