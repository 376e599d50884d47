"""
Application Configuration Module

This module uses Pydantic Settings for type-safe configuration management.

All values are read once at process start from environment variables
(or a local .env file) and cached by get_settings().

Database Connection
===================
The connection can be described either as individual parts:

    DB_DRIVER=postgresql+psycopg2
    DB_HOST=localhost
    DB_USER=root
    DB_PASSWORD=secret
    DB_NAME=book_catalog

or as a single DATABASE_URL, which takes precedence over the parts.

Usage:
    from book_catalog.config import get_settings

    settings = get_settings()
    print(settings.sqlalchemy_url)
"""

from functools import lru_cache
from typing import List, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from sqlalchemy.engine import URL, make_url


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Environment variable names are the upper-case field names
    (db_host -> DB_HOST) and are matched case-insensitively.
    """

    # -------------------------------------------------------------------------
    # Application Settings
    # -------------------------------------------------------------------------
    app_name: str = Field(
        default="Book Catalog API",
        description="Application name displayed in docs and logs"
    )
    api_version: str = Field(
        default="1.0.0",
        description="API version reported by the root and health endpoints"
    )
    debug: bool = Field(
        default=False,
        description="Enable debug mode (SQL echo, detailed errors, auto-reload)"
    )
    environment: str = Field(
        default="development",
        description="Environment: development, staging, production"
    )
    host: str = Field(
        default="0.0.0.0",
        description="Host to bind the server to"
    )
    port: int = Field(
        default=5000,
        description="Port to bind the server to"
    )

    # -------------------------------------------------------------------------
    # Database Settings
    # -------------------------------------------------------------------------
    db_driver: str = Field(
        default="postgresql+psycopg2",
        description="SQLAlchemy driver name, e.g. postgresql+psycopg2 or mysql+pymysql"
    )
    db_host: str = Field(
        default="localhost",
        description="Database server host"
    )
    db_port: Optional[int] = Field(
        default=None,
        description="Database server port (driver default when unset)"
    )
    db_user: str = Field(
        default="root",
        description="Database user"
    )
    db_password: str = Field(
        default="",
        description="Database password"
    )
    db_name: str = Field(
        default="book_catalog",
        description="Database name"
    )
    db_date_strings: bool = Field(
        default=False,
        description="Read book dates from storage as plain YYYY-MM-DD text"
    )
    database_url: Optional[str] = Field(
        default=None,
        description="Full database URL; overrides the individual DB_* settings"
    )
    db_create_tables: bool = Field(
        default=False,
        description="Create missing tables when the application starts"
    )

    # -------------------------------------------------------------------------
    # HTTP Settings
    # -------------------------------------------------------------------------
    allowed_origins: str = Field(
        default="*",
        description="Comma-separated list of allowed CORS origins"
    )

    # -------------------------------------------------------------------------
    # Logging Settings
    # -------------------------------------------------------------------------
    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)"
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # -------------------------------------------------------------------------
    # Computed Properties
    # -------------------------------------------------------------------------
    @property
    def sqlalchemy_url(self) -> URL:
        """
        Build the SQLAlchemy URL for the configured database.

        URL.create() quotes the password, so credentials containing
        special characters need no manual escaping.

        Returns:
            SQLAlchemy URL object
        """
        if self.database_url:
            return make_url(self.database_url)

        return URL.create(
            drivername=self.db_driver,
            username=self.db_user,
            password=self.db_password or None,
            host=self.db_host,
            port=self.db_port,
            database=self.db_name,
        )

    @property
    def allowed_origins_list(self) -> List[str]:
        """Parse comma-separated CORS origins into a list."""
        return [origin.strip() for origin in self.allowed_origins.split(",")]

    # -------------------------------------------------------------------------
    # Validators
    # -------------------------------------------------------------------------
    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """
        Validate that log_level is a valid Python logging level.

        Returns:
            The validated value (uppercase)

        Raises:
            ValueError: If log level is invalid
        """
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        if v.upper() not in valid_levels:
            raise ValueError(f"log_level must be one of {valid_levels}")
        return v.upper()

    @field_validator("environment")
    @classmethod
    def validate_environment(cls, v: str) -> str:
        """Validate environment is a known value."""
        valid_envs = {"development", "staging", "production"}
        if v.lower() not in valid_envs:
            raise ValueError(f"environment must be one of {valid_envs}")
        return v.lower()


@lru_cache
def get_settings() -> Settings:
    """
    Get cached application settings.

    The first call reads the environment and .env file and validates
    the values; later calls return the same instance.

    Returns:
        Cached Settings instance
    """
    return Settings()
