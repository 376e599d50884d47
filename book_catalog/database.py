"""
Database Gateway Module

This module sets up SQLAlchemy 2.0 for the Book Catalog API.

Single Connection
=================
The service talks to storage through ONE persistent connection.
Database.from_settings() builds an engine whose pool holds exactly one
connection (pool_size=1, max_overflow=0). Requests that arrive while
the connection is busy wait in the pool's queue until it is returned,
so the application itself needs no locking.

Lifecycle
=========
The Database object is created by the application factory, stored on
app.state and injected into route handlers. The lifespan handler calls
connect() at startup and dispose() at shutdown.

Session Management Pattern
==========================
Every request gets its own Session (see book_catalog.dependencies.get_db),
checked out from the shared engine and closed when the request ends.
"""

import logging
from typing import Any

from sqlalchemy import ColumnElement, String, cast, create_engine, func, text
from sqlalchemy.engine import URL, Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import DeclarativeBase, sessionmaker

from book_catalog.config import Settings

logger = logging.getLogger(__name__)


def format_date(column: ColumnElement, dialect_name: str) -> ColumnElement:
    """
    SQL expression rendering a date column as YYYY-MM-DD text.

    Each dialect gets an explicit format, so the result does not depend
    on server settings such as PostgreSQL's DateStyle.
    """
    if dialect_name == "postgresql":
        return func.to_char(column, "YYYY-MM-DD")
    if dialect_name in ("mysql", "mariadb"):
        return func.date_format(column, "%Y-%m-%d")
    if dialect_name == "sqlite":
        return func.strftime("%Y-%m-%d", column)
    return cast(column, String)


# =============================================================================
# Base Model Class
# =============================================================================
class Base(DeclarativeBase):
    """
    Base class for all SQLAlchemy models.

    All models inherit from this class:

        class Book(Base):
            __tablename__ = "book"
            ...
    """
    pass


# =============================================================================
# Database Gateway
# =============================================================================
class Database:
    """
    Storage gateway wrapping a SQLAlchemy engine and session factory.

    Args:
        url: Database URL (string or sqlalchemy URL)
        date_strings: Read date columns as plain text instead of date objects
        **engine_options: Passed straight to create_engine()

    Example:
        database = Database("sqlite://", poolclass=StaticPool)
        database.create_tables()
        with database.session_factory() as session:
            ...
    """

    def __init__(
        self,
        url: str | URL,
        *,
        date_strings: bool = False,
        **engine_options: Any,
    ) -> None:
        self.date_strings = date_strings
        self.engine: Engine = create_engine(url, **engine_options)

        # autocommit/autoflush off: handlers decide when to commit
        self.session_factory = sessionmaker(
            autocommit=False,
            autoflush=False,
            bind=self.engine,
        )

    @classmethod
    def from_settings(cls, settings: Settings) -> "Database":
        """
        Build the gateway described by the application settings.

        pool_pre_ping lets the single connection recover after the
        database restarts or was unreachable at startup. pool_timeout=None
        makes queued requests wait for the connection without a deadline.
        """
        return cls(
            settings.sqlalchemy_url,
            date_strings=settings.db_date_strings,
            pool_size=1,
            max_overflow=0,
            pool_timeout=None,
            pool_pre_ping=True,
            echo=settings.debug,
        )

    def connect(self) -> bool:
        """
        Open the connection and verify the database answers.

        Failures are logged and reported as False, never raised: the
        server keeps running and storage-dependent routes fail per
        request until the database is reachable.
        """
        try:
            with self.engine.connect() as connection:
                connection.execute(text("SELECT 1"))
        except SQLAlchemyError as exc:
            logger.error(f"Error connecting to database: {exc}")
            return False

        logger.info(f"Connected to database {self.engine.url.render_as_string()}")
        return True

    def ping(self) -> bool:
        """Check whether the database currently answers a trivial query."""
        try:
            with self.engine.connect() as connection:
                connection.execute(text("SELECT 1"))
        except SQLAlchemyError as exc:
            logger.warning(f"Database ping failed: {exc}")
            return False
        return True

    def date_column(self, column: ColumnElement) -> ColumnElement:
        """
        Return the select expression used to read a date column.

        With date_strings enabled the value is formatted as YYYY-MM-DD
        text in SQL, so the driver hands back a plain string.
        """
        if self.date_strings:
            return format_date(column, self.engine.dialect.name)
        return column

    def create_tables(self) -> None:
        """
        Create all missing tables.

        Intended for development and tests; existing tables are left
        as they are.
        """
        # Import models so they are registered on Base.metadata
        import book_catalog.models  # noqa: F401

        Base.metadata.create_all(bind=self.engine)

    def drop_tables(self) -> None:
        """Drop all tables. This deletes all data."""
        Base.metadata.drop_all(bind=self.engine)

    def dispose(self) -> None:
        """Close the pooled connection. Called on application shutdown."""
        self.engine.dispose()
        logger.info("Database connection closed")
