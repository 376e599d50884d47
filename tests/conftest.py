"""
pytest Fixtures for Book Catalog API Tests

Each test gets a fresh SQLite in-memory database wrapped in the same
Database gateway the application uses, and an app built around it with
create_app(). Nothing is shared between tests.

StaticPool keeps a single connection alive for the whole test. Without it
the in-memory database would disappear between connections.
"""

import datetime
from collections.abc import Generator

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import Session
from sqlalchemy.pool import StaticPool

from book_catalog.config import Settings
from book_catalog.database import Database
from book_catalog.main import create_app
from book_catalog.models import Book, Publisher


def make_database(url: str = "sqlite://", **options) -> Database:
    """Build a gateway on a single shared SQLite connection."""
    return Database(
        url,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
        **options,
    )


def make_client(database: Database, settings: Settings) -> TestClient:
    """Build an app around the given database and wrap it in a TestClient."""
    return TestClient(create_app(settings, database))


# =============================================================================
# SETTINGS AND DATABASE FIXTURES
# =============================================================================
@pytest.fixture
def test_settings() -> Settings:
    """Settings that ignore the developer's .env file."""
    return Settings(_env_file=None, database_url="sqlite://")


@pytest.fixture
def database() -> Generator[Database, None, None]:
    """In-memory database with all tables created."""
    database = make_database()
    database.create_tables()

    yield database

    database.drop_tables()
    database.dispose()


@pytest.fixture
def db_session(database: Database) -> Generator[Session, None, None]:
    """
    Session for arranging test data directly in the database.

    expire_on_commit=False keeps committed objects readable without
    opening a new transaction on the shared connection.
    """
    session = database.session_factory(expire_on_commit=False)

    yield session

    session.close()


@pytest.fixture
def client(
    database: Database,
    test_settings: Settings,
) -> Generator[TestClient, None, None]:
    """
    Test client for an app wired to the test database.

    Entering the TestClient context runs the lifespan handler, so the
    startup connection check runs exactly as in production.
    """
    with make_client(database, test_settings) as test_client:
        yield test_client


@pytest.fixture
def broken_client(test_settings: Settings) -> Generator[TestClient, None, None]:
    """Client whose database has no tables: every query fails."""
    database = make_database()
    with make_client(database, test_settings) as test_client:
        yield test_client
    database.dispose()


@pytest.fixture
def publisher_only_client(test_settings: Settings) -> Generator[TestClient, None, None]:
    """
    Client whose database has only the publisher table.

    Publisher checks succeed while every statement touching the book
    table fails.
    """
    database = make_database()
    Publisher.__table__.create(database.engine)
    with make_client(database, test_settings) as test_client:
        yield test_client
    database.dispose()


@pytest.fixture
def book_only_client(test_settings: Settings) -> Generator[TestClient, None, None]:
    """
    Client whose database has only the book table.

    The referencing-books check on publisher delete succeeds while the
    delete itself fails.
    """
    database = make_database()
    Book.__table__.create(database.engine)
    with make_client(database, test_settings) as test_client:
        yield test_client
    database.dispose()


# =============================================================================
# SAMPLE DATA FIXTURES
# =============================================================================
@pytest.fixture
def sample_publisher(db_session: Session) -> Publisher:
    """Create a sample publisher."""
    publisher = Publisher(name="Acme", address="1 Rd", contact="a@a.com")
    db_session.add(publisher)
    db_session.commit()
    return publisher


@pytest.fixture
def second_publisher(db_session: Session) -> Publisher:
    """Create a second publisher for reassignment tests."""
    publisher = Publisher(
        name="Penguin",
        address="80 Strand, London",
        contact="info@penguin.example",
    )
    db_session.add(publisher)
    db_session.commit()
    return publisher


@pytest.fixture
def sample_book(db_session: Session, sample_publisher: Publisher) -> Book:
    """Create a sample book published by sample_publisher."""
    book = Book(
        name="Title",
        date=datetime.date(2024, 1, 1),
        publisher_id=sample_publisher.id,
    )
    db_session.add(book)
    db_session.commit()
    return book


@pytest.fixture
def orphan_book(db_session: Session) -> Book:
    """Create a book whose publisher_id matches no publisher."""
    book = Book(
        name="Lost Manuscript",
        date=datetime.date(1999, 12, 31),
        publisher_id=9999,
    )
    db_session.add(book)
    db_session.commit()
    return book
