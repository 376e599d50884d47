"""
FastAPI Dependencies Module

Route handlers never reach for a global connection. The Database gateway
lives on app.state and reaches handlers through these dependencies:

    @router.get("")
    def list_books(db: DbSession, database: CatalogDatabase):
        ...

Tests swap storage by passing their own Database to create_app().
"""

from collections.abc import Generator
from typing import Annotated

from fastapi import Depends, Request
from sqlalchemy.orm import Session

from book_catalog.database import Database


def get_database(request: Request) -> Database:
    """Return the gateway owned by the running application."""
    return request.app.state.database


def get_db(
    database: Annotated[Database, Depends(get_database)],
) -> Generator[Session, None, None]:
    """
    Database session dependency.

    Creates a session on the shared engine, yields it to the route
    handler and closes it when the request ends. Closing a session
    with uncommitted work rolls that work back.

    Yields:
        SQLAlchemy Session instance
    """
    db = database.session_factory()
    try:
        yield db
    finally:
        db.close()


CatalogDatabase = Annotated[Database, Depends(get_database)]
DbSession = Annotated[Session, Depends(get_db)]
