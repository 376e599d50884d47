"""
Books Router

CRUD endpoints for books.

Every write that names a publisher first checks that the publisher
exists, then runs the write as a separate statement:

    1. SELECT id FROM publisher WHERE id = :publisher_id   -> 400 if none
    2. INSERT / UPDATE book ...

No lock is held between the two statements, so a publisher deleted in
between is not detected.
"""

import logging

from fastapi import APIRouter, HTTPException, status
from sqlalchemy import delete, select, update
from sqlalchemy.orm import Session

from book_catalog.database import Database
from book_catalog.dependencies import CatalogDatabase, DbSession
from book_catalog.errors import storage_errors
from book_catalog.models import Book, Publisher
from book_catalog.models.types import is_calendar_date
from book_catalog.schemas import (
    BookCreate,
    BookCreated,
    BookRecord,
    BookResponse,
    BookUpdate,
    BookUpdated,
    ErrorResponse,
    MessageResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/books",
    tags=["Books"],
    responses={
        500: {"model": ErrorResponse, "description": "Database failure"},
    },
)


# =============================================================================
# Helper Functions
# =============================================================================
def book_columns(database: Database) -> tuple:
    """
    Columns returned for a book, including its publisher's name.

    The date column goes through the gateway so it is read either as
    a date or as stored text, depending on configuration.
    """
    return (
        Book.id,
        Book.name,
        database.date_column(Book.date).label("date"),
        Publisher.name.label("publisher"),
        Book.publisher_id,
    )


def ensure_publisher_exists(db: Session, publisher_id: int) -> None:
    """
    Referential integrity check run before every book write.

    Raises:
        HTTPException: 500 if the check itself fails
        HTTPException: 400 if no publisher has this ID
    """
    with storage_errors("Database error"):
        found = db.execute(
            select(Publisher.id).where(Publisher.id == publisher_id)
        ).first()

    if found is None:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Publisher does not exist",
        )


# =============================================================================
# CRUD Endpoints
# =============================================================================
@router.get(
    "",
    response_model=list[BookResponse],
    summary="List all books",
    description="Get every book with its publisher's name.",
)
def list_books(db: DbSession, database: CatalogDatabase) -> list[BookResponse]:
    """
    List all books.

    LEFT JOIN: books whose publisher_id matches no publisher are still
    listed, with publisher set to null.
    """
    stmt = (
        select(*book_columns(database))
        .select_from(Book)
        .outerjoin(Publisher, Book.publisher_id == Publisher.id)
        .order_by(Book.id)
    )
    with storage_errors("Failed to fetch books"):
        rows = db.execute(stmt).all()

    return [BookResponse.model_validate(row) for row in rows]


@router.get(
    "/{book_id}",
    response_model=BookResponse,
    summary="Get a book by ID",
    responses={404: {"model": ErrorResponse, "description": "Book not found"}},
)
def get_book(
    book_id: int,
    db: DbSession,
    database: CatalogDatabase,
) -> BookResponse:
    """
    Get a single book with its publisher's name.

    INNER JOIN: a book whose publisher_id is dangling is reported as
    not found.

    Raises:
        HTTPException: 404 if book not found
    """
    stmt = (
        select(*book_columns(database))
        .select_from(Book)
        .join(Publisher, Book.publisher_id == Publisher.id)
        .where(Book.id == book_id)
    )
    with storage_errors("Failed to fetch book"):
        row = db.execute(stmt).first()

    if row is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Book not found",
        )

    return BookResponse.model_validate(row)


@router.post(
    "",
    response_model=BookCreated,
    status_code=status.HTTP_201_CREATED,
    summary="Create a new book",
    responses={400: {"model": ErrorResponse, "description": "Publisher does not exist"}},
)
def create_book(book_data: BookCreate, db: DbSession) -> BookCreated:
    """
    Create a new book for an existing publisher.

    The response echoes the submitted fields together with the ID
    generated by the database.

    Raises:
        HTTPException: 400 if the publisher does not exist
    """
    ensure_publisher_exists(db, book_data.publisher_id)

    book = Book(
        publisher_id=book_data.publisher_id,
        name=book_data.name,
        date=book_data.date,
    )
    with storage_errors("Failed to create book"):
        db.add(book)
        db.commit()
        book_id = book.id

    logger.info(f"Created book {book_id}")
    return BookCreated(
        id=book_id,
        book=BookRecord(id=book_id, **book_data.model_dump()),
    )


@router.put(
    "/{book_id}",
    response_model=BookUpdated,
    summary="Update a book",
    responses={
        400: {"model": ErrorResponse, "description": "Publisher does not exist"},
        404: {"model": ErrorResponse, "description": "Book not found"},
    },
)
def update_book(book_id: int, book_data: BookUpdate, db: DbSession) -> BookUpdated:
    """
    Replace a book's publisher, name and date.

    The response echoes the submitted fields; the row is not read back.
    A missing book is reported as 404 even when the date is one storage
    would refuse.

    Raises:
        HTTPException: 400 if the publisher does not exist
        HTTPException: 404 if no book has this ID
        HTTPException: 500 if storage refuses the update
    """
    ensure_publisher_exists(db, book_data.publisher_id)

    # A date storage refuses only matters when there is a row to write
    if not is_calendar_date(book_data.date):
        with storage_errors("Failed to update book"):
            found = db.execute(select(Book.id).where(Book.id == book_id)).first()
        if found is None:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="Book not found",
            )

    stmt = (
        update(Book)
        .where(Book.id == book_id)
        .values(
            publisher_id=book_data.publisher_id,
            name=book_data.name,
            date=book_data.date,
        )
    )
    with storage_errors("Failed to update book"):
        result = db.execute(stmt)
        db.commit()

    if result.rowcount == 0:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Book not found",
        )

    return BookUpdated(book=BookRecord(id=book_id, **book_data.model_dump()))


@router.delete(
    "/{book_id}",
    response_model=MessageResponse,
    summary="Delete a book",
    responses={404: {"model": ErrorResponse, "description": "Book not found"}},
)
def delete_book(book_id: int, db: DbSession) -> MessageResponse:
    """
    Delete a book.

    Raises:
        HTTPException: 404 if no book has this ID
    """
    with storage_errors("Failed to delete book"):
        result = db.execute(delete(Book).where(Book.id == book_id))
        db.commit()

    if result.rowcount == 0:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Book not found",
        )

    logger.info(f"Deleted book {book_id}")
    return MessageResponse(message="Book deleted")
