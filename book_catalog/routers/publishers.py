"""
Publishers Router

List, create and delete publishers. Publishers are never updated.

A publisher that still has books cannot be deleted; the delete endpoint
looks for referencing books first and refuses with 400 if it finds any.
"""

import logging

from fastapi import APIRouter, HTTPException, status
from sqlalchemy import delete, select

from book_catalog.dependencies import DbSession
from book_catalog.errors import storage_errors
from book_catalog.models import Book, Publisher
from book_catalog.schemas import (
    ErrorResponse,
    MessageResponse,
    PublisherCreate,
    PublisherCreated,
    PublisherResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/publishers",
    tags=["Publishers"],
    responses={
        500: {"model": ErrorResponse, "description": "Database failure"},
    },
)


@router.get(
    "",
    response_model=list[PublisherResponse],
    summary="List all publishers",
)
def list_publishers(db: DbSession) -> list[PublisherResponse]:
    """List all publishers."""
    with storage_errors("Failed to fetch publishers"):
        publishers = db.execute(
            select(Publisher).order_by(Publisher.id)
        ).scalars().all()

    return [PublisherResponse.model_validate(p) for p in publishers]


@router.post(
    "",
    response_model=PublisherCreated,
    status_code=status.HTTP_201_CREATED,
    summary="Create a new publisher",
)
def create_publisher(
    publisher_data: PublisherCreate,
    db: DbSession,
) -> PublisherCreated:
    """
    Create a new publisher.

    Names are not required to be unique. The response echoes the
    submitted fields together with the generated ID.
    """
    publisher = Publisher(**publisher_data.model_dump())

    with storage_errors("Failed to create publisher"):
        db.add(publisher)
        db.commit()
        publisher_id = publisher.id

    logger.info(f"Created publisher {publisher_id}")
    return PublisherCreated(
        id=publisher_id,
        publisher=PublisherResponse(id=publisher_id, **publisher_data.model_dump()),
    )


@router.delete(
    "/{publisher_id}",
    response_model=MessageResponse,
    summary="Delete a publisher",
    responses={
        400: {"model": ErrorResponse, "description": "Books reference this publisher"},
        404: {"model": ErrorResponse, "description": "Publisher not found"},
    },
)
def delete_publisher(publisher_id: int, db: DbSession) -> MessageResponse:
    """
    Delete a publisher that no book refers to.

    Raises:
        HTTPException: 400 if at least one book references the publisher
        HTTPException: 404 if no publisher has this ID
    """
    with storage_errors("Database error"):
        referencing_book = db.execute(
            select(Book.id).where(Book.publisher_id == publisher_id).limit(1)
        ).first()

    if referencing_book is not None:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Cannot delete publisher - books are associated with it",
        )

    with storage_errors("Failed to delete publisher"):
        result = db.execute(delete(Publisher).where(Publisher.id == publisher_id))
        db.commit()

    if result.rowcount == 0:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Publisher not found",
        )

    logger.info(f"Deleted publisher {publisher_id}")
    return MessageResponse(message="Publisher deleted")
