"""
Book Pydantic Schemas

Requests carry the date as the client wrote it and write responses echo
it back. Books read from storage always carry YYYY-MM-DD.

NOTE: the field is called "date", which would shadow datetime.date
inside the class body, so the module imports datetime itself and
annotates with datetime.date.
"""

import datetime

from pydantic import BaseModel, ConfigDict, Field


class BookCreate(BaseModel):
    """
    Request body for POST /books and PUT /books/{book_id}.

    Only the field types are checked here. Whether publisher_id points
    at an existing publisher is checked by the route against storage.

    date is taken as text and handed to storage unchanged: relaxed forms
    such as "2024-1-1" are normalized there, and values that are not a
    date are refused there (see book_catalog.models.types).
    """

    publisher_id: int = Field(
        ...,
        description="ID of an existing publisher",
        examples=[1],
    )

    name: str = Field(
        ...,
        description="Book title",
        examples=["Title"],
    )

    date: str = Field(
        ...,
        description="Publication date, normally YYYY-MM-DD",
        examples=["2024-01-01"],
    )


class BookUpdate(BookCreate):
    """
    Request body for PUT /books/{book_id}.

    PUT replaces all three fields, so the shape matches BookCreate.
    """
    pass


class BookRecord(BookCreate):
    """Fields echoed back after a write, exactly as submitted, plus the book's ID."""

    id: int


class BookResponse(BaseModel):
    """
    A book as returned by the list and detail endpoints.

    publisher is the publisher's name, or None when publisher_id does
    not resolve to an existing publisher (list endpoint only).
    """

    id: int
    name: str
    date: datetime.date
    publisher: str | None = None
    publisher_id: int

    model_config = ConfigDict(
        from_attributes=True,
        json_schema_extra={
            "example": {
                "id": 1,
                "name": "Title",
                "date": "2024-01-01",
                "publisher": "Acme",
                "publisher_id": 1,
            }
        },
    )


class BookCreated(BaseModel):
    """Response body for POST /books."""

    message: str = "Book created"
    id: int
    book: BookRecord


class BookUpdated(BaseModel):
    """Response body for PUT /books/{book_id}."""

    message: str = "Book updated"
    book: BookRecord
