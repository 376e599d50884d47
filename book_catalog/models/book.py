"""
Book Model

A book belongs to exactly one publisher through publisher_id.

WHY no ForeignKey?
==================
publisher_id is a plain indexed integer column. Referential integrity is
checked by the request handlers before every insert and update, and a
publisher is only deleted once no book points at it. Rows written by
other tools can therefore carry a dangling publisher_id; the list
endpoint still returns them (with publisher = null) while the detail
endpoint treats them as not found.
"""

import datetime

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from book_catalog.database import Base
from book_catalog.models.types import CalendarDate


class Book(Base):
    """
    Book model.

    Table: book

    Fields:
    - name: Book title
    - date: Publication date
    - publisher_id: ID of the publishing Publisher

    Example:
        book = Book(
            name="Title",
            date=datetime.date(2024, 1, 1),
            publisher_id=publisher.id,
        )
    """

    __tablename__ = "book"

    id: Mapped[int] = mapped_column(primary_key=True)

    name: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        comment="Book title"
    )

    date: Mapped[datetime.date] = mapped_column(
        CalendarDate,
        nullable=False,
        comment="Publication date"
    )

    # Indexed for the "books of this publisher" check on publisher delete
    publisher_id: Mapped[int] = mapped_column(
        Integer,
        index=True,
        nullable=False,
        comment="Publisher.id of the publishing house"
    )

    def __repr__(self) -> str:
        return f"Book(id={self.id}, name='{self.name}')"
