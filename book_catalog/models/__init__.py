"""
SQLAlchemy Models Package

Model Relationships:
- Publisher <- Book: a book points at its publisher through publisher_id.
  The link is checked by the request handlers on every write; the table
  carries no foreign-key constraint.

Import all models here so they are registered on Base.metadata and
available as: from book_catalog.models import Book, Publisher
"""

from book_catalog.models.publisher import Publisher
from book_catalog.models.book import Book

__all__ = [
    "Publisher",
    "Book",
]
