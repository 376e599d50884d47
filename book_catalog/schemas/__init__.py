"""
Pydantic Schemas Package

Request and response shapes for every route.

Schema Naming Convention:
- XxxCreate: Request body for creating (and, for books, updating) a record
- XxxResponse: A record as returned by list/detail endpoints
- XxxRecord: The echoed fields returned after a write
- XxxCreated / XxxUpdated: Write confirmation envelopes
"""

from book_catalog.schemas.common import ErrorResponse, MessageResponse
from book_catalog.schemas.book import (
    BookCreate,
    BookCreated,
    BookRecord,
    BookResponse,
    BookUpdate,
    BookUpdated,
)
from book_catalog.schemas.publisher import (
    PublisherCreate,
    PublisherCreated,
    PublisherResponse,
)

__all__ = [
    # Common
    "ErrorResponse",
    "MessageResponse",
    # Book schemas
    "BookCreate",
    "BookUpdate",
    "BookRecord",
    "BookResponse",
    "BookCreated",
    "BookUpdated",
    # Publisher schemas
    "PublisherCreate",
    "PublisherResponse",
    "PublisherCreated",
]
