"""
API Routers Package

Router Structure:
- books.py: /books endpoints
- publishers.py: /publishers endpoints

Each router is imported and registered in main.py.
"""

from book_catalog.routers.books import router as books_router
from book_catalog.routers.publishers import router as publishers_router

__all__ = [
    "books_router",
    "publishers_router",
]
