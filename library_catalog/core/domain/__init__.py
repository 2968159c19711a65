"""
Domain Models Package

This package contains domain models (value objects and aggregates)
that represent the catalog, independent of infrastructure.

- Value Objects: Immutable, identified by their attributes (BookId, Isbn)
- Aggregates: Book, the root entity of the catalog
"""

from .book import (
    BookId,
    Isbn,
    Book
)

__all__ = [
    "BookId",
    "Isbn",
    "Book"
]
