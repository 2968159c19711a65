"""
Repository Pattern Implementation

High-level code (services) depends on repository abstractions;
SQLAlchemy implements them.
"""

from .base import BaseRepository
from .book_repo import BookRepository

__all__ = [
    "BaseRepository",
    "BookRepository"
]
