"""
Base Repository

Abstract base class for all repositories

High-level code (services) depends on this interface; the SQLAlchemy
implementations live next to it.
"""

from abc import ABC, abstractmethod
from typing import TypeVar, Generic, Optional, List, Any
from sqlalchemy.orm import Session

T = TypeVar('T')


class BaseRepository(ABC, Generic[T]):
    """
    Abstract base repository

    Generic[T]: T is the domain model type (Book, ...)

    Subclasses must implement:
    - get_by_id
    - get_all
    - create

    Note: methods are async but run sync Session queries, so each query
    blocks the event loop while it runs.
    """

    def __init__(self, session: Session):
        self.session = session

    @abstractmethod
    async def get_by_id(self, id: Any) -> Optional[T]:
        """
        Get entity by ID

        Returns:
            Domain model or None if not found
        """
        pass

    @abstractmethod
    async def get_all(self, skip: int = 0, limit: Optional[int] = None) -> List[T]:
        """
        List entities

        Args:
            skip: Number of records to skip
            limit: Max number of records to return (None = no limit)
        """
        pass

    @abstractmethod
    async def create(self, entity: T) -> T:
        pass

    def commit(self):
        """
        Commit transaction

        Call this after write operations
        """
        self.session.commit()

    def rollback(self):
        """Rollback transaction"""
        self.session.rollback()

    def flush(self):
        """Flush changes to database without committing"""
        self.session.flush()
