"""
Book Repository

Implementation of repository pattern for the Book aggregate.
Converts between the ORM model (table "libros") and domain models.
"""

from typing import Optional, List
from .base import BaseRepository
from ..domain.book import Book, BookId
from ...models import Book as BookModel


class BookRepository(BaseRepository[Book]):
    """
    Repository cho Book aggregate

    Handles:
    - Lookups by id
    - Full catalog listing (ordered by id)
    - Availability updates
    """

    def _get_orm(self, book_id: BookId) -> Optional[BookModel]:
        return self.session.query(BookModel).filter_by(id=book_id.value).first()

    async def get_by_id(self, id: BookId) -> Optional[Book]:
        """
        Get book by ID

        Args:
            id: BookId value object

        Returns:
            Book domain model or None
        """
        orm_book = self._get_orm(id)
        return Book.from_orm(orm_book) if orm_book else None

    async def exists(self, id: BookId) -> bool:
        return self.session.query(BookModel.id).filter_by(id=id.value).first() is not None

    async def get_all(self, skip: int = 0, limit: Optional[int] = None) -> List[Book]:
        """
        List books in catalog order (id ascending)

        Args:
            skip: Records to skip
            limit: Max records to return, None for the whole catalog
        """
        query = self.session.query(BookModel).order_by(BookModel.id.asc()).offset(skip)
        if limit is not None:
            query = query.limit(limit)
        return [Book.from_orm(book) for book in query.all()]

    async def count(self) -> int:
        return self.session.query(BookModel).count()

    async def create(self, book: Book) -> Book:
        """
        Add a book to the catalog

        Raises:
            ValueError: If a book with the same id already exists
        """
        if await self.exists(book.id):
            raise ValueError(f"Book {book.id} already exists")

        orm_book = BookModel(**book.to_orm_dict())
        self.session.add(orm_book)
        self.flush()
        return Book.from_orm(orm_book)

    async def update_availability(self, book_id: BookId, disponible: bool) -> Optional[Book]:
        """
        Update only the availability flag (optimized)

        Returns:
            Updated book, or None if no book has this id
        """
        orm_book = self._get_orm(book_id)
        if not orm_book:
            return None

        orm_book.disponible = disponible
        self.flush()
        return Book.from_orm(orm_book)
