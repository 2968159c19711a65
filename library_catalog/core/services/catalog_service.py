"""
Catalog Service - Business logic cho the book catalog
Implements: Single Responsibility Principle (SRP)
"""
from typing import Optional, List
from ..repositories.book_repo import BookRepository
from ..domain.book import Book, BookId
from ..exceptions import BookNotFoundException, InvalidCriterionException
import logging

logger = logging.getLogger(__name__)


class CatalogService:
    """Service xử lý catalog business logic"""

    def __init__(self, book_repo: BookRepository):
        self.book_repo = book_repo

    async def get_book(self, book_id: BookId) -> Optional[Book]:
        """Get book by ID, None when the catalog has no such book"""
        book = await self.book_repo.get_by_id(book_id)
        logger.debug(f"[CATALOG] Lookup {book_id}: {'found' if book else 'absent'}")
        return book

    async def is_available(self, book_id: BookId) -> bool:
        """
        Check if a book can be loaned

        Business rules:
        - True only if the book exists AND its flag is set
        - Missing and unavailable books both give False
        """
        book = await self.book_repo.get_by_id(book_id)
        return book is not None and book.is_available()

    async def update_availability(self, book_id: BookId, available: bool) -> Book:
        """
        Set the availability flag of a book

        Raises:
            BookNotFoundException: If no book has this id (nothing is written)
        """
        try:
            updated = await self.book_repo.update_availability(book_id, available)
            if updated is None:
                raise BookNotFoundException(book_id)
            self.book_repo.commit()
        except BookNotFoundException:
            logger.warning(f"[CATALOG] Availability update for unknown book {book_id}")
            raise
        except Exception as e:
            logger.error(f"[CATALOG] Failed to update availability of {book_id}: {e}")
            self.book_repo.rollback()
            raise

        logger.info(f"[CATALOG] Book {book_id} availability set to {available}")
        return updated

    async def search(self, criterion: str) -> List[Book]:
        """
        Search the catalog

        Business rules:
        - Case-insensitive substring match on title, authors, ISBN, category
        - Results ordered by book id
        - Blank criterion is rejected

        Raises:
            InvalidCriterionException: If criterion is empty or whitespace
        """
        if criterion is None or not criterion.strip():
            raise InvalidCriterionException("Search criterion cannot be empty")

        books = await self.book_repo.get_all()
        results = [book for book in books if book.matches(criterion)]
        logger.debug(f"[CATALOG] Search '{criterion}' matched {len(results)} book(s)")
        return results
