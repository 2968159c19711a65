"""
Sample catalog data

Loaded on startup when the catalog is empty and CATALOG_SEED is enabled.
"""
import logging
from typing import Iterable, List

from sqlalchemy.orm import Session

from .core.domain.book import Book, BookId, Isbn
from .core.repositories.book_repo import BookRepository

logger = logging.getLogger(__name__)

SAMPLE_BOOKS: List[Book] = [
    Book(
        id=BookId("LIB001"),
        titulo="Cien años de soledad",
        isbn=Isbn("978-84-376-0494-7"),
        categoria="Novela",
        autores=["García Márquez"],
        disponible=True
    ),
    Book(
        id=BookId("LIB002"),
        titulo="El amor en los tiempos del cólera",
        isbn=Isbn("978-84-376-0495-4"),
        categoria="Novela",
        autores=["García Márquez"],
        disponible=True
    ),
    Book(
        id=BookId("LIB003"),
        titulo="La ciudad y los perros",
        isbn=Isbn("978-84-322-1234-5"),
        categoria="Novela",
        autores=["Mario Vargas Llosa"],
        disponible=False
    ),
    Book(
        id=BookId("LIB004"),
        titulo="Ficciones",
        isbn=Isbn("978-84-206-3340-8"),
        categoria="Cuento",
        autores=["Jorge Luis Borges"],
        disponible=True
    ),
    Book(
        id=BookId("LIB005"),
        titulo="Introducción a los algoritmos",
        isbn=Isbn("978-0-262-03384-8"),
        categoria="Informática",
        autores=["Thomas H. Cormen", "Charles E. Leiserson", "Ronald L. Rivest", "Clifford Stein"],
        disponible=True
    ),
]


async def seed_catalog(session: Session, books: Iterable[Book] = SAMPLE_BOOKS) -> int:
    """
    Insert sample books into an empty catalog

    Returns:
        Number of books inserted (0 when the catalog already has data)
    """
    repo = BookRepository(session)
    if await repo.count() > 0:
        logger.info("[SEED] Catalog already populated, skipping seed")
        return 0

    inserted = 0
    try:
        for book in books:
            await repo.create(book)
            inserted += 1
        repo.commit()
    except Exception as e:
        logger.error(f"[SEED] Failed to seed catalog: {e}")
        repo.rollback()
        raise

    logger.info(f"[SEED] Inserted {inserted} sample books")
    return inserted
