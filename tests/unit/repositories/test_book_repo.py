"""
Unit tests for BookRepository

Runs against a real SQLite session (see conftest.test_session)
"""
import pytest

from library_catalog.core.repositories.book_repo import BookRepository
from library_catalog.core.domain.book import BookId
from library_catalog.models import Book as BookModel


@pytest.fixture
def book_repo(test_session):
    return BookRepository(test_session)


@pytest.fixture
def seeded_repo(book_repo, test_session, sample_book, other_books):
    for book in [*reversed(other_books), sample_book]:
        test_session.add(BookModel(**book.to_orm_dict()))
    test_session.commit()
    return book_repo


class TestBookRepositoryGet:
    """Test lookups"""

    @pytest.mark.asyncio
    async def test_get_by_id_found(self, seeded_repo, sample_book):
        result = await seeded_repo.get_by_id(BookId("LIB001"))

        assert result is not None
        assert result.id == sample_book.id
        assert result.titulo == sample_book.titulo
        assert result.isbn == sample_book.isbn
        assert result.autores == ["García Márquez"]
        assert result.disponible is True

    @pytest.mark.asyncio
    async def test_get_by_id_not_found(self, seeded_repo):
        assert await seeded_repo.get_by_id(BookId("NOPE")) is None

    @pytest.mark.asyncio
    async def test_get_all_ordered_by_id(self, seeded_repo):
        books = await seeded_repo.get_all()

        assert [b.id.value for b in books] == ["LIB001", "LIB002", "LIB003"]

    @pytest.mark.asyncio
    async def test_get_all_pagination(self, seeded_repo):
        books = await seeded_repo.get_all(skip=1, limit=1)

        assert [b.id.value for b in books] == ["LIB002"]

    @pytest.mark.asyncio
    async def test_count_and_exists(self, seeded_repo):
        assert await seeded_repo.count() == 3
        assert await seeded_repo.exists(BookId("LIB003"))
        assert not await seeded_repo.exists(BookId("LIB999"))


class TestBookRepositoryWrite:
    """Test create and availability updates"""

    @pytest.mark.asyncio
    async def test_create(self, book_repo, sample_book):
        created = await book_repo.create(sample_book)
        book_repo.commit()

        assert created.id == sample_book.id
        assert await book_repo.count() == 1

    @pytest.mark.asyncio
    async def test_create_duplicate_rejected(self, seeded_repo, sample_book):
        with pytest.raises(ValueError, match="already exists"):
            await seeded_repo.create(sample_book)

    @pytest.mark.asyncio
    async def test_update_availability(self, seeded_repo):
        updated = await seeded_repo.update_availability(BookId("LIB001"), False)
        seeded_repo.commit()

        assert updated is not None
        assert updated.disponible is False
        reloaded = await seeded_repo.get_by_id(BookId("LIB001"))
        assert reloaded.disponible is False

    @pytest.mark.asyncio
    async def test_update_availability_unknown_returns_none(self, seeded_repo):
        assert await seeded_repo.update_availability(BookId("NOPE"), True) is None
