"""
Book Domain Models

Value Objects:
- BookId: Identity (catalog key such as "LIB001")
- Isbn: International Standard Book Number, stored verbatim

Aggregate Root:
- Book: A catalog item and its availability flag
"""

from dataclasses import dataclass, field
from typing import List


@dataclass(frozen=True)
class BookId:
    """
    Value Object cho Book ID
    Immutable, validated identity
    """
    value: str

    def __post_init__(self):
        if not isinstance(self.value, str) or not self.value.strip():
            raise ValueError("Book ID cannot be empty")

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Isbn:
    """
    Value Object cho ISBN

    No format validation: malformed ISBNs are accepted as-is.
    """
    value: str = ""

    def __str__(self) -> str:
        return self.value


@dataclass
class Book:
    """
    Aggregate Root cho Book

    Only the availability flag changes after the book is catalogued.
    """
    id: BookId
    titulo: str
    isbn: Isbn = field(default_factory=Isbn)
    categoria: str = ""
    autores: List[str] = field(default_factory=list)
    disponible: bool = True

    @staticmethod
    def from_orm(orm_book) -> 'Book':
        """Convert from SQLAlchemy ORM model to domain model"""
        return Book(
            id=BookId(orm_book.id),
            titulo=orm_book.titulo or "",
            isbn=Isbn(orm_book.isbn_value or ""),
            categoria=orm_book.categoria or "",
            autores=list(orm_book.autores or []),
            disponible=bool(orm_book.disponible)
        )

    def to_orm_dict(self) -> dict:
        """Convert to dict for ORM model"""
        return {
            "id": self.id.value,
            "titulo": self.titulo,
            "isbn_value": self.isbn.value,
            "categoria": self.categoria,
            "autores": list(self.autores),
            "disponible": self.disponible
        }

    def is_available(self) -> bool:
        """Check if book can currently be loaned"""
        return self.disponible is True

    def matches(self, criterion: str) -> bool:
        """
        Check if book matches a free-text search criterion

        Business rules:
        - Case-insensitive substring match (str.casefold)
        - Leading/trailing whitespace in the criterion is ignored
        - Fields searched: title, each author, ISBN value, category
        - A blank criterion matches nothing
        """
        needle = (criterion or "").strip().casefold()
        if not needle:
            return False

        haystack = [self.titulo, self.isbn.value, self.categoria, *self.autores]
        return any(needle in (value or "").casefold() for value in haystack)

    def __str__(self) -> str:
        return f"Book(id={self.id}, titulo={self.titulo}, disponible={self.disponible})"

    def __repr__(self) -> str:
        return self.__str__()
