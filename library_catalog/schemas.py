from pydantic import BaseModel, Field
from typing import List

from .core.domain.book import Book as DomainBook


# --- Book Schemas ---
class IsbnSchema(BaseModel):
    isbn_value: str = Field(..., description="Valor del número ISBN", examples=["978-84-376-0494-7"])


class Book(BaseModel):
    id: str = Field(..., description="ID único del libro", examples=["LIB001"])
    titulo: str
    isbn: IsbnSchema
    categoria: str
    autores: List[str] = []
    disponible: bool

    @staticmethod
    def from_domain(book: DomainBook) -> "Book":
        """Convert domain Book to API response"""
        return Book(
            id=book.id.value,
            titulo=book.titulo,
            isbn=IsbnSchema(isbn_value=book.isbn.value),
            categoria=book.categoria,
            autores=list(book.autores),
            disponible=book.disponible
        )
