from sqlalchemy import Column, String, Boolean, JSON
from .database import Base


class Book(Base):
    __tablename__ = "libros"

    id = Column(String, primary_key=True, index=True)  # e.g. LIB001
    titulo = Column(String, nullable=False, index=True)
    isbn_value = Column(String, nullable=True)  # Stored as-is, no format check
    categoria = Column(String, nullable=True, index=True)
    autores = Column(JSON, nullable=False, default=list)  # Ordered list of names
    disponible = Column(Boolean, nullable=False, default=True)
