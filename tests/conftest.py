"""
Pytest configuration và shared fixtures
"""
import os
import sys
from pathlib import Path
from typing import Generator

import pytest

# Keep the application's module-level engine off the filesystem
os.environ.setdefault("CATALOG_DATABASE_URL", "sqlite:///:memory:")

from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker
from fastapi.testclient import TestClient

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from library_catalog.database import Base
from library_catalog import models  # noqa: F401
from library_catalog.main import app
from library_catalog.api.dependencies import get_db
from library_catalog.core.domain.book import Book, BookId, Isbn
from library_catalog.core.security import create_access_token


@pytest.fixture(scope="session")
def test_db_path(tmp_path_factory) -> str:
    """Create test database path"""
    db_dir = tmp_path_factory.mktemp("test_db")
    return str(db_dir / "test.db")


@pytest.fixture(scope="function")
def test_engine(test_db_path):
    """Create test database engine"""
    engine = create_engine(
        f"sqlite:///{test_db_path}",
        connect_args={"check_same_thread": False}
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture(scope="function")
def test_session(test_engine) -> Generator[Session, None, None]:
    """Create test database session"""
    SessionLocal = sessionmaker(
        autocommit=False,
        autoflush=False,
        bind=test_engine
    )
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture(scope="function")
def client(test_session) -> Generator[TestClient, None, None]:
    """FastAPI test client backed by the test database"""
    def override_get_db():
        try:
            yield test_session
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    test_client = TestClient(app)
    yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def librarian_headers():
    token = create_access_token("librarian@test", ["ROLE_LIBRARIAN"])
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def user_headers():
    token = create_access_token("user@test", ["ROLE_USER"])
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def guest_headers():
    """Valid token without any catalog role"""
    token = create_access_token("guest@test", ["ROLE_GUEST"])
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def sample_book():
    """The canonical catalog entry used across tests"""
    return Book(
        id=BookId("LIB001"),
        titulo="Cien años de soledad",
        isbn=Isbn("978-84-376-0494-7"),
        categoria="Novela",
        autores=["García Márquez"],
        disponible=True
    )


@pytest.fixture
def other_books():
    return [
        Book(
            id=BookId("LIB002"),
            titulo="Ficciones",
            isbn=Isbn("978-84-206-3340-8"),
            categoria="Cuento",
            autores=["Jorge Luis Borges"],
            disponible=False
        ),
        Book(
            id=BookId("LIB003"),
            titulo="Rayuela",
            isbn=Isbn("not-an-isbn"),
            categoria="Novela",
            autores=["Julio Cortázar"],
            disponible=True
        ),
    ]
