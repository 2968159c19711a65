"""
End-to-end catalog flow against a real SQLite database

Scenario:
1. Catalog holds LIB001 "Cien años de soledad" (García Márquez), available
2. Search by author finds it
3. Librarian marks it unavailable
4. Availability check and lookup both reflect the change
"""
import pytest

from library_catalog.models import Book as BookModel


@pytest.fixture
def seeded_client(client, test_session, sample_book, other_books):
    for book in [sample_book, *other_books]:
        test_session.add(BookModel(**book.to_orm_dict()))
    test_session.commit()
    return client


def test_full_availability_flow(seeded_client, user_headers, librarian_headers):
    # Search
    response = seeded_client.get("/libros/buscar", params={"criterio": "García Márquez"}, headers=user_headers)
    assert response.status_code == 200
    assert "LIB001" in [b["id"] for b in response.json()]

    # Initially available
    response = seeded_client.get("/libros/LIB001/disponible", headers=user_headers)
    assert response.json() is True

    # Librarian lends it out
    response = seeded_client.put("/libros/LIB001/disponibilidad", json=False, headers=librarian_headers)
    assert response.status_code == 200

    # Now unavailable
    response = seeded_client.get("/libros/LIB001/disponible", headers=user_headers)
    assert response.status_code == 200
    assert response.json() is False

    response = seeded_client.get("/libros/LIB001", headers=user_headers)
    assert response.status_code == 200
    assert response.json()["disponible"] is False


def test_unknown_book(seeded_client, user_headers, librarian_headers):
    assert seeded_client.get("/libros/NOPE", headers=user_headers).status_code == 404
    assert seeded_client.get("/libros/NOPE/disponible", headers=user_headers).json() is False
    assert seeded_client.put("/libros/NOPE/disponibilidad", json=True, headers=librarian_headers).status_code == 404


@pytest.mark.parametrize("body", ['"yes"', "1", "null"])
def test_rejected_update_leaves_book_unchanged(seeded_client, user_headers, librarian_headers, body):
    headers = {**librarian_headers, "Content-Type": "application/json"}
    response = seeded_client.put("/libros/LIB001/disponibilidad", content=body, headers=headers)
    assert response.status_code == 400

    assert seeded_client.get("/libros/LIB001/disponible", headers=user_headers).json() is True

def test_unavailable_book_indistinguishable_from_missing(seeded_client, user_headers):
    unavailable = seeded_client.get("/libros/LIB002/disponible", headers=user_headers)
    missing = seeded_client.get("/libros/NOPE/disponible", headers=user_headers)

    assert unavailable.status_code == missing.status_code == 200
    assert unavailable.json() is missing.json() is False


def test_search_is_case_insensitive_and_ordered(seeded_client, librarian_headers):
    response = seeded_client.get("/libros/buscar", params={"criterio": "NOVELA"}, headers=librarian_headers)

    assert [b["id"] for b in response.json()] == ["LIB001", "LIB003"]


def test_search_repeatable(seeded_client, user_headers):
    first = seeded_client.get("/libros/buscar", params={"criterio": "a"}, headers=user_headers).json()
    second = seeded_client.get("/libros/buscar", params={"criterio": "a"}, headers=user_headers).json()

    assert first == second
