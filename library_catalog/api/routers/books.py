"""
Books Router
Implements: Single Responsibility Principle (SRP)

This router handles the catalog endpoints:
- Book lookup
- Availability check and update
- Free-text search

Role checks run as dependencies, before any service call.
"""
from fastapi import APIRouter, Depends, HTTPException, Query, Request, Response
from typing import List, Optional
from pydantic import StrictBool, TypeAdapter, ValidationError
from ...core.services.catalog_service import CatalogService
from ...core.domain.book import BookId
from ...core.exceptions import BookNotFoundException
from ...core.security import Principal, ROLE_LIBRARIAN, ROLE_USER
from ...schemas import Book
from ..dependencies import get_catalog_service, require_roles

import logging
logger = logging.getLogger(__name__)

router = APIRouter(prefix="/libros", tags=["Catálogo de Libros"])

READERS = (ROLE_LIBRARIAN, ROLE_USER)

AVAILABILITY_BODY = TypeAdapter(StrictBool)

AUTH_RESPONSES = {
    401: {"description": "No autorizado - Token JWT requerido"},
    403: {"description": "Acceso denegado - Rol requerido"},
}


def _parse_book_id(raw: str) -> Optional[BookId]:
    try:
        return BookId(raw)
    except ValueError:
        return None


# ========== Endpoints ==========
@router.get(
    "/buscar",
    response_model=List[Book],
    summary="Buscar libros por criterio",
    responses={400: {"description": "Criterio de búsqueda inválido o vacío"}, **AUTH_RESPONSES}
)
async def search_books(
    criterio: str = Query(..., description="Criterio de búsqueda (título, autor, ISBN, categoría)", examples=["García Márquez"]),
    principal: Principal = Depends(require_roles(*READERS)),
    service: CatalogService = Depends(get_catalog_service)
):
    """
    Search books by free-text criterion

    Matches title, authors, ISBN and category (case-insensitive substring).

    Raises:
        HTTPException 400: If criterion is empty or whitespace
    """
    if not criterio.strip():
        raise HTTPException(status_code=400, detail="Search criterion cannot be empty")

    books = await service.search(criterio)
    return [Book.from_domain(book) for book in books]


@router.get(
    "/{book_id}",
    response_model=Book,
    summary="Obtener información de un libro",
    responses={404: {"description": "Libro no encontrado con el ID proporcionado"}, **AUTH_RESPONSES}
)
async def get_book(
    book_id: str,
    principal: Principal = Depends(require_roles(*READERS)),
    service: CatalogService = Depends(get_catalog_service)
):
    """
    Get book by ID

    Raises:
        HTTPException 404: If book not found
    """
    parsed = _parse_book_id(book_id)
    book = await service.get_book(parsed) if parsed else None
    if not book:
        raise HTTPException(status_code=404, detail="Book not found")
    return Book.from_domain(book)


@router.get(
    "/{book_id}/disponible",
    response_model=bool,
    summary="Verificar disponibilidad de un libro",
    responses=AUTH_RESPONSES
)
async def is_book_available(
    book_id: str,
    principal: Principal = Depends(require_roles(*READERS)),
    service: CatalogService = Depends(get_catalog_service)
):
    """
    Check availability

    Always 200: false for unknown and unavailable books alike.
    """
    parsed = _parse_book_id(book_id)
    if parsed is None:
        return False
    return await service.is_available(parsed)


@router.put(
    "/{book_id}/disponibilidad",
    summary="Actualizar disponibilidad de un libro",
    responses={
        200: {"description": "Disponibilidad actualizada exitosamente"},
        400: {"description": "Datos de entrada inválidos"},
        404: {"description": "Libro no encontrado con el ID proporcionado"},
        **AUTH_RESPONSES
    },
    openapi_extra={
        "requestBody": {
            "required": True,
            "description": "Nuevo estado de disponibilidad",
            "content": {
                "application/json": {
                    "schema": {
                        "type": "boolean",
                        "description": "true para disponible, false para no disponible",
                        "example": False
                    }
                }
            }
        }
    }
)
async def update_availability(
    book_id: str,
    request: Request,
    principal: Principal = Depends(require_roles(ROLE_LIBRARIAN)),
    service: CatalogService = Depends(get_catalog_service)
):
    """
    Update availability (librarians only)

    Body is a bare JSON boolean. It is read only after the role check,
    so 401/403 win over malformed input.

    Raises:
        HTTPException 400: If book id is blank or body is not a JSON boolean
        HTTPException 404: If book not found
    """
    parsed = _parse_book_id(book_id)
    if parsed is None:
        raise HTTPException(status_code=400, detail="Book ID cannot be empty")

    try:
        disponible = AVAILABILITY_BODY.validate_json(await request.body())
    except ValidationError as e:
        raise HTTPException(
            status_code=400,
            detail=[{"loc": ["body"], "msg": err["msg"], "type": err["type"]} for err in e.errors()]
        )

    try:
        await service.update_availability(parsed, disponible)
    except BookNotFoundException as e:
        raise HTTPException(status_code=404, detail=str(e))

    logger.info(f"[API] {principal.subject} set {parsed} disponible={disponible}")
    return Response(status_code=200)
