"""
FastAPI Dependencies

Provides dependency injection for FastAPI endpoints:
- Database session, repositories and services via the container
- Bearer authentication and role checks

Usage in endpoints:
    @router.get("/libros/{id}")
    async def get_book(
        id: str,
        principal: Principal = Depends(require_roles(ROLE_LIBRARIAN, ROLE_USER)),
        service: CatalogService = Depends(get_catalog_service)
    ):
        ...
"""

from typing import Generator, Optional
from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from sqlalchemy.orm import Session
from ..config import Settings, settings
from ..core.container import container
from ..core.repositories.book_repo import BookRepository
from ..core.services.catalog_service import CatalogService
from ..core.security import Principal, InvalidTokenError, decode_token, is_authorized

import logging
logger = logging.getLogger(__name__)

bearer_scheme = HTTPBearer(
    scheme_name="Bearer Authentication",
    bearerFormat="JWT",
    description="Autenticación JWT Bearer Token requerida para acceder a los endpoints",
    auto_error=False
)


# ========== Database Session ==========
def get_db() -> Generator[Session, None, None]:
    """
    Dependency to get a database session

    Yields:
        SQLAlchemy Session (closed after the request)
    """
    db = container.db_session()
    try:
        yield db
    finally:
        db.close()


# ========== Repositories ==========
def get_book_repository(db: Session = Depends(get_db)) -> BookRepository:
    return container.book_repository(session=db)


# ========== Services ==========
def get_catalog_service(
    book_repo: BookRepository = Depends(get_book_repository)
) -> CatalogService:
    """
    Dependency to get CatalogService

    Args:
        book_repo: BookRepository (auto-injected)
    """
    return container.catalog_service(book_repo=book_repo)


# ========== Security ==========
def get_settings() -> Settings:
    return settings


def get_current_principal(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    config: Settings = Depends(get_settings)
) -> Principal:
    """
    Authenticate the caller from the Authorization header

    Raises:
        HTTPException 401: Missing, malformed or invalid bearer token
    """
    if credentials is None or credentials.scheme.lower() != "bearer":
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="No autorizado - Token JWT requerido",
            headers={"WWW-Authenticate": "Bearer"}
        )

    try:
        return decode_token(credentials.credentials, config)
    except InvalidTokenError:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="No autorizado - Token JWT inválido",
            headers={"WWW-Authenticate": "Bearer"}
        )


def require_roles(*roles: str):
    """
    Build a dependency enforcing that the caller holds one of ``roles``

    Runs before the endpoint body, so business logic never executes for
    unauthenticated (401) or unauthorized (403) callers.
    """
    def dependency(principal: Principal = Depends(get_current_principal)) -> Principal:
        if not is_authorized(principal, roles):
            logger.info(f"[AUTH] Access denied for {principal.subject}: requires one of {roles}")
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail=f"Acceso denegado - Rol requerido: {' o '.join(roles)}"
            )
        return principal

    return dependency
