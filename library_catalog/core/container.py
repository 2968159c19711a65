"""
Dependency Injection Container

- Central place to configure dependencies
- Easy to swap implementations
- Easy to test (can override providers)

Uses dependency-injector library for IoC container
"""

from dependency_injector import containers, providers
from ..config import settings
from ..database import SessionLocal

from .repositories.book_repo import BookRepository
from .services.catalog_service import CatalogService


class Container(containers.DeclarativeContainer):
    """
    Main DI Container

    Manages all dependencies in the application:
    - Configuration
    - Database sessions
    - Repositories
    - Services
    """

    # ========== Configuration ==========
    config = providers.Configuration()

    # ========== Database ==========
    db_session = providers.Factory(
        SessionLocal
    )

    # ========== Repositories ==========
    book_repository = providers.Factory(
        BookRepository,
        session=db_session
    )

    # ========== Services ==========
    catalog_service = providers.Factory(
        CatalogService,
        book_repo=book_repository
    )


# Global container instance
container = Container()


def init_container():
    """
    Initialize container

    Call this on app startup
    """
    container.config.from_dict(settings.to_dict())
