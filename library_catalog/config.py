"""
Application Settings

All runtime configuration comes from environment variables so the same
image can run locally, in tests and in production.

Usage:
    from library_catalog.config import settings
    engine = create_engine(settings.database_url)
"""

import os
from dataclasses import dataclass, asdict
from typing import Optional


def _env_bool(name: str, default: bool) -> bool:
    raw = os.environ.get(name)
    if raw is None:
        return default
    return raw.strip().lower() in ("1", "true", "yes", "on")


def _env_optional(name: str) -> Optional[str]:
    raw = os.environ.get(name)
    if raw is None or not raw.strip():
        return None
    return raw.strip()


@dataclass(frozen=True)
class Settings:
    """Immutable snapshot of the service configuration"""
    database_url: str = "sqlite:///./data/db/catalog.db"
    seed_catalog: bool = True
    jwt_secret: str = "change-me-catalog-development-secret"
    jwt_algorithm: str = "HS256"
    jwt_audience: Optional[str] = None
    jwt_issuer: Optional[str] = None
    jwt_roles_claim: str = "roles"
    log_level: str = "INFO"
    host: str = "0.0.0.0"
    port: int = 8082

    def to_dict(self) -> dict:
        return asdict(self)


def load_settings() -> Settings:
    """
    Build Settings from the current environment

    Returns:
        Settings instance (defaults for anything unset)
    """
    return Settings(
        database_url=os.environ.get("CATALOG_DATABASE_URL", Settings.database_url),
        seed_catalog=_env_bool("CATALOG_SEED", True),
        jwt_secret=os.environ.get("JWT_SECRET", Settings.jwt_secret),
        jwt_algorithm=os.environ.get("JWT_ALGORITHM", Settings.jwt_algorithm),
        jwt_audience=_env_optional("JWT_AUDIENCE"),
        jwt_issuer=_env_optional("JWT_ISSUER"),
        jwt_roles_claim=os.environ.get("JWT_ROLES_CLAIM", Settings.jwt_roles_claim),
        log_level=os.environ.get("LOG_LEVEL", Settings.log_level).upper(),
        host=os.environ.get("CATALOG_HOST", Settings.host),
        port=int(os.environ.get("CATALOG_PORT", Settings.port)),
    )


# Global settings instance
settings = load_settings()
