"""
Bearer Token Security

Validates JWT bearer tokens (PyJWT) and evaluates role-based access.

Roles are read from the configured roles claim and from Keycloak-style
``realm_access.roles``. Every role is normalized to the ``ROLE_`` prefix,
so "LIBRARIAN" and "ROLE_LIBRARIAN" grant the same access.
"""

from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from typing import FrozenSet, Iterable, Optional
import logging

import jwt

from ..config import Settings, settings as default_settings

logger = logging.getLogger(__name__)

ROLE_PREFIX = "ROLE_"
ROLE_LIBRARIAN = "ROLE_LIBRARIAN"
ROLE_USER = "ROLE_USER"


class InvalidTokenError(Exception):
    """Raised when a bearer token is missing, malformed, expired or badly signed"""
    pass


@dataclass(frozen=True)
class Principal:
    """Authenticated caller as described by a verified token"""
    subject: Optional[str]
    roles: FrozenSet[str] = field(default_factory=frozenset)

    def has_any_role(self, *roles: str) -> bool:
        return any(normalize_role(role) in self.roles for role in roles)


def normalize_role(role: str) -> str:
    role = role.strip()
    if not role.upper().startswith(ROLE_PREFIX):
        role = ROLE_PREFIX + role
    return role.upper()


def _as_role_list(value) -> list:
    if value is None:
        return []
    if isinstance(value, str):
        return value.replace(",", " ").split()
    if isinstance(value, (list, tuple, set, frozenset)):
        return [item for item in value if isinstance(item, str)]
    return []


def extract_roles(claims: dict, roles_claim: str = "roles") -> FrozenSet[str]:
    """
    Collect the role set from token claims

    Args:
        claims: Decoded JWT payload
        roles_claim: Name of the top-level claim holding roles

    Returns:
        Normalized roles (ROLE_ prefixed, upper case)
    """
    raw = _as_role_list(claims.get(roles_claim))

    realm_access = claims.get("realm_access")
    if isinstance(realm_access, dict):
        raw.extend(_as_role_list(realm_access.get("roles")))

    return frozenset(normalize_role(role) for role in raw if role.strip())


def decode_token(token: str, config: Settings = default_settings) -> Principal:
    """
    Verify a bearer token and build the Principal

    Raises:
        InvalidTokenError: If the token cannot be verified
    """
    if not token:
        raise InvalidTokenError("Missing bearer token")

    try:
        claims = jwt.decode(
            token,
            config.jwt_secret,
            algorithms=[config.jwt_algorithm],
            audience=config.jwt_audience,
            issuer=config.jwt_issuer,
            options={"verify_aud": config.jwt_audience is not None}
        )
    except jwt.PyJWTError as e:
        logger.info(f"[AUTH] Rejected bearer token: {e}")
        raise InvalidTokenError(str(e)) from e

    return Principal(
        subject=claims.get("sub"),
        roles=extract_roles(claims, config.jwt_roles_claim)
    )


def is_authorized(principal: Principal, required_roles: Iterable[str]) -> bool:
    """
    Access policy: the principal must hold at least one required role

    An empty requirement set only demands authentication.
    """
    required = [normalize_role(role) for role in required_roles]
    if not required:
        return True
    return principal.has_any_role(*required)


def create_access_token(
    subject: str,
    roles: Iterable[str],
    config: Settings = default_settings,
    expires_in: Optional[timedelta] = timedelta(hours=1)
) -> str:
    """
    Mint a signed token (development tooling and tests)

    Args:
        subject: "sub" claim
        roles: Role names, with or without the ROLE_ prefix
        expires_in: Lifetime, None for a token without "exp"
    """
    now = datetime.now(timezone.utc)
    payload = {
        "sub": subject,
        "iat": now,
        config.jwt_roles_claim: [normalize_role(role) for role in roles],
    }
    if expires_in is not None:
        payload["exp"] = now + expires_in
    if config.jwt_audience:
        payload["aud"] = config.jwt_audience
    if config.jwt_issuer:
        payload["iss"] = config.jwt_issuer

    return jwt.encode(payload, config.jwt_secret, algorithm=config.jwt_algorithm)
