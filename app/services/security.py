from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from typing import Iterable, Optional

from fastapi import Depends, Header
from jose import JWTError, jwt
from pydantic import ValidationError as PydanticValidationError
from sqlalchemy.orm import Session

from app.core.config import settings
from app.core.errors import AuthenticationError
from app.core.logging import get_logger
from app.db.database import get_db
from app.db.repositories import UserRepository
from app.schemas.auth import TokenClaims

logger = get_logger("teams.services.security", component="auth")

WILDCARD_ABILITY = "*"


@dataclass(frozen=True)
class Caller:
    """Authenticated principal for a single request.

    ``team_id`` is the team scope carried by the token; ``None`` means the
    token cannot be used for team endpoints.
    """

    user_id: int
    team_id: Optional[int] = None
    abilities: frozenset[str] = field(default_factory=frozenset)


def grants(abilities: Iterable[str], ability: str) -> bool:
    """True when `ability` is among `abilities` or the wildcard is."""
    granted = set(abilities)
    return WILDCARD_ABILITY in granted or ability in granted


def create_access_token(
    subject: str,
    *,
    team_id: Optional[int] = None,
    abilities: Iterable[str] = (),
    expires_minutes: Optional[int] = None,
) -> str:
    """Create a signed JWT carrying the user, team scope and abilities.

    Args:
        subject: User identifier (``users.id``).
        team_id: Team the token is scoped to; omitted from the claims when None.
        abilities: Granted abilities, e.g. ``read`` or ``view:sensitive``.
        expires_minutes: Token lifetime in minutes (defaults to config).
    """
    now = datetime.now(timezone.utc)
    expire = now + timedelta(minutes=expires_minutes or settings.access_token_expire_minutes)
    to_encode: dict[str, object] = {
        "sub": subject,
        "abilities": list(abilities),
        "exp": expire,
        "nbf": now,
        "iss": settings.jwt_issuer,
        "aud": settings.jwt_audience,
    }
    if team_id is not None:
        to_encode["team_id"] = team_id
    return jwt.encode(to_encode, settings.jwt_secret_key, algorithm=settings.jwt_algorithm)


def decode_access_token(token: str) -> TokenClaims:
    """Decode and validate a JWT access token.

    Raises:
        ValueError: If the signature, expiry, issuer, audience or claim shapes
            are invalid.
    """
    try:
        payload = jwt.decode(
            token,
            settings.jwt_secret_key,
            algorithms=[settings.jwt_algorithm],
            options={
                "verify_exp": True,
                "verify_nbf": True,
                "verify_iss": True,
                "verify_aud": True,
                "leeway": 5,
            },
            issuer=settings.jwt_issuer,
            audience=settings.jwt_audience,
        )
    except JWTError as e:
        raise ValueError(f"Invalid JWT token: {e}") from e
    try:
        return TokenClaims.model_validate(payload)
    except PydanticValidationError as e:
        raise ValueError("Invalid token payload") from e


def _bearer_token(authorization: str | None) -> str:
    if not authorization:
        raise AuthenticationError(detail={"reason": "missing_authorization"})
    parts = authorization.split(" ")
    if len(parts) != 2 or parts[0].lower() != "bearer" or not parts[1]:
        raise AuthenticationError(detail={"reason": "malformed_authorization"})
    return parts[1]


def get_current_caller(
    authorization: str | None = Header(default=None),
    db: Session = Depends(get_db),
) -> Caller:
    """FastAPI dependency resolving the bearer token into a :class:`Caller`.

    Any failure (missing header, bad signature, expired token, unknown user)
    is reported as 401; the reason is logged, not returned.
    """
    try:
        claims = decode_access_token(_bearer_token(authorization))
        user_id = claims.user_id
    except AuthenticationError as exc:
        logger.info("auth_rejected", extra={"structured_data": dict(exc.detail or {})})
        raise AuthenticationError() from None
    except ValueError as exc:
        logger.info("auth_rejected", extra={"structured_data": {"reason": str(exc)}})
        raise AuthenticationError() from None

    user = UserRepository(db).get(user_id)
    if user is None:
        logger.info("auth_rejected", extra={"structured_data": {"reason": "unknown_user", "user_id": user_id}})
        raise AuthenticationError()

    return Caller(user_id=user.id, team_id=claims.team_id, abilities=frozenset(claims.abilities))


__all__ = [
    "Caller",
    "WILDCARD_ABILITY",
    "grants",
    "create_access_token",
    "decode_access_token",
    "get_current_caller",
]
