from __future__ import annotations

"""Domain-specific exception hierarchy for the team access API."""

from typing import Any

__all__ = [
    "DomainError",
    "InvalidTokenError",
    "AuthenticationError",
    "NotFoundError",
    "TeamNotFoundError",
]


class DomainError(Exception):
    """Base class for recoverable domain-level errors."""

    status_code: int = 400
    error_code: str = "domain_error"
    default_message: str = "Domain error"

    def __init__(
        self,
        message: str | None = None,
        *,
        detail: Any | None = None,
        status_code: int | None = None,
    ) -> None:
        final_message = message or self.default_message
        super().__init__(final_message)
        self.message = final_message
        self.detail = detail
        if status_code is not None:
            self.status_code = status_code


class InvalidTokenError(DomainError):
    """Raised when the bearer token carries no resolvable team scope."""

    error_code = "invalid_token"
    status_code = 400
    default_message = "invalid token"


class AuthenticationError(DomainError):
    """Raised when the bearer token is missing, malformed or rejected."""

    error_code = "unauthenticated"
    status_code = 401
    default_message = "Unauthenticated."


class NotFoundError(DomainError):
    """Base class for missing domain resources."""

    error_code = "not_found"
    status_code = 404
    default_message = "Resource not found."


class TeamNotFoundError(NotFoundError):
    """Raised when a team is absent or outside the caller's memberships."""

    error_code = "team_not_found"
    default_message = "Team not found."

    def __init__(self, docs_url: str | None = None) -> None:
        super().__init__(detail={"docs": docs_url} if docs_url else None)
        self.docs_url = docs_url
