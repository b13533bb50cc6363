from __future__ import annotations

from typing import Any

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from app.core.errors import AuthenticationError, DomainError
from app.core.logging import get_logger

logger = get_logger("teams.routers.exceptions", component="router")


def error_payload(exc: DomainError) -> dict[str, Any]:
    """Render a domain error as ``{"message": ..., **detail}``."""

    payload: dict[str, Any] = {"message": exc.message}
    if isinstance(exc.detail, dict):
        payload.update({key: value for key, value in exc.detail.items() if key != "message"})
    return payload


def register_exception_handlers(app: FastAPI) -> None:
    """Register shared HTTP translators for domain-layer exceptions."""

    @app.exception_handler(DomainError)
    async def _handle_domain_error(request: Request, exc: DomainError) -> JSONResponse:
        logger.info(
            "domain_error",
            extra={
                "structured_data": {
                    "error": exc.error_code,
                    "status_code": exc.status_code,
                    "path": request.url.path,
                }
            },
        )
        headers = {"WWW-Authenticate": "Bearer"} if isinstance(exc, AuthenticationError) else None
        return JSONResponse(status_code=exc.status_code, content=error_payload(exc), headers=headers)
