from __future__ import annotations

import json
import logging
from contextlib import contextmanager
from contextvars import ContextVar, Token
from datetime import datetime, timezone
from typing import Any, Dict, Iterator, Mapping, MutableMapping
from uuid import uuid4


_CORRELATION_ID: ContextVar[str | None] = ContextVar("correlation_id", default=None)

# Structured fields whose values must never reach a log sink.
SECRET_LOG_KEYS: frozenset[str] = frozenset(
    {
        "authorization",
        "token",
        "password",
        "smtp_username",
        "smtp_password",
        "resend_api_key",
        "telegram_token",
    }
)
_MASK = "[redacted]"


def _mask_secrets(structured: Mapping[str, Any]) -> Dict[str, Any]:
    return {key: (_MASK if key.lower() in SECRET_LOG_KEYS else value) for key, value in structured.items()}


class JsonFormatter(logging.Formatter):
    """Serialize log records into single-line JSON for structured ingestion."""

    def format(self, record: logging.LogRecord) -> str:  # noqa: D401 - override
        payload: Dict[str, Any] = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        correlation_id = _CORRELATION_ID.get()
        if correlation_id:
            payload["correlation_id"] = correlation_id
        structured = getattr(record, "structured_data", None)
        if isinstance(structured, Mapping):
            payload.update(_mask_secrets(structured))
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        if record.stack_info:
            payload["stack_info"] = record.stack_info
        return json.dumps(payload, ensure_ascii=True, default=str)


class StructuredAdapter(logging.LoggerAdapter):
    """Logger adapter that merges keyword extra fields into structured JSON."""

    def process(self, msg: str, kwargs: MutableMapping[str, Any]) -> tuple[str, MutableMapping[str, Any]]:
        extra_payload: Dict[str, Any] = dict(self.extra or {})
        existing_extra = kwargs.get("extra")
        if isinstance(existing_extra, dict):
            structured = existing_extra.get("structured_data")
            if isinstance(structured, Mapping):
                extra_payload.update(dict(structured))
        else:
            existing_extra = {}
        existing_extra["structured_data"] = extra_payload
        kwargs["extra"] = existing_extra
        return msg, kwargs


_STRUCTURED_ATTR = "_structured_configured"


def configure_logging(*, level: int = logging.INFO, environment: str = "dev") -> None:
    """Configure the root logger with the JSON formatter once.

    ``dev`` and ``test`` promote the default level to DEBUG; ``prod`` never
    goes below INFO. Repeated calls are no-ops.
    """
    root = logging.getLogger()
    if bool(getattr(root, _STRUCTURED_ATTR, False)):
        return

    if environment in ("dev", "test"):
        effective_level = logging.DEBUG if level == logging.INFO else level
    elif environment == "prod":
        effective_level = max(level, logging.INFO)
    else:
        effective_level = level

    handler = logging.StreamHandler()
    handler.setFormatter(JsonFormatter())
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(effective_level)
    setattr(root, _STRUCTURED_ATTR, True)


def get_logger(name: str, **defaults: Any) -> StructuredAdapter:
    """Return a structured logger adapter injecting default structured fields."""

    logger = logging.getLogger(name)
    return StructuredAdapter(logger, defaults)


def get_correlation_id() -> str | None:
    return _CORRELATION_ID.get()


def bind_correlation_id(value: str | None = None) -> tuple[str, Token]:
    """Bind a correlation id (generated when absent); returns it with the reset token."""

    cid = value or str(uuid4())
    return cid, _CORRELATION_ID.set(cid)


def reset_correlation_id(token: Token) -> None:
    _CORRELATION_ID.reset(token)


@contextmanager
def correlation_context(correlation_id: str | None = None) -> Iterator[str]:
    """Context manager to bind/unbind correlation id automatically."""

    cid, token = bind_correlation_id(correlation_id)
    try:
        yield cid
    finally:
        reset_correlation_id(token)


__all__ = [
    "SECRET_LOG_KEYS",
    "JsonFormatter",
    "configure_logging",
    "get_logger",
    "get_correlation_id",
    "bind_correlation_id",
    "reset_correlation_id",
    "correlation_context",
]
