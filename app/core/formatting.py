"""Key ordering for API payloads.

Responses list identifying keys first (``id``, ``uuid``, ``description``,
``name``), the remaining keys alphabetically, and timestamps last, so every
endpoint renders records in the same shape regardless of ORM column order.
"""

from __future__ import annotations

from typing import Any, Mapping, Sequence

__all__ = ["serialize_api_response"]

_LEADING_KEYS: tuple[str, ...] = ("id", "uuid", "description", "name")
_TRAILING_KEYS: tuple[str, ...] = ("created_at", "updated_at")


def _order_record(record: Mapping[str, Any]) -> dict[str, Any]:
    leading = [key for key in _LEADING_KEYS if key in record]
    trailing = [key for key in _TRAILING_KEYS if key in record]
    middle = sorted(key for key in record if key not in leading and key not in trailing)
    return {key: record[key] for key in (*leading, *middle, *trailing)}


def serialize_api_response(data: Mapping[str, Any] | Sequence[Mapping[str, Any]]) -> Any:
    """Return a re-ordered copy of a record or a list of records."""

    if isinstance(data, Mapping):
        return _order_record(data)
    return [_order_record(item) for item in data]
