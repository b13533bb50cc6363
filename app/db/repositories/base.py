from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar

from sqlalchemy.orm import Session


TSession = TypeVar("TSession", bound=Session)


@dataclass
class Repository(Generic[TSession]):
    """Base for read repositories bound to one request-scoped session."""

    db: TSession
