from __future__ import annotations

from contextlib import contextmanager
from dataclasses import dataclass
from time import perf_counter
from typing import Iterator

from sqlalchemy import Engine, create_engine
from sqlalchemy.engine import URL, make_url
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker
from sqlalchemy.pool import QueuePool, StaticPool

from app.core.config import settings
from app.core.metrics import inc_counter, metrics_registry


class Base(DeclarativeBase):
    pass


@dataclass(frozen=True, slots=True)
class DatabaseGateway:
    """Encapsulates engine and session factory lifecycle."""

    engine: Engine
    session_factory: sessionmaker[Session]

    @contextmanager
    def session(self) -> Iterator[Session]:
        started = perf_counter()
        inc_counter("db.session.opens")
        session: Session = self.session_factory()
        try:
            yield session
        finally:
            metrics_registry.record("db.session.duration", (perf_counter() - started) * 1000.0)
            inc_counter("db.session.closes")
            session.close()


def _pool_kwargs() -> dict[str, object]:
    return {
        "pool_size": settings.db_pool_size,
        "max_overflow": settings.db_max_overflow,
        "pool_timeout": settings.db_pool_timeout,
        "pool_recycle": settings.db_pool_recycle,
        "pool_pre_ping": settings.db_pool_pre_ping,
    }


def _build_engine() -> Engine:
    url: URL = make_url(settings.database_url)
    kwargs: dict[str, object] = {"echo": False}

    if url.get_backend_name() == "sqlite":
        connect_args: dict[str, object] = {"check_same_thread": False}
        database = url.database or ""
        if database.startswith("file:"):
            connect_args["uri"] = True
        kwargs["connect_args"] = connect_args

        if database in ("", ":memory:", "file::memory:"):
            kwargs["poolclass"] = StaticPool
        else:
            kwargs["poolclass"] = QueuePool
            kwargs.update(_pool_kwargs())
    else:
        kwargs.update(_pool_kwargs())

    return create_engine(settings.database_url, **kwargs)


engine: Engine = _build_engine()
SessionLocal: sessionmaker[Session] = sessionmaker(bind=engine, autoflush=False)
database_gateway = DatabaseGateway(engine=engine, session_factory=SessionLocal)


def get_db():
    with database_gateway.session() as session:
        yield session


__all__ = [
    "Base",
    "database_gateway",
    "engine",
    "SessionLocal",
    "get_db",
]
