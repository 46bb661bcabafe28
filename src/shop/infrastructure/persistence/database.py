"""Engine, session factory and schema helpers."""

from __future__ import annotations

import logging

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from shop.infrastructure.persistence.orm import Base
from shop.infrastructure.settings import Settings

logger = logging.getLogger(__name__)


def build_engine(settings: Settings) -> Engine:
    """Create the engine for ``settings.database_url``.

    SQLite connections are shared across threads (the HTTP server runs
    sync endpoints in a worker pool); an in-memory database additionally
    needs a single shared connection or every session would see its own
    empty database.
    """
    url = settings.database_url
    options: dict = {"echo": settings.db_echo}

    if url.startswith("sqlite"):
        options["connect_args"] = {"check_same_thread": False}
        if url in ("sqlite://", "sqlite:///:memory:") or ":memory:" in url:
            options["poolclass"] = StaticPool

    engine = create_engine(url, **options)
    logger.debug("Engine created for %s", engine.url.render_as_string(hide_password=True))
    return engine


def build_session_factory(engine: Engine) -> sessionmaker[Session]:
    return sessionmaker(bind=engine, autoflush=False, expire_on_commit=False)


def create_schema(engine: Engine) -> None:
    Base.metadata.create_all(engine)
    logger.info("Database schema created")


def drop_schema(engine: Engine) -> None:
    Base.metadata.drop_all(engine)
    logger.warning("Database schema dropped")


class QueryCounter:
    """Count SQL statements executed on *engine* inside a ``with`` block.

        with QueryCounter(engine) as counter:
            handler.handle(...)
        counter.count  # statements issued

    Transaction control (BEGIN/COMMIT) is not a cursor execution and is
    not counted.
    """

    def __init__(self, engine: Engine) -> None:
        self._engine = engine
        self.statements: list[str] = []

    @property
    def count(self) -> int:
        return len(self.statements)

    def __enter__(self) -> QueryCounter:
        event.listen(self._engine, "before_cursor_execute", self._on_execute)
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        event.remove(self._engine, "before_cursor_execute", self._on_execute)

    def _on_execute(self, conn, cursor, statement, parameters, context, executemany) -> None:
        self.statements.append(statement)
