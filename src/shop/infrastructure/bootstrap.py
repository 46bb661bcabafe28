"""Composition root: wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from functools import lru_cache

from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker

from shop.infrastructure.persistence.database import build_engine, build_session_factory
from shop.infrastructure.persistence.unit_of_work import SqlAlchemyUnitOfWork
from shop.infrastructure.settings import get_settings


@lru_cache
def engine() -> Engine:
    return build_engine(get_settings())


@lru_cache
def session_factory() -> sessionmaker[Session]:
    return build_session_factory(engine())


def unit_of_work() -> SqlAlchemyUnitOfWork:
    settings = get_settings()
    return SqlAlchemyUnitOfWork(
        session_factory(),
        batch_fetch_size=settings.batch_fetch_size,
        max_results=settings.max_results,
    )


def reset() -> None:
    """Forget the cached settings, engine and session factory."""
    if engine.cache_info().currsize:
        engine().dispose()
    session_factory.cache_clear()
    engine.cache_clear()
    get_settings.cache_clear()
