"""Fixtures backed by an in-memory SQLite database."""

import pytest

from shop.application.seed_sample_data import SeedSampleDataHandler
from shop.infrastructure.persistence.database import (
    build_engine,
    build_session_factory,
    create_schema,
)
from shop.infrastructure.persistence.unit_of_work import SqlAlchemyUnitOfWork
from shop.infrastructure.settings import Settings


@pytest.fixture
def settings() -> Settings:
    return Settings(database_url="sqlite://", batch_fetch_size=100, log_level="WARNING")


@pytest.fixture
def engine(settings):
    engine = build_engine(settings)
    create_schema(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return build_session_factory(engine)


@pytest.fixture
def uow(session_factory) -> SqlAlchemyUnitOfWork:
    return SqlAlchemyUnitOfWork(session_factory)


@pytest.fixture
def seeded(uow) -> list[int]:
    """userA and userB with one two-line order each; returns the order IDs."""
    return SeedSampleDataHandler(uow).handle()
