"""SQLAlchemy unit of work: one Session and one EntityMapper per ``with`` block."""

from __future__ import annotations

import logging

from sqlalchemy.orm import Session, sessionmaker

from shop.application.unit_of_work import UnitOfWork
from shop.infrastructure.persistence.entity_mapper import EntityMapper
from shop.infrastructure.persistence.sql_category_repository import SqlCategoryRepository
from shop.infrastructure.persistence.sql_item_repository import SqlItemRepository
from shop.infrastructure.persistence.sql_member_repository import SqlMemberRepository
from shop.infrastructure.persistence.sql_order_query_repository import SqlOrderQueryRepository
from shop.infrastructure.persistence.sql_order_repository import SqlOrderRepository

logger = logging.getLogger(__name__)


class SqlAlchemyUnitOfWork(UnitOfWork):

    def __init__(
        self,
        session_factory: sessionmaker[Session],
        batch_fetch_size: int = 100,
        max_results: int = 1000,
    ) -> None:
        self._session_factory = session_factory
        self._batch_fetch_size = batch_fetch_size
        self._max_results = max_results
        self._session: Session | None = None

    @property
    def session(self) -> Session:
        if self._session is None:
            raise RuntimeError("Unit of work is not active; use it in a 'with' block")
        return self._session

    def _begin(self) -> None:
        session = self._session_factory()
        mapper = EntityMapper()
        self._session = session
        self.members = SqlMemberRepository(session, mapper)
        self.items = SqlItemRepository(session, mapper)
        self.categories = SqlCategoryRepository(session, mapper)
        self.orders = SqlOrderRepository(
            session,
            mapper,
            batch_fetch_size=self._batch_fetch_size,
            max_results=self._max_results,
        )
        self.order_queries = SqlOrderQueryRepository(session)

    def commit(self) -> None:
        self.session.commit()
        logger.debug("Transaction committed")

    def rollback(self) -> None:
        self.session.rollback()

    def _end(self) -> None:
        if self._session is not None:
            self._session.close()
            self._session = None
