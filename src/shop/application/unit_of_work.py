"""Unit of Work: the transaction boundary handed to every handler.

A handler enters the unit of work, uses its repositories, and calls
``commit()``. Leaving the ``with`` block without committing rolls back,
so any exception aborts the whole operation.

The same instance may be entered again after it has been exited; each
``with`` block is a fresh transaction.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from shop.application.order_query_repository import OrderQueryRepository
from shop.domain.repository.category_repository import CategoryRepository
from shop.domain.repository.item_repository import ItemRepository
from shop.domain.repository.member_repository import MemberRepository
from shop.domain.repository.order_repository import OrderRepository


class UnitOfWork(ABC):

    members: MemberRepository
    items: ItemRepository
    categories: CategoryRepository
    orders: OrderRepository
    order_queries: OrderQueryRepository

    def __enter__(self) -> UnitOfWork:
        self._begin()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        try:
            self.rollback()
        finally:
            self._end()

    @abstractmethod
    def commit(self) -> None:
        """Make every change of the current block permanent."""

    @abstractmethod
    def rollback(self) -> None:
        """Discard uncommitted changes (a no-op after commit)."""

    @abstractmethod
    def _begin(self) -> None:
        """Open the transaction and bind the repositories to it."""

    def _end(self) -> None:
        """Release whatever ``_begin()`` acquired."""
