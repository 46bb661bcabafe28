"""Abstract repository for Order aggregate.

Besides the usual load/save pair, the repository exposes the entity read
paths used by the order listing strategies. Each one documents what it
loads; nothing is fetched implicitly afterwards.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

from shop.domain.model.order import Order, OrderStatus


@dataclass(frozen=True)
class OrderSearch:
    """Optional filters: member name (substring) and order status."""

    member_name: str | None = None
    order_status: OrderStatus | None = None


class OrderRepository(ABC):

    @abstractmethod
    def get_by_id(self, order_id: int) -> Order | None:
        """Return a fully loaded order by its ID, or None if not found."""

    @abstractmethod
    def save(self, order: Order) -> None:
        """Persist a new order (with delivery and items) or its new status."""

    @abstractmethod
    def find_all(self, search: OrderSearch, with_items: bool = True) -> list[Order]:
        """Root query, then one load per association per order (1 + N ...)."""

    @abstractmethod
    def find_all_with_member_delivery(
        self,
        search: OrderSearch,
        offset: int | None = None,
        limit: int | None = None,
    ) -> list[Order]:
        """One query joining member and delivery; order items NOT loaded.

        Safe to paginate: to-one joins never multiply rows.
        """

    @abstractmethod
    def load_order_items(self, orders: list[Order]) -> None:
        """Fill ``order_items`` for *orders* with batched IN-list queries."""

    @abstractmethod
    def find_all_with_item(
        self,
        search: OrderSearch,
        offset: int | None = None,
        limit: int | None = None,
    ) -> list[Order]:
        """One query joining member, delivery, order items and items.

        Raises UnsafePaginationError when *offset* or *limit* is given:
        the collection join multiplies rows, so limits would cut orders
        apart.
        """
