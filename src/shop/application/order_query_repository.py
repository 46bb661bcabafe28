"""Abstract query repository that reads orders straight into DTOs.

Unlike the OrderRepository, these read paths never build domain objects:
they select exactly the columns the output needs. They exist for the
listing endpoints only and are never used for writes.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from shop.application.dto import OrderDTO, OrderFlatDTO, SimpleOrderDTO
from shop.domain.repository.order_repository import OrderSearch


class OrderQueryRepository(ABC):

    @abstractmethod
    def find_simple_order_dtos(self, search: OrderSearch) -> list[SimpleOrderDTO]:
        """One query selecting order, member and delivery columns."""

    @abstractmethod
    def find_order_dtos(self, search: OrderSearch) -> list[OrderDTO]:
        """Root query, then one order-item query per order (1 + N)."""

    @abstractmethod
    def find_order_dtos_batched(self, search: OrderSearch) -> list[OrderDTO]:
        """Root query, then one IN-list query for all order items (1 + 1)."""

    @abstractmethod
    def find_order_flat_rows(self, search: OrderSearch) -> list[OrderFlatDTO]:
        """One query joining everything; one row per order item."""
