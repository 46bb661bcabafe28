"""Order aggregate, the core of the domain.

The Order is an aggregate root that owns its order items and its
delivery: both are created with the order and never outlive it.
All business invariants are enforced here.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum

from shop.domain.exceptions import (
    AssociationNotLoadedError,
    IllegalOrderStateError,
    ValidationError,
)
from shop.domain.model.delivery import Delivery, DeliveryStatus
from shop.domain.model.item import Item
from shop.domain.model.member import Member
from shop.domain.model.value_objects import Quantity


class OrderStatus(Enum):
    ORDERED = "ORDERED"
    CANCELLED = "CANCELLED"


@dataclass
class OrderItem:
    """One line of an order.

    ``order_price`` and ``count`` are snapshots taken when the order was
    placed; later price changes on the Item do not reach them.
    """

    id: int | None
    item: Item
    order_price: int  # locked at order-creation time
    count: int
    order_id: int | None = None

    @staticmethod
    def create(item: Item, order_price: int, count: int) -> OrderItem:
        """Create an order line and take its quantity out of stock."""
        quantity = Quantity(count)
        if order_price < 0:
            raise ValidationError(f"Order price cannot be negative, got {order_price}")
        item.remove_stock(quantity.value)
        return OrderItem(id=None, item=item, order_price=order_price, count=quantity.value)

    def cancel(self) -> None:
        """Put the ordered quantity back into stock."""
        self.item.add_stock(self.count)

    @property
    def total_price(self) -> int:
        return self.order_price * self.count


@dataclass
class Order:
    """Aggregate root for purchase orders.

    Use the ``Order.create()`` factory for new orders; it wires the
    graph together and enforces the business rules. The ``__init__`` is
    kept simple so repositories can reconstitute persisted orders.

    ``items_loaded`` is False when a read path fetched the order without
    its collection (to-one fetch join). Anything that needs the order
    items then raises instead of acting on an empty list.
    """

    id: int | None
    member: Member
    delivery: Delivery
    order_items: list[OrderItem] = field(default_factory=list)
    order_date: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    status: OrderStatus = OrderStatus.ORDERED
    items_loaded: bool = field(default=True, compare=False)

    # --- Factory (used for NEW orders only) -----------------------------------

    @staticmethod
    def create(member: Member, delivery: Delivery, *order_items: OrderItem) -> Order:
        """Create a new order from already-created order items."""
        if not order_items:
            raise ValidationError("Order must contain at least one item")

        order = Order(id=None, member=member, delivery=delivery)
        for order_item in order_items:
            order.add_order_item(order_item)
        member.orders.append(order)
        return order

    def add_order_item(self, order_item: OrderItem) -> None:
        self._require_items()
        self.order_items.append(order_item)
        order_item.order_id = self.id

    # --- State transitions ----------------------------------------------------

    def cancel(self) -> None:
        """Transition ORDERED -> CANCELLED and restore stock.

        An order whose delivery has completed can no longer be cancelled.
        """
        self._require_items()
        if self.delivery.status == DeliveryStatus.COMP:
            raise IllegalOrderStateError("Delivered orders cannot be cancelled")
        if self.status == OrderStatus.CANCELLED:
            raise IllegalOrderStateError("Order is already cancelled")
        self.status = OrderStatus.CANCELLED
        for order_item in self.order_items:
            order_item.cancel()

    def complete_delivery(self) -> None:
        if self.status == OrderStatus.CANCELLED:
            raise IllegalOrderStateError("Cancelled orders cannot be delivered")
        self.delivery.complete()

    # --- Computed properties --------------------------------------------------

    @property
    def total_price(self) -> int:
        self._require_items()
        return sum(order_item.total_price for order_item in self.order_items)

    # --- Internal helpers -----------------------------------------------------

    def _require_items(self) -> None:
        if not self.items_loaded:
            raise AssociationNotLoadedError(
                f"Order #{self.id} was loaded without its order items"
            )
