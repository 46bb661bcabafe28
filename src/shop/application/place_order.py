"""Application service: Place Order use case.

Orchestrates the flow between repositories and the domain model. This
is the only place that coordinates multiple aggregates (Member and Item
lookup + Order creation).

Stock is handled in two phases so a failing line never leaves earlier
lines with their stock already taken:
  Phase 1, load and validate. Every item exists and holds enough stock
           (counts for the same item are added up).
  Phase 2, mutate. Create the order items (which take the stock), build
           the order, persist.
"""

from __future__ import annotations

import logging
from collections import defaultdict

from shop.application.dto import OrderItemSpec
from shop.application.unit_of_work import UnitOfWork
from shop.domain.exceptions import EntityNotFoundError, NotEnoughStockError, ValidationError
from shop.domain.model.delivery import Delivery, DeliveryStatus
from shop.domain.model.item import Item
from shop.domain.model.order import Order, OrderItem
from shop.domain.model.value_objects import Quantity

logger = logging.getLogger(__name__)


class PlaceOrderHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(self, member_id: int, item_specs: list[OrderItemSpec]) -> int:
        """Place an order for *member_id* and return the new order ID.

        The delivery goes to the member's address.
        """
        if not item_specs:
            raise ValidationError("Order must contain at least one item")

        with self._uow:
            member = self._uow.members.get_by_id(member_id)
            if member is None:
                raise EntityNotFoundError(f"Member #{member_id} not found")

            # Phase 1: load all items and validate
            lines: list[tuple[Item, int]] = []
            wanted: dict[int, int] = defaultdict(int)
            for spec in item_specs:
                count = Quantity(spec.count).value
                item = self._uow.items.get_by_id(spec.item_id)
                if item is None:
                    raise EntityNotFoundError(f"Item #{spec.item_id} not found")
                wanted[spec.item_id] += count
                if wanted[spec.item_id] > item.stock_quantity:
                    logger.warning(
                        "Rejected order for member #%s: %s needs %d, has %d",
                        member_id, item.name, wanted[spec.item_id], item.stock_quantity,
                    )
                    raise NotEnoughStockError(
                        f"Not enough stock for {item.name} "
                        f"(need {wanted[spec.item_id]}, have {item.stock_quantity})"
                    )
                lines.append((item, count))

            # Phase 2: mutate and persist
            order_items = [
                OrderItem.create(item, order_price=item.price, count=count)  # <-- price snapshot
                for item, count in lines
            ]
            delivery = Delivery(id=None, address=member.address, status=DeliveryStatus.READY)
            order = Order.create(member, delivery, *order_items)

            for item, _ in lines:
                self._uow.items.save(item)
            self._uow.orders.save(order)
            self._uow.commit()

        logger.info(
            "Order #%s placed by member #%s (%d lines, total %d)",
            order.id, member_id, len(order.order_items), order.total_price,
        )
        return order.id  # type: ignore[return-value]
