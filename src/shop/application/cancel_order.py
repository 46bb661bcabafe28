"""Application service: Cancel Order use case.

Cancelling puts every ordered quantity back into stock. Orders whose
delivery already completed are refused by the aggregate.
"""

from __future__ import annotations

import logging

from shop.application.unit_of_work import UnitOfWork
from shop.domain.exceptions import EntityNotFoundError

logger = logging.getLogger(__name__)


class CancelOrderHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(self, order_id: int) -> None:
        with self._uow:
            order = self._uow.orders.get_by_id(order_id)
            if order is None:
                raise EntityNotFoundError(f"Order #{order_id} not found")

            order.cancel()

            for order_item in order.order_items:
                self._uow.items.save(order_item.item)
            self._uow.orders.save(order)
            self._uow.commit()

        logger.info("Order #%s cancelled, stock restored", order_id)
