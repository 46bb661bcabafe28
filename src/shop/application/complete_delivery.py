"""Application service: Complete Delivery use case."""

from __future__ import annotations

import logging

from shop.application.unit_of_work import UnitOfWork
from shop.domain.exceptions import EntityNotFoundError

logger = logging.getLogger(__name__)


class CompleteDeliveryHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(self, order_id: int) -> None:
        with self._uow:
            order = self._uow.orders.get_by_id(order_id)
            if order is None:
                raise EntityNotFoundError(f"Order #{order_id} not found")
            order.complete_delivery()
            self._uow.orders.save(order)
            self._uow.commit()

        logger.info("Delivery for order #%s completed", order_id)
