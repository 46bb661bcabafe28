"""Application service: order listing without order items.

Only the to-one associations (member, delivery) are needed, so the
choice is between per-order loads and a single join:

    ENTITY             1 + N + N   raw entity graph (items not loaded)
    ENTITY_TO_DTO      1 + N + N   same loads, DTO output
    TO_ONE_FETCH_JOIN  1           member and delivery joined
    DTO                1           only the needed columns selected
"""

from __future__ import annotations

import logging
from enum import Enum

from shop.application.dto import SimpleOrderDTO
from shop.application.unit_of_work import UnitOfWork
from shop.domain.model.order import Order
from shop.domain.repository.order_repository import OrderSearch

logger = logging.getLogger(__name__)


class SimpleOrderQueryStrategy(Enum):
    ENTITY = "entity"
    ENTITY_TO_DTO = "entity-dto"
    TO_ONE_FETCH_JOIN = "to-one-fetch-join"
    DTO = "dto"


class SearchSimpleOrdersHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(
        self,
        strategy: SimpleOrderQueryStrategy,
        search: OrderSearch | None = None,
    ) -> list[SimpleOrderDTO]:
        search = search or OrderSearch()
        logger.debug("Listing simple orders with strategy %s (%s)", strategy.value, search)
        with self._uow:
            if strategy == SimpleOrderQueryStrategy.DTO:
                return self._uow.order_queries.find_simple_order_dtos(search)

            if strategy == SimpleOrderQueryStrategy.TO_ONE_FETCH_JOIN:
                orders = self._uow.orders.find_all_with_member_delivery(search)
            else:
                orders = self._uow.orders.find_all(search, with_items=False)
            return [self._to_dto(o) for o in orders]

    def entities(self, search: OrderSearch | None = None) -> list[Order]:
        """Orders with member and delivery loaded; order items left out."""
        with self._uow:
            return self._uow.orders.find_all(search or OrderSearch(), with_items=False)

    @staticmethod
    def _to_dto(order: Order) -> SimpleOrderDTO:
        return SimpleOrderDTO(
            order_id=order.id,  # type: ignore[arg-type]
            member_name=order.member.name,
            order_date=order.order_date,
            order_status=order.status,
            address=order.delivery.address,
        )
