"""Application service: order listing, one read strategy at a time.

Every strategy answers the same question (orders matching an
OrderSearch, each with member, delivery address and ordered items) and
differs only in how many queries it issues and whether it can be
paginated:

    ENTITY            1 + N + N + N   raw entity graph
    ENTITY_TO_DTO     1 + N + N + N   same loads, DTO output
    FETCH_JOIN        1               collection join; refuses offset/limit
    FETCH_JOIN_PAGED  1 + ceil(N/B)   to-one join, batched IN-list collection
    DTO               1 + N           direct-to-DTO, one item query per order
    DTO_BATCHED       1 + 1           direct-to-DTO, one keyed item query
    DTO_FLAT          1               flattened join, grouped here

Rule of thumb: to-one associations (member, delivery) can always be
fetch-joined; the to-many order items are either batched by key or read
by a second keyed query whenever pagination matters.

ENTITY and ENTITY_TO_DTO stop at the unit of work's max_results
(1000 by default). Above that many matching orders they return a
truncated prefix while the other strategies return every order.
"""

from __future__ import annotations

import logging
from enum import Enum

from shop.application.dto import OrderDTO, OrderItemDTO, group_flat_rows
from shop.application.unit_of_work import UnitOfWork
from shop.domain.exceptions import ValidationError
from shop.domain.model.order import Order
from shop.domain.repository.order_repository import OrderSearch

logger = logging.getLogger(__name__)


class OrderQueryStrategy(Enum):
    ENTITY = "entity"
    ENTITY_TO_DTO = "entity-dto"
    FETCH_JOIN = "fetch-join"
    FETCH_JOIN_PAGED = "fetch-join-paged"
    DTO = "dto"
    DTO_BATCHED = "dto-batched"
    DTO_FLAT = "dto-flat"


class SearchOrdersHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(
        self,
        strategy: OrderQueryStrategy,
        search: OrderSearch | None = None,
        offset: int | None = None,
        limit: int | None = None,
    ) -> list[OrderDTO]:
        """Run *strategy* and return the orders as DTOs.

        Only FETCH_JOIN_PAGED takes *offset* / *limit*. FETCH_JOIN passes
        them to the repository, whose guard refuses them; every other
        strategy rejects them here.
        """
        search = search or OrderSearch()
        paginated = offset is not None or limit is not None
        if paginated and strategy not in (
            OrderQueryStrategy.FETCH_JOIN,
            OrderQueryStrategy.FETCH_JOIN_PAGED,
        ):
            raise ValidationError(
                f"Strategy '{strategy.value}' does not accept offset/limit"
            )

        logger.debug("Listing orders with strategy %s (%s)", strategy.value, search)
        with self._uow:
            if strategy in (OrderQueryStrategy.ENTITY, OrderQueryStrategy.ENTITY_TO_DTO):
                orders = self._uow.orders.find_all(search)
                return [self._to_dto(o) for o in orders]

            if strategy == OrderQueryStrategy.FETCH_JOIN:
                orders = self._uow.orders.find_all_with_item(search, offset, limit)
                return [self._to_dto(o) for o in orders]

            if strategy == OrderQueryStrategy.FETCH_JOIN_PAGED:
                orders = self._uow.orders.find_all_with_member_delivery(
                    search, offset=offset or 0, limit=limit
                )
                self._uow.orders.load_order_items(orders)
                return [self._to_dto(o) for o in orders]

            if strategy == OrderQueryStrategy.DTO:
                return self._uow.order_queries.find_order_dtos(search)

            if strategy == OrderQueryStrategy.DTO_BATCHED:
                return self._uow.order_queries.find_order_dtos_batched(search)

            rows = self._uow.order_queries.find_order_flat_rows(search)
            return group_flat_rows(rows)

    def entities(self, search: OrderSearch | None = None) -> list[Order]:
        """The ENTITY strategy without the DTO step: fully loaded domain orders."""
        with self._uow:
            return self._uow.orders.find_all(search or OrderSearch())

    # --- Mapping --------------------------------------------------------------

    @staticmethod
    def _to_dto(order: Order) -> OrderDTO:
        return OrderDTO(
            order_id=order.id,  # type: ignore[arg-type]
            member_name=order.member.name,
            order_date=order.order_date,
            order_status=order.status,
            address=order.delivery.address,
            order_items=[
                OrderItemDTO(
                    item_name=order_item.item.name,
                    order_price=order_item.order_price,
                    count=order_item.count,
                )
                for order_item in order.order_items
            ],
        )
