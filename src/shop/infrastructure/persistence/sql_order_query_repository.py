"""SQLAlchemy-backed implementation of OrderQueryRepository.

Selects plain columns, never rows, and builds DTOs directly. The
to-one part (order, member, delivery) is always a single joined query;
the read paths differ in how the order items are fetched.
"""

from __future__ import annotations

from collections import defaultdict

from sqlalchemy import select
from sqlalchemy.engine import Row
from sqlalchemy.orm import Session

from shop.application.dto import OrderDTO, OrderFlatDTO, OrderItemDTO, SimpleOrderDTO
from shop.application.order_query_repository import OrderQueryRepository
from shop.domain.model.order import OrderStatus
from shop.domain.repository.order_repository import OrderSearch
from shop.infrastructure.persistence.entity_mapper import address_from_columns
from shop.infrastructure.persistence.orm import (
    DeliveryRow,
    ItemRow,
    MemberRow,
    OrderItemRow,
    OrderRow,
)
from shop.infrastructure.persistence.sql_order_repository import filter_orders

_ORDER_COLUMNS = (
    OrderRow.id.label("order_id"),
    MemberRow.name.label("member_name"),
    OrderRow.order_date,
    OrderRow.status,
    DeliveryRow.city,
    DeliveryRow.street,
    DeliveryRow.zipcode,
)

_ITEM_COLUMNS = (
    OrderItemRow.order_id,
    ItemRow.name.label("item_name"),
    OrderItemRow.order_price,
    OrderItemRow.count.label("item_count"),
)


class SqlOrderQueryRepository(OrderQueryRepository):

    def __init__(self, session: Session) -> None:
        self._session = session

    # --- OrderQueryRepository interface ---------------------------------------

    def find_simple_order_dtos(self, search: OrderSearch) -> list[SimpleOrderDTO]:
        return [
            SimpleOrderDTO(
                order_id=row.order_id,
                member_name=row.member_name,
                order_date=row.order_date,
                order_status=OrderStatus(row.status),
                address=address_from_columns(row.city, row.street, row.zipcode),
            )
            for row in self._select_orders(search)
        ]

    def find_order_dtos(self, search: OrderSearch) -> list[OrderDTO]:
        return [
            self._to_order_dto(row, self._select_items([row.order_id]).get(row.order_id, []))
            for row in self._select_orders(search)
        ]

    def find_order_dtos_batched(self, search: OrderSearch) -> list[OrderDTO]:
        heads = self._select_orders(search)
        if not heads:
            return []
        items = self._select_items([row.order_id for row in heads])
        return [self._to_order_dto(row, items.get(row.order_id, [])) for row in heads]

    def find_order_flat_rows(self, search: OrderSearch) -> list[OrderFlatDTO]:
        stmt = (
            select(*_ORDER_COLUMNS, *_ITEM_COLUMNS[1:])
            .join(MemberRow, OrderRow.member_id == MemberRow.id)
            .join(DeliveryRow, OrderRow.delivery_id == DeliveryRow.id)
            .join(OrderItemRow, OrderItemRow.order_id == OrderRow.id)
            .join(ItemRow, OrderItemRow.item_id == ItemRow.id)
            .order_by(OrderRow.id, OrderItemRow.id)
        )
        return [
            OrderFlatDTO(
                order_id=row.order_id,
                member_name=row.member_name,
                order_date=row.order_date,
                order_status=OrderStatus(row.status),
                address=address_from_columns(row.city, row.street, row.zipcode),
                item_name=row.item_name,
                order_price=row.order_price,
                count=row.item_count,
            )
            for row in self._session.execute(filter_orders(stmt, search))
        ]

    # --- Internal helpers -----------------------------------------------------

    def _select_orders(self, search: OrderSearch) -> list[Row]:
        stmt = (
            select(*_ORDER_COLUMNS)
            .join(MemberRow, OrderRow.member_id == MemberRow.id)
            .join(DeliveryRow, OrderRow.delivery_id == DeliveryRow.id)
            .order_by(OrderRow.id)
        )
        return list(self._session.execute(filter_orders(stmt, search)))

    def _select_items(self, order_ids: list[int]) -> dict[int, list[OrderItemDTO]]:
        """Order items of *order_ids*, keyed by order ID, in one query."""
        if len(order_ids) == 1:
            condition = OrderItemRow.order_id == order_ids[0]
        else:
            condition = OrderItemRow.order_id.in_(order_ids)
        stmt = (
            select(*_ITEM_COLUMNS)
            .join(ItemRow, OrderItemRow.item_id == ItemRow.id)
            .where(condition)
            .order_by(OrderItemRow.id)
        )
        by_order: dict[int, list[OrderItemDTO]] = defaultdict(list)
        for row in self._session.execute(stmt):
            by_order[row.order_id].append(
                OrderItemDTO(item_name=row.item_name, order_price=row.order_price, count=row.item_count)
            )
        return by_order

    @staticmethod
    def _to_order_dto(row: Row, order_items: list[OrderItemDTO]) -> OrderDTO:
        return OrderDTO(
            order_id=row.order_id,
            member_name=row.member_name,
            order_date=row.order_date,
            order_status=OrderStatus(row.status),
            address=address_from_columns(row.city, row.street, row.zipcode),
            order_items=order_items,
        )
