"""SQLAlchemy-backed implementation of OrderRepository.

The entity read paths differ only in what each SELECT brings back:

* ``find_all`` selects order rows, then loads member, delivery and
  order items per order (1 + N + N + N). Rows already in the session are
  not selected again, so repeated members or items cost nothing extra.
* ``find_all_with_member_delivery`` selects order, member and delivery
  columns in one joined query. To-one joins never add rows, so
  offset/limit apply to orders.
* ``load_order_items`` fetches the items of many orders with
  ``order_id IN (...)`` lists of at most ``batch_fetch_size`` IDs.
* ``find_all_with_item`` joins the collection as well: one query, but
  every order repeats once per item and the rows are folded back here.
"""

from __future__ import annotations

import logging
from collections import defaultdict

from sqlalchemy import Select, select
from sqlalchemy.orm import Session

from shop.domain.exceptions import (
    EntityNotFoundError,
    UnsafePaginationError,
    ValidationError,
)
from shop.domain.model.order import Order, OrderItem
from shop.domain.repository.order_repository import OrderRepository, OrderSearch
from shop.infrastructure.persistence.entity_mapper import EntityMapper, address_columns
from shop.infrastructure.persistence.orm import (
    DeliveryRow,
    ItemRow,
    MemberRow,
    OrderItemRow,
    OrderRow,
)

logger = logging.getLogger(__name__)


def filter_orders(stmt: Select, search: OrderSearch) -> Select:
    """Apply *search* to a statement that already joins MemberRow."""
    if search.order_status is not None:
        stmt = stmt.where(OrderRow.status == search.order_status.value)
    if search.member_name:
        stmt = stmt.where(MemberRow.name.contains(search.member_name, autoescape=True))
    return stmt


class SqlOrderRepository(OrderRepository):

    def __init__(
        self,
        session: Session,
        mapper: EntityMapper,
        batch_fetch_size: int = 100,
        max_results: int = 1000,
    ) -> None:
        self._session = session
        self._mapper = mapper
        self._batch_fetch_size = batch_fetch_size
        self._max_results = max_results

    # --- Load / save ----------------------------------------------------------

    def get_by_id(self, order_id: int) -> Order | None:
        known = self._mapper.known_order(order_id)
        if known is not None and known.items_loaded:
            return known

        stmt = (
            select(OrderRow, MemberRow, DeliveryRow)
            .join(MemberRow, OrderRow.member_id == MemberRow.id)
            .join(DeliveryRow, OrderRow.delivery_id == DeliveryRow.id)
            .where(OrderRow.id == order_id)
        )
        found = self._session.execute(stmt).one_or_none()
        if found is None:
            return None
        order_row, member_row, delivery_row = found
        order = self._mapper.order(
            order_row,
            self._mapper.member(member_row),
            self._mapper.delivery(delivery_row, order_row.id),
            None,
        )
        self.load_order_items([order])
        return order

    def save(self, order: Order) -> None:
        if order.id is None:
            self._insert(order)
        else:
            self._update(order)

    # --- Entity read paths ----------------------------------------------------

    def find_all(self, search: OrderSearch, with_items: bool = True) -> list[Order]:
        stmt = (
            select(OrderRow)
            .join(MemberRow, OrderRow.member_id == MemberRow.id)
            .order_by(OrderRow.id)
            .limit(self._max_results)
        )
        rows = self._session.scalars(filter_orders(stmt, search)).all()

        orders: list[Order] = []
        for row in rows:
            member = self._mapper.member(self._session.get(MemberRow, row.member_id))
            delivery = self._mapper.delivery(
                self._session.get(DeliveryRow, row.delivery_id), row.id
            )
            order_items = self._select_order_items(row.id) if with_items else None
            orders.append(self._mapper.order(row, member, delivery, order_items))
        return orders

    def find_all_with_member_delivery(
        self,
        search: OrderSearch,
        offset: int | None = None,
        limit: int | None = None,
    ) -> list[Order]:
        if offset is not None and offset < 0:
            raise ValidationError(f"Offset cannot be negative, got {offset}")
        if limit is not None and limit < 1:
            raise ValidationError(f"Limit must be positive, got {limit}")

        stmt = (
            select(OrderRow, MemberRow, DeliveryRow)
            .join(MemberRow, OrderRow.member_id == MemberRow.id)
            .join(DeliveryRow, OrderRow.delivery_id == DeliveryRow.id)
            .order_by(OrderRow.id)
        )
        stmt = filter_orders(stmt, search)
        if offset:
            stmt = stmt.offset(offset)
        if limit is not None:
            stmt = stmt.limit(limit)

        return [
            self._mapper.order(
                order_row,
                self._mapper.member(member_row),
                self._mapper.delivery(delivery_row, order_row.id),
                None,
            )
            for order_row, member_row, delivery_row in self._session.execute(stmt)
        ]

    def load_order_items(self, orders: list[Order]) -> None:
        pending = [o for o in orders if not o.items_loaded]
        size = self._batch_fetch_size
        for start in range(0, len(pending), size):
            batch = pending[start:start + size]
            stmt = (
                select(OrderItemRow, ItemRow)
                .join(ItemRow, OrderItemRow.item_id == ItemRow.id)
                .where(OrderItemRow.order_id.in_([o.id for o in batch]))
                .order_by(OrderItemRow.id)
            )
            by_order: dict[int, list[OrderItem]] = defaultdict(list)
            for order_item_row, item_row in self._session.execute(stmt):
                by_order[order_item_row.order_id].append(
                    self._mapper.order_item(order_item_row, self._mapper.item(item_row))
                )
            for order in batch:
                order.order_items = by_order.get(order.id, [])  # type: ignore[arg-type]
                order.items_loaded = True
        if pending:
            logger.debug(
                "Loaded order items for %d orders in %d batch(es)",
                len(pending), -(-len(pending) // size),
            )

    def find_all_with_item(
        self,
        search: OrderSearch,
        offset: int | None = None,
        limit: int | None = None,
    ) -> list[Order]:
        if offset is not None or limit is not None:
            raise UnsafePaginationError(
                "Orders fetched together with their order items cannot be paginated: "
                "the join repeats each order once per item. Use the to-one fetch "
                "join with batched item loading instead."
            )

        stmt = (
            select(OrderRow, MemberRow, DeliveryRow, OrderItemRow, ItemRow)
            .join(MemberRow, OrderRow.member_id == MemberRow.id)
            .join(DeliveryRow, OrderRow.delivery_id == DeliveryRow.id)
            .join(OrderItemRow, OrderItemRow.order_id == OrderRow.id)
            .join(ItemRow, OrderItemRow.item_id == ItemRow.id)
            .order_by(OrderRow.id, OrderItemRow.id)
        )
        rows = self._session.execute(filter_orders(stmt, search)).all()

        heads: dict[int, tuple[OrderRow, MemberRow, DeliveryRow]] = {}
        items: dict[int, list[OrderItem]] = defaultdict(list)
        for order_row, member_row, delivery_row, order_item_row, item_row in rows:
            heads.setdefault(order_row.id, (order_row, member_row, delivery_row))
            items[order_row.id].append(
                self._mapper.order_item(order_item_row, self._mapper.item(item_row))
            )
        logger.debug("Collection join returned %d rows for %d orders", len(rows), len(heads))

        return [
            self._mapper.order(
                order_row,
                self._mapper.member(member_row),
                self._mapper.delivery(delivery_row, order_row.id),
                items[order_id],
            )
            for order_id, (order_row, member_row, delivery_row) in heads.items()
        ]

    # --- Internal helpers -----------------------------------------------------

    def _select_order_items(self, order_id: int) -> list[OrderItem]:
        rows = self._session.scalars(
            select(OrderItemRow)
            .where(OrderItemRow.order_id == order_id)
            .order_by(OrderItemRow.id)
        ).all()
        return [
            self._mapper.order_item(row, self._mapper.item(self._session.get(ItemRow, row.item_id)))
            for row in rows
        ]

    def _insert(self, order: Order) -> None:
        if order.member.id is None:
            raise ValidationError("Save the member before placing orders for it")
        if any(order_item.item.id is None for order_item in order.order_items):
            raise ValidationError("Save the items before ordering them")

        delivery_row = DeliveryRow(
            status=order.delivery.status.value,
            **address_columns(order.delivery.address),
        )
        order_item_rows = [
            OrderItemRow(
                item_id=order_item.item.id,
                order_price=order_item.order_price,
                count=order_item.count,
            )
            for order_item in order.order_items
        ]
        row = OrderRow(
            member_id=order.member.id,
            delivery=delivery_row,
            order_date=order.order_date,
            status=order.status.value,
            order_items=order_item_rows,
        )
        self._session.add(row)
        self._session.flush()

        order.id = row.id
        order.delivery.id = delivery_row.id
        order.delivery.order_id = row.id
        for order_item, order_item_row in zip(order.order_items, order_item_rows):
            order_item.id = order_item_row.id
            order_item.order_id = row.id
        self._mapper.register_order(order)

    def _update(self, order: Order) -> None:
        """Only status fields change after placement."""
        row = self._session.get(OrderRow, order.id)
        if row is None:
            raise EntityNotFoundError(f"Order #{order.id} not found")
        delivery_row = self._session.get(DeliveryRow, row.delivery_id)

        row.status = order.status.value
        delivery_row.status = order.delivery.status.value  # type: ignore[union-attr]
        self._session.flush()
