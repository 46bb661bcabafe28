"""Data Transfer Objects: plain containers that cross layer boundaries.

DTOs carry data between the HTTP/CLI and application layers without
exposing domain internals (or their back references) to the outside.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from shop.domain.model.order import OrderStatus
from shop.domain.model.value_objects import Address


@dataclass(frozen=True)
class OrderItemSpec:
    """Input: what the member asked for (item ID + count)."""

    item_id: int
    count: int


@dataclass(frozen=True)
class OrderItemDTO:
    """Output: one ordered item."""

    item_name: str
    order_price: int
    count: int


@dataclass(frozen=True)
class OrderDTO:
    """Output: an order with its member, delivery address and items."""

    order_id: int
    member_name: str
    order_date: datetime
    order_status: OrderStatus
    address: Address | None
    order_items: list[OrderItemDTO]


@dataclass(frozen=True)
class SimpleOrderDTO:
    """Output: an order with its to-one associations only."""

    order_id: int
    member_name: str
    order_date: datetime
    order_status: OrderStatus
    address: Address | None


@dataclass(frozen=True)
class OrderFlatDTO:
    """One row of the flattened order/item join.

    An order with three items yields three rows repeating the order
    columns; callers group them back with ``group_flat_rows()``.
    """

    order_id: int
    member_name: str
    order_date: datetime
    order_status: OrderStatus
    address: Address | None
    item_name: str
    order_price: int
    count: int


@dataclass(frozen=True)
class OrderSummaryDTO:
    """Output: an order as shown after placing or inspecting it."""

    order_id: int
    member_name: str
    order_status: OrderStatus
    delivery_status: str
    order_items: list[OrderItemDTO]
    total_price: int
    order_date: datetime


def group_flat_rows(rows: list[OrderFlatDTO]) -> list[OrderDTO]:
    """Fold flattened rows back into one OrderDTO per order.

    Orders keep the order of their first row; items keep row order.
    """
    grouped: dict[int, tuple[OrderFlatDTO, list[OrderItemDTO]]] = {}
    for row in rows:
        if row.order_id not in grouped:
            grouped[row.order_id] = (row, [])
        grouped[row.order_id][1].append(
            OrderItemDTO(item_name=row.item_name, order_price=row.order_price, count=row.count)
        )
    return [
        OrderDTO(
            order_id=head.order_id,
            member_name=head.member_name,
            order_date=head.order_date,
            order_status=head.order_status,
            address=head.address,
            order_items=items,
        )
        for head, items in grouped.values()
    ]
