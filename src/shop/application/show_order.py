"""Application service: Show Order use case (query)."""

from __future__ import annotations

from shop.application.dto import OrderItemDTO, OrderSummaryDTO
from shop.application.unit_of_work import UnitOfWork
from shop.domain.exceptions import EntityNotFoundError
from shop.domain.model.order import Order


class ShowOrderHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(self, order_id: int) -> OrderSummaryDTO:
        with self._uow:
            order = self._uow.orders.get_by_id(order_id)
            if order is None:
                raise EntityNotFoundError(f"Order #{order_id} not found")
            return self._to_dto(order)

    @staticmethod
    def _to_dto(order: Order) -> OrderSummaryDTO:
        return OrderSummaryDTO(
            order_id=order.id,  # type: ignore[arg-type]
            member_name=order.member.name,
            order_status=order.status,
            delivery_status=order.delivery.status.value,
            order_items=[
                OrderItemDTO(
                    item_name=order_item.item.name,
                    order_price=order_item.order_price,
                    count=order_item.count,
                )
                for order_item in order.order_items
            ],
            total_price=order.total_price,
            order_date=order.order_date,
        )
