"""Order lifecycle endpoints: place, show, cancel, complete delivery."""

from __future__ import annotations

from fastapi import APIRouter, Depends, status

from shop.application.cancel_order import CancelOrderHandler
from shop.application.complete_delivery import CompleteDeliveryHandler
from shop.application.dto import OrderItemSpec
from shop.application.place_order import PlaceOrderHandler
from shop.application.show_order import ShowOrderHandler
from shop.application.unit_of_work import UnitOfWork
from shop.infrastructure.api.dependencies import get_uow
from shop.infrastructure.api.schemas import OrderCreate, OrderSummaryResponse

router = APIRouter(prefix="/orders", tags=["Orders"])


@router.post("", response_model=OrderSummaryResponse, status_code=status.HTTP_201_CREATED)
def place_order(body: OrderCreate, uow: UnitOfWork = Depends(get_uow)) -> OrderSummaryResponse:
    specs = [OrderItemSpec(item_id=line.item_id, count=line.count) for line in body.items]
    order_id = PlaceOrderHandler(uow).handle(body.member_id, specs)
    return OrderSummaryResponse.of(ShowOrderHandler(uow).handle(order_id))


@router.get("/{order_id}", response_model=OrderSummaryResponse)
def get_order(order_id: int, uow: UnitOfWork = Depends(get_uow)) -> OrderSummaryResponse:
    return OrderSummaryResponse.of(ShowOrderHandler(uow).handle(order_id))


@router.post("/{order_id}/cancel", response_model=OrderSummaryResponse)
def cancel_order(order_id: int, uow: UnitOfWork = Depends(get_uow)) -> OrderSummaryResponse:
    CancelOrderHandler(uow).handle(order_id)
    return OrderSummaryResponse.of(ShowOrderHandler(uow).handle(order_id))


@router.post("/{order_id}/delivery/complete", response_model=OrderSummaryResponse)
def complete_delivery(order_id: int, uow: UnitOfWork = Depends(get_uow)) -> OrderSummaryResponse:
    CompleteDeliveryHandler(uow).handle(order_id)
    return OrderSummaryResponse.of(ShowOrderHandler(uow).handle(order_id))
