"""Order listing endpoints without order items (member and delivery only)."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from shop.application.search_simple_orders import (
    SearchSimpleOrdersHandler,
    SimpleOrderQueryStrategy,
)
from shop.application.unit_of_work import UnitOfWork
from shop.domain.repository.order_repository import OrderSearch
from shop.infrastructure.api.dependencies import get_uow, order_search
from shop.infrastructure.api.schemas import SimpleOrderEntityResponse, SimpleOrderResponse

router = APIRouter(prefix="/api", tags=["Simple order queries"])


@router.get("/v1/simple-orders", response_model=list[SimpleOrderEntityResponse])
def simple_orders_v1(
    search: OrderSearch = Depends(order_search), uow: UnitOfWork = Depends(get_uow)
) -> list[SimpleOrderEntityResponse]:
    orders = SearchSimpleOrdersHandler(uow).entities(search)
    return [SimpleOrderEntityResponse.of(o) for o in orders]


@router.get("/v2/simple-orders", response_model=list[SimpleOrderResponse])
def simple_orders_v2(
    search: OrderSearch = Depends(order_search), uow: UnitOfWork = Depends(get_uow)
) -> list[SimpleOrderResponse]:
    dtos = SearchSimpleOrdersHandler(uow).handle(SimpleOrderQueryStrategy.ENTITY_TO_DTO, search)
    return [SimpleOrderResponse.of(d) for d in dtos]


@router.get("/v3/simple-orders", response_model=list[SimpleOrderResponse])
def simple_orders_v3(
    search: OrderSearch = Depends(order_search), uow: UnitOfWork = Depends(get_uow)
) -> list[SimpleOrderResponse]:
    dtos = SearchSimpleOrdersHandler(uow).handle(SimpleOrderQueryStrategy.TO_ONE_FETCH_JOIN, search)
    return [SimpleOrderResponse.of(d) for d in dtos]


@router.get("/v4/simple-orders", response_model=list[SimpleOrderResponse])
def simple_orders_v4(
    search: OrderSearch = Depends(order_search), uow: UnitOfWork = Depends(get_uow)
) -> list[SimpleOrderResponse]:
    dtos = SearchSimpleOrdersHandler(uow).handle(SimpleOrderQueryStrategy.DTO, search)
    return [SimpleOrderResponse.of(d) for d in dtos]
