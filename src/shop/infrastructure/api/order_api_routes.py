"""Order listing endpoints, one per read strategy.

    /api/v1/orders    entity graph
    /api/v2/orders    entity graph -> DTO
    /api/v3/orders    collection fetch join (refuses offset/limit)
    /api/v3.1/orders  to-one fetch join + batched items, paginated
    /api/v4/orders    direct DTO, one item query per order
    /api/v5/orders    direct DTO, one keyed item query
    /api/v6/orders    direct DTO, flattened join
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, Query

from shop.application.search_orders import OrderQueryStrategy, SearchOrdersHandler
from shop.application.unit_of_work import UnitOfWork
from shop.domain.repository.order_repository import OrderSearch
from shop.infrastructure.api.dependencies import get_uow, order_search
from shop.infrastructure.api.schemas import OrderEntityResponse, OrderResponse

router = APIRouter(prefix="/api", tags=["Order queries"])


def _list(
    uow: UnitOfWork,
    strategy: OrderQueryStrategy,
    search: OrderSearch,
    offset: int | None = None,
    limit: int | None = None,
) -> list[OrderResponse]:
    dtos = SearchOrdersHandler(uow).handle(strategy, search, offset=offset, limit=limit)
    return [OrderResponse.of(dto) for dto in dtos]


@router.get("/v1/orders", response_model=list[OrderEntityResponse])
def orders_v1(
    search: OrderSearch = Depends(order_search), uow: UnitOfWork = Depends(get_uow)
) -> list[OrderEntityResponse]:
    return [OrderEntityResponse.of(o) for o in SearchOrdersHandler(uow).entities(search)]


@router.get("/v2/orders", response_model=list[OrderResponse])
def orders_v2(
    search: OrderSearch = Depends(order_search), uow: UnitOfWork = Depends(get_uow)
) -> list[OrderResponse]:
    return _list(uow, OrderQueryStrategy.ENTITY_TO_DTO, search)


@router.get("/v3/orders", response_model=list[OrderResponse])
def orders_v3(
    offset: int | None = Query(None),
    limit: int | None = Query(None),
    search: OrderSearch = Depends(order_search),
    uow: UnitOfWork = Depends(get_uow),
) -> list[OrderResponse]:
    return _list(uow, OrderQueryStrategy.FETCH_JOIN, search, offset, limit)


@router.get("/v3.1/orders", response_model=list[OrderResponse])
def orders_v3_page(
    offset: int = Query(0, ge=0),
    limit: int = Query(100, ge=1),
    search: OrderSearch = Depends(order_search),
    uow: UnitOfWork = Depends(get_uow),
) -> list[OrderResponse]:
    return _list(uow, OrderQueryStrategy.FETCH_JOIN_PAGED, search, offset, limit)


@router.get("/v4/orders", response_model=list[OrderResponse])
def orders_v4(
    search: OrderSearch = Depends(order_search), uow: UnitOfWork = Depends(get_uow)
) -> list[OrderResponse]:
    return _list(uow, OrderQueryStrategy.DTO, search)


@router.get("/v5/orders", response_model=list[OrderResponse])
def orders_v5(
    search: OrderSearch = Depends(order_search), uow: UnitOfWork = Depends(get_uow)
) -> list[OrderResponse]:
    return _list(uow, OrderQueryStrategy.DTO_BATCHED, search)


@router.get("/v6/orders", response_model=list[OrderResponse])
def orders_v6(
    search: OrderSearch = Depends(order_search), uow: UnitOfWork = Depends(get_uow)
) -> list[OrderResponse]:
    return _list(uow, OrderQueryStrategy.DTO_FLAT, search)
