"""Item endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends, status

from shop.application.add_item import AddItemHandler
from shop.application.show_item import ListItemsHandler, ShowItemHandler
from shop.application.unit_of_work import UnitOfWork
from shop.application.update_item import UpdateItemHandler
from shop.domain.exceptions import EntityNotFoundError
from shop.infrastructure.api.dependencies import get_uow
from shop.infrastructure.api.schemas import ItemCreate, ItemResponse, ItemUpdate

router = APIRouter(prefix="/items", tags=["Items"])


@router.post("", response_model=ItemResponse, status_code=status.HTTP_201_CREATED)
def add_item(body: ItemCreate, uow: UnitOfWork = Depends(get_uow)) -> ItemResponse:
    item = AddItemHandler(uow).handle(
        body.name, body.price, body.stock_quantity, body.to_details()
    )
    return ItemResponse.of(item)


@router.get("", response_model=list[ItemResponse])
def list_items(uow: UnitOfWork = Depends(get_uow)) -> list[ItemResponse]:
    return [ItemResponse.of(i) for i in ListItemsHandler(uow).handle()]


@router.get("/{item_id}", response_model=ItemResponse)
def get_item(item_id: int, uow: UnitOfWork = Depends(get_uow)) -> ItemResponse:
    item = ShowItemHandler(uow).handle(item_id)
    if item is None:
        raise EntityNotFoundError(f"Item #{item_id} not found")
    return ItemResponse.of(item)


@router.patch("/{item_id}", response_model=ItemResponse)
def update_item(
    item_id: int, body: ItemUpdate, uow: UnitOfWork = Depends(get_uow)
) -> ItemResponse:
    item = UpdateItemHandler(uow).handle(item_id, body.name, body.price, body.stock_quantity)
    return ItemResponse.of(item)
