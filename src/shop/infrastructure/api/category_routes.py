"""Category endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends, status

from shop.application.add_category import AddCategoryHandler, ShowCategoryHandler
from shop.application.unit_of_work import UnitOfWork
from shop.domain.exceptions import EntityNotFoundError
from shop.infrastructure.api.dependencies import get_uow
from shop.infrastructure.api.schemas import CategoryCreate, CategoryResponse, CreatedResponse

router = APIRouter(prefix="/categories", tags=["Categories"])


@router.post("", response_model=CreatedResponse, status_code=status.HTTP_201_CREATED)
def add_category(body: CategoryCreate, uow: UnitOfWork = Depends(get_uow)) -> CreatedResponse:
    category_id = AddCategoryHandler(uow).handle(
        body.name, parent_id=body.parent_id, item_ids=body.item_ids
    )
    return CreatedResponse(id=category_id)


@router.get("/{category_id}", response_model=CategoryResponse)
def get_category(category_id: int, uow: UnitOfWork = Depends(get_uow)) -> CategoryResponse:
    category = ShowCategoryHandler(uow).handle(category_id)
    if category is None:
        raise EntityNotFoundError(f"Category #{category_id} not found")
    return CategoryResponse.of(category)
