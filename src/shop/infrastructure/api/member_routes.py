"""Member endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends, status

from shop.application.join_member import JoinMemberHandler
from shop.application.show_member import ListMembersHandler, ShowMemberHandler
from shop.application.unit_of_work import UnitOfWork
from shop.application.update_member import UpdateMemberHandler
from shop.domain.exceptions import EntityNotFoundError
from shop.infrastructure.api.dependencies import get_uow
from shop.infrastructure.api.schemas import (
    CreatedResponse,
    MemberCreate,
    MemberResponse,
    MemberUpdate,
)

router = APIRouter(prefix="/members", tags=["Members"])


@router.post("", response_model=CreatedResponse, status_code=status.HTTP_201_CREATED)
def join_member(body: MemberCreate, uow: UnitOfWork = Depends(get_uow)) -> CreatedResponse:
    member_id = JoinMemberHandler(uow).handle(
        body.name, city=body.city, street=body.street, zipcode=body.zipcode
    )
    return CreatedResponse(id=member_id)


@router.get("", response_model=list[MemberResponse])
def list_members(uow: UnitOfWork = Depends(get_uow)) -> list[MemberResponse]:
    return [MemberResponse.of(m) for m in ListMembersHandler(uow).handle()]


@router.get("/{member_id}", response_model=MemberResponse)
def get_member(member_id: int, uow: UnitOfWork = Depends(get_uow)) -> MemberResponse:
    member = ShowMemberHandler(uow).handle(member_id)
    if member is None:
        raise EntityNotFoundError(f"Member #{member_id} not found")
    return MemberResponse.of(member)


@router.patch("/{member_id}", response_model=MemberResponse)
def rename_member(
    member_id: int, body: MemberUpdate, uow: UnitOfWork = Depends(get_uow)
) -> MemberResponse:
    UpdateMemberHandler(uow).handle(member_id, body.name)
    return MemberResponse.of(ShowMemberHandler(uow).handle(member_id))  # type: ignore[arg-type]
