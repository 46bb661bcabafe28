"""Application service: member queries."""

from __future__ import annotations

from shop.application.unit_of_work import UnitOfWork
from shop.domain.model.member import Member


class ShowMemberHandler:
    """Look up one member. Absent members come back as None."""

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(self, member_id: int) -> Member | None:
        with self._uow:
            return self._uow.members.get_by_id(member_id)


class ListMembersHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(self) -> list[Member]:
        with self._uow:
            return self._uow.members.list_all()
