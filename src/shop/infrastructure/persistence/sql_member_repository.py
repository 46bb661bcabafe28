"""SQLAlchemy-backed implementation of MemberRepository."""

from __future__ import annotations

import logging

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from shop.domain.exceptions import DuplicateMemberError, EntityNotFoundError
from shop.domain.model.member import Member
from shop.domain.repository.member_repository import MemberRepository
from shop.infrastructure.persistence.entity_mapper import EntityMapper, address_columns
from shop.infrastructure.persistence.orm import MemberRow

logger = logging.getLogger(__name__)


class SqlMemberRepository(MemberRepository):

    def __init__(self, session: Session, mapper: EntityMapper) -> None:
        self._session = session
        self._mapper = mapper

    # --- MemberRepository interface -------------------------------------------

    def get_by_id(self, member_id: int) -> Member | None:
        known = self._mapper.known_member(member_id)
        if known is not None:
            return known
        row = self._session.get(MemberRow, member_id)
        return self._mapper.member(row) if row is not None else None

    def find_by_name(self, name: str) -> list[Member]:
        rows = self._session.scalars(select(MemberRow).where(MemberRow.name == name))
        return [self._mapper.member(row) for row in rows]

    def list_all(self) -> list[Member]:
        rows = self._session.scalars(select(MemberRow).order_by(MemberRow.id))
        return [self._mapper.member(row) for row in rows]

    def save(self, member: Member) -> None:
        if member.id is None:
            row = MemberRow()
            self._session.add(row)
        else:
            row = self._session.get(MemberRow, member.id)
            if row is None:
                raise EntityNotFoundError(f"Member #{member.id} not found")

        row.name = member.name
        for column, value in address_columns(member.address).items():
            setattr(row, column, value)

        try:
            self._session.flush()
        except IntegrityError as exc:
            logger.warning("Unique constraint rejected member name %r", member.name)
            raise DuplicateMemberError(f"Member '{member.name}' already exists") from exc

        member.id = row.id
        self._mapper.register_member(member)
