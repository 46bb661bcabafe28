"""Application service: Join (register) Member use case."""

from __future__ import annotations

import logging

from shop.application.unit_of_work import UnitOfWork
from shop.domain.exceptions import DuplicateMemberError
from shop.domain.model.member import Member
from shop.domain.model.value_objects import Address

logger = logging.getLogger(__name__)


class JoinMemberHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(
        self,
        name: str,
        city: str | None = None,
        street: str | None = None,
        zipcode: str | None = None,
    ) -> int:
        """Register a member and return the new member ID.

        The name check below gives a friendly error in the common case.
        Two concurrent registrations can both pass it; the unique
        constraint on the member name then rejects the second one at
        flush time, surfacing as the same DuplicateMemberError.
        """
        address = None
        if city or street or zipcode:
            address = Address(city=city or "", street=street or "", zipcode=zipcode or "")
        member = Member.create(name, address)

        with self._uow:
            if self._uow.members.find_by_name(member.name):
                logger.warning("Rejected duplicate member name %r", member.name)
                raise DuplicateMemberError(f"Member '{member.name}' already exists")
            self._uow.members.save(member)
            self._uow.commit()

        logger.info("Member #%s '%s' joined", member.id, member.name)
        return member.id  # type: ignore[return-value]
