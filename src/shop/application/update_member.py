"""Application service: Update Member use case."""

from __future__ import annotations

import logging

from shop.application.unit_of_work import UnitOfWork
from shop.domain.exceptions import DuplicateMemberError, EntityNotFoundError

logger = logging.getLogger(__name__)


class UpdateMemberHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(self, member_id: int, name: str) -> None:
        with self._uow:
            member = self._uow.members.get_by_id(member_id)
            if member is None:
                raise EntityNotFoundError(f"Member #{member_id} not found")

            old_name = member.name
            member.rename(name)
            if any(m.id != member_id for m in self._uow.members.find_by_name(member.name)):
                logger.warning("Rejected rename of member #%s to taken name %r", member_id, member.name)
                raise DuplicateMemberError(f"Member '{member.name}' already exists")

            self._uow.members.save(member)
            self._uow.commit()

        logger.info("Member #%s renamed from '%s' to '%s'", member_id, old_name, member.name)
