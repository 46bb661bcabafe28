"""Application service: item queries."""

from __future__ import annotations

from shop.application.unit_of_work import UnitOfWork
from shop.domain.model.item import Item


class ShowItemHandler:
    """Look up one item. Absent items come back as None."""

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(self, item_id: int) -> Item | None:
        with self._uow:
            return self._uow.items.get_by_id(item_id)


class ListItemsHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(self) -> list[Item]:
        with self._uow:
            return self._uow.items.list_all()
