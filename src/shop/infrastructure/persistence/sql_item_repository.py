"""SQLAlchemy-backed implementation of ItemRepository."""

from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.orm import Session

from shop.domain.exceptions import EntityNotFoundError
from shop.domain.model.item import Item
from shop.domain.repository.item_repository import ItemRepository
from shop.infrastructure.persistence.entity_mapper import EntityMapper, item_columns
from shop.infrastructure.persistence.orm import ItemRow


class SqlItemRepository(ItemRepository):

    def __init__(self, session: Session, mapper: EntityMapper) -> None:
        self._session = session
        self._mapper = mapper

    def get_by_id(self, item_id: int) -> Item | None:
        known = self._mapper.known_item(item_id)
        if known is not None:
            return known
        row = self._session.get(ItemRow, item_id)
        return self._mapper.item(row) if row is not None else None

    def list_all(self) -> list[Item]:
        rows = self._session.scalars(select(ItemRow).order_by(ItemRow.id))
        return [self._mapper.item(row) for row in rows]

    def save(self, item: Item) -> None:
        """Insert a new item, or copy every field onto the stored row."""
        if item.id is None:
            row = ItemRow()
            self._session.add(row)
        else:
            row = self._session.get(ItemRow, item.id)
            if row is None:
                raise EntityNotFoundError(f"Item #{item.id} not found")

        for column, value in item_columns(item).items():
            setattr(row, column, value)
        self._session.flush()

        item.id = row.id
        self._mapper.register_item(item)
