"""Application service: Add Item use case."""

from __future__ import annotations

import logging

from shop.application.unit_of_work import UnitOfWork
from shop.domain.model.item import Item, ItemDetails

logger = logging.getLogger(__name__)


class AddItemHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(self, name: str, price: int, stock_quantity: int, details: ItemDetails) -> Item:
        """Add a book, album or movie to the catalog."""
        item = Item.create(name, price, stock_quantity, details)
        with self._uow:
            self._uow.items.save(item)
            self._uow.commit()

        logger.info("Item #%s '%s' (%s) added", item.id, item.name, item.kind.name)
        return item
