"""Application service: Update Item use case.

The loaded item is changed through ``Item.change()`` and saved back,
rather than building a detached Item from the form and overwriting the
stored one: fields the form does not carry (the kind details) survive.
"""

from __future__ import annotations

import logging

from shop.application.unit_of_work import UnitOfWork
from shop.domain.exceptions import EntityNotFoundError
from shop.domain.model.item import Item

logger = logging.getLogger(__name__)


class UpdateItemHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(self, item_id: int, name: str, price: int, stock_quantity: int) -> Item:
        with self._uow:
            item = self._uow.items.get_by_id(item_id)
            if item is None:
                raise EntityNotFoundError(f"Item #{item_id} not found")
            item.change(name, price, stock_quantity)
            self._uow.items.save(item)
            self._uow.commit()

        logger.info("Item #%s updated", item_id)
        return item
