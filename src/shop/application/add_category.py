"""Application service: Add Category use case."""

from __future__ import annotations

import logging

from shop.application.unit_of_work import UnitOfWork
from shop.domain.exceptions import EntityNotFoundError
from shop.domain.model.category import Category

logger = logging.getLogger(__name__)


class AddCategoryHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(
        self,
        name: str,
        parent_id: int | None = None,
        item_ids: list[int] | None = None,
    ) -> int:
        """Create a category, optionally under *parent_id*, grouping *item_ids*."""
        with self._uow:
            parent = None
            if parent_id is not None:
                parent = self._uow.categories.get_by_id(parent_id)
                if parent is None:
                    raise EntityNotFoundError(f"Category #{parent_id} not found")

            category = Category.create(name, parent)
            for item_id in item_ids or []:
                item = self._uow.items.get_by_id(item_id)
                if item is None:
                    raise EntityNotFoundError(f"Item #{item_id} not found")
                category.add_item(item)

            self._uow.categories.save(category)
            self._uow.commit()

        logger.info("Category #%s '%s' added", category.id, category.name)
        return category.id  # type: ignore[return-value]


class ShowCategoryHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(self, category_id: int) -> Category | None:
        with self._uow:
            return self._uow.categories.get_by_id(category_id)
