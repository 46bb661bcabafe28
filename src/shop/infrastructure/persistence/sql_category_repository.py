"""SQLAlchemy-backed implementation of CategoryRepository."""

from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.orm import Session

from shop.domain.exceptions import EntityNotFoundError, ValidationError
from shop.domain.model.category import Category
from shop.domain.repository.category_repository import CategoryRepository
from shop.infrastructure.persistence.entity_mapper import EntityMapper
from shop.infrastructure.persistence.orm import CategoryRow, ItemRow, category_item


class SqlCategoryRepository(CategoryRepository):

    def __init__(self, session: Session, mapper: EntityMapper) -> None:
        self._session = session
        self._mapper = mapper

    def get_by_id(self, category_id: int) -> Category | None:
        """Load the category, its ancestors, direct children and items.

        Ancestors and children come back without their own children or
        items.
        """
        known = self._mapper.known_category(category_id)
        if known is not None:
            return known
        row = self._session.get(CategoryRow, category_id)
        if row is None:
            return None
        category = self._mapper.category(row)

        child, parent_id = category, row.parent_id
        while parent_id is not None:
            parent_row = self._session.get(CategoryRow, parent_id)
            if parent_row is None:
                break
            parent = self._mapper.category(parent_row)
            child.parent = parent
            if not any(c is child for c in parent.children):
                parent.children.append(child)
            child, parent_id = parent, parent_row.parent_id

        child_rows = self._session.scalars(
            select(CategoryRow)
            .where(CategoryRow.parent_id == category_id)
            .order_by(CategoryRow.id)
        )
        for child_row in child_rows:
            sub = self._mapper.category(child_row)
            sub.parent = category
            if not any(c is sub for c in category.children):
                category.children.append(sub)

        item_rows = self._session.scalars(
            select(ItemRow)
            .join(category_item, category_item.c.item_id == ItemRow.id)
            .where(category_item.c.category_id == category_id)
            .order_by(ItemRow.id)
        )
        category.items = [self._mapper.item(item_row) for item_row in item_rows]
        return category

    def save(self, category: Category) -> None:
        if category.parent is not None and category.parent.id is None:
            raise ValidationError("Save the parent category first")
        if any(item.id is None for item in category.items):
            raise ValidationError("Save the items before linking them to a category")

        if category.id is None:
            row = CategoryRow()
            self._session.add(row)
        else:
            row = self._session.get(CategoryRow, category.id)
            if row is None:
                raise EntityNotFoundError(f"Category #{category.id} not found")
            # The link set is replaced wholesale below.
            self._session.execute(
                category_item.delete().where(category_item.c.category_id == category.id)
            )

        row.name = category.name
        row.parent_id = category.parent.id if category.parent is not None else None
        self._session.flush()

        if category.items:
            self._session.execute(
                category_item.insert(),
                [{"category_id": row.id, "item_id": item.id} for item in category.items],
            )

        category.id = row.id
        self._mapper.register_category(category)
