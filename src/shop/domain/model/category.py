"""Category tree.

Categories nest through ``parent`` / ``children`` and group items. The
category side owns the many-to-many link to items.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from shop.domain.exceptions import ValidationError
from shop.domain.model.item import Item


@dataclass
class Category:
    id: int | None
    name: str
    parent: Category | None = field(default=None, repr=False, compare=False)
    children: list[Category] = field(default_factory=list, repr=False, compare=False)
    items: list[Item] = field(default_factory=list, repr=False, compare=False)

    @staticmethod
    def create(name: str, parent: Category | None = None) -> Category:
        if not name or not name.strip():
            raise ValidationError("Category name is required")
        category = Category(id=None, name=name.strip())
        if parent is not None:
            parent.add_child_category(category)
        return category

    def add_child_category(self, child: Category) -> None:
        if child is self or any(node is child for node in self.ancestors()):
            raise ValidationError(
                f"Category '{child.name}' cannot be nested under itself"
            )
        self.children.append(child)
        child.parent = self

    def add_item(self, item: Item) -> None:
        if any(existing is item for existing in self.items):
            return
        self.items.append(item)

    def ancestors(self) -> list[Category]:
        """Parents from the nearest up to the root."""
        chain: list[Category] = []
        node = self.parent
        while node is not None:
            chain.append(node)
            node = node.parent
        return chain
