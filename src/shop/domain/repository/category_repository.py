"""Abstract repository for Category."""

from __future__ import annotations

from abc import ABC, abstractmethod

from shop.domain.model.category import Category


class CategoryRepository(ABC):

    @abstractmethod
    def get_by_id(self, category_id: int) -> Category | None:
        """Return a category with its parent chain, children and items."""

    @abstractmethod
    def save(self, category: Category) -> None:
        """Persist a new or updated category and its item links."""
