"""Member aggregate."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from shop.domain.exceptions import ValidationError
from shop.domain.model.value_objects import Address

if TYPE_CHECKING:
    from shop.domain.model.order import Order


@dataclass
class Member:
    """A registered customer.

    ``orders`` is a non-owning back reference. ``Order.create()`` appends
    to it so code in the same unit of work can see the new order, but it
    is never persisted, loaded or serialized. Query orders by member
    through the order repository instead.
    """

    id: int | None
    name: str
    address: Address | None = None
    orders: list[Order] = field(default_factory=list, repr=False, compare=False)

    @staticmethod
    def create(name: str, address: Address | None = None) -> Member:
        if not name or not name.strip():
            raise ValidationError("Member name is required")
        return Member(id=None, name=name.strip(), address=address)

    def rename(self, name: str) -> None:
        if not name or not name.strip():
            raise ValidationError("Member name is required")
        self.name = name.strip()
