"""Value Objects shared across the domain.

Value Objects are immutable and compared by value, not identity.
"""

from __future__ import annotations

from dataclasses import dataclass

from shop.domain.exceptions import ValidationError


@dataclass(frozen=True)
class Address:
    """Postal address embedded in members and deliveries.

    There are no setters: a changed address is a new Address.
    """

    city: str
    street: str
    zipcode: str

    def __str__(self) -> str:
        return f"{self.city}, {self.street} ({self.zipcode})"


@dataclass(frozen=True)
class Quantity:
    """A positive integer quantity.

    Enforces the invariant that you cannot order zero or negative items.
    """

    value: int

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise ValidationError(
                f"Quantity must be an integer, got {type(self.value).__name__}"
            )
        if self.value <= 0:
            raise ValidationError("Quantity must be positive")

    def __str__(self) -> str:
        return str(self.value)
