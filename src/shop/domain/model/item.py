"""Item aggregate: everything the shop sells.

Books, albums and movies share one record shape. The variant is carried
as a tagged union: ``kind`` is the discriminant and ``details`` holds the
kind-specific attributes. There is no subclass per kind.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Union

from shop.domain.exceptions import NotEnoughStockError, ValidationError


class ItemKind(Enum):
    BOOK = "B"
    ALBUM = "A"
    MOVIE = "M"


@dataclass(frozen=True)
class BookDetails:
    author: str | None = None
    isbn: str | None = None


@dataclass(frozen=True)
class AlbumDetails:
    artist: str | None = None
    etc: str | None = None


@dataclass(frozen=True)
class MovieDetails:
    director: str | None = None
    actor: str | None = None


ItemDetails = Union[BookDetails, AlbumDetails, MovieDetails]

_KIND_OF_DETAILS: dict[type, ItemKind] = {
    BookDetails: ItemKind.BOOK,
    AlbumDetails: ItemKind.ALBUM,
    MovieDetails: ItemKind.MOVIE,
}


@dataclass
class Item:
    """Aggregate root for a sellable item.

    Invariant: ``stock_quantity`` is never negative. Stock only goes down
    through ``remove_stock()``, which refuses to overdraw.
    """

    id: int | None
    name: str
    price: int
    stock_quantity: int
    details: ItemDetails

    # --- Factory --------------------------------------------------------------

    @staticmethod
    def create(name: str, price: int, stock_quantity: int, details: ItemDetails) -> Item:
        """Create a new item, enforcing all invariants."""
        if not name or not name.strip():
            raise ValidationError("Item name is required")
        if type(details) not in _KIND_OF_DETAILS:
            raise ValidationError(f"Unknown item details {type(details).__name__}")
        _check_price(price)
        _check_stock(stock_quantity)
        return Item(
            id=None,
            name=name.strip(),
            price=price,
            stock_quantity=stock_quantity,
            details=details,
        )

    @property
    def kind(self) -> ItemKind:
        return _KIND_OF_DETAILS[type(self.details)]

    # --- Stock ----------------------------------------------------------------

    def add_stock(self, quantity: int) -> None:
        if quantity <= 0:
            raise ValidationError("Stock quantity to add must be positive")
        self.stock_quantity += quantity

    def remove_stock(self, quantity: int) -> None:
        """Take *quantity* units out of stock.

        Raises NotEnoughStockError (and leaves the stock untouched) when
        fewer than *quantity* units are available.
        """
        if quantity <= 0:
            raise ValidationError("Stock quantity to remove must be positive")
        rest = self.stock_quantity - quantity
        if rest < 0:
            raise NotEnoughStockError(
                f"Not enough stock for {self.name} "
                f"(need {quantity}, have {self.stock_quantity})"
            )
        self.stock_quantity = rest

    # --- Editing --------------------------------------------------------------

    def change(self, name: str, price: int, stock_quantity: int) -> None:
        """Apply an edit from the item form in one step."""
        if not name or not name.strip():
            raise ValidationError("Item name is required")
        _check_price(price)
        _check_stock(stock_quantity)
        self.name = name.strip()
        self.price = price
        self.stock_quantity = stock_quantity


def _check_price(price: int) -> None:
    if price < 0:
        raise ValidationError(f"Item price cannot be negative, got {price}")


def _check_stock(stock_quantity: int) -> None:
    if stock_quantity < 0:
        raise ValidationError(
            f"Stock quantity cannot be negative, got {stock_quantity}"
        )
