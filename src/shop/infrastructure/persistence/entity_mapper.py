"""Row -> domain translation with one domain object per row identity.

One EntityMapper lives for one unit of work and is shared by all of its
repositories. Loading the same row twice hands back the same domain
object, so a change made through one repository (say, stock taken by an
order) is seen by every other read in the same transaction, and saving
one object never overwrites another copy's changes.
"""

from __future__ import annotations

from shop.domain.model.category import Category
from shop.domain.model.delivery import Delivery, DeliveryStatus
from shop.domain.model.item import (
    AlbumDetails,
    BookDetails,
    Item,
    ItemDetails,
    ItemKind,
    MovieDetails,
)
from shop.domain.model.member import Member
from shop.domain.model.order import Order, OrderItem, OrderStatus
from shop.domain.model.value_objects import Address
from shop.infrastructure.persistence.orm import (
    CategoryRow,
    DeliveryRow,
    ItemRow,
    MemberRow,
    OrderItemRow,
    OrderRow,
)


class EntityMapper:

    def __init__(self) -> None:
        self._members: dict[int, Member] = {}
        self._items: dict[int, Item] = {}
        self._categories: dict[int, Category] = {}
        self._deliveries: dict[int, Delivery] = {}
        self._orders: dict[int, Order] = {}
        self._order_items: dict[int, OrderItem] = {}

    # --- Lookup of already-mapped objects -------------------------------------

    def known_member(self, member_id: int) -> Member | None:
        return self._members.get(member_id)

    def known_item(self, item_id: int) -> Item | None:
        return self._items.get(item_id)

    def known_category(self, category_id: int) -> Category | None:
        return self._categories.get(category_id)

    def known_order(self, order_id: int) -> Order | None:
        return self._orders.get(order_id)

    # --- Registration of newly saved objects ----------------------------------

    def register_member(self, member: Member) -> None:
        self._members[member.id] = member  # type: ignore[index]

    def register_item(self, item: Item) -> None:
        self._items[item.id] = item  # type: ignore[index]

    def register_category(self, category: Category) -> None:
        self._categories[category.id] = category  # type: ignore[index]

    def register_order(self, order: Order) -> None:
        self._orders[order.id] = order  # type: ignore[index]
        self._deliveries[order.delivery.id] = order.delivery  # type: ignore[index]
        for order_item in order.order_items:
            self._order_items[order_item.id] = order_item  # type: ignore[index]

    # --- Rows -> domain -------------------------------------------------------

    def member(self, row: MemberRow) -> Member:
        known = self._members.get(row.id)
        if known is not None:
            return known
        member = Member(
            id=row.id,
            name=row.name,
            address=address_from_columns(row.city, row.street, row.zipcode),
        )
        self._members[row.id] = member
        return member

    def item(self, row: ItemRow) -> Item:
        known = self._items.get(row.id)
        if known is not None:
            return known
        item = Item(
            id=row.id,
            name=row.name,
            price=row.price,
            stock_quantity=row.stock_quantity,
            details=_details(row),
        )
        self._items[row.id] = item
        return item

    def category(self, row: CategoryRow) -> Category:
        known = self._categories.get(row.id)
        if known is not None:
            return known
        category = Category(id=row.id, name=row.name)
        self._categories[row.id] = category
        return category

    def delivery(self, row: DeliveryRow, order_id: int | None = None) -> Delivery:
        known = self._deliveries.get(row.id)
        if known is not None:
            return known
        delivery = Delivery(
            id=row.id,
            address=address_from_columns(row.city, row.street, row.zipcode),
            status=DeliveryStatus(row.status),
            order_id=order_id,
        )
        self._deliveries[row.id] = delivery
        return delivery

    def order_item(self, row: OrderItemRow, item: Item) -> OrderItem:
        known = self._order_items.get(row.id)
        if known is not None:
            return known
        order_item = OrderItem(
            id=row.id,
            item=item,
            order_price=row.order_price,
            count=row.count,
            order_id=row.order_id,
        )
        self._order_items[row.id] = order_item
        return order_item

    def order(
        self,
        row: OrderRow,
        member: Member,
        delivery: Delivery,
        order_items: list[OrderItem] | None,
    ) -> Order:
        """Map an order row; ``order_items=None`` marks the collection unloaded.

        An order mapped earlier without its items picks them up when a
        later read supplies them.
        """
        known = self._orders.get(row.id)
        if known is not None:
            if order_items is not None and not known.items_loaded:
                known.order_items = order_items
                known.items_loaded = True
            return known
        order = Order(
            id=row.id,
            member=member,
            delivery=delivery,
            order_items=order_items if order_items is not None else [],
            order_date=row.order_date,
            status=OrderStatus(row.status),
            items_loaded=order_items is not None,
        )
        self._orders[row.id] = order
        return order


# --- Column helpers (shared with the repositories) -----------------------------


def address_from_columns(city: str | None, street: str | None, zipcode: str | None) -> Address | None:
    if city is None and street is None and zipcode is None:
        return None
    return Address(city=city or "", street=street or "", zipcode=zipcode or "")


def _details(row: ItemRow) -> ItemDetails:
    kind = ItemKind(row.dtype)
    if kind == ItemKind.BOOK:
        return BookDetails(author=row.author, isbn=row.isbn)
    if kind == ItemKind.ALBUM:
        return AlbumDetails(artist=row.artist, etc=row.etc)
    return MovieDetails(director=row.director, actor=row.actor)


def address_columns(address: Address | None) -> dict[str, str | None]:
    if address is None:
        return {"city": None, "street": None, "zipcode": None}
    return {"city": address.city, "street": address.street, "zipcode": address.zipcode}


def item_columns(item: Item) -> dict[str, object]:
    """Column values for *item*; other kinds' variant columns are nulled."""
    columns: dict[str, object] = {
        "dtype": item.kind.value,
        "name": item.name,
        "price": item.price,
        "stock_quantity": item.stock_quantity,
        "author": None,
        "isbn": None,
        "artist": None,
        "etc": None,
        "director": None,
        "actor": None,
    }
    details = item.details
    if isinstance(details, BookDetails):
        columns.update(author=details.author, isbn=details.isbn)
    elif isinstance(details, AlbumDetails):
        columns.update(artist=details.artist, etc=details.etc)
    else:
        columns.update(director=details.director, actor=details.actor)
    return columns
