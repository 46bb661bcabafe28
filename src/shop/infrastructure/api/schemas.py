"""Request and response schemas for the HTTP API.

Response models are built from domain objects or DTOs with ``of()``.
Entity responses stop at the aggregate boundary: a member never lists
its orders, so the raw entity graph serializes without cycles.
"""

from __future__ import annotations

from dataclasses import asdict
from datetime import datetime
from typing import Literal

from pydantic import BaseModel, Field

from shop.application.dto import (
    OrderDTO,
    OrderItemDTO,
    OrderSummaryDTO,
    SimpleOrderDTO,
)
from shop.domain.model.category import Category
from shop.domain.model.delivery import Delivery
from shop.domain.model.item import (
    AlbumDetails,
    BookDetails,
    Item,
    ItemDetails,
    MovieDetails,
)
from shop.domain.model.member import Member
from shop.domain.model.order import Order, OrderItem
from shop.domain.model.value_objects import Address

# ============================================================
# REQUESTS
# ============================================================


class MemberCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=100, description="Unique member name")
    city: str | None = None
    street: str | None = None
    zipcode: str | None = None


class MemberUpdate(BaseModel):
    name: str = Field(..., min_length=1, max_length=100)


class ItemCreate(BaseModel):
    """A book, album or movie; only the fields of *kind* are kept."""

    kind: Literal["BOOK", "ALBUM", "MOVIE"] = "BOOK"
    name: str = Field(..., min_length=1, max_length=200)
    price: int = Field(..., ge=0)
    stock_quantity: int = Field(..., ge=0)
    author: str | None = None
    isbn: str | None = None
    artist: str | None = None
    etc: str | None = None
    director: str | None = None
    actor: str | None = None

    def to_details(self) -> ItemDetails:
        if self.kind == "BOOK":
            return BookDetails(author=self.author, isbn=self.isbn)
        if self.kind == "ALBUM":
            return AlbumDetails(artist=self.artist, etc=self.etc)
        return MovieDetails(director=self.director, actor=self.actor)


class ItemUpdate(BaseModel):
    name: str = Field(..., min_length=1, max_length=200)
    price: int = Field(..., ge=0)
    stock_quantity: int = Field(..., ge=0)


class CategoryCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=100)
    parent_id: int | None = None
    item_ids: list[int] = Field(default_factory=list)


class OrderLineRequest(BaseModel):
    item_id: int
    count: int = Field(..., ge=1)


class OrderCreate(BaseModel):
    member_id: int
    items: list[OrderLineRequest] = Field(..., min_length=1)


class CreatedResponse(BaseModel):
    id: int


# ============================================================
# ENTITY RESPONSES
# ============================================================


class AddressResponse(BaseModel):
    city: str
    street: str
    zipcode: str

    @classmethod
    def of(cls, address: Address | None) -> AddressResponse | None:
        if address is None:
            return None
        return cls(city=address.city, street=address.street, zipcode=address.zipcode)


class MemberResponse(BaseModel):
    id: int
    name: str
    address: AddressResponse | None

    @classmethod
    def of(cls, member: Member) -> MemberResponse:
        return cls(id=member.id, name=member.name, address=AddressResponse.of(member.address))


class ItemResponse(BaseModel):
    id: int
    kind: str
    name: str
    price: int
    stock_quantity: int
    details: dict[str, str | None]

    @classmethod
    def of(cls, item: Item) -> ItemResponse:
        return cls(
            id=item.id,
            kind=item.kind.name,
            name=item.name,
            price=item.price,
            stock_quantity=item.stock_quantity,
            details=asdict(item.details),
        )


class CategoryResponse(BaseModel):
    id: int
    name: str
    parent_id: int | None
    child_ids: list[int]
    items: list[ItemResponse]

    @classmethod
    def of(cls, category: Category) -> CategoryResponse:
        return cls(
            id=category.id,
            name=category.name,
            parent_id=category.parent.id if category.parent is not None else None,
            child_ids=[child.id for child in category.children],
            items=[ItemResponse.of(item) for item in category.items],
        )


class DeliveryResponse(BaseModel):
    id: int
    address: AddressResponse | None
    status: str

    @classmethod
    def of(cls, delivery: Delivery) -> DeliveryResponse:
        return cls(
            id=delivery.id,
            address=AddressResponse.of(delivery.address),
            status=delivery.status.value,
        )


class OrderItemEntityResponse(BaseModel):
    id: int
    item: ItemResponse
    order_price: int
    count: int
    total_price: int

    @classmethod
    def of(cls, order_item: OrderItem) -> OrderItemEntityResponse:
        return cls(
            id=order_item.id,
            item=ItemResponse.of(order_item.item),
            order_price=order_item.order_price,
            count=order_item.count,
            total_price=order_item.total_price,
        )


class SimpleOrderEntityResponse(BaseModel):
    id: int
    member: MemberResponse
    delivery: DeliveryResponse
    order_date: datetime
    status: str

    @classmethod
    def of(cls, order: Order) -> SimpleOrderEntityResponse:
        return cls(
            id=order.id,
            member=MemberResponse.of(order.member),
            delivery=DeliveryResponse.of(order.delivery),
            order_date=order.order_date,
            status=order.status.value,
        )


class OrderEntityResponse(SimpleOrderEntityResponse):
    order_items: list[OrderItemEntityResponse]
    total_price: int

    @classmethod
    def of(cls, order: Order) -> OrderEntityResponse:
        return cls(
            id=order.id,
            member=MemberResponse.of(order.member),
            delivery=DeliveryResponse.of(order.delivery),
            order_date=order.order_date,
            status=order.status.value,
            order_items=[OrderItemEntityResponse.of(oi) for oi in order.order_items],
            total_price=order.total_price,
        )


# ============================================================
# DTO RESPONSES
# ============================================================


class OrderItemResponse(BaseModel):
    item_name: str
    order_price: int
    count: int

    @classmethod
    def of(cls, dto: OrderItemDTO) -> OrderItemResponse:
        return cls(item_name=dto.item_name, order_price=dto.order_price, count=dto.count)


class SimpleOrderResponse(BaseModel):
    order_id: int
    member_name: str
    order_date: datetime
    order_status: str
    address: AddressResponse | None

    @classmethod
    def of(cls, dto: SimpleOrderDTO) -> SimpleOrderResponse:
        return cls(
            order_id=dto.order_id,
            member_name=dto.member_name,
            order_date=dto.order_date,
            order_status=dto.order_status.value,
            address=AddressResponse.of(dto.address),
        )


class OrderResponse(SimpleOrderResponse):
    order_items: list[OrderItemResponse]

    @classmethod
    def of(cls, dto: OrderDTO) -> OrderResponse:
        return cls(
            order_id=dto.order_id,
            member_name=dto.member_name,
            order_date=dto.order_date,
            order_status=dto.order_status.value,
            address=AddressResponse.of(dto.address),
            order_items=[OrderItemResponse.of(i) for i in dto.order_items],
        )


class OrderSummaryResponse(BaseModel):
    order_id: int
    member_name: str
    order_status: str
    delivery_status: str
    order_items: list[OrderItemResponse]
    total_price: int
    order_date: datetime

    @classmethod
    def of(cls, dto: OrderSummaryDTO) -> OrderSummaryResponse:
        return cls(
            order_id=dto.order_id,
            member_name=dto.member_name,
            order_status=dto.order_status.value,
            delivery_status=dto.delivery_status,
            order_items=[OrderItemResponse.of(i) for i in dto.order_items],
            total_price=dto.total_price,
            order_date=dto.order_date,
        )
