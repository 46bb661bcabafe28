"""Relational schema as SQLAlchemy declarative rows.

Rows never leave the infrastructure layer; repositories translate them
to domain objects. Every relationship is ``lazy="raise"``: touching an
association a query did not load is an error, never a hidden SELECT.
"""

from __future__ import annotations

from datetime import datetime

from sqlalchemy import Column, DateTime, ForeignKey, Integer, String, Table
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column, relationship


class Base(DeclarativeBase):
    pass


class MemberRow(Base):
    __tablename__ = "member"

    id: Mapped[int] = mapped_column("member_id", Integer, primary_key=True)
    # Unique: closes the window between the duplicate-name check and insert.
    name: Mapped[str] = mapped_column(String(100), unique=True, nullable=False)
    city: Mapped[str | None] = mapped_column(String(100))
    street: Mapped[str | None] = mapped_column(String(200))
    zipcode: Mapped[str | None] = mapped_column(String(20))

    def __repr__(self) -> str:
        return f"<MemberRow(id={self.id}, name='{self.name}')>"


category_item = Table(
    "category_item",
    Base.metadata,
    Column("category_id", ForeignKey("category.category_id"), primary_key=True),
    Column("item_id", ForeignKey("item.item_id"), primary_key=True),
)


class ItemRow(Base):
    """Books, albums and movies in one table, told apart by ``dtype``."""

    __tablename__ = "item"

    id: Mapped[int] = mapped_column("item_id", Integer, primary_key=True)
    dtype: Mapped[str] = mapped_column(String(1), nullable=False)
    name: Mapped[str] = mapped_column(String(200), nullable=False)
    price: Mapped[int] = mapped_column(Integer, nullable=False)
    stock_quantity: Mapped[int] = mapped_column(Integer, nullable=False)

    author: Mapped[str | None] = mapped_column(String(100))
    isbn: Mapped[str | None] = mapped_column(String(20))
    artist: Mapped[str | None] = mapped_column(String(100))
    etc: Mapped[str | None] = mapped_column(String(200))
    director: Mapped[str | None] = mapped_column(String(100))
    actor: Mapped[str | None] = mapped_column(String(100))

    def __repr__(self) -> str:
        return f"<ItemRow(id={self.id}, dtype='{self.dtype}', name='{self.name}')>"


class CategoryRow(Base):
    __tablename__ = "category"

    id: Mapped[int] = mapped_column("category_id", Integer, primary_key=True)
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    parent_id: Mapped[int | None] = mapped_column(ForeignKey("category.category_id"))

    items: Mapped[list[ItemRow]] = relationship(secondary=category_item, lazy="raise")


class DeliveryRow(Base):
    __tablename__ = "delivery"

    id: Mapped[int] = mapped_column("delivery_id", Integer, primary_key=True)
    city: Mapped[str | None] = mapped_column(String(100))
    street: Mapped[str | None] = mapped_column(String(200))
    zipcode: Mapped[str | None] = mapped_column(String(20))
    status: Mapped[str] = mapped_column(String(10), nullable=False)


class OrderRow(Base):
    __tablename__ = "orders"

    id: Mapped[int] = mapped_column("order_id", Integer, primary_key=True)
    member_id: Mapped[int] = mapped_column(ForeignKey("member.member_id"), nullable=False)
    delivery_id: Mapped[int] = mapped_column(
        ForeignKey("delivery.delivery_id"), unique=True, nullable=False
    )
    order_date: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    status: Mapped[str] = mapped_column(String(10), nullable=False)

    member: Mapped[MemberRow] = relationship(lazy="raise")
    delivery: Mapped[DeliveryRow] = relationship(
        lazy="raise", cascade="all, delete-orphan", single_parent=True
    )
    order_items: Mapped[list[OrderItemRow]] = relationship(
        back_populates="order",
        lazy="raise",
        cascade="all, delete-orphan",
        order_by="OrderItemRow.id",
    )


class OrderItemRow(Base):
    __tablename__ = "order_item"

    id: Mapped[int] = mapped_column("order_item_id", Integer, primary_key=True)
    order_id: Mapped[int] = mapped_column(ForeignKey("orders.order_id"), nullable=False)
    item_id: Mapped[int] = mapped_column(ForeignKey("item.item_id"), nullable=False)
    order_price: Mapped[int] = mapped_column(Integer, nullable=False)
    count: Mapped[int] = mapped_column(Integer, nullable=False)

    order: Mapped[OrderRow] = relationship(back_populates="order_items", lazy="raise")
    item: Mapped[ItemRow] = relationship(lazy="raise")
