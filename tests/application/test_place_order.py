"""Tests for the PlaceOrder use case.

Uses in-memory fakes, no database.
"""

import pytest

from shop.application.dto import OrderItemSpec
from shop.application.place_order import PlaceOrderHandler
from shop.application.show_order import ShowOrderHandler
from shop.domain.exceptions import EntityNotFoundError, NotEnoughStockError, ValidationError
from shop.domain.model.delivery import DeliveryStatus
from shop.domain.model.item import BookDetails, Item
from shop.domain.model.member import Member
from shop.domain.model.order import OrderStatus
from shop.domain.model.value_objects import Address
from tests.fakes import FakeUnitOfWork


def _setup() -> FakeUnitOfWork:
    """Member #1 and items #1 (stock 10) and #2 (stock 5)."""
    return FakeUnitOfWork(
        members=[Member(id=None, name="userA", address=Address("Seoul", "1", "1111"))],
        items=[
            Item.create("JPA1 BOOK", 10000, 10, BookDetails()),
            Item.create("JPA2 BOOK", 20000, 5, BookDetails()),
        ],
    )


class TestPlaceOrderHappyPath:

    def test_returns_order_id_and_commits(self):
        uow = _setup()
        order_id = PlaceOrderHandler(uow).handle(1, [OrderItemSpec(1, 2)])
        assert order_id == 1
        assert uow.commits == 1

    def test_takes_stock(self):
        uow = _setup()
        PlaceOrderHandler(uow).handle(1, [OrderItemSpec(1, 2), OrderItemSpec(2, 5)])
        assert uow.items.get_by_id(1).stock_quantity == 8
        assert uow.items.get_by_id(2).stock_quantity == 0

    def test_delivery_goes_to_member_address(self):
        uow = _setup()
        order_id = PlaceOrderHandler(uow).handle(1, [OrderItemSpec(1, 1)])
        order = uow.orders.get_by_id(order_id)
        assert order.delivery.address == Address("Seoul", "1", "1111")
        assert order.delivery.status == DeliveryStatus.READY
        assert order.status == OrderStatus.ORDERED

    def test_summary_total(self):
        uow = _setup()
        order_id = PlaceOrderHandler(uow).handle(1, [OrderItemSpec(1, 1), OrderItemSpec(2, 2)])
        dto = ShowOrderHandler(uow).handle(order_id)
        assert dto.total_price == 50000
        assert dto.member_name == "userA"
        assert dto.delivery_status == "READY"
        assert [(i.item_name, i.count) for i in dto.order_items] == [
            ("JPA1 BOOK", 1),
            ("JPA2 BOOK", 2),
        ]


class TestPlaceOrderPriceLock:

    def test_price_snapshot_at_creation(self):
        uow = _setup()
        order_id = PlaceOrderHandler(uow).handle(1, [OrderItemSpec(1, 1)])

        book = uow.items.get_by_id(1)
        book.change(book.name, 99999, book.stock_quantity)

        assert ShowOrderHandler(uow).handle(order_id).total_price == 10000


class TestPlaceOrderRejections:

    def test_no_lines(self):
        with pytest.raises(ValidationError, match="at least one item"):
            PlaceOrderHandler(_setup()).handle(1, [])

    def test_unknown_member(self):
        with pytest.raises(EntityNotFoundError, match="Member #9"):
            PlaceOrderHandler(_setup()).handle(9, [OrderItemSpec(1, 1)])

    def test_unknown_item(self):
        with pytest.raises(EntityNotFoundError, match="Item #9"):
            PlaceOrderHandler(_setup()).handle(1, [OrderItemSpec(9, 1)])

    def test_zero_count(self):
        with pytest.raises(ValidationError):
            PlaceOrderHandler(_setup()).handle(1, [OrderItemSpec(1, 0)])

    def test_failing_line_leaves_all_stock_untouched(self):
        uow = _setup()
        with pytest.raises(NotEnoughStockError):
            PlaceOrderHandler(uow).handle(1, [OrderItemSpec(1, 3), OrderItemSpec(2, 6)])
        assert uow.items.get_by_id(1).stock_quantity == 10
        assert uow.items.get_by_id(2).stock_quantity == 5
        assert uow.commits == 0

    def test_same_item_on_two_lines_is_summed(self):
        uow = _setup()
        with pytest.raises(NotEnoughStockError, match="need 6, have 5"):
            PlaceOrderHandler(uow).handle(1, [OrderItemSpec(2, 3), OrderItemSpec(2, 3)])
        assert uow.items.get_by_id(2).stock_quantity == 5
