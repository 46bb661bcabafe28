"""The order read strategies against SQLite: same answer, different SQL.

Query counts assume the sample data (two orders, two lines each, four
distinct items, two members) and a fresh session per call.
"""

import pytest

from shop.application.add_item import AddItemHandler
from shop.application.cancel_order import CancelOrderHandler
from shop.application.dto import OrderItemSpec
from shop.application.join_member import JoinMemberHandler
from shop.application.place_order import PlaceOrderHandler
from shop.application.search_orders import OrderQueryStrategy, SearchOrdersHandler
from shop.application.search_simple_orders import (
    SearchSimpleOrdersHandler,
    SimpleOrderQueryStrategy,
)
from shop.domain.exceptions import (
    AssociationNotLoadedError,
    UnsafePaginationError,
    ValidationError,
)
from shop.domain.model.item import BookDetails
from shop.domain.model.order import OrderStatus
from shop.domain.model.value_objects import Address
from shop.domain.repository.order_repository import OrderSearch
from shop.infrastructure.persistence.database import QueryCounter
from shop.infrastructure.persistence.unit_of_work import SqlAlchemyUnitOfWork


def _order_for(uow, member_name: str) -> int:
    member_id = JoinMemberHandler(uow).handle(member_name, "Seoul", "1", "1111")
    book = AddItemHandler(uow).handle("JPA3 BOOK", 10000, 10, BookDetails(author=None, isbn=None))
    return PlaceOrderHandler(uow).handle(member_id, [OrderItemSpec(item_id=book.id, count=1)])


def _count(engine, call) -> tuple[object, int]:
    with QueryCounter(engine) as counter:
        result = call()
    return result, counter.count


class TestSameAnswer:

    @pytest.mark.parametrize("strategy", list(OrderQueryStrategy))
    def test_matches_batched_dto(self, uow, seeded, strategy):
        baseline = SearchOrdersHandler(uow).handle(OrderQueryStrategy.DTO_BATCHED)
        assert SearchOrdersHandler(uow).handle(strategy) == baseline

    def test_sample_content(self, uow, seeded):
        [a, b] = SearchOrdersHandler(uow).handle(OrderQueryStrategy.DTO_FLAT)
        assert (a.order_id, a.member_name, a.order_status) == (seeded[0], "userA", OrderStatus.ORDERED)
        assert a.address == Address("Seoul", "1", "1111")
        assert [(i.item_name, i.order_price, i.count) for i in a.order_items] == [
            ("JPA1 BOOK", 10000, 1),
            ("JPA2 BOOK", 20000, 2),
        ]
        assert b.member_name == "userB"
        assert [(i.item_name, i.order_price, i.count) for i in b.order_items] == [
            ("SPRING1 BOOK", 20000, 3),
            ("SPRING2 BOOK", 40000, 4),
        ]

    @pytest.mark.parametrize("strategy", list(SimpleOrderQueryStrategy))
    def test_simple_strategies_agree(self, uow, seeded, strategy):
        baseline = SearchSimpleOrdersHandler(uow).handle(SimpleOrderQueryStrategy.DTO)
        assert SearchSimpleOrdersHandler(uow).handle(strategy) == baseline
        assert [o.member_name for o in baseline] == ["userA", "userB"]

    def test_empty_database(self, uow):
        for strategy in OrderQueryStrategy:
            assert SearchOrdersHandler(uow).handle(strategy) == []


class TestQueryCounts:

    @pytest.mark.parametrize(
        "strategy, expected",
        [
            # 1 orders + 2 members + 2 deliveries + 2 item lists + 4 items
            (OrderQueryStrategy.ENTITY, 11),
            (OrderQueryStrategy.ENTITY_TO_DTO, 11),
            (OrderQueryStrategy.FETCH_JOIN, 1),
            (OrderQueryStrategy.FETCH_JOIN_PAGED, 2),
            (OrderQueryStrategy.DTO, 3),
            (OrderQueryStrategy.DTO_BATCHED, 2),
            (OrderQueryStrategy.DTO_FLAT, 1),
        ],
    )
    def test_full_orders(self, engine, uow, seeded, strategy, expected):
        _, count = _count(engine, lambda: SearchOrdersHandler(uow).handle(strategy))
        assert count == expected

    @pytest.mark.parametrize(
        "strategy, expected",
        [
            (SimpleOrderQueryStrategy.ENTITY, 5),
            (SimpleOrderQueryStrategy.ENTITY_TO_DTO, 5),
            (SimpleOrderQueryStrategy.TO_ONE_FETCH_JOIN, 1),
            (SimpleOrderQueryStrategy.DTO, 1),
        ],
    )
    def test_simple_orders(self, engine, uow, seeded, strategy, expected):
        _, count = _count(engine, lambda: SearchSimpleOrdersHandler(uow).handle(strategy))
        assert count == expected

    def test_batch_size_bounds_the_in_lists(self, engine, session_factory, seeded):
        small = SqlAlchemyUnitOfWork(session_factory, batch_fetch_size=1)
        orders, count = _count(
            engine, lambda: SearchOrdersHandler(small).handle(OrderQueryStrategy.FETCH_JOIN_PAGED)
        )
        assert count == 3
        assert len(orders) == 2

    def test_batched_dto_skips_item_query_without_orders(self, engine, uow):
        _, count = _count(engine, lambda: SearchOrdersHandler(uow).handle(OrderQueryStrategy.DTO_BATCHED))
        assert count == 1


class TestPagination:

    def test_paged_strategy(self, uow, seeded):
        page = SearchOrdersHandler(uow).handle(
            OrderQueryStrategy.FETCH_JOIN_PAGED, offset=1, limit=1
        )
        assert [o.member_name for o in page] == ["userB"]
        assert len(page[0].order_items) == 2

    def test_page_past_the_end(self, uow, seeded):
        assert SearchOrdersHandler(uow).handle(
            OrderQueryStrategy.FETCH_JOIN_PAGED, offset=5, limit=10
        ) == []

    @pytest.mark.parametrize("offset, limit", [(0, 1), (None, 10), (1, None)])
    def test_collection_fetch_join_refuses(self, uow, seeded, offset, limit):
        with pytest.raises(UnsafePaginationError):
            SearchOrdersHandler(uow).handle(OrderQueryStrategy.FETCH_JOIN, offset=offset, limit=limit)

    def test_repository_guard(self, uow, seeded):
        with uow:
            with pytest.raises(UnsafePaginationError):
                uow.orders.find_all_with_item(OrderSearch(), offset=0, limit=1)

    def test_invalid_page_bounds(self, uow, seeded):
        with pytest.raises(ValidationError):
            SearchOrdersHandler(uow).handle(OrderQueryStrategy.FETCH_JOIN_PAGED, offset=-1, limit=1)
        with pytest.raises(ValidationError):
            SearchOrdersHandler(uow).handle(OrderQueryStrategy.FETCH_JOIN_PAGED, limit=0)


class TestSearch:

    @pytest.mark.parametrize("strategy", list(OrderQueryStrategy))
    def test_member_name_substring(self, uow, seeded, strategy):
        result = SearchOrdersHandler(uow).handle(strategy, OrderSearch(member_name="rB"))
        assert [o.member_name for o in result] == ["userB"]

    @pytest.mark.parametrize("strategy", list(OrderQueryStrategy))
    def test_status(self, uow, seeded, strategy):
        CancelOrderHandler(uow).handle(seeded[0])
        result = SearchOrdersHandler(uow).handle(
            strategy, OrderSearch(order_status=OrderStatus.CANCELLED)
        )
        assert [o.order_id for o in result] == [seeded[0]]

    @pytest.mark.parametrize("strategy", list(OrderQueryStrategy))
    def test_member_name_wildcards_match_literally(self, uow, seeded, strategy):
        order_id = _order_for(uow, "a_b")
        handler = SearchOrdersHandler(uow)
        assert [o.order_id for o in handler.handle(strategy, OrderSearch(member_name="_"))] == [order_id]
        assert handler.handle(strategy, OrderSearch(member_name="%")) == []

    @pytest.mark.parametrize("strategy", list(SimpleOrderQueryStrategy))
    def test_simple_member_name_wildcards_match_literally(self, uow, seeded, strategy):
        _order_for(uow, "a_b")
        result = SearchSimpleOrdersHandler(uow).handle(strategy, OrderSearch(member_name="_"))
        assert [o.member_name for o in result] == ["a_b"]

    def test_max_results_caps_entity_listing(self, session_factory, seeded):
        capped = SqlAlchemyUnitOfWork(session_factory, max_results=1)
        assert len(SearchOrdersHandler(capped).handle(OrderQueryStrategy.ENTITY)) == 1

    @pytest.mark.parametrize(
        "strategy",
        [s for s in OrderQueryStrategy if s not in (OrderQueryStrategy.ENTITY, OrderQueryStrategy.ENTITY_TO_DTO)],
    )
    def test_max_results_leaves_other_strategies_whole(self, session_factory, seeded, strategy):
        capped = SqlAlchemyUnitOfWork(session_factory, max_results=1)
        assert len(SearchOrdersHandler(capped).handle(strategy)) == 2


class TestEntityGraph:

    def test_entities_fully_loaded(self, uow, seeded):
        orders = SearchOrdersHandler(uow).entities()
        assert [o.total_price for o in orders] == [50000, 220000]
        assert all(o.items_loaded for o in orders)

    def test_simple_entities_have_no_items(self, uow, seeded):
        [order, _] = SearchSimpleOrdersHandler(uow).entities()
        assert order.member.name == "userA"
        with pytest.raises(AssociationNotLoadedError):
            order.total_price

    def test_members_do_not_list_their_orders(self, uow, seeded):
        [order, _] = SearchOrdersHandler(uow).entities()
        assert order.member.orders == []
