"""In-memory fakes for testing.

These implement the same abstract interfaces as the SQL repositories
but keep everything in dicts. No database, no side effects. The fake
unit of work records commits and rollbacks so tests can assert on the
transaction boundary.
"""

from __future__ import annotations

from shop.application.dto import OrderDTO, OrderFlatDTO, OrderItemDTO, SimpleOrderDTO
from shop.application.order_query_repository import OrderQueryRepository
from shop.application.unit_of_work import UnitOfWork
from shop.domain.exceptions import DuplicateMemberError, UnsafePaginationError
from shop.domain.model.category import Category
from shop.domain.model.item import Item
from shop.domain.model.member import Member
from shop.domain.model.order import Order
from shop.domain.repository.category_repository import CategoryRepository
from shop.domain.repository.item_repository import ItemRepository
from shop.domain.repository.member_repository import MemberRepository
from shop.domain.repository.order_repository import OrderRepository, OrderSearch


def _matches(order: Order, search: OrderSearch) -> bool:
    if search.order_status is not None and order.status != search.order_status:
        return False
    if search.member_name and search.member_name not in order.member.name:
        return False
    return True


class FakeMemberRepository(MemberRepository):

    def __init__(self, members: list[Member] | None = None) -> None:
        self._store: dict[int, Member] = {}
        self._next_id = 1
        for m in members or []:
            self.save(m)

    def get_by_id(self, member_id: int) -> Member | None:
        return self._store.get(member_id)

    def find_by_name(self, name: str) -> list[Member]:
        return [m for m in self._store.values() if m.name == name]

    def list_all(self) -> list[Member]:
        return list(self._store.values())

    def save(self, member: Member) -> None:
        # Mirrors the unique constraint on member.name.
        if any(m.name == member.name and m is not member for m in self._store.values()):
            raise DuplicateMemberError(f"Member '{member.name}' already exists")
        if member.id is None:
            member.id = self._next_id
            self._next_id += 1
        self._store[member.id] = member


class FakeItemRepository(ItemRepository):

    def __init__(self, items: list[Item] | None = None) -> None:
        self._store: dict[int, Item] = {}
        self._next_id = 1
        for i in items or []:
            self.save(i)

    def get_by_id(self, item_id: int) -> Item | None:
        return self._store.get(item_id)

    def list_all(self) -> list[Item]:
        return list(self._store.values())

    def save(self, item: Item) -> None:
        if item.id is None:
            item.id = self._next_id
            self._next_id += 1
        self._store[item.id] = item


class FakeCategoryRepository(CategoryRepository):

    def __init__(self) -> None:
        self._store: dict[int, Category] = {}
        self._next_id = 1

    def get_by_id(self, category_id: int) -> Category | None:
        return self._store.get(category_id)

    def save(self, category: Category) -> None:
        if category.id is None:
            category.id = self._next_id
            self._next_id += 1
        self._store[category.id] = category


class FakeOrderRepository(OrderRepository):

    def __init__(self) -> None:
        self._store: dict[int, Order] = {}
        self._next_id = 1
        self._next_line_id = 1

    def get_by_id(self, order_id: int) -> Order | None:
        return self._store.get(order_id)

    def save(self, order: Order) -> None:
        if order.id is None:
            order.id = self._next_id
            self._next_id += 1
            order.delivery.id = order.id
            order.delivery.order_id = order.id
            for order_item in order.order_items:
                order_item.id = self._next_line_id
                order_item.order_id = order.id
                self._next_line_id += 1
        self._store[order.id] = order

    def find_all(self, search: OrderSearch, with_items: bool = True) -> list[Order]:
        return [o for o in self._store.values() if _matches(o, search)]

    def find_all_with_member_delivery(
        self,
        search: OrderSearch,
        offset: int | None = None,
        limit: int | None = None,
    ) -> list[Order]:
        orders = self.find_all(search)
        start = offset or 0
        return orders[start:start + limit] if limit is not None else orders[start:]

    def load_order_items(self, orders: list[Order]) -> None:
        pass

    def find_all_with_item(
        self,
        search: OrderSearch,
        offset: int | None = None,
        limit: int | None = None,
    ) -> list[Order]:
        if offset is not None or limit is not None:
            raise UnsafePaginationError("Collection join cannot be paginated")
        return self.find_all(search)


class FakeOrderQueryRepository(OrderQueryRepository):
    """Projections computed from the fake order store."""

    def __init__(self, orders: FakeOrderRepository) -> None:
        self._orders = orders

    def find_simple_order_dtos(self, search: OrderSearch) -> list[SimpleOrderDTO]:
        return [
            SimpleOrderDTO(o.id, o.member.name, o.order_date, o.status, o.delivery.address)
            for o in self._orders.find_all(search)
        ]

    def find_order_dtos(self, search: OrderSearch) -> list[OrderDTO]:
        return [
            OrderDTO(
                o.id, o.member.name, o.order_date, o.status, o.delivery.address,
                [OrderItemDTO(oi.item.name, oi.order_price, oi.count) for oi in o.order_items],
            )
            for o in self._orders.find_all(search)
        ]

    def find_order_dtos_batched(self, search: OrderSearch) -> list[OrderDTO]:
        return self.find_order_dtos(search)

    def find_order_flat_rows(self, search: OrderSearch) -> list[OrderFlatDTO]:
        return [
            OrderFlatDTO(
                o.id, o.member.name, o.order_date, o.status, o.delivery.address,
                oi.item.name, oi.order_price, oi.count,
            )
            for o in self._orders.find_all(search)
            for oi in o.order_items
        ]


class FakeUnitOfWork(UnitOfWork):

    def __init__(
        self,
        members: list[Member] | None = None,
        items: list[Item] | None = None,
    ) -> None:
        self.members = FakeMemberRepository(members)
        self.items = FakeItemRepository(items)
        self.categories = FakeCategoryRepository()
        self.orders = FakeOrderRepository()
        self.order_queries = FakeOrderQueryRepository(self.orders)
        self.commits = 0
        self.rollbacks = 0
        self.active = False

    def _begin(self) -> None:
        self.active = True

    def _end(self) -> None:
        self.active = False

    def commit(self) -> None:
        self.commits += 1

    def rollback(self) -> None:
        self.rollbacks += 1
