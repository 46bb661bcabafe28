"""Application service: load the reference data set.

Two members, four books and one order per member with two lines each.
Every listing strategy is compared against this data.
"""

from __future__ import annotations

import logging

from shop.application.add_item import AddItemHandler
from shop.application.dto import OrderItemSpec
from shop.application.join_member import JoinMemberHandler
from shop.application.place_order import PlaceOrderHandler
from shop.application.unit_of_work import UnitOfWork
from shop.domain.model.item import BookDetails

logger = logging.getLogger(__name__)

_SAMPLE = [
    {
        "member": ("userA", "Seoul", "1", "1111"),
        "books": [("JPA1 BOOK", 10000, 100, 1), ("JPA2 BOOK", 20000, 100, 2)],
    },
    {
        "member": ("userB", "Busan", "2", "2222"),
        "books": [("SPRING1 BOOK", 20000, 200, 3), ("SPRING2 BOOK", 40000, 300, 4)],
    },
]


class SeedSampleDataHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(self) -> list[int]:
        """Insert the sample data; return the IDs of the created orders."""
        order_ids: list[int] = []
        for entry in _SAMPLE:
            name, city, street, zipcode = entry["member"]
            member_id = JoinMemberHandler(self._uow).handle(name, city, street, zipcode)

            specs: list[OrderItemSpec] = []
            for title, price, stock, count in entry["books"]:
                item = AddItemHandler(self._uow).handle(
                    title, price, stock, BookDetails(author=None, isbn=None)
                )
                specs.append(OrderItemSpec(item_id=item.id, count=count))  # type: ignore[arg-type]

            order_ids.append(PlaceOrderHandler(self._uow).handle(member_id, specs))

        logger.info("Sample data loaded: %d orders", len(order_ids))
        return order_ids
