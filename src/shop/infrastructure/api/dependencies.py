"""FastAPI dependencies."""

from __future__ import annotations

from fastapi import Request

from shop.application.unit_of_work import UnitOfWork
from shop.domain.model.order import OrderStatus
from shop.domain.repository.order_repository import OrderSearch
from shop.infrastructure.persistence.unit_of_work import SqlAlchemyUnitOfWork


def get_uow(request: Request) -> UnitOfWork:
    """A fresh unit of work per request, bound to the app's session factory."""
    settings = request.app.state.settings
    return SqlAlchemyUnitOfWork(
        request.app.state.session_factory,
        batch_fetch_size=settings.batch_fetch_size,
        max_results=settings.max_results,
    )


def order_search(
    member_name: str | None = None,
    order_status: OrderStatus | None = None,
) -> OrderSearch:
    """Optional ``member_name`` / ``order_status`` query filters."""
    return OrderSearch(member_name=member_name, order_status=order_status)
