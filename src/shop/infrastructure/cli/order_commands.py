"""CLI commands for the Order aggregate and the order listings."""

from __future__ import annotations

import click

from shop.application.cancel_order import CancelOrderHandler
from shop.application.complete_delivery import CompleteDeliveryHandler
from shop.application.dto import OrderDTO, OrderItemSpec, SimpleOrderDTO
from shop.application.place_order import PlaceOrderHandler
from shop.application.search_orders import OrderQueryStrategy, SearchOrdersHandler
from shop.application.search_simple_orders import (
    SearchSimpleOrdersHandler,
    SimpleOrderQueryStrategy,
)
from shop.application.show_order import ShowOrderHandler
from shop.domain.exceptions import DomainException
from shop.domain.model.order import OrderStatus
from shop.domain.repository.order_repository import OrderSearch
from shop.infrastructure import bootstrap
from shop.infrastructure.persistence.database import QueryCounter


def _parse_items(raw: str) -> list[OrderItemSpec]:
    """Parse '1:3,2:5' (item ID : count) into OrderItemSpec list."""
    specs: list[OrderItemSpec] = []
    for pair in raw.split(","):
        pair = pair.strip()
        if ":" not in pair:
            raise click.BadParameter(
                f"Invalid item format '{pair}'. Expected 'ItemId:Count'."
            )
        id_str, count_str = pair.rsplit(":", 1)
        try:
            specs.append(OrderItemSpec(item_id=int(id_str), count=int(count_str)))
        except ValueError:
            raise click.BadParameter(f"Invalid item '{pair}'. Both parts must be integers.")
    return specs


def _search(member_name: str | None, status: str | None) -> OrderSearch:
    return OrderSearch(
        member_name=member_name,
        order_status=OrderStatus(status) if status else None,
    )


_search_options = [
    click.option("--member-name", default=None, help="Substring of the member name."),
    click.option(
        "--status",
        type=click.Choice([s.value for s in OrderStatus]),
        default=None,
        help="Order status.",
    ),
    click.option("--show-queries", is_flag=True, default=False, help="Print the SQL statement count."),
]


def _with_search_options(func):
    for option in reversed(_search_options):
        func = option(func)
    return func


@click.command("create")
@click.option("--member-id", required=True, type=int, help="Ordering member.")
@click.option("--items", required=True, help="Items as 'ItemId:Count,ItemId:Count'.")
def order_create(member_id: int, items: str) -> None:
    """Place a new order (ships to the member's address)."""
    specs = _parse_items(items)
    uow = bootstrap.unit_of_work()

    try:
        order_id = PlaceOrderHandler(uow).handle(member_id, specs)
        dto = ShowOrderHandler(uow).handle(order_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Order #{dto.order_id} placed  (status={dto.order_status.value})")
    _display_lines(dto.order_items, dto.total_price)


@click.command("show")
@click.option("--id", "order_id", required=True, type=int, help="Order ID to display.")
def order_show(order_id: int) -> None:
    """Show an order with its lines and total."""
    handler = ShowOrderHandler(bootstrap.unit_of_work())

    try:
        dto = handler.handle(order_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Order #{dto.order_id}  (status={dto.order_status.value})")
    click.echo(f"Member:   {dto.member_name}")
    click.echo(f"Delivery: {dto.delivery_status}")
    click.echo(f"Ordered:  {dto.order_date}")
    click.echo()
    _display_lines(dto.order_items, dto.total_price)


@click.command("cancel")
@click.option("--id", "order_id", required=True, type=int, help="Order ID to cancel.")
def order_cancel(order_id: int) -> None:
    """Cancel an order (puts the stock back)."""
    handler = CancelOrderHandler(bootstrap.unit_of_work())

    try:
        handler.handle(order_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Order #{order_id} cancelled.")


@click.command("complete")
@click.option("--id", "order_id", required=True, type=int, help="Order ID whose delivery arrived.")
def order_complete(order_id: int) -> None:
    """Mark an order's delivery as completed."""
    handler = CompleteDeliveryHandler(bootstrap.unit_of_work())

    try:
        handler.handle(order_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Order #{order_id} delivered.")


@click.command("list")
@click.option(
    "--strategy",
    type=click.Choice([s.value for s in OrderQueryStrategy]),
    default=OrderQueryStrategy.DTO_BATCHED.value,
    show_default=True,
)
@click.option("--offset", default=None, type=int, help="Orders to skip.")
@click.option("--limit", default=None, type=int, help="Maximum orders to return.")
@_with_search_options
def order_list(
    strategy: str,
    offset: int | None,
    limit: int | None,
    member_name: str | None,
    status: str | None,
    show_queries: bool,
) -> None:
    """List orders with their items using one of the read strategies."""
    handler = SearchOrdersHandler(bootstrap.unit_of_work())

    try:
        with QueryCounter(bootstrap.engine()) as counter:
            orders = handler.handle(
                OrderQueryStrategy(strategy),
                _search(member_name, status),
                offset=offset,
                limit=limit,
            )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not orders:
        click.echo("No orders found.")
    for dto in orders:
        _display_order(dto)
    if show_queries:
        click.echo(f"[{strategy}] {counter.count} SQL statement(s)")


@click.command("simple-list")
@click.option(
    "--strategy",
    type=click.Choice([s.value for s in SimpleOrderQueryStrategy]),
    default=SimpleOrderQueryStrategy.DTO.value,
    show_default=True,
)
@_with_search_options
def order_simple_list(
    strategy: str,
    member_name: str | None,
    status: str | None,
    show_queries: bool,
) -> None:
    """List orders with member and delivery only."""
    handler = SearchSimpleOrdersHandler(bootstrap.unit_of_work())

    try:
        with QueryCounter(bootstrap.engine()) as counter:
            orders = handler.handle(
                SimpleOrderQueryStrategy(strategy), _search(member_name, status)
            )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not orders:
        click.echo("No orders found.")
    else:
        click.echo(f"{'ID':<6} {'Member':<12} {'Status':<10} {'Address':<30}")
        click.echo("-" * 60)
        for dto in orders:
            _display_simple(dto)
    if show_queries:
        click.echo(f"[{strategy}] {counter.count} SQL statement(s)")


# --- Formatting ---------------------------------------------------------------


def _display_lines(order_items, total: int) -> None:
    """Shared formatting for order lines."""
    click.echo(f"  {'Item':<20} {'Count':>5} {'Price':>10} {'Total':>10}")
    click.echo(f"  {'-'*47}")
    for line in order_items:
        click.echo(
            f"  {line.item_name:<20} {line.count:>5} {line.order_price:>10} "
            f"{line.order_price * line.count:>10}"
        )
    click.echo(f"  {'-'*47}")
    click.echo(f"  {'Order Total':<27} {total:>20}")


def _display_order(dto: OrderDTO) -> None:
    click.echo(f"Order #{dto.order_id}  (status={dto.order_status.value})")
    click.echo(f"Member:  {dto.member_name}")
    click.echo(f"Address: {dto.address or '-'}")
    _display_lines(dto.order_items, sum(i.order_price * i.count for i in dto.order_items))
    click.echo()


def _display_simple(dto: SimpleOrderDTO) -> None:
    click.echo(
        f"{dto.order_id:<6} {dto.member_name:<12} {dto.order_status.value:<10} "
        f"{str(dto.address or '-'):<30}"
    )
