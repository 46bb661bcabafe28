import click
import uvicorn

from shop.infrastructure.cli.category_commands import category_add
from shop.infrastructure.cli.db_commands import db_init, db_seed
from shop.infrastructure.cli.item_commands import item_add, item_list, item_update
from shop.infrastructure.cli.member_commands import member_join, member_list, member_rename
from shop.infrastructure.cli.order_commands import (
    order_cancel,
    order_complete,
    order_create,
    order_list,
    order_show,
    order_simple_list,
)
from shop.infrastructure.log_config import configure_logging
from shop.infrastructure.settings import get_settings


@click.group()
@click.option("--log-level", default=None, help="Override SHOP_LOG_LEVEL.")
def cli(log_level: str | None) -> None:
    """Shop: members, items and orders"""
    configure_logging(log_level or get_settings().log_level)


@cli.group()
def db() -> None:
    """Manage the database schema and sample data."""


@cli.group()
def member() -> None:
    """Manage members."""


@cli.group()
def item() -> None:
    """Manage items."""


@cli.group()
def category() -> None:
    """Manage categories."""


@cli.group()
def order() -> None:
    """Manage orders."""


@cli.command("serve")
@click.option("--host", default="127.0.0.1", show_default=True)
@click.option("--port", default=8000, show_default=True, type=int)
def serve(host: str, port: int) -> None:
    """Run the HTTP API."""
    uvicorn.run("shop.infrastructure.api.app:create_app", host=host, port=port, factory=True)


# Register subcommands
db.add_command(db_init)
db.add_command(db_seed)
member.add_command(member_join)
member.add_command(member_list)
member.add_command(member_rename)
item.add_command(item_add)
item.add_command(item_list)
item.add_command(item_update)
category.add_command(category_add)
order.add_command(order_cancel)
order.add_command(order_complete)
order.add_command(order_create)
order.add_command(order_list)
order.add_command(order_show)
order.add_command(order_simple_list)
