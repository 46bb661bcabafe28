"""CLI commands for categories."""

from __future__ import annotations

import click

from shop.application.add_category import AddCategoryHandler
from shop.domain.exceptions import DomainException
from shop.infrastructure import bootstrap


@click.command("add")
@click.option("--name", required=True, help="Category name.")
@click.option("--parent", "parent_id", default=None, type=int, help="Parent category ID.")
@click.option("--item", "item_ids", multiple=True, type=int, help="Item ID to include (repeatable).")
def category_add(name: str, parent_id: int | None, item_ids: tuple[int, ...]) -> None:
    """Create a category."""
    handler = AddCategoryHandler(bootstrap.unit_of_work())

    try:
        category_id = handler.handle(name, parent_id=parent_id, item_ids=list(item_ids))
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Category #{category_id} '{name}' added")
