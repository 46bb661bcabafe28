"""CLI commands for catalog items."""

from __future__ import annotations

import click

from shop.application.add_item import AddItemHandler
from shop.application.show_item import ListItemsHandler
from shop.application.update_item import UpdateItemHandler
from shop.domain.exceptions import DomainException
from shop.domain.model.item import AlbumDetails, BookDetails, ItemDetails, MovieDetails
from shop.infrastructure import bootstrap


def _details(kind: str, **fields: str | None) -> ItemDetails:
    if kind == "book":
        return BookDetails(author=fields["author"], isbn=fields["isbn"])
    if kind == "album":
        return AlbumDetails(artist=fields["artist"], etc=fields["etc"])
    return MovieDetails(director=fields["director"], actor=fields["actor"])


@click.command("add")
@click.option("--kind", type=click.Choice(["book", "album", "movie"]), default="book", show_default=True)
@click.option("--name", required=True, help="Item name.")
@click.option("--price", required=True, type=int, help="Price in whole currency units.")
@click.option("--stock", "stock_quantity", required=True, type=int, help="Units in stock.")
@click.option("--author", default=None, help="Book author.")
@click.option("--isbn", default=None, help="Book ISBN.")
@click.option("--artist", default=None, help="Album artist.")
@click.option("--etc", default=None, help="Album notes.")
@click.option("--director", default=None, help="Movie director.")
@click.option("--actor", default=None, help="Movie actor.")
def item_add(kind: str, name: str, price: int, stock_quantity: int, **fields: str | None) -> None:
    """Add a book, album or movie to the catalog."""
    handler = AddItemHandler(bootstrap.unit_of_work())

    try:
        item = handler.handle(name, price, stock_quantity, _details(kind, **fields))
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Item #{item.id} '{item.name}' ({item.kind.name}) added at {item.price}")


@click.command("list")
def item_list() -> None:
    """List all items in the catalog."""
    items = ListItemsHandler(bootstrap.unit_of_work()).handle()

    if not items:
        click.echo("No items found.")
        return

    click.echo(f"{'ID':<6} {'Kind':<6} {'Name':<20} {'Price':>10} {'Stock':>7}")
    click.echo("-" * 53)
    for i in items:
        click.echo(f"{i.id:<6} {i.kind.name:<6} {i.name:<20} {i.price:>10} {i.stock_quantity:>7}")


@click.command("update")
@click.option("--id", "item_id", required=True, type=int, help="Item ID.")
@click.option("--name", required=True, help="New name.")
@click.option("--price", required=True, type=int, help="New price.")
@click.option("--stock", "stock_quantity", required=True, type=int, help="New stock quantity.")
def item_update(item_id: int, name: str, price: int, stock_quantity: int) -> None:
    """Change an item's name, price and stock."""
    handler = UpdateItemHandler(bootstrap.unit_of_work())

    try:
        handler.handle(item_id, name, price, stock_quantity)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Item #{item_id} updated")
