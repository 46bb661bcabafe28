"""CLI commands for members."""

from __future__ import annotations

import click

from shop.application.join_member import JoinMemberHandler
from shop.application.show_member import ListMembersHandler
from shop.application.update_member import UpdateMemberHandler
from shop.domain.exceptions import DomainException
from shop.infrastructure import bootstrap


@click.command("join")
@click.option("--name", required=True, help="Member name (must be unique).")
@click.option("--city", default=None)
@click.option("--street", default=None)
@click.option("--zipcode", default=None)
def member_join(name: str, city: str | None, street: str | None, zipcode: str | None) -> None:
    """Register a new member."""
    handler = JoinMemberHandler(bootstrap.unit_of_work())

    try:
        member_id = handler.handle(name, city=city, street=street, zipcode=zipcode)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Member #{member_id} '{name}' joined")


@click.command("list")
def member_list() -> None:
    """List all members."""
    members = ListMembersHandler(bootstrap.unit_of_work()).handle()

    if not members:
        click.echo("No members found.")
        return

    click.echo(f"{'ID':<6} {'Name':<20} {'Address':<40}")
    click.echo("-" * 68)
    for m in members:
        click.echo(f"{m.id:<6} {m.name:<20} {str(m.address or ''):<40}")


@click.command("rename")
@click.option("--id", "member_id", required=True, type=int, help="Member ID.")
@click.option("--name", required=True, help="New name.")
def member_rename(member_id: int, name: str) -> None:
    """Change a member's name."""
    handler = UpdateMemberHandler(bootstrap.unit_of_work())

    try:
        handler.handle(member_id, name)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Member #{member_id} renamed to '{name}'")
