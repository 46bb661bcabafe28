"""CLI commands for the database schema and the sample data set."""

from __future__ import annotations

import click

from shop.application.seed_sample_data import SeedSampleDataHandler
from shop.domain.exceptions import DomainException
from shop.infrastructure import bootstrap
from shop.infrastructure.persistence.database import create_schema


@click.command("init")
def db_init() -> None:
    """Create all tables (existing tables are left alone)."""
    create_schema(bootstrap.engine())
    click.echo("Database schema created.")


@click.command("seed")
def db_seed() -> None:
    """Insert two members, four books and one order per member."""
    create_schema(bootstrap.engine())
    handler = SeedSampleDataHandler(bootstrap.unit_of_work())

    try:
        order_ids = handler.handle()
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Sample data loaded: orders {', '.join(f'#{i}' for i in order_ids)}")
