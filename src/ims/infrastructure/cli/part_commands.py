"""CLI commands for parts."""

from __future__ import annotations

import click

from ims.application.add_part import IN_HOUSE, OUTSOURCED, AddPartHandler
from ims.application.delete_part import DeletePartHandler
from ims.application.show_inventory import ShowInventoryHandler
from ims.domain.exceptions import DomainException
from ims.domain.repository.inventory_repository import InventoryRepository
from ims.infrastructure.cli.tables import display_parts
from ims.infrastructure.config import get_settings


@click.command("list")
@click.option("--search", "query", default="", help="Part ID or part of a name.")
@click.pass_obj
def part_list(inventory: InventoryRepository, query: str) -> None:
    """List parts in the inventory."""
    rows = ShowInventoryHandler(inventory).parts(query)
    display_parts("Parts", rows)


@click.command("add")
@click.option("--name", required=True, help="Part name.")
@click.option("--stock", required=True, help="Inventory on hand.")
@click.option("--price", required=True, help="Price per unit (e.g. 3.50).")
@click.option("--min", "minimum", required=True, help="Minimum inventory.")
@click.option("--max", "maximum", required=True, help="Maximum inventory.")
@click.option("--machine-id", default=None, help="Machine ID of an in-house part.")
@click.option("--company", default=None, help="Company name of an outsourced part.")
@click.pass_obj
def part_add(
    inventory: InventoryRepository,
    name: str,
    stock: str,
    price: str,
    minimum: str,
    maximum: str,
    machine_id: str | None,
    company: str | None,
) -> None:
    """Add an in-house or outsourced part."""
    if (machine_id is None) == (company is None):
        raise click.UsageError("Give exactly one of --machine-id or --company.")
    source, source_value = (IN_HOUSE, machine_id) if machine_id is not None else (OUTSOURCED, company)

    handler = AddPartHandler(inventory, currency=get_settings().currency)

    try:
        part = handler.handle(name, stock, price, minimum, maximum, source, source_value)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Part #{part.id} '{part.name}' added at {part.price}")


@click.command("delete")
@click.option("--id", "part_id", required=True, type=int, help="Part ID.")
@click.pass_obj
def part_delete(inventory: InventoryRepository, part_id: int) -> None:
    """Delete a part from the inventory."""
    try:
        part = DeletePartHandler(inventory).handle(part_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Part #{part.id} '{part.name}' deleted.")
