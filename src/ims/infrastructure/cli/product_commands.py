"""CLI commands for products, including the interactive modify form."""

from __future__ import annotations

import click

from ims.application.add_product import AddProductHandler
from ims.application.delete_product import DeleteProductHandler
from ims.application.dto import PartRowDTO
from ims.application.modify_product import ModifyProductSession
from ims.application.show_inventory import ShowInventoryHandler
from ims.domain.exceptions import (
    DomainException,
    EntityNotFoundError,
    StoreInconsistencyError,
)
from ims.domain.model.part import Part
from ims.domain.repository.inventory_repository import InventoryRepository
from ims.domain.service.inventory_search import parse_int
from ims.infrastructure.cli.tables import display_parts, display_products
from ims.infrastructure.config import get_settings

MODIFY_HELP = """Commands:
  search [QUERY]   filter the parts table by ID or name (empty shows all)
  add ID           associate a part from the parts table
  remove ID        remove an associated part
  show             show the form and both tables
  save             edit the fields and save the product
  cancel           close the form without saving"""


@click.command("list")
@click.option("--search", "query", default="", help="Product ID or part of a name.")
@click.pass_obj
def product_list(inventory: InventoryRepository, query: str) -> None:
    """List products in the inventory."""
    display_products(ShowInventoryHandler(inventory).products(query))


@click.command("add")
@click.option("--name", required=True, help="Product name.")
@click.option("--stock", required=True, help="Inventory on hand.")
@click.option("--price", required=True, help="Price (e.g. 299.99).")
@click.option("--min", "minimum", required=True, help="Minimum inventory.")
@click.option("--max", "maximum", required=True, help="Maximum inventory.")
@click.option("--part-id", "part_ids", multiple=True, type=int, help="Part to associate; repeatable.")
@click.pass_obj
def product_add(
    inventory: InventoryRepository,
    name: str,
    stock: str,
    price: str,
    minimum: str,
    maximum: str,
    part_ids: tuple[int, ...],
) -> None:
    """Add a product, optionally built from existing parts."""
    handler = AddProductHandler(inventory, currency=get_settings().currency)

    try:
        product = handler.handle(name, stock, price, minimum, maximum, part_ids=part_ids)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(
        f"Product #{product.id} '{product.name}' added at {product.price} "
        f"with {len(product.associated_parts)} part(s)"
    )


@click.command("delete")
@click.option("--id", "product_id", required=True, type=int, help="Product ID.")
@click.pass_obj
def product_delete(inventory: InventoryRepository, product_id: int) -> None:
    """Delete a product that has no associated parts."""
    try:
        product = DeleteProductHandler(inventory).handle(product_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product #{product.id} '{product.name}' deleted.")


@click.command("modify")
@click.option("--id", "product_id", required=True, type=int, help="Product ID.")
@click.pass_obj
def product_modify(inventory: InventoryRepository, product_id: int) -> None:
    """Modify a product and its associated parts interactively."""
    product = inventory.lookup_product(product_id)
    if product is None:
        raise click.ClickException(f"Product with ID {product_id} not found")

    session = ModifyProductSession(inventory, currency=get_settings().currency)
    form = session.begin(product)
    fields = {
        "name": form.name,
        "stock": form.stock,
        "price": form.price,
        "minimum": form.minimum,
        "maximum": form.maximum,
    }
    visible_parts = session.search_parts("")

    click.echo(f"Modify Product #{form.id}")
    _display_session(fields, visible_parts, session.associated_parts)
    click.echo(MODIFY_HELP)

    while session.is_open:
        line = click.prompt("modify", default="", show_default=False)
        command, _, arg = line.strip().partition(" ")
        arg = arg.strip()

        try:
            if command == "search":
                visible_parts = session.search_parts(arg)
                _display_parts("All parts", visible_parts)
            elif command == "add":
                session.add_association(_select(visible_parts, arg))
                _display_parts("Associated parts", session.associated_parts)
            elif command == "remove":
                part = _select(session.associated_parts, arg)
                confirmed = click.confirm(
                    "Are you sure you want to remove this associated part?"
                )
                if session.remove_association(part, confirmed):
                    _display_parts("Associated parts", session.associated_parts)
            elif command == "show":
                _display_session(fields, visible_parts, session.associated_parts)
            elif command == "save":
                for key, label in (
                    ("name", "Name"),
                    ("stock", "Inventory"),
                    ("price", "Price"),
                    ("minimum", "Min"),
                    ("maximum", "Max"),
                ):
                    fields[key] = click.prompt(label, default=fields[key])
                saved = session.save(
                    fields["name"],
                    fields["stock"],
                    fields["price"],
                    fields["minimum"],
                    fields["maximum"],
                )
                click.echo(f"Product #{saved.id} '{saved.name}' saved.")
            elif command == "cancel":
                session.cancel()
                click.echo("Modification cancelled.")
            else:
                click.echo(MODIFY_HELP)
        except StoreInconsistencyError as exc:
            raise click.ClickException(str(exc))
        except DomainException as exc:
            click.echo(f"Error: {exc}", err=True)


# --- Helpers ------------------------------------------------------------------


def _select(rows: list[Part], raw_id: str) -> Part:
    """Pick the row with the given part ID, as a table selection would."""
    part_id = parse_int(raw_id)
    if part_id is not None:
        for part in rows:
            if part.id == part_id:
                return part
    raise EntityNotFoundError(f"No part with ID {raw_id!r} in the table")


def _display_parts(title: str, parts: list[Part]) -> None:
    display_parts(title, [PartRowDTO.from_part(p) for p in parts])


def _display_session(
    fields: dict[str, str], visible_parts: list[Part], associated: list[Part]
) -> None:
    click.echo(
        f"Name: {fields['name']}  Inventory: {fields['stock']}  "
        f"Price: {fields['price']}  Min: {fields['minimum']}  Max: {fields['maximum']}"
    )
    _display_parts("All parts", visible_parts)
    _display_parts("Associated parts", associated)
