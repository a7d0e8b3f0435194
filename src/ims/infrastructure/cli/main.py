from __future__ import annotations

from pathlib import Path

import click

from ims.infrastructure.bootstrap import inventory_repository
from ims.infrastructure.cli.part_commands import part_add, part_delete, part_list
from ims.infrastructure.cli.product_commands import (
    product_add,
    product_delete,
    product_list,
    product_modify,
)
from ims.infrastructure.config import get_settings
from ims.infrastructure.logger import setup_logger


@click.group()
@click.option(
    "--seed",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help="JSON seed file to start the inventory from.",
)
@click.pass_context
def cli(ctx: click.Context, seed: Path | None) -> None:
    """IMS: Inventory Management System"""
    settings = get_settings()
    setup_logger(settings.log_level)
    ctx.obj = inventory_repository(settings, seed_file=seed)


@cli.group()
def part() -> None:
    """Browse, add and delete parts."""


@cli.group()
def product() -> None:
    """Browse, add, modify and delete products."""


# Register subcommands
part.add_command(part_list)
part.add_command(part_add)
part.add_command(part_delete)
product.add_command(product_list)
product.add_command(product_add)
product.add_command(product_modify)
product.add_command(product_delete)
