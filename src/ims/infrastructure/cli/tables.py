"""Shared table formatting for the CLI."""

from __future__ import annotations

import click

from ims.application.dto import PartRowDTO, ProductRowDTO


def display_parts(title: str, rows: list[PartRowDTO]) -> None:
    click.echo(title)
    if not rows:
        click.echo("  (no parts)")
        return
    click.echo(f"  {'ID':<6} {'Name':<20} {'Inventory':>10} {'Price':>10}  Source")
    click.echo(f"  {'-'*64}")
    for row in rows:
        click.echo(
            f"  {row.id:<6} {row.name:<20} {row.stock:>10} {row.price:>10}  {row.source}"
        )


def display_products(rows: list[ProductRowDTO]) -> None:
    if not rows:
        click.echo("No products found.")
        return
    click.echo(f"{'ID':<6} {'Name':<20} {'Inventory':>10} {'Price':>10} {'Parts':>6}")
    click.echo("-" * 56)
    for row in rows:
        click.echo(
            f"{row.id:<6} {row.name:<20} {row.stock:>10} {row.price:>10} {row.part_count:>6}"
        )
