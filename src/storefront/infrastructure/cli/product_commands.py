"""CLI commands for the product catalog."""

from __future__ import annotations

import click

from storefront.application.list_products import ListProductsHandler
from storefront.infrastructure.bootstrap import product_repository
from storefront.infrastructure.cli.display import money


@click.command("list")
def product_list() -> None:
    """List all products in the catalog."""
    handler = ListProductsHandler(product_repo=product_repository())
    products = handler.handle()

    if not products:
        click.echo("No products found.")
        return

    click.echo(f"{'ID':<6} {'Name':<24} {'Price':>10}  Description")
    click.echo("-" * 70)
    for p in products:
        click.echo(f"{p.id:<6} {p.name:<24} {money(p.price):>10}  {p.description}")
