"""CLI commands for browsing products."""

from __future__ import annotations

import click

from storefront.application.list_products import ListProductsHandler
from storefront.infrastructure.bootstrap import product_repository


@click.command("list")
def product_list() -> None:
    """List all products in the catalog."""
    products = ListProductsHandler(product_repo=product_repository()).handle()

    if not products:
        click.echo("No products found.")
        return

    click.echo(f"{'ID':<6} {'Title':<30} {'Price':>14} {'Stock':>6}")
    click.echo("-" * 59)
    for p in products:
        click.echo(f"{p.id:<6} {p.title:<30} {p.price:>14} {p.quantity_in_stock:>6}")
