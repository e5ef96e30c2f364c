"""CLI commands for the active cart."""

from __future__ import annotations

import click

from storefront.application.dto import CartDTO
from storefront.application.empty_cart import EmptyCartHandler
from storefront.application.manage_cart import (
    AddToCartHandler,
    RemoveFromCartHandler,
    ShowCartHandler,
)
from storefront.domain.exceptions import DomainException
from storefront.infrastructure.bootstrap import cart_repository, product_repository


def _display_cart(dto: CartDTO) -> None:
    if not dto.items:
        click.echo("Cart is empty.")
        return

    click.echo(f"  {'Product':<30} {'Qty':>5} {'Price':>14} {'Total':>14}")
    click.echo(f"  {'-'*66}")
    for item in dto.items:
        click.echo(
            f"  {item.product_title:<30} {item.quantity:>5} {item.unit_price:>14} {item.line_total:>14}"
        )
    click.echo(f"  {'-'*66}")
    click.echo(f"  {'Cart Total':<36} {dto.total:>30}")


@click.command("add")
@click.option("--product", "product_id", required=True, help="Product ID.")
@click.option("--qty", "quantity", default=1, show_default=True, type=int, help="Quantity.")
def cart_add(product_id: str, quantity: int) -> None:
    """Add a product to the cart."""
    handler = AddToCartHandler(
        cart_repo=cart_repository(),
        product_repo=product_repository(),
    )

    try:
        dto = handler.handle(product_id=product_id, quantity=quantity)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_cart(dto)


@click.command("remove")
@click.option("--product", "product_id", required=True, help="Product ID.")
def cart_remove(product_id: str) -> None:
    """Remove a product from the cart."""
    handler = RemoveFromCartHandler(cart_repo=cart_repository())

    try:
        dto = handler.handle(product_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_cart(dto)


@click.command("show")
def cart_show() -> None:
    """Show the cart contents."""
    _display_cart(ShowCartHandler(cart_repo=cart_repository()).handle())


@click.command("clear")
def cart_clear() -> None:
    """Remove every item from the cart."""
    EmptyCartHandler(cart_repo=cart_repository()).handle()
    click.echo("Cart cleared.")
