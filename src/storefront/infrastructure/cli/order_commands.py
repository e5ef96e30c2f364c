"""CLI commands for placing and paying orders."""

from __future__ import annotations

import click

from storefront.application.dto import InvoiceDTO, OrderDTO
from storefront.application.place_order import PlaceOrderHandler
from storefront.application.show_order import ShowInvoiceHandler, ShowOrderHandler
from storefront.domain.exceptions import DomainException
from storefront.infrastructure.bootstrap import (
    cart_repository,
    order_repository,
    payment_orchestrator,
    product_repository,
)
from storefront.infrastructure.gateway.vnpay_gateway import parse_callback


def _display_lines(items) -> None:
    click.echo(f"  {'Product':<30} {'Qty':>5} {'Price':>14} {'Total':>14}")
    click.echo(f"  {'-'*66}")
    for item in items:
        click.echo(
            f"  {item.product_title:<30} {item.quantity:>5} {item.unit_price:>14} {item.line_total:>14}"
        )
    click.echo(f"  {'-'*66}")


def _display_invoice(dto: InvoiceDTO) -> None:
    click.echo(f"Invoice for order #{dto.order_id}")
    click.echo()
    _display_lines(dto.items)
    click.echo(f"  {'Subtotal':<36} {dto.subtotal:>30}")
    click.echo(f"  {'Shipping':<36} {dto.shipping_fee:>30}")
    click.echo(f"  {'Total':<36} {dto.total:>30}")


def _display_order(dto: OrderDTO) -> None:
    click.echo(f"Order #{dto.id}  (status={dto.status})")
    click.echo(f"Created:  {dto.created_at}")
    for key, value in dto.delivery_info.items():
        click.echo(f"{key.capitalize() + ':':<9} {value}")
    click.echo()
    _display_lines(dto.items)
    click.echo(f"  {'Subtotal':<36} {dto.amount:>30}")
    click.echo(f"  {'Shipping':<36} {dto.shipping_fee:>30}")
    click.echo(f"  {'Total':<36} {dto.total:>30}")


@click.command("place")
@click.option("--phone", required=True, help="Recipient phone number.")
@click.option("--name", required=True, help="Recipient name.")
@click.option("--address", required=True, help="Delivery address.")
@click.option("--instructions", default=None, help="Optional delivery instructions.")
def order_place(phone: str, name: str, address: str, instructions: str | None) -> None:
    """Create an order from the cart and price its shipping."""
    info = {"phone": phone, "name": name, "address": address}
    if instructions:
        info["instructions"] = instructions

    handler = PlaceOrderHandler(
        cart_repo=cart_repository(),
        product_repo=product_repository(),
        order_repo=order_repository(),
    )

    try:
        dto = handler.handle(info)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_invoice(dto)
    click.echo()
    click.echo(f"Pay with: storefront order pay-url --id {dto.order_id}")


@click.command("show")
@click.option("--id", "order_id", required=True, type=int, help="Order ID to display.")
def order_show(order_id: int) -> None:
    """Show details of an existing order."""
    handler = ShowOrderHandler(order_repo=order_repository())

    try:
        dto = handler.handle(order_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_order(dto)


@click.command("invoice")
@click.option("--id", "order_id", required=True, type=int, help="Order ID.")
def order_invoice(order_id: int) -> None:
    """Show the invoice of an order."""
    handler = ShowInvoiceHandler(order_repo=order_repository())

    try:
        dto = handler.handle(order_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_invoice(dto)


@click.command("pay-url")
@click.option("--id", "order_id", required=True, type=int, help="Order ID to pay.")
def order_pay_url(order_id: int) -> None:
    """Print the gateway URL to pay an order."""
    try:
        url = payment_orchestrator().request_payment(order_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(url)


@click.command("pay")
@click.option("--id", "order_id", required=True, type=int, help="Order ID being paid.")
@click.option("--response", required=True, help="Gateway return URL or its query string.")
def order_pay(order_id: int, response: str) -> None:
    """Settle an order from the gateway's callback."""
    outcome = payment_orchestrator().pay_order(parse_callback(response), order_id)

    if not outcome.succeeded:
        raise click.ClickException(f"PAYMENT FAILED: {outcome.message}")

    click.echo(outcome.message)
