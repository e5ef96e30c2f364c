import click

from storefront.infrastructure.bootstrap import settings
from storefront.infrastructure.cli.cart_commands import cart_add, cart_clear, cart_remove, cart_show
from storefront.infrastructure.cli.order_commands import (
    order_invoice,
    order_pay,
    order_pay_url,
    order_place,
    order_show,
)
from storefront.infrastructure.cli.product_commands import product_list
from storefront.infrastructure.logging_config import configure_logging


@click.group()
@click.option("--log-level", default=None, help="Override STOREFRONT_LOG_LEVEL.")
def cli(log_level: str | None) -> None:
    """Storefront — cart, checkout and payment"""
    s = settings()
    configure_logging(log_level or s.log_level, s.log_format)


@cli.group()
def product() -> None:
    """Browse the catalog."""


@cli.group()
def cart() -> None:
    """Manage the active cart."""


@cli.group()
def order() -> None:
    """Place and pay orders."""


# Register subcommands
product.add_command(product_list)
cart.add_command(cart_add)
cart.add_command(cart_clear)
cart.add_command(cart_remove)
cart.add_command(cart_show)
order.add_command(order_invoice)
order.add_command(order_pay)
order.add_command(order_pay_url)
order.add_command(order_place)
order.add_command(order_show)
