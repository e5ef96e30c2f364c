"""Data Transfer Objects — plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass

from storefront.domain.model.cart import Cart
from storefront.domain.model.invoice import Invoice
from storefront.domain.model.order import Order
from storefront.domain.model.product import Product


@dataclass(frozen=True)
class ProductDTO:

    id: str
    title: str
    price: str  # formatted, e.g. "50,000 VND"
    quantity_in_stock: int


@dataclass(frozen=True)
class LineItemDTO:
    """Output: a single cart or order line as displayed to the user."""

    product_id: str
    product_title: str
    quantity: int
    unit_price: str
    line_total: str


@dataclass(frozen=True)
class CartDTO:

    items: list[LineItemDTO]
    total: str


@dataclass(frozen=True)
class OrderDTO:
    """Output: a complete order as displayed to the user."""

    id: int
    status: str
    items: list[LineItemDTO]
    amount: str
    shipping_fee: str
    total: str
    delivery_info: dict[str, str]
    created_at: str


@dataclass(frozen=True)
class InvoiceDTO:
    """Output: an invoice, with the raw total needed to start a payment."""

    order_id: int
    items: list[LineItemDTO]
    subtotal: str
    shipping_fee: str
    total: str
    total_amount: int
    description: str


# --- Mapping ------------------------------------------------------------------


def to_product_dto(product: Product) -> ProductDTO:
    return ProductDTO(
        id=product.id,
        title=product.title,
        price=str(product.price),
        quantity_in_stock=product.quantity_in_stock,
    )


def _to_line_dto(item) -> LineItemDTO:
    return LineItemDTO(
        product_id=item.product_id,
        product_title=item.product_title,
        quantity=item.quantity.value,
        unit_price=str(item.unit_price),
        line_total=str(item.line_total),
    )


def to_cart_dto(cart: Cart) -> CartDTO:
    return CartDTO(
        items=[_to_line_dto(item) for item in cart.list_items()],
        total=str(cart.total_amount()),
    )


def to_order_dto(order: Order) -> OrderDTO:
    return OrderDTO(
        id=order.id,  # type: ignore[arg-type]
        status=order.status.value,
        items=[_to_line_dto(item) for item in order.items],
        amount=str(order.amount),
        shipping_fee=str(order.shipping_fee),
        total=str(order.total),
        delivery_info=order.delivery_info.to_mapping() if order.delivery_info else {},
        created_at=order.created_at.strftime("%Y-%m-%d %H:%M UTC"),
    )


def to_invoice_dto(invoice: Invoice) -> InvoiceDTO:
    return InvoiceDTO(
        order_id=invoice.order.id,  # type: ignore[arg-type]
        items=[_to_line_dto(item) for item in invoice.items],
        subtotal=str(invoice.subtotal),
        shipping_fee=str(invoice.shipping_fee),
        total=str(invoice.total),
        total_amount=invoice.total.amount,
        description=invoice.describe(),
    )
