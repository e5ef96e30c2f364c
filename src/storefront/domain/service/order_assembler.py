"""Domain service: Order assembly.

Turns the active cart into an Order and an Order into an Invoice.
Cart lines are copied field by field into frozen OrderLineItems, so the
order never shares a mutable object with the cart.
"""

from __future__ import annotations

from storefront.domain.exceptions import InvalidStateError
from storefront.domain.model.cart import Cart
from storefront.domain.model.invoice import Invoice
from storefront.domain.model.order import Order, OrderLineItem


class OrderAssembler:

    def create_order(self, cart: Cart) -> Order:
        """Snapshot *cart* into a new, unpersisted Order (lines in cart order)."""
        order = Order(id=None)
        for cart_item in cart.list_items():
            order.add_item(
                OrderLineItem(
                    product_id=cart_item.product_id,
                    product_title=cart_item.product_title,
                    quantity=cart_item.quantity,
                    unit_price=cart_item.unit_price,  # <-- price snapshot
                )
            )
        return order

    def create_invoice(self, order: Order) -> Invoice:
        if not order.items:
            raise InvalidStateError("Cannot create an invoice for an order with no items")
        return Invoice(order=order)
