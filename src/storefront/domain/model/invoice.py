"""Invoice — read-only projection of an order."""

from __future__ import annotations

from dataclasses import dataclass

from storefront.domain.model.order import Order, OrderLineItem
from storefront.domain.model.value_objects import Money


@dataclass(frozen=True)
class Invoice:

    order: Order

    @property
    def items(self) -> list[OrderLineItem]:
        return list(self.order.items)

    @property
    def subtotal(self) -> Money:
        return self.order.amount

    @property
    def shipping_fee(self) -> Money:
        return self.order.shipping_fee

    @property
    def total(self) -> Money:
        return self.order.total

    def describe(self) -> str:
        """Short description sent to the payment gateway."""
        if self.order.id is None:
            return f"Payment for {self.order.total_items} item(s)"
        return f"Payment for order #{self.order.id}"
