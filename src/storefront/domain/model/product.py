"""Product as seen by the checkout flow.

The catalog is maintained elsewhere; checkout only reads products to price
cart lines and to check that enough stock is left.
"""

from __future__ import annotations

from dataclasses import dataclass

from storefront.domain.model.value_objects import Money


@dataclass(frozen=True)
class Product:
    """A catalog product with its current price and stock level."""

    id: str
    title: str
    price: Money
    quantity_in_stock: int = 0

    def can_supply(self, quantity: int) -> bool:
        return quantity <= self.quantity_in_stock
