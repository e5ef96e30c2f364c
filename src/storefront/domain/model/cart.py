"""Cart aggregate — the customer's in-progress selection of products.

The cart is the only mutable holder of line items before checkout.
Orders copy its lines by value, so clearing or editing the cart never
reaches into an order that was already created from it.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from storefront.domain.exceptions import UnavailableError, ValidationError
from storefront.domain.model.product import Product
from storefront.domain.model.value_objects import Money, Quantity


@dataclass
class CartLineItem:
    """One product in the cart, priced at the moment it was added."""

    product_id: str
    product_title: str
    quantity: Quantity
    unit_price: Money

    @property
    def line_total(self) -> Money:
        return self.unit_price * self.quantity.value


@dataclass
class Cart:
    """Aggregate root for the active cart.

    Invariants:
    - at most one line per product (adding again increases the quantity)
    - lines keep the order in which products were first added
    """

    items: list[CartLineItem] = field(default_factory=list)

    # --- Mutations ------------------------------------------------------------

    def add(self, product: Product, quantity: int) -> CartLineItem:
        """Add *quantity* units of *product*, merging with an existing line."""
        qty = Quantity(quantity)
        for item in self.items:
            if item.product_id == product.id:
                item.quantity = item.quantity + qty
                return item
        item = CartLineItem(
            product_id=product.id,
            product_title=product.title,
            quantity=qty,
            unit_price=product.price,
        )
        self.items.append(item)
        return item

    def remove(self, product_id: str) -> None:
        for i, item in enumerate(self.items):
            if item.product_id == product_id:
                del self.items[i]
                return
        raise ValidationError(f"Product ID '{product_id}' is not in the cart")

    def empty(self) -> None:
        self.items.clear()

    # --- Queries --------------------------------------------------------------

    def list_items(self) -> list[CartLineItem]:
        return list(self.items)

    def total_amount(self) -> Money:
        result = Money.zero()
        for item in self.items:
            result = result + item.line_total
        return result

    @property
    def is_empty(self) -> bool:
        return not self.items

    def check_availability(self, products: dict[str, Product]) -> None:
        """Ensure every line can be supplied from current stock.

        *products* maps product IDs to their current catalog record.
        Raises UnavailableError naming every line that falls short.
        """
        if self.is_empty:
            raise ValidationError("Cart is empty")

        shortages: list[str] = []
        for item in self.items:
            product = products.get(item.product_id)
            if product is None:
                shortages.append(f"{item.product_title} (no longer sold)")
            elif not product.can_supply(item.quantity.value):
                shortages.append(
                    f"{item.product_title} (need {item.quantity.value}, "
                    f"have {product.quantity_in_stock} in stock)"
                )
        if shortages:
            raise UnavailableError(
                "Some products are not available: " + ", ".join(shortages)
            )
