"""JSON-file-backed implementation of CartRepository (one active cart)."""

from __future__ import annotations

from pathlib import Path

from storefront.domain.model.cart import Cart, CartLineItem
from storefront.domain.model.value_objects import Money, Quantity
from storefront.domain.repository.cart_repository import CartRepository
from storefront.infrastructure.persistence.json_file import JsonFile


class JsonCartRepository(CartRepository):

    def __init__(self, file_path: Path) -> None:
        self._file = JsonFile(file_path, empty={"items": []})

    def get(self) -> Cart:
        return Cart(
            items=[
                CartLineItem(
                    product_id=line["product_id"],
                    product_title=line["product_title"],
                    quantity=Quantity(line["quantity"]),
                    unit_price=Money(line["unit_price"], line.get("currency", "VND")),
                )
                for line in self._file.read()["items"]
            ]
        )

    def save(self, cart: Cart) -> None:
        self._file.write(
            {
                "items": [
                    {
                        "product_id": item.product_id,
                        "product_title": item.product_title,
                        "quantity": item.quantity.value,
                        "unit_price": item.unit_price.amount,
                        "currency": item.unit_price.currency,
                    }
                    for item in cart.list_items()
                ]
            }
        )
