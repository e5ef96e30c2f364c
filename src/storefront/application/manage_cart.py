"""Application services: cart use cases (add, remove, show)."""

from __future__ import annotations

from storefront.application.dto import CartDTO, to_cart_dto
from storefront.domain.exceptions import EntityNotFoundError
from storefront.domain.repository.cart_repository import CartRepository
from storefront.domain.repository.product_repository import ProductRepository


class AddToCartHandler:

    def __init__(self, cart_repo: CartRepository, product_repo: ProductRepository) -> None:
        self._cart_repo = cart_repo
        self._product_repo = product_repo

    def handle(self, product_id: str, quantity: int) -> CartDTO:
        product = self._product_repo.get_by_id(product_id)
        if product is None:
            raise EntityNotFoundError(f"Product not found: '{product_id}'")

        cart = self._cart_repo.get()
        cart.add(product, quantity)
        self._cart_repo.save(cart)
        return to_cart_dto(cart)


class RemoveFromCartHandler:

    def __init__(self, cart_repo: CartRepository) -> None:
        self._cart_repo = cart_repo

    def handle(self, product_id: str) -> CartDTO:
        cart = self._cart_repo.get()
        cart.remove(product_id)
        self._cart_repo.save(cart)
        return to_cart_dto(cart)


class ShowCartHandler:

    def __init__(self, cart_repo: CartRepository) -> None:
        self._cart_repo = cart_repo

    def handle(self) -> CartDTO:
        return to_cart_dto(self._cart_repo.get())
