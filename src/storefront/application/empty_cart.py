"""Application service: Empty Cart use case.

Run by the payment orchestrator once a payment settles, and by the
``cart clear`` command.
"""

from __future__ import annotations

from storefront.domain.repository.cart_repository import CartRepository


class EmptyCartHandler:

    def __init__(self, cart_repo: CartRepository) -> None:
        self._cart_repo = cart_repo

    def handle(self) -> None:
        cart = self._cart_repo.get()
        cart.empty()
        self._cart_repo.save(cart)
