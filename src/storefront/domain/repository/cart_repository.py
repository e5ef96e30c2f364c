"""Abstract repository for the active Cart."""

from __future__ import annotations

from abc import ABC, abstractmethod

from storefront.domain.model.cart import Cart


class CartRepository(ABC):

    @abstractmethod
    def get(self) -> Cart:
        """Return the active cart, empty if none was saved yet."""

    @abstractmethod
    def save(self, cart: Cart) -> None:
        """Persist the active cart."""
