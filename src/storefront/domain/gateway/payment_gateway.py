"""Payment gateway port.

The checkout flow talks to whichever interbank provider is configured
through this interface only; adding a provider means adding an
implementation, not touching the payment orchestrator.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Mapping

from storefront.domain.model.transaction import Transaction


class PaymentGateway(ABC):

    @abstractmethod
    def generate_url(self, amount: int, description: str) -> str:
        """Return the URL the customer is redirected to for paying *amount*."""

    @abstractmethod
    def parse_response(self, response: Mapping[str, str]) -> Transaction:
        """Turn a gateway callback into a completed Transaction.

        Raises PaymentError when the gateway declined the payment or the
        callback signature does not match, UnrecognizedError when the
        callback has an unknown shape.
        """
