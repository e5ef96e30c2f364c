"""Abstract repository for payment Transactions.

Implementations own the at-most-one rule: a second transaction for an
order ID that already has one must raise PersistenceError, and the
check-and-insert must be atomic with respect to concurrent callers.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from storefront.domain.model.transaction import Transaction


class TransactionRepository(ABC):

    @abstractmethod
    def get_by_order_id(self, order_id: int) -> Transaction | None:
        """Return the transaction recorded for an order, or None."""

    @abstractmethod
    def save(self, transaction: Transaction, order_id: int) -> None:
        """Bind *transaction* to *order_id* and persist it.

        Raises PersistenceError if the order already has a transaction
        or the record cannot be written.
        """

    @abstractmethod
    def remove(self, order_id: int) -> None:
        """Drop the transaction recorded for *order_id*, if any.

        Used to undo a save when the order itself could not be marked
        paid. Raises PersistenceError if the store cannot be written.
        """
