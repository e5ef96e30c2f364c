"""Application service: Payment orchestration.

Drives one payment attempt against the configured gateway:

1. ``request_payment()`` (or ``generate_payment_url()`` for a raw
   amount) asks the gateway for the redirect URL.
2. ``pay_order()`` parses the gateway callback, records the transaction
   against the order, marks the order paid and clears the cart.

Every domain error raised while settling is turned into a FAILURE
outcome, so callers only ever get a PaymentOutcome back. If the order
cannot be marked paid after its transaction was recorded, the
transaction is removed again.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Mapping

from storefront.application.empty_cart import EmptyCartHandler
from storefront.domain.exceptions import (
    DomainException,
    EntityNotFoundError,
    InvalidAmountError,
    InvalidStateError,
    PaymentError,
    PersistenceError,
)
from storefront.domain.gateway.payment_gateway import PaymentGateway
from storefront.domain.model.order import Order, OrderStatus
from storefront.domain.model.payment import PaymentAttempt, PaymentOutcome, PaymentState
from storefront.domain.model.transaction import Transaction
from storefront.domain.repository.order_repository import OrderRepository
from storefront.domain.repository.transaction_repository import TransactionRepository
from storefront.domain.service.order_assembler import OrderAssembler

logger = logging.getLogger(__name__)

SUCCESS_MESSAGE = "You have successfully paid the order!"


class PaymentOrchestrator:

    def __init__(
        self,
        gateway: PaymentGateway,
        order_repo: OrderRepository,
        transaction_repo: TransactionRepository,
        empty_cart: EmptyCartHandler,
    ) -> None:
        self._gateway = gateway
        self._order_repo = order_repo
        self._transaction_repo = transaction_repo
        self._empty_cart = empty_cart
        self._attempt = PaymentAttempt()
        # one operation at a time per attempt
        self._lock = threading.Lock()

    @property
    def state(self) -> PaymentState:
        return self._attempt.state

    def reset(self) -> None:
        """Start a new attempt after the previous one settled or failed."""
        with self._lock:
            self._attempt = PaymentAttempt()

    # --- Operations -----------------------------------------------------------

    def generate_payment_url(self, amount: int, description: str) -> str:
        with self._lock:
            self._assert_attempt_open()
            if amount < 0:
                raise InvalidAmountError(f"Payment amount cannot be negative, got {amount}")

            url = self._gateway.generate_url(amount, description)
            self._attempt.url_generated()
        logger.debug("Payment URL generated for %s: %s", description, url)
        return url

    def request_payment(self, order_id: int) -> str:
        """Payment URL for the invoice total of a priced, unpaid order."""
        invoice = OrderAssembler().create_invoice(self._load_payable(order_id))
        return self.generate_payment_url(invoice.total.amount, invoice.describe())

    def pay_order(self, response: Mapping[str, str], order_id: int) -> PaymentOutcome:
        """Settle *order_id* from the gateway callback *response*."""
        with self._lock:
            self._assert_attempt_open()

            try:
                transaction = self._gateway.parse_response(response)
                order = self._load_payable(order_id)
                self._check_amount(order, transaction)
                self._transaction_repo.save(transaction, order_id)
            except PersistenceError as exc:
                return self._fail_unsettled(order_id, exc)
            except DomainException as exc:
                logger.warning("Payment for order #%s failed: %s", order_id, exc)
                return self._fail(str(exc))

            try:
                order.mark_paid()
                self._order_repo.save(order)
            except (DomainException, OSError) as exc:
                self._undo_transaction(order_id)
                return self._fail_unsettled(order_id, exc)

            self._attempt.settle()

        logger.info(
            "Order #%s settled by gateway transaction %s",
            order_id,
            transaction.gateway_reference,
        )
        try:
            self.empty_cart()
        except PersistenceError as exc:
            logger.error("Order #%s is paid but the cart was not emptied: %s", order_id, exc)
        return PaymentOutcome.success(SUCCESS_MESSAGE)

    def empty_cart(self) -> None:
        self._empty_cart.handle()

    # --- Internal helpers -----------------------------------------------------

    def _load_payable(self, order_id: int) -> Order:
        order = self._order_repo.get_by_id(order_id)
        if order is None:
            raise EntityNotFoundError(f"Order #{order_id} not found")
        if order.status == OrderStatus.PAID:
            raise InvalidStateError(f"Order #{order_id} is already paid")
        if order.status != OrderStatus.PRICED:
            raise InvalidStateError(f"Order #{order_id} has not been priced yet")
        return order

    @staticmethod
    def _check_amount(order: Order, transaction: Transaction) -> None:
        paid, due = transaction.amount.amount, order.total.amount
        if paid != due:
            raise PaymentError(f"Paid amount {paid} does not match order total {due}")

    def _undo_transaction(self, order_id: int) -> None:
        try:
            self._transaction_repo.remove(order_id)
        except PersistenceError as exc:
            logger.error(
                "Transaction for order #%s could not be removed after a failed save: %s",
                order_id,
                exc,
            )

    def _fail_unsettled(self, order_id: int, exc: Exception) -> PaymentOutcome:
        # Funds may already be captured on the gateway side.
        logger.error(
            "Payment for order #%s is unsettled, reconcile with the gateway: %s",
            order_id,
            exc,
        )
        return self._fail(str(exc))

    def _fail(self, message: str) -> PaymentOutcome:
        self._attempt.fail()
        return PaymentOutcome.failure(message)

    def _assert_attempt_open(self) -> None:
        if self._attempt.is_terminal:
            raise InvalidStateError(
                f"Payment attempt already {self._attempt.state.value}; start a new attempt"
            )
