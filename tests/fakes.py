"""In-memory fakes for testing.

These implement the same abstract interfaces as the JSON repositories
and the VNPay gateway but keep everything in memory. No file I/O, no
network.
"""

from __future__ import annotations

import copy
import threading
from collections.abc import Mapping

from storefront.domain.exceptions import (
    InvalidStateError,
    PaymentError,
    PersistenceError,
    UnrecognizedError,
)
from storefront.domain.gateway.payment_gateway import PaymentGateway
from storefront.domain.model.cart import Cart
from storefront.domain.model.order import Order, OrderStatus
from storefront.domain.model.product import Product
from storefront.domain.model.transaction import Transaction
from storefront.domain.model.value_objects import Money
from storefront.domain.repository.cart_repository import CartRepository
from storefront.domain.repository.order_repository import OrderRepository
from storefront.domain.repository.product_repository import ProductRepository
from storefront.domain.repository.transaction_repository import TransactionRepository


class FakeOrderRepository(OrderRepository):
    """Stores copies, so callers only see changes they saved."""

    def __init__(self) -> None:
        self._store: dict[int, Order] = {}
        self._next_id = 1
        self._lock = threading.Lock()

    def next_id(self) -> int:
        return self._next_id

    def get_by_id(self, order_id: int) -> Order | None:
        order = self._store.get(order_id)
        return copy.deepcopy(order) if order else None

    def save(self, order: Order) -> None:
        with self._lock:
            if order.id is None:
                order.id = self._next_id
                self._next_id += 1
            stored = self._store.get(order.id)
            if stored and stored.status == OrderStatus.PAID and not order.is_paid:
                raise InvalidStateError(f"Order #{order.id} is already paid")
            self._store[order.id] = copy.deepcopy(order)


class FailingOrderRepository(FakeOrderRepository):
    """Raises *error* whenever a paid order is saved."""

    def __init__(self, error: Exception) -> None:
        super().__init__()
        self._error = error

    def save(self, order: Order) -> None:
        if order.is_paid:
            raise self._error
        super().save(order)


class FakeProductRepository(ProductRepository):

    def __init__(self, products: list[Product] | None = None) -> None:
        self._store: dict[str, Product] = {}
        for p in products or []:
            self._store[p.id] = p

    def get_by_id(self, product_id: str) -> Product | None:
        return self._store.get(product_id)

    def list_all(self) -> list[Product]:
        return list(self._store.values())

    def put(self, product: Product) -> None:
        self._store[product.id] = product


class FakeCartRepository(CartRepository):

    def __init__(self, cart: Cart | None = None) -> None:
        self._cart = cart or Cart()
        self.save_count = 0

    def get(self) -> Cart:
        return self._cart

    def save(self, cart: Cart) -> None:
        self._cart = cart
        self.save_count += 1


class FakeTransactionRepository(TransactionRepository):

    def __init__(self, fail_with: str | None = None) -> None:
        self._store: dict[int, Transaction] = {}
        self._lock = threading.Lock()
        self._fail_with = fail_with

    def get_by_order_id(self, order_id: int) -> Transaction | None:
        return self._store.get(order_id)

    def save(self, transaction: Transaction, order_id: int) -> None:
        if self._fail_with:
            raise PersistenceError(self._fail_with)
        with self._lock:
            if order_id in self._store:
                raise PersistenceError(
                    f"Order #{order_id} already has a recorded transaction"
                )
            transaction.order_id = order_id
            self._store[order_id] = transaction

    def remove(self, order_id: int) -> None:
        with self._lock:
            self._store.pop(order_id, None)

    def count(self) -> int:
        return len(self._store)


class FakePaymentGateway(PaymentGateway):
    """Accepts callbacks shaped as {"code": ..., "amount": ..., "ref": ...}.

    ``code`` "00" succeeds, "51" is a decline, anything else is
    unrecognized.
    """

    def __init__(self) -> None:
        self.generated: list[tuple[int, str]] = []

    def generate_url(self, amount: int, description: str) -> str:
        self.generated.append((amount, description))
        return f"https://pay.example/checkout?amount={amount}"

    def parse_response(self, response: Mapping[str, str]) -> Transaction:
        code = response.get("code")
        if code == "51":
            raise PaymentError("Insufficient account balance")
        if code != "00":
            raise UnrecognizedError(f"Unrecognized payment response code: {code}")
        return Transaction(
            amount=Money(int(response["amount"])),
            content=response.get("content", "test payment"),
            gateway_reference=response.get("ref", "TXN-1"),
        )
