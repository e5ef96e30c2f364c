"""Composition root — wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from functools import lru_cache

from storefront.application.empty_cart import EmptyCartHandler
from storefront.application.pay_order import PaymentOrchestrator
from storefront.infrastructure.config import Settings
from storefront.infrastructure.gateway.vnpay_gateway import VnPayGateway
from storefront.infrastructure.persistence.json_cart_repository import JsonCartRepository
from storefront.infrastructure.persistence.json_order_repository import (
    JsonOrderRepository,
)
from storefront.infrastructure.persistence.json_product_repository import (
    JsonProductRepository,
)
from storefront.infrastructure.persistence.json_transaction_repository import (
    JsonTransactionRepository,
)


@lru_cache(maxsize=None)
def settings() -> Settings:
    """Read the environment once per process."""
    return Settings.from_env()


def product_repository() -> JsonProductRepository:
    return JsonProductRepository(settings().data_dir / "products.json")


def cart_repository() -> JsonCartRepository:
    return JsonCartRepository(settings().data_dir / "cart.json")


def order_repository() -> JsonOrderRepository:
    return JsonOrderRepository(settings().data_dir / "orders.json")


def transaction_repository() -> JsonTransactionRepository:
    return JsonTransactionRepository(settings().data_dir / "transactions.json")


def payment_gateway() -> VnPayGateway:
    s = settings()
    return VnPayGateway(
        tmn_code=s.vnpay_tmn_code,
        hash_secret=s.vnpay_hash_secret,
        pay_url=s.vnpay_pay_url,
        return_url=s.vnpay_return_url,
    )


def payment_orchestrator() -> PaymentOrchestrator:
    return PaymentOrchestrator(
        gateway=payment_gateway(),
        order_repo=order_repository(),
        transaction_repo=transaction_repository(),
        empty_cart=EmptyCartHandler(cart_repository()),
    )
