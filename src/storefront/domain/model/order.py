"""Order aggregate — the priced snapshot of a cart at checkout time.

The Order is an aggregate root that owns value copies of the cart's
line items. Its amount is fixed at creation; only delivery info and the
shipping fee may change, and only until the order is paid.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum

from storefront.domain.exceptions import InvalidStateError
from storefront.domain.model.delivery_info import DeliveryInfo
from storefront.domain.model.value_objects import Money, Quantity


class OrderStatus(Enum):
    CREATED = "CREATED"
    PRICED = "PRICED"
    PAID = "PAID"


@dataclass(frozen=True)
class OrderLineItem:
    """Price snapshot of one cart line at order-creation time.

    Frozen so that nothing, including a later change to the cart,
    can alter what the customer is charged for.
    """

    product_id: str
    product_title: str
    quantity: Quantity
    unit_price: Money  # locked at order-creation time

    @property
    def line_total(self) -> Money:
        return self.unit_price * self.quantity.value


@dataclass
class Order:
    """Aggregate root for checkout orders.

    Orders are built by ``OrderAssembler.create_order()`` from a cart.
    The ``__init__`` is intentionally simple so the repository can
    reconstitute persisted orders without re-validating.
    """

    id: int | None
    items: list[OrderLineItem] = field(default_factory=list)
    delivery_info: DeliveryInfo | None = None
    shipping_fee: Money = field(default_factory=Money.zero)
    status: OrderStatus = OrderStatus.CREATED
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    # --- Mutations before payment ---------------------------------------------

    def add_item(self, item: OrderLineItem) -> None:
        if self.status != OrderStatus.CREATED:
            raise InvalidStateError(
                f"Cannot add items to an order in {self.status.value} status"
            )
        self.items.append(item)

    def attach_delivery_info(self, info: DeliveryInfo) -> None:
        self._assert_not_paid("change delivery info of")
        self.delivery_info = info

    def apply_shipping_fee(self, fee: Money) -> None:
        """Record the shipping fee and move CREATED -> PRICED."""
        self._assert_not_paid("reprice")
        self.shipping_fee = fee
        self.status = OrderStatus.PRICED

    # --- State transitions ----------------------------------------------------

    def mark_paid(self) -> None:
        """Transition PRICED -> PAID."""
        if self.status == OrderStatus.PAID:
            raise InvalidStateError(f"Order #{self.id} is already paid")
        if self.status != OrderStatus.PRICED:
            raise InvalidStateError(
                f"Cannot pay order — current status is {self.status.value}, "
                f"expected PRICED"
            )
        self.status = OrderStatus.PAID

    # --- Computed properties --------------------------------------------------

    @property
    def amount(self) -> Money:
        """Sum of line totals, shipping excluded."""
        result = Money.zero()
        for item in self.items:
            result = result + item.line_total
        return result

    @property
    def total(self) -> Money:
        return self.amount + self.shipping_fee

    @property
    def total_items(self) -> int:
        return sum(item.quantity.value for item in self.items)

    @property
    def is_paid(self) -> bool:
        return self.status == OrderStatus.PAID

    # --- Internal helpers -----------------------------------------------------

    def _assert_not_paid(self, action: str) -> None:
        if self.status == OrderStatus.PAID:
            raise InvalidStateError(f"Cannot {action} an order that is already paid")
