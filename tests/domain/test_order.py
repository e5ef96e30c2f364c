"""Unit tests for the Order aggregate and its business rules."""

import dataclasses

import pytest

from storefront.domain.exceptions import InvalidStateError
from storefront.domain.model.delivery_info import DeliveryInfo
from storefront.domain.model.order import Order, OrderLineItem, OrderStatus
from storefront.domain.model.value_objects import Money, Quantity


def _make_item(title: str = "Mắt Biếc", qty: int = 1, price: int = 50000) -> OrderLineItem:
    """Helper to build a valid line item."""
    return OrderLineItem(
        product_id="1",
        product_title=title,
        quantity=Quantity(qty),
        unit_price=Money(price),
    )


def _info() -> DeliveryInfo:
    return DeliveryInfo(phone="0912345678", name="Nguyễn Văn An", address="123 Lê Lợi, District 1")


class TestOrderAmounts:

    def test_new_order_defaults(self):
        order = Order(id=None)
        assert order.status == OrderStatus.CREATED
        assert order.amount == Money.zero()
        assert order.shipping_fee == Money.zero()
        assert order.delivery_info is None

    def test_amount_is_sum_of_line_items(self):
        order = Order(id=None, items=[_make_item(qty=3, price=15000), _make_item(qty=5, price=25000)])
        assert order.amount == Money(170000)

    def test_total_adds_shipping(self):
        order = Order(id=None, items=[_make_item(qty=2, price=30000)])
        order.apply_shipping_fee(Money(27000))
        assert order.amount == Money(60000)
        assert order.total == Money(87000)

    def test_total_items_counts_units(self):
        order = Order(id=None, items=[_make_item(qty=1), _make_item(qty=2)])
        assert order.total_items == 3


class TestOrderTransitions:

    def test_pricing_moves_to_priced(self):
        order = Order(id=1, items=[_make_item()])
        order.apply_shipping_fee(Money(24500))
        assert order.status == OrderStatus.PRICED

    def test_repricing_allowed_before_payment(self):
        order = Order(id=1, items=[_make_item()])
        order.apply_shipping_fee(Money(24500))
        order.apply_shipping_fee(Money(0))
        assert order.shipping_fee == Money(0)

    def test_mark_paid(self):
        order = Order(id=1, items=[_make_item()])
        order.apply_shipping_fee(Money(24500))
        order.mark_paid()
        assert order.is_paid

    def test_unpriced_order_cannot_be_paid(self):
        order = Order(id=1, items=[_make_item()])
        with pytest.raises(InvalidStateError, match="expected PRICED"):
            order.mark_paid()

    def test_paid_twice_rejected(self):
        order = Order(id=1, items=[_make_item()])
        order.apply_shipping_fee(Money(24500))
        order.mark_paid()
        with pytest.raises(InvalidStateError, match="already paid"):
            order.mark_paid()

    def test_paid_order_is_frozen(self):
        order = Order(id=1, items=[_make_item()])
        order.apply_shipping_fee(Money(24500))
        order.mark_paid()
        with pytest.raises(InvalidStateError):
            order.attach_delivery_info(_info())
        with pytest.raises(InvalidStateError):
            order.apply_shipping_fee(Money(0))

    def test_items_cannot_be_added_after_pricing(self):
        order = Order(id=1, items=[_make_item()])
        order.apply_shipping_fee(Money(24500))
        with pytest.raises(InvalidStateError, match="Cannot add items"):
            order.add_item(_make_item())


class TestOrderLineItem:

    def test_line_total_calculation(self):
        assert _make_item(qty=3, price=15000).line_total == Money(45000)

    def test_line_item_is_immutable(self):
        item = _make_item()
        with pytest.raises(dataclasses.FrozenInstanceError):
            item.quantity = Quantity(9)  # type: ignore[misc]
