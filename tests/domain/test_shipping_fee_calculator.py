"""Unit tests for the ShippingFeeCalculator domain service."""

import pytest

from storefront.domain.model.order import Order, OrderLineItem
from storefront.domain.model.value_objects import Money, Quantity
from storefront.domain.service.shipping_fee_calculator import ShippingFeeCalculator


def _order(*lines: tuple[int, int]) -> Order:
    """Build an order from (quantity, unit price) pairs."""
    return Order(
        id=None,
        items=[
            OrderLineItem(
                product_id=str(i),
                product_title=f"Item {i}",
                quantity=Quantity(qty),
                unit_price=Money(price),
            )
            for i, (qty, price) in enumerate(lines, start=1)
        ],
    )


@pytest.fixture
def calculator() -> ShippingFeeCalculator:
    return ShippingFeeCalculator()


class TestShippingFeeBelowThreshold:

    def test_empty_order_pays_base_fee(self, calculator):
        assert calculator.calculate_fee(_order()) == 22000

    def test_single_item(self, calculator):
        assert calculator.calculate_fee(_order((1, 50000))) == 24500

    def test_multiple_items(self, calculator):
        assert calculator.calculate_fee(_order((1, 30000), (2, 20000))) == 29500

    def test_just_below_threshold(self, calculator):
        assert calculator.calculate_fee(_order((1, 99999))) == 24500

    def test_fee_grows_with_item_count(self, calculator):
        fees = [calculator.calculate_fee(_order((qty, 0))) for qty in range(1, 30)]
        assert fees == sorted(fees)
        assert all(b - a == 2500 for a, b in zip(fees, fees[1:]))


class TestShippingFeeDiscount:

    def test_exact_threshold_gets_discount(self, calculator):
        assert calculator.calculate_fee(_order((1, 100000))) == 0

    def test_discount_floors_at_zero(self, calculator):
        assert calculator.calculate_fee(_order((1, 150000))) == 0

    def test_discount_leaves_remainder(self, calculator):
        # raw fee 29500 - 25000
        assert calculator.calculate_fee(_order((3, 50000))) == 4500

    def test_large_order_still_pays_remainder(self, calculator):
        assert calculator.calculate_fee(_order((10, 20000))) == 22000

    @pytest.mark.parametrize("qty", [1, 2, 5, 40])
    @pytest.mark.parametrize("price", [0, 1, 33333, 100000, 250000])
    def test_never_negative(self, calculator, qty, price):
        assert calculator.calculate_fee(_order((qty, price))) >= 0
