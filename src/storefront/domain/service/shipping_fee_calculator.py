"""Domain service: Shipping Fee calculation.

Inner-city delivery costs a base fee plus a fee per unit shipped. Orders
whose amount reaches the free-shipping threshold get a flat discount,
and the fee never drops below zero. All amounts are whole VND.
"""

from __future__ import annotations

import logging

from storefront.domain.model.order import Order

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Constants for business rules
# ---------------------------------------------------------------------------
BASE_FEE = 22_000
PER_ITEM_FEE = 2_500
FREE_SHIPPING_THRESHOLD = 100_000
MAX_DISCOUNT = 25_000


class ShippingFeeCalculator:

    def calculate_fee(self, order: Order) -> int:
        # TODO: confirm with the business whether the discount should be
        # capped at the actual fee instead of subtracting MAX_DISCOUNT flat.
        fee = BASE_FEE + order.total_items * PER_ITEM_FEE

        amount = order.amount.amount
        if amount >= FREE_SHIPPING_THRESHOLD:
            fee = max(0, fee - MAX_DISCOUNT)

        logger.info("Order amount: %s -- shipping fee: %s", amount, fee)
        return fee
