"""Application service: Place Order use case.

Orchestrates the checkout steps between the cart, the catalog and the
order store. Delivery info is validated before the order is priced, and
nothing is persisted unless every step succeeded.
"""

from __future__ import annotations

from collections.abc import Mapping

from storefront.application.dto import InvoiceDTO, to_invoice_dto
from storefront.domain.model.order import Order
from storefront.domain.model.value_objects import Money
from storefront.domain.repository.cart_repository import CartRepository
from storefront.domain.repository.order_repository import OrderRepository
from storefront.domain.repository.product_repository import ProductRepository
from storefront.domain.service.delivery_info_validator import DeliveryInfoValidator
from storefront.domain.service.order_assembler import OrderAssembler
from storefront.domain.service.shipping_fee_calculator import ShippingFeeCalculator


class PlaceOrderHandler:

    def __init__(
        self,
        cart_repo: CartRepository,
        product_repo: ProductRepository,
        order_repo: OrderRepository,
    ) -> None:
        self._cart_repo = cart_repo
        self._product_repo = product_repo
        self._order_repo = order_repo
        self._assembler = OrderAssembler()
        self._validator = DeliveryInfoValidator()
        self._shipping = ShippingFeeCalculator()

    def place_order(self) -> None:
        """Check that every cart line can still be supplied."""
        cart = self._cart_repo.get()
        products = {p.id: p for p in self._product_repo.list_all()}
        cart.check_availability(products)

    def create_order(self) -> Order:
        return self._assembler.create_order(self._cart_repo.get())

    def handle(self, delivery_info: Mapping[str, str] | None) -> InvoiceDTO:
        """Turn the active cart into a priced, persisted order.

        Steps:
        1. Check product availability for the cart.
        2. Snapshot the cart into a new Order.
        3. Validate the delivery info and attach it.
        4. Calculate and apply the shipping fee.
        5. Persist the order (assigns its ID) and return the invoice.
        """
        self.place_order()
        order = self.create_order()

        info = self._validator.process(delivery_info)
        order.attach_delivery_info(info)

        fee = self._shipping.calculate_fee(order)
        order.apply_shipping_fee(Money(fee))

        self._order_repo.save(order)

        invoice = self._assembler.create_invoice(order)
        return to_invoice_dto(invoice)
