"""Application service: Show Order and Show Invoice use cases (queries)."""

from __future__ import annotations

from storefront.application.dto import InvoiceDTO, OrderDTO, to_invoice_dto, to_order_dto
from storefront.domain.exceptions import EntityNotFoundError
from storefront.domain.model.order import Order
from storefront.domain.repository.order_repository import OrderRepository
from storefront.domain.service.order_assembler import OrderAssembler


def _load(order_repo: OrderRepository, order_id: int) -> Order:
    order = order_repo.get_by_id(order_id)
    if order is None:
        raise EntityNotFoundError(f"Order #{order_id} not found")
    return order


class ShowOrderHandler:

    def __init__(self, order_repo: OrderRepository) -> None:
        self._order_repo = order_repo

    def handle(self, order_id: int) -> OrderDTO:
        return to_order_dto(_load(self._order_repo, order_id))


class ShowInvoiceHandler:

    def __init__(self, order_repo: OrderRepository) -> None:
        self._order_repo = order_repo

    def handle(self, order_id: int) -> InvoiceDTO:
        order = _load(self._order_repo, order_id)
        return to_invoice_dto(OrderAssembler().create_invoice(order))
