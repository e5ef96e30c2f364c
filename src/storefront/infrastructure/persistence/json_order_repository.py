"""Orders kept as a JSON array of records, one per order ID.

A record that is already PAID is never overwritten by an unpaid version
of the same order, so a stale copy cannot undo a settlement.
"""

from __future__ import annotations

from datetime import datetime
from pathlib import Path

from storefront.domain.exceptions import InvalidStateError, PersistenceError
from storefront.domain.model.delivery_info import DeliveryInfo
from storefront.domain.model.order import Order, OrderLineItem, OrderStatus
from storefront.domain.model.value_objects import Money, Quantity
from storefront.domain.repository.order_repository import OrderRepository
from storefront.infrastructure.persistence.json_file import JsonFile


def _line_record(item: OrderLineItem) -> dict:
    return {
        "product_id": item.product_id,
        "product_title": item.product_title,
        "quantity": item.quantity.value,
        "unit_price": item.unit_price.amount,
        "currency": item.unit_price.currency,
    }


def _order_record(order: Order) -> dict:
    info = order.delivery_info
    return {
        "id": order.id,
        "status": order.status.value,
        "created_at": order.created_at.isoformat(),
        "shipping_fee": order.shipping_fee.amount,
        "currency": order.shipping_fee.currency,
        "delivery_info": info.to_mapping() if info else None,
        "items": [_line_record(item) for item in order.items],
    }


def _order_from(record: dict) -> Order:
    info = record.get("delivery_info")
    return Order(
        id=record["id"],
        items=[
            OrderLineItem(
                product_id=line["product_id"],
                product_title=line["product_title"],
                quantity=Quantity(line["quantity"]),
                unit_price=Money(line["unit_price"], line.get("currency", "VND")),
            )
            for line in record["items"]
        ],
        delivery_info=DeliveryInfo.from_mapping(info) if info else None,
        shipping_fee=Money(record["shipping_fee"], record.get("currency", "VND")),
        status=OrderStatus(record["status"]),
        created_at=datetime.fromisoformat(record["created_at"]),
    )


class JsonOrderRepository(OrderRepository):

    def __init__(self, file_path: Path) -> None:
        self._file = JsonFile(file_path, empty=[])

    def next_id(self) -> int:
        return max(self._records(), default=0) + 1

    def get_by_id(self, order_id: int) -> Order | None:
        record = self._records().get(order_id)
        return _order_from(record) if record else None

    def save(self, order: Order) -> None:
        """Insert or replace *order*; raises PersistenceError if the file
        cannot be written."""
        with self._file.lock:
            records = self._records()
            new = order.id is None
            if new:
                order.id = max(records, default=0) + 1

            stored = records.get(order.id)
            if stored and stored["status"] == OrderStatus.PAID.value and not order.is_paid:
                raise InvalidStateError(f"Order #{order.id} is already paid")

            records[order.id] = _order_record(order)
            try:
                self._file.write(list(records.values()))
            except PersistenceError:
                if new:
                    order.id = None
                raise

    def _records(self) -> dict[int, dict]:
        return {record["id"]: record for record in self._file.read()}
