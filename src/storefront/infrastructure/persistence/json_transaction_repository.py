"""JSON-file-backed implementation of TransactionRepository.

Check-and-insert runs under the file's lock, so two settlements of one
order within this process cannot both be recorded.
"""

from __future__ import annotations

from datetime import datetime
from pathlib import Path

from storefront.domain.exceptions import PersistenceError
from storefront.domain.model.transaction import Transaction, TransactionStatus
from storefront.domain.model.value_objects import Money
from storefront.domain.repository.transaction_repository import TransactionRepository
from storefront.infrastructure.persistence.json_file import JsonFile


class JsonTransactionRepository(TransactionRepository):

    def __init__(self, file_path: Path) -> None:
        self._file = JsonFile(file_path, empty=[])

    def get_by_order_id(self, order_id: int) -> Transaction | None:
        for record in self._file.read():
            if record["order_id"] == order_id:
                return self._to_domain(record)
        return None

    def save(self, transaction: Transaction, order_id: int) -> None:
        with self._file.lock:
            records = self._file.read()
            if any(record["order_id"] == order_id for record in records):
                raise PersistenceError(
                    f"Order #{order_id} already has a recorded transaction"
                )

            transaction.order_id = order_id
            try:
                self._file.write(records + [self._to_record(transaction)])
            except PersistenceError:
                transaction.order_id = None
                raise

    def remove(self, order_id: int) -> None:
        with self._file.lock:
            records = self._file.read()
            kept = [record for record in records if record["order_id"] != order_id]
            if len(kept) != len(records):
                self._file.write(kept)

    @staticmethod
    def _to_record(transaction: Transaction) -> dict:
        return {
            "order_id": transaction.order_id,
            "amount": transaction.amount.amount,
            "currency": transaction.amount.currency,
            "content": transaction.content,
            "gateway_reference": transaction.gateway_reference,
            "bank_code": transaction.bank_code,
            "status": transaction.status.value,
            "paid_at": transaction.paid_at.isoformat(),
        }

    @staticmethod
    def _to_domain(record: dict) -> Transaction:
        return Transaction(
            amount=Money(record["amount"], record.get("currency", "VND")),
            content=record["content"],
            gateway_reference=record["gateway_reference"],
            bank_code=record.get("bank_code", ""),
            status=TransactionStatus(record["status"]),
            paid_at=datetime.fromisoformat(record["paid_at"]),
            order_id=record["order_id"],
        )
