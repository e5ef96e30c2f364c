"""Transaction — durable record of a completed payment against an order."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum

from storefront.domain.model.value_objects import Money


class TransactionStatus(Enum):
    COMPLETED = "COMPLETED"


@dataclass
class Transaction:
    """Created by a payment gateway from its callback.

    ``order_id`` stays None until the transaction repository binds it
    to an order on save.
    """

    amount: Money
    content: str
    gateway_reference: str
    bank_code: str = ""
    status: TransactionStatus = TransactionStatus.COMPLETED
    paid_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    order_id: int | None = None

    @property
    def is_completed(self) -> bool:
        return self.status == TransactionStatus.COMPLETED
