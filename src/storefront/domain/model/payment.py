"""Payment attempt state machine and its outcome.

One PaymentAttempt covers a single try at paying an order:

    INITIATED -> URL_GENERATED -> SETTLED | FAILED

A callback may also settle an attempt straight from INITIATED, since the
process that receives the gateway callback is not necessarily the one
that generated the redirect URL. SETTLED and FAILED are terminal; a new
attempt starts from INITIATED.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from storefront.domain.exceptions import InvalidStateError


class PaymentState(Enum):
    INITIATED = "INITIATED"
    URL_GENERATED = "URL_GENERATED"
    SETTLED = "SETTLED"
    FAILED = "FAILED"


PAYMENT_TRANSITIONS: dict[PaymentState, set[PaymentState]] = {
    PaymentState.INITIATED: {
        PaymentState.URL_GENERATED,
        PaymentState.SETTLED,
        PaymentState.FAILED,
    },
    PaymentState.URL_GENERATED: {PaymentState.SETTLED, PaymentState.FAILED},
    PaymentState.SETTLED: set(),
    PaymentState.FAILED: set(),
}


class PaymentResult(Enum):
    SUCCESS = "SUCCESS"
    FAILURE = "FAILURE"


@dataclass(frozen=True)
class PaymentOutcome:
    """What the caller is told about a payment. Never persisted."""

    result: PaymentResult
    message: str

    @property
    def succeeded(self) -> bool:
        return self.result == PaymentResult.SUCCESS

    @staticmethod
    def success(message: str) -> PaymentOutcome:
        return PaymentOutcome(PaymentResult.SUCCESS, message)

    @staticmethod
    def failure(message: str) -> PaymentOutcome:
        return PaymentOutcome(PaymentResult.FAILURE, message)


@dataclass
class PaymentAttempt:

    state: PaymentState = PaymentState.INITIATED

    @property
    def is_terminal(self) -> bool:
        return not PAYMENT_TRANSITIONS[self.state]

    def url_generated(self) -> None:
        self._transition(PaymentState.URL_GENERATED)

    def settle(self) -> None:
        self._transition(PaymentState.SETTLED)

    def fail(self) -> None:
        self._transition(PaymentState.FAILED)

    def _transition(self, target: PaymentState) -> None:
        if target not in PAYMENT_TRANSITIONS[self.state]:
            raise InvalidStateError(
                f"Invalid payment transition: {self.state.value} -> {target.value}"
            )
        self.state = target
