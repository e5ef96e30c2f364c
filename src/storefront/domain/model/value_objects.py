"""Money and Quantity, the two value objects every price calculation uses.

Both reject bad input on construction, so a line total or shipping fee
can never be built from a negative or fractional amount.
"""

from __future__ import annotations

from dataclasses import dataclass

from storefront.domain.exceptions import ValidationError


def _require_int(value: object, what: str) -> None:
    # bool is an int subclass but never a meaningful amount
    if not isinstance(value, int) or isinstance(value, bool):
        raise ValidationError(f"{what} must be an integer, got {type(value).__name__}")


@dataclass(frozen=True)
class Money:
    """Whole VND amount. The currency has no minor unit."""

    amount: int
    currency: str = "VND"

    def __post_init__(self) -> None:
        _require_int(self.amount, "Money amount")
        if self.amount < 0:
            raise ValidationError(f"Money amount cannot be negative, got {self.amount}")

    @classmethod
    def zero(cls, currency: str = "VND") -> Money:
        return cls(0, currency)

    def __add__(self, other: Money) -> Money:
        if self.currency != other.currency:
            raise ValidationError(f"Cannot combine {self.currency} with {other.currency}")
        return Money(self.amount + other.amount, self.currency)

    def __mul__(self, units: int) -> Money:
        if not isinstance(units, int):
            raise TypeError(f"Can only multiply Money by int, got {type(units).__name__}")
        return Money(self.amount * units, self.currency)

    def __str__(self) -> str:
        # 150000 -> "150,000 VND"
        return f"{self.amount:,} {self.currency}"


@dataclass(frozen=True)
class Quantity:
    """Units of one product on a cart or order line; always at least 1."""

    value: int

    def __post_init__(self) -> None:
        _require_int(self.value, "Quantity")
        if self.value <= 0:
            raise ValidationError("Quantity must be positive")

    def __add__(self, other: Quantity) -> Quantity:
        return Quantity(self.value + other.value)

    def __str__(self) -> str:
        return str(self.value)
