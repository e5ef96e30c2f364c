"""DeliveryInfo value object.

Only ever built from a mapping that already passed the delivery info
validator, so an invalid instance never reaches pricing or payment.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass

REQUIRED_FIELDS = ("phone", "name", "address")


@dataclass(frozen=True)
class DeliveryInfo:
    """Recipient details. Optional fields such as instructions live in
    ``extras``, stored as sorted ``(key, value)`` pairs so the record
    stays immutable and hashable.
    """

    phone: str
    name: str
    address: str
    extras: tuple[tuple[str, str], ...] = ()

    def __post_init__(self) -> None:
        pairs = self.extras.items() if isinstance(self.extras, Mapping) else self.extras
        object.__setattr__(self, "extras", tuple(sorted(pairs)))

    @property
    def instructions(self) -> str | None:
        return dict(self.extras).get("instructions")

    @staticmethod
    def from_mapping(info: Mapping[str, str]) -> DeliveryInfo:
        return DeliveryInfo(
            phone=info["phone"],
            name=info["name"],
            address=info["address"],
            extras=tuple((k, v) for k, v in info.items() if k not in REQUIRED_FIELDS),
        )

    def to_mapping(self) -> dict[str, str]:
        return {
            "phone": self.phone,
            "name": self.name,
            "address": self.address,
            **dict(self.extras),
        }
