"""Domain service: Delivery Info validation.

Runs the field validators over the raw mapping collected from the
customer. Checks run in a fixed order and the first failure decides the
reported reason, so the same input always yields the same message.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping

from storefront.domain.exceptions import ValidationError
from storefront.domain.model.delivery_info import DeliveryInfo
from storefront.domain.service.field_validators import (
    validate_address,
    validate_name,
    validate_phone_number,
)

logger = logging.getLogger(__name__)

# (key, missing reason, invalid reason, predicate) in evaluation order
_FIELD_RULES = (
    ("phone", "Phone number is required", "Invalid phone number format", validate_phone_number),
    ("name", "Name is required", "Invalid name format", validate_name),
    ("address", "Address is required", "Invalid address format", validate_address),
)


class DeliveryInfoValidator:

    def process(self, info: Mapping[str, str] | None) -> DeliveryInfo:
        """Log the submitted record, then validate it."""
        logger.info("Process delivery info")
        logger.info("%s", dict(info) if info is not None else None)
        return self.validate(info)

    def validate(self, info: Mapping[str, str] | None) -> DeliveryInfo:
        """Validate *info* and return it as a DeliveryInfo.

        Raises ValidationError with the reason of the first failing check.
        Keys other than phone, name and address are carried along as
        optional extras without validation.
        """
        if info is None:
            raise ValidationError("Delivery Info cannot be null")
        if not info:
            raise ValidationError("Delivery Info cannot be empty")

        for key, missing_reason, invalid_reason, is_valid in _FIELD_RULES:
            value = info.get(key)
            if value is None:
                raise ValidationError(missing_reason)
            if not is_valid(value):
                raise ValidationError(invalid_reason)

        logger.info("Delivery info validation successful")
        return DeliveryInfo.from_mapping(info)
