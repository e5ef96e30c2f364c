"""Unit tests for the DeliveryInfoValidator domain service."""

import logging

import pytest

from storefront.domain.exceptions import ValidationError
from storefront.domain.service.delivery_info_validator import DeliveryInfoValidator


def _valid_info(**overrides) -> dict:
    info = {
        "phone": "0912345678",
        "name": "Nguyễn Văn An",
        "address": "123 Lê Lợi, District 1",
    }
    info.update(overrides)
    return info


@pytest.fixture
def validator() -> DeliveryInfoValidator:
    return DeliveryInfoValidator()


class TestDeliveryInfoValidatorHappyPath:

    def test_returns_delivery_info(self, validator):
        info = validator.validate(_valid_info())
        assert info.phone == "0912345678"
        assert info.name == "Nguyễn Văn An"
        assert info.address == "123 Lê Lợi, District 1"
        assert info.extras == ()

    def test_optional_fields_kept_unvalidated(self, validator):
        info = validator.validate(_valid_info(instructions="Call before delivery!!"))
        assert info.instructions == "Call before delivery!!"

    def test_logs_success(self, validator, caplog):
        with caplog.at_level(logging.INFO):
            validator.validate(_valid_info())
        assert "Delivery info validation successful" in caplog.text

    def test_process_logs_the_record(self, validator, caplog):
        with caplog.at_level(logging.INFO):
            validator.process(_valid_info())
        assert "Process delivery info" in caplog.text
        assert "0912345678" in caplog.text


class TestDeliveryInfoValidatorFailures:

    def test_null(self, validator):
        with pytest.raises(ValidationError, match="^Delivery Info cannot be null$"):
            validator.validate(None)

    def test_empty(self, validator):
        with pytest.raises(ValidationError, match="^Delivery Info cannot be empty$"):
            validator.validate({})

    def test_missing_fields_reported_in_order(self, validator):
        info = {"name": "John Doe"}
        with pytest.raises(ValidationError, match="^Phone number is required$"):
            validator.validate(info)

        info["phone"] = "0912345678"
        with pytest.raises(ValidationError, match="^Address is required$"):
            validator.validate(info)

    def test_missing_name(self, validator):
        with pytest.raises(ValidationError, match="^Name is required$"):
            validator.validate({"phone": "0912345678", "address": "123 Main Street"})

    def test_phone_checked_first(self, validator):
        info = {"phone": "invalid", "name": "John123", "address": "a"}
        with pytest.raises(ValidationError, match="^Invalid phone number format$"):
            validator.validate(info)

    def test_invalid_name(self, validator):
        with pytest.raises(ValidationError, match="^Invalid name format$"):
            validator.validate(_valid_info(name="John123"))

    def test_invalid_address(self, validator):
        with pytest.raises(ValidationError, match="^Invalid address format$"):
            validator.validate(_valid_info(address="a"))

    def test_same_input_same_reason(self, validator):
        info = _valid_info(address="Street|123")
        reasons = []
        for _ in range(2):
            with pytest.raises(ValidationError) as exc_info:
                validator.validate(info)
            reasons.append(str(exc_info.value))
        assert reasons == ["Invalid address format", "Invalid address format"]


class TestValidatedDeliveryInfo:

    def test_extras_cannot_change_after_validation(self, validator):
        source = _valid_info(instructions="Leave at the door")
        info = validator.validate(source)

        source["instructions"] = "Changed"
        assert info.instructions == "Leave at the door"
        assert not hasattr(info.extras, "__setitem__")

    def test_is_hashable(self, validator):
        first = validator.validate(_valid_info(instructions="Gọi trước", floor="3"))
        second = validator.validate(_valid_info(floor="3", instructions="Gọi trước"))
        assert hash(first) == hash(second)
        assert first.to_mapping()["floor"] == "3"
