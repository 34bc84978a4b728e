"""Tests for envelope conversions."""

from __future__ import annotations

from typing import Any

from goldsphere_contracts.domain.envelope import ApiError, ApiSuccess
from goldsphere_contracts.services.batch import BatchRejection
from goldsphere_contracts.services.responses import (
    envelope_from_result,
    rejection_envelope,
    wire_value,
)
from goldsphere_contracts.validation.registry import get_schema
from goldsphere_contracts.validation.schema import validate


class TestWireValue:
    def test_model_dumped(self, product_factory: Any) -> None:
        value = validate(get_schema("product_registration"), product_factory()).value
        assert wire_value(value)["weightUnit"] == "troy_ounces"

    def test_plain_values_pass_through(self) -> None:
        assert wire_value({"a": 1}) == {"a": 1}
        assert wire_value(None) is None


class TestEnvelopeFromResult:
    def test_success(self, card_method: dict[str, Any]) -> None:
        result = validate(get_schema("payment_method"), card_method)
        envelope = envelope_from_result(result)
        assert isinstance(envelope, ApiSuccess)
        assert envelope.data["last4"] == "4242"

    def test_failure(self, card_method: dict[str, Any]) -> None:
        card_method["last4"] = "42"
        result = validate(get_schema("payment_method"), card_method)
        envelope = envelope_from_result(result, message="Invalid payment method")
        assert isinstance(envelope, ApiError)
        assert envelope.error.code == "VALIDATION_ERROR"
        assert envelope.error.message == "Invalid payment method"
        assert envelope.error.details is not None
        assert [d.path for d in envelope.error.details] == ["last4"]


def test_rejection_envelope() -> None:
    envelope = rejection_envelope(
        BatchRejection(code="BATCH_TOO_LARGE", message="too many", received=101, limit=100)
    )
    assert envelope.dump() == {
        "success": False,
        "error": {"code": "BATCH_TOO_LARGE", "message": "too many"},
    }
