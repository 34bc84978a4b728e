"""Tests for bulk product registration."""

from __future__ import annotations

from typing import Any

from goldsphere_contracts.config.models import PaymentConfig
from goldsphere_contracts.domain.envelope import ApiError
from goldsphere_contracts.domain.product import (
    BulkRegistrationResponse,
    BulkRegistrationSummary,
    ProductRegistrationRequest,
)
from goldsphere_contracts.services.products import product_item_schema, register_products
from goldsphere_contracts.validation.schema import validate


class TestRegisterProducts:
    def test_partial_success(self, product_factory: Any) -> None:
        payload = {"products": [{"weight": -1}, product_factory()]}
        response = register_products(payload)
        assert isinstance(response, BulkRegistrationResponse)
        assert response.success is True
        assert response.summary == BulkRegistrationSummary(total=2, successful=1, failed=1)
        failed, ok = response.results
        assert (failed.index, failed.status) == (0, "error")
        assert failed.error
        assert failed.details
        assert (ok.index, ok.status) == (1, "success")
        assert isinstance(ok.product, ProductRegistrationRequest)

    def test_all_failed_still_succeeds(self) -> None:
        response = register_products({"products": [{}, {}]})
        assert isinstance(response, BulkRegistrationResponse)
        assert response.success is True
        assert response.summary.failed == 2

    def test_empty_products(self) -> None:
        response = register_products({"products": []})
        assert isinstance(response, BulkRegistrationResponse)
        assert response.results == []
        assert response.summary == BulkRegistrationSummary(total=0, successful=0, failed=0)

    def test_too_many_products(self, product_factory: Any) -> None:
        committed: list[Any] = []
        payload = {"products": [product_factory() for _ in range(101)]}
        response = register_products(payload, commit=committed.append)
        assert isinstance(response, ApiError)
        assert response.error.code == "BATCH_TOO_LARGE"
        assert committed == []

    def test_missing_products_key(self) -> None:
        response = register_products({"items": []})
        assert isinstance(response, ApiError)
        assert response.error.code == "INVALID_ENVELOPE"

    def test_commit_and_validate_only(self, product_factory: Any) -> None:
        committed: list[Any] = []
        payload = {"products": [product_factory()]}
        register_products(payload, validate_only=True, commit=committed.append)
        assert committed == []
        register_products(payload, commit=committed.append)
        assert len(committed) == 1

    def test_commit_returns_record_id(self, product_factory: Any) -> None:
        payload = {"products": [product_factory(), {"weight": -1}]}
        response = register_products(payload, commit=lambda product: "prod-123")
        assert isinstance(response, BulkRegistrationResponse)
        ok, failed = response.results
        assert isinstance(ok.product, ProductRegistrationRequest)
        assert ok.committed == "prod-123"
        assert failed.status == "error"
        assert failed.committed is None
        assert response.summary == BulkRegistrationSummary(total=2, successful=1, failed=1)

    def test_commit_returns_stored_row(self, product_factory: Any) -> None:
        payload = {"products": [product_factory(name="A"), product_factory(name="B")]}
        response = register_products(payload, commit=lambda product: {"id": "prod-1"})
        assert isinstance(response, BulkRegistrationResponse)
        assert [r.committed for r in response.results] == [{"id": "prod-1"}, {"id": "prod-1"}]
        assert [r.product.name for r in response.results if r.product] == ["A", "B"]
        assert response.dump()["results"][0]["committed"] == {"id": "prod-1"}

    def test_commit_returning_none_omits_committed(self, product_factory: Any) -> None:
        response = register_products({"products": [product_factory()]}, commit=lambda p: None)
        assert isinstance(response, BulkRegistrationResponse)
        assert "committed" not in response.dump()["results"][0]

    def test_wire_form(self, product_factory: Any) -> None:
        response = register_products({"products": [product_factory(), {"name": ""}]})
        assert isinstance(response, BulkRegistrationResponse)
        wire = response.dump()
        assert wire["summary"] == {"total": 2, "successful": 1, "failed": 1}
        assert wire["results"][0]["product"]["weightUnit"] == "troy_ounces"
        assert "product" not in wire["results"][1]


class TestConfigPolicy:
    def test_without_config_any_currency(self, product_factory: Any) -> None:
        assert validate(product_item_schema(), product_factory(currency="CHF")).valid

    def test_unsupported_currency(
        self, product_factory: Any, payment_config: PaymentConfig
    ) -> None:
        result = validate(product_item_schema(payment_config), product_factory(currency="CHF"))
        assert result.paths == ["currency"]

    def test_price_over_limit(self, product_factory: Any, payment_config: PaymentConfig) -> None:
        response = register_products(
            {"products": [product_factory(price=20_000_000), product_factory()]},
            config=payment_config,
        )
        assert isinstance(response, BulkRegistrationResponse)
        assert response.results[0].error is not None
        assert response.results[0].error.startswith("price: ")
        assert response.summary.successful == 1
