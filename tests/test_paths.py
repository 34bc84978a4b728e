"""Tests for dot-path helpers."""

import pytest

from goldsphere_contracts.domain.product import Specifications
from goldsphere_contracts.domain.types import Currency
from goldsphere_contracts.domain.payment import CreatePaymentIntentRequest
from goldsphere_contracts.paths import get_path, join_loc, split_path


class TestSplitJoin:
    def test_split(self) -> None:
        assert split_path("security.fraudDetection.enabled") == [
            "security",
            "fraudDetection",
            "enabled",
        ]

    @pytest.mark.parametrize("path", ["", "a..b", ".a", "a."])
    def test_split_rejects_empty_segments(self, path: str) -> None:
        with pytest.raises(ValueError, match="Invalid dot-path"):
            split_path(path)

    def test_join_loc_with_indexes(self) -> None:
        assert join_loc(("products", 3, "weight")) == "products.3.weight"
        assert join_loc(()) == ""


class TestGetPath:
    def test_nested_mappings_and_lists(self) -> None:
        data = {"products": [{"weight": 1}, {"weight": 5}]}
        assert get_path(data, "products.1.weight") == 5

    def test_missing_segments_return_none(self) -> None:
        data = {"products": [{"weight": 1}]}
        assert get_path(data, "products.4.weight") is None
        assert get_path(data, "orders.0") is None
        assert get_path(data, "products.x") is None

    def test_models_by_alias_or_name(self) -> None:
        req = CreatePaymentIntentRequest(amount=100, currency=Currency.EUR, order_id="ord_1")
        assert get_path(req, "orderId") == "ord_1"
        assert get_path(req, "order_id") == "ord_1"

    def test_model_extras(self) -> None:
        spec = Specifications.model_validate({"edge": "reeded"})
        assert get_path(spec, "edge") == "reeded"
