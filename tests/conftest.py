"""Shared pytest fixtures and test helpers for goldsphere-contracts tests."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import pytest
from click.testing import CliRunner

from goldsphere_contracts.config.defaults import default_payment_config
from goldsphere_contracts.config.discovery import CONFIG_ENV_VAR
from goldsphere_contracts.config.env import ENV_VAR_MAPPINGS
from goldsphere_contracts.config.models import PaymentConfig
from goldsphere_contracts.config.resolver import resolve
from goldsphere_contracts.config.settings import GsSettings


@pytest.fixture(autouse=True)
def _clean_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Strip payment and gsctl env vars so the host shell cannot leak in."""
    for binding in ENV_VAR_MAPPINGS:
        monkeypatch.delenv(binding.env_var, raising=False)
    monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)
    for field in GsSettings.model_fields:
        monkeypatch.delenv(f"GSCTL_{field.upper()}", raising=False)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def _isolated_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run from an empty temp directory so no goldsphere.toml is discovered.

    Use via ``@pytest.mark.usefixtures("_isolated_cwd")`` on command test classes.
    """
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def webhooks_section() -> dict[str, Any]:
    """A valid ``webhooks`` section; the one section defaults never provide."""
    return {
        "endpointUrl": "https://api.goldsphere.example/webhooks/payments",
        "enabledEvents": ["payment_intent.succeeded", "payment_intent.payment_failed"],
        "secret": "whsec_test_secret",
        "retryConfig": {"maxAttempts": 3, "backoffMultiplier": 2, "maxDelay": 60000},
        "timeout": 30,
    }


@pytest.fixture
def file_config(webhooks_section: dict[str, Any]) -> dict[str, Any]:
    """File layer that completes the defaults."""
    return {"webhooks": webhooks_section}


@pytest.fixture
def payment_config(file_config: dict[str, Any]) -> PaymentConfig:
    """Resolved configuration from defaults plus the file layer."""
    config = resolve(default_payment_config(), file_config, {})
    assert isinstance(config, PaymentConfig), config
    return config


@pytest.fixture
def card_method() -> dict[str, Any]:
    return {
        "id": "pm_card_1",
        "type": "card",
        "last4": "4242",
        "brand": "visa",
        "expiryMonth": 12,
        "expiryYear": 2032,
        "isDefault": True,
        "createdAt": "2026-01-15T10:00:00Z",
        "updatedAt": "2026-01-15T10:00:00Z",
    }


@pytest.fixture
def bank_transfer_method() -> dict[str, Any]:
    return {
        "id": "pm_bank_1",
        "type": "bank_transfer",
        "bankName": "Zürcher Kantonalbank",
        "accountLast4": "1234",
        "createdAt": "2026-01-15T10:00:00Z",
        "updatedAt": "2026-01-15T10:00:00Z",
    }


def make_product(**overrides: Any) -> dict[str, Any]:
    """A valid product registration payload with *overrides* applied."""
    product: dict[str, Any] = {
        "name": "Britannia 1 oz Gold Coin",
        "type": "coin",
        "metal": "gold",
        "weight": 1,
        "weightUnit": "troy_ounces",
        "purity": 0.9999,
        "price": 215_000,
        "currency": "EUR",
        "producer": "Royal Mint",
        "country": "United Kingdom",
        "year": 2026,
    }
    product.update(overrides)
    return product


@pytest.fixture
def product_factory() -> Any:
    """Callable building product payloads; keyword overrides are applied."""
    return make_product


@pytest.fixture
def write_config(tmp_path: Path, file_config: dict[str, Any]) -> Any:
    """Write *file_config* (plus overrides) as JSON and return the path.

    Pass the path to ``gsctl -c``.
    """

    def _write(name: str = "payment.json", **sections: Any) -> Path:
        path = tmp_path / name
        path.write_text(json.dumps({**file_config, **sections}))
        return path

    return _write
