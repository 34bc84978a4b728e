"""Tests for layered payment configuration resolution."""

from __future__ import annotations

import copy
import logging
from typing import Any

import pytest
from pydantic import ValidationError

from goldsphere_contracts.config.defaults import default_payment_config
from goldsphere_contracts.config.env import EnvBinding
from goldsphere_contracts.config.models import PaymentConfig
from goldsphere_contracts.config.resolver import ConfigError, ConfigIssueCode, resolve


class TestResolveLayers:
    def test_defaults_plus_file(self, file_config: dict[str, Any]) -> None:
        config = resolve(default_payment_config(), file_config, {})
        assert isinstance(config, PaymentConfig)
        assert config.currency.default_currency == "EUR"
        assert config.webhooks.timeout == 30
        assert config.providers.stripe is None

    def test_file_overrides_defaults(self, file_config: dict[str, Any]) -> None:
        file_config["environment"] = {"debug": False}
        file_config["currency"] = {"supportedCurrencies": ["CHF"]}
        config = resolve(default_payment_config(), file_config, {})
        assert isinstance(config, PaymentConfig)
        assert config.environment.debug is False
        assert config.environment.environment == "development"
        assert config.currency.supported_currencies == ["CHF"]

    def test_env_overrides_file(self, file_config: dict[str, Any]) -> None:
        file_config["environment"] = {"debug": True}
        env = {
            "PAYMENT_DEBUG": "false",
            "PAYMENT_ENVIRONMENT": "staging",
            "PAYMENT_WEBHOOK_SECRET": "whsec_from_env",
            "PAYMENT_REQUIRE_3DS": "false",
        }
        config = resolve(default_payment_config(), file_config, env)
        assert isinstance(config, PaymentConfig)
        assert config.environment.debug is False
        assert config.environment.environment == "staging"
        assert config.webhooks.secret == "whsec_from_env"
        assert config.security.require_3d_secure is False

    def test_env_creates_provider_section(self, file_config: dict[str, Any]) -> None:
        env = {"STRIPE_PUBLISHABLE_KEY": "pk_test_1", "STRIPE_SECRET_KEY": "sk_test_1"}
        config = resolve(default_payment_config(), file_config, env)
        assert isinstance(config, PaymentConfig)
        assert config.providers.stripe is not None
        assert config.providers.stripe.secret_key == "sk_test_1"

    def test_paypal_environment_from_env(self, file_config: dict[str, Any]) -> None:
        env = {"PAYPAL_CLIENT_ID": "client", "PAYPAL_ENVIRONMENT": "production"}
        config = resolve(default_payment_config(), file_config, env)
        assert isinstance(config, PaymentConfig)
        assert config.providers.paypal is not None
        assert config.providers.paypal.environment == "production"

    def test_empty_env_value_is_ignored(self, file_config: dict[str, Any]) -> None:
        config = resolve(default_payment_config(), file_config, {"PAYMENT_DEBUG": ""})
        assert isinstance(config, PaymentConfig)
        assert config.environment.debug is True

    def test_unrelated_env_ignored(self, file_config: dict[str, Any]) -> None:
        config = resolve(default_payment_config(), file_config, {"HOME": "/root"})
        assert isinstance(config, PaymentConfig)

    def test_webhooks_from_env_only(self) -> None:
        file_config = {
            "webhooks": {
                "enabledEvents": [],
                "retryConfig": {"maxAttempts": 1, "backoffMultiplier": 1, "maxDelay": 0},
                "timeout": 10,
            }
        }
        env = {
            "PAYMENT_WEBHOOK_URL": "https://example.test/hook",
            "PAYMENT_WEBHOOK_SECRET": "s",
        }
        config = resolve(default_payment_config(), file_config, env)
        assert isinstance(config, PaymentConfig)
        assert config.webhooks.endpoint_url == "https://example.test/hook"

    def test_custom_bindings(self, file_config: dict[str, Any]) -> None:
        bindings = (EnvBinding("GS_TIMEOUT", "webhooks.timeout"),)
        env = {"GS_TIMEOUT": "45"}
        config = resolve(default_payment_config(), file_config, env, bindings=bindings)
        assert isinstance(config, PaymentConfig)
        assert config.webhooks.timeout == 45

    def test_later_binding_wins(self, file_config: dict[str, Any]) -> None:
        bindings = (
            EnvBinding("FIRST", "environment.apiBaseUrl"),
            EnvBinding("SECOND", "environment.apiBaseUrl"),
        )
        env = {"FIRST": "https://one.test", "SECOND": "https://two.test"}
        config = resolve(default_payment_config(), file_config, env, bindings=bindings)
        assert isinstance(config, PaymentConfig)
        assert config.environment.api_base_url == "https://two.test"


class TestResolveIssues:
    def test_invalid_enum_env_value(self, file_config: dict[str, Any]) -> None:
        result = resolve(default_payment_config(), file_config, {"PAYMENT_ENVIRONMENT": "bogus"})
        assert isinstance(result, ConfigError)
        assert result.paths == ["environment.environment"]
        issue = result.issues[0]
        assert issue.code is ConfigIssueCode.INVALID_ENV_VALUE
        assert issue.env_var == "PAYMENT_ENVIRONMENT"
        assert "bogus" in issue.message

    def test_all_env_issues_collected(self, file_config: dict[str, Any]) -> None:
        env = {"PAYMENT_DEBUG": "yes", "PAYMENT_FRAUD_DETECTION": "1", "PAYPAL_ENVIRONMENT": "live"}
        result = resolve(default_payment_config(), file_config, env)
        assert isinstance(result, ConfigError)
        assert result.paths == [
            "providers.paypal.environment",
            "environment.debug",
            "security.fraudDetection.enabled",
        ]

    def test_missing_required_section(self) -> None:
        result = resolve(default_payment_config(), None, {})
        assert isinstance(result, ConfigError)
        assert result.paths == ["webhooks"]
        assert result.issues[0].code is ConfigIssueCode.MISSING_SECTION

    def test_every_missing_section_reported(self) -> None:
        result = resolve({}, None, {})
        assert isinstance(result, ConfigError)
        assert result.paths == [
            "currency",
            "fees",
            "security",
            "compliance",
            "webhooks",
            "environment",
        ]

    def test_field_errors_have_dot_paths(self, file_config: dict[str, Any]) -> None:
        file_config["currency"] = {"currencySettings": {"EUR": {"minAmount": -1}}}
        file_config["fees"] = {"processingFeePercentage": 120}
        result = resolve(default_payment_config(), file_config, {})
        assert isinstance(result, ConfigError)
        assert "currency.currencySettings.EUR.minAmount" in result.paths
        assert "fees.processingFeePercentage" in result.paths
        assert all(i.code is ConfigIssueCode.INVALID_FIELD for i in result.issues)

    def test_unknown_key_rejected(self, file_config: dict[str, Any]) -> None:
        file_config["environment"] = {"region": "eu-central-1"}
        result = resolve(default_payment_config(), file_config, {})
        assert isinstance(result, ConfigError)
        assert result.paths == ["environment.region"]

    def test_section_of_wrong_shape(self, file_config: dict[str, Any]) -> None:
        file_config["cache"] = "redis"
        result = resolve(default_payment_config(), file_config, {})
        assert isinstance(result, ConfigError)
        assert result.issues[0].path == "cache"
        assert result.issues[0].code is ConfigIssueCode.INVALID_STRUCTURE

    def test_env_into_non_mapping(self, file_config: dict[str, Any]) -> None:
        file_config["providers"] = "none"
        result = resolve(default_payment_config(), file_config, {"STRIPE_SECRET_KEY": "sk"})
        assert isinstance(result, ConfigError)
        assert result.issues[0].code is ConfigIssueCode.INVALID_STRUCTURE
        assert result.issues[0].env_var == "STRIPE_SECRET_KEY"

    def test_message_counts_issues(self) -> None:
        result = resolve(default_payment_config(), None, {})
        assert isinstance(result, ConfigError)
        assert result.message == "Payment configuration is invalid (1 issue)"


class TestResolvePurity:
    def test_inputs_not_mutated(self, file_config: dict[str, Any]) -> None:
        defaults = default_payment_config()
        snapshot = (copy.deepcopy(defaults), copy.deepcopy(file_config))
        resolve(defaults, file_config, {"PAYMENT_DEBUG": "false", "STRIPE_PUBLISHABLE_KEY": "pk"})
        assert (defaults, file_config) == snapshot

    def test_defaults_are_fresh(self) -> None:
        first = default_payment_config()
        first["currency"]["supportedCurrencies"].append("GBP")
        assert default_payment_config()["currency"]["supportedCurrencies"] == ["EUR", "USD"]

    def test_result_is_frozen(self, payment_config: PaymentConfig) -> None:
        with pytest.raises(ValidationError):
            payment_config.environment.debug = False  # type: ignore[misc]

    def test_logs_summary_at_debug(
        self, file_config: dict[str, Any], caplog: pytest.LogCaptureFixture
    ) -> None:
        with caplog.at_level(logging.DEBUG, logger="goldsphere_contracts"):
            resolve(default_payment_config(), file_config, {"PAYMENT_DEBUG": "false"})
        assert "PAYMENT_DEBUG" in caplog.text
