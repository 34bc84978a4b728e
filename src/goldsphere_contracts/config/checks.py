"""Cross-section policy checks over a resolved configuration.

Structural validity is the resolver's job. These checks look at how the
sections relate to each other and at risky production settings.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from typing import Literal

from pydantic import BaseModel, ConfigDict

from goldsphere_contracts.config.models import PaymentConfig

Severity = Literal["error", "warning"]


class CheckIssue(BaseModel):
    model_config = ConfigDict(frozen=True)

    check: str
    severity: Severity
    path: str
    message: str


class ConfigCheckReport(BaseModel):
    """Outcome of :func:`check_config`. ``ok`` ignores warnings."""

    model_config = ConfigDict(frozen=True)

    issues: tuple[CheckIssue, ...] = ()

    @property
    def errors(self) -> list[CheckIssue]:
        return [i for i in self.issues if i.severity == "error"]

    @property
    def warnings(self) -> list[CheckIssue]:
        return [i for i in self.issues if i.severity == "warning"]

    @property
    def ok(self) -> bool:
        return not self.errors


CheckFn = Callable[[PaymentConfig], Iterator[CheckIssue]]


def _default_currency_supported(config: PaymentConfig) -> Iterator[CheckIssue]:
    cur = config.currency
    if cur.default_currency not in cur.supported_currencies:
        yield CheckIssue(
            check="default_currency_supported",
            severity="error",
            path="currency.defaultCurrency",
            message=f"Default currency {cur.default_currency} is not in supportedCurrencies",
        )


def _currency_settings_complete(config: PaymentConfig) -> Iterator[CheckIssue]:
    cur = config.currency
    for code in cur.supported_currencies:
        if code not in cur.currency_settings:
            yield CheckIssue(
                check="currency_settings_complete",
                severity="error",
                path=f"currency.currencySettings.{code}",
                message=f"Supported currency {code} has no currency settings",
            )


def _currency_limits_ordered(config: PaymentConfig) -> Iterator[CheckIssue]:
    for code, settings in config.currency.currency_settings.items():
        if settings.min_amount > settings.max_amount:
            yield CheckIssue(
                check="currency_limits_ordered",
                severity="error",
                path=f"currency.currencySettings.{code}.minAmount",
                message=(
                    f"minAmount {settings.min_amount} exceeds maxAmount {settings.max_amount}"
                ),
            )


def _country_lists_disjoint(config: PaymentConfig) -> Iterator[CheckIssue]:
    fraud = config.security.fraud_detection
    overlap = set(fraud.allowed_countries or ()) & set(fraud.blocked_countries or ())
    if overlap:
        yield CheckIssue(
            check="country_lists_disjoint",
            severity="error",
            path="security.fraudDetection.allowedCountries",
            message=f"Countries both allowed and blocked: {', '.join(sorted(overlap))}",
        )


def _rate_limits_ordered(config: PaymentConfig) -> Iterator[CheckIssue]:
    limits = config.security.rate_limiting
    if limits.max_requests_per_minute > limits.max_requests_per_hour:
        yield CheckIssue(
            check="rate_limits_ordered",
            severity="error",
            path="security.rateLimiting.maxRequestsPerMinute",
            message="maxRequestsPerMinute exceeds maxRequestsPerHour",
        )


def _production_hygiene(config: PaymentConfig) -> Iterator[CheckIssue]:
    if config.environment.environment != "production":
        return
    if config.environment.debug:
        yield CheckIssue(
            check="production_debug",
            severity="warning",
            path="environment.debug",
            message="Debug mode is enabled in production",
        )
    paypal = config.providers.paypal
    if paypal is not None and paypal.environment == "sandbox":
        yield CheckIssue(
            check="production_sandbox",
            severity="warning",
            path="providers.paypal.environment",
            message="PayPal is in sandbox mode in production",
        )
    stripe = config.providers.stripe
    if stripe is not None and stripe.test_mode:
        yield CheckIssue(
            check="production_sandbox",
            severity="warning",
            path="providers.stripe.testMode",
            message="Stripe test mode is enabled in production",
        )
    if not config.webhooks.endpoint_url.startswith("https://"):
        yield CheckIssue(
            check="production_webhook_https",
            severity="warning",
            path="webhooks.endpointUrl",
            message="Webhook endpoint does not use https in production",
        )


CHECKS: tuple[CheckFn, ...] = (
    _default_currency_supported,
    _currency_settings_complete,
    _currency_limits_ordered,
    _country_lists_disjoint,
    _rate_limits_ordered,
    _production_hygiene,
)


def check_config(config: PaymentConfig) -> ConfigCheckReport:
    """Run every policy check and collect the issues in check order."""
    return ConfigCheckReport(issues=tuple(issue for check in CHECKS for issue in check(config)))
