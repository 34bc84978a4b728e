"""Pydantic payment configuration models.

One frozen model per section. Wire keys (files, dot-paths) are
camelCase; attributes are snake_case. Sections without code defaults
must be supplied by a configuration layer; see
:mod:`goldsphere_contracts.config.resolver`.
"""

from __future__ import annotations

from typing import Literal

from pydantic import Field

from goldsphere_contracts.domain.base import ContractModel, FeePercentage

SettlementCurrency = Literal["EUR", "USD", "GBP", "CHF"]
DeploymentEnvironment = Literal["development", "staging", "production"]
WebhookEvent = Literal[
    "payment_intent.succeeded",
    "payment_intent.payment_failed",
    "payment_intent.canceled",
    "payment_method.attached",
    "invoice.payment_succeeded",
    "customer.created",
    "customer.updated",
]

# --- providers ---


class StripeConfig(ContractModel):
    publishable_key: str
    secret_key: str | None = None
    webhook_secret: str | None = None
    api_version: str | None = None
    test_mode: bool | None = None
    account_id: str | None = None


class PayPalConfig(ContractModel):
    client_id: str
    client_secret: str | None = None
    environment: Literal["sandbox", "production"] = "sandbox"
    webhook_id: str | None = None


class VerificationRequirements(ContractModel):
    kyc: bool
    bank_account_verification: bool


class BankTransferConfig(ContractModel):
    supported_networks: list[Literal["sepa", "ach", "wire"]]
    default_processing_days: int = Field(ge=0)
    max_amount: int | None = Field(default=None, ge=0)
    min_amount: int | None = Field(default=None, ge=0)
    verification_requirements: VerificationRequirements


class ProvidersConfig(ContractModel):
    """[providers] section. Every provider is optional."""

    stripe: StripeConfig | None = None
    paypal: PayPalConfig | None = None
    bank_transfer: BankTransferConfig | None = None


# --- currency & fees ---


class CurrencySettings(ContractModel):
    """Per-currency limits. Amounts in minor units."""

    min_amount: int = Field(ge=0)
    max_amount: int = Field(ge=0)
    show_symbol: bool
    decimal_places: int = Field(ge=0, le=4)


class CurrencyConfig(ContractModel):
    supported_currencies: list[SettlementCurrency] = Field(min_length=1)
    default_currency: SettlementCurrency
    currency_settings: dict[str, CurrencySettings]


class MethodFee(ContractModel):
    percentage: FeePercentage
    fixed: int = Field(ge=0)


class PaymentMethodFees(ContractModel):
    card: MethodFee
    bank_transfer: MethodFee
    sepa_debit: MethodFee


class FeeConfig(ContractModel):
    """[fees] section. Percentages are 0-100, fixed fees in minor units."""

    processing_fee_percentage: FeePercentage
    fixed_fee: int = Field(ge=0)
    currency_conversion_fee: FeePercentage | None = None
    payment_method_fees: PaymentMethodFees


# --- security & compliance ---


class FraudDetection(ContractModel):
    enabled: bool
    risk_threshold: float = Field(ge=0, le=100)
    blocked_countries: list[str] | None = None
    allowed_countries: list[str] | None = None


class RateLimiting(ContractModel):
    enabled: bool
    max_requests_per_minute: int = Field(ge=1)
    max_requests_per_hour: int = Field(ge=1)


class SecurityConfig(ContractModel):
    require_3d_secure: bool = Field(alias="require3DSecure")
    fraud_detection: FraudDetection
    rate_limiting: RateLimiting
    webhook_ip_whitelist: list[str] | None = None


class DataRetention(ContractModel):
    payment_data_days: int = Field(ge=0)
    log_data_days: int = Field(ge=0)
    customer_data_days: int = Field(ge=0)


class GdprSettings(ContractModel):
    enabled: bool
    auto_delete: bool
    data_export: bool


class RegionalCompliance(ContractModel):
    sca: bool
    open_banking: bool


class ComplianceConfig(ContractModel):
    pci_level: Literal["level-1", "level-2", "level-3", "level-4"]
    data_retention: DataRetention
    gdpr: GdprSettings
    regional_compliance: RegionalCompliance


# --- webhooks & environment ---


class RetryConfig(ContractModel):
    max_attempts: int = Field(ge=0)
    backoff_multiplier: float = Field(ge=1)
    max_delay: int = Field(ge=0)


class WebhookConfig(ContractModel):
    endpoint_url: str = Field(min_length=1)
    enabled_events: list[WebhookEvent]
    secret: str = Field(min_length=1)
    retry_config: RetryConfig
    timeout: int = Field(gt=0)


class EnvironmentConfig(ContractModel):
    environment: DeploymentEnvironment
    api_base_url: str
    frontend_base_url: str
    debug: bool
    monitoring: bool


# --- optional sections ---


class CacheConfig(ContractModel):
    enabled: bool
    ttl: int = Field(ge=0)
    provider: Literal["memory", "redis", "memcached"]
    key_prefix: str
    max_size: int | None = Field(default=None, ge=1)


class EmailTemplates(ContractModel):
    payment_succeeded: str
    payment_failed: str
    refund_processed: str


class EmailNotifications(ContractModel):
    enabled: bool
    templates: EmailTemplates
    from_address: str


class SmsTemplates(ContractModel):
    payment_succeeded: str
    payment_failed: str


class SmsNotifications(ContractModel):
    enabled: bool
    provider: Literal["twilio", "aws-sns"]
    templates: SmsTemplates


class PushNotifications(ContractModel):
    enabled: bool
    provider: Literal["firebase", "apns"]


class NotificationConfig(ContractModel):
    email: EmailNotifications
    sms: SmsNotifications
    push: PushNotifications


# --- root ---

REQUIRED_SECTIONS: tuple[str, ...] = (
    "currency",
    "fees",
    "security",
    "compliance",
    "webhooks",
    "environment",
)
OPTIONAL_SECTIONS: tuple[str, ...] = ("providers", "cache", "notifications")


class PaymentConfig(ContractModel):
    """Root payment configuration composing all sections.

    Built once per process by the resolver and read-only afterwards.
    """

    providers: ProvidersConfig = Field(default_factory=ProvidersConfig)
    currency: CurrencyConfig
    fees: FeeConfig
    security: SecurityConfig
    compliance: ComplianceConfig
    webhooks: WebhookConfig
    environment: EnvironmentConfig
    cache: CacheConfig | None = None
    notifications: NotificationConfig | None = None
