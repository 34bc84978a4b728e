"""Classification enums shared by every contract.

Values are the exact wire strings. Enum membership is case-sensitive;
case-insensitive lookups live in :mod:`goldsphere_contracts.domain.reference`.
"""

from __future__ import annotations

from enum import StrEnum


class Currency(StrEnum):
    """ISO 4217 currencies accepted on entity payloads."""

    USD = "USD"
    EUR = "EUR"
    CHF = "CHF"
    GBP = "GBP"
    CAD = "CAD"
    AUD = "AUD"


class MetalType(StrEnum):
    """Precious metals traded on the platform."""

    GOLD = "gold"
    SILVER = "silver"
    PLATINUM = "platinum"
    PALLADIUM = "palladium"


class ProductType(StrEnum):
    """Physical form of a bullion product."""

    COIN = "coin"
    BAR = "bar"
    ROUND = "round"


class WeightUnit(StrEnum):
    GRAMS = "grams"
    TROY_OUNCES = "troy_ounces"
    KILOGRAMS = "kilograms"


class PaymentMethodType(StrEnum):
    """Discriminant of the payment-method contract."""

    CARD = "card"
    BANK_TRANSFER = "bank_transfer"
    SEPA_DEBIT = "sepa_debit"


class PaymentIntentStatus(StrEnum):
    REQUIRES_PAYMENT_METHOD = "requires_payment_method"
    REQUIRES_CONFIRMATION = "requires_confirmation"
    REQUIRES_ACTION = "requires_action"
    PROCESSING = "processing"
    SUCCEEDED = "succeeded"
    CANCELED = "canceled"
    REQUIRES_CAPTURE = "requires_capture"


class PaymentErrorType(StrEnum):
    CARD_ERROR = "card_error"
    VALIDATION_ERROR = "validation_error"
    API_ERROR = "api_error"
    AUTHENTICATION_ERROR = "authentication_error"


class RefundReason(StrEnum):
    DUPLICATE = "duplicate"
    FRAUDULENT = "fraudulent"
    REQUESTED_BY_CUSTOMER = "requested_by_customer"


class RefundStatus(StrEnum):
    PENDING = "pending"
    SUCCEEDED = "succeeded"
    FAILED = "failed"
    CANCELED = "canceled"


class WebhookEventType(StrEnum):
    """Payment events delivered to webhook consumers."""

    PAYMENT_INTENT_SUCCEEDED = "payment_intent.succeeded"
    PAYMENT_INTENT_PAYMENT_FAILED = "payment_intent.payment_failed"
    PAYMENT_INTENT_CANCELED = "payment_intent.canceled"
    PAYMENT_METHOD_ATTACHED = "payment_method.attached"


class OrderType(StrEnum):
    """Kind of trading order."""

    BUY = "buy"
    SELL = "sell"
    STOP_LOSS = "stopLoss"
    LIMIT = "limit"
    MARKET = "market"


class OrderSource(StrEnum):
    """Channel an order was placed through."""

    WEB = "web"
    MOBILE = "mobile"
    API = "api"
    ADMIN = "admin"
    IMPORT = "import"
    PHONE = "phone"


class PositionStatus(StrEnum):
    ACTIVE = "active"
    CLOSED = "closed"


class TransactionType(StrEnum):
    BUY = "buy"
    SELL = "sell"
