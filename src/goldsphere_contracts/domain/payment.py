"""Payment contracts — methods, intents, requests, responses, webhooks.

The payment method is a tagged union discriminated by ``type``: each
variant declares exactly the fields that kind of method requires, so a
card without ``last4`` is a shape error rather than a runtime check
bolted onto a permissive object.
"""

from __future__ import annotations

from datetime import datetime
from typing import Annotated, Literal

from pydantic import Field

from goldsphere_contracts.domain.base import (
    ContractModel,
    Last4,
    MinorUnits,
    NonEmptyStr,
    NonNegativeMinorUnits,
)
from goldsphere_contracts.domain.types import (
    Currency,
    PaymentErrorType,
    PaymentIntentStatus,
    PaymentMethodType,
    RefundReason,
    RefundStatus,
    WebhookEventType,
)

# ---------------------------------------------------------------------------
# Payment methods (tagged union)
# ---------------------------------------------------------------------------


class _PaymentMethodBase(ContractModel):
    id: NonEmptyStr
    is_default: bool | None = None
    created_at: datetime
    updated_at: datetime


class CardPaymentMethod(_PaymentMethodBase):
    """Card on file. All four card fields are mandatory."""

    type: Literal["card"]
    last4: Last4
    brand: NonEmptyStr
    expiry_month: int = Field(ge=1, le=12)
    expiry_year: int


class BankTransferPaymentMethod(_PaymentMethodBase):
    type: Literal["bank_transfer"]
    bank_name: NonEmptyStr
    account_last4: Last4


class SepaDebitPaymentMethod(_PaymentMethodBase):
    type: Literal["sepa_debit"]
    bank_name: NonEmptyStr
    account_last4: Last4


PAYMENT_METHOD_VARIANTS: dict[str, type[_PaymentMethodBase]] = {
    PaymentMethodType.CARD.value: CardPaymentMethod,
    PaymentMethodType.BANK_TRANSFER.value: BankTransferPaymentMethod,
    PaymentMethodType.SEPA_DEBIT.value: SepaDebitPaymentMethod,
}

PaymentMethod = Annotated[
    CardPaymentMethod | BankTransferPaymentMethod | SepaDebitPaymentMethod,
    Field(discriminator="type"),
]


# ---------------------------------------------------------------------------
# Intents and errors
# ---------------------------------------------------------------------------


class PaymentIntent(ContractModel):
    """A provider-side payment intent. Amounts are minor units."""

    id: NonEmptyStr
    client_secret: NonEmptyStr
    amount: MinorUnits
    currency: Currency
    status: PaymentIntentStatus
    order_id: str | None = None
    customer_id: str | None = None
    payment_method_id: str | None = None
    metadata: dict[str, str] | None = None
    created_at: datetime
    updated_at: datetime
    amount_received: NonNegativeMinorUnits | None = None
    fees: NonNegativeMinorUnits | None = None
    refunded: bool | None = None
    refunded_amount: NonNegativeMinorUnits | None = None


class PaymentError(ContractModel):
    code: NonEmptyStr
    message: NonEmptyStr
    type: PaymentErrorType
    param: str | None = None
    decline_code: str | None = None


# ---------------------------------------------------------------------------
# Requests
# ---------------------------------------------------------------------------


class AutomaticPaymentMethods(ContractModel):
    enabled: bool
    allow_redirects: Literal["always", "never"] | None = None


class CreatePaymentIntentRequest(ContractModel):
    amount: MinorUnits
    currency: Currency
    order_id: NonEmptyStr
    customer_id: str | None = None
    payment_method_id: str | None = None
    automatic_payment_methods: AutomaticPaymentMethods | None = None
    description: str | None = Field(default=None, max_length=1000)
    metadata: dict[str, str] | None = None


class ConfirmPaymentRequest(ContractModel):
    payment_intent_id: NonEmptyStr
    payment_method_id: str | None = None
    return_url: str | None = Field(default=None, pattern=r"^https?://\S+$")
    use_stripe_sdk: bool | None = None


class ListPaymentMethodsRequest(ContractModel):
    customer_id: NonEmptyStr
    type: PaymentMethodType | None = None
    limit: int = Field(default=10, ge=1, le=100)


class RefundRequest(ContractModel):
    """Full refund when ``amount`` is omitted, partial otherwise."""

    payment_intent_id: NonEmptyStr
    amount: MinorUnits | None = None
    reason: RefundReason | None = None
    metadata: dict[str, str] | None = None


# ---------------------------------------------------------------------------
# Responses
# ---------------------------------------------------------------------------


class CreatePaymentIntentResponse(ContractModel):
    success: bool
    payment_intent: PaymentIntent | None = None
    error: PaymentError | None = None


class RetrievePaymentIntentResponse(ContractModel):
    success: bool
    payment_intent: PaymentIntent | None = None
    error: PaymentError | None = None


class NextAction(ContractModel):
    type: str
    redirect_to_url: str | None = Field(default=None, pattern=r"^https?://\S+$")


class ConfirmPaymentResponse(ContractModel):
    success: bool
    payment_intent: PaymentIntent | None = None
    error: PaymentError | None = None
    requires_action: bool | None = None
    next_action: NextAction | None = None


class ListPaymentMethodsResponse(ContractModel):
    success: bool
    payment_methods: list[PaymentMethod] | None = None
    has_more: bool | None = None
    error: PaymentError | None = None


class Refund(ContractModel):
    id: str
    amount: NonNegativeMinorUnits
    currency: Currency
    status: RefundStatus
    reason: str | None = None
    created_at: datetime


class RefundResponse(ContractModel):
    success: bool
    refund: Refund | None = None
    error: PaymentError | None = None


# ---------------------------------------------------------------------------
# Webhooks
# ---------------------------------------------------------------------------


class PaymentIntentEventData(ContractModel):
    object: PaymentIntent


class PaymentMethodEventData(ContractModel):
    object: PaymentMethod


class PaymentWebhookEvent(ContractModel):
    """Provider event. ``payment_method.attached`` carries a payment method,
    every other event type carries a payment intent."""

    id: NonEmptyStr
    type: WebhookEventType
    data: PaymentIntentEventData | PaymentMethodEventData
    created_at: datetime
    livemode: bool
