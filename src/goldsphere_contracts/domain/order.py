"""Order contracts — orders, their line items, and order API payloads.

Money on an order follows the payment contracts: integer minor units in
the order's currency. Status moves are governed by
:mod:`goldsphere_contracts.domain.lifecycle`.
"""

from __future__ import annotations

from datetime import datetime
from typing import Annotated, Any, Literal
from uuid import UUID

from pydantic import Field

from goldsphere_contracts.domain.base import (
    ContractModel,
    Last4,
    MinorUnits,
    NonEmptyStr,
    NonNegativeMinorUnits,
)
from goldsphere_contracts.domain.envelope import Pagination
from goldsphere_contracts.domain.lifecycle import OrderStatus
from goldsphere_contracts.domain.types import Currency, OrderSource, OrderType, WeightUnit

Quantity = Annotated[int, Field(gt=0)]

OrderPriority = Literal["normal", "high", "urgent"]
OrderPaymentStatus = Literal["pending", "authorized", "captured", "failed", "refunded"]
OrderAction = Literal["confirm", "cancel", "ship", "deliver", "complete"]


class Address(ContractModel):
    type: Literal["shipping", "billing", "both"]
    first_name: NonEmptyStr
    last_name: NonEmptyStr
    company: str | None = None
    street: NonEmptyStr
    city: NonEmptyStr
    state: NonEmptyStr
    zip_code: NonEmptyStr
    country: str = Field(pattern=r"^[A-Z]{2}$")
    phone: str | None = None
    is_default: bool = False


class OrderItem(ContractModel):
    """One line of an order, priced in minor units."""

    id: UUID
    product_id: UUID
    product_name: NonEmptyStr
    product_type: NonEmptyStr
    metal: NonEmptyStr
    weight: float = Field(gt=0)
    weight_unit: WeightUnit = WeightUnit.TROY_OUNCES
    purity: str | None = None
    quantity: Quantity
    unit_price: MinorUnits
    total_price: MinorUnits
    currency: Currency
    specifications: dict[str, Any] | None = None
    producer: str | None = None
    certificate_requested: bool = False
    custody_preference: str | None = None


class OrderFees(ContractModel):
    processing: NonNegativeMinorUnits = 0
    shipping: NonNegativeMinorUnits = 0
    insurance: NonNegativeMinorUnits = 0
    custody_setup: NonNegativeMinorUnits = 0
    certification: NonNegativeMinorUnits = 0
    handling: NonNegativeMinorUnits = 0
    urgent_processing: NonNegativeMinorUnits = 0
    total: NonNegativeMinorUnits


class OrderPaymentMethod(ContractModel):
    """How the order is paid; card details are optional summaries."""

    type: Literal["credit_card", "bank_transfer", "crypto", "check", "wire"]
    provider: str | None = None
    last4: Last4 | None = None
    brand: str | None = None
    expiry_month: int | None = Field(default=None, ge=1, le=12)
    expiry_year: int | None = None
    verified: bool = False


class OrderTracking(ContractModel):
    tracking_number: str | None = None
    carrier: str | None = None
    service: str | None = None
    estimated_delivery: datetime | None = None
    actual_delivery: datetime | None = None
    tracking_url: str | None = Field(default=None, pattern=r"^https?://\S+$")
    signature_required: bool = True
    insurance_amount: NonNegativeMinorUnits | None = None


class OrderAudit(ContractModel):
    """One recorded status change."""

    id: UUID
    order_id: UUID
    previous_status: OrderStatus | None = None
    new_status: OrderStatus
    changed_by: NonEmptyStr
    reason: str | None = None
    notes: str | None = None
    timestamp: datetime


class CustodyAssignment(ContractModel):
    item_id: UUID
    custodian_id: UUID
    custody_service_id: UUID
    assigned_at: datetime


class _OrderBody(ContractModel):
    user_id: UUID
    type: OrderType
    status: OrderStatus
    priority: OrderPriority = "normal"
    items: list[OrderItem] = Field(min_length=1)
    subtotal: NonNegativeMinorUnits
    fees: OrderFees
    taxes: NonNegativeMinorUnits
    total_amount: MinorUnits
    currency: Currency
    shipping_address: Address | None = None
    billing_address: Address | None = None
    payment_method: OrderPaymentMethod | None = None
    payment_status: OrderPaymentStatus = "pending"
    payment_intent_id: str | None = None
    tracking: OrderTracking | None = None
    shipping_method: str | None = None
    custody_assignments: list[CustodyAssignment] | None = None
    source: OrderSource = OrderSource.WEB
    sales_rep_id: UUID | None = None
    notes: str | None = None
    internal_notes: str | None = None
    completed_at: datetime | None = None
    cancelled_at: datetime | None = None
    audit_trail: list[OrderAudit] | None = None


class Order(_OrderBody):
    """A placed order as returned by the order API."""

    id: UUID
    order_number: NonEmptyStr
    created_at: datetime
    updated_at: datetime


class CreateOrderRequest(_OrderBody):
    """An order before the server assigns its id, number and timestamps."""


class UpdateOrderRequest(ContractModel):
    """Partial update of the fields an order may change after placement."""

    type: OrderType | None = None
    status: OrderStatus | None = None
    priority: OrderPriority | None = None
    shipping_address: Address | None = None
    billing_address: Address | None = None
    payment_method: OrderPaymentMethod | None = None
    payment_status: OrderPaymentStatus | None = None
    payment_intent_id: str | None = None
    tracking: OrderTracking | None = None
    shipping_method: str | None = None
    notes: str | None = None
    internal_notes: str | None = None


class OrderSummary(ContractModel):
    """List-view projection of an order."""

    id: UUID
    order_number: NonEmptyStr
    user_id: UUID
    type: OrderType
    status: OrderStatus
    total_amount: MinorUnits
    currency: Currency
    item_count: int = Field(ge=0)
    created_at: datetime
    updated_at: datetime


class UpdateOrderStatusRequest(ContractModel):
    status: OrderStatus
    reason: str | None = None
    notes: str | None = None


class AddOrderItemRequest(ContractModel):
    product_id: UUID
    quantity: Quantity
    custody_service_id: UUID | None = None


class ProcessOrderRequest(ContractModel):
    """Operator action on an order; ``ship`` may carry tracking."""

    action: OrderAction
    reason: str | None = None
    notes: str | None = None
    tracking: OrderTracking | None = None


class CustodyRequestItem(ContractModel):
    item_id: UUID
    custodian_id: UUID
    custody_service_id: UUID


class AssignCustodyRequest(ContractModel):
    assignments: list[CustodyRequestItem] = Field(min_length=1)


class CalculationItem(ContractModel):
    product_id: UUID
    quantity: Quantity


class CalculateOrderRequest(ContractModel):
    """Price quote for a prospective order."""

    items: list[CalculationItem] = Field(min_length=1)
    shipping_address: Address | None = None
    shipping_method: str | None = None
    currency: Currency | None = None


class OrderResponse(ContractModel):
    success: bool
    data: Order


class OrdersResponse(ContractModel):
    orders: list[Order]
    pagination: Pagination
