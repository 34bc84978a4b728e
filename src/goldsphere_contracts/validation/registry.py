"""Named entity schemas.

Every wire contract the platform validates is registered here under a
stable snake_case name. Callers look schemas up with :func:`get_schema`
and derive config-aware variants with ``EntitySchema.with_rules``.
"""

from __future__ import annotations

from dataclasses import replace
from datetime import UTC, datetime
from typing import Any

from goldsphere_contracts.domain import envelope, order, payment, portfolio, product
from goldsphere_contracts.validation.rules import Rule, present_iff, when
from goldsphere_contracts.validation.schema import EntitySchema, tagged_union_schema

PAYMENT_METHOD_MESSAGE = "Invalid payment method data for the specified type"


def _card_not_expired(method: Any) -> bool:
    now = datetime.now(UTC)
    return (method.expiry_year, method.expiry_month) >= (now.year, now.month)


def _is_card(method: Any) -> bool:
    return isinstance(method, payment.CardPaymentMethod)


def _refund_within_amount(intent: payment.PaymentIntent) -> bool:
    return intent.refunded_amount is None or intent.refunded_amount <= intent.amount


def _event_matches_object(event: payment.PaymentWebhookEvent) -> bool:
    carries_method = isinstance(event.data, payment.PaymentMethodEventData)
    return carries_method == (event.type == "payment_method.attached")


CARD_NOT_EXPIRED = Rule(
    name="card_not_expired",
    path="expiryYear",
    message="Card expiry year {value} is in the past",
    predicate=when(_is_card, _card_not_expired),
)

REFUND_WITHIN_AMOUNT = Rule(
    name="refund_within_amount",
    path="refundedAmount",
    message="Refunded amount {value} exceeds the intent amount",
    predicate=_refund_within_amount,
)

INTENT_OR_ERROR = Rule(
    name="intent_or_error",
    path="success",
    message="Response must include paymentIntent on success or error on failure",
    predicate=present_iff("success", "payment_intent", "error"),
)

EVENT_MATCHES_OBJECT = Rule(
    name="event_matches_object",
    path="data.object",
    message="payment_method.attached events carry a payment method; other events carry an intent",
    predicate=_event_matches_object,
)

def _items_in_order_currency(value: Any) -> bool:
    return all(item.currency == value.currency for item in value.items)


def _closed_position_dated(position: portfolio.Position) -> bool:
    return position.status != "closed" or position.closed_date is not None


def _date_range_ordered(query: portfolio.TransactionQueryParams) -> bool:
    if query.start_date is None or query.end_date is None:
        return True
    return query.start_date <= query.end_date


ITEMS_IN_ORDER_CURRENCY = Rule(
    name="items_in_order_currency",
    path="items",
    message="Every item must be priced in the order currency",
    predicate=_items_in_order_currency,
)

CLOSED_POSITION_DATED = Rule(
    name="closed_position_dated",
    path="closedDate",
    message="Closed positions must have a closedDate",
    predicate=_closed_position_dated,
)

DATE_RANGE_ORDERED = Rule(
    name="date_range_ordered",
    path="endDate",
    message="endDate must not be before startDate",
    predicate=_date_range_ordered,
)

# Location segments pydantic inserts for union members.
_EVENT_DATA_TAGS = {
    "PaymentIntentEventData": payment.PaymentIntentEventData,
    "PaymentMethodEventData": payment.PaymentMethodEventData,
}


def _payment_method_schema(
    name: str,
    target: Any,
    *,
    extra_tags: dict[str, Any] | None = None,
    rules: tuple[Rule[Any], ...] = (),
) -> EntitySchema[Any]:
    base = tagged_union_schema(
        name,
        target,
        discriminator="type",
        variants=payment.PAYMENT_METHOD_VARIANTS,
        refinement_message=PAYMENT_METHOD_MESSAGE,
        rules=rules,
    )
    if not extra_tags:
        return base
    return replace(base, variant_tags=base.variant_tags | frozenset(extra_tags))


def _build_registry() -> dict[str, EntitySchema[Any]]:
    schemas: list[EntitySchema[Any]] = [
        # --- payment entities ---
        _payment_method_schema(
            "payment_method", payment.PaymentMethod, rules=(CARD_NOT_EXPIRED,)
        ),
        EntitySchema("payment_intent", payment.PaymentIntent, rules=(REFUND_WITHIN_AMOUNT,)),
        EntitySchema("payment_error", payment.PaymentError),
        # --- payment requests ---
        EntitySchema("create_payment_intent_request", payment.CreatePaymentIntentRequest),
        EntitySchema("confirm_payment_request", payment.ConfirmPaymentRequest),
        EntitySchema("list_payment_methods_request", payment.ListPaymentMethodsRequest),
        EntitySchema("refund_request", payment.RefundRequest),
        # --- payment responses ---
        EntitySchema(
            "create_payment_intent_response",
            payment.CreatePaymentIntentResponse,
            rules=(INTENT_OR_ERROR,),
        ),
        EntitySchema(
            "retrieve_payment_intent_response",
            payment.RetrievePaymentIntentResponse,
            rules=(INTENT_OR_ERROR,),
        ),
        EntitySchema("confirm_payment_response", payment.ConfirmPaymentResponse),
        _payment_method_schema("list_payment_methods_response", payment.ListPaymentMethodsResponse),
        EntitySchema("refund_response", payment.RefundResponse),
        _payment_method_schema(
            "payment_webhook_event",
            payment.PaymentWebhookEvent,
            extra_tags=_EVENT_DATA_TAGS,
            rules=(EVENT_MATCHES_OBJECT,),
        ),
        # --- products ---
        EntitySchema("product", product.Product),
        EntitySchema("product_registration", product.ProductRegistrationRequest),
        EntitySchema("product_update", product.ProductUpdateRequest),
        EntitySchema("product_query", product.ProductQueryParams),
        EntitySchema("bulk_registration_request", product.BulkRegistrationRequest),
        EntitySchema("bulk_registration_response", product.BulkRegistrationResponse),
        # --- orders ---
        EntitySchema("order", order.Order, rules=(ITEMS_IN_ORDER_CURRENCY,)),
        EntitySchema("order_summary", order.OrderSummary),
        EntitySchema("order_item", order.OrderItem),
        EntitySchema("address", order.Address),
        EntitySchema(
            "create_order_request", order.CreateOrderRequest, rules=(ITEMS_IN_ORDER_CURRENCY,)
        ),
        EntitySchema("update_order_request", order.UpdateOrderRequest),
        EntitySchema("update_order_status_request", order.UpdateOrderStatusRequest),
        EntitySchema("add_order_item_request", order.AddOrderItemRequest),
        EntitySchema("process_order_request", order.ProcessOrderRequest),
        EntitySchema("assign_custody_request", order.AssignCustodyRequest),
        EntitySchema("calculate_order_request", order.CalculateOrderRequest),
        EntitySchema("order_response", order.OrderResponse),
        EntitySchema("orders_response", order.OrdersResponse),
        # --- portfolios ---
        EntitySchema("portfolio", portfolio.Portfolio),
        EntitySchema("create_portfolio_request", portfolio.CreatePortfolioRequest),
        EntitySchema("update_portfolio_request", portfolio.UpdatePortfolioRequest),
        EntitySchema("portfolio_query", portfolio.PortfolioQuery),
        EntitySchema("position", portfolio.Position, rules=(CLOSED_POSITION_DATED,)),
        EntitySchema("position_create_request", portfolio.PositionCreateRequest),
        EntitySchema("position_update_request", portfolio.PositionUpdateRequest),
        EntitySchema("position_query", portfolio.PositionQueryParams),
        EntitySchema("transaction", portfolio.Transaction),
        EntitySchema("transaction_create_request", portfolio.TransactionCreateRequest),
        EntitySchema(
            "transaction_query", portfolio.TransactionQueryParams, rules=(DATE_RANGE_ORDERED,)
        ),
        EntitySchema("portfolio_summary", portfolio.PortfolioSummary),
        EntitySchema("portfolio_positions_response", portfolio.PortfolioPositionsResponse),
        # --- envelopes ---
        EntitySchema("api_success", envelope.ApiSuccess),
        EntitySchema("api_error", envelope.ApiError),
        EntitySchema("pagination", envelope.Pagination),
    ]
    return {s.name: s for s in schemas}


SCHEMA_REGISTRY: dict[str, EntitySchema[Any]] = _build_registry()


def get_schema(name: str) -> EntitySchema[Any]:
    """Look up a registered schema.

    Raises:
        KeyError: If no schema is registered under *name*.
    """
    try:
        return SCHEMA_REGISTRY[name]
    except KeyError:
        msg = f"Unknown schema: {name!r}"
        raise KeyError(msg) from None


def schema_names() -> list[str]:
    """All registered schema names, sorted."""
    return sorted(SCHEMA_REGISTRY)
