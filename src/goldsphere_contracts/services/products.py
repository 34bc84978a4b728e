"""Bulk product registration built on the batch processor."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from goldsphere_contracts.domain.envelope import ApiError
from goldsphere_contracts.domain.product import (
    MAX_BULK_PRODUCTS,
    BulkRegistrationResponse,
    BulkRegistrationResult,
    BulkRegistrationSummary,
)
from goldsphere_contracts.services.batch import (
    BatchItemOutcome,
    BatchRejection,
    CommitFn,
    process_envelope,
)
from goldsphere_contracts.services.responses import rejection_envelope, wire_value
from goldsphere_contracts.validation.policies import currency_policy
from goldsphere_contracts.validation.registry import get_schema
from goldsphere_contracts.validation.schema import EntitySchema

if TYPE_CHECKING:
    from goldsphere_contracts.config.models import PaymentConfig

PRODUCTS_KEY = "products"


def product_item_schema(config: PaymentConfig | None = None) -> EntitySchema[Any]:
    """Registration item schema, narrowed to *config*'s currencies and limits."""
    schema = get_schema("product_registration")
    if config is None:
        return schema
    return schema.with_rules(*currency_policy(config, amount_field="price"))


def register_products(
    payload: Any,
    *,
    validate_only: bool = False,
    commit: CommitFn | None = None,
    config: PaymentConfig | None = None,
    max_size: int = MAX_BULK_PRODUCTS,
) -> BulkRegistrationResponse | ApiError:
    """Validate and (optionally) commit each product of a bulk request.

    *payload* is the raw request body, ``{"products": [...]}``. Each
    product succeeds or fails on its own; ``success`` on the response
    means the request was accepted. A malformed or oversized request is
    answered with an ApiError envelope instead.
    """
    outcome = process_envelope(
        product_item_schema(config),
        payload,
        PRODUCTS_KEY,
        validate_only=validate_only,
        max_size=max_size,
        commit=commit,
    )
    if isinstance(outcome, BatchRejection):
        return rejection_envelope(outcome)

    return BulkRegistrationResponse(
        success=True,
        results=[_to_result(item) for item in outcome.items],
        summary=BulkRegistrationSummary(
            total=outcome.summary.total,
            successful=outcome.summary.successful,
            failed=outcome.summary.failed,
        ),
    )


def _to_result(item: BatchItemOutcome) -> BulkRegistrationResult:
    if item.ok:
        return BulkRegistrationResult(
            index=item.index,
            status="success",
            product=item.value,
            committed=wire_value(item.committed),
        )
    return BulkRegistrationResult(
        index=item.index,
        status="error",
        error=item.error,
        details=[e.detail() for e in item.errors] or None,
    )
