"""Batch processing — per-item validation with an aggregate summary.

INVARIANT: One outcome per input item, in input order, and
``summary.successful + summary.failed == summary.total == len(items)``.

A failing item never affects its siblings. The only whole-batch
failures are a :class:`BatchRejection` for an oversized or malformed
envelope, decided before any item is looked at.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, model_validator

from goldsphere_contracts.domain.product import MAX_BULK_PRODUCTS
from goldsphere_contracts.validation.result import FieldError
from goldsphere_contracts.validation.schema import EntitySchema, validate

logger = logging.getLogger(__name__)

BATCH_TOO_LARGE = "BATCH_TOO_LARGE"
INVALID_ENVELOPE = "INVALID_ENVELOPE"
VALIDATION_ERROR = "VALIDATION_ERROR"
COMMIT_FAILED = "COMMIT_FAILED"

CommitFn = Callable[[Any], Any]


class BatchItemOutcome(BaseModel):
    """Result for one item. ``error`` summarizes, ``errors`` locates."""

    model_config = ConfigDict(frozen=True)

    index: int
    status: Literal["success", "error"]
    value: Any = None
    committed: Any = None
    error: str | None = None
    code: str | None = None
    errors: tuple[FieldError, ...] = ()

    @property
    def ok(self) -> bool:
        return self.status == "success"


class BatchSummary(BaseModel):
    model_config = ConfigDict(frozen=True)

    total: int = 0
    successful: int = 0
    failed: int = 0

    @model_validator(mode="after")
    def _counts_add_up(self) -> BatchSummary:
        if self.successful + self.failed != self.total:
            msg = "successful + failed must equal total"
            raise ValueError(msg)
        return self


class BatchResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    items: tuple[BatchItemOutcome, ...] = ()
    summary: BatchSummary = BatchSummary()

    @classmethod
    def from_outcomes(cls, outcomes: list[BatchItemOutcome]) -> BatchResult:
        successful = sum(1 for o in outcomes if o.ok)
        return cls(
            items=tuple(outcomes),
            summary=BatchSummary(
                total=len(outcomes),
                successful=successful,
                failed=len(outcomes) - successful,
            ),
        )

    @property
    def failures(self) -> list[BatchItemOutcome]:
        return [o for o in self.items if not o.ok]


class BatchRejection(BaseModel):
    """The whole batch was refused; no item was processed."""

    model_config = ConfigDict(frozen=True)

    code: str
    message: str
    received: int | None = None
    limit: int | None = None


def process_batch(
    item_schema: EntitySchema[Any],
    items: Any,
    *,
    validate_only: bool = False,
    max_size: int = MAX_BULK_PRODUCTS,
    commit: CommitFn | None = None,
) -> BatchResult | BatchRejection:
    """Validate every item of *items* against *item_schema*.

    Args:
        item_schema: Schema each item must satisfy.
        items: The item list. Anything that is not a list is rejected.
        validate_only: Skip *commit* even for valid items (dry run).
        max_size: Largest accepted batch; larger input is rejected
            before any item is validated.
        commit: Called with each valid value unless *validate_only*.
            Its return value is kept as the item's ``committed``;
            ``value`` stays the validated model. An exception marks
            that item failed with ``COMMIT_FAILED``.

    Returns:
        A BatchResult, or a BatchRejection for oversized or non-list input.
    """
    if not isinstance(items, list):
        logger.warning("Rejected %s batch: expected a list", item_schema.name)
        return BatchRejection(
            code=INVALID_ENVELOPE,
            message=f"Expected a list of items, got {type(items).__name__}",
        )
    if len(items) > max_size:
        logger.warning(
            "Rejected %s batch: %d items exceeds limit %d", item_schema.name, len(items), max_size
        )
        return BatchRejection(
            code=BATCH_TOO_LARGE,
            message=f"Batch of {len(items)} items exceeds the maximum of {max_size}",
            received=len(items),
            limit=max_size,
        )

    run_commit = None if validate_only else commit
    outcomes = [_process_item(item_schema, i, item, run_commit) for i, item in enumerate(items)]
    result = BatchResult.from_outcomes(outcomes)
    logger.debug(
        "Processed %s batch: total=%d successful=%d failed=%d validate_only=%s",
        item_schema.name,
        result.summary.total,
        result.summary.successful,
        result.summary.failed,
        validate_only,
    )
    return result


def process_envelope(
    item_schema: EntitySchema[Any],
    payload: Any,
    key: str,
    *,
    validate_only: bool = False,
    max_size: int = MAX_BULK_PRODUCTS,
    commit: CommitFn | None = None,
) -> BatchResult | BatchRejection:
    """Run :func:`process_batch` over ``payload[key]``.

    A payload that is not a mapping, or lacks a list under *key*, is a
    caller-side defect and is rejected as a whole (``INVALID_ENVELOPE``).
    """
    if not isinstance(payload, Mapping) or not isinstance(payload.get(key), list):
        logger.warning("Rejected %s envelope: missing %r array", item_schema.name, key)
        return BatchRejection(
            code=INVALID_ENVELOPE,
            message=f"Request body must contain a '{key}' array",
        )
    return process_batch(
        item_schema,
        payload[key],
        validate_only=validate_only,
        max_size=max_size,
        commit=commit,
    )


def _process_item(
    schema: EntitySchema[Any],
    index: int,
    item: Any,
    commit: CommitFn | None,
) -> BatchItemOutcome:
    result = validate(schema, item)
    if not result.valid:
        first = result.errors[0]
        return BatchItemOutcome(
            index=index,
            status="error",
            error=f"{first.path}: {first.message}" if first.path else first.message,
            code=VALIDATION_ERROR,
            errors=result.errors,
        )

    value = result.value
    committed = None
    if commit is not None:
        try:
            committed = commit(value)
        except Exception as exc:
            logger.warning("Commit failed for %s item %d: %s", schema.name, index, exc)
            return BatchItemOutcome(
                index=index, status="error", error=str(exc) or type(exc).__name__, code=COMMIT_FAILED
            )
    return BatchItemOutcome(index=index, status="success", value=value, committed=committed)
