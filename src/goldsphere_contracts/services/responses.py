"""Conversions from core results to API response envelopes."""

from __future__ import annotations

from typing import Any

from goldsphere_contracts.domain.envelope import (
    ApiError,
    ApiSuccess,
    error_envelope,
    success_envelope,
)
from goldsphere_contracts.services.batch import VALIDATION_ERROR, BatchRejection
from goldsphere_contracts.validation.result import ValidationResult


def wire_value(value: Any) -> Any:
    """Wire form of a contract model; other values pass through."""
    dump = getattr(value, "dump", None)
    return dump() if callable(dump) else value


def envelope_from_result(
    result: ValidationResult[Any],
    *,
    message: str = "Validation failed",
) -> ApiSuccess | ApiError:
    """Success envelope carrying the value, or a VALIDATION_ERROR envelope
    with one ``{path, message}`` detail per field error."""
    if result.valid:
        return success_envelope(wire_value(result.value))
    return error_envelope(VALIDATION_ERROR, message, result.details())


def rejection_envelope(rejection: BatchRejection) -> ApiError:
    return error_envelope(rejection.code, rejection.message)
