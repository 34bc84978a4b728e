"""Response envelopes — the universal API response contract.

INVARIANT: Every API response is either ``ApiSuccess`` or ``ApiError``.
Paginated collections wrap their items in ``Paginated``.
"""

from __future__ import annotations

import math
from typing import Any, Literal

from pydantic import Field

from goldsphere_contracts.domain.base import ContractModel


class ErrorDetail(ContractModel):
    """One field-level problem inside an error envelope."""

    path: str
    message: str


class ErrorBody(ContractModel):
    """Structured error payload within an ApiError."""

    code: str
    message: str
    details: list[ErrorDetail] | None = None


class ApiSuccess(ContractModel):
    success: Literal[True] = True
    data: Any = None
    message: str | None = None


class ApiError(ContractModel):
    success: Literal[False] = False
    error: ErrorBody


ApiResponse = ApiSuccess | ApiError


class Pagination(ContractModel):
    page: int = Field(ge=1)
    limit: int = Field(ge=1, le=100)
    total: int = Field(ge=0)
    total_pages: int = Field(ge=0)
    has_next: bool
    has_prev: bool


class Paginated(ContractModel):
    data: list[Any]
    pagination: Pagination


def success_envelope(data: Any = None, message: str | None = None) -> ApiSuccess:
    """Wrap *data* in a success envelope."""
    return ApiSuccess(data=data, message=message)


def error_envelope(
    code: str,
    message: str,
    details: list[ErrorDetail] | list[dict[str, str]] | None = None,
) -> ApiError:
    """Build an error envelope; *details* may be models or ``{path, message}`` dicts."""
    parsed = [ErrorDetail.model_validate(d) for d in details] if details else None
    return ApiError(error=ErrorBody(code=code, message=message, details=parsed))


def paginate(items: list[Any], *, page: int, limit: int, total: int) -> Paginated:
    """Wrap one page of *items* with navigation metadata.

    ``total`` is the size of the whole collection, not of this page.

    Examples:
        >>> paginate([1, 2], page=1, limit=2, total=5).pagination.total_pages
        3
    """
    total_pages = math.ceil(total / limit) if total else 0
    return Paginated(
        data=items,
        pagination=Pagination(
            page=page,
            limit=limit,
            total=total,
            total_pages=total_pages,
            has_next=page < total_pages,
            has_prev=page > 1,
        ),
    )
