"""Portfolio contracts — portfolios, positions and position transactions.

Prices and valuations are integer minor units. Position quantities are
fractional (a position may hold 0.5 oz of a bar), so they are floats
with a 0.001 floor.
"""

from __future__ import annotations

from datetime import date, datetime
from typing import Annotated, Literal
from uuid import UUID

from pydantic import Field

from goldsphere_contracts.domain.base import (
    ContractModel,
    MinorUnits,
    NonEmptyStr,
    NonNegativeMinorUnits,
)
from goldsphere_contracts.domain.types import MetalType, PositionStatus, TransactionType

PortfolioName = Annotated[str, Field(min_length=1, max_length=200)]
Origin = Annotated[str, Field(min_length=1, max_length=100)]
Holding = Annotated[float, Field(ge=0.001)]
SignedMinorUnits = Annotated[int, Field(strict=True)]


class Portfolio(ContractModel):
    id: UUID
    portfolio_name: PortfolioName
    owner_id: UUID
    description: str | None = Field(default=None, max_length=1000)
    is_active: bool = True
    total_value: NonNegativeMinorUnits = 0
    total_cost: NonNegativeMinorUnits = 0
    total_gain_loss: SignedMinorUnits = 0
    total_gain_loss_percentage: float = 0
    position_count: int = Field(default=0, ge=0)
    last_updated: datetime
    created_at: datetime
    updated_at: datetime


class CreatePortfolioRequest(ContractModel):
    portfolio_name: PortfolioName
    owner_id: UUID
    description: str | None = Field(default=None, max_length=1000)


class UpdatePortfolioRequest(ContractModel):
    portfolio_name: PortfolioName | None = None
    description: str | None = Field(default=None, max_length=1000)
    is_active: bool | None = None


class PortfolioQuery(ContractModel):
    """List parameters; query-string values are coerced."""

    page: int = Field(default=1, ge=1)
    limit: int = Field(default=20, ge=1, le=100)
    search: str | None = None
    sort_by: Literal["portfolioName", "totalValue", "createdAt", "updatedAt"] = "createdAt"
    sort_order: Literal["asc", "desc"] = "desc"
    is_active: bool | None = None


class Position(ContractModel):
    """A holding of one product inside a portfolio."""

    id: NonEmptyStr
    user_id: NonEmptyStr
    product_id: NonEmptyStr
    purchase_date: datetime
    purchase_price: MinorUnits
    market_price: MinorUnits
    quantity: float = Field(gt=0)
    issuing_country: Origin
    producer: Origin
    certified_provenance: bool
    status: PositionStatus
    closed_date: datetime | None = None
    notes: str | None = Field(default=None, max_length=1000)
    created_at: datetime
    updated_at: datetime


class PositionCreateRequest(ContractModel):
    product_id: NonEmptyStr
    purchase_date: datetime
    purchase_price: MinorUnits
    quantity: Holding
    issuing_country: Origin
    producer: Origin
    certified_provenance: bool
    notes: str | None = Field(default=None, max_length=1000)


class PositionUpdateRequest(ContractModel):
    market_price: MinorUnits | None = None
    quantity: Holding | None = None
    notes: str | None = Field(default=None, max_length=1000)
    status: PositionStatus | None = None


class Transaction(ContractModel):
    """A buy or sell booked against a position."""

    id: NonEmptyStr
    position_id: NonEmptyStr
    user_id: NonEmptyStr
    type: TransactionType
    date: datetime
    quantity: Holding
    price: MinorUnits
    fees: NonNegativeMinorUnits = 0
    notes: str | None = Field(default=None, max_length=500)
    created_at: datetime


class TransactionCreateRequest(ContractModel):
    position_id: NonEmptyStr
    type: TransactionType
    date: datetime
    quantity: Holding
    price: MinorUnits
    fees: NonNegativeMinorUnits = 0
    notes: str | None = Field(default=None, max_length=500)


class MetalBreakdown(ContractModel):
    value: int
    percentage: float
    weight: float
    position_count: int


class MetalBreakdowns(ContractModel):
    gold: MetalBreakdown | None = None
    silver: MetalBreakdown | None = None
    platinum: MetalBreakdown | None = None
    palladium: MetalBreakdown | None = None


class PortfolioSummary(ContractModel):
    total_value: int
    total_cost: int
    total_gain_loss: int
    total_gain_loss_percentage: float
    position_count: int
    metal_breakdown: MetalBreakdowns
    last_updated: datetime


class PositionQueryParams(ContractModel):
    page: int = Field(default=1, ge=1)
    limit: int = Field(default=20, ge=1, le=100)
    status: PositionStatus | None = None
    metal: MetalType | None = None
    producer: str | None = None


class TransactionQueryParams(ContractModel):
    page: int = Field(default=1, ge=1)
    limit: int = Field(default=20, ge=1, le=100)
    type: TransactionType | None = None
    position_id: str | None = None
    start_date: date | None = None
    end_date: date | None = None


class PortfolioPositionsResponse(ContractModel):
    success: bool
    portfolio_id: UUID
    positions: list[Position]
    summary: PortfolioSummary
