"""Product contracts — catalogue entries, registration, bulk registration."""

from __future__ import annotations

from datetime import datetime
from typing import Annotated, Any, Literal

from pydantic import ConfigDict, Field

from goldsphere_contracts.domain.base import (
    ContractModel,
    MinorUnits,
    NonEmptyStr,
    Purity,
)
from goldsphere_contracts.domain.types import Currency, MetalType, ProductType, WeightUnit

MAX_BULK_PRODUCTS = 100

ProductName = Annotated[str, Field(min_length=1, max_length=200)]
ProducerName = Annotated[str, Field(min_length=1, max_length=100)]
Weight = Annotated[float, Field(gt=0)]
MintYear = Annotated[int, Field(ge=1800, le=2100)]


class Specifications(ContractModel):
    """Free-form physical specification block.

    Extensible: unknown keys are kept so producers can publish
    attributes the contract does not know about yet.
    """

    model_config = ConfigDict(extra="allow")

    diameter: float | None = None
    thickness: float | None = None
    mintage: int | None = None
    certification: str | None = None


class Product(ContractModel):
    """Catalogue entry as returned by the product API."""

    id: NonEmptyStr
    name: ProductName
    type: ProductType
    metal: MetalType
    weight: Weight
    weight_unit: WeightUnit
    purity: Purity
    price: MinorUnits
    currency: Currency
    producer: ProducerName
    country: str | None = Field(default=None, max_length=100)
    year: MintYear | None = None
    description: str | None = Field(default=None, max_length=2000)
    specifications: Specifications | None = None
    image_url: str = Field(pattern=r"^https?://\S+$")
    in_stock: bool
    stock_quantity: int | None = Field(default=None, ge=0)
    minimum_order_quantity: int = Field(ge=1)
    premium_percentage: float | None = Field(default=None, ge=0)
    tags: list[str] | None = None
    created_at: datetime
    updated_at: datetime


class ProductRegistrationRequest(ContractModel):
    """Payload for registering one product (also the bulk item shape)."""

    name: ProductName
    type: ProductType
    metal: MetalType
    weight: Weight
    weight_unit: WeightUnit
    purity: Purity
    price: MinorUnits
    currency: Currency
    producer: ProducerName
    country: str | None = Field(default=None, max_length=100)
    year: MintYear | None = None
    description: str | None = Field(default=None, max_length=2000)
    specifications: Specifications | None = None
    in_stock: bool = True
    stock_quantity: int | None = Field(default=None, ge=0)
    minimum_order_quantity: int = Field(default=1, ge=1)
    premium_percentage: float | None = Field(default=None, ge=0)
    tags: list[str] | None = None


class ProductUpdateRequest(ContractModel):
    """Partial update. Identity fields (type, metal, weight) are immutable."""

    name: ProductName | None = None
    price: MinorUnits | None = None
    description: str | None = Field(default=None, max_length=2000)
    specifications: Specifications | None = None
    in_stock: bool | None = None
    stock_quantity: int | None = Field(default=None, ge=0)
    minimum_order_quantity: int | None = Field(default=None, ge=1)
    premium_percentage: float | None = Field(default=None, ge=0)
    tags: list[str] | None = None


class ProductQueryParams(ContractModel):
    page: int = Field(default=1, ge=1)
    limit: int = Field(default=20, ge=1, le=100)
    metal: MetalType | None = None
    type: ProductType | None = None
    producer: str | None = None


class BulkRegistrationRequest(ContractModel):
    products: list[ProductRegistrationRequest] = Field(min_length=1, max_length=MAX_BULK_PRODUCTS)


class BulkRegistrationSummary(ContractModel):
    total: int
    successful: int
    failed: int


class BulkRegistrationResult(ContractModel):
    """Outcome for one product of a bulk request, in request order.

    ``committed`` carries whatever the commit hook returned (a record id,
    a stored row) in wire form; ``product`` is always the validated request.
    """

    index: int
    status: Literal["success", "error"]
    product: ProductRegistrationRequest | Product | None = None
    committed: Any = None
    error: str | None = None
    details: list[dict[str, str]] | None = None


class BulkRegistrationResponse(ContractModel):
    """Bulk registration response.

    ``success`` means the request was accepted and every item was
    processed; per-item failures are reported in ``results`` and
    ``summary`` and never flip it to False.
    """

    success: bool
    results: list[BulkRegistrationResult]
    summary: BulkRegistrationSummary
