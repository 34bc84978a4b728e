"""Base model and shared field types for every wire contract.

Attributes are snake_case in Python and camelCase on the wire. Models
are frozen and strict about unknown keys unless a subclass opts into
``extra="allow"``.
"""

from __future__ import annotations

from typing import Annotated, Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

# Monetary amounts are integers in minor currency units (cents).
# Strict mode rejects floats (even 10.0), numeric strings, and bools.
MinorUnits = Annotated[int, Field(strict=True, gt=0)]
NonNegativeMinorUnits = Annotated[int, Field(strict=True, ge=0)]

# Two percentage scales coexist and must never be mixed.
FeePercentage = Annotated[float, Field(ge=0, le=100)]
Purity = Annotated[float, Field(ge=0.001, le=1)]

NonEmptyStr = Annotated[str, Field(min_length=1)]
Last4 = Annotated[str, Field(min_length=4, max_length=4, pattern=r"^\d{4}$")]


class ContractModel(BaseModel):
    """Frozen, alias-aware base for all contract models."""

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        alias_generator=to_camel,
        populate_by_name=True,
    )

    def dump(self) -> dict[str, Any]:
        """Wire form: camelCase keys, JSON-safe values, unset optionals dropped."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)
