"""ValidationResult and FieldError — the validator's output contract.

INVARIANT: A result is either valid with a value or invalid with at
least one error. Never both.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import Any

from pydantic import BaseModel, ConfigDict


class RuleKind(StrEnum):
    """Constraint family a failure belongs to."""

    TYPE = "type"
    REQUIRED = "required"
    RANGE = "range"
    LENGTH = "length"
    ENUM = "enum"
    PATTERN = "pattern"
    UNKNOWN_FIELD = "unknown_field"
    REFINEMENT = "refinement"


class FieldError(BaseModel):
    """One field-level problem: where it is and what is wrong."""

    model_config = ConfigDict(frozen=True)

    path: str
    message: str
    kind: RuleKind = RuleKind.TYPE

    def detail(self) -> dict[str, str]:
        """Envelope form (``{path, message}``)."""
        return {"path": self.path, "message": self.message}


@dataclass(frozen=True)
class ValidationResult[T]:
    """Outcome of validating one input against one schema."""

    valid: bool
    value: T | None = None
    errors: tuple[FieldError, ...] = ()

    def __post_init__(self) -> None:
        if self.valid and self.errors:
            msg = "A valid result cannot carry errors"
            raise ValueError(msg)
        if not self.valid and (not self.errors or self.value is not None):
            msg = "An invalid result needs errors and no value"
            raise ValueError(msg)

    @classmethod
    def success(cls, value: T) -> ValidationResult[T]:
        return cls(valid=True, value=value)

    @classmethod
    def failure(cls, errors: list[FieldError] | tuple[FieldError, ...]) -> ValidationResult[T]:
        return cls(valid=False, errors=tuple(errors))

    @property
    def paths(self) -> list[str]:
        """Paths of all errors, in report order."""
        return [e.path for e in self.errors]

    def details(self) -> list[dict[str, str]]:
        return [e.detail() for e in self.errors]

    def dump(self) -> dict[str, Any]:
        """Serializable form: ``{valid, value}`` or ``{valid, errors}``."""
        if self.valid:
            value = self.value.dump() if hasattr(self.value, "dump") else self.value
            return {"valid": True, "value": value}
        return {"valid": False, "errors": [e.model_dump(mode="json") for e in self.errors]}
