"""Schema validation — structural checks, refinement rules, and results."""

from goldsphere_contracts.validation.result import FieldError, RuleKind, ValidationResult
from goldsphere_contracts.validation.rules import Rule
from goldsphere_contracts.validation.schema import EntitySchema, validate

__all__ = [
    "EntitySchema",
    "FieldError",
    "Rule",
    "RuleKind",
    "ValidationResult",
    "validate",
]
