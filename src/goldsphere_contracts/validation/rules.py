"""Composable rule units.

Structural constraints (type, range, length, enum, pattern) are declared
on the contract models and enforced by pydantic; :func:`kind_for_error`
classifies each pydantic failure into a :class:`RuleKind`.

Cross-field refinements are :class:`Rule` objects evaluated against the
already-validated value. They never see structurally invalid input.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from goldsphere_contracts.paths import get_path
from goldsphere_contracts.validation.result import FieldError, RuleKind

_KIND_BY_ERROR_TYPE: dict[str, RuleKind] = {
    "missing": RuleKind.REQUIRED,
    "extra_forbidden": RuleKind.UNKNOWN_FIELD,
    "greater_than": RuleKind.RANGE,
    "greater_than_equal": RuleKind.RANGE,
    "less_than": RuleKind.RANGE,
    "less_than_equal": RuleKind.RANGE,
    "multiple_of": RuleKind.RANGE,
    "finite_number": RuleKind.RANGE,
    "string_too_short": RuleKind.LENGTH,
    "string_too_long": RuleKind.LENGTH,
    "too_short": RuleKind.LENGTH,
    "too_long": RuleKind.LENGTH,
    "literal_error": RuleKind.ENUM,
    "enum": RuleKind.ENUM,
    "union_tag_invalid": RuleKind.ENUM,
    "union_tag_not_found": RuleKind.REQUIRED,
    "string_pattern_mismatch": RuleKind.PATTERN,
    "datetime_parsing": RuleKind.PATTERN,
    "datetime_from_date_parsing": RuleKind.PATTERN,
    "url_parsing": RuleKind.PATTERN,
    "url_scheme": RuleKind.PATTERN,
    "value_error": RuleKind.REFINEMENT,
    "assertion_error": RuleKind.REFINEMENT,
}


def kind_for_error(error_type: str) -> RuleKind:
    """Map a pydantic error type onto a rule kind (default: type)."""
    return _KIND_BY_ERROR_TYPE.get(error_type, RuleKind.TYPE)


@dataclass(frozen=True)
class Rule[T]:
    """A named cross-field predicate over a validated value.

    Attributes:
        name: Stable identifier (``"card_not_expired"``).
        path: Dot-path the failure is reported on.
        message: Failure message. ``{value}`` is replaced with the value
            found at *path*.
        predicate: Returns True when the value satisfies the rule.
        kind: Constraint family; refinement unless stated otherwise.
    """

    name: str
    path: str
    message: str
    predicate: Callable[[T], bool]
    kind: RuleKind = RuleKind.REFINEMENT

    def check(self, value: T) -> FieldError | None:
        """Evaluate the rule; return the error on failure, else None."""
        if self.predicate(value):
            return None
        return FieldError(path=self.path, message=self.render(value), kind=self.kind)

    def render(self, value: T) -> str:
        if "{value}" not in self.message:
            return self.message
        return self.message.replace("{value}", repr(_plain(get_path(value, self.path))))


def _plain(value: Any) -> Any:
    # StrEnum members render as their wire value
    return value.value if hasattr(value, "value") else value


def when(
    condition: Callable[[Any], bool],
    predicate: Callable[[Any], bool],
) -> Callable[[Any], bool]:
    """Predicate that only applies when *condition* holds (passes otherwise)."""

    def check(value: Any) -> bool:
        return not condition(value) or predicate(value)

    return check


def present_iff(flag_attr: str, on_true: str, on_false: str) -> Callable[[Any], bool]:
    """Predicate for ``{success, payload?, error?}`` response shapes.

    When ``flag_attr`` is truthy, ``on_true`` must be set; otherwise
    ``on_false`` must be set.
    """

    def check(value: Any) -> bool:
        attr = on_true if getattr(value, flag_attr) else on_false
        return getattr(value, attr) is not None

    return check
