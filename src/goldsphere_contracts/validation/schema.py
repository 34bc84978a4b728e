"""EntitySchema and the two-pass validator.

Pass 1 (structural): pydantic validates the target type and reports
every failing field at once. Pass 2 (refinement): the schema's
:class:`~goldsphere_contracts.validation.rules.Rule` objects run against
the validated value, only when pass 1 succeeded.

Tagged unions need one extra step. Pydantic reports a failure inside a
variant under the tag (``card.last4``); the validator strips the tag
segment, and a variant-required field that is missing is reported on the
discriminant path (``type``) so a UI can point at the type selector.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field, replace
from typing import Any

from pydantic import BaseModel, TypeAdapter
from pydantic import ValidationError as PydanticValidationError
from pydantic_core import ErrorDetails

from goldsphere_contracts.paths import join_loc
from goldsphere_contracts.validation.result import FieldError, RuleKind, ValidationResult
from goldsphere_contracts.validation.rules import Rule, kind_for_error

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EntitySchema[T]:
    """A named contract: target type, refinement rules, and tag metadata.

    Attributes:
        name: Registry name (``"payment_method"``).
        target: Model class or annotated union to validate against.
        rules: Refinement rules, evaluated in order.
        discriminator: Tag field name for tagged-union targets.
        variant_tags: Tag values that appear as location segments.
        dependent_fields: Wire names of fields some variants require.
        refinement_message: Prefix for dependent-field failures.
    """

    name: str
    target: Any
    rules: tuple[Rule[T], ...] = ()
    discriminator: str | None = None
    variant_tags: frozenset[str] = frozenset()
    dependent_fields: frozenset[str] = frozenset()
    refinement_message: str = "Invalid data for the specified type"
    adapter: TypeAdapter[T] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "adapter", TypeAdapter(self.target))

    def with_rules(self, *rules: Rule[T]) -> EntitySchema[T]:
        """Derive a schema with extra refinement rules appended."""
        return replace(self, rules=(*self.rules, *rules))

    def dump(self, value: T) -> Any:
        """Wire form of a validated value."""
        return self.adapter.dump_python(value, mode="json", by_alias=True, exclude_none=True)


def tagged_union_schema(
    name: str,
    target: Any,
    *,
    discriminator: str,
    variants: Mapping[str, type[BaseModel]],
    refinement_message: str,
    rules: tuple[Rule[Any], ...] = (),
) -> EntitySchema[Any]:
    """Build a schema for a target that is (or embeds) a tagged union.

    Dependent fields are the fields required by at least one variant but
    not by every variant.
    """
    return EntitySchema(
        name=name,
        target=target,
        rules=rules,
        discriminator=discriminator,
        variant_tags=frozenset(variants),
        dependent_fields=variant_dependent_fields(variants.values()),
        refinement_message=refinement_message,
    )


def variant_dependent_fields(variants: Any) -> frozenset[str]:
    """Wire names of fields required by some but not all *variants*."""
    required_sets = [
        {info.alias or name for name, info in model.model_fields.items() if info.is_required()}
        for model in variants
    ]
    if not required_sets:
        return frozenset()
    everywhere = set.intersection(*required_sets)
    return frozenset(set.union(*required_sets) - everywhere)


def validate[T](schema: EntitySchema[T], data: Any) -> ValidationResult[T]:
    """Validate *data* against *schema*, collecting every error.

    Never raises for bad input; the outcome is always a ValidationResult.
    """
    try:
        value = schema.adapter.validate_python(data)
    except PydanticValidationError as exc:
        errors = [_to_field_error(schema, err) for err in exc.errors(include_url=False)]
        logger.debug("Structural validation failed for %s: %d error(s)", schema.name, len(errors))
        return ValidationResult.failure(_dedupe(errors))

    failures = [err for rule in schema.rules if (err := rule.check(value)) is not None]
    if failures:
        logger.debug("Refinement failed for %s: %s", schema.name, [f.path for f in failures])
        return ValidationResult.failure(failures)
    return ValidationResult.success(value)


def _to_field_error(schema: EntitySchema[Any], err: ErrorDetails) -> FieldError:
    error_type = err["type"]
    loc: list[str | int] = list(err["loc"])
    message = err["msg"]
    kind = kind_for_error(error_type)

    tag: str | None = None
    cleaned: list[str | int] = []
    for i, segment in enumerate(loc):
        if isinstance(segment, str) and segment in schema.variant_tags and i + 1 < len(loc):
            tag = segment
            continue
        cleaned.append(segment)

    if error_type in ("union_tag_not_found", "union_tag_invalid") and schema.discriminator:
        return FieldError(
            path=join_loc([*cleaned, schema.discriminator]),
            message=message,
            kind=kind,
        )

    if (
        error_type == "missing"
        and tag is not None
        and schema.discriminator
        and cleaned
        and cleaned[-1] in schema.dependent_fields
    ):
        missing = cleaned[-1]
        return FieldError(
            path=join_loc([*cleaned[:-1], schema.discriminator]),
            message=(
                f"{schema.refinement_message}: {missing} is required "
                f"when {schema.discriminator} is '{tag}'"
            ),
            kind=RuleKind.REFINEMENT,
        )

    return FieldError(path=join_loc(cleaned), message=message, kind=kind)


def _dedupe(errors: list[FieldError]) -> list[FieldError]:
    # Smart unions report each member's failures; keep the first of identical ones.
    seen: set[tuple[str, str]] = set()
    unique: list[FieldError] = []
    for err in errors:
        key = (err.path, err.message)
        if key not in seen:
            seen.add(key)
            unique.append(err)
    return unique
