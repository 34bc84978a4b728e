"""Shared command helpers: schema lookup and config-aware schemas."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from goldsphere_contracts.domain.envelope import ApiError, error_envelope

if TYPE_CHECKING:
    from goldsphere_contracts.commands._context import AppContext
    from goldsphere_contracts.validation.schema import EntitySchema


def lookup_schema(app: AppContext, op: str, name: str) -> EntitySchema[Any]:
    """Registry lookup; an unknown name emits an UNKNOWN_SCHEMA error."""
    from goldsphere_contracts.validation.registry import get_schema, schema_names

    try:
        return get_schema(name)
    except KeyError:
        app.emit(
            op,
            error_envelope(
                "UNKNOWN_SCHEMA",
                f"Unknown schema: {name!r} (known: {', '.join(schema_names())})",
            ),
        )
        raise


def policy_schema(
    app: AppContext,
    op: str,
    schema: EntitySchema[Any],
    *,
    amount_field: str,
) -> EntitySchema[Any]:
    """*schema* plus the resolved config's currency policy.

    Emits an error envelope if the configuration does not resolve.
    """
    from goldsphere_contracts.config.resolver import ConfigError
    from goldsphere_contracts.validation.policies import currency_policy

    config = app.payment_config()
    if isinstance(config, ApiError):
        app.emit(op, config)
    if isinstance(config, ConfigError):
        app.emit(op, config_error_envelope(config))
    return schema.with_rules(*currency_policy(config, amount_field=amount_field))


def config_error_envelope(error: Any) -> ApiError:
    """CONFIG_INVALID envelope with one detail per ConfigIssue."""
    return error_envelope(
        "CONFIG_INVALID",
        error.message,
        [{"path": i.path, "message": _issue_message(i)} for i in error.issues],
    )


def _issue_message(issue: Any) -> str:
    if issue.env_var:
        return f"{issue.message} (from {issue.env_var})"
    return issue.message
