"""Environment-variable bindings for the payment configuration.

Each binding maps one env var to one dot-path (camelCase wire keys) in
the configuration tree. The leaf type of every binding is read from the
:class:`~goldsphere_contracts.config.models.PaymentConfig` model tree,
so a binding can never drift from the model it writes into.
"""

from __future__ import annotations

import re
import types
from dataclasses import dataclass
from typing import Any, Literal, Union, get_args, get_origin

from pydantic import BaseModel

from goldsphere_contracts.config.models import PaymentConfig


@dataclass(frozen=True)
class EnvBinding:
    """One environment variable and the config path it overrides."""

    env_var: str
    path: str


# Applied in this order; a later binding wins when two share a path.
ENV_VAR_MAPPINGS: tuple[EnvBinding, ...] = (
    EnvBinding("STRIPE_PUBLISHABLE_KEY", "providers.stripe.publishableKey"),
    EnvBinding("STRIPE_SECRET_KEY", "providers.stripe.secretKey"),
    EnvBinding("STRIPE_WEBHOOK_SECRET", "providers.stripe.webhookSecret"),
    EnvBinding("PAYPAL_CLIENT_ID", "providers.paypal.clientId"),
    EnvBinding("PAYPAL_CLIENT_SECRET", "providers.paypal.clientSecret"),
    EnvBinding("PAYPAL_ENVIRONMENT", "providers.paypal.environment"),
    EnvBinding("PAYMENT_API_BASE_URL", "environment.apiBaseUrl"),
    EnvBinding("PAYMENT_FRONTEND_BASE_URL", "environment.frontendBaseUrl"),
    EnvBinding("PAYMENT_ENVIRONMENT", "environment.environment"),
    EnvBinding("PAYMENT_DEBUG", "environment.debug"),
    EnvBinding("PAYMENT_WEBHOOK_URL", "webhooks.endpointUrl"),
    EnvBinding("PAYMENT_WEBHOOK_SECRET", "webhooks.secret"),
    EnvBinding("PAYMENT_REQUIRE_3DS", "security.require3DSecure"),
    EnvBinding("PAYMENT_FRAUD_DETECTION", "security.fraudDetection.enabled"),
)

_INT_RE = re.compile(r"^[+-]?\d+$")
_FLOAT_RE = re.compile(r"^[+-]?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?$")


def _unwrap_optional(annotation: Any) -> Any:
    if get_origin(annotation) in (Union, types.UnionType):
        members = [a for a in get_args(annotation) if a is not type(None)]
        if len(members) == 1:
            return members[0]
    return annotation


def _field_by_wire_name(model: type[BaseModel], key: str) -> Any:
    for name, info in model.model_fields.items():
        if key in (info.alias, name):
            return _unwrap_optional(info.annotation)
    msg = f"{model.__name__} has no field {key!r}"
    raise KeyError(msg)


def leaf_type(path: str, root: type[BaseModel] = PaymentConfig) -> Any:
    """Annotation of the field at *path* under *root*, Optional unwrapped.

    Raises:
        KeyError: If any segment does not name a field, or the path
            descends through a non-model field.
    """
    node: Any = root
    for segment in path.split("."):
        if not (isinstance(node, type) and issubclass(node, BaseModel)):
            msg = f"Cannot descend into {segment!r} of {path!r}: not a section"
            raise KeyError(msg)
        node = _field_by_wire_name(node, segment)
    if isinstance(node, type) and issubclass(node, BaseModel):
        msg = f"{path!r} names a section, not a value"
        raise KeyError(msg)
    return node


def coerce_env_value(raw: str, annotation: Any) -> Any:
    """Convert an env-var string to the leaf type *annotation*.

    Booleans accept exactly ``"true"`` or ``"false"``; numbers must be
    plain decimal literals; enumerations match case-sensitively.

    Raises:
        ValueError: With a message suitable for a ConfigIssue.
    """
    if annotation is bool:
        if raw == "true":
            return True
        if raw == "false":
            return False
        msg = f"Expected 'true' or 'false', got {raw!r}"
        raise ValueError(msg)
    if annotation is int:
        if not _INT_RE.match(raw):
            msg = f"Expected an integer, got {raw!r}"
            raise ValueError(msg)
        return int(raw)
    if annotation is float:
        if not _FLOAT_RE.match(raw):
            msg = f"Expected a number, got {raw!r}"
            raise ValueError(msg)
        return float(raw)
    if get_origin(annotation) is Literal:
        choices = get_args(annotation)
        if raw not in choices:
            allowed = ", ".join(repr(c) for c in choices)
            msg = f"Expected one of {allowed}, got {raw!r}"
            raise ValueError(msg)
        return raw
    return raw


def _check_bindings(bindings: tuple[EnvBinding, ...]) -> dict[str, Any]:
    return {b.path: leaf_type(b.path) for b in bindings}


# Fails at import if a binding names a path the model does not have.
LEAF_TYPES: dict[str, Any] = _check_bindings(ENV_VAR_MAPPINGS)
