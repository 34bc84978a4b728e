"""Command group: resolve and check the payment configuration."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from goldsphere_contracts.commands._base import GsGroup

if TYPE_CHECKING:
    from goldsphere_contracts.commands._context import AppContext
    from goldsphere_contracts.config.models import PaymentConfig


@click.group(
    cls=GsGroup,
    examples="""\
  gsctl config show
  gsctl -c staging.toml config check
  PAYMENT_ENVIRONMENT=production gsctl --json config check""",
)
def config() -> None:
    """Resolve defaults, goldsphere.toml, and environment variables."""


def _resolved(app: AppContext, op: str) -> PaymentConfig:
    from goldsphere_contracts.commands._helpers import config_error_envelope
    from goldsphere_contracts.config.resolver import ConfigError
    from goldsphere_contracts.domain.envelope import ApiError

    resolved = app.payment_config()
    if isinstance(resolved, ApiError):
        app.emit(op, resolved)
    if isinstance(resolved, ConfigError):
        app.emit(op, config_error_envelope(resolved))
    return resolved


@config.command(
    examples="""\
  gsctl config show
  gsctl --json config show --show-secrets""",
)
@click.option("--show-secrets", is_flag=True, help="Print keys and secrets unmasked.")
@click.pass_obj
def show(app: AppContext, show_secrets: bool) -> None:
    """Print the resolved configuration document."""
    from goldsphere_contracts.domain.envelope import success_envelope

    document = _resolved(app, "config_show").dump()
    if not show_secrets:
        document = _mask_secrets(document)
    app.emit("config_show", success_envelope(document))


@config.command(
    examples="""\
  gsctl config check
  gsctl config check --errors-only""",
)
@click.option("--errors-only", is_flag=True, help="Hide warnings.")
@click.pass_obj
def check(app: AppContext, errors_only: bool) -> None:
    """Run policy checks; exit 1 if any error-level issue is found."""
    from goldsphere_contracts.config.checks import check_config
    from goldsphere_contracts.domain.envelope import error_envelope, success_envelope

    report = check_config(_resolved(app, "config_check"))
    if not report.ok:
        app.emit(
            "config_check",
            error_envelope(
                "CONFIG_CHECK_FAILED",
                f"{len(report.errors)} configuration error(s)",
                [{"path": i.path, "message": i.message} for i in report.errors],
            ),
        )
    issues = report.errors if errors_only else list(report.issues)
    app.emit(
        "config_check",
        success_envelope({"issues": [i.model_dump() for i in issues]}),
    )


_SECRET_KEYS = frozenset({"secretKey", "webhookSecret", "clientSecret", "secret"})


def _mask_secrets(node: object) -> object:
    if isinstance(node, dict):
        return {
            k: "********" if k in _SECRET_KEYS and v else _mask_secrets(v)
            for k, v in node.items()
        }
    if isinstance(node, list):
        return [_mask_secrets(v) for v in node]
    return node
