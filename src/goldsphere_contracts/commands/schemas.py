"""Command: list registered entity schemas."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from goldsphere_contracts.commands._base import GsCommand

if TYPE_CHECKING:
    from goldsphere_contracts.commands._context import AppContext


@click.command(
    cls=GsCommand,
    examples="""\
  gsctl schemas
  gsctl --json schemas""",
)
@click.pass_obj
def schemas(app: AppContext) -> None:
    """List the schema names accepted by validate and batch."""
    from goldsphere_contracts.domain.envelope import success_envelope
    from goldsphere_contracts.validation.registry import schema_names

    app.emit("schemas", success_envelope({"schemas": schema_names()}))
