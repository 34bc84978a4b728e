"""Subcommand modules for gsctl.

Provides register_commands() which uses deferred imports to keep
``gsctl --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all command groups and standalone commands on the root CLI group."""
    # --- Groups ---
    from goldsphere_contracts.commands.config_cmd import config

    cli.add_command(config)

    # --- Standalone commands ---
    from goldsphere_contracts.commands.batch import batch
    from goldsphere_contracts.commands.schemas import schemas
    from goldsphere_contracts.commands.validate import validate

    cli.add_command(schemas)
    cli.add_command(validate)
    cli.add_command(batch)
