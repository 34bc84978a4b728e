"""AppContext — shared Click context for all commands.

Created once by the root CLI group and flows to all subcommands via
``@click.pass_obj``.  Provides lazy payment-config resolution and
centralized envelope emission (stdout/stderr routing + exit codes).
"""

from __future__ import annotations

import json
from typing import IO, TYPE_CHECKING, Any

import click

from goldsphere_contracts.domain.envelope import ApiError, ApiSuccess, error_envelope
from goldsphere_contracts.output.formatters import OutputSettings, format_envelope

if TYPE_CHECKING:
    from goldsphere_contracts.config.models import PaymentConfig
    from goldsphere_contracts.config.resolver import ConfigError
    from goldsphere_contracts.config.settings import GsSettings


class AppContext:
    """Shared context flowing through Click's command hierarchy.

    The payment configuration is resolved on first use so ``--help``
    and ``schemas`` never touch config files.
    """

    def __init__(self, settings: GsSettings) -> None:
        self.settings = settings
        self._payment_config: PaymentConfig | ConfigError | None = None

        from goldsphere_contracts.config.logging import configure_logging

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    def payment_config(self) -> PaymentConfig | ConfigError | ApiError:
        """Resolve defaults, the config file, and ``os.environ``.

        An unreadable config file is returned as an ApiError envelope.
        """
        if self._payment_config is None:
            from goldsphere_contracts.config.discovery import (
                ConfigFileError,
                load_payment_config,
            )

            try:
                self._payment_config = load_payment_config(self.settings.config_path)
            except ConfigFileError as exc:
                return error_envelope("CONFIG_FILE_ERROR", str(exc))
        return self._payment_config

    def read_json(self, op: str, stream: IO[str]) -> Any:
        """Parse a JSON document, emitting an error envelope if it is not JSON."""
        try:
            return json.load(stream)
        except json.JSONDecodeError as exc:
            self.emit(op, error_envelope("INVALID_JSON", f"{stream.name}: {exc}"))

    def emit(self, op: str, envelope: ApiSuccess | ApiError) -> None:
        """Format and output an envelope with correct exit semantics.

        * Success: writes to stdout, returns normally.
        * Error: writes to stderr, exits with code 1.
        """
        settings = OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
        )
        output = format_envelope(op, envelope, settings=settings)
        if envelope.success:
            click.echo(output)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)
