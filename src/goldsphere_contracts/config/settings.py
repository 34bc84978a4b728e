"""CLI settings: flags and ``GSCTL_*`` env vars in one object.

Priority chain (highest to lowest):
  1. Init kwargs  — CLI flags passed by Click
  2. Env vars     — ``GSCTL_*`` prefix
  3. Code defaults

The payment configuration is separate; it is resolved from
``goldsphere.toml`` by :mod:`goldsphere_contracts.config.discovery`.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from pydantic import Field
from pydantic_settings import BaseSettings

from goldsphere_contracts.config.discovery import find_config
from goldsphere_contracts.domain.product import MAX_BULK_PRODUCTS


class GsSettings(BaseSettings):
    """Settings for the gsctl CLI, frozen after construction.

    Stored in ``click.Context.obj`` (via AppContext) at the CLI root.

    Attributes:
        config_path: Payment config file, explicit or discovered.
        max_batch_size: Upper bound for batch dry-runs.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "GSCTL_",
    }

    config_path: Path | None = None

    # --- CLI flags ---
    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    log_json: bool = False

    max_batch_size: int = Field(default=MAX_BULK_PRODUCTS, ge=1)

    @classmethod
    def from_cli(cls, *, config_path: str | None = None, **cli_flags: Any) -> GsSettings:
        """Construct settings from a CLI invocation.

        An explicit *config_path* is kept as given, so a missing file is
        reported when the config is loaded. Otherwise ``goldsphere.toml``
        is discovered via walk-up.
        """
        path = Path(config_path) if config_path else find_config()
        return cls(config_path=path, **cli_flags)
