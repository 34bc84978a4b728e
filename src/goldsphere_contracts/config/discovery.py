"""Payment config file discovery and loading.

Walk-up finder locates goldsphere.toml, similar to how git finds .git/.
Supports the GOLDSPHERE_CONFIG env var and the --config CLI flag.
JSON and YAML files are accepted when named explicitly.
"""

from __future__ import annotations

import json
import os
import tomllib
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

from goldsphere_contracts.config.defaults import default_payment_config
from goldsphere_contracts.config.models import PaymentConfig
from goldsphere_contracts.config.resolver import ConfigError, resolve

CONFIG_FILENAME = "goldsphere.toml"
CONFIG_ENV_VAR = "GOLDSPHERE_CONFIG"


class ConfigFileError(Exception):
    """A configuration file exists but cannot be read or parsed."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"Cannot load {path}: {reason}")
        self.path = path
        self.reason = reason


def find_config(
    start: Path | None = None,
    environ: Mapping[str, str] | None = None,
) -> Path | None:
    """Walk up from *start* (default: cwd) looking for goldsphere.toml.

    Returns the path to the config file, or None if not found.
    Checks the GOLDSPHERE_CONFIG env var first.
    """
    env = os.environ if environ is None else environ
    env_path = env.get(CONFIG_ENV_VAR)
    if env_path:
        p = Path(env_path)
        if p.is_file():
            return p
        return None

    current = (start or Path.cwd()).resolve()
    while True:
        candidate = current / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
        parent = current.parent
        if parent == current:
            break
        current = parent
    return None


def load_config_file(path: Path) -> dict[str, Any]:
    """Parse a TOML, JSON, or YAML config file into a plain dict.

    An empty YAML file yields an empty dict.

    Raises:
        ConfigFileError: Unreadable file, unknown extension, parse
            failure, or a top level that is not a mapping.
    """
    suffix = path.suffix.lower()
    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigFileError(path, exc.strerror or str(exc)) from exc

    try:
        if suffix == ".toml":
            data: Any = tomllib.loads(raw)
        elif suffix == ".json":
            data = json.loads(raw)
        elif suffix in (".yaml", ".yml"):
            data = YAML(typ="safe").load(raw) or {}
        else:
            raise ConfigFileError(path, f"unsupported format {suffix or '(none)'!r}")
    except (tomllib.TOMLDecodeError, json.JSONDecodeError, YAMLError) as exc:
        raise ConfigFileError(path, str(exc)) from exc

    if not isinstance(data, dict):
        raise ConfigFileError(path, "top level must be a mapping")
    return data


def load_payment_config(
    path: Path | None = None,
    *,
    environ: Mapping[str, str] | None = None,
    cwd: Path | None = None,
) -> PaymentConfig | ConfigError:
    """Resolve the payment configuration for this process.

    If *path* is None, uses :func:`find_config` to discover the file.
    With no file at all, defaults and environment still apply.

    Raises:
        ConfigFileError: If a file is found but cannot be loaded.
    """
    env = os.environ if environ is None else environ
    if path is None:
        path = find_config(cwd, env)
    file_config = load_config_file(path) if path is not None else None
    return resolve(default_payment_config(), file_config, env)
