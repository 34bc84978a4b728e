"""Layered configuration resolution: defaults, then file, then environment.

The resolver is a pure function over already-materialized inputs. It
does not read files or ``os.environ``; see
:mod:`goldsphere_contracts.config.discovery` for that.

INVARIANT: :func:`resolve` never raises for bad input. Every problem is
returned as a :class:`ConfigIssue` inside a :class:`ConfigError`.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from copy import deepcopy
from enum import StrEnum
from typing import Any

from pydantic import BaseModel, ConfigDict
from pydantic import ValidationError as PydanticValidationError

from goldsphere_contracts.config.env import (
    ENV_VAR_MAPPINGS,
    LEAF_TYPES,
    EnvBinding,
    coerce_env_value,
    leaf_type,
)
from goldsphere_contracts.config.merge import deep_merge, set_path
from goldsphere_contracts.config.models import REQUIRED_SECTIONS, PaymentConfig
from goldsphere_contracts.paths import join_loc

logger = logging.getLogger(__name__)


class ConfigIssueCode(StrEnum):
    MISSING_SECTION = "MISSING_SECTION"
    INVALID_ENV_VALUE = "INVALID_ENV_VALUE"
    INVALID_FIELD = "INVALID_FIELD"
    INVALID_STRUCTURE = "INVALID_STRUCTURE"


class ConfigIssue(BaseModel):
    """One configuration problem, located by dot-path."""

    model_config = ConfigDict(frozen=True)

    path: str
    message: str
    code: ConfigIssueCode = ConfigIssueCode.INVALID_FIELD
    env_var: str | None = None


class ConfigError(BaseModel):
    """Failed resolution: every issue found, in discovery order."""

    model_config = ConfigDict(frozen=True)

    issues: tuple[ConfigIssue, ...]

    @property
    def message(self) -> str:
        count = len(self.issues)
        return f"Payment configuration is invalid ({count} issue{'s' if count != 1 else ''})"

    @property
    def paths(self) -> list[str]:
        return [i.path for i in self.issues]


def resolve(
    defaults: Mapping[str, Any],
    file_config: Mapping[str, Any] | None,
    env_values: Mapping[str, str],
    *,
    bindings: tuple[EnvBinding, ...] = ENV_VAR_MAPPINGS,
) -> PaymentConfig | ConfigError:
    """Merge the three layers and validate the result.

    Precedence, lowest to highest: *defaults*, *file_config*, then each
    binding in *bindings* whose env var is set to a non-empty value in
    *env_values*. None of the inputs is mutated.

    Args:
        defaults: Code defaults (camelCase wire keys).
        file_config: Parsed configuration file, or None if there is none.
        env_values: Environment snapshot, usually ``os.environ``.
        bindings: Env var to dot-path table. Every path must name a
            value field of :class:`PaymentConfig`.

    Returns:
        The frozen configuration, or a ConfigError listing all issues.
    """
    issues: list[ConfigIssue] = []

    tree = deepcopy(dict(defaults))
    if file_config:
        tree = deep_merge(tree, file_config)

    applied: list[str] = []
    for binding in bindings:
        raw = env_values.get(binding.env_var)
        if not raw:
            continue
        annotation = LEAF_TYPES.get(binding.path) or leaf_type(binding.path)
        try:
            value = coerce_env_value(raw, annotation)
        except ValueError as exc:
            issues.append(
                ConfigIssue(
                    path=binding.path,
                    message=str(exc),
                    code=ConfigIssueCode.INVALID_ENV_VALUE,
                    env_var=binding.env_var,
                )
            )
            continue
        try:
            set_path(tree, binding.path, value)
        except TypeError as exc:
            issues.append(
                ConfigIssue(
                    path=binding.path,
                    message=str(exc),
                    code=ConfigIssueCode.INVALID_STRUCTURE,
                    env_var=binding.env_var,
                )
            )
            continue
        applied.append(binding.env_var)

    missing = [s for s in REQUIRED_SECTIONS if s not in tree]
    issues.extend(
        ConfigIssue(
            path=section,
            message=f"Required section '{section}' is missing",
            code=ConfigIssueCode.MISSING_SECTION,
        )
        for section in missing
    )

    config: PaymentConfig | None = None
    if not missing:
        try:
            config = PaymentConfig.model_validate(tree)
        except PydanticValidationError as exc:
            issues.extend(_field_issues(exc))

    logger.debug(
        "Resolved payment config: file=%s env=%s issues=%d",
        file_config is not None,
        applied,
        len(issues),
    )
    if issues or config is None:
        return ConfigError(issues=tuple(issues))
    return config


def _field_issues(exc: PydanticValidationError) -> list[ConfigIssue]:
    issues: list[ConfigIssue] = []
    for err in exc.errors(include_url=False):
        code = (
            ConfigIssueCode.INVALID_STRUCTURE
            if err["type"] in ("model_type", "dict_type", "model_attributes_type")
            else ConfigIssueCode.INVALID_FIELD
        )
        issues.append(ConfigIssue(path=join_loc(err["loc"]), message=err["msg"], code=code))
    return issues
