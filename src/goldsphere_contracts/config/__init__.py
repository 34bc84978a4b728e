"""Payment configuration: models, layered resolution, and policy checks."""

from goldsphere_contracts.config.checks import CheckIssue, ConfigCheckReport, check_config
from goldsphere_contracts.config.defaults import default_payment_config
from goldsphere_contracts.config.env import ENV_VAR_MAPPINGS, EnvBinding
from goldsphere_contracts.config.models import PaymentConfig
from goldsphere_contracts.config.resolver import (
    ConfigError,
    ConfigIssue,
    ConfigIssueCode,
    resolve,
)

__all__ = [
    "ENV_VAR_MAPPINGS",
    "CheckIssue",
    "ConfigCheckReport",
    "ConfigError",
    "ConfigIssue",
    "ConfigIssueCode",
    "EnvBinding",
    "PaymentConfig",
    "check_config",
    "default_payment_config",
    "resolve",
]
