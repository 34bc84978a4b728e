"""Rules parameterized by the resolved payment configuration.

The registry schemas are config-independent. A process that has
resolved its :class:`~goldsphere_contracts.config.models.PaymentConfig`
derives stricter schemas from them::

    schema = get_schema("create_payment_intent_request").with_rules(
        *currency_policy(config)
    )
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from goldsphere_contracts.paths import get_path
from goldsphere_contracts.validation.result import RuleKind
from goldsphere_contracts.validation.rules import Rule

if TYPE_CHECKING:
    from goldsphere_contracts.config.models import PaymentConfig


def currency_policy(
    config: PaymentConfig,
    *,
    currency_field: str = "currency",
    amount_field: str = "amount",
) -> tuple[Rule[Any], Rule[Any]]:
    """Currency allow-list and per-currency amount bounds.

    Amounts are compared in minor units against ``currencySettings``.
    A missing amount (optional field left unset) passes.
    """
    supported = {str(c) for c in config.currency.supported_currencies}
    settings = config.currency.currency_settings

    def currency_supported(value: Any) -> bool:
        return str(get_path(value, currency_field)) in supported

    def amount_within_limits(value: Any) -> bool:
        amount = get_path(value, amount_field)
        limits = settings.get(str(get_path(value, currency_field)))
        if amount is None or limits is None:
            return True
        return limits.min_amount <= amount <= limits.max_amount

    allowed = ", ".join(sorted(supported))
    return (
        Rule(
            name="currency_supported",
            path=currency_field,
            message=f"Currency {{value}} is not enabled (supported: {allowed})",
            predicate=currency_supported,
            kind=RuleKind.ENUM,
        ),
        Rule(
            name="amount_within_limits",
            path=amount_field,
            message="Amount {value} is outside the configured limits for this currency",
            predicate=amount_within_limits,
            kind=RuleKind.RANGE,
        ),
    )
