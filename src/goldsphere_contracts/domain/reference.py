"""Reference metadata for currencies and metals.

Wire payloads carry the plain enum value. Clients that accept free-form
user input (``"eur"``, ``"978"``, ``"Au"``) resolve it here first.
"""

from __future__ import annotations

from dataclasses import dataclass

from goldsphere_contracts.domain.types import Currency, MetalType


@dataclass(frozen=True)
class CurrencyInfo:
    """ISO metadata for one currency."""

    currency: Currency
    country_code: str
    numeric_code: int


@dataclass(frozen=True)
class MetalInfo:
    """Chemical symbol and display name for one metal."""

    metal: MetalType
    symbol: str
    display_name: str


CURRENCIES: tuple[CurrencyInfo, ...] = (
    CurrencyInfo(Currency.USD, "US", 840),
    CurrencyInfo(Currency.EUR, "EU", 978),
    CurrencyInfo(Currency.CHF, "CH", 756),
    CurrencyInfo(Currency.GBP, "GB", 826),
    CurrencyInfo(Currency.CAD, "CA", 124),
    CurrencyInfo(Currency.AUD, "AU", 36),
)

METALS: tuple[MetalInfo, ...] = (
    MetalInfo(MetalType.GOLD, "AU", "Gold"),
    MetalInfo(MetalType.SILVER, "AG", "Silver"),
    MetalInfo(MetalType.PALLADIUM, "PD", "Palladium"),
    MetalInfo(MetalType.PLATINUM, "PT", "Platinum"),
)


def currency_info(currency: Currency) -> CurrencyInfo:
    """Return the metadata row for *currency*."""
    for info in CURRENCIES:
        if info.currency is currency:
            return info
    raise KeyError(currency)


def currency_from_code(code: str | int) -> Currency | None:
    """Resolve an ISO alpha-3 code, country code, or numeric code.

    Matching is case-insensitive. Returns None when nothing matches.

    Examples:
        >>> currency_from_code("eur")
        <Currency.EUR: 'EUR'>
        >>> currency_from_code(756)
        <Currency.CHF: 'CHF'>
    """
    if isinstance(code, int):
        return next((i.currency for i in CURRENCIES if i.numeric_code == code), None)
    needle = code.strip().lower()
    for info in CURRENCIES:
        if needle in (
            info.currency.value.lower(),
            info.country_code.lower(),
            str(info.numeric_code),
        ):
            return info.currency
    return None


def metal_from_value(value: str) -> MetalType | None:
    """Resolve a metal by wire value, symbol, or display name (case-insensitive)."""
    needle = value.strip().lower()
    for info in METALS:
        if needle in (info.metal.value, info.symbol.lower(), info.display_name.lower()):
            return info.metal
    return None
