"""Hand-authored default configuration layer.

Sparse contract: defaults cover the common sections; ``webhooks`` has no
sensible default and must come from a file or the environment.
"""

from __future__ import annotations

from typing import Any


def default_payment_config() -> dict[str, Any]:
    """Return a fresh copy of the default layer (camelCase wire keys).

    A new dict per call, so callers and tests may modify their copy freely.
    """
    return {
        "currency": {
            "supportedCurrencies": ["EUR", "USD"],
            "defaultCurrency": "EUR",
            "currencySettings": {
                "EUR": {
                    "minAmount": 100,  # €1.00
                    "maxAmount": 10_000_000,  # €100,000.00
                    "showSymbol": True,
                    "decimalPlaces": 2,
                },
                "USD": {
                    "minAmount": 100,
                    "maxAmount": 10_000_000,
                    "showSymbol": True,
                    "decimalPlaces": 2,
                },
            },
        },
        "fees": {
            "processingFeePercentage": 2.9,
            "fixedFee": 30,
            "paymentMethodFees": {
                "card": {"percentage": 2.9, "fixed": 30},
                "bankTransfer": {"percentage": 0.8, "fixed": 0},
                "sepaDebit": {"percentage": 0.35, "fixed": 0},
            },
        },
        "security": {
            "require3DSecure": True,
            "fraudDetection": {"enabled": True, "riskThreshold": 75},
            "rateLimiting": {
                "enabled": True,
                "maxRequestsPerMinute": 60,
                "maxRequestsPerHour": 1000,
            },
        },
        "compliance": {
            "pciLevel": "level-1",
            "dataRetention": {
                "paymentDataDays": 2555,  # 7 years
                "logDataDays": 365,
                "customerDataDays": 2555,
            },
            "gdpr": {"enabled": True, "autoDelete": False, "dataExport": True},
            "regionalCompliance": {"sca": True, "openBanking": False},
        },
        "environment": {
            "environment": "development",
            "apiBaseUrl": "http://localhost:3000/api/v1",
            "frontendBaseUrl": "http://localhost:5173",
            "debug": True,
            "monitoring": False,
        },
        "cache": {
            "enabled": True,
            "ttl": 300,
            "provider": "memory",
            "keyPrefix": "goldsphere:payment:",
            "maxSize": 1000,
        },
    }
