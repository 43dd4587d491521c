"""Domain constants for balance reconciliation."""

from datetime import timedelta
from decimal import Decimal

DEFAULT_CURRENCY = "AUD"

DEFAULT_RATE_FRESHNESS = timedelta(hours=1)

STATIC_RATES_BASE = "USD"

# Approximate units per 1 USD, used only when no live or cached rates exist.
STATIC_USD_RATES = {
    "AUD": Decimal("1.52"),
    "USD": Decimal("1"),
    "EUR": Decimal("0.92"),
    "GBP": Decimal("0.79"),
    "NZD": Decimal("1.66"),
    "CAD": Decimal("1.36"),
    "JPY": Decimal("150.0"),
    "SGD": Decimal("1.34"),
    "HKD": Decimal("7.82"),
    "CHF": Decimal("0.88"),
    "CNY": Decimal("7.24"),
    "INR": Decimal("83.2"),
}

CURRENCIES = (
    {"code": "AUD", "name": "Australian Dollar", "symbol": "A$"},
    {"code": "USD", "name": "US Dollar", "symbol": "$"},
    {"code": "EUR", "name": "Euro", "symbol": "€"},
    {"code": "GBP", "name": "British Pound", "symbol": "£"},
    {"code": "NZD", "name": "New Zealand Dollar", "symbol": "NZ$"},
    {"code": "CAD", "name": "Canadian Dollar", "symbol": "C$"},
    {"code": "JPY", "name": "Japanese Yen", "symbol": "¥"},
    {"code": "SGD", "name": "Singapore Dollar", "symbol": "S$"},
    {"code": "HKD", "name": "Hong Kong Dollar", "symbol": "HK$"},
    {"code": "CHF", "name": "Swiss Franc", "symbol": "CHF "},
    {"code": "CNY", "name": "Chinese Yuan", "symbol": "CN¥"},
    {"code": "INR", "name": "Indian Rupee", "symbol": "₹"},
)

DEFAULT_ASSET_CATEGORY = "other"


__all__ = [
    "DEFAULT_CURRENCY",
    "DEFAULT_RATE_FRESHNESS",
    "STATIC_RATES_BASE",
    "STATIC_USD_RATES",
    "CURRENCIES",
    "DEFAULT_ASSET_CATEGORY",
]
