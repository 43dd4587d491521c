"""Currency display helpers."""

from decimal import ROUND_HALF_UP, Decimal

from src.domain.constants import CURRENCIES
from src.utils.decimal_utils import coerce_decimal


CURRENCY_SYMBOLS = {item["code"]: item["symbol"] for item in CURRENCIES}


def format_currency(amount, currency_code: str) -> str:
    """Format an amount with its currency symbol and two decimals.

    Args:
        amount: Numeric amount.
        currency_code: Currency code; unknown codes are used as a prefix.

    Returns:
        str: Formatted amount such as ``A$1,234.56`` or ``-A$1,234.56``.
    """
    value = coerce_decimal(amount).quantize(
        Decimal("0.01"),
        rounding=ROUND_HALF_UP,
    )
    code = currency_code.strip().upper()
    symbol = CURRENCY_SYMBOLS.get(code, f"{code} ")
    sign = "-" if value < 0 else ""
    return f"{sign}{symbol}{abs(value):,.2f}"


__all__ = ["CURRENCY_SYMBOLS", "format_currency"]
