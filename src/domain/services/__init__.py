"""Domain services package."""

from .balances import (
    calculate_all_balances,
    compute_account_balance,
    find_account_balance,
    get_balance,
    get_closing_balance,
    get_opening_balance,
    group_transactions_by_account,
    sum_transactions,
)
from .finance import (
    compute_asset_category_breakdown,
    compute_net_worth_summary,
)
from .formatting import format_currency
from .fx import build_static_snapshot, convert_amount, rebase_rates
from .normalization import normalize_currency_code, normalize_identifier
from .validation import validate_balance_sign

__all__ = [
    "calculate_all_balances",
    "compute_account_balance",
    "find_account_balance",
    "get_balance",
    "get_closing_balance",
    "get_opening_balance",
    "group_transactions_by_account",
    "sum_transactions",
    "compute_asset_category_breakdown",
    "compute_net_worth_summary",
    "format_currency",
    "build_static_snapshot",
    "convert_amount",
    "rebase_rates",
    "normalize_currency_code",
    "normalize_identifier",
    "validate_balance_sign",
]
