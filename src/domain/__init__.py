"""Domain package for balance rules and core models."""

from .constants import CURRENCIES, DEFAULT_CURRENCY, DEFAULT_RATE_FRESHNESS
from .errors import ExchangeRateFetchError, LedgerError
from .models import (
    Account,
    AccountBalance,
    AccountType,
    AssetAccount,
    AssetCategoryAmount,
    AssetCategoryBreakdown,
    ExchangeRateSnapshot,
    LiabilityAccount,
    LiabilityKind,
    NetWorthSummary,
    RateSource,
    Transaction,
)
from .policies import apply_sign_convention
from .services import (
    calculate_all_balances,
    compute_asset_category_breakdown,
    compute_net_worth_summary,
    convert_amount,
    format_currency,
)

__all__ = [
    "CURRENCIES",
    "DEFAULT_CURRENCY",
    "DEFAULT_RATE_FRESHNESS",
    "ExchangeRateFetchError",
    "LedgerError",
    "Account",
    "AccountBalance",
    "AccountType",
    "AssetAccount",
    "AssetCategoryAmount",
    "AssetCategoryBreakdown",
    "ExchangeRateSnapshot",
    "LiabilityAccount",
    "LiabilityKind",
    "NetWorthSummary",
    "RateSource",
    "Transaction",
    "apply_sign_convention",
    "calculate_all_balances",
    "compute_asset_category_breakdown",
    "compute_net_worth_summary",
    "convert_amount",
    "format_currency",
]
