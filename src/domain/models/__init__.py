"""Domain models package."""

from .accounts import (
    Account,
    AccountBalance,
    AccountType,
    AssetAccount,
    LiabilityAccount,
    LiabilityKind,
)
from .finance import (
    AssetCategoryAmount,
    AssetCategoryBreakdown,
    NetWorthSummary,
)
from .rates import ExchangeRateSnapshot, RateSource
from .transactions import Transaction

__all__ = [
    "Account",
    "AccountBalance",
    "AccountType",
    "AssetAccount",
    "LiabilityAccount",
    "LiabilityKind",
    "NetWorthSummary",
    "AssetCategoryAmount",
    "AssetCategoryBreakdown",
    "ExchangeRateSnapshot",
    "RateSource",
    "Transaction",
]
