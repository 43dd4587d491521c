"""Application use cases package."""

from .get_exchange_rates import GetExchangeRatesUseCase
from .get_account_balances import GetAccountBalancesUseCase, AccountBalance
from .get_net_worth_summary import (
    GetNetWorthSummaryUseCase,
    NetWorthSummary,
)
from .get_asset_category_breakdown import (
    GetAssetCategoryBreakdownUseCase,
    AssetCategoryBreakdown,
    AssetCategoryAmount,
)

__all__ = [
    "GetExchangeRatesUseCase",
    "GetAccountBalancesUseCase",
    "AccountBalance",
    "GetNetWorthSummaryUseCase",
    "NetWorthSummary",
    "GetAssetCategoryBreakdownUseCase",
    "AssetCategoryBreakdown",
    "AssetCategoryAmount",
]
