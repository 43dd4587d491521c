"""Domain services for finance aggregates."""

from collections.abc import Iterable
from decimal import Decimal

from src.domain.constants import DEFAULT_ASSET_CATEGORY
from src.domain.models import (
    Account,
    AccountBalance,
    AccountType,
    AssetAccount,
    AssetCategoryAmount,
    AssetCategoryBreakdown,
    NetWorthSummary,
)


def compute_net_worth_summary(
    balances: Iterable[AccountBalance],
    *,
    currency_code: str,
) -> NetWorthSummary:
    """Compute net worth totals from computed account balances.

    Args:
        balances: Balances already normalized into ``currency_code``.
        currency_code: Currency of the balances.

    Returns:
        NetWorthSummary: Computed asset, liability, and net worth totals.
    """
    asset_total = Decimal("0")
    liability_total = Decimal("0")
    for balance in balances:
        if balance.account_type == AccountType.ASSET:
            asset_total += balance.calculated_balance
        else:
            liability_total += balance.calculated_balance
    return NetWorthSummary(
        asset_total=asset_total,
        liability_total=liability_total,
        net_worth=asset_total - liability_total,
        currency_code=currency_code,
    )


def compute_asset_category_breakdown(
    accounts: Iterable[Account],
    balances: Iterable[AccountBalance],
    *,
    currency_code: str,
    level: int,
) -> AssetCategoryBreakdown:
    """Group asset balances by asset type or by (type, category).

    Args:
        accounts: Accounts carrying the grouping attributes.
        balances: Computed balances for those accounts.
        currency_code: Currency of the balances.
        level: 1 groups by asset type, 2 by asset type and category.

    Returns:
        AssetCategoryBreakdown: Aggregated asset totals by category.

    Raises:
        ValueError: If ``level`` is neither 1 nor 2.
    """
    if level not in (1, 2):
        raise ValueError(f"Unsupported breakdown level: {level}")
    assets = {
        account.id: account
        for account in accounts
        if isinstance(account, AssetAccount)
    }
    totals: dict[tuple[str | None, str], Decimal] = {}
    for balance in balances:
        account = assets.get(balance.account_id)
        if account is None:
            continue
        asset_type = account.asset_type or DEFAULT_ASSET_CATEGORY
        if level == 1:
            key = (None, asset_type)
        else:
            key = (asset_type, account.category or DEFAULT_ASSET_CATEGORY)
        totals[key] = totals.get(key, Decimal("0")) + balance.calculated_balance

    categories = [
        AssetCategoryAmount(
            category=category,
            amount=amount,
            parent_category=parent_category,
        )
        for (parent_category, category), amount in sorted(
            totals.items(),
            key=lambda item: (item[0][0] or "", item[0][1]),
        )
    ]
    return AssetCategoryBreakdown(
        currency_code=currency_code,
        categories=categories,
    )


__all__ = [
    "compute_net_worth_summary",
    "compute_asset_category_breakdown",
]
