"""Use case to compute the asset breakdown by type and category."""

from src.application.ports.ledger_repository import LedgerRepositoryPort
from src.application.use_cases.get_account_balances import (
    GetAccountBalancesUseCase,
)
from src.domain.models import AssetCategoryAmount, AssetCategoryBreakdown
from src.domain.services.finance import compute_asset_category_breakdown
from src.infrastructure.logging.logger import get_app_logger


class GetAssetCategoryBreakdownUseCase:
    """Group calculated asset balances by asset type or category."""

    def __init__(
        self,
        ledger_repository: LedgerRepositoryPort,
        account_balances: GetAccountBalancesUseCase,
        logger=None,
    ) -> None:
        """Initialize the use case.

        Args:
            ledger_repository: Port providing accounts and transactions.
            account_balances: Use case computing per-account balances.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._ledger_repository = ledger_repository
        self._account_balances = account_balances
        self._logger = logger or get_app_logger()

    def execute(
        self,
        user_id: str,
        base_currency: str | None = None,
        level: int = 1,
    ) -> AssetCategoryBreakdown:
        """Return the asset breakdown in the base currency.

        Args:
            user_id: Owner of the ledger.
            base_currency: Optional override of the default base currency.
            level: 1 groups by asset type, 2 by asset type and category.

        Returns:
            AssetCategoryBreakdown: Aggregated asset totals by category.
        """
        if level not in (1, 2):
            raise ValueError(f"Unsupported breakdown level: {level}")
        accounts = self._ledger_repository.fetch_accounts(user_id)
        transactions = self._ledger_repository.fetch_transactions(user_id)
        balances = self._account_balances.calculate(
            accounts,
            transactions,
            base_currency,
        )
        breakdown = compute_asset_category_breakdown(
            accounts,
            balances,
            currency_code=self._account_balances.resolve_currency(
                base_currency
            ),
            level=level,
        )
        self._logger.info(
            f"Computed asset breakdown with {len(breakdown.categories)} "
            f"categories at level {level}"
        )
        return breakdown


__all__ = [
    "GetAssetCategoryBreakdownUseCase",
    "AssetCategoryBreakdown",
    "AssetCategoryAmount",
]
