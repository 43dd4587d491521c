"""Use case to compute net worth from calculated account balances."""

from src.application.use_cases.get_account_balances import (
    GetAccountBalancesUseCase,
)
from src.domain.models import NetWorthSummary
from src.domain.services.finance import compute_net_worth_summary
from src.infrastructure.logging.logger import get_app_logger


class GetNetWorthSummaryUseCase:
    """Compute total assets, total liabilities and net worth."""

    def __init__(
        self,
        account_balances: GetAccountBalancesUseCase,
        logger=None,
    ) -> None:
        """Initialize the use case.

        Args:
            account_balances: Use case computing per-account balances.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._account_balances = account_balances
        self._logger = logger or get_app_logger()

    def execute(
        self,
        user_id: str,
        base_currency: str | None = None,
    ) -> NetWorthSummary:
        """Return the net worth summary.

        Args:
            user_id: Owner of the ledger.
            base_currency: Optional override of the default base currency.

        Returns:
            NetWorthSummary: Computed asset, liability, and net worth totals.
        """
        balances = self._account_balances.execute(user_id, base_currency)
        currency_code = self._account_balances.resolve_currency(base_currency)
        summary = compute_net_worth_summary(
            balances,
            currency_code=currency_code,
        )
        self._logger.info(
            f"Net worth computed: assets={summary.asset_total}, "
            f"liabilities={summary.liability_total}"
        )
        return summary


__all__ = ["GetNetWorthSummaryUseCase", "NetWorthSummary"]
