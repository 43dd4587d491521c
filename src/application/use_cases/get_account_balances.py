"""Use case to compute account balances from the transaction ledger."""

from collections.abc import Iterable
from decimal import Decimal

from src.application.ports.ledger_repository import LedgerRepositoryPort
from src.application.use_cases.get_exchange_rates import (
    GetExchangeRatesUseCase,
)
from src.domain.constants import DEFAULT_CURRENCY
from src.domain.models import Account, AccountBalance, Transaction
from src.domain.services.balances import (
    calculate_all_balances,
    get_balance,
    get_closing_balance,
    get_opening_balance,
)
from src.domain.services.normalization import normalize_currency_code
from src.infrastructure.logging.logger import get_app_logger


class GetAccountBalancesUseCase:
    """Compute opening, transaction and closing figures for every account."""

    def __init__(
        self,
        ledger_repository: LedgerRepositoryPort,
        exchange_rates: GetExchangeRatesUseCase,
        logger=None,
        base_currency: str = DEFAULT_CURRENCY,
    ) -> None:
        """Initialize the use case.

        Args:
            ledger_repository: Port providing accounts and transactions.
            exchange_rates: Use case returning a rate snapshot.
            logger: Optional logger compatible with logging.Logger-like API.
            base_currency: Default currency balances are expressed in.
        """
        self._ledger_repository = ledger_repository
        self._exchange_rates = exchange_rates
        self._logger = logger or get_app_logger()
        self._base_currency = (
            normalize_currency_code(base_currency) or DEFAULT_CURRENCY
        )

    def execute(
        self,
        user_id: str,
        base_currency: str | None = None,
    ) -> list[AccountBalance]:
        """Return balances for every account of a user.

        Args:
            user_id: Owner of the ledger.
            base_currency: Optional override of the default base currency.

        Returns:
            list[AccountBalance]: Balances sorted by account name.
        """
        accounts = self._ledger_repository.fetch_accounts(user_id)
        transactions = self._ledger_repository.fetch_transactions(user_id)
        return self.calculate(accounts, transactions, base_currency)

    def calculate(
        self,
        accounts: Iterable[Account],
        transactions: Iterable[Transaction],
        base_currency: str | None = None,
    ) -> list[AccountBalance]:
        """Return balances for already loaded accounts and transactions.

        Args:
            accounts: Asset and liability accounts.
            transactions: Full transaction ledger.
            base_currency: Optional override of the default base currency.

        Returns:
            list[AccountBalance]: Balances sorted by account name.
        """
        base = self.resolve_currency(base_currency)
        rates = self._exchange_rates.execute(base)
        balances = calculate_all_balances(
            accounts,
            transactions,
            rates,
            base_currency=base,
            logger=self._logger,
        )
        self._logger.info(
            f"Calculated {len(balances)} account balances in {base} "
            f"using {rates.source.value} rates"
        )
        return balances

    def get_balance(
        self,
        account_id: str,
        user_id: str,
        base_currency: str | None = None,
    ) -> Decimal:
        """Return one account's calculated balance, 0 when not found."""
        return get_balance(self.execute(user_id, base_currency), account_id)

    def get_opening_balance(
        self,
        account_id: str,
        user_id: str,
        base_currency: str | None = None,
    ) -> Decimal:
        """Return one account's opening balance, 0 when not found."""
        return get_opening_balance(
            self.execute(user_id, base_currency),
            account_id,
        )

    def get_closing_balance(
        self,
        account_id: str,
        user_id: str,
        base_currency: str | None = None,
    ) -> Decimal:
        """Return one account's closing balance, 0 when not found."""
        return get_closing_balance(
            self.execute(user_id, base_currency),
            account_id,
        )

    def resolve_currency(self, base_currency: str | None = None) -> str:
        """Return the normalized base currency for a run."""
        return normalize_currency_code(base_currency) or self._base_currency


__all__ = ["GetAccountBalancesUseCase", "AccountBalance"]
