"""SQLAlchemy-backed repository for ledger accounts and transactions."""

from sqlalchemy import text

from src.application.ports.database import DatabaseEnginePort
from src.application.ports.ledger_repository import LedgerRepositoryPort
from src.domain.constants import DEFAULT_CURRENCY
from src.domain.models import Account, Transaction
from src.infrastructure.ledger_records import (
    asset_from_record,
    liability_from_record,
    transaction_from_record,
)
from src.infrastructure.logging.logger import get_app_logger


SELECT_ASSETS_SQL = text(
    """
    SELECT a.id, a.name, a.type, a.category, a.value,
           a.opening_balance, a.opening_balance_date,
           e.name AS entity_name
    FROM assets a
    JOIN entities e ON e.id = a.entity_id
    WHERE a.user_id = :user_id
    ORDER BY a.name, a.id
    """
)

SELECT_LIABILITIES_SQL = text(
    """
    SELECT l.id, l.name, l.type, l.category, l.amount,
           l.opening_balance, l.opening_balance_date,
           e.name AS entity_name
    FROM liabilities l
    JOIN entities e ON e.id = l.entity_id
    WHERE l.user_id = :user_id
    ORDER BY l.name, l.id
    """
)

SELECT_TRANSACTIONS_SQL = text(
    """
    SELECT id, date, amount, currency,
           asset_account_id, liability_account_id
    FROM transactions
    WHERE user_id = :user_id
    ORDER BY date, id
    """
)


class SqlAlchemyLedgerRepository(LedgerRepositoryPort):
    """Repository reading assets, liabilities and transactions via SQL."""

    def __init__(
        self,
        db_port: DatabaseEnginePort,
        logger=None,
        default_currency: str = DEFAULT_CURRENCY,
    ) -> None:
        """Initialize the repository.

        Args:
            db_port: Port providing access to the ledger engine.
            logger: Optional logger compatible with logging.Logger-like API.
            default_currency: Currency assumed for transactions without one.
        """
        self._db_port = db_port
        self._logger = logger or get_app_logger()
        self._default_currency = default_currency

    def fetch_accounts(self, user_id: str) -> list[Account]:
        """Return the user's asset accounts followed by liabilities."""
        params = {"user_id": user_id}
        engine = self._db_port.get_ledger_engine()
        with engine.connect() as conn:
            asset_rows = conn.execute(SELECT_ASSETS_SQL, params).all()
            liability_rows = conn.execute(SELECT_LIABILITIES_SQL, params).all()
        accounts: list[Account] = [
            asset_from_record(row._mapping, self._logger)
            for row in asset_rows
        ]
        accounts.extend(
            liability_from_record(row._mapping, self._logger)
            for row in liability_rows
        )
        self._logger.info(
            f"Fetched {len(asset_rows)} assets and "
            f"{len(liability_rows)} liabilities for user {user_id}"
        )
        return accounts

    def fetch_transactions(self, user_id: str) -> list[Transaction]:
        """Return the user's transactions, skipping unusable records."""
        engine = self._db_port.get_ledger_engine()
        with engine.connect() as conn:
            rows = conn.execute(
                SELECT_TRANSACTIONS_SQL,
                {"user_id": user_id},
            ).all()
        transactions = []
        for row in rows:
            transaction = transaction_from_record(
                row._mapping,
                self._logger,
                self._default_currency,
            )
            if transaction is not None:
                transactions.append(transaction)
        skipped = len(rows) - len(transactions)
        if skipped:
            self._logger.warning(
                f"Skipped {skipped} malformed transactions for user {user_id}"
            )
        self._logger.info(
            f"Fetched {len(transactions)} transactions for user {user_id}"
        )
        return transactions


__all__ = ["SqlAlchemyLedgerRepository"]
