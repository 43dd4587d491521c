"""Port for reading the accounts and transactions of a ledger."""

from typing import Protocol

from src.domain.models import Account, Transaction


class LedgerRepositoryPort(Protocol):
    """Port exposing read access to a user's accounts and transactions."""

    def fetch_accounts(self, user_id: str) -> list[Account]:
        """Return every asset and liability account of the user."""

    def fetch_transactions(self, user_id: str) -> list[Transaction]:
        """Return the user's full transaction ledger."""


__all__ = ["LedgerRepositoryPort"]
