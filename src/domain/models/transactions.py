"""Domain model for ledger transactions."""

from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal


@dataclass(frozen=True)
class Transaction:
    """Ledger transaction as recorded, in its own currency.

    Attributes:
        id: Opaque transaction identifier.
        date: Calendar date of the transaction.
        amount: Signed amount; positive is an inflow as recorded.
        currency: Upper-case currency code of ``amount``.
        asset_account_id: Owning asset account, if any.
        liability_account_id: Owning liability account, if any.
    """

    id: str
    date: date
    amount: Decimal
    currency: str
    asset_account_id: str | None = None
    liability_account_id: str | None = None

    def __post_init__(self) -> None:
        if isinstance(self.date, datetime):
            object.__setattr__(self, "date", self.date.date())

    @property
    def is_assigned(self) -> bool:
        """Return True when exactly one account reference is set."""
        return bool(self.asset_account_id) != bool(self.liability_account_id)


__all__ = ["Transaction"]
