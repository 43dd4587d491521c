"""Domain models for ledger accounts and their computed balances."""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from enum import Enum


class AccountType(str, Enum):
    """Top-level account classification."""

    ASSET = "asset"
    LIABILITY = "liability"


class LiabilityKind(str, Enum):
    """Sub-classification of debt accounts."""

    CREDIT = "credit"
    LOAN = "loan"
    MORTGAGE = "mortgage"
    OTHER = "other"


@dataclass(frozen=True)
class AssetAccount:
    """Asset account with its opening balance of record.

    Attributes:
        id: Opaque account identifier.
        name: Display label.
        entity_name: Name of the owning entity.
        opening_balance: Balance as of ``opening_balance_date``.
        opening_balance_date: Reference date, or None when missing.
        asset_type: Asset group (cash, investment, property, ...).
        category: Finer asset category (savings_account, stocks, ...).
    """

    id: str
    name: str
    entity_name: str
    opening_balance: Decimal
    opening_balance_date: date | None
    asset_type: str | None = None
    category: str | None = None

    @property
    def account_type(self) -> AccountType:
        return AccountType.ASSET


@dataclass(frozen=True)
class LiabilityAccount:
    """Liability account with its opening balance of record.

    Attributes:
        id: Opaque account identifier.
        name: Display label.
        entity_name: Name of the owning entity.
        opening_balance: Amount owed as of ``opening_balance_date``.
        opening_balance_date: Reference date, or None when missing.
        liability_kind: Debt kind driving the sign convention.
        category: Finer liability category (credit_card, home_loan, ...).
    """

    id: str
    name: str
    entity_name: str
    opening_balance: Decimal
    opening_balance_date: date | None
    liability_kind: LiabilityKind
    category: str | None = None

    @property
    def account_type(self) -> AccountType:
        return AccountType.LIABILITY


Account = AssetAccount | LiabilityAccount


@dataclass(frozen=True)
class AccountBalance:
    """Computed balance for one account in the run's base currency."""

    account_id: str
    account_name: str
    entity_name: str
    account_type: AccountType
    opening_balance: Decimal
    transaction_sum: Decimal
    calculated_balance: Decimal
    currency_code: str
    liability_kind: LiabilityKind | None = None

    @property
    def closing_balance(self) -> Decimal:
        """Return the closing balance, always the calculated balance."""
        return self.calculated_balance


__all__ = [
    "AccountType",
    "LiabilityKind",
    "AssetAccount",
    "LiabilityAccount",
    "Account",
    "AccountBalance",
]
