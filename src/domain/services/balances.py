"""Domain services deriving account balances from the transaction ledger."""

from collections import defaultdict
from collections.abc import Iterable
from decimal import Decimal
from logging import Logger

from src.domain.models import (
    Account,
    AccountBalance,
    AccountType,
    ExchangeRateSnapshot,
    LiabilityAccount,
    Transaction,
)
from src.domain.policies import apply_sign_convention
from src.domain.services.fx import convert_amount
from src.domain.services.validation import validate_balance_sign


AccountKey = tuple[AccountType, str]


def group_transactions_by_account(
    transactions: Iterable[Transaction],
) -> dict[AccountKey, list[Transaction]]:
    """Index assigned transactions by the account they belong to.

    Transactions with both or neither account reference are dropped.

    Args:
        transactions: Full transaction ledger.

    Returns:
        dict[AccountKey, list[Transaction]]: Transactions per
        (account type, account id).
    """
    grouped: dict[AccountKey, list[Transaction]] = defaultdict(list)
    for transaction in transactions:
        if not transaction.is_assigned:
            continue
        if transaction.asset_account_id:
            key = (AccountType.ASSET, transaction.asset_account_id)
        else:
            key = (AccountType.LIABILITY, transaction.liability_account_id)
        grouped[key].append(transaction)
    return grouped


def sum_transactions(
    account: Account,
    transactions: Iterable[Transaction],
    rates: ExchangeRateSnapshot,
    base_currency: str,
    logger: Logger,
) -> Decimal:
    """Sum an account's qualifying transactions in the base currency.

    Args:
        account: Account whose opening date bounds the transactions.
        transactions: Transactions already assigned to the account.
        rates: Snapshot used for currency conversion.
        base_currency: Currency every amount is normalized into.
        logger: Logger used for warnings.

    Returns:
        Decimal: Net sum of transactions dated on or after the opening
        balance date; unconvertible amounts contribute zero.
    """
    total = Decimal("0")
    for transaction in transactions:
        if transaction.date < account.opening_balance_date:
            continue
        converted = convert_amount(
            transaction.amount,
            transaction.currency,
            base_currency,
            rates,
            logger,
        )
        if converted is None:
            logger.warning(
                f"Transaction {transaction.id} on account {account.id} "
                f"ignored: no rate for {transaction.currency}"
            )
            continue
        total += converted
    return total


def compute_account_balance(
    account: Account,
    transactions: Iterable[Transaction],
    rates: ExchangeRateSnapshot,
    *,
    base_currency: str,
    logger: Logger,
) -> AccountBalance | None:
    """Compute one account's balance from its assigned transactions.

    Args:
        account: Account to compute.
        transactions: Transactions assigned to the account.
        rates: Snapshot used for currency conversion.
        base_currency: Currency every amount is normalized into.
        logger: Logger used for warnings.

    Returns:
        AccountBalance | None: Computed balance, or None when the account
        has no usable opening balance date.
    """
    if account.opening_balance_date is None:
        logger.warning(
            f"Skipping account {account.id} ({account.name}): "
            "missing opening balance date"
        )
        return None
    transaction_sum = sum_transactions(
        account,
        transactions,
        rates,
        base_currency,
        logger,
    )
    calculated = apply_sign_convention(
        account,
        account.opening_balance,
        transaction_sum,
    )
    liability_kind = (
        account.liability_kind
        if isinstance(account, LiabilityAccount)
        else None
    )
    return AccountBalance(
        account_id=account.id,
        account_name=account.name,
        entity_name=account.entity_name,
        account_type=account.account_type,
        opening_balance=account.opening_balance,
        transaction_sum=transaction_sum,
        calculated_balance=calculated,
        currency_code=base_currency,
        liability_kind=liability_kind,
    )


def calculate_all_balances(
    accounts: Iterable[Account],
    transactions: Iterable[Transaction],
    rates: ExchangeRateSnapshot,
    *,
    base_currency: str,
    logger: Logger,
) -> list[AccountBalance]:
    """Compute balances for every account of the ledger.

    Args:
        accounts: Asset and liability accounts.
        transactions: Full transaction ledger.
        rates: Snapshot used for currency conversion.
        base_currency: Currency every amount is normalized into.
        logger: Logger used for warnings.

    Returns:
        list[AccountBalance]: Balances sorted by account name then id;
        accounts without an opening balance date are omitted.
    """
    grouped = group_transactions_by_account(transactions)
    balances = []
    for account in accounts:
        balance = compute_account_balance(
            account,
            grouped.get((account.account_type, account.id), []),
            rates,
            base_currency=base_currency,
            logger=logger,
        )
        if balance is None:
            continue
        validate_balance_sign(balance, logger)
        balances.append(balance)
    return sorted(
        balances,
        key=lambda item: (item.account_name.lower(), item.account_id),
    )


def find_account_balance(
    balances: Iterable[AccountBalance],
    account_id: str,
) -> AccountBalance | None:
    """Return the balance computed for ``account_id``, if any."""
    for balance in balances:
        if balance.account_id == account_id:
            return balance
    return None


def get_balance(
    balances: Iterable[AccountBalance],
    account_id: str,
) -> Decimal:
    """Return the calculated balance for an account, 0 when unknown."""
    balance = find_account_balance(balances, account_id)
    return balance.calculated_balance if balance else Decimal("0")


def get_opening_balance(
    balances: Iterable[AccountBalance],
    account_id: str,
) -> Decimal:
    """Return the opening balance for an account, 0 when unknown."""
    balance = find_account_balance(balances, account_id)
    return balance.opening_balance if balance else Decimal("0")


def get_closing_balance(
    balances: Iterable[AccountBalance],
    account_id: str,
) -> Decimal:
    """Return the closing balance for an account, 0 when unknown."""
    balance = find_account_balance(balances, account_id)
    return balance.closing_balance if balance else Decimal("0")


__all__ = [
    "group_transactions_by_account",
    "sum_transactions",
    "compute_account_balance",
    "calculate_all_balances",
    "find_account_balance",
    "get_balance",
    "get_opening_balance",
    "get_closing_balance",
]
