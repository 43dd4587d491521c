"""Sign conventions for combining opening balances with transactions."""

from decimal import Decimal

from src.domain.models import (
    Account,
    AssetAccount,
    LiabilityAccount,
    LiabilityKind,
)


_ADDITIVE_LIABILITY_KINDS = frozenset({LiabilityKind.CREDIT})
_SUBTRACTIVE_LIABILITY_KINDS = frozenset(
    {LiabilityKind.LOAN, LiabilityKind.MORTGAGE, LiabilityKind.OTHER}
)


def transactions_increase_balance(account: Account) -> bool:
    """Return True when positive transactions raise the account balance.

    Asset and credit-card accounts add their transactions; loan, mortgage
    and other liabilities record payments, which reduce what is owed.

    Args:
        account: Account to classify.

    Returns:
        bool: True for additive accounts, False for subtractive ones.

    Raises:
        TypeError: If the account is not a known account variant.
        ValueError: If a liability carries an unknown kind.
    """
    if isinstance(account, AssetAccount):
        return True
    if isinstance(account, LiabilityAccount):
        if account.liability_kind in _ADDITIVE_LIABILITY_KINDS:
            return True
        if account.liability_kind in _SUBTRACTIVE_LIABILITY_KINDS:
            return False
        raise ValueError(
            f"Unsupported liability kind: {account.liability_kind!r}"
        )
    raise TypeError(f"Unsupported account variant: {type(account).__name__}")


def apply_sign_convention(
    account: Account,
    opening_balance: Decimal,
    transaction_sum: Decimal,
) -> Decimal:
    """Combine an opening balance with a transaction sum for an account."""
    if transactions_increase_balance(account):
        return opening_balance + transaction_sum
    return opening_balance - transaction_sum


__all__ = ["transactions_increase_balance", "apply_sign_convention"]
