"""Domain validation helpers."""

from logging import Logger

from src.domain.models import AccountBalance, AccountType


def validate_balance_sign(balance: AccountBalance, logger: Logger) -> None:
    """Warn when a computed balance violates expected sign conventions.

    Args:
        balance: Computed account balance.
        logger: Logger used for warnings.
    """
    if balance.calculated_balance >= 0:
        return
    if balance.account_type == AccountType.ASSET:
        logger.warning(
            f"Asset balance is negative for account {balance.account_id}: "
            f"{balance.calculated_balance}"
        )
    else:
        logger.warning(
            f"Liability balance is negative (overpaid) for account "
            f"{balance.account_id}: {balance.calculated_balance}"
        )


__all__ = ["validate_balance_sign"]
