"""Mapping helpers from persisted ledger records to domain models.

Records arrive as loosely typed mappings (SQL rows or JSON payloads from the
managed backend). These helpers turn them into the closed account variants
and transactions the balance engine works with, isolating bad fields per
record.
"""

from collections.abc import Mapping
from datetime import date, datetime
from decimal import Decimal
from logging import Logger
from typing import Any

from src.domain.constants import DEFAULT_CURRENCY
from src.domain.models import (
    AssetAccount,
    LiabilityAccount,
    LiabilityKind,
    Transaction,
)
from src.domain.services.normalization import (
    normalize_currency_code,
    normalize_identifier,
)
from src.utils.decimal_utils import parse_decimal


def parse_record_date(value) -> date | None:
    """Parse a date field from a record.

    Args:
        value: ``date``, ``datetime`` or ISO-8601 string.

    Returns:
        date | None: Calendar date, or None when missing or malformed.
    """
    if value is None:
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str):
        return None
    cleaned = value.strip()
    if not cleaned:
        return None
    try:
        return date.fromisoformat(cleaned[:10])
    except ValueError:
        return None


def _entity_name(record: Mapping[str, Any]) -> str:
    entity = record.get("entity") or record.get("entities")
    if isinstance(entity, Mapping) and entity.get("name"):
        return str(entity["name"])
    return str(record.get("entity_name") or "")


def _opening_fields(
    record: Mapping[str, Any],
    logger: Logger,
) -> tuple:
    account_id = normalize_identifier(record.get("id")) or ""
    opening_balance = parse_decimal(record.get("opening_balance"))
    if opening_balance is None:
        if record.get("opening_balance") is not None:
            logger.warning(
                f"Invalid opening balance for account {account_id}: "
                f"{record.get('opening_balance')!r}; using 0"
            )
        opening_balance = Decimal("0")
    opening_date = parse_record_date(record.get("opening_balance_date"))
    if opening_date is None:
        logger.warning(
            f"Invalid opening balance date for account {account_id}: "
            f"{record.get('opening_balance_date')!r}"
        )
    return account_id, opening_balance, opening_date


def asset_from_record(
    record: Mapping[str, Any],
    logger: Logger,
) -> AssetAccount:
    """Build an asset account from an asset record.

    Args:
        record: Mapping with id, name, type, category, opening_balance,
            opening_balance_date and entity name fields.
        logger: Logger used for warnings.

    Returns:
        AssetAccount: Asset account; a malformed opening date is kept as
        None so the engine can skip the account.
    """
    account_id, opening_balance, opening_date = _opening_fields(
        record,
        logger,
    )
    return AssetAccount(
        id=account_id,
        name=str(record.get("name") or ""),
        entity_name=_entity_name(record),
        opening_balance=opening_balance,
        opening_balance_date=opening_date,
        asset_type=record.get("type") or None,
        category=record.get("category") or None,
    )


def liability_from_record(
    record: Mapping[str, Any],
    logger: Logger,
) -> LiabilityAccount:
    """Build a liability account from a liability record.

    Args:
        record: Mapping with id, name, type, category, opening_balance,
            opening_balance_date and entity name fields.
        logger: Logger used for warnings.

    Returns:
        LiabilityAccount: Liability account; unknown types map to
        ``LiabilityKind.OTHER``.
    """
    account_id, opening_balance, opening_date = _opening_fields(
        record,
        logger,
    )
    raw_kind = str(record.get("type") or "").strip().lower()
    try:
        kind = LiabilityKind(raw_kind)
    except ValueError:
        logger.warning(
            f"Unknown liability type {raw_kind!r} for account {account_id}; "
            "treating as other"
        )
        kind = LiabilityKind.OTHER
    return LiabilityAccount(
        id=account_id,
        name=str(record.get("name") or ""),
        entity_name=_entity_name(record),
        opening_balance=opening_balance,
        opening_balance_date=opening_date,
        liability_kind=kind,
        category=record.get("category") or None,
    )


def transaction_from_record(
    record: Mapping[str, Any],
    logger: Logger,
    default_currency: str = DEFAULT_CURRENCY,
) -> Transaction | None:
    """Build a transaction from a transaction record.

    Args:
        record: Mapping with id, date, amount, currency and account
            reference fields.
        logger: Logger used for warnings.
        default_currency: Currency used when the record has none.

    Returns:
        Transaction | None: Transaction, or None when its date or amount
        is unusable.
    """
    transaction_id = normalize_identifier(record.get("id")) or ""
    transaction_date = parse_record_date(record.get("date"))
    if transaction_date is None:
        logger.warning(
            f"Skipping transaction {transaction_id}: invalid date "
            f"{record.get('date')!r}"
        )
        return None
    amount = parse_decimal(record.get("amount"))
    if amount is None:
        logger.warning(
            f"Skipping transaction {transaction_id}: invalid amount "
            f"{record.get('amount')!r}"
        )
        return None
    currency = (
        normalize_currency_code(record.get("currency"))
        or normalize_currency_code(default_currency)
        or DEFAULT_CURRENCY
    )
    return Transaction(
        id=transaction_id,
        date=transaction_date,
        amount=amount,
        currency=currency,
        asset_account_id=normalize_identifier(record.get("asset_account_id")),
        liability_account_id=normalize_identifier(
            record.get("liability_account_id")
        ),
    )


__all__ = [
    "parse_record_date",
    "asset_from_record",
    "liability_from_record",
    "transaction_from_record",
]
