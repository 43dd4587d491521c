"""Currency conversion helpers for the balance engine."""

from datetime import datetime
from decimal import Decimal
from logging import Logger

from src.domain.constants import STATIC_RATES_BASE, STATIC_USD_RATES
from src.domain.models import ExchangeRateSnapshot, RateSource


def convert_amount(
    amount: Decimal,
    from_currency: str,
    to_currency: str,
    rates: ExchangeRateSnapshot,
    logger: Logger,
) -> Decimal | None:
    """Convert an amount between two currencies through the snapshot base.

    Args:
        amount: Amount expressed in ``from_currency``.
        from_currency: Source currency code.
        to_currency: Target currency code.
        rates: Snapshot providing rates per unit of its base.
        logger: Logger used for debug output.

    Returns:
        Decimal | None: Converted amount, or None when a rate is missing.
    """
    if from_currency == to_currency:
        return amount
    from_rate = rates.rate_for(from_currency)
    to_rate = rates.rate_for(to_currency)
    if not from_rate or to_rate is None:
        logger.debug(
            f"Missing FX rate for {from_currency} to {to_currency}"
        )
        return None
    return amount / from_rate * to_rate


def rebase_rates(
    rates: dict[str, Decimal],
    rates_base: str,
    new_base: str,
) -> dict[str, Decimal] | None:
    """Express a rate table relative to another currency of the table.

    Args:
        rates: Units of each currency per unit of ``rates_base``.
        rates_base: Base of ``rates``.
        new_base: Requested base.

    Returns:
        dict[str, Decimal] | None: Rebased table, or None when
        ``new_base`` has no rate in the table.
    """
    if new_base == rates_base:
        return dict(rates)
    pivot = rates.get(new_base)
    if not pivot:
        return None
    rebased = {code: rate / pivot for code, rate in rates.items()}
    rebased[rates_base] = Decimal("1") / pivot
    rebased[new_base] = Decimal("1")
    return rebased


def build_static_snapshot(
    base: str,
    now: datetime,
    logger: Logger,
) -> ExchangeRateSnapshot:
    """Return the approximate static rates rebased to ``base``.

    Args:
        base: Requested base currency code.
        now: Time stamped on the snapshot.
        logger: Logger used for warnings.

    Returns:
        ExchangeRateSnapshot: Static snapshot, holding only the base itself
        when the base is unknown to the static table.
    """
    rebased = rebase_rates(STATIC_USD_RATES, STATIC_RATES_BASE, base)
    if rebased is None:
        logger.warning(f"No static exchange rates available for base {base}")
        rebased = {base: Decimal("1")}
    return ExchangeRateSnapshot(
        base=base,
        rates=rebased,
        fetched_at=now,
        source=RateSource.STATIC,
    )


__all__ = ["convert_amount", "rebase_rates", "build_static_snapshot"]
