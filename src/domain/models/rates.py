"""Domain model for exchange-rate snapshots."""

from dataclasses import dataclass, field
from datetime import datetime, timedelta
from decimal import Decimal
from enum import Enum


class RateSource(str, Enum):
    """Where a snapshot's rates came from."""

    LIVE = "live"
    CACHE = "cache"
    STATIC = "static"


@dataclass(frozen=True)
class ExchangeRateSnapshot:
    """Rates relative to a base currency at a point in time.

    Attributes:
        base: Currency code every rate is relative to.
        rates: Units of each currency per one unit of ``base``.
        fetched_at: Timezone-aware time the rates were obtained.
        source: Origin of the rates.
    """

    base: str
    rates: dict[str, Decimal] = field(default_factory=dict)
    fetched_at: datetime | None = None
    source: RateSource = RateSource.LIVE

    def rate_for(self, currency: str) -> Decimal | None:
        """Return the rate for a currency, 1 for the base itself."""
        if currency == self.base:
            return Decimal("1")
        return self.rates.get(currency)

    def is_fresh(self, now: datetime, max_age: timedelta) -> bool:
        """Return True when the snapshot is no older than ``max_age``."""
        if self.fetched_at is None:
            return False
        return now - self.fetched_at <= max_age


__all__ = ["RateSource", "ExchangeRateSnapshot"]
