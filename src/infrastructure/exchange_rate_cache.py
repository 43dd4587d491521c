"""Exchange-rate cache adapters.

Caches are best effort: storage errors are logged and never propagate, so a
failing cache cannot prevent balances from being computed.
"""

from datetime import datetime, timezone
import json
from threading import Lock

from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from src.application.ports.database import DatabaseEnginePort
from src.application.ports.exchange_rates import ExchangeRateCachePort
from src.domain.models import ExchangeRateSnapshot, RateSource
from src.infrastructure.logging.logger import get_app_logger
from src.utils.decimal_utils import parse_decimal


CREATE_RATE_CACHE_SQL = """
CREATE TABLE IF NOT EXISTS exchange_rate_cache (
    base_currency TEXT PRIMARY KEY,
    rates TEXT NOT NULL,
    fetched_at TEXT NOT NULL
)
"""

SELECT_RATE_CACHE_SQL = text(
    """
    SELECT base_currency, rates, fetched_at
    FROM exchange_rate_cache
    WHERE base_currency = :base_currency
    """
)

DELETE_RATE_CACHE_SQL = text(
    """
    DELETE FROM exchange_rate_cache
    WHERE base_currency = :base_currency
    """
)

INSERT_RATE_CACHE_SQL = text(
    """
    INSERT INTO exchange_rate_cache (base_currency, rates, fetched_at)
    VALUES (:base_currency, :rates, :fetched_at)
    """
)


def _as_utc(moment: datetime) -> datetime:
    if moment.tzinfo is None:
        return moment.replace(tzinfo=timezone.utc)
    return moment.astimezone(timezone.utc)


class InMemoryExchangeRateCache(ExchangeRateCachePort):
    """Process-local cache keyed by base currency."""

    def __init__(self) -> None:
        self._snapshots: dict[str, ExchangeRateSnapshot] = {}
        self._lock = Lock()

    def load(self, base_currency: str) -> ExchangeRateSnapshot | None:
        with self._lock:
            return self._snapshots.get(base_currency)

    def save(self, snapshot: ExchangeRateSnapshot) -> None:
        with self._lock:
            self._snapshots[snapshot.base] = snapshot


class SqlAlchemyExchangeRateCache(ExchangeRateCachePort):
    """Cache storing one JSON-encoded snapshot per base currency."""

    def __init__(self, db_port: DatabaseEnginePort, logger=None) -> None:
        """Initialize the cache.

        Args:
            db_port: Port providing access to the ledger engine.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._db_port = db_port
        self._logger = logger or get_app_logger()
        self._table_ready = False

    def load(self, base_currency: str) -> ExchangeRateSnapshot | None:
        """Return the cached snapshot for a base, or None.

        Args:
            base_currency: Base currency code.

        Returns:
            ExchangeRateSnapshot | None: Cached snapshot, or None when
            absent, unreadable or corrupt.
        """
        try:
            self._ensure_table()
            engine = self._db_port.get_ledger_engine()
            with engine.connect() as conn:
                row = conn.execute(
                    SELECT_RATE_CACHE_SQL,
                    {"base_currency": base_currency},
                ).first()
        except SQLAlchemyError as exc:
            self._logger.warning(
                f"Could not read cached exchange rates for "
                f"{base_currency}: {exc}"
            )
            return None
        if row is None:
            return None
        return self._decode_row(row)

    def save(self, snapshot: ExchangeRateSnapshot) -> None:
        """Replace the cached snapshot for the snapshot's base.

        Args:
            snapshot: Snapshot to store.
        """
        fetched_at = snapshot.fetched_at or datetime.now(timezone.utc)
        params = {
            "base_currency": snapshot.base,
            "rates": json.dumps(
                {code: str(rate) for code, rate in snapshot.rates.items()},
                sort_keys=True,
            ),
            "fetched_at": _as_utc(fetched_at).isoformat(),
        }
        try:
            self._ensure_table()
            engine = self._db_port.get_ledger_engine()
            with engine.begin() as conn:
                conn.execute(
                    DELETE_RATE_CACHE_SQL,
                    {"base_currency": snapshot.base},
                )
                conn.execute(INSERT_RATE_CACHE_SQL, params)
        except SQLAlchemyError as exc:
            self._logger.warning(
                f"Could not cache exchange rates for {snapshot.base}: {exc}"
            )

    def _ensure_table(self) -> None:
        """Create the exchange_rate_cache table if it does not exist."""
        if self._table_ready:
            return
        engine = self._db_port.get_ledger_engine()
        with engine.begin() as conn:
            conn.exec_driver_sql(CREATE_RATE_CACHE_SQL)
        self._table_ready = True

    def _decode_row(self, row) -> ExchangeRateSnapshot | None:
        try:
            raw_rates = json.loads(row.rates)
            fetched_at = _as_utc(datetime.fromisoformat(row.fetched_at))
        except (TypeError, ValueError) as exc:
            self._logger.warning(
                f"Ignoring corrupt cached rates for {row.base_currency}: {exc}"
            )
            return None
        if not isinstance(raw_rates, dict):
            self._logger.warning(
                f"Ignoring corrupt cached rates for {row.base_currency}"
            )
            return None
        rates = {}
        for code, raw_rate in raw_rates.items():
            rate = parse_decimal(raw_rate)
            if rate is not None and rate > 0:
                rates[code] = rate
        return ExchangeRateSnapshot(
            base=row.base_currency,
            rates=rates,
            fetched_at=fetched_at,
            source=RateSource.CACHE,
        )


__all__ = ["InMemoryExchangeRateCache", "SqlAlchemyExchangeRateCache"]
