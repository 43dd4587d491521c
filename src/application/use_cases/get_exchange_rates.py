"""Use case to obtain exchange rates with cached and static fallbacks."""

from datetime import datetime, timedelta, timezone
from typing import Callable

from src.application.ports.exchange_rates import (
    ExchangeRateCachePort,
    ExchangeRateProviderPort,
)
from src.domain.constants import DEFAULT_CURRENCY, DEFAULT_RATE_FRESHNESS
from src.domain.errors import ExchangeRateFetchError
from src.domain.models import ExchangeRateSnapshot, RateSource
from src.domain.services.fx import build_static_snapshot
from src.domain.services.normalization import normalize_currency_code
from src.infrastructure.logging.logger import get_app_logger


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class GetExchangeRatesUseCase:
    """Return a usable rate snapshot for a base currency.

    A single live fetch is attempted. Successful fetches are written to the
    cache; failures fall back to a fresh cached snapshot, then to the static
    approximate table. Provider and cache failures never reach the caller.
    """

    def __init__(
        self,
        provider: ExchangeRateProviderPort,
        cache: ExchangeRateCachePort,
        logger=None,
        freshness: timedelta = DEFAULT_RATE_FRESHNESS,
        clock: Callable[[], datetime] = _utc_now,
    ) -> None:
        """Initialize the use case.

        Args:
            provider: Port returning live exchange rates.
            cache: Port storing previously fetched snapshots.
            logger: Optional logger compatible with logging.Logger-like API.
            freshness: Maximum age of a cached snapshot used as fallback.
            clock: Callable returning the current aware datetime.
        """
        self._provider = provider
        self._cache = cache
        self._logger = logger or get_app_logger()
        self._freshness = freshness
        self._clock = clock

    def execute(self, base_currency: str = DEFAULT_CURRENCY) -> ExchangeRateSnapshot:
        """Return rates relative to ``base_currency``.

        Args:
            base_currency: Currency code the rates are expressed against.

        Returns:
            ExchangeRateSnapshot: Live, cached or static rates.
        """
        base = normalize_currency_code(base_currency) or DEFAULT_CURRENCY
        try:
            snapshot = self._provider.fetch_rates(base)
        except ExchangeRateFetchError as exc:
            self._logger.warning(
                f"Exchange rate fetch failed for {base}: {exc}"
            )
            return self._fallback(base)

        self._save_to_cache(snapshot)
        self._logger.info(
            f"Fetched {len(snapshot.rates)} exchange rates for {base}"
        )
        return snapshot

    def _fallback(self, base: str) -> ExchangeRateSnapshot:
        """Return a fresh cached snapshot, else the static rates.

        Args:
            base: Normalized base currency code.

        Returns:
            ExchangeRateSnapshot: Fallback snapshot.
        """
        now = self._clock()
        cached = self._load_from_cache(base)
        if cached is not None and cached.is_fresh(now, self._freshness):
            self._logger.info(
                f"Using cached exchange rates for {base} "
                f"from {cached.fetched_at.isoformat()}"
            )
            return ExchangeRateSnapshot(
                base=cached.base,
                rates=dict(cached.rates),
                fetched_at=cached.fetched_at,
                source=RateSource.CACHE,
            )
        if cached is not None:
            self._logger.warning(
                f"Cached exchange rates for {base} are stale; "
                "using static approximations"
            )
        else:
            self._logger.warning(
                f"No cached exchange rates for {base}; "
                "using static approximations"
            )
        return build_static_snapshot(base, now, self._logger)

    def _load_from_cache(self, base: str) -> ExchangeRateSnapshot | None:
        """Read the cached snapshot; cache failures count as a miss."""
        try:
            return self._cache.load(base)
        except Exception as exc:
            self._logger.warning(
                f"Exchange rate cache read failed for {base}: {exc}"
            )
            return None

    def _save_to_cache(self, snapshot: ExchangeRateSnapshot) -> None:
        try:
            self._cache.save(snapshot)
        except Exception as exc:
            self._logger.warning(
                f"Exchange rate cache write failed for {snapshot.base}: {exc}"
            )


__all__ = ["GetExchangeRatesUseCase"]
