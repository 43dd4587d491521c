"""Ports for obtaining and caching exchange rates."""

from typing import Protocol

from src.domain.models import ExchangeRateSnapshot


class ExchangeRateProviderPort(Protocol):
    """Port exposing live exchange rates."""

    def fetch_rates(self, base_currency: str) -> ExchangeRateSnapshot:
        """Return live rates relative to ``base_currency``.

        Raises:
            ExchangeRateFetchError: If the rates cannot be obtained.
        """


class ExchangeRateCachePort(Protocol):
    """Port exposing a best-effort store of previously fetched rates."""

    def load(self, base_currency: str) -> ExchangeRateSnapshot | None:
        """Return the last saved snapshot for ``base_currency``, if any."""

    def save(self, snapshot: ExchangeRateSnapshot) -> None:
        """Store ``snapshot``, replacing any previous one for its base."""


__all__ = ["ExchangeRateProviderPort", "ExchangeRateCachePort"]
