"""HTTP client for the open exchange-rate API."""

from collections.abc import Mapping
from datetime import datetime, timezone
from decimal import Decimal
from typing import Any, Callable

import requests

from src.application.ports.exchange_rates import ExchangeRateProviderPort
from src.domain.errors import ExchangeRateFetchError
from src.domain.models import ExchangeRateSnapshot, RateSource
from src.domain.services.normalization import normalize_currency_code
from src.infrastructure.settings import (
    DEFAULT_EXCHANGE_RATE_API_URL,
    DEFAULT_REQUEST_TIMEOUT_SECONDS,
)
from src.utils.decimal_utils import parse_decimal


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


def parse_rates_payload(payload: Any) -> dict[str, Decimal]:
    """Extract the rate table from an API response body.

    Args:
        payload: Decoded JSON body.

    Returns:
        dict[str, Decimal]: Positive rates keyed by upper-case code.

    Raises:
        ExchangeRateFetchError: If the body reports an error or carries no
            usable rate table.
    """
    if not isinstance(payload, Mapping):
        raise ExchangeRateFetchError("Rates payload is not a JSON object")
    if payload.get("result") == "error":
        reason = payload.get("error-type") or "unknown error"
        raise ExchangeRateFetchError(f"Rates API reported {reason}")
    raw_rates = payload.get("rates")
    if not isinstance(raw_rates, Mapping) or not raw_rates:
        raise ExchangeRateFetchError("Rates payload has no rates mapping")

    rates: dict[str, Decimal] = {}
    for raw_code, raw_rate in raw_rates.items():
        code = normalize_currency_code(str(raw_code))
        rate = parse_decimal(raw_rate)
        if code is None or rate is None or rate <= 0:
            raise ExchangeRateFetchError(
                f"Invalid rate {raw_rate!r} for currency {raw_code!r}"
            )
        rates[code] = rate
    return rates


class OpenExchangeRateProvider(ExchangeRateProviderPort):
    """Provider calling ``GET {base_url}/{BASE}`` for live rates."""

    def __init__(
        self,
        base_url: str = DEFAULT_EXCHANGE_RATE_API_URL,
        timeout: float = DEFAULT_REQUEST_TIMEOUT_SECONDS,
        session: requests.Session | None = None,
        clock: Callable[[], datetime] = _utc_now,
    ) -> None:
        """Initialize the provider.

        Args:
            base_url: Endpoint prefix; the base currency is appended.
            timeout: Request timeout in seconds.
            session: Optional pre-configured HTTP session; it is owned by
                the caller and left open by ``close``.
            clock: Callable returning the current aware datetime.
        """
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._owns_session = session is None
        self._session = session or requests.Session()
        self._clock = clock

    def fetch_rates(self, base_currency: str) -> ExchangeRateSnapshot:
        """Return live rates relative to ``base_currency``.

        A single request is made; there is no retry.

        Raises:
            ExchangeRateFetchError: On network errors, non-2xx responses or
                malformed bodies.
        """
        url = f"{self._base_url}/{base_currency}"
        try:
            response = self._session.get(url, timeout=self._timeout)
            response.raise_for_status()
            payload = response.json()
        except requests.RequestException as exc:
            raise ExchangeRateFetchError(
                f"Request to {url} failed: {exc}"
            ) from exc
        except ValueError as exc:
            raise ExchangeRateFetchError(
                f"Response from {url} is not valid JSON"
            ) from exc

        rates = parse_rates_payload(payload)
        return ExchangeRateSnapshot(
            base=base_currency,
            rates=rates,
            fetched_at=self._clock(),
            source=RateSource.LIVE,
        )

    def close(self) -> None:
        """Close the HTTP session if this provider created it."""
        if self._owns_session:
            self._session.close()

    def __enter__(self) -> "OpenExchangeRateProvider":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()


__all__ = ["OpenExchangeRateProvider", "parse_rates_payload"]
