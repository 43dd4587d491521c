"""Settings helpers for infrastructure adapters."""

from dataclasses import dataclass
from datetime import timedelta
import math
import os

import dotenv

from src.domain.constants import DEFAULT_CURRENCY, DEFAULT_RATE_FRESHNESS
from src.domain.services.normalization import normalize_currency_code
from src.infrastructure.logging.logger import get_app_logger


DEFAULT_EXCHANGE_RATE_API_URL = "https://open.er-api.com/v6/latest"
DEFAULT_REQUEST_TIMEOUT_SECONDS = 10.0
CACHE_BACKENDS = ("database", "memory")


@dataclass(frozen=True)
class LedgerSettings:
    """Settings for the balance engine adapters.

    Attributes:
        base_currency: Default currency balances are normalized into.
        exchange_rate_api_url: Base URL of the live rates endpoint.
        rate_freshness: Maximum age of cached rates used as fallback.
        request_timeout: Timeout in seconds for the rates request.
        rate_cache_backend: Cache adapter (database or memory).
    """

    base_currency: str = DEFAULT_CURRENCY
    exchange_rate_api_url: str = DEFAULT_EXCHANGE_RATE_API_URL
    rate_freshness: timedelta = DEFAULT_RATE_FRESHNESS
    request_timeout: float = DEFAULT_REQUEST_TIMEOUT_SECONDS
    rate_cache_backend: str = "database"

    @classmethod
    def from_env(cls) -> "LedgerSettings":
        """Build settings from environment variables.

        Returns:
            LedgerSettings: Settings sourced from environment variables.
        """
        dotenv.load_dotenv()
        logger = get_app_logger()
        base_currency = (
            normalize_currency_code(os.getenv("LEDGER_BASE_CURRENCY"))
            or DEFAULT_CURRENCY
        )
        api_url = (
            os.getenv("EXCHANGE_RATE_API_URL", "").strip().rstrip("/")
            or DEFAULT_EXCHANGE_RATE_API_URL
        )
        ttl_seconds = cls._read_positive_number(
            "EXCHANGE_RATE_TTL_SECONDS",
            DEFAULT_RATE_FRESHNESS.total_seconds(),
            logger,
        )
        timeout = cls._read_positive_number(
            "EXCHANGE_RATE_TIMEOUT_SECONDS",
            DEFAULT_REQUEST_TIMEOUT_SECONDS,
            logger,
        )
        cache_backend = os.getenv("EXCHANGE_RATE_CACHE", "database")
        cache_backend = cache_backend.strip().lower()
        if cache_backend not in CACHE_BACKENDS:
            logger.warning(
                f"Unsupported EXCHANGE_RATE_CACHE={cache_backend}; "
                "falling back to database"
            )
            cache_backend = "database"
        return cls(
            base_currency=base_currency,
            exchange_rate_api_url=api_url,
            rate_freshness=timedelta(seconds=ttl_seconds),
            request_timeout=timeout,
            rate_cache_backend=cache_backend,
        )

    @staticmethod
    def _read_positive_number(name: str, default: float, logger) -> float:
        """Read a positive number from the environment.

        Args:
            name: Environment variable name.
            default: Value used when unset or invalid.
            logger: Logger used for warnings.

        Returns:
            float: Parsed value or the default.
        """
        raw = os.getenv(name)
        if raw is None or not raw.strip():
            return default
        try:
            value = float(raw)
        except ValueError:
            logger.warning(f"Invalid {name}={raw!r}; using {default}")
            return default
        if not math.isfinite(value) or value <= 0:
            logger.warning(f"Out of range {name}={raw!r}; using {default}")
            return default
        return value


__all__ = ["LedgerSettings"]
