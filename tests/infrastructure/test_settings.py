"""Tests for infrastructure settings."""

from datetime import timedelta

import pytest

from src.infrastructure import settings as settings_module
from src.infrastructure.settings import LedgerSettings


ENV_VARS = (
    "LEDGER_BASE_CURRENCY",
    "EXCHANGE_RATE_API_URL",
    "EXCHANGE_RATE_TTL_SECONDS",
    "EXCHANGE_RATE_TIMEOUT_SECONDS",
    "EXCHANGE_RATE_CACHE",
)


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch):
    monkeypatch.setattr(settings_module.dotenv, "load_dotenv", lambda: None)
    monkeypatch.setattr(
        settings_module,
        "get_app_logger",
        lambda: settings_module_logger,
    )
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)


class _RecordingLogger:
    def __init__(self) -> None:
        self.warnings: list[str] = []

    def warning(self, message: str) -> None:
        self.warnings.append(message)


settings_module_logger = _RecordingLogger()


def test_from_env_uses_defaults() -> None:
    """Unset variables should fall back to defaults."""
    settings = LedgerSettings.from_env()

    assert settings == LedgerSettings()
    assert settings.base_currency == "AUD"
    assert settings.rate_freshness == timedelta(hours=1)
    assert settings.exchange_rate_api_url == (
        "https://open.er-api.com/v6/latest"
    )


def test_from_env_reads_overrides(monkeypatch) -> None:
    """Environment values should override defaults."""
    monkeypatch.setenv("LEDGER_BASE_CURRENCY", " usd ")
    monkeypatch.setenv("EXCHANGE_RATE_API_URL", "https://rates.local/api/")
    monkeypatch.setenv("EXCHANGE_RATE_TTL_SECONDS", "120")
    monkeypatch.setenv("EXCHANGE_RATE_TIMEOUT_SECONDS", "2.5")
    monkeypatch.setenv("EXCHANGE_RATE_CACHE", "Memory")

    settings = LedgerSettings.from_env()

    assert settings.base_currency == "USD"
    assert settings.exchange_rate_api_url == "https://rates.local/api"
    assert settings.rate_freshness == timedelta(seconds=120)
    assert settings.request_timeout == 2.5
    assert settings.rate_cache_backend == "memory"


def test_from_env_ignores_invalid_values(monkeypatch) -> None:
    """Invalid numbers and cache modes fall back with warnings."""
    settings_module_logger.warnings.clear()
    monkeypatch.setenv("EXCHANGE_RATE_TTL_SECONDS", "soon")
    monkeypatch.setenv("EXCHANGE_RATE_TIMEOUT_SECONDS", "-1")
    monkeypatch.setenv("EXCHANGE_RATE_CACHE", "redis")

    settings = LedgerSettings.from_env()

    assert settings.rate_freshness == timedelta(hours=1)
    assert settings.request_timeout == 10.0
    assert settings.rate_cache_backend == "database"
    assert len(settings_module_logger.warnings) == 3
