"""Composition root for wiring infrastructure adapters."""

from src.application.ports.database import DatabaseEnginePort
from src.application.ports.exchange_rates import (
    ExchangeRateCachePort,
    ExchangeRateProviderPort,
)
from src.application.ports.ledger_repository import LedgerRepositoryPort
from src.application.use_cases.get_account_balances import (
    GetAccountBalancesUseCase,
)
from src.application.use_cases.get_asset_category_breakdown import (
    GetAssetCategoryBreakdownUseCase,
)
from src.application.use_cases.get_exchange_rates import (
    GetExchangeRatesUseCase,
)
from src.application.use_cases.get_net_worth_summary import (
    GetNetWorthSummaryUseCase,
)
from src.infrastructure.db import SqlAlchemyDatabaseEngineAdapter
from src.infrastructure.exchange_rate_cache import (
    InMemoryExchangeRateCache,
    SqlAlchemyExchangeRateCache,
)
from src.infrastructure.exchange_rate_provider import OpenExchangeRateProvider
from src.infrastructure.ledger_repository import SqlAlchemyLedgerRepository
from src.infrastructure.logging.logger import get_app_logger
from src.infrastructure.settings import LedgerSettings


def build_database_adapter() -> DatabaseEnginePort:
    """Return the database adapter instance."""
    return SqlAlchemyDatabaseEngineAdapter()


def build_ledger_repository(
    db_port: DatabaseEnginePort | None = None,
    settings: LedgerSettings | None = None,
) -> LedgerRepositoryPort:
    """Return the SQL ledger repository."""
    resolved_db = db_port or build_database_adapter()
    resolved_settings = settings or LedgerSettings.from_env()
    return SqlAlchemyLedgerRepository(
        resolved_db,
        logger=get_app_logger(),
        default_currency=resolved_settings.base_currency,
    )


def build_exchange_rate_provider(
    settings: LedgerSettings | None = None,
) -> ExchangeRateProviderPort:
    """Return the live exchange-rate provider."""
    resolved_settings = settings or LedgerSettings.from_env()
    return OpenExchangeRateProvider(
        base_url=resolved_settings.exchange_rate_api_url,
        timeout=resolved_settings.request_timeout,
    )


def build_exchange_rate_cache(
    db_port: DatabaseEnginePort | None = None,
    settings: LedgerSettings | None = None,
) -> ExchangeRateCachePort:
    """Return the configured exchange-rate cache."""
    resolved_settings = settings or LedgerSettings.from_env()
    if resolved_settings.rate_cache_backend == "memory":
        return InMemoryExchangeRateCache()
    resolved_db = db_port or build_database_adapter()
    return SqlAlchemyExchangeRateCache(resolved_db, logger=get_app_logger())


def build_exchange_rates_use_case(
    db_port: DatabaseEnginePort | None = None,
    settings: LedgerSettings | None = None,
) -> GetExchangeRatesUseCase:
    """Return the exchange-rate acquisition use case."""
    resolved_settings = settings or LedgerSettings.from_env()
    return GetExchangeRatesUseCase(
        provider=build_exchange_rate_provider(resolved_settings),
        cache=build_exchange_rate_cache(db_port, resolved_settings),
        logger=get_app_logger(),
        freshness=resolved_settings.rate_freshness,
    )


def build_account_balances_use_case(
    db_port: DatabaseEnginePort | None = None,
    settings: LedgerSettings | None = None,
) -> GetAccountBalancesUseCase:
    """Return the account balances use case."""
    resolved_db = db_port or build_database_adapter()
    resolved_settings = settings or LedgerSettings.from_env()
    return GetAccountBalancesUseCase(
        ledger_repository=build_ledger_repository(
            resolved_db,
            resolved_settings,
        ),
        exchange_rates=build_exchange_rates_use_case(
            resolved_db,
            resolved_settings,
        ),
        logger=get_app_logger(),
        base_currency=resolved_settings.base_currency,
    )


def build_net_worth_summary_use_case(
    db_port: DatabaseEnginePort | None = None,
    settings: LedgerSettings | None = None,
) -> GetNetWorthSummaryUseCase:
    """Return the net worth summary use case."""
    return GetNetWorthSummaryUseCase(
        account_balances=build_account_balances_use_case(db_port, settings),
        logger=get_app_logger(),
    )


def build_asset_category_breakdown_use_case(
    db_port: DatabaseEnginePort | None = None,
    settings: LedgerSettings | None = None,
) -> GetAssetCategoryBreakdownUseCase:
    """Return the asset breakdown use case."""
    resolved_db = db_port or build_database_adapter()
    resolved_settings = settings or LedgerSettings.from_env()
    return GetAssetCategoryBreakdownUseCase(
        ledger_repository=build_ledger_repository(
            resolved_db,
            resolved_settings,
        ),
        account_balances=build_account_balances_use_case(
            resolved_db,
            resolved_settings,
        ),
        logger=get_app_logger(),
    )


__all__ = [
    "build_database_adapter",
    "build_ledger_repository",
    "build_exchange_rate_provider",
    "build_exchange_rate_cache",
    "build_exchange_rates_use_case",
    "build_account_balances_use_case",
    "build_net_worth_summary_use_case",
    "build_asset_category_breakdown_use_case",
]
