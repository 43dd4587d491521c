"""Application ports package."""

from .database import DatabaseEnginePort
from .exchange_rates import ExchangeRateCachePort, ExchangeRateProviderPort
from .ledger_repository import LedgerRepositoryPort

__all__ = [
    "DatabaseEnginePort",
    "ExchangeRateCachePort",
    "ExchangeRateProviderPort",
    "LedgerRepositoryPort",
]
