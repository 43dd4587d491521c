"""Exceptions raised by the balance reconciliation engine."""


class LedgerError(Exception):
    """Base exception for ledger balance errors."""


class ExchangeRateFetchError(LedgerError):
    """Raised when live exchange rates cannot be obtained or parsed."""


__all__ = ["LedgerError", "ExchangeRateFetchError"]
