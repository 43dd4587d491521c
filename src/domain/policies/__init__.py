"""Domain policies package."""

from .sign_convention import (
    apply_sign_convention,
    transactions_increase_balance,
)

__all__ = ["apply_sign_convention", "transactions_increase_balance"]
