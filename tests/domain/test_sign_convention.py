"""Tests for the balance sign-convention policy."""

from datetime import date
from decimal import Decimal

import pytest

from src.domain.models import AssetAccount, LiabilityAccount, LiabilityKind
from src.domain.policies import (
    apply_sign_convention,
    transactions_increase_balance,
)


def _liability(kind: LiabilityKind) -> LiabilityAccount:
    return LiabilityAccount(
        id="l1",
        name="Debt",
        entity_name="Me",
        opening_balance=Decimal("0"),
        opening_balance_date=date(2024, 1, 1),
        liability_kind=kind,
    )


@pytest.mark.parametrize(
    ("kind", "expected"),
    [
        (LiabilityKind.CREDIT, True),
        (LiabilityKind.LOAN, False),
        (LiabilityKind.MORTGAGE, False),
        (LiabilityKind.OTHER, False),
    ],
)
def test_liability_kinds_map_to_direction(kind, expected) -> None:
    """Only credit cards add transactions among liabilities."""
    assert transactions_increase_balance(_liability(kind)) is expected


def test_assets_add_transactions() -> None:
    """Assets use the natural sign."""
    asset = AssetAccount(
        id="a1",
        name="Cash",
        entity_name="Me",
        opening_balance=Decimal("1000"),
        opening_balance_date=date(2024, 1, 1),
    )

    assert apply_sign_convention(
        asset, Decimal("1000"), Decimal("150")
    ) == Decimal("1150")


def test_unknown_account_variant_is_rejected() -> None:
    """Anything outside the closed account variants is an error."""
    with pytest.raises(TypeError):
        transactions_increase_balance(object())


def test_unknown_liability_kind_is_rejected() -> None:
    """Liability kinds outside the enumeration are an error."""
    with pytest.raises(ValueError):
        transactions_increase_balance(_liability("overdraft"))
