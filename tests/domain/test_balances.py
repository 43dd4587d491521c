"""Tests for the balance computation domain services."""

from datetime import date, datetime
from decimal import Decimal
from unittest.mock import MagicMock

from src.domain.models import (
    AccountType,
    AssetAccount,
    ExchangeRateSnapshot,
    LiabilityAccount,
    LiabilityKind,
    Transaction,
)
from src.domain.services.balances import (
    calculate_all_balances,
    find_account_balance,
    get_balance,
    get_closing_balance,
    get_opening_balance,
    group_transactions_by_account,
)


OPENING_DATE = date(2024, 1, 1)
USD_RATES = ExchangeRateSnapshot(base="USD", rates={"AUD": Decimal("1.5")})


def _asset(account_id="asset-1", opening="1000", opening_date=OPENING_DATE):
    return AssetAccount(
        id=account_id,
        name=f"Asset {account_id}",
        entity_name="Household",
        opening_balance=Decimal(opening),
        opening_balance_date=opening_date,
        asset_type="cash",
        category="savings_account",
    )


def _liability(account_id, kind, opening):
    return LiabilityAccount(
        id=account_id,
        name=f"Liability {account_id}",
        entity_name="Household",
        opening_balance=Decimal(opening),
        opening_balance_date=OPENING_DATE,
        liability_kind=kind,
    )


def _tx(
    tx_id,
    amount,
    *,
    asset=None,
    liability=None,
    currency="USD",
    when=date(2024, 2, 1),
):
    return Transaction(
        id=tx_id,
        date=when,
        amount=Decimal(amount),
        currency=currency,
        asset_account_id=asset,
        liability_account_id=liability,
    )


def _calculate(accounts, transactions, rates=USD_RATES, logger=None):
    return calculate_all_balances(
        accounts,
        transactions,
        rates,
        base_currency="USD",
        logger=logger or MagicMock(),
    )


def test_asset_balance_adds_transactions() -> None:
    """Asset balance should be the opening balance plus the net sum."""
    result = _calculate(
        [_asset()],
        [
            _tx("t1", "200", asset="asset-1"),
            _tx("t2", "-50", asset="asset-1"),
        ],
    )

    assert len(result) == 1
    assert result[0].transaction_sum == Decimal("150")
    assert result[0].calculated_balance == Decimal("1150")
    assert result[0].closing_balance == Decimal("1150")
    assert result[0].account_type == AccountType.ASSET
    assert result[0].currency_code == "USD"


def test_credit_card_purchase_increases_debt() -> None:
    """Credit card transactions should add to the amount owed."""
    result = _calculate(
        [_liability("card", LiabilityKind.CREDIT, "500")],
        [_tx("t1", "75", liability="card")],
    )

    assert result[0].calculated_balance == Decimal("575")
    assert result[0].liability_kind == LiabilityKind.CREDIT


def test_mortgage_payment_reduces_debt() -> None:
    """Mortgage transactions should be subtracted from the amount owed."""
    result = _calculate(
        [_liability("home", LiabilityKind.MORTGAGE, "300000")],
        [_tx("t1", "1500", liability="home")],
    )

    assert result[0].transaction_sum == Decimal("1500")
    assert result[0].calculated_balance == Decimal("298500")


def test_loan_and_other_liabilities_subtract() -> None:
    """Loan and other liabilities share the subtractive convention."""
    result = _calculate(
        [
            _liability("loan", LiabilityKind.LOAN, "10000"),
            _liability("misc", LiabilityKind.OTHER, "800"),
        ],
        [
            _tx("t1", "400", liability="loan"),
            _tx("t2", "100", liability="misc"),
        ],
    )

    balances = {item.account_id: item.calculated_balance for item in result}
    assert balances == {"loan": Decimal("9600"), "misc": Decimal("700")}


def test_opening_date_boundary_is_inclusive() -> None:
    """Transactions on the opening date count; the day before does not."""
    result = _calculate(
        [_asset(opening="0")],
        [
            _tx("on", "10", asset="asset-1", when=date(2024, 1, 1)),
            _tx("before", "99", asset="asset-1", when=date(2023, 12, 31)),
        ],
    )

    assert result[0].transaction_sum == Decimal("10")


def test_same_currency_amount_is_used_verbatim() -> None:
    """Base-currency amounts should contribute their exact raw value."""
    result = _calculate(
        [_asset(opening="0")],
        [_tx("t1", "0.1", asset="asset-1"), _tx("t2", "0.2", asset="asset-1")],
    )

    assert result[0].transaction_sum == Decimal("0.3")


def test_foreign_currency_is_converted_to_base() -> None:
    """150 AUD at 1.5 AUD per USD should contribute 100 USD."""
    result = _calculate(
        [_asset(opening="0")],
        [_tx("t1", "150", asset="asset-1", currency="AUD")],
    )

    assert result[0].transaction_sum == Decimal("100")


def test_missing_rate_contributes_zero_and_warns() -> None:
    """Unknown currencies should contribute nothing and log a warning."""
    logger = MagicMock()

    result = _calculate(
        [_asset(opening="100")],
        [
            _tx("t1", "5000", asset="asset-1", currency="XYZ"),
            _tx("t2", "20", asset="asset-1"),
        ],
        logger=logger,
    )

    assert result[0].transaction_sum == Decimal("20")
    assert result[0].calculated_balance == Decimal("120")
    logger.warning.assert_called_once()


def test_unassigned_and_doubly_assigned_transactions_are_ignored() -> None:
    """Transactions with neither or both references belong to no account."""
    result = _calculate(
        [_asset(opening="0"), _liability("card", LiabilityKind.CREDIT, "0")],
        [
            _tx("none", "10"),
            _tx("both", "20", asset="asset-1", liability="card"),
        ],
    )

    assert [item.transaction_sum for item in result] == [
        Decimal("0"),
        Decimal("0"),
    ]


def test_asset_reference_does_not_match_liability_with_same_id() -> None:
    """Account references are matched within their own account type."""
    result = _calculate(
        [_liability("shared", LiabilityKind.CREDIT, "0")],
        [_tx("t1", "10", asset="shared")],
    )

    assert result[0].transaction_sum == Decimal("0")


def test_account_without_opening_date_is_skipped() -> None:
    """Accounts missing an opening date are omitted, not fatal."""
    logger = MagicMock()

    result = _calculate(
        [_asset("ok"), _asset("broken", opening_date=None)],
        [_tx("t1", "10", asset="broken")],
        logger=logger,
    )

    assert [item.account_id for item in result] == ["ok"]
    logger.warning.assert_called()


def test_negative_asset_balance_is_reported_but_kept() -> None:
    """Sign anomalies should be logged without altering the figure."""
    logger = MagicMock()

    result = _calculate(
        [_asset(opening="10")],
        [_tx("t1", "-30", asset="asset-1")],
        logger=logger,
    )

    assert result[0].calculated_balance == Decimal("-20")
    logger.warning.assert_called_once()


def test_calculation_is_idempotent() -> None:
    """Identical inputs should produce identical balances."""
    accounts = [
        _asset(),
        _liability("card", LiabilityKind.CREDIT, "500"),
        _liability("home", LiabilityKind.MORTGAGE, "300000"),
    ]
    transactions = [
        _tx("t1", "200", asset="asset-1"),
        _tx("t2", "75", liability="card", currency="AUD"),
        _tx("t3", "1500", liability="home"),
    ]

    first = _calculate(accounts, transactions)
    second = _calculate(list(reversed(accounts)), transactions)

    assert first == second


def test_results_are_sorted_by_name_then_id() -> None:
    """Balances should be ordered by lower-cased account name."""
    accounts = [
        AssetAccount("b", "savings", "E", Decimal("0"), OPENING_DATE),
        AssetAccount("a", "Checking", "E", Decimal("0"), OPENING_DATE),
    ]

    result = _calculate(accounts, [])

    assert [item.account_name for item in result] == ["Checking", "savings"]


def test_group_transactions_by_account_keys_on_type_and_id() -> None:
    """Grouping should separate asset and liability references."""
    grouped = group_transactions_by_account(
        [
            _tx("t1", "1", asset="x"),
            _tx("t2", "2", liability="x"),
            _tx("t3", "3"),
        ]
    )

    assert [tx.id for tx in grouped[(AccountType.ASSET, "x")]] == ["t1"]
    assert [tx.id for tx in grouped[(AccountType.LIABILITY, "x")]] == ["t2"]
    assert len(grouped) == 2


def test_lookups_return_zero_for_unknown_account() -> None:
    """Single-account projections should never raise for unknown ids."""
    balances = _calculate([_asset()], [_tx("t1", "5", asset="asset-1")])

    assert find_account_balance(balances, "nonexistent-id") is None
    assert get_balance(balances, "nonexistent-id") == Decimal("0")
    assert get_opening_balance(balances, "nonexistent-id") == Decimal("0")
    assert get_closing_balance(balances, "nonexistent-id") == Decimal("0")
    assert get_balance(balances, "asset-1") == Decimal("1005")
    assert get_opening_balance(balances, "asset-1") == Decimal("1000")
    assert get_closing_balance(balances, "asset-1") == Decimal("1005")


def test_datetime_transaction_dates_are_compared_by_day() -> None:
    """Timestamps are reduced to their calendar date."""
    same_day = Transaction(
        id="t1",
        date=datetime(2024, 1, 1, 23, 30),
        amount=Decimal("10"),
        currency="USD",
        asset_account_id="asset-1",
    )

    result = _calculate([_asset(opening="0")], [same_day])

    assert same_day.date == date(2024, 1, 1)
    assert result[0].transaction_sum == Decimal("10")
