"""Tests for ledger summaries and paging."""

from __future__ import annotations

from datetime import date

from budgettracker.domain.filters import TransactionFilters
from budgettracker.domain.results import LOCAL, REMOTE
from budgettracker.services import ledger_service

from .conftest import USER_ID


def test_compute_summary_totals(transaction_factory):
    txns = [
        transaction_factory(amount=3000, category="salary", txn_type="income"),
        transaction_factory(amount=45.5, category="groceries"),
        transaction_factory(amount=4.5, category="groceries"),
        transaction_factory(amount=20, category="dining"),
    ]

    summary = ledger_service.compute_summary(
        txns, period="monthly", start_date=date(2024, 3, 1), end_date=date(2024, 3, 31)
    )

    assert summary.total_income == 3000
    assert summary.total_expense == 70
    assert summary.balance == 2930
    assert summary.expenses_by_category == {"groceries": 50, "dining": 20}
    assert summary.transaction_count == 4
    assert summary.to_dict()["start_date"] == "2024-03-01"


def test_get_summary_limits_to_period(transactions, transaction_factory):
    transactions.create(transaction_factory(amount=10, txn_date=date(2024, 3, 2)), user_id=USER_ID)
    transactions.create(transaction_factory(amount=99, txn_date=date(2023, 12, 31)), user_id=USER_ID)

    result = ledger_service.get_summary(
        transactions, user_id=USER_ID, period="quarterly", today=date(2024, 3, 15)
    )

    summary = result.unwrap()
    assert result.source == REMOTE
    assert summary.period == "quarterly"
    assert summary.start_date == date(2024, 1, 1)
    assert summary.total_expense == 10


def test_list_page_reports_total_and_next(transactions, transaction_factory):
    for day in range(1, 6):
        transactions.create(transaction_factory(txn_date=date(2024, 3, day)), user_id=USER_ID)

    page = ledger_service.list_page(
        transactions, user_id=USER_ID, filters=TransactionFilters(limit=2)
    ).unwrap()

    assert [t.date.day for t in page.items] == [5, 4]
    assert page.total == 5
    assert page.has_next is True


def test_list_page_last_page(transactions, transaction_factory, probe):
    probe.up = False
    for day in range(1, 4):
        transactions.create(transaction_factory(txn_date=date(2024, 3, day)), user_id=USER_ID)

    result = ledger_service.list_page(
        transactions, user_id=USER_ID, filters=TransactionFilters(limit=2, offset=2)
    )

    assert result.source == LOCAL
    assert result.unwrap().has_next is False
    assert result.unwrap().total == 3
