"""Tests for budget status aggregation and the budgeting service helpers."""

from __future__ import annotations

from datetime import date

import pytest

from budgettracker.domain.results import LOCAL, REMOTE
from budgettracker.domain.status import Severity, StatusLevel
from budgettracker.errors import ValidationError
from budgettracker.services import budgeting
from budgettracker.services.budgeting import classify, compute_budget_status

from .conftest import OTHER_USER_ID, USER_ID


def _by_category(report):
    return {item.category: item for item in report.budgets}


def test_overspent_budget_is_exceeded_with_high_alert(budget_factory, transaction_factory):
    report = compute_budget_status(
        [budget_factory(category="groceries", amount=100)],
        [transaction_factory(category="groceries", amount=120)],
    )

    status = _by_category(report)["groceries"]
    assert status.spent == 120
    assert status.remaining == -20
    assert status.progress == 120
    assert status.status is StatusLevel.EXCEEDED
    assert status.display_progress == 100

    assert len(report.alerts) == 1
    assert report.alerts[0].category == "groceries"
    assert report.alerts[0].severity is Severity.HIGH


def test_untouched_budget_is_ok(budget_factory):
    report = compute_budget_status([budget_factory(amount=50)], [])

    status = report.budgets[0]
    assert (status.spent, status.remaining, status.progress) == (0, 50, 0)
    assert status.status is StatusLevel.OK
    assert report.alerts == []


def test_unbudgeted_category_is_reported_but_never_alerted(transaction_factory):
    report = compute_budget_status([], [transaction_factory(category="travel", amount=42.5)])

    status = _by_category(report)["travel"]
    assert status.id is None
    assert status.budgeted == 0
    assert status.spent == 42.5
    assert status.remaining == -42.5
    assert status.progress == 100
    assert status.status is StatusLevel.UNBUDGETED
    assert report.alerts == []
    assert report.summary.unbudgeted_spent == 42.5


def test_warning_starts_at_threshold(budget_factory, transaction_factory):
    report = compute_budget_status(
        [budget_factory(category="dining", amount=100)],
        [transaction_factory(category="dining", amount=80)],
    )

    alert = report.alerts[0]
    assert alert.status.status is StatusLevel.WARNING
    assert alert.severity is Severity.MEDIUM


@pytest.mark.parametrize(
    "progress,expected",
    [
        (0, StatusLevel.OK),
        (79.99, StatusLevel.OK),
        (80, StatusLevel.WARNING),
        (99.99, StatusLevel.WARNING),
        (100, StatusLevel.EXCEEDED),
        (250, StatusLevel.EXCEEDED),
    ],
)
def test_classify_boundaries(progress, expected):
    assert classify(progress) is expected


def test_custom_alert_threshold(budget_factory, transaction_factory):
    budgets = [budget_factory(category="dining", amount=100)]
    spending = [transaction_factory(category="dining", amount=60)]

    assert compute_budget_status(budgets, spending).alerts == []
    report = compute_budget_status(budgets, spending, alert_threshold=50)
    assert report.alerts[0].status.status is StatusLevel.WARNING


def test_income_is_ignored(budget_factory, transaction_factory):
    report = compute_budget_status(
        [budget_factory(category="salary", amount=100)],
        [transaction_factory(category="salary", amount=5000, txn_type="income")],
    )

    assert report.budgets[0].spent == 0
    assert report.summary.total_spent == 0
    assert len(report.budgets) == 1


def test_zero_amount_budget_with_spending_is_exceeded(budget_factory, transaction_factory):
    report = compute_budget_status(
        [budget_factory(category="gifts", amount=0)],
        [transaction_factory(category="gifts", amount=15)],
    )

    status = report.budgets[0]
    assert status.progress == 100
    assert status.status is StatusLevel.EXCEEDED
    assert status.remaining == -15


def test_zero_amount_budget_without_spending_is_ok(budget_factory):
    status = compute_budget_status([budget_factory(amount=0)], []).budgets[0]

    assert status.progress == 0
    assert status.status is StatusLevel.OK


def test_alerts_sorted_by_progress_descending(budget_factory, transaction_factory):
    report = compute_budget_status(
        [
            budget_factory(category="dining", amount=100),
            budget_factory(category="groceries", amount=100),
            budget_factory(category="home", amount=100),
        ],
        [
            transaction_factory(category="dining", amount=85),
            transaction_factory(category="groceries", amount=150),
            transaction_factory(category="home", amount=101),
        ],
    )

    assert [alert.category for alert in report.alerts] == ["groceries", "home", "dining"]
    assert [alert.severity for alert in report.alerts] == [
        Severity.HIGH,
        Severity.HIGH,
        Severity.MEDIUM,
    ]


def test_spent_sums_match_expense_total(budget_factory, transaction_factory):
    txns = [
        transaction_factory(category="groceries", amount=12.5),
        transaction_factory(category="groceries", amount=7.25),
        transaction_factory(category="travel", amount=30),
        transaction_factory(category="salary", amount=900, txn_type="income"),
    ]
    report = compute_budget_status([budget_factory(category="groceries", amount=100)], txns)

    assert sum(item.spent for item in report.budgets) == pytest.approx(49.75)
    assert report.summary.total_spent == pytest.approx(49.75)
    assert report.summary.unbudgeted_spent == pytest.approx(30)
    assert report.summary.budgeted_spent == pytest.approx(19.75)
    assert report.summary.total_budgeted == 100


def test_compute_is_deterministic(budget_factory, transaction_factory):
    budgets = [budget_factory(category="groceries", amount=100), budget_factory(category="home", amount=40)]
    txns = [transaction_factory(category="groceries", amount=90), transaction_factory(category="pets", amount=5)]

    first = compute_budget_status(budgets, txns, "month")
    second = compute_budget_status(budgets, txns, "month")

    assert first.to_dict() == second.to_dict()
    assert first.period == "monthly"


def test_report_serializes_display_progress(budget_factory, transaction_factory):
    report = compute_budget_status(
        [budget_factory(category="groceries", amount=100)],
        [transaction_factory(category="groceries", amount=120)],
    )

    data = report.to_dict()
    assert data["budgets"][0]["progress"] == 120
    assert data["budgets"][0]["display_progress"] == 100
    assert data["budgets"][0]["status"] == "exceeded"
    assert data["alerts"][0]["severity"] == "high"
    assert data["summary"]["budgeted_spent"] == 120


# =============================================================================
# Repository-backed helpers
# =============================================================================


def test_get_budget_status_uses_current_period_window(budgets, transactions, transaction_factory):
    budgeting.create_budget(budgets, user_id=USER_ID, category="groceries", amount=100)
    transactions.create(
        transaction_factory(category="groceries", amount=60, txn_date=date(2024, 3, 5)),
        user_id=USER_ID,
    )
    # Previous month and another user's spending stay out of the total.
    transactions.create(
        transaction_factory(category="groceries", amount=500, txn_date=date(2024, 2, 28)),
        user_id=USER_ID,
    )
    transactions.create(
        transaction_factory(category="groceries", amount=500, txn_date=date(2024, 3, 6), user_id=OTHER_USER_ID),
        user_id=OTHER_USER_ID,
    )

    result = budgeting.get_budget_status(
        budgets=budgets,
        transactions=transactions,
        user_id=USER_ID,
        period="monthly",
        today=date(2024, 3, 20),
    )

    assert result.source == REMOTE
    status = result.unwrap().budgets[0]
    assert status.spent == 60
    assert status.status is StatusLevel.OK


def test_get_budget_status_only_reads_matching_period(budgets, transactions, transaction_factory):
    budgeting.create_budget(budgets, user_id=USER_ID, category="groceries", amount=100, period="monthly")
    budgeting.create_budget(budgets, user_id=USER_ID, category="home", amount=1000, period="yearly")
    transactions.create(
        transaction_factory(category="home", amount=300, txn_date=date(2024, 1, 15)),
        user_id=USER_ID,
    )

    result = budgeting.get_budget_status(
        budgets=budgets,
        transactions=transactions,
        user_id=USER_ID,
        period="year",
        today=date(2024, 3, 20),
    )

    report = result.unwrap()
    assert report.period == "yearly"
    assert [item.category for item in report.budgets] == ["home"]
    assert report.budgets[0].progress == 30


def test_get_budget_status_degrades_when_offline(budgets, transactions, transaction_factory, probe):
    probe.up = False
    budgeting.create_budget(budgets, user_id=USER_ID, category="groceries", amount=100)
    transactions.create(
        transaction_factory(category="groceries", amount=120, txn_date=date(2024, 3, 2)),
        user_id=USER_ID,
    )

    result = budgeting.get_budget_alerts(
        budgets=budgets,
        transactions=transactions,
        user_id=USER_ID,
        today=date(2024, 3, 20),
    )

    assert result.source == LOCAL
    assert result.remote_error is not None
    alerts = result.unwrap()
    assert [alert.category for alert in alerts] == ["groceries"]


def test_create_budget_rejects_unknown_period(budgets):
    with pytest.raises(ValidationError) as excinfo:
        budgeting.create_budget(budgets, user_id=USER_ID, category="groceries", amount=10, period="weekly")

    assert "period" in excinfo.value.fields


def test_update_budget_normalizes_period(budgets):
    created = budgeting.create_budget(budgets, user_id=USER_ID, category="groceries", amount=10).unwrap()

    updated = budgeting.update_budget(
        budgets, created.id, {"period": "quarter", "amount": 25}, user_id=USER_ID
    ).unwrap()

    assert updated.period == "quarterly"
    assert updated.amount == 25


def test_list_budgets_filters_by_period(budgets):
    budgeting.create_budget(budgets, user_id=USER_ID, category="groceries", amount=10)
    budgeting.create_budget(budgets, user_id=USER_ID, category="home", amount=10, period="quarterly")

    rows = budgeting.list_budgets(budgets, user_id=USER_ID, period="quarter").unwrap()

    assert [row.category for row in rows] == ["home"]
