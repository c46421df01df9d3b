"""Budgeting domain services."""

from __future__ import annotations

from datetime import date
from typing import Iterable, Optional

from ..domain.filters import BudgetFilters
from ..domain.periods import BudgetPeriod, normalize_period
from ..domain.results import LOCAL, REMOTE, StorageResult
from ..domain.status import (
    Alert,
    BudgetStatus,
    BudgetStatusReport,
    BudgetSummary,
    Severity,
    StatusLevel,
)
from ..infra.repositories.fallback import FallbackRepository
from ..logging_config import get_logger
from ..models.budget import Budget
from ..models.transaction import Transaction, TransactionType
from .ledger_service import period_filters, spending_by_category

DEFAULT_ALERT_THRESHOLD = 80.0

logger = get_logger("services.budgeting")


def _progress(spent: float, budgeted: float) -> float:
    """Percentage of ``budgeted`` consumed by ``spent``.

    A zero (or negative) limit counts as fully used as soon as anything is
    spent against it, and as untouched otherwise.
    """

    if budgeted > 0:
        return spent / budgeted * 100
    return 100.0 if spent > 0 else 0.0


def classify(progress: float, *, alert_threshold: float = DEFAULT_ALERT_THRESHOLD) -> StatusLevel:
    if progress >= 100:
        return StatusLevel.EXCEEDED
    if progress >= alert_threshold:
        return StatusLevel.WARNING
    return StatusLevel.OK


def compute_budget_status(
    budgets: Iterable[Budget],
    transactions: Iterable[Transaction],
    period: str | BudgetPeriod = BudgetPeriod.MONTHLY,
    *,
    alert_threshold: float = DEFAULT_ALERT_THRESHOLD,
) -> BudgetStatusReport:
    """Compare spending per category against each budget's limit.

    ``transactions`` should already be restricted to the period window; only
    expenses are counted. Categories with spending but no budget are reported
    as ``unbudgeted`` and never raise an alert. Pure: identical inputs give
    identical reports.
    """

    budget_list = list(budgets)
    spending = spending_by_category(transactions)

    statuses: list[BudgetStatus] = []
    for budget in budget_list:
        budgeted = float(budget.amount)
        spent = round(spending.get(budget.category, 0.0), 2)
        progress = _progress(spent, budgeted)
        statuses.append(
            BudgetStatus(
                id=budget.id,
                category=budget.category,
                budgeted=budgeted,
                spent=spent,
                remaining=round(budgeted - spent, 2),
                progress=round(progress, 2),
                status=classify(progress, alert_threshold=alert_threshold),
            )
        )

    budgeted_categories = {budget.category for budget in budget_list}
    unbudgeted_total = 0.0
    for category in sorted(set(spending) - budgeted_categories):
        spent = round(spending[category], 2)
        unbudgeted_total += spent
        statuses.append(
            BudgetStatus(
                id=None,
                category=category,
                budgeted=0.0,
                spent=spent,
                remaining=-spent,
                progress=100.0,
                status=StatusLevel.UNBUDGETED,
            )
        )

    alerts = [
        Alert(
            status=item,
            severity=Severity.HIGH if item.progress >= 100 else Severity.MEDIUM,
        )
        for item in statuses
        if item.status in (StatusLevel.WARNING, StatusLevel.EXCEEDED)
    ]
    alerts.sort(key=lambda alert: alert.progress, reverse=True)

    summary = BudgetSummary(
        total_budgeted=round(sum(float(b.amount) for b in budget_list), 2),
        total_spent=round(sum(spending.values()), 2),
        unbudgeted_spent=round(unbudgeted_total, 2),
    )
    return BudgetStatusReport(
        period=normalize_period(period).value,
        budgets=statuses,
        alerts=alerts,
        summary=summary,
    )


def list_budgets(
    repo: FallbackRepository, *, user_id: str, period: str | BudgetPeriod | None = None
) -> StorageResult[list[Budget]]:
    filters = BudgetFilters(period=normalize_period(period).value if period else None)
    return repo.list(user_id=user_id, filters=filters)


def create_budget(
    repo: FallbackRepository,
    *,
    user_id: str,
    category: str,
    amount: float,
    period: str | BudgetPeriod = BudgetPeriod.MONTHLY,
) -> StorageResult[Budget]:
    budget = Budget(
        user_id=user_id,
        category=category,
        amount=amount,
        period=normalize_period(period).value,
    )
    return repo.create(budget, user_id=user_id)


def update_budget(
    repo: FallbackRepository, budget_id: str, changes: dict, *, user_id: str
) -> StorageResult[Budget]:
    changes = dict(changes)
    if "period" in changes:
        changes["period"] = normalize_period(changes["period"]).value
    return repo.update(budget_id, changes, user_id=user_id)


def get_budget_status(
    *,
    budgets: FallbackRepository,
    transactions: FallbackRepository,
    user_id: str,
    period: str | BudgetPeriod = BudgetPeriod.MONTHLY,
    alert_threshold: float = DEFAULT_ALERT_THRESHOLD,
    today: Optional[date] = None,
) -> StorageResult[BudgetStatusReport]:
    """Load the period's budgets and expenses and compute their status."""

    canonical = normalize_period(period)
    budget_result = list_budgets(budgets, user_id=user_id, period=canonical)
    txn_result = transactions.list(
        user_id=user_id,
        filters=period_filters(canonical, today=today, txn_type=TransactionType.EXPENSE.value),
    )
    for result in (budget_result, txn_result):
        if not result.ok:
            return result  # type: ignore[return-value]

    report = compute_budget_status(
        budget_result.value or [],
        txn_result.value or [],
        canonical,
        alert_threshold=alert_threshold,
    )
    degraded = budget_result.degraded or txn_result.degraded
    if report.alerts:
        logger.info(
            "%d budget alert(s) for user %s", len(report.alerts), user_id,
            extra={"period": canonical.value},
        )
    return StorageResult(
        value=report,
        source=LOCAL if degraded else REMOTE,
        remote_error=budget_result.remote_error or txn_result.remote_error,
    )


def get_budget_alerts(**kwargs) -> StorageResult[list[Alert]]:
    """Alerts only; accepts the same keyword arguments as ``get_budget_status``."""

    result = get_budget_status(**kwargs)
    if not result.ok:
        return result  # type: ignore[return-value]
    return StorageResult(
        value=result.unwrap().alerts,
        source=result.source,
        remote_error=result.remote_error,
    )
