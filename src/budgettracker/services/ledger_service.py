"""Ledger helpers: period selection, paging and income/expense summaries."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Iterable, Optional

from ..domain.filters import TransactionFilters
from ..domain.periods import BudgetPeriod, normalize_period, period_window
from ..domain.results import LOCAL, REMOTE, StorageResult
from ..infra.repositories.fallback import FallbackRepository
from ..models.transaction import Transaction, TransactionType


@dataclass(slots=True)
class TransactionSummary:
    """Income and expense totals for one period window."""

    period: str
    start_date: date
    end_date: date
    total_income: float = 0.0
    total_expense: float = 0.0
    expenses_by_category: dict[str, float] = field(default_factory=dict)
    transaction_count: int = 0

    @property
    def balance(self) -> float:
        return round(self.total_income - self.total_expense, 2)

    def to_dict(self) -> dict:
        return {
            "period": self.period,
            "start_date": self.start_date.isoformat(),
            "end_date": self.end_date.isoformat(),
            "total_income": self.total_income,
            "total_expense": self.total_expense,
            "balance": self.balance,
            "expenses_by_category": dict(self.expenses_by_category),
            "transaction_count": self.transaction_count,
        }


@dataclass(slots=True)
class TransactionPage:
    items: list[Transaction]
    total: int
    limit: Optional[int]
    offset: int

    @property
    def has_next(self) -> bool:
        return self.limit is not None and self.offset + len(self.items) < self.total


def period_filters(
    period: str | BudgetPeriod,
    *,
    today: Optional[date] = None,
    txn_type: Optional[str] = None,
) -> TransactionFilters:
    """Filters selecting the transactions dated inside the current period."""

    start, end = period_window(period, today)
    return TransactionFilters(start_date=start, end_date=end, type=txn_type)


def spending_by_category(transactions: Iterable[Transaction]) -> dict[str, float]:
    """Sum expense amounts per category; income is ignored."""

    totals: dict[str, float] = {}
    for txn in transactions:
        if not txn.is_expense:
            continue
        totals[txn.category] = totals.get(txn.category, 0.0) + float(txn.amount)
    return totals


def compute_summary(
    transactions: Iterable[Transaction],
    *,
    period: str,
    start_date: date,
    end_date: date,
) -> TransactionSummary:
    """Compute income, expense and per-category totals."""

    txns = list(transactions)
    income = sum(float(t.amount) for t in txns if t.type == TransactionType.INCOME.value)
    by_category = spending_by_category(txns)
    return TransactionSummary(
        period=period,
        start_date=start_date,
        end_date=end_date,
        total_income=round(income, 2),
        total_expense=round(sum(by_category.values()), 2),
        expenses_by_category={name: round(total, 2) for name, total in by_category.items()},
        transaction_count=len(txns),
    )


def get_summary(
    repo: FallbackRepository,
    *,
    user_id: str,
    period: str | BudgetPeriod = BudgetPeriod.MONTHLY,
    today: Optional[date] = None,
) -> StorageResult[TransactionSummary]:
    """Summarize the user's transactions for the current period."""

    canonical = normalize_period(period)
    filters = period_filters(canonical, today=today)
    result = repo.list(user_id=user_id, filters=filters)
    if not result.ok:
        return result  # type: ignore[return-value]
    summary = compute_summary(
        result.value or [],
        period=canonical.value,
        start_date=filters.start_date,  # type: ignore[arg-type]
        end_date=filters.end_date,  # type: ignore[arg-type]
    )
    return StorageResult(value=summary, source=result.source, remote_error=result.remote_error)


def list_page(
    repo: FallbackRepository, *, user_id: str, filters: TransactionFilters
) -> StorageResult[TransactionPage]:
    """Fetch one page of transactions plus the total matching count.

    Both calls go through the fallback independently; the page reports the
    local source if either of them degraded.
    """

    rows = repo.list(user_id=user_id, filters=filters)
    if not rows.ok:
        return rows  # type: ignore[return-value]
    total = repo.count(user_id=user_id, filters=filters.without_paging())
    degraded = rows.degraded or total.degraded
    page = TransactionPage(
        items=rows.value or [],
        total=total.value or 0,
        limit=filters.limit,
        offset=filters.offset,
    )
    return StorageResult(
        value=page,
        source=LOCAL if degraded else REMOTE,
        remote_error=rows.remote_error or total.remote_error,
    )
