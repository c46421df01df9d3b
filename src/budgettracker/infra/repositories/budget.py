"""SQLModel implementation of Budget repository."""

from __future__ import annotations

from typing import Any, ClassVar, Optional

from ...domain.filters import BudgetFilters
from ...models._fields import utcnow
from ...models.budget import Budget
from .base import SQLModelRecordRepository


class SQLModelBudgetRepository(SQLModelRecordRepository):
    """SQLModel-based budget repository implementation.

    Creating a budget for a (category, period) that already has one inserts
    a second row; the local store is the only path that merges them.
    """

    model: ClassVar[type[Budget]] = Budget
    entity: ClassVar[str] = "Budget"

    def _clauses(self, filters: Optional[BudgetFilters]) -> list:
        if filters is None:
            return []
        clauses = []
        if filters.period is not None:
            clauses.append(Budget.period == filters.period)
        if filters.category is not None:
            clauses.append(Budget.category == filters.category)
        return clauses

    def _ordering(self) -> list:
        return [Budget.category.asc(), Budget.created_at.asc()]  # type: ignore[attr-defined]

    def _touch(self, record: Any) -> None:
        record.updated_at = utcnow()
