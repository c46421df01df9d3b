"""Derived budget status types. Never persisted."""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from enum import Enum
from typing import Optional


class StatusLevel(str, Enum):
    OK = "ok"
    WARNING = "warning"
    EXCEEDED = "exceeded"
    UNBUDGETED = "unbudgeted"


class Severity(str, Enum):
    MEDIUM = "medium"
    HIGH = "high"


@dataclass(frozen=True, slots=True)
class BudgetStatus:
    """Spending against one budget (or one unbudgeted category).

    ``progress`` is the raw percentage and may exceed 100; views that draw a
    bar use ``display_progress`` instead.
    """

    id: Optional[str]
    category: str
    budgeted: float
    spent: float
    remaining: float
    progress: float
    status: StatusLevel

    @property
    def display_progress(self) -> float:
        return min(max(self.progress, 0.0), 100.0)

    def to_dict(self) -> dict:
        data = asdict(self)
        data["status"] = self.status.value
        data["display_progress"] = self.display_progress
        return data


@dataclass(frozen=True, slots=True)
class Alert:
    """A budget status that needs the user's attention."""

    status: BudgetStatus
    severity: Severity

    @property
    def category(self) -> str:
        return self.status.category

    @property
    def progress(self) -> float:
        return self.status.progress

    def to_dict(self) -> dict:
        data = self.status.to_dict()
        data["severity"] = self.severity.value
        return data


@dataclass(frozen=True, slots=True)
class BudgetSummary:
    """Period totals.

    ``total_spent`` covers every expense category; ``unbudgeted_spent`` is the
    part of it that no budget covers, so budgeted spending is the difference.
    """

    total_budgeted: float = 0.0
    total_spent: float = 0.0
    unbudgeted_spent: float = 0.0

    @property
    def budgeted_spent(self) -> float:
        return round(self.total_spent - self.unbudgeted_spent, 2)

    def to_dict(self) -> dict:
        data = asdict(self)
        data["budgeted_spent"] = self.budgeted_spent
        return data


@dataclass(frozen=True, slots=True)
class BudgetStatusReport:
    period: str
    budgets: list[BudgetStatus] = field(default_factory=list)
    alerts: list[Alert] = field(default_factory=list)
    summary: BudgetSummary = field(default_factory=BudgetSummary)

    def to_dict(self) -> dict:
        return {
            "period": self.period,
            "budgets": [item.to_dict() for item in self.budgets],
            "alerts": [alert.to_dict() for alert in self.alerts],
            "summary": self.summary.to_dict(),
        }
