"""Query filters understood by every repository backend."""

from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import date
from typing import Any, Optional


@dataclass(frozen=True, slots=True)
class TransactionFilters:
    """Criteria for listing a user's transactions.

    Date bounds are inclusive. ``limit``/``offset`` page through the result
    after it has been ordered newest first.
    """

    start_date: Optional[date] = None
    end_date: Optional[date] = None
    category: Optional[str] = None
    type: Optional[str] = None
    account_id: Optional[str] = None
    limit: Optional[int] = None
    offset: int = 0

    def matches(self, record: Any) -> bool:
        """Return True when ``record`` satisfies every non-paging criterion."""

        if self.start_date is not None and record.date < self.start_date:
            return False
        if self.end_date is not None and record.date > self.end_date:
            return False
        if self.category is not None and record.category != self.category:
            return False
        if self.type is not None and record.type != self.type:
            return False
        if self.account_id is not None and record.account_id != self.account_id:
            return False
        return True

    def without_paging(self) -> "TransactionFilters":
        return replace(self, limit=None, offset=0)


@dataclass(frozen=True, slots=True)
class BudgetFilters:
    period: Optional[str] = None
    category: Optional[str] = None

    def matches(self, record: Any) -> bool:
        if self.period is not None and record.period != self.period:
            return False
        if self.category is not None and record.category != self.category:
            return False
        return True


@dataclass(frozen=True, slots=True)
class CategoryFilters:
    type: Optional[str] = None

    def matches(self, record: Any) -> bool:
        return self.type is None or record.type == self.type
