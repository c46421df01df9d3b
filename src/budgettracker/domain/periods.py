"""Budget periods and the date windows they cover."""

from __future__ import annotations

from datetime import date
from enum import Enum

from ..errors import ValidationError


class BudgetPeriod(str, Enum):
    """Recurring timeframe a budget applies to."""

    MONTHLY = "monthly"
    QUARTERLY = "quarterly"
    YEARLY = "yearly"


# Older clients send the short spellings.
_ALIASES = {
    "month": BudgetPeriod.MONTHLY,
    "quarter": BudgetPeriod.QUARTERLY,
    "year": BudgetPeriod.YEARLY,
}

PERIOD_CHOICES = [period.value for period in BudgetPeriod] + list(_ALIASES)


def normalize_period(value: str | BudgetPeriod | None) -> BudgetPeriod:
    """Return the canonical period for ``value``; ``None`` means monthly."""

    if value is None:
        return BudgetPeriod.MONTHLY
    if isinstance(value, BudgetPeriod):
        return value
    key = value.strip().lower()
    if key in _ALIASES:
        return _ALIASES[key]
    try:
        return BudgetPeriod(key)
    except ValueError:
        allowed = ", ".join(p.value for p in BudgetPeriod)
        raise ValidationError({"period": [f"Period must be one of: {allowed}."]}) from None


def period_start(period: BudgetPeriod, today: date) -> date:
    """First day of the period containing ``today``."""

    if period is BudgetPeriod.MONTHLY:
        return today.replace(day=1)
    if period is BudgetPeriod.QUARTERLY:
        first_month = (today.month - 1) // 3 * 3 + 1
        return date(today.year, first_month, 1)
    return date(today.year, 1, 1)


def period_window(period: str | BudgetPeriod, today: date | None = None) -> tuple[date, date]:
    """Return the inclusive ``(start, today)`` window used for spending totals."""

    today = today or date.today()
    return period_start(normalize_period(period), today), today
