"""Budgeting tables."""

from __future__ import annotations

from datetime import datetime
from typing import ClassVar

from sqlmodel import Field, SQLModel

from ..domain.periods import BudgetPeriod
from ._fields import new_id, utcnow


class Budget(SQLModel, table=True):
    """Spending limit for one category over a recurring period."""

    __tablename__: ClassVar[str] = "budgets"

    id: str = Field(default_factory=new_id, primary_key=True, max_length=36)
    user_id: str = Field(nullable=False, index=True, max_length=64)
    category: str = Field(nullable=False, index=True, max_length=64)
    amount: float = Field(nullable=False, description="Limit for the period")
    period: str = Field(default=BudgetPeriod.MONTHLY.value, nullable=False, index=True, max_length=16)
    created_at: datetime = Field(default_factory=utcnow, nullable=False)
    updated_at: datetime = Field(default_factory=utcnow, nullable=False)

    # TODO(@budgeting): add a unique (user_id, category, period) constraint once
    #   existing duplicate rows in hosted databases are merged.
