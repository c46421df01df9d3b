"""SQLModel definitions for ledger transactions."""

from __future__ import annotations

import datetime as dt
from enum import Enum
from typing import ClassVar, Optional

from sqlmodel import Field, SQLModel

from ._fields import new_id, utcnow


class TransactionType(str, Enum):
    INCOME = "income"
    EXPENSE = "expense"


class Transaction(SQLModel, table=True):
    """A single income or expense entry recorded by a user."""

    __tablename__: ClassVar[str] = "transactions"

    id: str = Field(default_factory=new_id, primary_key=True, max_length=36)
    user_id: str = Field(nullable=False, index=True, max_length=64)
    account_id: Optional[str] = Field(default=None, index=True, max_length=36)
    amount: float = Field(nullable=False, description="Always positive; direction comes from type")
    type: str = Field(default=TransactionType.EXPENSE.value, nullable=False, max_length=16)
    category: str = Field(nullable=False, index=True, max_length=64)
    budget_id: Optional[str] = Field(default=None, max_length=36)
    description: Optional[str] = Field(default=None, max_length=255)
    date: dt.date = Field(nullable=False, index=True)
    created_at: dt.datetime = Field(default_factory=utcnow, nullable=False)

    @property
    def is_expense(self) -> bool:
        return self.type == TransactionType.EXPENSE.value
