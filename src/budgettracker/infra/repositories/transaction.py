"""SQLModel implementation of Transaction repository."""

from __future__ import annotations

from typing import ClassVar, Optional

from ...domain.filters import TransactionFilters
from ...models.transaction import Transaction
from .base import SQLModelRecordRepository


class SQLModelTransactionRepository(SQLModelRecordRepository):
    """SQLModel-based transaction repository implementation."""

    model: ClassVar[type[Transaction]] = Transaction
    entity: ClassVar[str] = "Transaction"

    def _clauses(self, filters: Optional[TransactionFilters]) -> list:
        if filters is None:
            return []
        clauses = []
        if filters.start_date is not None:
            clauses.append(Transaction.date >= filters.start_date)
        if filters.end_date is not None:
            clauses.append(Transaction.date <= filters.end_date)
        if filters.category is not None:
            clauses.append(Transaction.category == filters.category)
        if filters.type is not None:
            clauses.append(Transaction.type == filters.type)
        if filters.account_id is not None:
            clauses.append(Transaction.account_id == filters.account_id)
        return clauses

    def _ordering(self) -> list:
        return [Transaction.date.desc(), Transaction.created_at.desc()]  # type: ignore[attr-defined]
