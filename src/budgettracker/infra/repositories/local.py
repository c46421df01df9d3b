"""Repositories backed by the local blob store.

They answer the same calls as the SQLModel repositories, evaluating filters,
ordering and paging in-process.
"""

from __future__ import annotations

from typing import Any, ClassVar, Optional

from pydantic import ValidationError as PydanticValidationError
from sqlmodel import SQLModel

from ...errors import RecordNotFoundError
from ...logging_config import get_logger
from ...models._fields import new_id, utcnow
from ...models.account import Account
from ...models.budget import Budget
from ...models.transaction import Transaction
from ..local_store import ACCOUNTS_KEY, BUDGETS_KEY, TRANSACTIONS_KEY, LocalBlobStore

logger = get_logger("infra.local")


class LocalRecordRepository:
    """User-scoped CRUD over one key of a ``LocalBlobStore``."""

    model: ClassVar[type[SQLModel]]
    entity: ClassVar[str]
    key: ClassVar[str]
    immutable_fields: ClassVar[frozenset[str]] = frozenset({"id", "user_id", "created_at"})

    def __init__(self, store: LocalBlobStore):
        self.store = store

    def _load(self, row: dict[str, Any]) -> Optional[Any]:
        try:
            return self.model.model_validate(row)
        except PydanticValidationError as exc:
            logger.warning("Skipping unreadable %s row %s: %s", self.entity, row.get("id"), exc)
            return None

    @staticmethod
    def _dump(record: SQLModel) -> dict[str, Any]:
        return record.model_dump(mode="json")

    def _sort_key(self, record: Any) -> Any:
        return str(record.created_at)

    def _sort_reverse(self) -> bool:
        return True

    def _touch(self, record: Any) -> None:
        """Hook for bumping bookkeeping columns on update."""

    def _owned(self, user_id: str, filters: Optional[Any]) -> list:
        records = []
        for row in self.store.read(self.key):
            if row.get("user_id") != user_id:
                continue
            record = self._load(row)
            if record is None:
                continue
            if filters is not None and not filters.matches(record):
                continue
            records.append(record)
        records.sort(key=self._sort_key, reverse=self._sort_reverse())
        return records

    def list(self, *, user_id: str, filters: Optional[Any] = None) -> list:
        records = self._owned(user_id, filters)
        offset = getattr(filters, "offset", 0) or 0
        limit = getattr(filters, "limit", None)
        end = None if limit is None else offset + limit
        return records[offset:end]

    def count(self, *, user_id: str, filters: Optional[Any] = None) -> int:
        return len(self._owned(user_id, filters))

    def get(self, record_id: str, *, user_id: str) -> Any:
        for record in self._owned(user_id, None):
            if record.id == record_id:
                return record
        raise RecordNotFoundError(self.entity, record_id)

    def create(self, record: Any, *, user_id: str) -> Any:
        record.user_id = user_id
        if not record.id:
            record.id = new_id()
        rows = self.store.read(self.key)
        rows.append(self._dump(record))
        self.store.write(self.key, rows)
        return record

    def update(self, record_id: str, changes: dict[str, Any], *, user_id: str) -> Any:
        rows = self.store.read(self.key)
        for index, row in enumerate(rows):
            if row.get("id") != record_id or row.get("user_id") != user_id:
                continue
            merged = dict(row)
            for key, value in changes.items():
                if key in self.immutable_fields or key not in self.model.model_fields:
                    continue
                merged[key] = value
            record = self.model.model_validate(merged)
            self._touch(record)
            rows[index] = self._dump(record)
            self.store.write(self.key, rows)
            return record
        raise RecordNotFoundError(self.entity, record_id)

    def delete(self, record_id: str, *, user_id: str) -> bool:
        rows = self.store.read(self.key)
        kept = [
            row for row in rows
            if not (row.get("id") == record_id and row.get("user_id") == user_id)
        ]
        if len(kept) == len(rows):
            return False
        self.store.write(self.key, kept)
        return True


class LocalTransactionRepository(LocalRecordRepository):
    model: ClassVar[type[Transaction]] = Transaction
    entity: ClassVar[str] = "Transaction"
    key: ClassVar[str] = TRANSACTIONS_KEY

    def _sort_key(self, record: Any) -> Any:
        return (record.date, str(record.created_at))


class LocalBudgetRepository(LocalRecordRepository):
    """Budgets kept offline. One row per (user, category, period)."""

    model: ClassVar[type[Budget]] = Budget
    entity: ClassVar[str] = "Budget"
    key: ClassVar[str] = BUDGETS_KEY

    def _sort_key(self, record: Any) -> Any:
        return (record.category, str(record.created_at))

    def _sort_reverse(self) -> bool:
        return False

    def _touch(self, record: Any) -> None:
        record.updated_at = utcnow()

    def create(self, record: Any, *, user_id: str) -> Any:
        for existing in self._owned(user_id, None):
            if existing.category == record.category and existing.period == record.period:
                return self.update(existing.id, {"amount": record.amount}, user_id=user_id)
        return super().create(record, user_id=user_id)


class LocalAccountRepository(LocalRecordRepository):
    model: ClassVar[type[Account]] = Account
    entity: ClassVar[str] = "Account"
    key: ClassVar[str] = ACCOUNTS_KEY

    def _sort_key(self, record: Any) -> Any:
        return record.name.lower()

    def _sort_reverse(self) -> bool:
        return False
