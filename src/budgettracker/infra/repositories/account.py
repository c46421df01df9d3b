"""SQLModel implementation of Account repository."""

from __future__ import annotations

from typing import ClassVar

from ...models.account import Account
from .base import SQLModelRecordRepository


class SQLModelAccountRepository(SQLModelRecordRepository):
    """SQLModel-based account repository implementation."""

    model: ClassVar[type[Account]] = Account
    entity: ClassVar[str] = "Account"

    def _ordering(self) -> list:
        return [Account.name.asc()]  # type: ignore[attr-defined]
