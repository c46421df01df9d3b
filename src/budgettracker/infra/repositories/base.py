"""Shared SQLModel plumbing for user-scoped repositories."""

from __future__ import annotations

from typing import Any, Callable, ClassVar, Optional

from sqlalchemy import func
from sqlmodel import Session, SQLModel, select

from ...errors import RecordNotFoundError


class SQLModelRecordRepository:
    """CRUD over one table, every query restricted to ``user_id``.

    Subclasses set ``model``/``entity`` and translate their filter object into
    WHERE clauses via ``_clauses``.
    """

    model: ClassVar[type[SQLModel]]
    entity: ClassVar[str]
    immutable_fields: ClassVar[frozenset[str]] = frozenset({"id", "user_id", "created_at"})

    def __init__(self, session_factory: Callable[[], Session]):
        """Initialize with a session factory."""
        self.session_factory = session_factory

    def _clauses(self, filters: Any) -> list:
        return []

    def _ordering(self) -> list:
        return [self.model.created_at.desc()]  # type: ignore[attr-defined]

    def _touch(self, record: Any) -> None:
        """Hook for bumping bookkeeping columns on update."""

    def _select_owned(self, record_id: str, user_id: str):
        return select(self.model).where(
            self.model.id == record_id,  # type: ignore[attr-defined]
            self.model.user_id == user_id,  # type: ignore[attr-defined]
        )

    def list(self, *, user_id: str, filters: Optional[Any] = None) -> list:
        with self.session_factory() as session:
            statement = (
                select(self.model)
                .where(self.model.user_id == user_id)  # type: ignore[attr-defined]
                .where(*self._clauses(filters))
                .order_by(*self._ordering())
            )
            offset = getattr(filters, "offset", 0) or 0
            limit = getattr(filters, "limit", None)
            if offset:
                statement = statement.offset(offset)
            if limit is not None:
                statement = statement.limit(limit)
            rows = list(session.exec(statement).all())
            session.expunge_all()
            return rows

    def count(self, *, user_id: str, filters: Optional[Any] = None) -> int:
        with self.session_factory() as session:
            statement = (
                select(func.count())
                .select_from(self.model)
                .where(self.model.user_id == user_id)  # type: ignore[attr-defined]
                .where(*self._clauses(filters))
            )
            return int(session.exec(statement).one() or 0)

    def get(self, record_id: str, *, user_id: str) -> Any:
        with self.session_factory() as session:
            obj = session.exec(self._select_owned(record_id, user_id)).first()
            if obj is None:
                raise RecordNotFoundError(self.entity, record_id)
            session.expunge(obj)
            return obj

    def create(self, record: Any, *, user_id: str) -> Any:
        with self.session_factory() as session:
            record.user_id = user_id
            session.add(record)
            session.commit()
            session.refresh(record)
            session.expunge(record)
            return record

    def update(self, record_id: str, changes: dict[str, Any], *, user_id: str) -> Any:
        with self.session_factory() as session:
            obj = session.exec(self._select_owned(record_id, user_id)).first()
            if obj is None:
                raise RecordNotFoundError(self.entity, record_id)
            for key, value in changes.items():
                if key in self.immutable_fields or key not in self.model.model_fields:
                    continue
                setattr(obj, key, value)
            self._touch(obj)
            session.add(obj)
            session.commit()
            session.refresh(obj)
            session.expunge(obj)
            return obj

    def delete(self, record_id: str, *, user_id: str) -> bool:
        with self.session_factory() as session:
            obj = session.exec(self._select_owned(record_id, user_id)).first()
            if obj is None:
                return False
            session.delete(obj)
            session.commit()
            return True
