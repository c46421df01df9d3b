"""Operations every storage backend provides for a user-owned entity."""

from __future__ import annotations

from typing import Any, Optional, Protocol, TypeVar

T = TypeVar("T")
F = TypeVar("F", contravariant=True)


class RecordRepository(Protocol[T, F]):
    """CRUD over one entity, always scoped to a user.

    Implementations raise ``RecordNotFoundError`` from ``get``/``update`` for
    unknown ids and may raise ``StorageError`` or SQLAlchemy errors when the
    backend is unavailable.
    """

    entity: str

    def list(self, *, user_id: str, filters: Optional[F] = None) -> list[T]:
        ...

    def count(self, *, user_id: str, filters: Optional[F] = None) -> int:
        ...

    def get(self, record_id: str, *, user_id: str) -> T:
        ...

    def create(self, record: T, *, user_id: str) -> T:
        ...

    def update(self, record_id: str, changes: dict[str, Any], *, user_id: str) -> T:
        ...

    def delete(self, record_id: str, *, user_id: str) -> bool:
        """Return True when a record was removed."""
        ...
