"""Remote-then-local composition of two repositories.

Every call first probes the relational backend. When the probe fails or the
remote call raises, the same call is served by the local repository and the
returned ``StorageResult`` is marked as coming from ``local``. The decision is
made per call: the next call probes again and there is no retry.
"""

from __future__ import annotations

from typing import Any, Callable, Generic, Optional, TypeVar

from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from ...domain.repositories.base import RecordRepository
from ...domain.results import LOCAL, REMOTE, StorageResult
from ...errors import RecordNotFoundError, StorageError
from ...logging_config import get_logger

T = TypeVar("T")
F = TypeVar("F")
R = TypeVar("R")

logger = get_logger("infra.fallback")


class FallbackRepository(Generic[T, F]):
    """Route repository calls to ``remote`` and degrade to ``local`` on failure."""

    def __init__(
        self,
        remote: RecordRepository[T, F],
        local: RecordRepository[T, F],
        probe: Callable[[], bool],
    ):
        self.remote = remote
        self.local = local
        self.probe = probe
        self.entity = remote.entity

    def _call_remote(
        self, operation: str, call: Callable[[RecordRepository[T, F]], R]
    ) -> tuple[Optional[R], Optional[Exception]]:
        """Return ``(value, None)`` on success or ``(None, why)`` when degraded."""

        if not self.probe():
            logger.warning(
                "%s.%s: backend unreachable, using local store",
                self.entity,
                operation,
                extra={"entity": self.entity, "operation": operation},
            )
            return None, StorageError(f"{self.entity} backend unreachable")
        try:
            return call(self.remote), None
        except RecordNotFoundError as exc:
            return None, exc
        except IntegrityError as exc:
            logger.error(
                "%s.%s rejected by backend: %s", self.entity, operation, exc.orig,
                extra={"entity": self.entity, "operation": operation},
            )
            return None, exc
        except (StorageError, SQLAlchemyError) as exc:
            logger.warning(
                "%s.%s failed remotely, using local store: %s", self.entity, operation, exc,
                extra={"entity": self.entity, "operation": operation},
            )
            return None, exc

    def _run(self, operation: str, call: Callable[[RecordRepository[T, F]], R]) -> StorageResult[R]:
        value, remote_error = self._call_remote(operation, call)
        if remote_error is None:
            return StorageResult(value=value, source=REMOTE)
        try:
            value = call(self.local)
        except RecordNotFoundError as exc:
            return StorageResult(source=LOCAL, error=exc, remote_error=remote_error)
        return StorageResult(value=value, source=LOCAL, remote_error=remote_error)

    def list(self, *, user_id: str, filters: Optional[F] = None) -> StorageResult[list[T]]:
        return self._run("list", lambda repo: repo.list(user_id=user_id, filters=filters))

    def count(self, *, user_id: str, filters: Optional[F] = None) -> StorageResult[int]:
        return self._run("count", lambda repo: repo.count(user_id=user_id, filters=filters))

    def get(self, record_id: str, *, user_id: str) -> StorageResult[T]:
        return self._run("get", lambda repo: repo.get(record_id, user_id=user_id))

    def create(self, record: T, *, user_id: str) -> StorageResult[T]:
        return self._run("create", lambda repo: repo.create(record, user_id=user_id))

    def update(self, record_id: str, changes: dict[str, Any], *, user_id: str) -> StorageResult[T]:
        return self._run(
            "update", lambda repo: repo.update(record_id, changes, user_id=user_id)
        )

    def delete(self, record_id: str, *, user_id: str) -> StorageResult[bool]:
        removed, remote_error = self._call_remote(
            "delete", lambda repo: repo.delete(record_id, user_id=user_id)
        )
        if removed:
            return StorageResult(value=True, source=REMOTE)
        # Records written while offline only exist locally.
        removed_locally = self.local.delete(record_id, user_id=user_id)
        if remote_error is None and not removed_locally:
            return StorageResult(value=False, source=REMOTE)
        return StorageResult(value=removed_locally, source=LOCAL, remote_error=remote_error)
