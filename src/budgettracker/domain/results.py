"""Outcome of a repository call routed through the storage fallback."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, Optional, TypeVar

T = TypeVar("T")

REMOTE = "remote"
LOCAL = "local"


@dataclass(frozen=True, slots=True)
class StorageResult(Generic[T]):
    """Value or error of a storage call, plus which backend produced it.

    ``remote_error`` explains why a call was served locally; ``error`` is a
    terminal failure such as a record missing from both backends.
    """

    value: Optional[T] = None
    source: str = REMOTE
    error: Optional[Exception] = None
    remote_error: Optional[Exception] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def degraded(self) -> bool:
        return self.source == LOCAL

    def unwrap(self) -> T:
        if self.error is not None:
            raise self.error
        return self.value  # type: ignore[return-value]
