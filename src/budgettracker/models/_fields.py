"""Column defaults shared by the table models."""

from __future__ import annotations

from datetime import datetime, timezone
from uuid import uuid4


def new_id() -> str:
    """Generate a record identifier usable by both storage backends."""

    return str(uuid4())


def utcnow() -> datetime:
    return datetime.now(timezone.utc)
