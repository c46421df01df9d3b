"""Account model for transaction linkage."""

from __future__ import annotations

from datetime import datetime
from typing import ClassVar

from sqlmodel import Field, SQLModel

from ._fields import new_id, utcnow


class Account(SQLModel, table=True):
    __tablename__: ClassVar[str] = "accounts"

    id: str = Field(default_factory=new_id, primary_key=True, max_length=36)
    user_id: str = Field(nullable=False, index=True, max_length=64)
    name: str = Field(nullable=False, max_length=128)
    type: str = Field(default="checking", nullable=False, max_length=32)
    balance: float = Field(default=0.0, nullable=False)
    currency: str = Field(default="USD", max_length=3, description="ISO-4217 currency code")
    created_at: datetime = Field(default_factory=utcnow, nullable=False)
