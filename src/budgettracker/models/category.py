"""Ledger category definitions."""

from __future__ import annotations

from datetime import datetime
from typing import ClassVar

from sqlmodel import Field, SQLModel

from ._fields import new_id, utcnow


class Category(SQLModel, table=True):
    """Transaction category used for budgeting and reporting."""

    __tablename__: ClassVar[str] = "categories"

    id: str = Field(default_factory=new_id, primary_key=True, max_length=36)
    user_id: str = Field(nullable=False, index=True, max_length=64)
    slug: str = Field(nullable=False, index=True, max_length=64)
    name: str = Field(nullable=False, max_length=64)
    type: str = Field(default="expense", nullable=False, max_length=16)
    icon: str = Field(default="more-horizontal", max_length=32)
    is_default: bool = Field(default=False, nullable=False)
    created_at: datetime = Field(default_factory=utcnow, nullable=False)
