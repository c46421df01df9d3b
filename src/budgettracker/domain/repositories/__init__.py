"""Repository protocol definitions for domain layer."""

from .base import RecordRepository

__all__ = ["RecordRepository"]
