"""Concrete repository implementations: SQLModel, local store and fallback."""

from .account import SQLModelAccountRepository
from .budget import SQLModelBudgetRepository
from .category import SQLModelCategoryRepository
from .fallback import FallbackRepository
from .local import (
    LocalAccountRepository,
    LocalBudgetRepository,
    LocalRecordRepository,
    LocalTransactionRepository,
)
from .transaction import SQLModelTransactionRepository

__all__ = [
    "FallbackRepository",
    "LocalAccountRepository",
    "LocalBudgetRepository",
    "LocalRecordRepository",
    "LocalTransactionRepository",
    "SQLModelAccountRepository",
    "SQLModelBudgetRepository",
    "SQLModelCategoryRepository",
    "SQLModelTransactionRepository",
]
