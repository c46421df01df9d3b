"""SQLModel table exports."""

from .account import Account
from .budget import Budget
from .category import Category
from .transaction import Transaction, TransactionType

__all__ = [
    "Account",
    "Budget",
    "Category",
    "Transaction",
    "TransactionType",
]
