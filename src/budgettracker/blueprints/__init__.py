"""Blueprint exports."""

from . import accounts, budgets, categories, transactions

__all__ = [
    "accounts",
    "budgets",
    "categories",
    "transactions",
]
