"""Service module exports."""

from . import budgeting, categories, export_csv, ledger_service

__all__ = [
    "budgeting",
    "categories",
    "export_csv",
    "ledger_service",
]
