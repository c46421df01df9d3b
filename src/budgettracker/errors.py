"""Exception hierarchy shared by repositories, services and routes."""

from __future__ import annotations


class BudgetTrackerError(Exception):
    """Base class for application errors."""


class StorageError(BudgetTrackerError):
    """A storage backend could not serve the request."""


class RecordNotFoundError(BudgetTrackerError):
    """The requested record exists in neither backend."""

    def __init__(self, entity: str, record_id: str):
        super().__init__(f"{entity} {record_id} not found")
        self.entity = entity
        self.record_id = record_id


class ValidationError(BudgetTrackerError):
    """Input failed validation; ``fields`` maps field names to messages."""

    def __init__(self, fields: dict[str, list[str]]):
        summary = "; ".join(f"{name}: {', '.join(msgs)}" for name, msgs in fields.items())
        super().__init__(summary or "Invalid input")
        self.fields = fields


class DefaultCategoryError(BudgetTrackerError):
    """Default categories are read-only."""


class AuthenticationError(BudgetTrackerError):
    """The request does not name a signed-in user."""
