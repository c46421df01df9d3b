"""Pytest configuration and shared fixtures for BudgetTracker tests.

Provides an isolated SQLite database, a temporary local store, repository
wiring with a switchable connectivity probe, and a Flask client.
"""

from __future__ import annotations

import tempfile
from datetime import date
from pathlib import Path

import pytest
from sqlmodel import SQLModel, create_engine

from budgettracker import create_app
from budgettracker.infra.database import create_session_factory
from budgettracker.infra.local_store import LocalBlobStore
from budgettracker.infra.repositories import (
    FallbackRepository,
    LocalAccountRepository,
    LocalBudgetRepository,
    LocalTransactionRepository,
    SQLModelAccountRepository,
    SQLModelBudgetRepository,
    SQLModelCategoryRepository,
    SQLModelTransactionRepository,
)
from budgettracker.models import Budget, Transaction

USER_ID = "user-1"
OTHER_USER_ID = "user-2"


class ProbeSwitch:
    """Stand-in connectivity probe that tests can flip offline."""

    def __init__(self) -> None:
        self.up = True
        self.calls = 0

    def __call__(self) -> bool:
        self.calls += 1
        return self.up


# =============================================================================
# Database Fixtures
# =============================================================================


@pytest.fixture(scope="function")
def db_engine():
    """Create an isolated SQLite database file for each test."""

    with tempfile.NamedTemporaryFile(suffix=".db", delete=False) as f:
        db_path = Path(f.name)

    engine = create_engine(f"sqlite:///{db_path}", echo=False)
    SQLModel.metadata.create_all(engine)

    yield engine

    engine.dispose()
    db_path.unlink(missing_ok=True)


@pytest.fixture(scope="function")
def session_factory(db_engine):
    """Session factory matching the one the application context builds."""

    return create_session_factory(db_engine)


@pytest.fixture
def local_store(tmp_path) -> LocalBlobStore:
    return LocalBlobStore(tmp_path / "local_store.json")


@pytest.fixture
def probe() -> ProbeSwitch:
    return ProbeSwitch()


# =============================================================================
# Repository Fixtures
# =============================================================================


@pytest.fixture
def transaction_repo(session_factory):
    return SQLModelTransactionRepository(session_factory)


@pytest.fixture
def budget_repo(session_factory):
    return SQLModelBudgetRepository(session_factory)


@pytest.fixture
def account_repo(session_factory):
    return SQLModelAccountRepository(session_factory)


@pytest.fixture
def category_repo(session_factory):
    return SQLModelCategoryRepository(session_factory)


@pytest.fixture
def transactions(transaction_repo, local_store, probe) -> FallbackRepository:
    """Transaction repository routed through the storage fallback."""

    return FallbackRepository(transaction_repo, LocalTransactionRepository(local_store), probe)


@pytest.fixture
def budgets(budget_repo, local_store, probe) -> FallbackRepository:
    return FallbackRepository(budget_repo, LocalBudgetRepository(local_store), probe)


@pytest.fixture
def accounts(account_repo, local_store, probe) -> FallbackRepository:
    return FallbackRepository(account_repo, LocalAccountRepository(local_store), probe)


# =============================================================================
# Test Data Factories
# =============================================================================


@pytest.fixture
def transaction_factory():
    """Build unsaved transactions with sensible defaults."""

    def _create_transaction(
        amount: float = 10.0,
        category: str = "groceries",
        txn_type: str = "expense",
        txn_date: date = date(2024, 3, 10),
        description: str | None = None,
        user_id: str = USER_ID,
        **extra,
    ) -> Transaction:
        return Transaction(
            user_id=user_id,
            amount=amount,
            category=category,
            type=txn_type,
            date=txn_date,
            description=description,
            **extra,
        )

    return _create_transaction


@pytest.fixture
def budget_factory():
    """Build unsaved budgets with sensible defaults."""

    def _create_budget(
        category: str = "groceries",
        amount: float = 500.0,
        period: str = "monthly",
        user_id: str = USER_ID,
    ) -> Budget:
        return Budget(user_id=user_id, category=category, amount=amount, period=period)

    return _create_budget


# =============================================================================
# Flask Fixtures
# =============================================================================


@pytest.fixture
def app(tmp_path, monkeypatch, probe):
    """Application wired to a temporary data directory."""

    monkeypatch.setenv("BUDGET_TRACKER_DATA_DIR", str(tmp_path))
    monkeypatch.setenv("BUDGET_TRACKER_DATABASE_URL", f"sqlite:///{tmp_path / 'app.db'}")
    monkeypatch.setenv("BUDGET_TRACKER_LOCAL_STORE", str(tmp_path / "app_store.json"))
    monkeypatch.delenv("BUDGET_TRACKER_ALERT_THRESHOLD", raising=False)

    flask_app = create_app("testing", probe=probe)
    yield flask_app
    flask_app.extensions["budgettracker"].engine.dispose()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def auth_headers() -> dict[str, str]:
    return {"X-User-Id": USER_ID}
