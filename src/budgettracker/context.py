"""Application context for dependency injection."""

from __future__ import annotations

from dataclasses import dataclass
from functools import partial
from typing import Callable, Optional

from sqlalchemy.engine import Engine
from sqlmodel import Session

from .config import BaseConfig
from .errors import AuthenticationError
from .infra.database import (
    create_db_engine,
    create_session_factory,
    init_database,
    probe_connection,
)
from .infra.local_store import LocalBlobStore
from .infra.repositories import (
    FallbackRepository,
    LocalAccountRepository,
    LocalBudgetRepository,
    LocalTransactionRepository,
    SQLModelAccountRepository,
    SQLModelBudgetRepository,
    SQLModelCategoryRepository,
    SQLModelTransactionRepository,
)


@dataclass(frozen=True, slots=True)
class UserSession:
    """Identity of the caller, passed explicitly to every data operation."""

    user_id: Optional[str] = None

    @property
    def is_authenticated(self) -> bool:
        return bool(self.user_id)

    def require_user_id(self) -> str:
        """Return the current user id or raise if not set."""

        if not self.user_id:
            raise AuthenticationError("Sign in required")
        return self.user_id


@dataclass
class AppContext:
    """Centralized application context with storage and repositories."""

    config: BaseConfig
    engine: Engine
    session_factory: Callable[[], Session]
    local_store: LocalBlobStore

    transactions: FallbackRepository
    budgets: FallbackRepository
    accounts: FallbackRepository
    categories: SQLModelCategoryRepository


def create_app_context(
    config: Optional[BaseConfig] = None,
    *,
    probe: Optional[Callable[[], bool]] = None,
) -> AppContext:
    """Create and initialize the application context.

    ``probe`` replaces the database connectivity check, mainly for tests.
    """

    if config is None:
        config = BaseConfig()

    engine = create_db_engine(config)
    init_database(engine)
    session_factory = create_session_factory(engine)
    local_store = LocalBlobStore(config.LOCAL_STORE_PATH)
    probe = probe or partial(probe_connection, engine)

    return AppContext(
        config=config,
        engine=engine,
        session_factory=session_factory,
        local_store=local_store,
        transactions=FallbackRepository(
            SQLModelTransactionRepository(session_factory),
            LocalTransactionRepository(local_store),
            probe,
        ),
        budgets=FallbackRepository(
            SQLModelBudgetRepository(session_factory),
            LocalBudgetRepository(local_store),
            probe,
        ),
        accounts=FallbackRepository(
            SQLModelAccountRepository(session_factory),
            LocalAccountRepository(local_store),
            probe,
        ),
        categories=SQLModelCategoryRepository(session_factory),
    )
