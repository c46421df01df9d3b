"""Database infrastructure for the relational backend."""

from __future__ import annotations

from contextlib import contextmanager
from typing import Iterator

from sqlalchemy import text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session, SQLModel, create_engine

from ..config import BaseConfig
from ..logging_config import get_logger

logger = get_logger("infra.database")


def create_db_engine(config: BaseConfig) -> Engine:
    """Create SQLModel engine from configuration."""
    return create_engine(config.DATABASE_URL, **config.sqlalchemy_engine_options())


def init_database(engine: Engine) -> None:
    """Create missing tables.

    A database that cannot be reached is logged and left alone; the local
    store keeps serving requests until it comes back.
    """
    from .. import models  # noqa: F401  # register tables with SQLModel metadata

    try:
        SQLModel.metadata.create_all(engine)
    except SQLAlchemyError as exc:
        logger.warning("Schema initialization skipped: %s", exc)


def create_session_factory(engine: Engine):
    """Create a session factory function."""

    @contextmanager
    def factory() -> Iterator[Session]:
        """Create a new session."""
        session = Session(engine, expire_on_commit=False)
        try:
            yield session
            session.commit()
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()

    return factory


def probe_connection(engine: Engine) -> bool:
    """Return True when the database answers a trivial query."""

    try:
        with engine.connect() as connection:
            connection.execute(text("SELECT 1"))
        return True
    except SQLAlchemyError as exc:
        logger.debug("Connectivity probe failed: %s", exc)
        return False
