"""
Database engine, sessions and persistence error translation.

Adapters never let SQLAlchemy exceptions escape: integrity failures are
classified into UniqueViolationError or RelatedRecordMissingError, and
every other SQLAlchemy failure becomes a plain PersistenceError.
"""

import logging
import uuid
from contextlib import contextmanager
from datetime import datetime, timezone
from functools import lru_cache
from typing import Iterator

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker
from sqlalchemy.pool import StaticPool

from terra_discover.core.config import settings
from terra_discover.domain.errors import (
    PersistenceError,
    RelatedRecordMissingError,
    UniqueViolationError,
)

logger = logging.getLogger(__name__)

UNIQUE_VIOLATION_SQLSTATE = "23505"
FOREIGN_KEY_VIOLATION_SQLSTATE = "23503"


class Base(DeclarativeBase):
    """Declarative base for every ORM model."""


def new_id() -> str:
    return str(uuid.uuid4())


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def as_utc(value: datetime) -> datetime:
    """Attach UTC to naive timestamps read back from SQLite."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def _enable_sqlite_foreign_keys(dbapi_connection, _connection_record) -> None:
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def create_db_engine(url: str) -> Engine:
    """Build a SQLAlchemy engine for ``url``.

    SQLite gets foreign keys switched on for every connection, and an
    in-memory database is pinned to one shared connection.
    """
    if url.startswith("sqlite"):
        kwargs: dict = {"connect_args": {"check_same_thread": False}}
        if url in ("sqlite://", "sqlite:///:memory:"):
            kwargs["poolclass"] = StaticPool
        engine = create_engine(url, **kwargs)
        event.listen(engine, "connect", _enable_sqlite_foreign_keys)
        return engine

    return create_engine(url, pool_pre_ping=True)


def create_session_factory(engine: Engine) -> sessionmaker[Session]:
    """Build a session factory whose objects stay readable after commit."""
    return sessionmaker(bind=engine, expire_on_commit=False)


@lru_cache(maxsize=1)
def get_engine() -> Engine:
    """Return the process-wide engine built from application settings."""
    return create_db_engine(settings.get_database_url())


@lru_cache(maxsize=1)
def get_session_factory() -> sessionmaker[Session]:
    """Return the process-wide session factory bound to ``get_engine()``."""
    return create_session_factory(get_engine())


def init_db(engine: Engine) -> None:
    """Create every table that does not exist yet."""
    # Model modules register their tables on Base.metadata when imported.
    from terra_discover.infrastructure.accounts import models as _accounts  # noqa: F401
    from terra_discover.infrastructure.catalog import models as _catalog  # noqa: F401

    Base.metadata.create_all(engine)
    logger.info("Database schema ready.")


def classify_integrity_error(exc: IntegrityError) -> PersistenceError:
    """Map a driver integrity error to a port-level persistence error.

    PostgreSQL drivers expose a SQLSTATE; SQLite only has the message.
    """
    orig = exc.orig
    sqlstate = getattr(orig, "pgcode", None) or getattr(orig, "sqlstate", None)
    detail = str(orig)
    text = detail.upper()

    if sqlstate == UNIQUE_VIOLATION_SQLSTATE or "UNIQUE CONSTRAINT" in text:
        return UniqueViolationError(detail)
    if sqlstate == FOREIGN_KEY_VIOLATION_SQLSTATE or "FOREIGN KEY CONSTRAINT" in text:
        return RelatedRecordMissingError(detail)
    return PersistenceError(detail)


@contextmanager
def translate_errors() -> Iterator[None]:
    """Re-raise SQLAlchemy failures as persistence errors."""
    try:
        yield
    except IntegrityError as exc:
        raise classify_integrity_error(exc) from exc
    except SQLAlchemyError as exc:
        raise PersistenceError(f"{type(exc).__name__}: {exc}") from exc
