"""Database engine and session management."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import structlog
from sqlalchemy import Engine, create_engine, event
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from pos_payments.infrastructure.orm import Base

if TYPE_CHECKING:
    from pos_payments.config import Settings

logger = structlog.get_logger(__name__)


def _enable_sqlite_foreign_keys(dbapi_conn: Any, connection_record: Any) -> None:
    cursor = dbapi_conn.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def create_db_engine(settings: Settings) -> Engine:
    """Create the SQLAlchemy engine for the configured database.

    SQLite is used for local runs and tests:
    - connections may be used from FastAPI's worker threads
    - in-memory databases keep one shared connection (StaticPool),
      otherwise every connection would see its own empty database
    - foreign keys are switched on per connection
    """
    url = settings.database_url
    kwargs: dict[str, Any] = {"echo": settings.database_echo}

    is_sqlite = url.startswith("sqlite")
    if is_sqlite:
        kwargs["connect_args"] = {"check_same_thread": False}
        if url in ("sqlite://", "sqlite:///:memory:"):
            kwargs["poolclass"] = StaticPool
    else:
        kwargs["pool_pre_ping"] = True

    engine = create_engine(url, **kwargs)
    if is_sqlite:
        event.listen(engine, "connect", _enable_sqlite_foreign_keys)

    logger.info("database_engine_created", dialect=engine.dialect.name)
    return engine


def create_session_factory(engine: Engine) -> sessionmaker[Session]:
    return sessionmaker(
        bind=engine,
        autocommit=False,
        autoflush=False,
        expire_on_commit=False,
    )


def create_schema(engine: Engine) -> None:
    """Create all tables that do not exist yet."""
    Base.metadata.create_all(bind=engine)
