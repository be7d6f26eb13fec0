"""Database configuration and session management."""

from collections.abc import Generator
from typing import Annotated, Any

from fastapi import Depends
from sqlalchemy import create_engine, event
from sqlalchemy.engine import Connection, Engine
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker
from sqlalchemy.pool import StaticPool

from studyledger.config import Settings, get_settings


class Base(DeclarativeBase):
    """Base class for all database models."""


# Module-level singletons (application-scoped)
_engine: Engine | None = None
_session_factory: sessionmaker[Session] | None = None


def is_in_memory_sqlite(url: str) -> bool:
    return url in ("sqlite://", "sqlite:///:memory:") or "mode=memory" in url


def _serialize_sqlite_transactions(engine: Engine) -> None:
    """
    Start every transaction on a SQLite file with BEGIN IMMEDIATE.

    SQLite has no row locks and ignores FOR UPDATE, so the write lock is
    taken when the transaction starts. Concurrent transactions wait on the
    busy timeout instead of reading a row another one is about to change.
    """

    @event.listens_for(engine, "connect")
    def _disable_driver_transactions(dbapi_connection: Any, _connection_record: Any) -> None:
        # BEGIN is emitted by the "begin" hook below
        dbapi_connection.isolation_level = None

    @event.listens_for(engine, "begin")
    def _begin_immediate(connection: Connection) -> None:
        connection.exec_driver_sql("BEGIN IMMEDIATE")


def build_engine(settings: Settings) -> Engine:
    """Create an engine whose connections carry the statement timeout."""
    timeout_ms = settings.DATABASE_STATEMENT_TIMEOUT_MS

    if settings.DATABASE_URL.startswith("sqlite"):
        connect_args = {"check_same_thread": False, "timeout": timeout_ms / 1000}
        if is_in_memory_sqlite(settings.DATABASE_URL):
            # The in-memory database exists only on its single connection
            return create_engine(
                settings.DATABASE_URL, connect_args=connect_args, poolclass=StaticPool
            )

        # Pooled connections: a session never shares a transaction with another
        engine = create_engine(settings.DATABASE_URL, connect_args=connect_args)
        _serialize_sqlite_transactions(engine)
        return engine

    return create_engine(
        settings.DATABASE_URL,
        connect_args={"options": f"-c statement_timeout={timeout_ms}"},
        pool_size=20,
        max_overflow=30,
        pool_pre_ping=True,  # Verify connections before use
        pool_recycle=3600,  # Recycle connections after 1 hour
    )


def initialize_database(settings: Settings) -> None:
    """Initialize database engine and session factory once at startup."""
    global _engine, _session_factory  # noqa: PLW0603

    _engine = build_engine(settings)
    _session_factory = sessionmaker(autocommit=False, autoflush=False, bind=_engine)


def get_engine() -> Engine:
    """Get the singleton database engine."""
    if _engine is None:
        raise RuntimeError("Database not initialized. Call initialize_database() first.")
    return _engine


def get_session_factory(
    settings: Annotated[Settings, Depends(get_settings)],
) -> sessionmaker[Session]:
    """Get session factory (returns singleton)."""
    if _session_factory is None:
        initialize_database(settings)

    if _session_factory is None:
        raise RuntimeError("Failed to initialize database session factory.")

    return _session_factory


def dispose_engine() -> None:
    """Dispose database engine on shutdown."""
    global _engine, _session_factory  # noqa: PLW0603
    if _engine is not None:
        _engine.dispose()
        _engine = None
        _session_factory = None


def get_db(
    session_factory: Annotated[sessionmaker[Session], Depends(get_session_factory)],
) -> Generator[Session, None, None]:
    """Get database session."""
    db = session_factory()
    try:
        yield db
    finally:
        db.close()


# Type alias for database dependency
DatabaseSession = Annotated[Session, Depends(get_db)]
