"""
Database connection and session management for the Community Hub backend.

This module provides engine creation, per-request session handling and
schema initialisation for the relational store.
"""

from collections.abc import AsyncGenerator
from pathlib import Path

from sqlalchemy import event, make_url, text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.orm import declarative_base

from .config import get_settings_instance
from .exceptions import DatabaseConnectionError, DatabaseInitializationError, DatabaseSessionError
from .logging import get_logger

logger = get_logger(__name__)

# Create declarative base
Base = declarative_base()

# Global async engine and session factory - lazy initialization
_async_engine = None
_AsyncSessionLocal = None


# Execution option marking a session transaction that will write
WRITE_TRANSACTION_OPTION = "hub_write_transaction"


def _configure_sqlite_connection(dbapi_connection, connection_record) -> None:
    cursor = dbapi_connection.cursor()
    # SQLite ships with foreign key enforcement off per connection
    cursor.execute("PRAGMA foreign_keys=ON")
    # WAL lets readers run alongside each other and alongside the single writer
    cursor.execute("PRAGMA journal_mode=WAL")
    cursor.close()
    # Hand transaction control to SQLAlchemy so _begin_sqlite_transaction decides how BEGIN is issued
    dbapi_connection.isolation_level = None


def _begin_sqlite_transaction(conn) -> None:
    # Writers take the write lock up front so they queue on the busy timeout;
    # a deferred transaction that upgrades to a write fails with "database is locked"
    if conn.get_execution_options().get(WRITE_TRANSACTION_OPTION):
        conn.exec_driver_sql("BEGIN IMMEDIATE")
    else:
        conn.exec_driver_sql("BEGIN")


def build_async_engine(database_url: str, echo: bool = False) -> AsyncEngine:
    """Create an async engine for ``database_url``.

    SQLite connections get foreign key enforcement switched on so
    plugin_tags rows can only reference existing plugins and tags, and run in
    WAL mode. Read transactions begin deferred and never wait on each other;
    transactions started through ``begin_write`` begin with ``BEGIN IMMEDIATE``
    so concurrent writers queue on the busy timeout instead of failing.
    """
    settings = get_settings_instance()

    if database_url.startswith("sqlite"):
        engine = create_async_engine(
            database_url,
            echo=echo,
            connect_args={"timeout": settings.database_busy_timeout},
        )
        event.listen(engine.sync_engine, "connect", _configure_sqlite_connection)
        event.listen(engine.sync_engine, "begin", _begin_sqlite_transaction)
        return engine

    return create_async_engine(
        database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
        pool_pre_ping=True,
        echo=echo,
    )


def build_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(
        bind=engine,
        expire_on_commit=False,
        autoflush=False,
        class_=AsyncSession,
    )


def get_async_engine() -> AsyncEngine:
    global _async_engine
    if _async_engine is None:
        settings = get_settings_instance()
        try:
            _async_engine = build_async_engine(settings.database_url, echo=settings.database_echo)
            logger.debug("Database engine created", extra={"dialect": _async_engine.dialect.name})
        except Exception as e:
            logger.error(f"Failed to create async database engine: {e}")
            raise DatabaseConnectionError(f"engine creation: {e}") from e
    return _async_engine


def get_async_session_local() -> async_sessionmaker[AsyncSession]:
    global _AsyncSessionLocal
    if _AsyncSessionLocal is None:
        try:
            _AsyncSessionLocal = build_session_factory(get_async_engine())
        except DatabaseConnectionError:
            raise
        except Exception as e:
            logger.error(f"Failed to create async session factory: {e}")
            raise DatabaseSessionError(f"session factory creation: {e}") from e
    return _AsyncSessionLocal


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """Yield one session per request, rolling back whatever was left uncommitted."""
    session_local = get_async_session_local()
    async with session_local() as session:
        try:
            yield session
        except SQLAlchemyError:
            await session.rollback()
            raise


async def begin_write(session: AsyncSession) -> None:
    """Open the session's next transaction as a writer.

    On SQLite this issues ``BEGIN IMMEDIATE``; other dialects ignore the
    option. A session that is already inside a transaction keeps it.
    """
    if session.in_transaction():
        return
    await session.connection(execution_options={WRITE_TRANSACTION_OPTION: True})


def _ensure_sqlite_directory() -> None:
    # SQLite creates the file on first connect but not its parent directories
    settings = get_settings_instance()
    if not settings.is_sqlite:
        return
    database = make_url(settings.database_url).database
    if database and database != ":memory:":
        Path(database).parent.mkdir(parents=True, exist_ok=True)


async def init_db() -> None:
    """Create every table registered on ``Base.metadata`` if it does not exist yet."""
    try:
        # Ensure all models are imported so Base.metadata has all tables
        from ..models.registry import register_all_models

        register_all_models()
        _ensure_sqlite_directory()
        engine = get_async_engine()
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
        logger.info("Database tables initialized successfully", extra={"dialect": engine.dialect.name})
    except DatabaseConnectionError:
        raise
    except Exception as e:
        logger.error(f"Database initialization failed: {e}")
        raise DatabaseInitializationError(str(e)) from e


async def close_db() -> None:
    """Dispose the engine and forget the cached factory."""
    global _async_engine, _AsyncSessionLocal
    if _async_engine is None:
        return
    try:
        await _async_engine.dispose()
        logger.debug("Database connections closed")
    except Exception as e:
        logger.error(f"Error closing database connections: {e}")
    finally:
        _async_engine = None
        _AsyncSessionLocal = None


async def check_db_connection(db: AsyncSession) -> bool:
    """Check if database connection is working."""
    try:
        await db.execute(text("SELECT 1"))
        return True
    except SQLAlchemyError as e:
        logger.error(f"Database connection check failed: {e}")
        return False
