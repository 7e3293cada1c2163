"""
Layered API — Database Engine & Session Management
===================================================

What:  Async SQLAlchemy engine, session factory, declarative base and schema
       bootstrap for the relational backend.
How:   The composition root calls create_engine() once when at least one
       entity uses the relational backend. The engine owns the connection
       pool; relational repositories receive the session factory and open
       one short-lived session per operation.
Who:   Used by container.py (wiring), repositories/sql.py (queries) and the
       application lifespan (schema bootstrap, disposal).

Connection Pooling:
    One pool per process, created at composition time and reused for every
    request. pool_size / max_overflow / pre_ping come from Settings and are
    skipped for SQLite URLs, which use SQLAlchemy's own pool choice.

Schema:
    users(id INTEGER PK, name TEXT NOT NULL)
    orders(id INTEGER PK, user_id INTEGER NOT NULL REFERENCES users(id))

    create_schema() issues CREATE TABLE IF NOT EXISTS for both tables. It is
    a bootstrap, not a migration tool: existing tables are left untouched.
"""

import logging
from typing import Any, Dict

from sqlalchemy import event
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase

from layered_api.config import Settings

logger = logging.getLogger(__name__)


class Base(DeclarativeBase):
    """
    Base class for all SQLAlchemy ORM models.

    All table classes inherit from this to share one metadata object, which
    create_schema() uses to emit DDL.
    """
    pass


def _enable_sqlite_foreign_keys(dbapi_connection: Any, connection_record: Any) -> None:
    # SQLite ignores REFERENCES clauses unless this pragma is on.
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def create_engine(settings: Settings) -> AsyncEngine:
    """
    Create the async engine (and its connection pool) for DATABASE_URL.

    Args:
        settings: Resolved application settings

    Returns:
        AsyncEngine bound to settings.async_database_url
    """
    url = settings.async_database_url
    kwargs: Dict[str, Any] = {
        # SQL echo only in DEBUG mode
        "echo": settings.log_level == "DEBUG",
    }
    is_sqlite = url.startswith("sqlite")
    if not is_sqlite:
        kwargs.update(
            pool_size=settings.db_pool_size,
            max_overflow=settings.db_max_overflow,
            pool_pre_ping=settings.db_pool_pre_ping,
            pool_recycle=3600,
        )

    engine = create_async_engine(url, **kwargs)

    if is_sqlite:
        event.listen(engine.sync_engine, "connect", _enable_sqlite_foreign_keys)

    logger.info("Database engine created for %s", engine.url.render_as_string(hide_password=True))
    return engine


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """
    Session factory handed to relational repositories.

    expire_on_commit=False keeps ORM attributes readable after commit.
    """
    return async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )


async def create_schema(engine: AsyncEngine) -> None:
    """Create the users and orders tables if they do not exist."""
    # Register the table classes on Base.metadata before emitting DDL.
    from layered_api.models import order, user  # noqa: F401

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("Database schema ready (tables: %s)", ", ".join(sorted(Base.metadata.tables)))


async def dispose_engine(engine: AsyncEngine) -> None:
    """
    What:  Gracefully closes all connections in the pool.
    When:  Called during application shutdown (lifespan handler).
    """
    await engine.dispose()
