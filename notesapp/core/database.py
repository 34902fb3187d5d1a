"""Async database engine and session factory.

The store handle is a ``Database`` built once in the application lifespan,
validated against the server before the first request is served, and kept on
``app.state.db`` for the life of the process.
"""

import asyncio
import logging
from collections.abc import AsyncGenerator

from fastapi import Request
from sqlalchemy import event, text
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel import SQLModel

from notesapp.core.config import Settings, get_settings

logger = logging.getLogger(__name__)


def use_immediate_transactions(engine: AsyncEngine) -> None:
    """Make every SQLite transaction take the write lock at BEGIN.

    pysqlite defers BEGIN until the first write, so a read-then-insert
    (quota check) would run its reads unlocked. SQLite ignores FOR UPDATE;
    this is what serializes concurrent creators there instead.
    """

    @event.listens_for(engine.sync_engine, "connect")
    def _disable_driver_begin(dbapi_connection, _record) -> None:
        dbapi_connection.isolation_level = None

    @event.listens_for(engine.sync_engine, "begin")
    def _begin_immediate(conn) -> None:
        conn.exec_driver_sql("BEGIN IMMEDIATE")


class Database:
    """Owns the engine and hands out sessions."""

    def __init__(self, engine: AsyncEngine) -> None:
        self.engine = engine
        self.session_factory = sessionmaker(
            engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )

    @classmethod
    def from_settings(cls, settings: Settings) -> "Database":
        options: dict = {"echo": False, "pool_pre_ping": True}
        if settings.database_url.startswith("postgresql"):
            options.update(pool_size=20, max_overflow=10, pool_timeout=settings.store_timeout_seconds)
        engine = create_async_engine(settings.database_url, **options)
        if engine.dialect.name == "sqlite":
            use_immediate_transactions(engine)
        return cls(engine)

    async def ping(self) -> None:
        """Run ``SELECT 1``. Raises on failure or timeout."""
        async with asyncio.timeout(get_settings().store_timeout_seconds):
            async with self.engine.connect() as conn:
                await conn.execute(text("SELECT 1"))

    async def create_all(self) -> None:
        """Create all tables. Use Alembic migrations in production."""
        async with self.engine.begin() as conn:
            await conn.run_sync(SQLModel.metadata.create_all)

    async def dispose(self) -> None:
        await self.engine.dispose()


async def connect(settings: Settings) -> Database:
    """Build the store handle and fail fast if the server is unreachable."""
    db = Database.from_settings(settings)
    try:
        await db.ping()
    except Exception:
        await db.dispose()
        logger.exception("Database is unreachable at startup")
        raise
    logger.info("Database connection verified")
    return db


def get_database(request: Request) -> Database:
    return request.app.state.db


async def get_session(request: Request) -> AsyncGenerator[AsyncSession, None]:
    """FastAPI dependency that yields an async DB session."""
    async with get_database(request).session_factory() as session:
        yield session
