"""Database store client: engine ownership, sessions and schema creation."""

import ssl
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from typing import Any

from sqlalchemy import event, text
from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlmodel import SQLModel

from src.codepad.core.config import Settings
from src.codepad.core.db.session import store_timeout
from src.codepad.core.logging import get_logger

logger = get_logger(__name__)


def _get_connect_args(settings: Settings) -> dict[str, Any]:
    """Get connection arguments including SSL configuration (asyncpg only)."""
    connect_args: dict[str, Any] = {
        "command_timeout": settings.database_timeout_seconds,
    }

    ssl_mode = settings.effective_ssl_mode
    if ssl_mode != "disable":
        ssl_context = ssl.create_default_context()
        if ssl_mode == "prefer" or ssl_mode == "require":
            ssl_context.check_hostname = False
            ssl_context.verify_mode = ssl.CERT_NONE
        elif ssl_mode in ("verify-ca", "verify-full"):
            ssl_context.check_hostname = ssl_mode == "verify-full"
            ssl_context.verify_mode = ssl.CERT_REQUIRED
        connect_args["ssl"] = ssl_context

    return connect_args


def _enable_sqlite_foreign_keys(dbapi_connection: Any, connection_record: Any) -> None:
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def create_engine_from_settings(settings: Settings) -> AsyncEngine:
    """Build an async engine for the configured database URL."""
    url = make_url(settings.database_url)
    if url.get_backend_name() == "sqlite":
        engine = create_async_engine(url)
    else:
        engine = create_async_engine(
            url,
            pool_size=settings.database_pool_size,
            max_overflow=settings.database_max_overflow,
            pool_pre_ping=True,
            connect_args=_get_connect_args(settings),
        )
    return engine


class Database:
    """Owned handle on the relational store.

    One instance is built per application and handed to request handlers through
    dependencies; nothing else in the process holds an engine.
    """

    def __init__(self, engine: AsyncEngine, timeout: float = 10.0):
        self.engine = engine
        self.timeout = timeout
        if engine.dialect.name == "sqlite":
            event.listen(engine.sync_engine, "connect", _enable_sqlite_foreign_keys)
        self._session_factory = async_sessionmaker(
            bind=engine,
            class_=AsyncSession,
            expire_on_commit=False,
            autoflush=False,
        )

    @classmethod
    def from_settings(cls, settings: Settings) -> "Database":
        return cls(create_engine_from_settings(settings), timeout=settings.database_timeout_seconds)

    @asynccontextmanager
    async def session(self) -> AsyncGenerator[AsyncSession]:
        """Open a session. Callers own commit/rollback."""
        async with self._session_factory() as session:
            yield session

    async def create_schema(self) -> None:
        """Create missing tables. Safe to call repeatedly."""
        # Register table models on the shared metadata
        from src.codepad import models  # noqa: F401

        async with store_timeout(self.timeout):
            async with self.engine.begin() as connection:
                await connection.run_sync(SQLModel.metadata.create_all)
        logger.info("Database schema ensured", tables=sorted(SQLModel.metadata.tables))

    async def server_time(self) -> Any:
        """Return the store's current timestamp (connectivity check)."""
        async with store_timeout(self.timeout):
            async with self.engine.connect() as connection:
                return await connection.scalar(text("SELECT CURRENT_TIMESTAMP"))

    async def dispose(self) -> None:
        """Dispose the engine. Call during shutdown."""
        await self.engine.dispose()
