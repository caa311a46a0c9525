"""Integration test fixtures for database and HTTP client operations.

Every test gets its own in-memory SQLite store (foreign keys enforced) with the
schema created through the same path as ``GET /init-db``.
"""

from collections.abc import AsyncGenerator

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, create_async_engine
from sqlalchemy.pool import StaticPool

from src.codepad.core.config import Settings
from src.codepad.core.db import Database
from src.codepad.main import create_app
from src.codepad.repositories import FileRepository, ProjectRepository
from src.codepad.services import ArchiveService, FileService, ProjectService

TEST_TIMEOUT = 5.0


@pytest.fixture
async def engine() -> AsyncGenerator[AsyncEngine]:
    """Create a private in-memory engine; StaticPool keeps the single connection alive."""
    test_engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    yield test_engine
    await test_engine.dispose()


@pytest.fixture
async def database(engine: AsyncEngine) -> Database:
    """Store client with tables created."""
    db = Database(engine, timeout=TEST_TIMEOUT)
    await db.create_schema()
    return db


@pytest.fixture
async def db_session(database: Database) -> AsyncGenerator[AsyncSession]:
    """Provide an async session for direct database operations.

    Tests must explicitly call ``await session.commit()`` to persist rows.
    """
    async with database.session() as session:
        yield session


@pytest.fixture
def project_service(db_session: AsyncSession) -> ProjectService:
    return ProjectService(ProjectRepository(db_session), db_session, TEST_TIMEOUT)


@pytest.fixture
def file_service(db_session: AsyncSession) -> FileService:
    return FileService(
        FileRepository(db_session),
        ProjectRepository(db_session),
        db_session,
        TEST_TIMEOUT,
    )


@pytest.fixture
def archive_service(db_session: AsyncSession) -> ArchiveService:
    return ArchiveService(FileRepository(db_session), TEST_TIMEOUT, chunk_size=1024)


@pytest.fixture
async def client(settings: Settings, database: Database) -> AsyncGenerator[AsyncClient]:
    """HTTP client bound to an app that uses the test store."""
    app = create_app(settings=settings, database=database)
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as client:
        yield client
