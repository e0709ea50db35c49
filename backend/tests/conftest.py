"""
Shared fixtures.

Settings are read at import time, so the environment is pointed at an
in-memory SQLite database before any application module is imported.
"""

import os

os.environ["APP_ENV"] = "test"
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///:memory:"
os.environ.setdefault("SECRET_KEY", "test-secret-key")
os.environ.setdefault("LOG_LEVEL", "WARNING")

from datetime import datetime, timezone

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from athenaeum.config.settings import settings
from athenaeum.shared.models import Base
from athenaeum.shared.utils.security import SecurityUtils


@pytest_asyncio.fixture
async def engine():
    """
    Fresh in-memory database per test.

    aiosqlite needs two tweaks to behave like PostgreSQL here: foreign keys
    are off by default, and its implicit BEGIN handling breaks SAVEPOINTs.
    """
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )

    @event.listens_for(engine.sync_engine, "connect")
    def _on_connect(dbapi_connection, connection_record):
        dbapi_connection.isolation_level = None
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    @event.listens_for(engine.sync_engine, "begin")
    def _on_begin(conn):
        conn.exec_driver_sql("BEGIN")

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine
    await engine.dispose()


@pytest_asyncio.fixture
async def session(engine):
    """Session configured like the application's AsyncSessionLocal."""
    factory = async_sessionmaker(
        bind=engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
    )
    async with factory() as session:
        yield session
        await session.rollback()


@pytest_asyncio.fixture
async def client(session):
    """HTTP client against the app, sharing the test session."""
    from athenaeum.api.dependencies.database import get_db
    from athenaeum.api.main import create_application

    app = create_application()

    async def override_get_db():
        yield session

    app.dependency_overrides[get_db] = override_get_db

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        yield client


@pytest.fixture
def admin_headers():
    """Authorization header for admin 1."""
    token = SecurityUtils.create_access_token({"admin_id": 1}, settings.SECRET_KEY)
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def published_at():
    return datetime(2024, 5, 1, tzinfo=timezone.utc)
