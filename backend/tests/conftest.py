"""
Bookmarker — Test Configuration (conftest.py)
=============================================

What:  Shared pytest fixtures for the entire test suite.
How:   pytest auto-discovers conftest.py and makes fixtures available to all tests.

Fixture Hierarchy:
    Function-scoped (created fresh for each test):
    ├── mock_db_session: Mock database session (no real DB needed)
    ├── sample_user_data: Field values for a stored user row
    ├── db_engine: In-memory SQLite engine with the schema created
    ├── test_client: HTTPX AsyncClient against the user API (in-memory DB)
    ├── failing_client: HTTPX AsyncClient whose database is unavailable
    ├── commit_failing_client: HTTPX AsyncClient whose commits fail
    └── ui_client: HTTPX AsyncClient against the UI shell
"""

import os

# Override settings for testing BEFORE any application imports
# Why: settings are read once, when bookmarker.config is first imported
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///:memory:"
os.environ["LOG_LEVEL"] = "WARNING"
os.environ["USER_PREFIX"] = "/user"

from datetime import datetime, timezone
from unittest.mock import AsyncMock, MagicMock

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport
from sqlalchemy.exc import OperationalError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from bookmarker.database import Base, get_db_session
from bookmarker.models.user import User  # noqa: F401


def storage_unavailable(*args, **kwargs):
    """Side effect mimicking a dropped database connection."""
    raise OperationalError("SELECT 1", {}, ConnectionRefusedError("database is unavailable"))


@pytest.fixture
def mock_db_session():
    """
    Provides a mock async database session.

    Usage:
        async def test_get_user(mock_db_session):
            mock_db_session.execute.return_value.scalars.return_value.first.return_value = user
            result = await user_service.get_user(mock_db_session, "u1")
    """
    session = AsyncMock()
    session.execute = AsyncMock()
    session.flush = AsyncMock()
    session.commit = AsyncMock()
    session.rollback = AsyncMock()
    session.close = AsyncMock()
    session.add = MagicMock()
    return session


@pytest.fixture
def sample_user_data():
    """Field values matching the User model."""
    return {
        "pk": 1,
        "id": "u1",
        "attributes": {"name": "Ann", "email": "ann@example.com"},
        "created_at": datetime.now(timezone.utc),
    }


@pytest_asyncio.fixture
async def db_engine():
    """In-memory SQLite shared across connections, with all tables created."""
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(db_engine):
    return async_sessionmaker(db_engine, class_=AsyncSession, expire_on_commit=False)


@pytest_asyncio.fixture
async def test_client(session_factory):
    """
    HTTPX AsyncClient wired to a fresh user API backed by the in-memory database.

    Usage:
        async def test_list(test_client):
            response = await test_client.get("/user/")
            assert response.status_code == 200
    """
    from bookmarker.main import create_app

    app = create_app()

    async def override_session():
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    app.dependency_overrides[get_db_session] = override_session
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


@pytest_asyncio.fixture
async def failing_client(mock_db_session):
    """HTTPX AsyncClient against a user API whose every storage call fails."""
    from bookmarker.main import create_app

    mock_db_session.execute.side_effect = storage_unavailable
    mock_db_session.flush.side_effect = storage_unavailable

    app = create_app()

    async def override_session():
        try:
            yield mock_db_session
        except Exception:
            await mock_db_session.rollback()
            raise

    app.dependency_overrides[get_db_session] = override_session
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


@pytest_asyncio.fixture
async def commit_failing_client(mock_db_session):
    """HTTPX AsyncClient against a user API whose database accepts writes but cannot commit."""
    from bookmarker.main import create_app

    mock_db_session.commit.side_effect = storage_unavailable

    app = create_app()

    async def override_session():
        try:
            yield mock_db_session
        except Exception:
            await mock_db_session.rollback()
            raise

    app.dependency_overrides[get_db_session] = override_session
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client

@pytest_asyncio.fixture
async def ui_client():
    """HTTPX AsyncClient against the UI shell with the default route table."""
    from bookmarker.ui.shell import create_ui_app

    transport = ASGITransport(app=create_ui_app())
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
