"""
Chirpy Backend — Test Configuration (conftest.py)
==================================================

What:  Shared pytest fixtures for the entire test suite.
How:   pytest auto-discovers conftest.py and makes fixtures available to all tests.

Fixture Hierarchy:
    Function-scoped (created fresh for each test):
    ├── db_engine:        In-memory SQLite engine (aiosqlite) with the users table
    ├── session_factory:  async_sessionmaker bound to db_engine
    ├── db_session:       One AsyncSession for repository tests
    ├── mock_db_session:  AsyncMock session for failure injection
    ├── static_root:      Temporary FILEPATH_ROOT with index.html and assets/
    ├── build_app:        Factory creating an isolated app for a given PLATFORM
    ├── test_client:      HTTPX AsyncClient against a PLATFORM=dev app
    └── prod_client:      HTTPX AsyncClient against a PLATFORM=prod app
"""

import os

# Settings are read at import time; point them at throwaway values first
os.environ["DB_URL"] = "sqlite+aiosqlite://"
os.environ["PLATFORM"] = "prod"
os.environ["LOG_LEVEL"] = "WARNING"

from unittest.mock import AsyncMock, MagicMock  # noqa: E402

import pytest  # noqa: E402
import pytest_asyncio  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402
from sqlalchemy.ext.asyncio import async_sessionmaker, create_async_engine  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402

from chirpy.config import Settings  # noqa: E402
from chirpy.database import Base, get_db_session  # noqa: E402
from chirpy.main import create_app  # noqa: E402
from chirpy.models.user import User  # noqa: E402,F401

INDEX_HTML = "<html><body><h1>Welcome to Chirpy</h1></body></html>"


# ══════════════════════════════════════════════════════════════════════════
# Database Fixtures
# ══════════════════════════════════════════════════════════════════════════

@pytest_asyncio.fixture
async def db_engine():
    """
    In-memory SQLite engine with the users table created.

    StaticPool keeps a single connection so every session sees the same
    in-memory database.
    """
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
    return async_sessionmaker(db_engine, expire_on_commit=False)


@pytest_asyncio.fixture
async def db_session(session_factory):
    async with session_factory() as session:
        yield session


@pytest.fixture
def mock_db_session():
    """
    Provides a mock async database session.

    Usage:
        mock_db_session.commit.side_effect = OperationalError("INSERT", {}, Exception())
    """
    session = AsyncMock()
    session.execute = AsyncMock()
    session.commit = AsyncMock()
    session.rollback = AsyncMock()
    session.close = AsyncMock()
    session.add = MagicMock()
    return session


# ══════════════════════════════════════════════════════════════════════════
# Application Fixtures
# ══════════════════════════════════════════════════════════════════════════

@pytest.fixture
def static_root(tmp_path):
    """FILEPATH_ROOT with an index page and a logo asset."""
    (tmp_path / "index.html").write_text(INDEX_HTML)
    assets = tmp_path / "assets"
    assets.mkdir()
    (assets / "logo.png").write_bytes(b"\x89PNG\r\n\x1a\n")
    return str(tmp_path)


@pytest.fixture
def build_app(static_root, session_factory):
    """
    Factory for isolated apps.

    Each app gets its own ApiContext (hit counter starts at zero) and its
    database dependency is routed to the in-memory SQLite engine.
    """
    def _build(platform: str = "dev"):
        app = create_app(Settings(platform=platform, filepath_root=static_root))

        async def override_session():
            async with session_factory() as session:
                yield session

        app.dependency_overrides[get_db_session] = override_session
        return app

    return _build


@pytest.fixture
def dev_app(build_app):
    return build_app("dev")


@pytest.fixture
def prod_app(build_app):
    return build_app("prod")


@pytest_asyncio.fixture
async def test_client(dev_app):
    """
    Provides an async HTTP test client for a PLATFORM=dev app.

    Usage:
        async def test_health(test_client):
            response = await test_client.get("/api/healthz")
            assert response.status_code == 200
    """
    transport = ASGITransport(app=dev_app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


@pytest_asyncio.fixture
async def prod_client(prod_app):
    transport = ASGITransport(app=prod_app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
