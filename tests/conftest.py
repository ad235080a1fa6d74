"""Pytest configuration and fixtures."""

import os

# Settings are read at import time, so configure the test environment first
os.environ.setdefault("ENV", "test")
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///:memory:"
os.environ["RATE_LIMIT_ENABLED"] = "false"
os.environ["INIT_DB_ON_STARTUP"] = "true"

from collections.abc import AsyncGenerator, Generator  # noqa: E402
from uuid import uuid4  # noqa: E402

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy import StaticPool  # noqa: E402
from sqlalchemy.ext.asyncio import (  # noqa: E402
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from mindscore.core.security import create_access_token  # noqa: E402
from mindscore.db.base import Base  # noqa: E402
from mindscore.main import app  # noqa: E402
from mindscore.models.assessment_record import AssessmentRecord  # noqa: E402, F401

TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


@pytest.fixture(scope="session")
def client() -> Generator[TestClient, None, None]:
    """FastAPI test client; the app lifespan creates the tables."""
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def user_id() -> str:
    """A fresh user id so stored history never leaks between tests."""
    return f"user-{uuid4()}"


@pytest.fixture
def auth_headers(user_id: str) -> dict[str, str]:
    """Bearer token headers for ``user_id``."""
    token = create_access_token(subject=user_id)
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def other_auth_headers() -> dict[str, str]:
    """Bearer token headers for a second user."""
    token = create_access_token(subject=f"user-{uuid4()}")
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture(scope="function")
async def async_engine():
    """Create async test database engine."""
    engine = create_async_engine(
        TEST_DATABASE_URL,
        echo=False,
        poolclass=StaticPool,
    )

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)

    await engine.dispose()


@pytest.fixture(scope="function")
async def async_session(async_engine) -> AsyncGenerator[AsyncSession, None]:
    """Create async database session for tests."""
    async_session_maker = async_sessionmaker(
        async_engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
    )

    async with async_session_maker() as session:
        yield session
