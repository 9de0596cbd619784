"""Root test fixtures shared across all test types.

Tests run against an in-memory SQLite database and an in-memory identity
provider, so no external services are needed.
"""

import os

# Set APP_ENV to testing before any app imports to disable rate limiting
os.environ.setdefault("APP_ENV", "testing")
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("IDENTITY_URL", "http://identity.test")
os.environ.setdefault("IDENTITY_ANON_KEY", "test-anon-key")
os.environ.setdefault("IDENTITY_SERVICE_ROLE_KEY", "test-service-role-key")

# ruff: noqa: E402 - Imports must be after env var setup
from collections.abc import AsyncGenerator

import httpx
import pytest
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, create_async_engine
from sqlalchemy.pool import StaticPool
from sqlmodel import SQLModel

from src.briefdesk.core.config import get_settings
from src.briefdesk.core.db import get_session
from src.briefdesk.core.identity import IdentityClient
from src.briefdesk.models import Briefing, Client, Project, TempCredential  # noqa: F401
from tests.fakes import ANON_KEY, BASE_URL, SERVICE_KEY, FakeIdentityProvider

# Clear settings cache to ensure test environment variables are picked up
get_settings.cache_clear()


# --- Database ---


@pytest.fixture
async def engine() -> AsyncGenerator[AsyncEngine]:
    """Fresh in-memory database per test, schema created from model metadata."""
    test_engine = create_async_engine(
        "sqlite+aiosqlite://",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    async with test_engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)
    yield test_engine
    await test_engine.dispose()


@pytest.fixture
async def db_session(engine: AsyncEngine) -> AsyncGenerator[AsyncSession]:
    async with get_session(engine) as session:
        yield session


# --- Identity provider ---


@pytest.fixture
def fake_identity() -> FakeIdentityProvider:
    return FakeIdentityProvider()


def _identity_client(fake: FakeIdentityProvider, service_key: str | None) -> IdentityClient:
    http = httpx.AsyncClient(transport=fake.transport())
    return IdentityClient(BASE_URL, ANON_KEY, service_key, http)


@pytest.fixture
async def identity(fake_identity: FakeIdentityProvider) -> AsyncGenerator[IdentityClient]:
    client = _identity_client(fake_identity, SERVICE_KEY)
    yield client
    await client.aclose()


@pytest.fixture
async def identity_without_service_key(
    fake_identity: FakeIdentityProvider,
) -> AsyncGenerator[IdentityClient]:
    """Identity client missing the service-role key (misconfigured backend)."""
    client = _identity_client(fake_identity, None)
    yield client
    await client.aclose()
