"""HTTP-level fixtures: the real app wired to the test database and identity fake."""

from collections.abc import AsyncGenerator

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession

from src.briefdesk.api.dependencies import get_db_session, get_identity
from src.briefdesk.core.db import dispose_engine, get_session
from src.briefdesk.core.identity import IdentityClient
from src.briefdesk.main import create_app
from tests.fakes import FakeIdentityProvider


def _build_client(engine: AsyncEngine, identity_client: IdentityClient) -> AsyncClient:
    app = create_app()

    async def _test_session() -> AsyncGenerator[AsyncSession]:
        async with get_session(engine) as session:
            yield session

    app.dependency_overrides[get_db_session] = _test_session
    app.dependency_overrides[get_identity] = lambda: identity_client
    return AsyncClient(transport=ASGITransport(app=app), base_url="http://test")


@pytest.fixture
async def client(engine: AsyncEngine, identity: IdentityClient) -> AsyncGenerator[AsyncClient]:
    async with _build_client(engine, identity) as http_client:
        yield http_client
    await dispose_engine()


@pytest.fixture
async def misconfigured_client(
    engine: AsyncEngine, identity_without_service_key: IdentityClient
) -> AsyncGenerator[AsyncClient]:
    """App whose identity client has no service-role key."""
    async with _build_client(engine, identity_without_service_key) as http_client:
        yield http_client


@pytest.fixture
def owner_headers(fake_identity: FakeIdentityProvider) -> dict[str, str]:
    """Bearer header for a signed-in owner."""
    owner = fake_identity.add_user("owner@example.com", "owner-password")
    return {"Authorization": f"Bearer {fake_identity.issue_token(owner['id'])}"}
