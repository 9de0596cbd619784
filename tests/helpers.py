"""Test helper functions for common data creation patterns."""

from typing import Any

from sqlalchemy.ext.asyncio import AsyncSession

from src.briefdesk.models import Client, Project
from tests.factories import ClientFactory, ProjectFactory
from tests.fakes import FakeIdentityProvider


async def create_client_with_project(
    session: AsyncSession, **project_kwargs: Any
) -> tuple[Client, Project]:
    """Persist a client and one project linked to it.

    Returns:
        Tuple of (client, project)
    """
    client = ClientFactory.build()
    session.add(client)
    await session.flush()

    project = ProjectFactory.build(client_id=client.id, **project_kwargs)
    session.add(project)
    await session.commit()
    return client, project


def briefing_payload(**overrides: Any) -> dict[str, Any]:
    """A complete, valid intake form submission."""
    payload: dict[str, Any] = {
        "full_name": "Mario Rossi",
        "company_name": "Rossi Srl",
        "tax_code": "RSSMRA80A01H501U",
        "email": "mario.rossi@example.com",
        "phone": "+39 333 1234567",
        "role": "CEO",
        "project_goal": "Sell online",
        "already_existing": "no",
        "project_type": "ecommerce",
        "scope": "new",
        "required_features": "catalog, checkout",
        "main_features": "catalog",
        "existing_design": "none",
        "platforms": ["web"],
        "support_type": "monthly",
        "payment_method": "bank_transfer",
    }
    payload.update(overrides)
    return payload


def bearer(fake_identity: FakeIdentityProvider, user: dict[str, Any]) -> dict[str, str]:
    """Authorization header for a fresh session of ``user``."""
    return {"Authorization": f"Bearer {fake_identity.issue_token(user['id'])}"}
