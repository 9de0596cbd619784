"""End-to-end briefing intake: owner creates a project, client logs in and submits."""

from uuid import uuid4

import pytest
from sqlalchemy import text

from tests.helpers import bearer, briefing_payload, create_client_with_project

pytestmark = pytest.mark.integration


async def _create_project(client, owner_headers) -> dict:
    created_client = await client.post(
        "/api/v1/clients",
        json={
            "full_name": "Mario Rossi",
            "tax_code": "RSSMRA80A01H501U",
            "email": "mario.rossi@example.com",
            "phone": "+39 333 1234567",
        },
        headers=owner_headers,
    )
    assert created_client.status_code == 201

    response = await client.post(
        "/api/v1/projects",
        json={"client_id": created_client.json()["id"], "name": "Company website"},
        headers=owner_headers,
    )
    assert response.status_code == 201
    return response.json()


async def test_full_intake_flow(client, owner_headers, fake_identity):
    created = await _create_project(client, owner_headers)
    project_id = created["project"]["id"]
    credentials = created["credentials"]
    assert created["credentials_error"] is None
    assert credentials["email"] == "mario.rossi@example.com"
    assert created["project"]["briefing_url"].endswith(f"/briefing/{project_id}")

    anonymous = await client.get(f"/api/v1/intake/{project_id}")
    assert anonymous.json() == {"state": "unauthenticated", "project": None}

    login = await client.post(
        f"/api/v1/intake/{project_id}/login",
        json={"email": credentials["email"], "password": credentials["password"]},
    )
    assert login.status_code == 200
    headers = {"Authorization": f"Bearer {login.json()['access_token']}"}

    state = await client.get(f"/api/v1/intake/{project_id}", headers=headers)
    assert state.json()["state"] == "temporary"
    assert state.json()["project"]["name"] == "Company website"

    submitted = await client.post(
        f"/api/v1/intake/{project_id}", json=briefing_payload(), headers=headers
    )
    assert submitted.status_code == 201
    assert submitted.json()["signed_out"] is True

    # Temporary identity and its stored credential are gone
    assert fake_identity.find_by_email("mario.rossi@example.com") is None
    stored = await client.get(f"/api/v1/projects/{project_id}/credentials", headers=owner_headers)
    assert stored.json() == {}

    project = await client.get(f"/api/v1/projects/{project_id}", headers=owner_headers)
    assert project.json()["briefing_completed"] is True
    assert project.json()["status"] == "in_progress"

    briefing = await client.get(f"/api/v1/briefings/by-project/{project_id}", headers=owner_headers)
    assert briefing.status_code == 200
    assert briefing.json()["client_id"] == submitted.json()["client_id"]

    # The form is closed from now on
    after = await client.get(f"/api/v1/intake/{project_id}")
    assert after.json()["state"] == "submitted"


async def test_intake_login_failure_is_generic(client, owner_headers):
    created = await _create_project(client, owner_headers)
    project_id = created["project"]["id"]

    response = await client.post(
        f"/api/v1/intake/{project_id}/login",
        json={"email": "mario.rossi@example.com", "password": "0000"},
    )

    assert response.status_code == 401
    assert response.json()["error"] == "Invalid credentials"


async def test_submit_without_session_is_401(client, db_session):
    _, project = await create_client_with_project(db_session)

    response = await client.post(f"/api/v1/intake/{project.id}", json=briefing_payload())

    assert response.status_code == 401


async def test_submit_twice_is_409(client, db_session, fake_identity):
    _, project = await create_client_with_project(db_session)
    owner = fake_identity.add_user("owner@example.com", "secret")
    headers = bearer(fake_identity, owner)

    first = await client.post(f"/api/v1/intake/{project.id}", json=briefing_payload(), headers=headers)
    second = await client.post(f"/api/v1/intake/{project.id}", json=briefing_payload(), headers=headers)

    assert first.status_code == 201
    assert first.json()["signed_out"] is False
    assert second.status_code == 409


async def test_submit_with_invalid_tax_code_is_422(client, db_session, fake_identity):
    _, project = await create_client_with_project(db_session)
    owner = fake_identity.add_user("owner@example.com", "secret")

    response = await client.post(
        f"/api/v1/intake/{project.id}",
        json=briefing_payload(tax_code="NOT-A-CODE"),
        headers=bearer(fake_identity, owner),
    )

    assert response.status_code == 422


async def test_submit_without_platforms_is_422(client, db_session, fake_identity):
    _, project = await create_client_with_project(db_session)
    owner = fake_identity.add_user("owner@example.com", "secret")

    response = await client.post(
        f"/api/v1/intake/{project.id}",
        json=briefing_payload(platforms=[]),
        headers=bearer(fake_identity, owner),
    )

    assert response.status_code == 422


async def test_temporary_identity_sees_other_project_as_unauthenticated(
    client, db_session, fake_identity
):
    _, project = await create_client_with_project(db_session)
    temp_user = fake_identity.add_temporary_user("c@example.com", "4821", str(uuid4()))

    response = await client.get(
        f"/api/v1/intake/{project.id}", headers=bearer(fake_identity, temp_user)
    )

    assert response.json()["state"] == "unauthenticated"


async def test_intake_unknown_project_is_404(client):
    response = await client.get(f"/api/v1/intake/{uuid4()}")
    assert response.status_code == 404


async def test_failed_submission_keeps_form_open_and_identity(
    client, db_session, engine, fake_identity, owner_headers
):
    _, project = await create_client_with_project(db_session)
    temp_user = fake_identity.add_temporary_user("c@example.com", "4821", str(project.id))
    async with engine.begin() as conn:
        await conn.execute(text("DROP TABLE briefings"))

    response = await client.post(
        f"/api/v1/intake/{project.id}",
        json=briefing_payload(),
        headers=bearer(fake_identity, temp_user),
    )

    assert response.status_code == 500
    assert response.json()["error"] == "Briefing submission failed, please retry"
    # Nothing was revoked, the visitor can retry
    assert temp_user["id"] in fake_identity.users
    stored = await client.get(f"/api/v1/projects/{project.id}", headers=owner_headers)
    assert stored.json()["briefing_completed"] is False
    state = await client.get(
        f"/api/v1/intake/{project.id}", headers=bearer(fake_identity, temp_user)
    )
    assert state.json()["state"] == "temporary"
