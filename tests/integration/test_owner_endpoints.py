"""HTTP tests for owner-side clients, projects, briefings and dashboard."""

from uuid import uuid4

import pytest

from tests.helpers import bearer, create_client_with_project

pytestmark = pytest.mark.integration

CLIENT = {
    "full_name": "Mario Rossi",
    "tax_code": "rssmra80a01h501u",
    "email": "mario.rossi@example.com",
    "phone": "+39 333 1234567",
}


async def test_owner_login_and_me(client, fake_identity):
    fake_identity.add_user("owner@example.com", "owner-password")

    login = await client.post(
        "/api/v1/auth/login", json={"email": "owner@example.com", "password": "owner-password"}
    )
    assert login.status_code == 200
    headers = {"Authorization": f"Bearer {login.json()['access_token']}"}

    me = await client.get("/api/v1/auth/me", headers=headers)
    assert me.json()["email"] == "owner@example.com"
    assert me.json()["is_temporary"] is False

    logout = await client.post("/api/v1/auth/logout", headers=headers)
    assert logout.status_code == 204
    assert (await client.get("/api/v1/auth/me", headers=headers)).status_code == 401


async def test_owner_login_refuses_temporary_identity(client, fake_identity):
    fake_identity.add_temporary_user("c@example.com", "4821", str(uuid4()))

    response = await client.post(
        "/api/v1/auth/login", json={"email": "c@example.com", "password": "4821"}
    )

    assert response.status_code == 401


async def test_create_client_normalizes_tax_code(client, owner_headers):
    response = await client.post("/api/v1/clients", json=CLIENT, headers=owner_headers)

    assert response.status_code == 201
    assert response.json()["tax_code"] == "RSSMRA80A01H501U"


async def test_duplicate_client_is_409(client, owner_headers):
    await client.post("/api/v1/clients", json=CLIENT, headers=owner_headers)
    response = await client.post(
        "/api/v1/clients", json={**CLIENT, "tax_code": "12345678901"}, headers=owner_headers
    )

    assert response.status_code == 409


async def test_client_with_projects_cannot_be_deleted(client, owner_headers, db_session):
    owner_client, _ = await create_client_with_project(db_session)

    response = await client.delete(f"/api/v1/clients/{owner_client.id}", headers=owner_headers)

    assert response.status_code == 409
    assert (
        await client.get(f"/api/v1/clients/{owner_client.id}", headers=owner_headers)
    ).status_code == 200


async def test_client_search(client, owner_headers):
    await client.post("/api/v1/clients", json=CLIENT, headers=owner_headers)

    hit = await client.get("/api/v1/clients", params={"search": "ross"}, headers=owner_headers)
    miss = await client.get("/api/v1/clients", params={"search": "bianchi"}, headers=owner_headers)

    assert [c["email"] for c in hit.json()] == ["mario.rossi@example.com"]
    assert miss.json() == []


async def test_project_for_unknown_client_is_404(client, owner_headers):
    response = await client.post(
        "/api/v1/projects", json={"client_id": str(uuid4()), "name": "Site"}, headers=owner_headers
    )
    assert response.status_code == 404


async def test_project_created_even_when_credentials_fail(client, owner_headers, fake_identity):
    created_client = await client.post("/api/v1/clients", json=CLIENT, headers=owner_headers)
    fake_identity.fail("POST", "/admin/users")

    response = await client.post(
        "/api/v1/projects",
        json={"client_id": created_client.json()["id"], "name": "Site"},
        headers=owner_headers,
    )

    assert response.status_code == 201
    assert response.json()["credentials"] is None
    assert response.json()["credentials_error"]


async def test_project_without_credentials(client, owner_headers, fake_identity):
    created_client = await client.post("/api/v1/clients", json=CLIENT, headers=owner_headers)

    response = await client.post(
        "/api/v1/projects",
        json={
            "client_id": created_client.json()["id"],
            "name": "Site",
            "issue_credentials": False,
        },
        headers=owner_headers,
    )

    assert response.json()["credentials"] is None
    assert fake_identity.find_by_email(CLIENT["email"]) is None


async def test_regenerate_credentials_replaces_identity(client, owner_headers, fake_identity):
    created_client = await client.post("/api/v1/clients", json=CLIENT, headers=owner_headers)
    created = await client.post(
        "/api/v1/projects",
        json={"client_id": created_client.json()["id"], "name": "Site"},
        headers=owner_headers,
    )
    project_id = created.json()["project"]["id"]
    old_user_id = created.json()["credentials"]["user_id"]

    response = await client.post(f"/api/v1/projects/{project_id}/credentials", headers=owner_headers)

    assert response.status_code == 200
    new = response.json()
    assert new["user_id"] != old_user_id
    assert old_user_id not in fake_identity.users
    stored = await client.get(f"/api/v1/projects/{project_id}/credentials", headers=owner_headers)
    assert stored.json()["password"] == new["password"]


async def test_delete_project_revokes_credentials(client, owner_headers, fake_identity):
    created_client = await client.post("/api/v1/clients", json=CLIENT, headers=owner_headers)
    created = await client.post(
        "/api/v1/projects",
        json={"client_id": created_client.json()["id"], "name": "Site"},
        headers=owner_headers,
    )
    project_id = created.json()["project"]["id"]
    user_id = created.json()["credentials"]["user_id"]

    response = await client.delete(f"/api/v1/projects/{project_id}", headers=owner_headers)

    assert response.status_code == 204
    assert user_id not in fake_identity.users
    assert (
        await client.get(f"/api/v1/projects/{project_id}", headers=owner_headers)
    ).status_code == 404


async def test_delete_project_survives_revocation_failure(client, owner_headers, fake_identity):
    created_client = await client.post("/api/v1/clients", json=CLIENT, headers=owner_headers)
    created = await client.post(
        "/api/v1/projects",
        json={"client_id": created_client.json()["id"], "name": "Site"},
        headers=owner_headers,
    )
    project_id = created.json()["project"]["id"]
    fake_identity.fail("DELETE", f"/admin/users/{created.json()['credentials']['user_id']}")

    response = await client.delete(f"/api/v1/projects/{project_id}", headers=owner_headers)

    assert response.status_code == 204


async def test_list_projects_filters_by_status(client, owner_headers, db_session):
    await create_client_with_project(db_session)
    await create_client_with_project(db_session, status="completed")

    response = await client.get(
        "/api/v1/projects", params={"status": "completed"}, headers=owner_headers
    )

    assert response.status_code == 200
    items = response.json()["items"]
    assert [p["status"] for p in items] == ["completed"]
    assert response.json()["has_more"] is False


async def test_dashboard_stats(client, owner_headers, db_session):
    await create_client_with_project(db_session)
    await create_client_with_project(db_session)
    await create_client_with_project(db_session, status="paused")

    response = await client.get("/api/v1/dashboard/stats", headers=owner_headers)

    assert response.json() == {
        "total_projects": 3,
        "awaiting_briefing": 2,
        "in_progress": 0,
        "paused": 1,
        "completed": 0,
        "total_clients": 3,
    }


async def test_owner_endpoints_refuse_temporary_identity(client, fake_identity):
    temp_user = fake_identity.add_temporary_user("c@example.com", "4821", str(uuid4()))

    response = await client.get("/api/v1/projects", headers=bearer(fake_identity, temp_user))

    assert response.status_code == 403


async def test_owner_endpoints_require_session(client):
    assert (await client.get("/api/v1/clients")).status_code == 401
