"""Temporary briefing credential endpoints.

Internal endpoints used by the owner dashboard. They speak camelCase JSON and
report failures as ``{"error": ...}``.
"""

from typing import Annotated

from fastapi import APIRouter, HTTPException, Query, status

from src.briefdesk.api.dependencies import AuthenticatedUser, CredentialServiceDep, OwnerUser
from src.briefdesk.schemas.credential import (
    CreateTempUserRequest,
    CreateTempUserResponse,
    DeleteTempByProjectRequest,
    DeleteTempByProjectResponse,
    DeleteTempUserRequest,
    DeleteTempUserResponse,
    StoredCredentialResponse,
)

router = APIRouter(prefix="/api", tags=["temp-users"])

_ERRORS = {
    400: {"description": "Missing or malformed field"},
    401: {"description": "Not authenticated"},
    500: {"description": "Identity provider failure or missing configuration"},
}


@router.post(
    "/briefing/create-temp-user",
    response_model=CreateTempUserResponse,
    responses={
        200: {
            "description": "Temporary user created",
            "content": {
                "application/json": {
                    "example": {"userId": "9b2f3c1e-8d1a-4b7e-9f0c-2a6d5e4f3b21", "tempSaved": True}
                }
            },
        },
        **_ERRORS,
    },
)
async def create_temp_user(
    data: CreateTempUserRequest, service: CredentialServiceDep, _owner: OwnerUser
) -> CreateTempUserResponse:
    """Create a temporary identity scoped to one project.

    ``tempSaved`` is false when the identity exists but its credential could
    not be stored for later display.
    """
    result = await service.issue(data.project_id, data.email, data.password)
    return CreateTempUserResponse(user_id=result.user_id, temp_saved=result.temp_saved)


@router.post(
    "/briefing/delete-temp-by-project",
    response_model=DeleteTempByProjectResponse,
    response_model_exclude_none=True,
    responses={
        200: {
            "description": "Revocation attempted",
            "content": {
                "application/json": {
                    "examples": {
                        "stored": {"value": {"ok": True, "deletedBy": "temp_users"}},
                        "email": {"value": {"ok": True, "deletedBy": "email"}},
                        "none": {"value": {"ok": True, "info": "no temporary user found"}},
                    }
                }
            },
        },
        **_ERRORS,
    },
)
async def delete_temp_by_project(
    data: DeleteTempByProjectRequest, service: CredentialServiceDep, _owner: OwnerUser
) -> DeleteTempByProjectResponse:
    """Revoke every temporary identity issued for a project."""
    result = await service.revoke_by_project(data.project_id, data.email)
    return DeleteTempByProjectResponse(
        ok=result.ok, deleted_by=result.deleted_by, info=result.info
    )


@router.post(
    "/briefing/delete-temp-user",
    response_model=DeleteTempUserResponse,
    responses={
        200: {"description": "Temporary user deleted"},
        403: {"description": "A temporary identity may only delete itself"},
        **_ERRORS,
    },
)
async def delete_temp_user(
    data: DeleteTempUserRequest, service: CredentialServiceDep, auth: AuthenticatedUser
) -> DeleteTempUserResponse:
    """Delete one temporary identity by id.

    The owner may delete any; a temporary identity only itself.
    """
    if auth.is_temporary and data.user_id and data.user_id != auth.user.id:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Not allowed to delete this user",
        )
    result = await service.revoke_by_user_id(data.user_id)
    return DeleteTempUserResponse(ok=result.ok)


@router.get(
    "/temp-users/by-project",
    response_model=StoredCredentialResponse,
    response_model_exclude_none=True,
    responses={
        200: {
            "description": "Latest stored credential, or an empty object",
            "content": {
                "application/json": {
                    "example": {
                        "email": "client@example.com",
                        "password": "4821",
                        "expiresAt": "2024-01-16T10:30:00",
                    }
                }
            },
        },
        **_ERRORS,
    },
)
async def get_temp_user_by_project(
    service: CredentialServiceDep,
    _owner: OwnerUser,
    project_id: Annotated[str | None, Query(alias="projectId")] = None,
) -> StoredCredentialResponse:
    """Latest stored credential for a project."""
    credential = await service.get_by_project(project_id)
    if credential is None:
        return StoredCredentialResponse()
    return StoredCredentialResponse(
        email=credential.email,
        password=credential.password,
        expires_at=credential.expires_at,
    )
