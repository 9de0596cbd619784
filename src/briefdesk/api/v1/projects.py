"""Project management endpoints, including briefing credentials."""

from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, HTTPException, Query, status

from src.briefdesk.api.dependencies import OwnerUser, ProjectServiceDep
from src.briefdesk.models import Project, ProjectStatus
from src.briefdesk.schemas.credential import IssuedCredential, StoredCredentialResponse
from src.briefdesk.schemas.pagination import PaginatedResponse
from src.briefdesk.schemas.project import (
    ProjectCreate,
    ProjectCreateResponse,
    ProjectRead,
    ProjectUpdate,
)

router = APIRouter(prefix="/projects", tags=["projects"])


async def _get_or_404(service: ProjectServiceDep, project_id: UUID) -> Project:
    project = await service.get_project(project_id)
    if project is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Project not found")
    return project


@router.get("", response_model=PaginatedResponse[ProjectRead])
async def list_projects(
    _owner: OwnerUser,
    service: ProjectServiceDep,
    status_filter: Annotated[ProjectStatus | None, Query(alias="status")] = None,
    client_id: UUID | None = None,
    cursor: str | None = None,
    limit: Annotated[int, Query(ge=1, le=100)] = 50,
) -> PaginatedResponse[ProjectRead]:
    """List projects newest first."""
    items, next_cursor, has_more = await service.list_projects(
        status=status_filter, client_id=client_id, cursor=cursor, limit=limit
    )
    return PaginatedResponse(
        items=[ProjectRead.model_validate(p) for p in items],
        next_cursor=next_cursor,
        has_more=has_more,
    )


@router.post(
    "",
    response_model=ProjectCreateResponse,
    status_code=status.HTTP_201_CREATED,
    responses={
        201: {
            "description": "Project created. Credentials are issued to the client's email.",
            "content": {
                "application/json": {
                    "example": {
                        "project": {
                            "id": "550e8400-e29b-41d4-a716-446655440000",
                            "name": "Company website",
                            "status": "awaiting_briefing",
                            "briefing_url": "http://localhost:3000/briefing/550e8400-e29b-41d4-a716-446655440000",
                        },
                        "credentials": {
                            "user_id": "9b2f3c1e-8d1a-4b7e-9f0c-2a6d5e4f3b21",
                            "email": "client@example.com",
                            "password": "4821",
                            "temp_saved": True,
                            "expires_at": "2024-01-16T10:30:00",
                        },
                        "credentials_error": None,
                    }
                }
            },
        },
        404: {"description": "Client not found"},
    },
)
async def create_project(
    data: ProjectCreate, _owner: OwnerUser, service: ProjectServiceDep
) -> ProjectCreateResponse:
    try:
        project, credentials, error = await service.create_project(data)
    except LookupError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e
    return ProjectCreateResponse(
        project=ProjectRead.model_validate(project),
        credentials=credentials,
        credentials_error=error,
    )


@router.get("/{project_id}", response_model=ProjectRead, responses={404: {"description": "Not found"}})
async def get_project(project_id: UUID, _owner: OwnerUser, service: ProjectServiceDep) -> ProjectRead:
    return ProjectRead.model_validate(await _get_or_404(service, project_id))


@router.patch("/{project_id}", response_model=ProjectRead, responses={404: {"description": "Not found"}})
async def update_project(
    project_id: UUID, data: ProjectUpdate, _owner: OwnerUser, service: ProjectServiceDep
) -> ProjectRead:
    project = await _get_or_404(service, project_id)
    try:
        project = await service.update_project(project, data)
    except LookupError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e
    return ProjectRead.model_validate(project)


@router.delete(
    "/{project_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    responses={404: {"description": "Not found"}},
)
async def delete_project(project_id: UUID, _owner: OwnerUser, service: ProjectServiceDep) -> None:
    """Delete a project. Its temporary credentials are revoked first."""
    project = await _get_or_404(service, project_id)
    try:
        await service.delete_project(project)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e)) from e


@router.get(
    "/{project_id}/credentials",
    response_model=StoredCredentialResponse,
    response_model_exclude_none=True,
)
async def get_credentials(
    project_id: UUID, _owner: OwnerUser, service: ProjectServiceDep
) -> StoredCredentialResponse:
    """Stored briefing credential for the project, or an empty object."""
    project = await _get_or_404(service, project_id)
    credential = await service.get_credentials(project)
    if credential is None:
        return StoredCredentialResponse()
    return StoredCredentialResponse(
        email=credential.email,
        password=credential.password,
        expires_at=credential.expires_at,
    )


@router.post("/{project_id}/credentials", response_model=IssuedCredential)
async def regenerate_credentials(
    project_id: UUID, _owner: OwnerUser, service: ProjectServiceDep
) -> IssuedCredential:
    """Revoke the project's temporary credentials and issue a new password."""
    project = await _get_or_404(service, project_id)
    try:
        return await service.regenerate_credentials(project)
    except LookupError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e
