"""Client management endpoints."""

from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, HTTPException, Query, status

from src.briefdesk.api.dependencies import ClientServiceDep, OwnerUser
from src.briefdesk.models import Client
from src.briefdesk.schemas.client import ClientCreate, ClientRead, ClientUpdate
from src.briefdesk.schemas.project import ProjectRead

router = APIRouter(prefix="/clients", tags=["clients"])


async def _get_or_404(service: ClientServiceDep, client_id: UUID) -> Client:
    client = await service.get_client(client_id)
    if client is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Client not found")
    return client


@router.get("", response_model=list[ClientRead])
async def list_clients(
    _owner: OwnerUser,
    service: ClientServiceDep,
    search: Annotated[str | None, Query(max_length=100)] = None,
) -> list[ClientRead]:
    """List clients by name, optionally filtered by name or company."""
    clients = await service.list_clients(search)
    return [ClientRead.model_validate(c) for c in clients]


@router.post(
    "",
    response_model=ClientRead,
    status_code=status.HTTP_201_CREATED,
    responses={409: {"description": "Email or tax code already registered"}},
)
async def create_client(data: ClientCreate, _owner: OwnerUser, service: ClientServiceDep) -> ClientRead:
    try:
        client = await service.create_client(data)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e)) from e
    return ClientRead.model_validate(client)


@router.get("/{client_id}", response_model=ClientRead, responses={404: {"description": "Not found"}})
async def get_client(client_id: UUID, _owner: OwnerUser, service: ClientServiceDep) -> ClientRead:
    return ClientRead.model_validate(await _get_or_404(service, client_id))


@router.patch(
    "/{client_id}",
    response_model=ClientRead,
    responses={404: {"description": "Not found"}, 409: {"description": "Duplicate email or tax code"}},
)
async def update_client(
    client_id: UUID, data: ClientUpdate, _owner: OwnerUser, service: ClientServiceDep
) -> ClientRead:
    client = await _get_or_404(service, client_id)
    try:
        client = await service.update_client(client, data)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e)) from e
    return ClientRead.model_validate(client)


@router.delete(
    "/{client_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    responses={404: {"description": "Not found"}, 409: {"description": "Client has projects"}},
)
async def delete_client(client_id: UUID, _owner: OwnerUser, service: ClientServiceDep) -> None:
    """Delete a client. Refused while any project references it."""
    client = await _get_or_404(service, client_id)
    try:
        await service.delete_client(client)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e)) from e


@router.get("/{client_id}/projects", response_model=list[ProjectRead])
async def list_client_projects(
    client_id: UUID, _owner: OwnerUser, service: ClientServiceDep
) -> list[ProjectRead]:
    await _get_or_404(service, client_id)
    projects = await service.list_projects(client_id)
    return [ProjectRead.model_validate(p) for p in projects]
