"""Briefing review endpoints."""

from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, HTTPException, Query, status

from src.briefdesk.api.dependencies import BriefingServiceDep, OwnerUser
from src.briefdesk.models import Briefing, BriefingStatus
from src.briefdesk.schemas.briefing import BriefingRead, BriefingStatusUpdate, BriefingSummary

router = APIRouter(prefix="/briefings", tags=["briefings"])


async def _get_or_404(service: BriefingServiceDep, briefing_id: UUID) -> Briefing:
    briefing = await service.get_briefing(briefing_id)
    if briefing is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Briefing not found")
    return briefing


@router.get("", response_model=list[BriefingSummary])
async def list_briefings(
    _owner: OwnerUser,
    service: BriefingServiceDep,
    status_filter: Annotated[BriefingStatus | None, Query(alias="status")] = None,
) -> list[BriefingSummary]:
    """List briefings newest first, with the linked project's name."""
    return await service.list_briefings(status_filter)


@router.get("/by-project/{project_id}", response_model=BriefingRead)
async def get_project_briefing(
    project_id: UUID, _owner: OwnerUser, service: BriefingServiceDep
) -> BriefingRead:
    briefing = await service.get_for_project(project_id)
    if briefing is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Briefing not found")
    return BriefingRead.model_validate(briefing)


@router.get("/{briefing_id}", response_model=BriefingRead)
async def get_briefing(briefing_id: UUID, _owner: OwnerUser, service: BriefingServiceDep) -> BriefingRead:
    return BriefingRead.model_validate(await _get_or_404(service, briefing_id))


@router.patch("/{briefing_id}", response_model=BriefingRead)
async def update_briefing_status(
    briefing_id: UUID,
    data: BriefingStatusUpdate,
    _owner: OwnerUser,
    service: BriefingServiceDep,
) -> BriefingRead:
    briefing = await _get_or_404(service, briefing_id)
    briefing = await service.update_status(briefing, data.status)
    return BriefingRead.model_validate(briefing)


@router.delete("/{briefing_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_briefing(briefing_id: UUID, _owner: OwnerUser, service: BriefingServiceDep) -> None:
    briefing = await _get_or_404(service, briefing_id)
    await service.delete_briefing(briefing)
