from fastapi import APIRouter

from src.briefdesk.api.dependencies import OwnerUser, ProjectServiceDep
from src.briefdesk.schemas.dashboard import DashboardStats

router = APIRouter(prefix="/dashboard", tags=["dashboard"])


@router.get("/stats", response_model=DashboardStats)
async def get_stats(_owner: OwnerUser, service: ProjectServiceDep) -> DashboardStats:
    """Project counts per status and the number of clients."""
    return await service.dashboard_stats()
