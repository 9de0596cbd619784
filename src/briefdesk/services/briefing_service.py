from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from src.briefdesk.core.logging import get_logger
from src.briefdesk.models import Briefing, BriefingStatus
from src.briefdesk.models.base import utc_now
from src.briefdesk.repositories import BriefingRepository
from src.briefdesk.schemas.briefing import BriefingSummary

logger = get_logger(__name__)


class BriefingService:
    """Owner-side review of submitted briefings."""

    def __init__(self, briefing_repo: BriefingRepository, session: AsyncSession):
        self.briefing_repo = briefing_repo
        self.session = session

    async def list_briefings(self, status: BriefingStatus | None = None) -> list[BriefingSummary]:
        rows = await self.briefing_repo.list_with_project_names(
            status.value if status else None
        )
        return [
            BriefingSummary(
                id=briefing.id,
                project_id=briefing.project_id,
                project_name=project_name,
                full_name=briefing.full_name,
                email=briefing.email,
                project_type=briefing.project_type,
                status=BriefingStatus(briefing.status),
                created_at=briefing.created_at,
            )
            for briefing, project_name in rows
        ]

    async def get_briefing(self, briefing_id: UUID) -> Briefing | None:
        return await self.briefing_repo.get_by_id(briefing_id)

    async def get_for_project(self, project_id: UUID) -> Briefing | None:
        return await self.briefing_repo.get_by_project(project_id)

    async def update_status(self, briefing: Briefing, status: BriefingStatus) -> Briefing:
        briefing.status = status.value
        briefing.updated_at = utc_now()
        await self.session.commit()
        await self.session.refresh(briefing)
        logger.info("Briefing status changed", briefing_id=str(briefing.id), status=status.value)
        return briefing

    async def delete_briefing(self, briefing: Briefing) -> None:
        await self.briefing_repo.delete(briefing)
        await self.session.commit()
        logger.info("Briefing deleted", briefing_id=str(briefing.id))
