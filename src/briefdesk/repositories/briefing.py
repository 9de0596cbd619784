"""Repository for Briefing entity."""

from uuid import UUID

from sqlmodel import select

from src.briefdesk.models import Briefing, Project
from src.briefdesk.repositories.base import BaseRepository


class BriefingRepository(BaseRepository[Briefing]):
    """Repository for Briefing entity."""

    model = Briefing

    async def list_with_project_names(
        self, status: str | None = None
    ) -> list[tuple[Briefing, str | None]]:
        """List briefings newest first with the linked project's name (if any)."""
        query = select(Briefing, Project.name).join(
            Project,
            Briefing.project_id == Project.id,  # type: ignore[arg-type]
            isouter=True,
        )
        if status is not None:
            query = query.where(Briefing.status == status)
        query = query.order_by(Briefing.created_at.desc())  # type: ignore[attr-defined]
        result = await self.session.execute(query)
        return [(briefing, name) for briefing, name in result.all()]

    async def get_by_project(self, project_id: UUID) -> Briefing | None:
        """Most recent briefing for a project."""
        result = await self.session.execute(
            select(Briefing)
            .where(Briefing.project_id == project_id)
            .order_by(Briefing.created_at.desc())  # type: ignore[attr-defined]
            .limit(1)
        )
        return result.scalars().first()
