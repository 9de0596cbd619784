"""Repository for Project entity."""

from uuid import UUID

from sqlalchemy import func
from sqlmodel import select

from src.briefdesk.models import Project
from src.briefdesk.repositories.base import BaseRepository


class ProjectRepository(BaseRepository[Project]):
    """Repository for Project entity."""

    model = Project

    async def list_all(
        self,
        status: str | None = None,
        client_id: UUID | None = None,
        cursor: str | None = None,
        limit: int = 100,
    ) -> tuple[list[Project], str | None, bool]:
        """List projects newest first with optional status/client filters.

        Returns:
            Tuple of (items, next_cursor, has_more)
        """
        query = select(Project)
        if status is not None:
            query = query.where(Project.status == status)
        if client_id is not None:
            query = query.where(Project.client_id == client_id)
        return await self.paginate(query, cursor, limit, Project.created_at)

    async def list_by_client(self, client_id: UUID) -> list[Project]:
        result = await self.session.execute(
            select(Project)
            .where(Project.client_id == client_id)
            .order_by(Project.created_at.desc())  # type: ignore[attr-defined]
        )
        return list(result.scalars().all())

    async def count_by_client(self, client_id: UUID) -> int:
        result = await self.session.execute(
            select(func.count()).select_from(Project).where(Project.client_id == client_id)
        )
        return result.scalar_one()

    async def count_by_status(self) -> dict[str, int]:
        """Project counts keyed by status value."""
        result = await self.session.execute(
            select(Project.status, func.count()).group_by(Project.status)
        )
        return {status: count for status, count in result.all()}
