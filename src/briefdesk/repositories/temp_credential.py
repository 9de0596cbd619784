"""Repository for the temporary credential side table."""

from uuid import UUID

from sqlalchemy import delete
from sqlmodel import select

from src.briefdesk.models import TempCredential
from src.briefdesk.repositories.base import BaseRepository


class TempCredentialRepository(BaseRepository[TempCredential]):
    """Repository for TempCredential rows (``temp_users`` table)."""

    model = TempCredential

    async def list_by_project(self, project_id: UUID) -> list[TempCredential]:
        result = await self.session.execute(
            select(TempCredential).where(TempCredential.project_id == project_id)
        )
        return list(result.scalars().all())

    async def latest_by_project(self, project_id: UUID) -> TempCredential | None:
        """Most recently issued credential for a project."""
        result = await self.session.execute(
            select(TempCredential)
            .where(TempCredential.project_id == project_id)
            .order_by(TempCredential.created_at.desc())  # type: ignore[attr-defined]
            .limit(1)
        )
        return result.scalars().first()

    async def delete_by_project(self, project_id: UUID) -> int:
        """Delete all rows for a project (no commit). Returns rows affected."""
        result = await self.session.execute(
            delete(TempCredential).where(TempCredential.project_id == project_id)  # type: ignore[arg-type]
        )
        return result.rowcount or 0

    async def delete_by_user_id(self, user_id: str) -> int:
        """Delete rows referencing an identity (no commit). Returns rows affected."""
        result = await self.session.execute(
            delete(TempCredential).where(TempCredential.user_id == user_id)  # type: ignore[arg-type]
        )
        return result.rowcount or 0
