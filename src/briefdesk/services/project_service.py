from uuid import UUID

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from src.briefdesk.core.config import get_settings
from src.briefdesk.core.exceptions import AppError
from src.briefdesk.core.logging import get_logger
from src.briefdesk.models import Project, ProjectStatus
from src.briefdesk.models.base import utc_now
from src.briefdesk.repositories import ClientRepository, ProjectRepository
from src.briefdesk.schemas.credential import IssuedCredential
from src.briefdesk.schemas.dashboard import DashboardStats
from src.briefdesk.schemas.project import ProjectCreate, ProjectUpdate
from src.briefdesk.services.credential_service import (
    CredentialService,
    StoredCredential,
    generate_temp_password,
)

logger = get_logger(__name__)


def build_briefing_url(project_id: UUID) -> str:
    """Link the client opens to fill in the briefing."""
    return f"{get_settings().app_url.rstrip('/')}/briefing/{project_id}"


class ProjectService:
    """Project management for the owner, including briefing credentials."""

    def __init__(
        self,
        project_repo: ProjectRepository,
        client_repo: ClientRepository,
        credentials: CredentialService,
        session: AsyncSession,
    ):
        self.project_repo = project_repo
        self.client_repo = client_repo
        self.credentials = credentials
        self.session = session

    async def list_projects(
        self,
        status: ProjectStatus | None = None,
        client_id: UUID | None = None,
        cursor: str | None = None,
        limit: int = 100,
    ) -> tuple[list[Project], str | None, bool]:
        return await self.project_repo.list_all(
            status=status.value if status else None,
            client_id=client_id,
            cursor=cursor,
            limit=limit,
        )

    async def get_project(self, project_id: UUID) -> Project | None:
        return await self.project_repo.get_by_id(project_id)

    async def create_project(
        self, data: ProjectCreate
    ) -> tuple[Project, IssuedCredential | None, str | None]:
        """Create a project and, optionally, issue briefing credentials.

        Credential issuance failing does not undo the project; the error
        message is returned instead so the owner can regenerate later.

        Returns:
            Tuple of (project, issued credential, credential error)

        Raises:
            LookupError: If the client does not exist
        """
        client = await self.client_repo.get_by_id(data.client_id)
        if client is None:
            raise LookupError("Client not found")

        project = Project(**data.model_dump(exclude={"issue_credentials", "status"}))
        project.status = data.status.value
        project.briefing_url = build_briefing_url(project.id)
        self.project_repo.add(project)
        await self.session.commit()
        await self.session.refresh(project)
        logger.info("Project created", project_id=str(project.id), client_id=str(client.id))

        if not data.issue_credentials:
            return project, None, None

        password = generate_temp_password()
        try:
            result = await self.credentials.issue(project.id, client.email, password)
        except AppError as e:
            logger.warning(
                "Briefing credentials not issued", project_id=str(project.id), error=e.message
            )
            return project, None, e.message

        credential = IssuedCredential(
            user_id=result.user_id,
            email=client.email,
            password=password,
            temp_saved=result.temp_saved,
            expires_at=result.expires_at,
        )
        return project, credential, None

    async def update_project(self, project: Project, data: ProjectUpdate) -> Project:
        """Update provided fields.

        Raises:
            LookupError: If a new client_id does not exist
        """
        update_data = data.model_dump(exclude_unset=True, exclude_none=True)
        if "client_id" in update_data:
            if await self.client_repo.get_by_id(update_data["client_id"]) is None:
                raise LookupError("Client not found")
        if "status" in update_data:
            update_data["status"] = update_data["status"].value

        for field, value in update_data.items():
            setattr(project, field, value)
        project.updated_at = utc_now()

        await self.session.commit()
        await self.session.refresh(project)
        return project

    async def delete_project(self, project: Project) -> None:
        """Delete a project after revoking its temporary credentials.

        Revocation is best-effort: its failure never blocks the delete.

        Raises:
            ValueError: If the database refuses the delete
        """
        project_id = project.id
        try:
            await self.credentials.revoke_by_project(project_id)
        except (AppError, SQLAlchemyError) as e:
            logger.warning(
                "Ignoring credential revocation failure",
                project_id=str(project_id),
                error=str(e),
            )

        try:
            await self.project_repo.delete(project)
            await self.session.commit()
        except IntegrityError as e:
            await self.session.rollback()
            raise ValueError("Project is referenced by other records and cannot be deleted") from e

        logger.info("Project deleted", project_id=str(project_id))

    async def get_credentials(self, project: Project) -> StoredCredential | None:
        return await self.credentials.get_by_project(project.id)

    async def regenerate_credentials(self, project: Project) -> IssuedCredential:
        """Replace the project's temporary credentials with a new password.

        Raises:
            LookupError: If the project's client no longer exists
        """
        client = await self.client_repo.get_by_id(project.client_id)
        if client is None:
            raise LookupError("Client not found")

        result, password = await self.credentials.regenerate(project.id, client.email)
        return IssuedCredential(
            user_id=result.user_id,
            email=client.email,
            password=password,
            temp_saved=result.temp_saved,
            expires_at=result.expires_at,
        )

    async def dashboard_stats(self) -> DashboardStats:
        counts = await self.project_repo.count_by_status()
        return DashboardStats(
            total_projects=sum(counts.values()),
            awaiting_briefing=counts.get(ProjectStatus.AWAITING_BRIEFING.value, 0),
            in_progress=counts.get(ProjectStatus.IN_PROGRESS.value, 0),
            paused=counts.get(ProjectStatus.PAUSED.value, 0),
            completed=counts.get(ProjectStatus.COMPLETED.value, 0),
            total_clients=await self.client_repo.count(),
        )
