from uuid import UUID

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from src.briefdesk.core.logging import get_logger
from src.briefdesk.models import Client, Project
from src.briefdesk.models.base import utc_now
from src.briefdesk.repositories import ClientRepository, ProjectRepository
from src.briefdesk.schemas.client import ClientCreate, ClientUpdate

logger = get_logger(__name__)


class ClientService:
    """Client management for the owner."""

    def __init__(
        self,
        client_repo: ClientRepository,
        project_repo: ProjectRepository,
        session: AsyncSession,
    ):
        self.client_repo = client_repo
        self.project_repo = project_repo
        self.session = session

    async def list_clients(self, search: str | None = None) -> list[Client]:
        return await self.client_repo.list_all(search)

    async def get_client(self, client_id: UUID) -> Client | None:
        return await self.client_repo.get_by_id(client_id)

    async def list_projects(self, client_id: UUID) -> list[Project]:
        return await self.project_repo.list_by_client(client_id)

    async def create_client(self, data: ClientCreate) -> Client:
        """Create a client.

        Raises:
            ValueError: If the email or tax code is already registered
        """
        await self._ensure_unique(email=data.email, tax_code=data.tax_code)

        client = Client(**data.model_dump())
        try:
            self.client_repo.add(client)
            await self.session.commit()
        except IntegrityError as e:
            await self.session.rollback()
            raise ValueError("A client with this email or tax code already exists") from e

        await self.session.refresh(client)
        logger.info("Client created", client_id=str(client.id))
        return client

    async def update_client(self, client: Client, data: ClientUpdate) -> Client:
        """Update provided fields.

        Raises:
            ValueError: If the new email or tax code belongs to another client
        """
        update_data = data.model_dump(exclude_unset=True, exclude_none=True)
        await self._ensure_unique(
            email=update_data.get("email"),
            tax_code=update_data.get("tax_code"),
            exclude_id=client.id,
        )

        for field, value in update_data.items():
            setattr(client, field, value)
        client.updated_at = utc_now()

        try:
            await self.session.commit()
        except IntegrityError as e:
            await self.session.rollback()
            raise ValueError("A client with this email or tax code already exists") from e

        await self.session.refresh(client)
        return client

    async def delete_client(self, client: Client) -> None:
        """Delete a client that has no projects.

        Raises:
            ValueError: If projects still reference the client
        """
        if await self.project_repo.count_by_client(client.id) > 0:
            raise ValueError("Client has projects and cannot be deleted")

        try:
            await self.client_repo.delete(client)
            await self.session.commit()
        except IntegrityError as e:
            await self.session.rollback()
            raise ValueError("Client is referenced by other records and cannot be deleted") from e

        logger.info("Client deleted", client_id=str(client.id))

    async def _ensure_unique(
        self,
        email: str | None,
        tax_code: str | None,
        exclude_id: UUID | None = None,
    ) -> None:
        if email:
            existing = await self.client_repo.get_by_email(email)
            if existing is not None and existing.id != exclude_id:
                raise ValueError("A client with this email already exists")
        if tax_code:
            existing = await self.client_repo.get_by_tax_code(tax_code)
            if existing is not None and existing.id != exclude_id:
                raise ValueError("A client with this tax code already exists")
