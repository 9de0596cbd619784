"""Repository for Client entity."""

from sqlalchemy import func, or_
from sqlmodel import select

from src.briefdesk.models import Client
from src.briefdesk.repositories.base import BaseRepository


class ClientRepository(BaseRepository[Client]):
    """Repository for Client entity."""

    model = Client

    async def list_all(self, search: str | None = None) -> list[Client]:
        """List clients ordered by name, optionally filtered by a name search."""
        query = select(Client)
        if search:
            pattern = f"%{search.lower()}%"
            query = query.where(
                or_(
                    func.lower(Client.full_name).like(pattern),
                    func.lower(Client.company_name).like(pattern),
                )
            )
        result = await self.session.execute(query.order_by(Client.full_name))
        return list(result.scalars().all())

    async def get_by_email(self, email: str) -> Client | None:
        """Get client by email (case-insensitive)."""
        result = await self.session.execute(
            select(Client).where(func.lower(Client.email) == email.lower())
        )
        return result.scalar_one_or_none()

    async def get_by_tax_code(self, tax_code: str) -> Client | None:
        result = await self.session.execute(select(Client).where(Client.tax_code == tax_code))
        return result.scalar_one_or_none()

    async def count(self) -> int:
        result = await self.session.execute(select(func.count()).select_from(Client))
        return result.scalar_one()
