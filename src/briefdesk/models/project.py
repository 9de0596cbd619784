"""Project model."""

from datetime import date, datetime
from uuid import UUID, uuid4

from sqlmodel import Field, SQLModel

from src.briefdesk.models.base import utc_now
from src.briefdesk.models.enums import ProjectStatus


class Project(SQLModel, table=True):
    """Project owned by the freelancer, linked to one client."""

    __tablename__ = "projects"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    client_id: UUID = Field(foreign_key="clients.id", index=True)
    name: str = Field(max_length=200)
    description: str | None = Field(default=None, max_length=2000)
    status: str = Field(default=ProjectStatus.AWAITING_BRIEFING.value, max_length=30, index=True)
    briefing_completed: bool = Field(default=False)
    briefing_url: str = Field(default="", max_length=500)
    internal_notes: str | None = Field(default=None)
    start_date: date | None = Field(default=None)
    due_date: date | None = Field(default=None)
    budget: str | None = Field(default=None, max_length=100)
    created_at: datetime = Field(default_factory=utc_now, index=True)
    updated_at: datetime = Field(default_factory=utc_now)
