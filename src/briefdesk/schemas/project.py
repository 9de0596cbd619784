"""Project schemas for API request/response."""

from datetime import date, datetime
from uuid import UUID

from pydantic import BaseModel, Field, field_validator

from src.briefdesk.models.enums import ProjectStatus
from src.briefdesk.schemas.credential import IssuedCredential


class ProjectCreate(BaseModel):
    """Schema for creating a project."""

    client_id: UUID
    name: str = Field(min_length=1, max_length=200)
    description: str | None = Field(default=None, max_length=2000)
    status: ProjectStatus = ProjectStatus.AWAITING_BRIEFING
    internal_notes: str | None = None
    start_date: date | None = None
    due_date: date | None = None
    budget: str | None = Field(default=None, max_length=100)
    issue_credentials: bool = Field(
        default=True,
        description="Issue temporary briefing credentials to the client's email.",
    )

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("Project name cannot be empty or whitespace only")
        return v

    @field_validator("description")
    @classmethod
    def validate_description(cls, v: str | None) -> str | None:
        if v is not None:
            v = v.strip()
            if not v:
                return None
        return v


class ProjectUpdate(BaseModel):
    """Schema for updating a project. Only provided fields change."""

    client_id: UUID | None = None
    name: str | None = Field(default=None, min_length=1, max_length=200)
    description: str | None = Field(default=None, max_length=2000)
    status: ProjectStatus | None = None
    internal_notes: str | None = None
    start_date: date | None = None
    due_date: date | None = None
    budget: str | None = Field(default=None, max_length=100)

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str | None) -> str | None:
        if v is not None:
            v = v.strip()
            if not v:
                raise ValueError("Project name cannot be empty or whitespace only")
        return v


class ProjectRead(BaseModel):
    """Schema for reading a project."""

    id: UUID
    client_id: UUID
    name: str
    description: str | None
    status: ProjectStatus
    briefing_completed: bool
    briefing_url: str
    internal_notes: str | None
    start_date: date | None
    due_date: date | None
    budget: str | None
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}


class ProjectCreateResponse(BaseModel):
    """Created project plus the outcome of credential issuance."""

    project: ProjectRead
    credentials: IssuedCredential | None = None
    credentials_error: str | None = None
