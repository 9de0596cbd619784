"""Schemas for the client-facing intake (briefing form) endpoints."""

from uuid import UUID

from pydantic import BaseModel, EmailStr

from src.briefdesk.models.enums import ProjectStatus


class IntakeProject(BaseModel):
    """The subset of a project a briefing visitor may see."""

    id: UUID
    name: str
    description: str | None
    status: ProjectStatus

    model_config = {"from_attributes": True}


class IntakeStateResponse(BaseModel):
    state: str
    project: IntakeProject | None = None


class IntakeLoginRequest(BaseModel):
    email: EmailStr
    password: str


class SubmissionResponse(BaseModel):
    briefing_id: UUID
    client_id: UUID
    signed_out: bool
