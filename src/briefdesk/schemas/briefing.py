"""Briefing schemas for the intake form and owner views."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, EmailStr, Field, field_validator

from src.briefdesk.core.validators import validate_tax_code
from src.briefdesk.models.enums import BriefingStatus


class BriefingFields(BaseModel):
    """Intake form fields shared by submissions and reads."""

    # Contact details
    full_name: str = Field(min_length=1, max_length=200)
    company_name: str | None = Field(default=None, max_length=200)
    tax_code: str
    email: str = Field(max_length=255)
    phone: str = Field(min_length=1, max_length=50)
    role: str = Field(min_length=1, max_length=100)

    # Goals
    project_goal: str = Field(min_length=1)
    already_existing: str = Field(min_length=1)
    specific_deadline: str | None = None

    # Project type
    project_type: str = Field(min_length=1, max_length=100)
    project_type_other: str | None = None
    scope: str = Field(min_length=1, max_length=100)

    # Features
    required_features: str = Field(min_length=1)
    main_features: str = Field(min_length=1)
    secondary_features: str | None = None
    user_levels: str | None = None
    reserved_areas: str | None = None

    # Design
    existing_design: str = Field(min_length=1, max_length=100)
    reference_sites: str | None = None
    color_palette: str | None = None
    logo_ready: bool = False

    # Integrations
    external_services: str | None = None
    platforms: list[str] = Field(default_factory=list)
    technical_preferences: str | None = None

    # Content
    content_ready: str | None = None
    content_delivery: str | None = None
    import_from_other_system: str | None = None

    # Hosting
    has_domain: bool = False
    has_hosting: bool = False
    needs_assistance: bool = False

    # Support, budget, timeline
    support_type: str = Field(min_length=1, max_length=100)
    estimated_budget: str | None = None
    payment_method: str = Field(min_length=1, max_length=100)
    final_deadline: str | None = None
    urgent_parts: str | None = None
    launch_date: str | None = None

    # Final notes
    additional_info: str | None = None
    regulatory_constraints: str | None = None


class BriefingSubmission(BriefingFields):
    """Intake form submitted by the client."""

    email: EmailStr
    platforms: list[str] = Field(min_length=1)

    @field_validator("tax_code")
    @classmethod
    def validate_tax_code(cls, v: str) -> str:
        return validate_tax_code(v)


class BriefingRead(BriefingFields):
    """Schema for reading a stored briefing."""

    id: UUID
    project_id: UUID | None
    client_id: UUID | None
    status: BriefingStatus
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}


class BriefingSummary(BaseModel):
    """List entry for the owner's briefing overview."""

    id: UUID
    project_id: UUID | None
    project_name: str | None
    full_name: str
    email: str
    project_type: str
    status: BriefingStatus
    created_at: datetime


class BriefingStatusUpdate(BaseModel):
    status: BriefingStatus
