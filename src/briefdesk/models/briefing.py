"""Briefing model - the intake form a client fills in for a project."""

from datetime import datetime
from uuid import UUID, uuid4

from sqlalchemy import JSON, Column
from sqlmodel import Field, SQLModel

from src.briefdesk.models.base import utc_now
from src.briefdesk.models.enums import BriefingStatus


class Briefing(SQLModel, table=True):
    """Submitted intake form.

    One briefing per project by convention; nothing enforces it.
    """

    __tablename__ = "briefings"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    project_id: UUID | None = Field(
        default=None, foreign_key="projects.id", ondelete="SET NULL", index=True
    )
    client_id: UUID | None = Field(default=None, foreign_key="clients.id", index=True)

    # Contact details
    full_name: str = Field(max_length=200)
    company_name: str | None = Field(default=None, max_length=200)
    tax_code: str = Field(max_length=16)
    email: str = Field(max_length=255)
    phone: str = Field(max_length=50)
    role: str = Field(max_length=100)

    # Goals
    project_goal: str
    already_existing: str
    specific_deadline: str | None = None

    # Project type
    project_type: str = Field(max_length=100)
    project_type_other: str | None = None
    scope: str = Field(max_length=100)

    # Features
    required_features: str
    main_features: str
    secondary_features: str | None = None
    user_levels: str | None = None
    reserved_areas: str | None = None

    # Design
    existing_design: str = Field(max_length=100)
    reference_sites: str | None = None
    color_palette: str | None = None
    logo_ready: bool = False

    # Integrations
    external_services: str | None = None
    platforms: list[str] = Field(default_factory=list, sa_column=Column(JSON, nullable=False))
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
    support_type: str = Field(max_length=100)
    estimated_budget: str | None = None
    payment_method: str = Field(max_length=100)
    final_deadline: str | None = None
    urgent_parts: str | None = None
    launch_date: str | None = None

    # Final notes
    additional_info: str | None = None
    regulatory_constraints: str | None = None

    status: str = Field(default=BriefingStatus.PENDING.value, max_length=20)
    created_at: datetime = Field(default_factory=utc_now, index=True)
    updated_at: datetime = Field(default_factory=utc_now)
