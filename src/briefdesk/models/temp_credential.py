"""Temporary briefing credential side table."""

from datetime import datetime
from uuid import UUID, uuid4

from sqlmodel import Field, SQLModel

from src.briefdesk.models.base import utc_now


class TempCredential(SQLModel, table=True):
    """Credential issued to a client for one project's intake form.

    The password is stored in plaintext so the owner can display it again.
    ``project_id`` is not a foreign key: rows are removed by the revoker, not
    by cascades. ``expires_at`` is advisory only.
    """

    __tablename__ = "temp_users"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    user_id: str = Field(max_length=255, index=True)
    project_id: UUID = Field(index=True)
    email: str = Field(max_length=255)
    password: str = Field(max_length=255)
    expires_at: datetime
    created_at: datetime = Field(default_factory=utc_now)
