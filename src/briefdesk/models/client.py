"""Client model."""

from datetime import datetime
from uuid import UUID, uuid4

from sqlmodel import Field, SQLModel

from src.briefdesk.models.base import utc_now


class Client(SQLModel, table=True):
    """A freelancer's client. Email and tax code are unique at the storage layer."""

    __tablename__ = "clients"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    full_name: str = Field(max_length=200, index=True)
    company_name: str | None = Field(default=None, max_length=200)
    tax_code: str = Field(max_length=16, unique=True, index=True)
    email: str = Field(max_length=255, unique=True, index=True)
    phone: str = Field(max_length=50)
    role: str = Field(default="", max_length=100)
    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(default_factory=utc_now)
