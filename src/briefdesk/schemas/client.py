"""Client schemas for API request/response."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, EmailStr, Field, field_validator

from src.briefdesk.core.validators import validate_tax_code


def _strip_required(v: str) -> str:
    v = v.strip()
    if not v:
        raise ValueError("Field cannot be empty or whitespace only")
    return v


class ClientCreate(BaseModel):
    """Schema for creating a client."""

    full_name: str = Field(min_length=1, max_length=200)
    company_name: str | None = Field(default=None, max_length=200)
    tax_code: str = Field(min_length=11, max_length=20)
    email: EmailStr
    phone: str = Field(min_length=1, max_length=50)
    role: str = Field(default="", max_length=100)

    @field_validator("full_name", "phone")
    @classmethod
    def validate_required_text(cls, v: str) -> str:
        return _strip_required(v)

    @field_validator("tax_code")
    @classmethod
    def validate_tax_code(cls, v: str) -> str:
        return validate_tax_code(v)

    @field_validator("company_name")
    @classmethod
    def validate_company_name(cls, v: str | None) -> str | None:
        if v is not None:
            v = v.strip()
            if not v:
                return None
        return v


class ClientUpdate(BaseModel):
    """Schema for updating a client. Only provided fields change."""

    full_name: str | None = Field(default=None, min_length=1, max_length=200)
    company_name: str | None = Field(default=None, max_length=200)
    tax_code: str | None = Field(default=None, min_length=11, max_length=20)
    email: EmailStr | None = None
    phone: str | None = Field(default=None, min_length=1, max_length=50)
    role: str | None = Field(default=None, max_length=100)

    @field_validator("full_name", "phone")
    @classmethod
    def validate_required_text(cls, v: str | None) -> str | None:
        return _strip_required(v) if v is not None else None

    @field_validator("tax_code")
    @classmethod
    def validate_tax_code(cls, v: str | None) -> str | None:
        return validate_tax_code(v) if v is not None else None


class ClientRead(BaseModel):
    """Schema for reading a client."""

    id: UUID
    full_name: str
    company_name: str | None
    tax_code: str
    email: str
    phone: str
    role: str
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}
