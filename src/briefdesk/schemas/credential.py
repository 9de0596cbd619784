"""Schemas for the temporary briefing credential endpoints.

The workflow endpoints speak camelCase JSON (``projectId``, ``tempSaved``...).
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class CreateTempUserRequest(CamelModel):
    # Presence is checked by the service so a missing field is a 400, not a 422
    project_id: str | None = None
    email: str | None = None
    password: str | None = None


class CreateTempUserResponse(CamelModel):
    user_id: str
    temp_saved: bool


class DeleteTempByProjectRequest(CamelModel):
    project_id: str | None = None
    email: str | None = None


class DeleteTempByProjectResponse(CamelModel):
    ok: bool = True
    deleted_by: str | None = None
    info: str | None = None


class DeleteTempUserRequest(CamelModel):
    user_id: str | None = None


class DeleteTempUserResponse(CamelModel):
    ok: bool = True


class StoredCredentialResponse(CamelModel):
    """Stored credential for owner display. Empty object when none exists."""

    email: str | None = None
    password: str | None = None
    expires_at: datetime | None = None


class IssuedCredential(BaseModel):
    """Credential returned to the owner after issuing or regenerating."""

    user_id: str
    email: str
    password: str
    temp_saved: bool
    expires_at: datetime | None = None
