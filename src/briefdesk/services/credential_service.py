"""Temporary briefing credentials: issue, look up, revoke.

A client reaches a project's intake form with a scoped identity (email plus a
4-digit password) created in the identity provider and tagged with the
project. The ``temp_users`` table remembers issued credentials so the owner
can display them again.

Only the identity creation on issue (and the identity deletion on revoke by
id) is a primary step. Bookkeeping in ``temp_users`` and cleanup during
revoke-by-project are best-effort: failures are logged and downgraded, never
raised, so they cannot block the action that triggered them.
"""

import secrets
from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Any
from uuid import UUID

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from src.briefdesk.core.config import get_settings
from src.briefdesk.core.exceptions import ConfigurationError, InputError, UpstreamError
from src.briefdesk.core.identity import (
    PROJECT_ID_KEY,
    TEMP_BRIEFING_FLAG,
    IdentityClient,
    IdentityProviderError,
)
from src.briefdesk.core.logging import get_logger
from src.briefdesk.models import TempCredential
from src.briefdesk.models.base import utc_now
from src.briefdesk.repositories import TempCredentialRepository

logger = get_logger(__name__)

DELETED_BY_STORE = "temp_users"
DELETED_BY_EMAIL = "email"
NOTHING_FOUND = "no temporary user found"


@dataclass(frozen=True)
class IssueResult:
    user_id: str
    temp_saved: bool
    expires_at: datetime


@dataclass(frozen=True)
class RevocationResult:
    ok: bool = True
    deleted_by: str | None = None
    info: str | None = None


@dataclass(frozen=True)
class StoredCredential:
    email: str
    password: str
    expires_at: datetime


def generate_temp_password() -> str:
    """Four numeric digits (1000-9999), easy to type on a phone."""
    return str(1000 + secrets.randbelow(9000))


def _missing_fields_error(**fields: Any) -> InputError:
    missing = [name for name, value in fields.items() if not value]
    return InputError(f"Missing required field(s): {', '.join(missing)}")


def _parse_project_id(value: str | UUID) -> UUID | None:
    """Project ids are UUIDs; anything else cannot name a project."""
    if isinstance(value, UUID):
        return value
    try:
        return UUID(value)
    except ValueError:
        return None


class CredentialService:
    """Issuer, store lookup and revoker for temporary briefing credentials."""

    def __init__(
        self,
        repo: TempCredentialRepository,
        session: AsyncSession,
        identity: IdentityClient,
    ):
        self.repo = repo
        self.session = session
        self.identity = identity

    def _require_service_role(self) -> None:
        if not self.identity.has_service_role:
            raise ConfigurationError("Identity service-role key is not configured")

    async def issue(self, project_id: str | UUID | None, email: str | None, password: str | None) -> IssueResult:
        """Create a temporary identity for a project and remember its credential.

        The store write is best-effort: if it fails the identity is kept and
        ``temp_saved`` is False.
        """
        if not project_id or not email or not password:
            raise _missing_fields_error(projectId=project_id, email=email, password=password)
        project_uuid = _parse_project_id(project_id)
        if project_uuid is None:
            raise InputError("projectId must be a valid UUID")
        self._require_service_role()

        tags = {TEMP_BRIEFING_FLAG: True, PROJECT_ID_KEY: str(project_uuid)}
        try:
            user = await self.identity.create_user(
                email, password, app_metadata=tags, user_metadata=tags
            )
        except IdentityProviderError as e:
            logger.error(
                "Temporary user creation failed",
                project_id=str(project_uuid),
                status_code=e.status_code,
                error=e.message,
            )
            raise UpstreamError("Failed to create temporary user") from e

        settings = get_settings()
        expires_at = utc_now() + timedelta(hours=settings.temp_credential_ttl_hours)
        temp_saved = True
        try:
            self.repo.add(
                TempCredential(
                    user_id=user.id,
                    project_id=project_uuid,
                    email=email,
                    password=password,
                    expires_at=expires_at,
                )
            )
            await self.session.commit()
        except SQLAlchemyError as e:
            await self.session.rollback()
            temp_saved = False
            logger.warning(
                "Temporary credential not stored",
                project_id=str(project_uuid),
                user_id=user.id,
                error=str(e),
            )

        logger.info(
            "Temporary user issued",
            project_id=str(project_uuid),
            user_id=user.id,
            temp_saved=temp_saved,
        )
        return IssueResult(user_id=user.id, temp_saved=temp_saved, expires_at=expires_at)

    async def get_by_project(self, project_id: str | UUID | None) -> StoredCredential | None:
        """Latest stored credential for a project, or None.

        Query failures (e.g. the table does not exist) and ids that are not
        UUIDs are treated as no data.
        """
        if not project_id:
            raise _missing_fields_error(projectId=project_id)
        self._require_service_role()
        project_uuid = _parse_project_id(project_id)
        if project_uuid is None:
            return None

        try:
            row = await self.repo.latest_by_project(project_uuid)
        except SQLAlchemyError as e:
            await self.session.rollback()
            logger.warning(
                "Temporary credential lookup failed", project_id=str(project_uuid), error=str(e)
            )
            return None

        if row is None:
            return None
        return StoredCredential(email=row.email, password=row.password, expires_at=row.expires_at)

    async def revoke_by_project(
        self, project_id: str | UUID | None, email: str | None = None
    ) -> RevocationResult:
        """Delete the temporary identities issued for a project. Always reports ok.

        Stored rows are used first. Without rows, an email falls back to scanning
        the first page of identity-provider users for an identity with that
        email. Only identities tagged as temporary match, so an owner account
        sharing the address is never deleted. An id that is not a UUID has no
        stored rows and goes straight to the email fallback.
        """
        if not project_id:
            raise _missing_fields_error(projectId=project_id)
        self._require_service_role()
        project_uuid = _parse_project_id(project_id)

        rows: list[TempCredential] = []
        if project_uuid is not None:
            try:
                rows = await self.repo.list_by_project(project_uuid)
            except SQLAlchemyError as e:
                await self.session.rollback()
                logger.warning(
                    "Temporary credential lookup failed", project_id=str(project_uuid), error=str(e)
                )

        if rows and project_uuid is not None:
            for row in rows:
                await self._delete_identity_quietly(row.user_id)
            try:
                await self.repo.delete_by_project(project_uuid)
                await self.session.commit()
            except SQLAlchemyError as e:
                await self.session.rollback()
                logger.warning(
                    "Temporary credential rows not deleted",
                    project_id=str(project_uuid),
                    error=str(e),
                )
            logger.info(
                "Temporary users revoked", project_id=str(project_uuid), count=len(rows)
            )
            return RevocationResult(deleted_by=DELETED_BY_STORE)

        if email:
            settings = get_settings()
            try:
                users = await self.identity.list_users(
                    page=1, per_page=settings.identity_user_scan_limit
                )
                match = next(
                    (
                        u
                        for u in users
                        if u.is_temporary and u.email and u.email.lower() == email.lower()
                    ),
                    None,
                )
                if match is not None:
                    await self.identity.delete_user(match.id)
                    logger.info(
                        "Temporary user revoked by email",
                        project_id=str(project_id),
                        user_id=match.id,
                    )
                    return RevocationResult(deleted_by=DELETED_BY_EMAIL)
            except IdentityProviderError as e:
                logger.warning(
                    "Temporary user email lookup failed",
                    project_id=str(project_id),
                    error=e.message,
                )

        return RevocationResult(info=NOTHING_FOUND)

    async def revoke_by_user_id(self, user_id: str | None) -> RevocationResult:
        """Delete one temporary identity and any stored rows that reference it."""
        if not user_id:
            raise _missing_fields_error(userId=user_id)
        self._require_service_role()

        try:
            await self.identity.delete_user(user_id)
        except IdentityProviderError as e:
            # Already gone counts as deleted
            if e.status_code != 404:
                logger.error(
                    "Temporary user deletion failed",
                    user_id=user_id,
                    status_code=e.status_code,
                    error=e.message,
                )
                raise UpstreamError("Failed to delete temporary user") from e

        try:
            await self.repo.delete_by_user_id(user_id)
            await self.session.commit()
        except SQLAlchemyError as e:
            await self.session.rollback()
            logger.warning("Temporary credential rows not deleted", user_id=user_id, error=str(e))

        logger.info("Temporary user revoked", user_id=user_id)
        return RevocationResult()

    async def regenerate(self, project_id: UUID, email: str) -> tuple[IssueResult, str]:
        """Revoke whatever was issued for the project, then issue a fresh password.

        Returns:
            Tuple of (issue result, plaintext password)
        """
        await self.revoke_by_project(project_id, email)
        password = generate_temp_password()
        result = await self.issue(project_id, email, password)
        return result, password

    async def _delete_identity_quietly(self, user_id: str | None) -> None:
        if not user_id:
            return
        try:
            await self.identity.delete_user(user_id)
        except IdentityProviderError as e:
            logger.warning(
                "Ignoring temporary user deletion failure", user_id=user_id, error=e.message
            )
