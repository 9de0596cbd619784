"""Client-facing briefing intake: access gate, login and submission."""

from dataclasses import dataclass
from enum import StrEnum
from uuid import UUID

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from src.briefdesk.core.exceptions import AppError
from src.briefdesk.core.identity import (
    AuthContext,
    IdentityClient,
    IdentityProviderError,
    IdentitySession,
)
from src.briefdesk.core.logging import get_logger
from src.briefdesk.models import Briefing, Client, Project, ProjectStatus
from src.briefdesk.models.base import utc_now
from src.briefdesk.repositories import BriefingRepository, ClientRepository, ProjectRepository
from src.briefdesk.schemas.briefing import BriefingSubmission
from src.briefdesk.services.credential_service import CredentialService

logger = get_logger(__name__)


class AccessState(StrEnum):
    UNAUTHENTICATED = "unauthenticated"
    TEMPORARY = "temporary"
    OWNER = "owner"
    SUBMITTED = "submitted"


class ProjectNotFound(AppError):
    status_code = 404

    def __init__(self) -> None:
        super().__init__("Project not found")


class AuthenticationRequired(AppError):
    status_code = 401

    def __init__(self) -> None:
        super().__init__("Authentication required")


class InvalidCredentials(AppError):
    """Login failure. One message for every cause so nothing leaks."""

    status_code = 401

    def __init__(self) -> None:
        super().__init__("Invalid credentials")


class AlreadySubmitted(AppError):
    status_code = 409

    def __init__(self) -> None:
        super().__init__("Briefing already submitted")


class SubmissionFailed(AppError):
    status_code = 500

    def __init__(self) -> None:
        super().__init__("Briefing submission failed, please retry")


@dataclass(frozen=True)
class SubmissionResult:
    briefing_id: UUID
    client_id: UUID
    signed_out: bool


def classify(project: Project, auth: AuthContext | None) -> AccessState:
    """Decide what a visitor of a project's intake form may do.

    A submitted project is closed to everyone. A temporary identity only
    counts for the project it was issued for.
    """
    if project.briefing_completed:
        return AccessState.SUBMITTED
    if auth is None:
        return AccessState.UNAUTHENTICATED
    if auth.is_temporary:
        if auth.user.project_id != str(project.id):
            return AccessState.UNAUTHENTICATED
        return AccessState.TEMPORARY
    return AccessState.OWNER


class IntakeService:
    """Gate and submit the briefing form for one project."""

    def __init__(
        self,
        project_repo: ProjectRepository,
        client_repo: ClientRepository,
        briefing_repo: BriefingRepository,
        credentials: CredentialService,
        identity: IdentityClient,
        session: AsyncSession,
    ):
        self.project_repo = project_repo
        self.client_repo = client_repo
        self.briefing_repo = briefing_repo
        self.credentials = credentials
        self.identity = identity
        self.session = session

    async def evaluate(
        self, project_id: UUID, auth: AuthContext | None
    ) -> tuple[AccessState, Project]:
        project = await self.project_repo.get_by_id(project_id)
        if project is None:
            raise ProjectNotFound()
        return classify(project, auth), project

    async def login(self, project_id: UUID, email: str, password: str) -> IdentitySession:
        """Password sign-in from the intake form."""
        try:
            session = await self.identity.sign_in_with_password(email, password)
        except IdentityProviderError as e:
            logger.info(
                "Intake login rejected", project_id=str(project_id), status_code=e.status_code
            )
            raise InvalidCredentials() from e
        logger.info(
            "Intake login",
            project_id=str(project_id),
            user_id=session.user.id,
            temporary=session.user.is_temporary,
        )
        return session

    async def submit(
        self, project_id: UUID, payload: BriefingSubmission, auth: AuthContext | None
    ) -> SubmissionResult:
        """Persist a briefing and close the project's intake.

        Resolves the client by email (creating it when unknown), stores the
        briefing and marks the project completed in one transaction. A
        temporary identity is then revoked and signed out; cleanup failures
        are logged and never fail the submission.
        """
        if auth is None:
            raise AuthenticationRequired()
        state, project = await self.evaluate(project_id, auth)
        if state is AccessState.SUBMITTED:
            raise AlreadySubmitted()
        if state is AccessState.UNAUTHENTICATED:
            raise AuthenticationRequired()

        try:
            client_id = await self._resolve_client(project, payload)
            briefing = Briefing(
                project_id=project.id,
                client_id=client_id,
                **payload.model_dump(),
            )
            self.briefing_repo.add(briefing)
            project.briefing_completed = True
            project.status = ProjectStatus.IN_PROGRESS.value
            project.updated_at = utc_now()
            await self.session.commit()
        except SQLAlchemyError as e:
            await self.session.rollback()
            logger.error("Briefing submission failed", project_id=str(project_id), error=str(e))
            raise SubmissionFailed() from e

        logger.info(
            "Briefing submitted",
            project_id=str(project_id),
            briefing_id=str(briefing.id),
            client_id=str(client_id),
        )

        signed_out = False
        if auth.is_temporary:
            await self._end_temporary_session(auth)
            signed_out = True

        return SubmissionResult(briefing_id=briefing.id, client_id=client_id, signed_out=signed_out)

    async def _resolve_client(self, project: Project, payload: BriefingSubmission) -> UUID:
        """Client id the briefing is filed under.

        A known email keeps the project's current client. An unknown email
        creates a client (or reuses the one holding the same tax code) and
        repoints the project at it.
        """
        existing = await self.client_repo.get_by_email(payload.email)
        if existing is not None:
            return project.client_id

        client = await self.client_repo.get_by_tax_code(payload.tax_code)
        if client is None:
            client = Client(
                full_name=payload.full_name,
                company_name=payload.company_name,
                tax_code=payload.tax_code,
                email=payload.email,
                phone=payload.phone,
                role=payload.role,
            )
            self.client_repo.add(client)
            await self.session.flush()

        project.client_id = client.id
        return client.id

    async def _end_temporary_session(self, auth: AuthContext) -> None:
        try:
            await self.credentials.revoke_by_user_id(auth.user.id)
        except (AppError, SQLAlchemyError) as e:
            logger.warning(
                "Ignoring temporary user cleanup failure", user_id=auth.user.id, error=str(e)
            )
        try:
            await self.identity.sign_out(auth.access_token)
        except IdentityProviderError as e:
            logger.info(
                "Temporary session sign-out failed", user_id=auth.user.id, error=e.message
            )
