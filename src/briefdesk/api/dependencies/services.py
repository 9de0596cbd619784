"""Service factory dependencies."""

from typing import Annotated

from fastapi import Depends

from src.briefdesk.api.dependencies.db import DBSession
from src.briefdesk.api.dependencies.identity import IdentityDep
from src.briefdesk.api.dependencies.repositories import (
    BriefingRepo,
    ClientRepo,
    ProjectRepo,
    TempCredentialRepo,
)
from src.briefdesk.services import (
    AuthService,
    BriefingService,
    ClientService,
    CredentialService,
    IntakeService,
    ProjectService,
)


def get_auth_service(identity: IdentityDep) -> AuthService:
    return AuthService(identity)


def get_credential_service(
    repo: TempCredentialRepo, session: DBSession, identity: IdentityDep
) -> CredentialService:
    return CredentialService(repo, session, identity)


CredentialServiceDep = Annotated[CredentialService, Depends(get_credential_service)]


def get_client_service(
    client_repo: ClientRepo, project_repo: ProjectRepo, session: DBSession
) -> ClientService:
    return ClientService(client_repo, project_repo, session)


def get_project_service(
    project_repo: ProjectRepo,
    client_repo: ClientRepo,
    credentials: CredentialServiceDep,
    session: DBSession,
) -> ProjectService:
    return ProjectService(project_repo, client_repo, credentials, session)


def get_briefing_service(briefing_repo: BriefingRepo, session: DBSession) -> BriefingService:
    return BriefingService(briefing_repo, session)


def get_intake_service(
    project_repo: ProjectRepo,
    client_repo: ClientRepo,
    briefing_repo: BriefingRepo,
    credentials: CredentialServiceDep,
    identity: IdentityDep,
    session: DBSession,
) -> IntakeService:
    return IntakeService(project_repo, client_repo, briefing_repo, credentials, identity, session)


AuthServiceDep = Annotated[AuthService, Depends(get_auth_service)]
ClientServiceDep = Annotated[ClientService, Depends(get_client_service)]
ProjectServiceDep = Annotated[ProjectService, Depends(get_project_service)]
BriefingServiceDep = Annotated[BriefingService, Depends(get_briefing_service)]
IntakeServiceDep = Annotated[IntakeService, Depends(get_intake_service)]
