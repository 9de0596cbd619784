"""Repository factory dependencies."""

from typing import Annotated

from fastapi import Depends

from src.briefdesk.api.dependencies.db import DBSession
from src.briefdesk.repositories import (
    BriefingRepository,
    ClientRepository,
    ProjectRepository,
    TempCredentialRepository,
)


def get_client_repository(session: DBSession) -> ClientRepository:
    return ClientRepository(session)


def get_project_repository(session: DBSession) -> ProjectRepository:
    return ProjectRepository(session)


def get_briefing_repository(session: DBSession) -> BriefingRepository:
    return BriefingRepository(session)


def get_temp_credential_repository(session: DBSession) -> TempCredentialRepository:
    return TempCredentialRepository(session)


ClientRepo = Annotated[ClientRepository, Depends(get_client_repository)]
ProjectRepo = Annotated[ProjectRepository, Depends(get_project_repository)]
BriefingRepo = Annotated[BriefingRepository, Depends(get_briefing_repository)]
TempCredentialRepo = Annotated[TempCredentialRepository, Depends(get_temp_credential_repository)]
