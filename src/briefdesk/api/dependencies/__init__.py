"""FastAPI dependency injection definitions."""

# Auth
from src.briefdesk.api.dependencies.auth import (
    AuthenticatedUser,
    OptionalAuth,
    OwnerUser,
    get_auth_context,
    require_authenticated,
    require_owner,
)

# Database
from src.briefdesk.api.dependencies.db import DBSession, get_db_session

# Identity provider
from src.briefdesk.api.dependencies.identity import IdentityDep, get_identity

# Repositories
from src.briefdesk.api.dependencies.repositories import (
    BriefingRepo,
    ClientRepo,
    ProjectRepo,
    TempCredentialRepo,
)

# Services
from src.briefdesk.api.dependencies.services import (
    AuthServiceDep,
    BriefingServiceDep,
    ClientServiceDep,
    CredentialServiceDep,
    IntakeServiceDep,
    ProjectServiceDep,
)

__all__ = [
    "AuthServiceDep",
    "AuthenticatedUser",
    "BriefingRepo",
    "BriefingServiceDep",
    "ClientRepo",
    "ClientServiceDep",
    "CredentialServiceDep",
    "DBSession",
    "IdentityDep",
    "IntakeServiceDep",
    "OptionalAuth",
    "OwnerUser",
    "ProjectRepo",
    "ProjectServiceDep",
    "TempCredentialRepo",
    "get_auth_context",
    "get_db_session",
    "get_identity",
    "require_authenticated",
    "require_owner",
]
