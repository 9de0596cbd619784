from src.briefdesk.schemas.briefing import (
    BriefingRead,
    BriefingStatusUpdate,
    BriefingSubmission,
    BriefingSummary,
)
from src.briefdesk.schemas.client import ClientCreate, ClientRead, ClientUpdate
from src.briefdesk.schemas.credential import IssuedCredential, StoredCredentialResponse
from src.briefdesk.schemas.pagination import PaginatedResponse
from src.briefdesk.schemas.project import (
    ProjectCreate,
    ProjectCreateResponse,
    ProjectRead,
    ProjectUpdate,
)

__all__ = [
    "BriefingRead",
    "BriefingStatusUpdate",
    "BriefingSubmission",
    "BriefingSummary",
    "ClientCreate",
    "ClientRead",
    "ClientUpdate",
    "IssuedCredential",
    "PaginatedResponse",
    "ProjectCreate",
    "ProjectCreateResponse",
    "ProjectRead",
    "ProjectUpdate",
    "StoredCredentialResponse",
]
