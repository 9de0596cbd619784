from src.briefdesk.services.auth_service import AuthService
from src.briefdesk.services.briefing_service import BriefingService
from src.briefdesk.services.client_service import ClientService
from src.briefdesk.services.credential_service import CredentialService
from src.briefdesk.services.intake_service import IntakeService
from src.briefdesk.services.project_service import ProjectService

__all__ = [
    "AuthService",
    "BriefingService",
    "ClientService",
    "CredentialService",
    "IntakeService",
    "ProjectService",
]
