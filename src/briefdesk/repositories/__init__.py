"""Repository layer - data access abstraction."""

from src.briefdesk.repositories.base import BaseRepository
from src.briefdesk.repositories.briefing import BriefingRepository
from src.briefdesk.repositories.client import ClientRepository
from src.briefdesk.repositories.project import ProjectRepository
from src.briefdesk.repositories.temp_credential import TempCredentialRepository

__all__ = [
    "BaseRepository",
    "BriefingRepository",
    "ClientRepository",
    "ProjectRepository",
    "TempCredentialRepository",
]
