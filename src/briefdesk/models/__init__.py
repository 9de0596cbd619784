"""Model exports.

Import from here: `from src.briefdesk.models import Project, Client`
"""

from src.briefdesk.models.briefing import Briefing
from src.briefdesk.models.client import Client
from src.briefdesk.models.enums import BriefingStatus, ProjectStatus
from src.briefdesk.models.project import Project
from src.briefdesk.models.temp_credential import TempCredential

__all__ = [
    # Enums
    "BriefingStatus",
    "ProjectStatus",
    # Tables
    "Briefing",
    "Client",
    "Project",
    "TempCredential",
]
