"""Project factory for test data generation."""

from uuid import uuid4

from polyfactory import Use

from src.briefdesk.models import Project, ProjectStatus
from src.briefdesk.models.base import utc_now
from tests.factories.base import BaseFactory


class ProjectFactory(BaseFactory):
    """Factory for generating Project test data. Pass ``client_id``."""

    __model__ = Project

    id = Use(uuid4)
    name = Use(lambda: f"Project {uuid4().hex[:6]}")
    description = None
    status = ProjectStatus.AWAITING_BRIEFING.value
    briefing_completed = False
    briefing_url = ""
    internal_notes = None
    start_date = None
    due_date = None
    budget = None
    created_at = Use(utc_now)
    updated_at = Use(utc_now)

    @classmethod
    def submitted(cls, **kwargs):
        """A project whose briefing has already been received."""
        return cls.build(
            briefing_completed=True, status=ProjectStatus.IN_PROGRESS.value, **kwargs
        )
