from pydantic import BaseModel


class DashboardStats(BaseModel):
    """Project counts per status plus the number of clients."""

    total_projects: int
    awaiting_briefing: int
    in_progress: int
    paused: int
    completed: int
    total_clients: int
