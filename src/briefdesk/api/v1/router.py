from fastapi import APIRouter

from src.briefdesk.api.v1 import auth, briefings, clients, dashboard, intake, projects

api_router = APIRouter(prefix="/api/v1")
api_router.include_router(auth.router)
api_router.include_router(clients.router)
api_router.include_router(projects.router)
api_router.include_router(briefings.router)
api_router.include_router(dashboard.router)
api_router.include_router(intake.router)
