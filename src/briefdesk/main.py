from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded

from src.briefdesk.api.health import router as health_router
from src.briefdesk.api.middlewares import setup_middlewares
from src.briefdesk.api.temp_users import router as temp_users_router
from src.briefdesk.api.v1.router import api_router
from src.briefdesk.core.config import get_settings
from src.briefdesk.core.db import dispose_engine
from src.briefdesk.core.exceptions import setup_exception_handlers
from src.briefdesk.core.identity import close_identity_client
from src.briefdesk.core.logging import get_logger, setup_logging
from src.briefdesk.core.metrics import setup_metrics
from src.briefdesk.core.rate_limit import limiter

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None]:
    """Application lifespan - startup and shutdown."""
    settings = get_settings()
    setup_logging(settings.debug)
    logger.info("Starting application", app=settings.app_name, env=settings.app_env)
    if not settings.identity_service_role_key:
        logger.warning("Identity service-role key missing, credential endpoints will fail")

    yield

    await close_identity_client()
    await dispose_engine()
    logger.info("Shutdown complete")


OPENAPI_TAGS = [
    {"name": "auth", "description": "Owner sign-in"},
    {"name": "clients", "description": "Client registry"},
    {"name": "projects", "description": "Projects and their briefing credentials"},
    {"name": "briefings", "description": "Submitted briefings"},
    {"name": "dashboard", "description": "Overview statistics"},
    {"name": "intake", "description": "Client-facing briefing form"},
    {"name": "temp-users", "description": "Temporary briefing credential lifecycle"},
]


def create_app() -> FastAPI:
    settings = get_settings()
    docs_enabled = settings.enable_openapi

    app = FastAPI(
        title=settings.app_name,
        description="Client briefing intake for freelancers",
        version="0.1.0",
        openapi_tags=OPENAPI_TAGS,
        lifespan=lifespan,
        docs_url="/docs" if docs_enabled else None,
        redoc_url="/redoc" if docs_enabled else None,
        openapi_url="/openapi.json" if docs_enabled else None,
    )

    setup_exception_handlers(app)
    app.state.limiter = limiter
    app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)  # type: ignore[arg-type]

    setup_middlewares(app, settings)

    app.include_router(health_router)
    app.include_router(temp_users_router)
    app.include_router(api_router)

    setup_metrics(app, settings)

    return app


app = create_app()
