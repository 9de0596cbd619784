from typing import Any

from fastapi import APIRouter
from fastapi.responses import JSONResponse
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from src.briefdesk.core.config import get_settings
from src.briefdesk.core.db import get_session

router = APIRouter(tags=["health"])


@router.get("/health")
async def health() -> JSONResponse:
    """Database reachability plus whether the identity provider is configured.

    A missing identity configuration degrades the service (credentials and
    logins fail) but does not make it unhealthy.
    """
    identity_configured = get_settings().identity_configured
    body: dict[str, Any] = {
        "status": "healthy" if identity_configured else "degraded",
        "database": "unknown",
        "identity": "configured" if identity_configured else "not_configured",
    }

    try:
        async with get_session() as session:
            await session.execute(text("SELECT 1"))
        body["database"] = "healthy"
    except (SQLAlchemyError, OSError) as e:
        body["database"] = f"unhealthy: {e}"
        body["status"] = "unhealthy"

    return JSONResponse(content=body, status_code=503 if body["status"] == "unhealthy" else 200)
