"""Prometheus metrics exposure."""

import secrets
from collections.abc import Awaitable, Callable

from fastapi import Depends, FastAPI, HTTPException, status
from fastapi.security import APIKeyHeader
from prometheus_fastapi_instrumentator import Instrumentator

from src.briefdesk.core.config import Settings

METRICS_PATH = "/metrics"

_metrics_key_header = APIKeyHeader(name="X-Metrics-Key", auto_error=False)


def _require_metrics_key(expected: str) -> Callable[..., Awaitable[None]]:
    async def verify(api_key: str | None = Depends(_metrics_key_header)) -> None:
        if api_key is None or not secrets.compare_digest(api_key, expected):
            raise HTTPException(
                status_code=status.HTTP_401_UNAUTHORIZED,
                detail="Invalid or missing metrics API key",
            )

    return verify


def setup_metrics(app: FastAPI, settings: Settings) -> None:
    """Instrument request metrics and expose them, behind a key when one is set."""
    instrumentator = Instrumentator(excluded_handlers=[METRICS_PATH, "/health"]).instrument(app)
    dependencies = []
    if settings.metrics_api_key:
        dependencies.append(Depends(_require_metrics_key(settings.metrics_api_key)))
    instrumentator.expose(app, endpoint=METRICS_PATH, dependencies=dependencies)
