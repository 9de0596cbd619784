"""Rate limiting for credential endpoints.

Temporary briefing passwords are four digits, so the login endpoints are the
obvious brute-force target. Limits are per client IP and kept in memory
(per-process).
"""

from slowapi import Limiter
from slowapi.util import get_remote_address
from starlette.requests import Request

from src.briefdesk.core.config import get_settings
from src.briefdesk.core.logging import get_logger

logger = get_logger(__name__)


def get_rate_limit_key(request: Request) -> str:
    """Rate limit key from client IP only.

    Never include user-controlled headers here: rotating them would create
    unlimited new buckets.
    """
    return get_remote_address(request) or "unknown"


def login_rate_limit() -> str:
    """Login limit, read lazily so tests can override settings."""
    return get_settings().login_rate_limit


def create_limiter() -> Limiter:
    """Create the rate limiter. Disabled in the testing environment."""
    settings = get_settings()

    if settings.app_env == "testing":
        logger.info("Rate limiter disabled (testing environment)")
        return Limiter(key_func=get_rate_limit_key, enabled=False)

    logger.info("Rate limiter using in-memory backend (not distributed)")
    return Limiter(key_func=get_rate_limit_key)


limiter = create_limiter()
