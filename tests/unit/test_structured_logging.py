"""Tests for structured logging context."""

import pytest
import structlog
from structlog.testing import CapturingLogger

from src.briefdesk.core.config import get_settings
from src.briefdesk.core.logging import (
    bind_identity_context,
    bind_request_context,
    clear_request_context,
)

pytestmark = pytest.mark.unit


@pytest.fixture
def capturing_logger():
    """Create a capturing logger for tests."""
    cap_logger = CapturingLogger()

    # Save original configuration to restore later
    old_config = structlog.get_config()

    structlog.configure(
        processors=[structlog.contextvars.merge_contextvars],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=lambda *args, **kwargs: cap_logger,
        cache_logger_on_first_use=False,
    )

    clear_request_context()
    yield cap_logger
    clear_request_context()
    structlog.configure(**old_config)


def test_bind_request_context(capturing_logger):
    bind_request_context("test-request-123")
    structlog.get_logger().info("test message")

    entries = capturing_logger.calls
    assert len(entries) == 1
    assert entries[0].kwargs["request_id"] == "test-request-123"


def test_bind_request_context_with_none(capturing_logger):
    bind_request_context(None)
    structlog.get_logger().info("test message")

    assert "request_id" not in capturing_logger.calls[0].kwargs


def test_bind_identity_context_omits_email_by_default(capturing_logger):
    """Emails are personal data and only logged when log_user_emails is set."""
    bind_identity_context("user-1", "client@example.com", temporary=True)
    structlog.get_logger().info("test message")

    kwargs = capturing_logger.calls[0].kwargs
    assert kwargs["user_id"] == "user-1"
    assert kwargs["temporary_identity"] is True
    assert "user_email" not in kwargs


def test_bind_identity_context_with_email_logging(capturing_logger, monkeypatch):
    monkeypatch.setenv("LOG_USER_EMAILS", "true")
    get_settings.cache_clear()
    try:
        bind_identity_context("user-1", "client@example.com")
        structlog.get_logger().info("test message")
    finally:
        monkeypatch.delenv("LOG_USER_EMAILS")
        get_settings.cache_clear()

    kwargs = capturing_logger.calls[0].kwargs
    assert kwargs["user_email"] == "client@example.com"
    assert kwargs["temporary_identity"] is False


def test_clear_request_context(capturing_logger):
    bind_request_context("req-1")
    bind_identity_context("user-1")
    clear_request_context()
    structlog.get_logger().info("test message")

    kwargs = capturing_logger.calls[0].kwargs
    assert "request_id" not in kwargs
    assert "user_id" not in kwargs
