"""Database utilities - engine, session."""

from src.briefdesk.core.db.engine import dispose_engine, get_engine
from src.briefdesk.core.db.session import get_session

__all__ = [
    # Engine
    "dispose_engine",
    "get_engine",
    # Session
    "get_session",
]
