"""Cursor-based pagination for list endpoints."""

import base64
import binascii
from typing import Generic, TypeVar

from pydantic import BaseModel, Field

T = TypeVar("T")


class PaginatedResponse(BaseModel, Generic[T]):
    """A page of items, newest first.

    ``next_cursor`` is opaque to clients: pass it back unchanged to get the
    following page.
    """

    items: list[T]
    next_cursor: str | None = Field(
        default=None,
        description="Cursor for the next page. None on the last page.",
    )
    has_more: bool = Field(default=False, description="Whether another page exists.")


def encode_cursor(value: str) -> str:
    """Wrap a position (an ISO timestamp) into an opaque cursor."""
    return base64.urlsafe_b64encode(value.encode()).decode()


def decode_cursor(cursor: str) -> str:
    """Unwrap a cursor produced by ``encode_cursor``.

    Raises:
        ValueError: If the cursor is not one of ours
    """
    try:
        return base64.urlsafe_b64decode(cursor.encode()).decode()
    except (binascii.Error, UnicodeDecodeError) as e:
        raise ValueError("Invalid cursor") from e
