"""Tests for cursor pagination of project lists."""

from datetime import timedelta

import pytest

from src.briefdesk.models.base import utc_now
from src.briefdesk.repositories import ProjectRepository
from src.briefdesk.schemas.pagination import decode_cursor, encode_cursor
from tests.factories import ClientFactory, ProjectFactory

pytestmark = pytest.mark.unit


def test_cursor_round_trip_of_timestamp():
    stamp = utc_now().isoformat()
    assert decode_cursor(encode_cursor(stamp)) == stamp


def test_garbage_cursor_rejected():
    with pytest.raises(ValueError):
        decode_cursor("%%%not-base64%%%")


async def test_pages_walk_newest_first(db_session):
    client = ClientFactory.build()
    db_session.add(client)
    now = utc_now()
    for minutes in range(5):
        db_session.add(
            ProjectFactory.build(
                client_id=client.id,
                name=f"p{minutes}",
                created_at=now - timedelta(minutes=minutes),
            )
        )
    await db_session.commit()
    repo = ProjectRepository(db_session)

    first, cursor, has_more = await repo.list_all(limit=2)
    assert [p.name for p in first] == ["p0", "p1"]
    assert has_more is True

    second, cursor, has_more = await repo.list_all(cursor=cursor, limit=2)
    assert [p.name for p in second] == ["p2", "p3"]

    last, cursor, has_more = await repo.list_all(cursor=cursor, limit=2)
    assert [p.name for p in last] == ["p4"]
    assert has_more is False
    assert cursor is None


async def test_invalid_cursor_starts_from_beginning(db_session):
    client = ClientFactory.build()
    db_session.add(client)
    db_session.add(ProjectFactory.build(client_id=client.id))
    await db_session.commit()

    items, _, _ = await ProjectRepository(db_session).list_all(cursor="garbage")

    assert len(items) == 1
