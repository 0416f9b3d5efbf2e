# tests/test_feed_service.py
"""Tests for the message feed service."""

from datetime import UTC, datetime
from unittest.mock import patch

import pytest
from sqlalchemy.exc import OperationalError

from huddle.core.errors import UnexpectedError, ValidationError
from huddle.models import Message
from huddle.schemas.user import Claims
from huddle.services.feed import FeedService


@pytest.fixture()
def alice_claims(alice) -> Claims:
    return Claims(id=alice.user.id, username=alice.user.username, email=alice.user.email)


def test_post_message_trims_and_attributes(db_session, feed_service, alice_claims):
    record = feed_service.post_message(db_session, alice_claims, "  hello  ")

    assert record.message == "hello"
    assert record.username == "alice"
    assert record.id > 0
    assert record.created_at.tzinfo is not None

    stored = db_session.get(Message, record.id)
    assert stored.user_id == alice_claims.id
    assert stored.username == "alice"


@pytest.mark.parametrize("text", [None, "", "   ", "\n\t"])
def test_post_message_rejects_empty(db_session, feed_service, alice_claims, text):
    with pytest.raises(ValidationError, match="Message cannot be empty"):
        feed_service.post_message(db_session, alice_claims, text)


def test_post_message_length_limit(db_session, feed_service, alice_claims):
    assert feed_service.post_message(db_session, alice_claims, "x" * 500).message == "x" * 500

    with pytest.raises(ValidationError, match="at most 500 characters"):
        feed_service.post_message(db_session, alice_claims, "x" * 501)


def test_post_message_ids_increase(db_session, feed_service, alice_claims):
    ids = [feed_service.post_message(db_session, alice_claims, f"m{i}").id for i in range(3)]

    assert ids == sorted(ids)
    assert len(set(ids)) == 3


def test_list_recent_empty(db_session, feed_service):
    assert feed_service.list_recent(db_session) == []


def test_list_recent_is_bounded_and_ascending(db_session, alice_claims):
    service = FeedService(window_size=50)
    for i in range(55):
        service.post_message(db_session, alice_claims, f"message {i}")

    records = service.list_recent(db_session)

    assert len(records) == 50
    assert [r.message for r in records] == [f"message {i}" for i in range(5, 55)]
    assert [r.id for r in records] == sorted(r.id for r in records)


def test_list_recent_ties_follow_insertion_order(db_session, feed_service, alice_claims):
    same_instant = datetime(2026, 3, 1, 10, 0, tzinfo=UTC)
    for text in ("first", "second", "third"):
        db_session.add(
            Message(
                user_id=alice_claims.id,
                username="alice",
                message=text,
                created_at=same_instant,
            )
        )
        db_session.flush()
    db_session.commit()

    records = feed_service.list_recent(db_session)

    assert [r.message for r in records] == ["first", "second", "third"]


def test_list_recent_window_keeps_newest_ties(db_session, alice_claims):
    service = FeedService(window_size=2)
    same_instant = datetime(2026, 3, 1, 10, 0, tzinfo=UTC)
    for text in ("a", "b", "c"):
        db_session.add(
            Message(user_id=alice_claims.id, username="alice", message=text, created_at=same_instant)
        )
        db_session.flush()
    db_session.commit()

    assert [r.message for r in service.list_recent(db_session)] == ["b", "c"]


def test_list_recent_is_idempotent(db_session, feed_service, alice_claims):
    for text in ("one", "two"):
        feed_service.post_message(db_session, alice_claims, text)

    assert feed_service.list_recent(db_session) == feed_service.list_recent(db_session)


def test_fetch_failure_is_unexpected(db_session, feed_service):
    with patch(
        "huddle.services.feed.MessageRepository.list_recent",
        side_effect=OperationalError("SELECT", {}, Exception("database is locked")),
    ):
        with pytest.raises(UnexpectedError, match="Failed to fetch messages"):
            feed_service.list_recent(db_session)


def test_store_failure_is_unexpected(db_session, feed_service, alice_claims):
    with patch(
        "huddle.services.feed.MessageRepository.create",
        side_effect=OperationalError("INSERT", {}, Exception("database is locked")),
    ):
        with pytest.raises(UnexpectedError, match="Failed to send message"):
            feed_service.post_message(db_session, alice_claims, "hello")
