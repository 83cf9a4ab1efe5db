"""Tests for conversation lifecycle transitions and bucket computation."""

from datetime import datetime, timedelta
from zoneinfo import ZoneInfo

import pytest

from crm_console.enums import ConversationStatus, SnoozePreset
from crm_console.schemas import SnoozeConfig
from crm_console.services.conversation_lifecycle_service import (
    ChatNotFoundError,
    archive,
    bucket,
    cancel_snooze,
    due_for_return,
    get_chat,
    is_snooze_expired,
    mark_read,
    mark_unread,
    replace_chat,
    return_to_inbox,
    snooze,
    unarchive,
)
from crm_console.services.snooze_service import build_snooze


@pytest.fixture
def snooze_until(now):
    def _config(hours: int = 2) -> SnoozeConfig:
        return SnoozeConfig(preset=SnoozePreset.CUSTOM, return_at=now + timedelta(hours=hours))

    return _config


def test_new_chat_is_active(make_chat, now):
    assert bucket(make_chat(), now) == ConversationStatus.ACTIVE


def test_snoozed_chat_returns_to_active_at_return_time(make_chat, snooze_until, now):
    chat = snooze(make_chat(), snooze_until(2))

    assert bucket(chat, now) == ConversationStatus.SNOOZED
    assert bucket(chat, now + timedelta(hours=2)) == ConversationStatus.ACTIVE


@pytest.mark.parametrize(
    "offset,expected",
    [
        (timedelta(minutes=-90), ConversationStatus.SNOOZED),
        (timedelta(seconds=-1), ConversationStatus.SNOOZED),
        (timedelta(0), ConversationStatus.ACTIVE),
        (timedelta(seconds=1), ConversationStatus.ACTIVE),
        (timedelta(days=3), ConversationStatus.ACTIVE),
    ],
)
def test_bucket_around_return_time(make_chat, snooze_until, now, offset, expected):
    config = snooze_until(2)
    chat = snooze(make_chat(), config)

    assert bucket(chat, config.return_at + offset) == expected


def test_archive_overrides_snooze(make_chat, snooze_until, now):
    snoozed = snooze(make_chat(), snooze_until(2))

    archived = archive(snoozed)

    assert archived.snooze is None
    assert bucket(archived, now) == ConversationStatus.ARCHIVED
    assert bucket(archived, now + timedelta(days=30)) == ConversationStatus.ARCHIVED


def test_stored_archived_status_wins_even_with_snooze_config(make_chat, snooze_until, now):
    chat = make_chat(status=ConversationStatus.ARCHIVED, snooze=snooze_until(2))

    assert bucket(chat, now) == ConversationStatus.ARCHIVED


def test_unarchive_returns_to_active(make_chat, now):
    chat = unarchive(archive(make_chat()))

    assert chat.status == ConversationStatus.ACTIVE
    assert bucket(chat, now) == ConversationStatus.ACTIVE


def test_snooze_replaces_previous_snooze(make_chat, snooze_until, now):
    chat = snooze(snooze(make_chat(), snooze_until(2)), snooze_until(48))

    assert chat.snooze.return_at == now + timedelta(hours=48)
    assert bucket(chat, now + timedelta(hours=3)) == ConversationStatus.SNOOZED


def test_cancel_snooze_clears_config(make_chat, snooze_until, now):
    chat = cancel_snooze(snooze(make_chat(), snooze_until(2)))

    assert chat.snooze is None
    assert chat.status == ConversationStatus.ACTIVE
    assert bucket(chat, now) == ConversationStatus.ACTIVE


def test_transitions_do_not_mutate_input(make_chat, snooze_until):
    original = make_chat()

    archive(original)
    snooze(original, snooze_until(2))
    mark_unread(original)

    assert original.status == ConversationStatus.ACTIVE
    assert original.snooze is None
    assert original.unread is False


def test_unread_is_independent_of_bucket(make_chat, now):
    chat = mark_unread(archive(make_chat()))

    assert chat.unread is True
    assert bucket(chat, now) == ConversationStatus.ARCHIVED
    assert mark_read(chat).unread is False


def test_due_for_return_and_return_to_inbox(make_chat, snooze_until, now):
    expired = snooze(make_chat("chat-1"), snooze_until(1))
    pending = snooze(make_chat("chat-2"), snooze_until(5))
    active = make_chat("chat-3")
    chats = [expired, pending, active]
    later = now + timedelta(hours=2)

    assert [chat.id for chat in due_for_return(chats, later)] == ["chat-1"]

    returned = return_to_inbox(chats, later)

    assert [chat.id for chat in returned] == ["chat-1", "chat-2", "chat-3"]
    assert returned[0].status == ConversationStatus.ACTIVE
    assert returned[0].snooze is None
    assert returned[1] is pending
    assert returned[2] is active


def test_get_chat_and_replace_chat(make_chat):
    chats = [make_chat("chat-1"), make_chat("chat-2")]

    updated = archive(get_chat(chats, "chat-2"))
    result = replace_chat(chats, updated)

    assert [chat.status for chat in result] == [ConversationStatus.ACTIVE, ConversationStatus.ARCHIVED]
    assert chats[1].status == ConversationStatus.ACTIVE


def test_missing_chat_raises(make_chat):
    chats = [make_chat("chat-1")]

    with pytest.raises(ChatNotFoundError):
        get_chat(chats, "chat-404")
    with pytest.raises(ChatNotFoundError):
        replace_chat(chats, make_chat("chat-404"))


def test_expired_snooze_is_active_during_repeated_hour(make_chat):
    new_york = ZoneInfo("America/New_York")
    # 21:30 EDT + 4h -> 01:30 EDT on 2025-11-02 (05:30 UTC)
    snoozed_at = datetime(2025, 11, 1, 21, 30, tzinfo=new_york)
    chat = snooze(make_chat(), build_snooze(SnoozePreset.LATER_TODAY, snoozed_at))

    first_pass = datetime(2025, 11, 2, 1, 20, tzinfo=new_york)  # 05:20 UTC
    second_pass = datetime(2025, 11, 2, 1, 20, fold=1, tzinfo=new_york)  # 06:20 UTC

    assert bucket(chat, first_pass) == ConversationStatus.SNOOZED
    assert bucket(chat, second_pass) == ConversationStatus.ACTIVE
    assert is_snooze_expired(chat, second_pass)


def test_naive_now_is_read_in_default_timezone(make_chat, snooze_until):
    # Return time is 15:00 UTC; the default timezone is UTC
    chat = snooze(make_chat(), snooze_until(2))

    assert bucket(chat, datetime(2025, 3, 5, 14, 59)) == ConversationStatus.SNOOZED
    assert bucket(chat, datetime(2025, 3, 5, 15, 0)) == ConversationStatus.ACTIVE
    assert [c.id for c in due_for_return([chat], datetime(2025, 3, 5, 16, 0))] == ["chat-1"]
