"""Conversation lifecycle: active / snoozed / archived plus unread facet.

The visible bucket is recomputed from the stored status and snooze config on
every read, so an expired snooze reads as active without any background job
rewriting the record. Transitions return new chat values; the caller writes
them back into its own store.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from datetime import datetime

from crm_console.core.structured_logging import build_log_context
from crm_console.enums import ConversationStatus
from crm_console.schemas.conversation import EnhancedChat, SnoozeConfig
from crm_console.utils.timezones import as_utc

logger = logging.getLogger(__name__)


class ConversationServiceError(Exception):
    """Base exception for conversation lookups."""

    pass


class ChatNotFoundError(ConversationServiceError):
    """Conversation id not present in the collection."""

    pass


# =============================================================================
# Bucket
# =============================================================================


def bucket(chat: EnhancedChat, now: datetime) -> ConversationStatus:
    """Where the conversation currently sits; archiving overrides snooze."""
    if chat.status == ConversationStatus.ARCHIVED:
        return ConversationStatus.ARCHIVED
    if chat.snooze is not None and as_utc(now) < as_utc(chat.snooze.return_at):
        return ConversationStatus.SNOOZED
    return ConversationStatus.ACTIVE


def is_snooze_expired(chat: EnhancedChat, now: datetime) -> bool:
    return chat.snooze is not None and as_utc(now) >= as_utc(chat.snooze.return_at)


def due_for_return(chats: Iterable[EnhancedChat], now: datetime) -> list[EnhancedChat]:
    """Chats still stored as snoozed whose return time has passed."""
    return [
        chat
        for chat in chats
        if chat.status == ConversationStatus.SNOOZED and is_snooze_expired(chat, now)
    ]


# =============================================================================
# Transitions
# =============================================================================


def archive(chat: EnhancedChat) -> EnhancedChat:
    _log_transition(chat, "archive")
    return chat.model_copy(update={"status": ConversationStatus.ARCHIVED, "snooze": None})


def unarchive(chat: EnhancedChat) -> EnhancedChat:
    _log_transition(chat, "unarchive")
    return chat.model_copy(update={"status": ConversationStatus.ACTIVE, "snooze": None})


def snooze(chat: EnhancedChat, config: SnoozeConfig) -> EnhancedChat:
    """Snooze until ``config.return_at``, replacing any earlier snooze."""
    _log_transition(chat, "snooze")
    return chat.model_copy(update={"status": ConversationStatus.SNOOZED, "snooze": config})


def cancel_snooze(chat: EnhancedChat) -> EnhancedChat:
    _log_transition(chat, "cancel_snooze")
    return chat.model_copy(update={"status": ConversationStatus.ACTIVE, "snooze": None})


def return_to_inbox(chats: Sequence[EnhancedChat], now: datetime) -> list[EnhancedChat]:
    """Persistable form of expired snoozes: clears them and marks active."""
    due_ids = {chat.id for chat in due_for_return(chats, now)}
    return [cancel_snooze(chat) if chat.id in due_ids else chat for chat in chats]


def mark_unread(chat: EnhancedChat) -> EnhancedChat:
    return chat.model_copy(update={"unread": True})


def mark_read(chat: EnhancedChat) -> EnhancedChat:
    return chat.model_copy(update={"unread": False})


# =============================================================================
# Collection helpers
# =============================================================================


def get_chat(chats: Iterable[EnhancedChat], chat_id: str) -> EnhancedChat:
    for chat in chats:
        if chat.id == chat_id:
            return chat
    raise ChatNotFoundError(f"Conversation {chat_id} not found")


def replace_chat(chats: Sequence[EnhancedChat], updated: EnhancedChat) -> list[EnhancedChat]:
    """Swap in an updated chat, keeping collection order."""
    if not any(chat.id == updated.id for chat in chats):
        raise ChatNotFoundError(f"Conversation {updated.id} not found")
    return [updated if chat.id == updated.id else chat for chat in chats]


def _log_transition(chat: EnhancedChat, operation: str) -> None:
    logger.info(
        "Conversation transition %s",
        operation,
        extra=build_log_context(entity_id=chat.id, entity_type="conversation", operation=operation),
    )
