"""Inbox filtering: tab bucket, search, labels and assignment.

Input order is preserved. Ordering (pinning unread chats, recency) is left to
the caller; no canonical chat sort exists.
"""

from __future__ import annotations

from collections.abc import Iterable
from datetime import datetime

from crm_console.core.constants import FILTER_UNASSIGNED
from crm_console.enums import ConversationStatus, InboxTab
from crm_console.schemas.conversation import EnhancedChat
from crm_console.schemas.filters import ConversationFilters
from crm_console.services.conversation_lifecycle_service import bucket
from crm_console.services.submission_filter_service import normalize_search_term

TAB_BUCKETS: dict[InboxTab, frozenset[ConversationStatus]] = {
    InboxTab.ACTIVE: frozenset({ConversationStatus.ACTIVE, ConversationStatus.SNOOZED}),
    InboxTab.ARCHIVED: frozenset({ConversationStatus.ARCHIVED}),
}


def matches_tab(chat: EnhancedChat, tab: InboxTab, now: datetime) -> bool:
    return bucket(chat, now) in TAB_BUCKETS[InboxTab(tab)]


def matches_search(chat: EnhancedChat, term: str) -> bool:
    """Substring match on contact name, number and last message text."""
    if not term:
        return True
    haystacks = (
        chat.contact.push_name,
        chat.contact.number,
        chat.last_message.text if chat.last_message else None,
    )
    return any(value and term in value.lower() for value in haystacks)


def matches_labels(chat: EnhancedChat, label_filter: frozenset[str]) -> bool:
    """Any selected label is enough."""
    if not label_filter:
        return True
    return not chat.label_ids.isdisjoint(label_filter)


def matches_assignment(chat: EnhancedChat, assignment_filter: str | None) -> bool:
    if assignment_filter is None:
        return True
    if assignment_filter == FILTER_UNASSIGNED:
        return chat.assignment is None
    return chat.assignment is not None and chat.assignment.assigned_to.id == assignment_filter


def filter_conversations(
    chats: Iterable[EnhancedChat],
    filters: ConversationFilters | None,
    now: datetime,
) -> list[EnhancedChat]:
    """Chats matching every filter dimension, in input order."""
    filters = filters or ConversationFilters()
    term = normalize_search_term(filters.search_term)
    return [
        chat
        for chat in chats
        if matches_tab(chat, filters.tab, now)
        and matches_search(chat, term)
        and matches_labels(chat, filters.label_filter)
        and matches_assignment(chat, filters.assignment_filter)
    ]
