"""Triage counters for the lead dashboard and the inbox.

One predicate per metric, all evaluated on the resolved display status:

    pending_assignment  no assignee and not terminal
    awaiting_response   new, pending or in_progress
    needs_attention     inquiry new, signup pending, onboarding new
    new_today           created at or after local midnight of ``now``
"""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Sequence
from datetime import datetime
from typing import Any, TypedDict

from crm_console.enums import ConversationStatus, DisplayStatus, SubmissionType
from crm_console.schemas.conversation import EnhancedChat
from crm_console.services.conversation_lifecycle_service import bucket
from crm_console.services.submission_status_service import is_terminal, resolve_display_status
from crm_console.utils.timezones import as_aware, as_utc

ATTENTION_STATUS_BY_TYPE: dict[str, DisplayStatus] = {
    SubmissionType.INQUIRY.value: DisplayStatus.NEW,
    SubmissionType.SIGNUP.value: DisplayStatus.PENDING,
    SubmissionType.ONBOARDING.value: DisplayStatus.NEW,
}


class LeadStats(TypedDict):
    """Lead dashboard counters."""

    total: int
    new_today: int
    pending_assignment: int
    awaiting_response: int
    by_type: dict[str, int]
    by_status: dict[str, int]


class InboxCounts(TypedDict):
    """Inbox tab badges and facet counts."""

    active: int  # active tab, includes snoozed
    archived: int
    snoozed: int
    unread: int
    unassigned: int


def start_of_day(now: datetime) -> datetime:
    return as_aware(now).replace(hour=0, minute=0, second=0, microsecond=0, fold=0)


# =============================================================================
# Predicates
# =============================================================================


def is_pending_assignment(submission: Any) -> bool:
    return submission.assignee is None and not is_terminal(resolve_display_status(submission))


def is_awaiting_response(submission: Any) -> bool:
    return resolve_display_status(submission) in DisplayStatus.awaiting_response()


def needs_attention(submission: Any) -> bool:
    expected = ATTENTION_STATUS_BY_TYPE.get(getattr(submission, "type", None))
    return expected is not None and resolve_display_status(submission) == expected


# =============================================================================
# Lead counters
# =============================================================================


def type_counts(submissions: Iterable[Any]) -> dict[str, int]:
    """Per-type totals plus "all"."""
    counts = Counter(getattr(submission, "type", None) for submission in submissions)
    result = {"all": sum(counts.values())}
    for submission_type in SubmissionType:
        result[submission_type.value] = counts.get(submission_type.value, 0)
    return result


def attention_counts(submissions: Iterable[Any]) -> dict[str, int]:
    """Badge counts of items needing staff action, per type."""
    counts = {submission_type.value: 0 for submission_type in SubmissionType}
    for submission in submissions:
        if needs_attention(submission):
            counts[submission.type] += 1
    return counts


def lead_stats(submissions: Sequence[Any], now: datetime) -> LeadStats:
    today = as_utc(start_of_day(now))
    by_status = Counter(resolve_display_status(submission).value for submission in submissions)
    return LeadStats(
        total=len(submissions),
        new_today=sum(1 for submission in submissions if as_utc(submission.created_at) >= today),
        pending_assignment=sum(1 for submission in submissions if is_pending_assignment(submission)),
        awaiting_response=sum(1 for submission in submissions if is_awaiting_response(submission)),
        by_type={key: value for key, value in type_counts(submissions).items() if key != "all"},
        by_status={status.value: by_status.get(status.value, 0) for status in DisplayStatus},
    )


# =============================================================================
# Inbox counters
# =============================================================================


def inbox_counts(chats: Sequence[EnhancedChat], now: datetime) -> InboxCounts:
    buckets = Counter(bucket(chat, now) for chat in chats)
    return InboxCounts(
        active=buckets[ConversationStatus.ACTIVE] + buckets[ConversationStatus.SNOOZED],
        archived=buckets[ConversationStatus.ARCHIVED],
        snoozed=buckets[ConversationStatus.SNOOZED],
        unread=sum(1 for chat in chats if chat.unread),
        unassigned=sum(1 for chat in chats if chat.assignment is None),
    )


def assignment_counts(chats: Iterable[EnhancedChat]) -> dict[str, int]:
    """Conversations per assigned staff id (team workload)."""
    return dict(Counter(chat.assignment.assigned_to.id for chat in chats if chat.assignment))
