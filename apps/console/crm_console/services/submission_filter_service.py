"""Lead list filtering: type, search, resolved status and assignee."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any, TypeVar

from crm_console.core.config import settings
from crm_console.core.constants import FILTER_ALL, FILTER_UNASSIGNED
from crm_console.schemas.filters import SubmissionFilters
from crm_console.schemas.submission import is_consistent
from crm_console.services.submission_status_service import resolve_display_status
from crm_console.utils.timezones import as_utc

S = TypeVar("S")


def normalize_search_term(term: str | None) -> str:
    """Lower-cased, trimmed search term capped at the configured length."""
    if not term:
        return ""
    return term.strip()[: settings.SEARCH_TERM_MAX_LENGTH].lower()


def matches_type(submission: Any, type_filter: str) -> bool:
    if type_filter == FILTER_ALL:
        return True
    return getattr(submission, "type", None) == type_filter


def matches_search(submission: Any, term: str) -> bool:
    """Substring match on number, customer name, email and subject.

    ``term`` must already be normalized.
    """
    if not term:
        return True
    haystacks = (
        getattr(submission, "submission_number", None),
        getattr(submission, "customer_name", None),
        getattr(submission, "customer_email", None),
        getattr(submission, "subject", None),
    )
    return any(value and term in value.lower() for value in haystacks)


def matches_status(submission: Any, status_filter: str) -> bool:
    if status_filter == FILTER_ALL:
        return True
    # Records whose payload disagrees with their tag never match a status
    if not is_consistent(submission):
        return False
    return resolve_display_status(submission) == status_filter


def matches_assignee(submission: Any, assignee_filter: str) -> bool:
    if assignee_filter == FILTER_ALL:
        return True
    assignee = getattr(submission, "assignee", None)
    if assignee_filter == FILTER_UNASSIGNED:
        return assignee is None
    return assignee is not None and assignee.staff_id == assignee_filter


def filter_submissions(
    submissions: Iterable[S],
    filters: SubmissionFilters | None = None,
) -> list[S]:
    """
    Apply every filter dimension (ANDed) and sort newest first.

    The sort is stable: submissions created at the same instant keep their
    relative input order.
    """
    filters = filters or SubmissionFilters()
    term = normalize_search_term(filters.search_term)
    type_filter = _raw(filters.type_filter)
    status_filter = _raw(filters.status_filter)

    matched = [
        submission
        for submission in submissions
        if matches_type(submission, type_filter)
        and matches_search(submission, term)
        and matches_status(submission, status_filter)
        and matches_assignee(submission, filters.assignee_filter)
    ]
    return sorted(matched, key=lambda submission: as_utc(submission.created_at), reverse=True)


def _raw(value: Any) -> str:
    return getattr(value, "value", value)
