"""Submission transitions (status, reply, verification, scheduling) and lookups.

Every transition returns a new submission; nothing is mutated in place.
Submissions are never deleted, only moved to a terminal status.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from datetime import date, datetime, time
from typing import TypeVar

from crm_console.core.structured_logging import build_log_context
from crm_console.enums import SubmissionStatus, SubmissionType, VerificationStatus
from crm_console.schemas.submission import SubmissionBase, is_consistent

logger = logging.getLogger(__name__)

S = TypeVar("S", bound=SubmissionBase)


class SubmissionServiceError(Exception):
    """Base exception for submission service errors."""

    pass


class SubmissionNotFoundError(SubmissionServiceError):
    """Submission id not present in the collection."""

    pass


class InvalidTransitionError(SubmissionServiceError):
    """Transition does not apply to this submission type or status."""

    pass


# =============================================================================
# Lookups
# =============================================================================


def get_submission(submissions: Iterable[S], submission_id: str) -> S:
    for submission in submissions:
        if submission.id == submission_id:
            return submission
    raise SubmissionNotFoundError(f"Submission {submission_id} not found")


def replace_submission(submissions: Sequence[S], updated: S) -> list[S]:
    """Swap in an updated submission, keeping collection order."""
    if not any(submission.id == updated.id for submission in submissions):
        raise SubmissionNotFoundError(f"Submission {updated.id} not found")
    return [updated if submission.id == updated.id else submission for submission in submissions]


# =============================================================================
# Inquiries
# =============================================================================


def change_inquiry_status(
    submission: S,
    status: SubmissionStatus | str,
    now: datetime,
) -> S:
    """Set an inquiry's status; moving to responded stamps responded_at."""
    _require_type(submission, SubmissionType.INQUIRY)
    try:
        status = SubmissionStatus(status)
    except ValueError:
        raise InvalidTransitionError(f"Unknown inquiry status: {status!r}")

    update: dict[str, object] = {"status": status, "updated_at": now}
    if status == SubmissionStatus.RESPONDED:
        update["responded_at"] = now
    _log(submission, "change_status")
    return submission.model_copy(update=update)


def record_reply(submission: S, now: datetime) -> S:
    """
    Record that staff replied to the customer.

    Inquiries move to responded; other types only get the timestamp since
    their lifecycle lives in the payload.
    """
    update: dict[str, object] = {"responded_at": now, "updated_at": now}
    if submission.type == SubmissionType.INQUIRY.value:
        update["status"] = SubmissionStatus.RESPONDED
    _log(submission, "record_reply")
    return submission.model_copy(update=update)


# =============================================================================
# Signups
# =============================================================================


def approve_signup(submission: S, now: datetime) -> S:
    return _set_verification(
        submission, VerificationStatus.VERIFIED, SubmissionStatus.RESPONDED, now
    )


def reject_signup(submission: S, now: datetime) -> S:
    return _set_verification(
        submission, VerificationStatus.REJECTED, SubmissionStatus.CLOSED, now
    )


def _set_verification(
    submission: S,
    verification: VerificationStatus,
    status: SubmissionStatus,
    now: datetime,
) -> S:
    _require_type(submission, SubmissionType.SIGNUP)
    metadata = submission.metadata.model_copy(update={"verification_status": verification})
    _log(submission, f"signup_{verification.value}")
    return submission.model_copy(
        update={
            "metadata": metadata,
            "status": status,
            "responded_at": now,
            "updated_at": now,
        }
    )


# =============================================================================
# Onboarding
# =============================================================================


def schedule_onboarding(
    submission: S,
    day: date | str,
    at: time | str,
    now: datetime,
) -> S:
    """Book the consultation call. The display status becomes scheduled."""
    _require_type(submission, SubmissionType.ONBOARDING)
    if submission.status == SubmissionStatus.CLOSED:
        raise InvalidTransitionError("Cannot schedule a completed onboarding request")

    if isinstance(day, datetime):
        day = day.date()
    scheduled_date = day.isoformat() if isinstance(day, date) else day.strip()
    scheduled_time = at.strftime("%H:%M") if isinstance(at, time) else at.strip()
    if not scheduled_date:
        raise InvalidTransitionError("Scheduled date is required")

    metadata = submission.metadata.model_copy(
        update={"scheduled_date": scheduled_date, "scheduled_time": scheduled_time or None}
    )
    _log(submission, "schedule")
    return submission.model_copy(
        update={
            "metadata": metadata,
            "status": SubmissionStatus.IN_PROGRESS,
            "updated_at": now,
        }
    )


def complete_onboarding(submission: S, now: datetime) -> S:
    _require_type(submission, SubmissionType.ONBOARDING)
    _log(submission, "complete")
    return submission.model_copy(
        update={
            "status": SubmissionStatus.CLOSED,
            "responded_at": now,
            "updated_at": now,
        }
    )


def reopen_onboarding(submission: S, now: datetime) -> S:
    """Back to new: clears any booked call."""
    _require_type(submission, SubmissionType.ONBOARDING)
    metadata = submission.metadata.model_copy(
        update={"scheduled_date": None, "scheduled_time": None}
    )
    _log(submission, "reopen")
    return submission.model_copy(
        update={"metadata": metadata, "status": SubmissionStatus.NEW, "updated_at": now}
    )


def _require_type(submission: SubmissionBase, expected: SubmissionType) -> None:
    if submission.type != expected.value or not is_consistent(submission):
        raise InvalidTransitionError(
            f"Submission {submission.id} is not a valid {expected.value} submission"
        )


def _log(submission: SubmissionBase, operation: str) -> None:
    logger.info(
        "Submission transition %s",
        operation,
        extra=build_log_context(
            entity_id=submission.id,
            entity_type=getattr(submission, "type", None),
            operation=operation,
        ),
    )
