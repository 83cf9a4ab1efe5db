"""Display status resolution for submissions.

Each submission type keeps its lifecycle in a different place:

    inquiry     generic ``status`` field
    signup      ``metadata.verification_status`` (generic status ignored)
    onboarding  derived: closed -> completed, scheduled date -> scheduled, else new

Callers must go through resolve_display_status instead of reading ``status``.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Any, Literal

from crm_console.core.constants import FILTER_ALL
from crm_console.enums import DisplayStatus, SubmissionStatus, SubmissionType
from crm_console.schemas.submission import (
    OnboardingMetadata,
    SignupMetadata,
    is_consistent,
)
from crm_console.utils.presentation import humanize_identifier

logger = logging.getLogger(__name__)


STATUS_OPTIONS_BY_TYPE: dict[str, list[DisplayStatus]] = {
    FILTER_ALL: [
        DisplayStatus.NEW,
        DisplayStatus.IN_PROGRESS,
        DisplayStatus.PENDING,
        DisplayStatus.SCHEDULED,
        DisplayStatus.RESPONDED,
        DisplayStatus.VERIFIED,
        DisplayStatus.COMPLETED,
        DisplayStatus.CLOSED,
        DisplayStatus.REJECTED,
        DisplayStatus.CANCELLED,
    ],
    SubmissionType.INQUIRY.value: [
        DisplayStatus.NEW,
        DisplayStatus.IN_PROGRESS,
        DisplayStatus.RESPONDED,
        DisplayStatus.CLOSED,
    ],
    SubmissionType.SIGNUP.value: [
        DisplayStatus.PENDING,
        DisplayStatus.VERIFIED,
        DisplayStatus.REJECTED,
    ],
    SubmissionType.ONBOARDING.value: [
        DisplayStatus.NEW,
        DisplayStatus.SCHEDULED,
        DisplayStatus.COMPLETED,
        DisplayStatus.CANCELLED,
    ],
}


def resolve_display_status(submission: Any) -> DisplayStatus:
    """Map a submission to its single display status. Never raises."""
    submission_type = _value(getattr(submission, "type", None))
    metadata = getattr(submission, "metadata", None)

    match submission_type:
        case SubmissionType.SIGNUP.value if isinstance(metadata, SignupMetadata):
            return _coerce(metadata.verification_status, submission)
        case SubmissionType.ONBOARDING.value if isinstance(metadata, OnboardingMetadata):
            if _value(getattr(submission, "status", None)) == SubmissionStatus.CLOSED.value:
                return DisplayStatus.COMPLETED
            if (metadata.scheduled_date or "").strip():
                return DisplayStatus.SCHEDULED
            return DisplayStatus.NEW
        case SubmissionType.INQUIRY.value:
            return _generic_status(submission)
        case _:
            if not is_consistent(submission):
                logger.warning(
                    "Submission payload does not match its type id=%s type=%s",
                    getattr(submission, "id", None),
                    submission_type,
                )
            return _generic_status(submission)


def is_terminal(status: DisplayStatus | str) -> bool:
    """True for closed, completed, rejected and cancelled."""
    try:
        return DisplayStatus(_value(status)) in DisplayStatus.terminal()
    except ValueError:
        return False


def status_options(
    type_filter: Literal["all"] | SubmissionType | str = FILTER_ALL,
) -> list[tuple[str, str]]:
    """Status filter options for a type tab, "all" first."""
    statuses = STATUS_OPTIONS_BY_TYPE.get(_value(type_filter), STATUS_OPTIONS_BY_TYPE[FILTER_ALL])
    options = [(FILTER_ALL, "All Status")]
    options.extend((status.value, humanize_identifier(status)) for status in statuses)
    return options


def subject_display(submission: Any) -> str:
    """Short "what is this about" text for list rows."""
    if not is_consistent(submission):
        return getattr(submission, "subject", "") or ""

    metadata = submission.metadata
    match _value(submission.type):
        case SubmissionType.INQUIRY.value:
            return metadata.vehicle_title
        case SubmissionType.SIGNUP.value:
            return metadata.country
        case SubmissionType.ONBOARDING.value:
            return ", ".join(f"{v.make} {v.model}" for v in metadata.vehicles)
    return submission.subject


def _generic_status(submission: Any) -> DisplayStatus:
    return _coerce(getattr(submission, "status", None), submission)


def _coerce(raw: Any, submission: Any) -> DisplayStatus:
    try:
        return DisplayStatus(_value(raw))
    except ValueError:
        logger.warning(
            "Unknown submission status id=%s status=%r; treating as new",
            getattr(submission, "id", None),
            raw,
        )
        return DisplayStatus.NEW


def _value(value: Any) -> Any:
    return value.value if isinstance(value, Enum) else value
