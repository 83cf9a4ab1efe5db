"""Tests for submission transitions and lookups."""

from datetime import date, datetime, time, timedelta

import pytest

from crm_console.enums import DisplayStatus, SubmissionStatus, VerificationStatus
from crm_console.services import submission_service
from crm_console.services.submission_service import (
    InvalidTransitionError,
    SubmissionNotFoundError,
)
from crm_console.services.submission_status_service import resolve_display_status


# =============================================================================
# Inquiries
# =============================================================================


def test_change_inquiry_status_to_responded_stamps_time(make_inquiry, now):
    updated = submission_service.change_inquiry_status(make_inquiry(status="in_progress"), "responded", now)

    assert updated.status == SubmissionStatus.RESPONDED
    assert updated.responded_at == now
    assert updated.updated_at == now


def test_change_inquiry_status_to_closed_keeps_responded_at(make_inquiry, now):
    updated = submission_service.change_inquiry_status(make_inquiry(), SubmissionStatus.CLOSED, now)

    assert updated.status == SubmissionStatus.CLOSED
    assert updated.responded_at is None


def test_change_inquiry_status_rejects_unknown_status(make_inquiry, now):
    with pytest.raises(InvalidTransitionError):
        submission_service.change_inquiry_status(make_inquiry(), "escalated", now)


def test_change_inquiry_status_rejects_other_types(make_signup, now):
    with pytest.raises(InvalidTransitionError):
        submission_service.change_inquiry_status(make_signup(), "closed", now)


def test_record_reply_moves_inquiry_to_responded(make_inquiry, now):
    replied = submission_service.record_reply(make_inquiry(status="in_progress"), now)

    assert replied.status == SubmissionStatus.RESPONDED
    assert replied.responded_at == now


def test_record_reply_on_signup_only_stamps_time(make_signup, now):
    signup = make_signup(status="new")

    replied = submission_service.record_reply(signup, now)

    assert replied.status == SubmissionStatus.NEW
    assert replied.responded_at == now
    assert resolve_display_status(replied) == DisplayStatus.PENDING


# =============================================================================
# Signups
# =============================================================================


def test_approve_signup(make_signup, now):
    approved = submission_service.approve_signup(make_signup(), now)

    assert approved.metadata.verification_status == VerificationStatus.VERIFIED
    assert approved.status == SubmissionStatus.RESPONDED
    assert resolve_display_status(approved) == DisplayStatus.VERIFIED


def test_reject_signup(make_signup, now):
    signup = make_signup()

    rejected = submission_service.reject_signup(signup, now)

    assert rejected.status == SubmissionStatus.CLOSED
    assert resolve_display_status(rejected) == DisplayStatus.REJECTED
    assert signup.metadata.verification_status == VerificationStatus.PENDING


def test_signup_transitions_reject_inquiries(make_inquiry, now):
    with pytest.raises(InvalidTransitionError):
        submission_service.approve_signup(make_inquiry(), now)


# =============================================================================
# Onboarding
# =============================================================================


def test_schedule_onboarding_from_date_and_time(make_onboarding, now):
    scheduled = submission_service.schedule_onboarding(make_onboarding(), date(2025, 3, 7), time(10, 30), now)

    assert scheduled.metadata.scheduled_date == "2025-03-07"
    assert scheduled.metadata.scheduled_time == "10:30"
    assert scheduled.status == SubmissionStatus.IN_PROGRESS
    assert resolve_display_status(scheduled) == DisplayStatus.SCHEDULED


def test_schedule_onboarding_accepts_datetime_and_strings(make_onboarding, now):
    from_datetime = submission_service.schedule_onboarding(
        make_onboarding(), datetime(2025, 3, 7, 15, 0), "15:00", now
    )
    from_strings = submission_service.schedule_onboarding(make_onboarding(), " 2025-03-08 ", "", now)

    assert from_datetime.metadata.scheduled_date == "2025-03-07"
    assert from_strings.metadata.scheduled_date == "2025-03-08"
    assert from_strings.metadata.scheduled_time is None


def test_schedule_onboarding_requires_date(make_onboarding, now):
    with pytest.raises(InvalidTransitionError):
        submission_service.schedule_onboarding(make_onboarding(), "  ", "10:00", now)


def test_completed_onboarding_cannot_be_scheduled(make_onboarding, now):
    completed = submission_service.complete_onboarding(make_onboarding(), now)

    assert resolve_display_status(completed) == DisplayStatus.COMPLETED
    with pytest.raises(InvalidTransitionError):
        submission_service.schedule_onboarding(completed, date(2025, 3, 7), "10:00", now)


def test_reopen_onboarding_clears_schedule(make_onboarding, now):
    scheduled = submission_service.schedule_onboarding(make_onboarding(), "2025-03-07", "10:00", now)
    completed = submission_service.complete_onboarding(scheduled, now)

    reopened = submission_service.reopen_onboarding(completed, now + timedelta(days=1))

    assert reopened.metadata.scheduled_date is None
    assert reopened.metadata.scheduled_time is None
    assert resolve_display_status(reopened) == DisplayStatus.NEW


# =============================================================================
# Lookups
# =============================================================================


def test_get_and_replace_submission(make_inquiry, now):
    submissions = [make_inquiry("INQ-01001"), make_inquiry("INQ-01002")]

    target = submission_service.get_submission(submissions, "id-INQ-01002")
    updated = submission_service.record_reply(target, now)
    result = submission_service.replace_submission(submissions, updated)

    assert [item.status for item in result] == [SubmissionStatus.NEW, SubmissionStatus.RESPONDED]
    assert submissions[1].status == SubmissionStatus.NEW


def test_missing_submission_raises(make_inquiry):
    submissions = [make_inquiry("INQ-01001")]

    with pytest.raises(SubmissionNotFoundError):
        submission_service.get_submission(submissions, "id-INQ-09999")
    with pytest.raises(SubmissionNotFoundError):
        submission_service.replace_submission(submissions, make_inquiry("INQ-09999"))
