"""Pydantic schemas for customer submissions (inquiry, signup, onboarding)."""

from __future__ import annotations

from datetime import datetime
from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter

from crm_console.enums import (
    DEFAULT_SUBMISSION_STATUS,
    DEFAULT_VERIFICATION_STATUS,
    InquiryType,
    SubmissionStatus,
    SubmissionType,
    VerificationStatus,
)


class AssigneeRef(BaseModel):
    """Staff member currently owning a submission."""

    model_config = ConfigDict(frozen=True)

    staff_id: str
    name: str


# =============================================================================
# Type-specific payloads
# =============================================================================


class InquiryMetadata(BaseModel):
    """Vehicle inquiry payload."""

    model_config = ConfigDict(frozen=True)

    vehicle_id: str
    vehicle_title: str
    vehicle_price: int | None = None
    vehicle_mileage: int | None = None
    inquiry_type: InquiryType = InquiryType.GENERAL


class SignupMetadata(BaseModel):
    """Account signup payload. verification_status is authoritative."""

    model_config = ConfigDict(frozen=True)

    first_name: str
    last_name: str
    company: str | None = None
    country: str
    city: str | None = None
    hear_about_us: str
    verification_status: VerificationStatus = DEFAULT_VERIFICATION_STATUS


class DesiredVehicle(BaseModel):
    """One vehicle a customer wants sourced."""

    model_config = ConfigDict(frozen=True)

    make: str
    model: str
    year_range: str


class OnboardingMetadata(BaseModel):
    """Onboarding / consultation request payload."""

    model_config = ConfigDict(frozen=True)

    vehicles: tuple[DesiredVehicle, ...] = Field(..., min_length=1)
    destination_country: str
    wants_call: bool = False
    preferred_date: str | None = None  # YYYY-MM-DD
    preferred_time: str | None = None  # HH:MM
    timezone: str | None = None
    scheduled_date: str | None = None  # YYYY-MM-DD
    scheduled_time: str | None = None  # HH:MM


# =============================================================================
# Submissions
# =============================================================================


class SubmissionBase(BaseModel):
    """Fields shared by every submission type."""

    model_config = ConfigDict(frozen=True)

    id: str
    submission_number: str
    status: SubmissionStatus = DEFAULT_SUBMISSION_STATUS
    customer_name: str
    customer_email: str
    customer_phone: str | None = None
    country: str | None = None
    subject: str = ""
    message: str = ""
    assignee: AssigneeRef | None = None
    created_at: datetime
    updated_at: datetime | None = None
    responded_at: datetime | None = None


class InquirySubmission(SubmissionBase):
    type: Literal["inquiry"] = "inquiry"
    metadata: InquiryMetadata


class SignupSubmission(SubmissionBase):
    type: Literal["signup"] = "signup"
    metadata: SignupMetadata


class OnboardingSubmission(SubmissionBase):
    type: Literal["onboarding"] = "onboarding"
    metadata: OnboardingMetadata


Submission = Annotated[
    Union[InquirySubmission, SignupSubmission, OnboardingSubmission],
    Field(discriminator="type"),
]

METADATA_BY_TYPE: dict[str, type[BaseModel]] = {
    SubmissionType.INQUIRY.value: InquiryMetadata,
    SubmissionType.SIGNUP.value: SignupMetadata,
    SubmissionType.ONBOARDING.value: OnboardingMetadata,
}

_submission_adapter: TypeAdapter[Submission] = TypeAdapter(Submission)
_submission_list_adapter: TypeAdapter[list[Submission]] = TypeAdapter(list[Submission])


def parse_submission(raw: dict[str, Any]) -> Submission:
    """Validate an intake record; the ``type`` tag selects the payload shape."""
    return _submission_adapter.validate_python(raw)


def parse_submissions(raw: list[dict[str, Any]]) -> list[Submission]:
    return _submission_list_adapter.validate_python(raw)


def is_consistent(submission: Any) -> bool:
    """True when the payload class matches the ``type`` tag."""
    expected = METADATA_BY_TYPE.get(_type_value(getattr(submission, "type", None)))
    if expected is None:
        return False
    return isinstance(getattr(submission, "metadata", None), expected)


def _type_value(value: Any) -> str | None:
    if isinstance(value, SubmissionType):
        return value.value
    return value if isinstance(value, str) else None
