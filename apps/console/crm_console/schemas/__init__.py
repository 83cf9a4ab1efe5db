"""Pydantic schemas for console entities and filter criteria."""

from crm_console.schemas.conversation import (
    ChatAssignment,
    Contact,
    ConversationLabel,
    EnhancedChat,
    MessagePreview,
    SnoozeConfig,
    StaffRef,
)
from crm_console.schemas.filters import ConversationFilters, SubmissionFilters
from crm_console.schemas.staff import StaffMember
from crm_console.schemas.submission import (
    AssigneeRef,
    DesiredVehicle,
    InquiryMetadata,
    InquirySubmission,
    OnboardingMetadata,
    OnboardingSubmission,
    SignupMetadata,
    SignupSubmission,
    Submission,
    SubmissionBase,
    is_consistent,
    parse_submission,
    parse_submissions,
)

__all__ = [
    "AssigneeRef",
    "ChatAssignment",
    "Contact",
    "ConversationFilters",
    "ConversationLabel",
    "DesiredVehicle",
    "EnhancedChat",
    "InquiryMetadata",
    "InquirySubmission",
    "MessagePreview",
    "OnboardingMetadata",
    "OnboardingSubmission",
    "SignupMetadata",
    "SignupSubmission",
    "SnoozeConfig",
    "StaffMember",
    "StaffRef",
    "Submission",
    "SubmissionBase",
    "SubmissionFilters",
    "is_consistent",
    "parse_submission",
    "parse_submissions",
]
