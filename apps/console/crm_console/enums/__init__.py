"""Enum definitions for console constants."""

from crm_console.enums.conversations import (
    ConversationStatus,
    InboxTab,
    LabelColor,
    SnoozePreset,
)
from crm_console.enums.defaults import (
    DEFAULT_CONVERSATION_STATUS,
    DEFAULT_INBOX_TAB,
    DEFAULT_LABEL_COLOR,
    DEFAULT_SUBMISSION_STATUS,
    DEFAULT_VERIFICATION_STATUS,
)
from crm_console.enums.staff import StaffRole
from crm_console.enums.submissions import (
    DisplayStatus,
    InquiryType,
    SubmissionStatus,
    SubmissionType,
    VerificationStatus,
)

__all__ = [
    "ConversationStatus",
    "DEFAULT_CONVERSATION_STATUS",
    "DEFAULT_INBOX_TAB",
    "DEFAULT_LABEL_COLOR",
    "DEFAULT_SUBMISSION_STATUS",
    "DEFAULT_VERIFICATION_STATUS",
    "DisplayStatus",
    "InboxTab",
    "InquiryType",
    "LabelColor",
    "SnoozePreset",
    "StaffRole",
    "SubmissionStatus",
    "SubmissionType",
    "VerificationStatus",
]
