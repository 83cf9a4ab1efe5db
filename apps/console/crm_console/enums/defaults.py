"""Centralized defaults for enums."""

from crm_console.enums.conversations import ConversationStatus, InboxTab, LabelColor
from crm_console.enums.submissions import SubmissionStatus, VerificationStatus


DEFAULT_SUBMISSION_STATUS: SubmissionStatus = SubmissionStatus.NEW
DEFAULT_VERIFICATION_STATUS: VerificationStatus = VerificationStatus.PENDING
DEFAULT_CONVERSATION_STATUS: ConversationStatus = ConversationStatus.ACTIVE
DEFAULT_INBOX_TAB: InboxTab = InboxTab.ACTIVE
DEFAULT_LABEL_COLOR: LabelColor = LabelColor.BLUE
