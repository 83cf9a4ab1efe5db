"""Service layer modules."""

from crm_console.services.conversation_filter_service import filter_conversations
from crm_console.services.conversation_lifecycle_service import (
    archive,
    bucket,
    cancel_snooze,
    mark_read,
    mark_unread,
    snooze,
    unarchive,
)
from crm_console.services.snooze_service import resolve_custom, resolve_preset
from crm_console.services.submission_filter_service import filter_submissions
from crm_console.services.submission_status_service import resolve_display_status

# Import service modules (not individual functions) for cleaner access
from crm_console.services import assignment_service
from crm_console.services import label_service
from crm_console.services import metrics_service
from crm_console.services import submission_service

__all__ = [
    # Status resolution
    "resolve_display_status",
    # Filtering
    "filter_submissions",
    "filter_conversations",
    # Conversation lifecycle
    "bucket",
    "archive",
    "unarchive",
    "snooze",
    "cancel_snooze",
    "mark_read",
    "mark_unread",
    # Snooze scheduling
    "resolve_preset",
    "resolve_custom",
    # Service modules
    "assignment_service",
    "label_service",
    "metrics_service",
    "submission_service",
]
