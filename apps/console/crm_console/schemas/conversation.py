"""Pydantic schemas for messaging inbox conversations."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict

from crm_console.enums import (
    DEFAULT_CONVERSATION_STATUS,
    DEFAULT_LABEL_COLOR,
    ConversationStatus,
    LabelColor,
    SnoozePreset,
)


class Contact(BaseModel):
    """Contact on the other end of a conversation."""

    model_config = ConfigDict(frozen=True)

    id: str
    push_name: str | None = None
    number: str
    profile_pic_url: str | None = None
    is_business: bool = False


class MessagePreview(BaseModel):
    """Most recent message shown in the inbox row."""

    model_config = ConfigDict(frozen=True)

    id: str
    text: str | None = None
    from_me: bool = False
    sent_at: datetime


class StaffRef(BaseModel):
    """Minimal staff identity carried on assignments."""

    model_config = ConfigDict(frozen=True)

    id: str
    name: str


class ChatAssignment(BaseModel):
    """Single active owner of a conversation."""

    model_config = ConfigDict(frozen=True)

    assigned_to: StaffRef
    assigned_by: StaffRef
    assigned_at: datetime


class ConversationLabel(BaseModel):
    """User-defined tag attached to conversations."""

    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    color: LabelColor = DEFAULT_LABEL_COLOR


class SnoozeConfig(BaseModel):
    """When a snoozed conversation returns to the inbox."""

    model_config = ConfigDict(frozen=True)

    preset: SnoozePreset
    return_at: datetime


class EnhancedChat(BaseModel):
    """
    Inbox conversation with lifecycle, assignment and label facets.

    ``status`` is the stored value. The visible bucket is computed from it and
    ``snooze`` against an explicit "now"; see conversation_lifecycle_service.
    """

    model_config = ConfigDict(frozen=True)

    id: str
    contact: Contact
    last_message: MessagePreview | None = None
    unread: bool = False
    status: ConversationStatus = DEFAULT_CONVERSATION_STATUS
    snooze: SnoozeConfig | None = None
    assignment: ChatAssignment | None = None
    labels: tuple[ConversationLabel, ...] = ()

    @property
    def label_ids(self) -> frozenset[str]:
        return frozenset(label.id for label in self.labels)
