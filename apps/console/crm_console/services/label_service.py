"""Conversation labels: directory management and chat tagging."""

from __future__ import annotations

import logging
import uuid
from collections import Counter
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from crm_console.enums import DEFAULT_LABEL_COLOR, LabelColor
from crm_console.schemas.conversation import ConversationLabel, EnhancedChat

logger = logging.getLogger(__name__)

LABEL_NAME_MAX_LENGTH = 30


class LabelServiceError(Exception):
    """Base exception for label errors."""

    pass


class InvalidLabelError(LabelServiceError):
    """Label name is blank or too long."""

    pass


class DuplicateLabelError(LabelServiceError):
    """Label name already exists (case-insensitive)."""

    pass


class LabelNotFoundError(LabelServiceError):
    """Label id not present in the directory."""

    pass


@dataclass(frozen=True)
class LabelOption:
    """Label filter entry with the number of chats carrying it."""

    label: ConversationLabel
    count: int


# =============================================================================
# Directory
# =============================================================================


def create_label(
    directory: Sequence[ConversationLabel],
    name: str,
    color: LabelColor | str = DEFAULT_LABEL_COLOR,
    label_id: str | None = None,
) -> list[ConversationLabel]:
    """Return the directory with a new label appended."""
    clean = " ".join(name.split())
    if not clean:
        raise InvalidLabelError("Label name is required")
    if len(clean) > LABEL_NAME_MAX_LENGTH:
        raise InvalidLabelError(f"Label name exceeds {LABEL_NAME_MAX_LENGTH} characters")
    if any(label.name.lower() == clean.lower() for label in directory):
        raise DuplicateLabelError(f"Label '{clean}' already exists")
    try:
        color = LabelColor(color)
    except ValueError:
        raise InvalidLabelError(f"Unknown label color: {color!r}")

    label = ConversationLabel(id=label_id or f"label-{uuid.uuid4().hex[:8]}", name=clean, color=color)
    logger.info("Created conversation label id=%s", label.id)
    return [*directory, label]


def get_label(directory: Iterable[ConversationLabel], label_id: str) -> ConversationLabel:
    for label in directory:
        if label.id == label_id:
            return label
    raise LabelNotFoundError(f"Label {label_id} not found")


def delete_label(
    directory: Sequence[ConversationLabel],
    chats: Sequence[EnhancedChat],
    label_id: str,
) -> tuple[list[ConversationLabel], list[EnhancedChat]]:
    """Drop a label from the directory and detach it from every chat."""
    get_label(directory, label_id)
    logger.info("Deleted conversation label id=%s", label_id)
    return (
        [label for label in directory if label.id != label_id],
        [remove_label(chat, label_id) for chat in chats],
    )


def label_filter_options(
    directory: Iterable[ConversationLabel],
    chats: Iterable[EnhancedChat],
) -> list[LabelOption]:
    """Directory labels in directory order, with usage counts."""
    usage = Counter(label_id for chat in chats for label_id in chat.label_ids)
    return [LabelOption(label=label, count=usage[label.id]) for label in directory]


# =============================================================================
# Chat tagging
# =============================================================================


def add_label(chat: EnhancedChat, label: ConversationLabel) -> EnhancedChat:
    """Attach ``label``; attaching twice is a no-op."""
    if label.id in chat.label_ids:
        return chat
    return chat.model_copy(update={"labels": (*chat.labels, label)})


def remove_label(chat: EnhancedChat, label_id: str) -> EnhancedChat:
    if label_id not in chat.label_ids:
        return chat
    return chat.model_copy(
        update={"labels": tuple(label for label in chat.labels if label.id != label_id)}
    )


def toggle_label(chat: EnhancedChat, label: ConversationLabel) -> EnhancedChat:
    if label.id in chat.label_ids:
        return remove_label(chat, label.id)
    return add_label(chat, label)
