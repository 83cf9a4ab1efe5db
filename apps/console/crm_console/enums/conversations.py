"""Messaging inbox enums."""

from enum import Enum


class ConversationStatus(str, Enum):
    """Stored conversation status."""

    ACTIVE = "active"
    SNOOZED = "snoozed"
    ARCHIVED = "archived"


class InboxTab(str, Enum):
    """Inbox tabs. The active tab also shows snoozed conversations."""

    ACTIVE = "active"
    ARCHIVED = "archived"


class SnoozePreset(str, Enum):
    """Snooze picker presets."""

    LATER_TODAY = "later_today"
    TOMORROW = "tomorrow"
    WEEKEND = "weekend"
    NEXT_WEEK = "next_week"
    CUSTOM = "custom"


class LabelColor(str, Enum):
    """Fixed palette for conversation labels."""

    GRAY = "gray"
    RED = "red"
    ORANGE = "orange"
    YELLOW = "yellow"
    GREEN = "green"
    BLUE = "blue"
    PURPLE = "purple"
    PINK = "pink"
