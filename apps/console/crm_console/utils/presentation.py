"""Presentation helpers for turning internal values into human-friendly labels.

Values that already look like user-facing labels (mixed/upper-case) are left
alone; snake_case and kebab-case identifiers are title-cased.
"""

from __future__ import annotations

import re
from datetime import datetime
from enum import Enum


_SEPARATORS_RE = re.compile(r"[_-]+")
_WHITESPACE_RE = re.compile(r"\s+")
_SMALL_WORDS = {"a", "an", "and", "at", "by", "for", "in", "of", "on", "or", "the", "to"}


def humanize_identifier(value: str | Enum | None) -> str:
    """Convert identifiers (e.g. snake_case) into human-friendly text.

    Examples:
        "in_progress" -> "In Progress"
        "later_today" -> "Later Today"
        "next-week" -> "Next Week"
    """
    if value is None:
        return ""
    if isinstance(value, Enum):
        value = value.value

    text = str(value).strip()
    if not text:
        return ""

    text = _SEPARATORS_RE.sub(" ", text)
    text = _WHITESPACE_RE.sub(" ", text).strip()

    if any(ch.isupper() for ch in text):
        return text

    words = text.split(" ")
    last_idx = len(words) - 1
    titled: list[str] = []
    for i, word in enumerate(words):
        if i not in (0, last_idx) and word in _SMALL_WORDS:
            titled.append(word)
        else:
            titled.append(word.capitalize())

    return " ".join(titled)


def format_clock(moment: datetime) -> str:
    """12-hour clock label, e.g. "5:00 PM"."""
    hour = moment.hour % 12 or 12
    suffix = "AM" if moment.hour < 12 else "PM"
    return f"{hour}:{moment.minute:02d} {suffix}"


def format_day_and_clock(moment: datetime) -> str:
    """Short weekday plus clock label, e.g. "Sat 10:00 AM"."""
    return f"{moment.strftime('%a')} {format_clock(moment)}"
