"""Snooze scheduling: preset and custom return times.

Every computation takes ``now`` explicitly and works in ``now``'s timezone
(aware or naive alike). Preset rules:

    later_today  before 14:00 -> today 17:00, otherwise now + 4h
    tomorrow     next calendar day 09:00
    weekend      coming Saturday 10:00 (from a Saturday: one week later)
    next_week    coming Monday 09:00 (from a Monday: one week later)
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date, datetime, time, timedelta

from crm_console.core.config import settings
from crm_console.core.constants import (
    LATER_TODAY_CUTOFF_HOUR,
    LATER_TODAY_OFFSET_HOURS,
    LATER_TODAY_RETURN_HOUR,
    MONDAY,
    NEXT_WEEK_RETURN_HOUR,
    SATURDAY,
    TOMORROW_RETURN_HOUR,
    WEEKEND_RETURN_HOUR,
)
from crm_console.enums import SnoozePreset
from crm_console.schemas.conversation import SnoozeConfig
from crm_console.utils.presentation import format_clock, format_day_and_clock
from crm_console.utils.timezones import add_elapsed, as_utc

logger = logging.getLogger(__name__)


class SnoozeServiceError(Exception):
    """Base exception for snooze scheduling errors."""

    pass


class InvalidSnoozeError(SnoozeServiceError):
    """Requested snooze cannot be scheduled (past time, bad input)."""

    pass


@dataclass(frozen=True)
class SnoozeOption:
    """One entry of the snooze picker."""

    preset: SnoozePreset
    label: str
    sublabel: str
    return_at: datetime


PRESET_LABELS: dict[SnoozePreset, str] = {
    SnoozePreset.LATER_TODAY: "Later today",
    SnoozePreset.TOMORROW: "Tomorrow",
    SnoozePreset.WEEKEND: "This weekend",
    SnoozePreset.NEXT_WEEK: "Next week",
}


# =============================================================================
# Preset resolution
# =============================================================================


def _at_clock(day: datetime, hour: int, minute: int = 0) -> datetime:
    return day.replace(hour=hour, minute=minute, second=0, microsecond=0, fold=0)


def next_weekday(now: datetime, weekday: int) -> datetime:
    """The next date strictly after ``now`` falling on ``weekday`` (Mon=0).

    Never returns today: from the same weekday the result is 7 days later.
    """
    days_ahead = (weekday - now.weekday()) % 7 or 7
    return now + timedelta(days=days_ahead)


def resolve_preset(preset: SnoozePreset | str, now: datetime) -> datetime:
    """Concrete return time for a named preset."""
    match _coerce_preset(preset):
        case SnoozePreset.LATER_TODAY:
            if now.hour < LATER_TODAY_CUTOFF_HOUR:
                return _at_clock(now, LATER_TODAY_RETURN_HOUR)
            return add_elapsed(now, timedelta(hours=LATER_TODAY_OFFSET_HOURS))
        case SnoozePreset.TOMORROW:
            return _at_clock(now + timedelta(days=1), TOMORROW_RETURN_HOUR)
        case SnoozePreset.WEEKEND:
            return _at_clock(next_weekday(now, SATURDAY), WEEKEND_RETURN_HOUR)
        case SnoozePreset.NEXT_WEEK:
            return _at_clock(next_weekday(now, MONDAY), NEXT_WEEK_RETURN_HOUR)
        case SnoozePreset.CUSTOM:
            raise InvalidSnoozeError("Custom snooze requires a date and time")


# =============================================================================
# Custom resolution
# =============================================================================


def parse_clock(value: time | str | None) -> time:
    """Accept a ``time`` or "HH:MM"; None means the configured default."""
    if isinstance(value, time):
        return value
    raw = (value or settings.DEFAULT_SNOOZE_TIME).strip()
    try:
        hours, minutes = raw.split(":")
        return time(int(hours), int(minutes))
    except ValueError:
        raise InvalidSnoozeError(f"Invalid snooze time: {raw!r}")


def resolve_custom(day: date, at: time | str | None, now: datetime) -> datetime:
    """
    Combine a picked date and clock time in ``now``'s timezone.

    Raises InvalidSnoozeError when the result is not after ``now``.
    """
    clock = parse_clock(at)
    return_at = datetime.combine(day, clock, tzinfo=now.tzinfo)
    if as_utc(return_at) <= as_utc(now):
        raise InvalidSnoozeError(
            f"Snooze return time {return_at.isoformat()} is in the past"
        )
    return return_at


def build_snooze(
    preset: SnoozePreset | str,
    now: datetime,
    day: date | None = None,
    at: time | str | None = None,
) -> SnoozeConfig:
    """Resolve a picker selection into a SnoozeConfig."""
    preset = _coerce_preset(preset)
    if preset == SnoozePreset.CUSTOM:
        if day is None:
            raise InvalidSnoozeError("Custom snooze requires a date")
        return_at = resolve_custom(day, at, now)
    else:
        return_at = resolve_preset(preset, now)

    logger.debug("Resolved snooze preset=%s return_at=%s", preset.value, return_at.isoformat())
    return SnoozeConfig(preset=preset, return_at=return_at)


def snooze_options(now: datetime) -> list[SnoozeOption]:
    """Picker entries with their resolved return times."""
    options: list[SnoozeOption] = []
    for preset, label in PRESET_LABELS.items():
        return_at = resolve_preset(preset, now)
        if preset == SnoozePreset.LATER_TODAY:
            sublabel = format_clock(return_at)
        elif preset == SnoozePreset.NEXT_WEEK:
            sublabel = f"{return_at.strftime('%a, %b')} {return_at.day}"
        else:
            sublabel = format_day_and_clock(return_at)
        options.append(SnoozeOption(preset, label, sublabel, return_at))
    return options


def _coerce_preset(preset: SnoozePreset | str) -> SnoozePreset:
    try:
        return SnoozePreset(preset)
    except ValueError:
        raise InvalidSnoozeError(f"Unknown snooze preset: {preset!r}")
