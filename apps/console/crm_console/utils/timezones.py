"""Timezone normalisation for comparing and offsetting instants.

Aware datetimes that share a tzinfo compare and subtract by wall-clock time,
which is wrong around DST transitions. Comparisons go through ``as_utc`` and
elapsed-time offsets through ``add_elapsed``. Naive values are read in
``settings.DEFAULT_TIMEZONE``.
"""

from __future__ import annotations

from datetime import datetime, timedelta
from zoneinfo import ZoneInfo

from crm_console.core.config import settings

UTC = ZoneInfo("UTC")


def as_aware(moment: datetime) -> datetime:
    if moment.tzinfo is None:
        return moment.replace(tzinfo=ZoneInfo(settings.DEFAULT_TIMEZONE))
    return moment


def as_utc(moment: datetime) -> datetime:
    """The same instant expressed in UTC."""
    return as_aware(moment).astimezone(UTC)


def add_elapsed(moment: datetime, delta: timedelta) -> datetime:
    """``moment + delta`` in real elapsed time, kept in ``moment``'s timezone."""
    if moment.tzinfo is None:
        return moment + delta
    return (moment.astimezone(UTC) + delta).astimezone(moment.tzinfo)
