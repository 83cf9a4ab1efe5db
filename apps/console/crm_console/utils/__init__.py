"""Utility modules."""

from crm_console.utils.presentation import (
    format_clock,
    format_day_and_clock,
    humanize_identifier,
)
from crm_console.utils.timezones import add_elapsed, as_aware, as_utc

__all__ = [
    "add_elapsed",
    "as_aware",
    "as_utc",
    "format_clock",
    "format_day_and_clock",
    "humanize_identifier",
]
