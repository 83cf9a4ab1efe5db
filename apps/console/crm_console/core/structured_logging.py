"""Structured logging helpers (PII-safe)."""

import logging
from typing import Any

from crm_console.core.config import settings


def build_log_context(
    *,
    staff_id: str | None = None,
    entity_id: str | None = None,
    entity_type: str | None = None,
    operation: str | None = None,
) -> dict[str, Any]:
    """Return a PII-safe log context dict.

    Only identifiers are accepted; customer names, emails and phone numbers
    never reach the log stream.
    """
    context: dict[str, Any] = {}
    if staff_id:
        context["staff_id"] = staff_id
    if entity_id:
        context["entity_id"] = entity_id
    if entity_type:
        context["entity_type"] = entity_type
    if operation:
        context["operation"] = operation
    return context


def configure_logging(level: str | None = None) -> None:
    """Configure stdlib logging for embedding applications and scripts."""
    logging.basicConfig(
        level=getattr(logging, (level or settings.LOG_LEVEL).upper(), logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
