"""Assignment of submissions and conversations to staff members.

A single owner per entity; assigning again replaces the previous owner.
Assigning a *new* inquiry also moves it to in_progress (assignment means
triage has started). Signups and onboarding requests keep their status.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from datetime import datetime
from typing import TypeVar

from crm_console.core.structured_logging import build_log_context
from crm_console.enums import SubmissionStatus, SubmissionType
from crm_console.schemas.conversation import ChatAssignment, EnhancedChat, StaffRef
from crm_console.schemas.staff import StaffMember
from crm_console.schemas.submission import AssigneeRef, SubmissionBase

logger = logging.getLogger(__name__)

E = TypeVar("E", bound=SubmissionBase | EnhancedChat)


class AssignmentServiceError(Exception):
    """Base exception for assignment errors."""

    pass


class StaffNotFoundError(AssignmentServiceError):
    """Staff id not present in the directory."""

    pass


class EntityNotFoundError(AssignmentServiceError):
    """Submission or conversation id not present in the collection."""

    pass


# =============================================================================
# Single-entity transitions
# =============================================================================


def assign(
    entity: E,
    staff_id: str,
    staff_name: str,
    assigned_by: StaffRef,
    now: datetime,
) -> E:
    """Set ``staff_id`` as the only owner of ``entity``."""
    if isinstance(entity, EnhancedChat):
        updated = entity.model_copy(
            update={
                "assignment": ChatAssignment(
                    assigned_to=StaffRef(id=staff_id, name=staff_name),
                    assigned_by=assigned_by,
                    assigned_at=now,
                )
            }
        )
        _log(entity.id, "conversation", "assign", staff_id)
        return updated

    update: dict[str, object] = {
        "assignee": AssigneeRef(staff_id=staff_id, name=staff_name),
        "updated_at": now,
    }
    if entity.type == SubmissionType.INQUIRY.value and entity.status == SubmissionStatus.NEW:
        update["status"] = SubmissionStatus.IN_PROGRESS
    _log(entity.id, "submission", "assign", staff_id)
    return entity.model_copy(update=update)


def unassign(entity: E, now: datetime | None = None) -> E:
    """Remove the owner. Status is left as-is."""
    if isinstance(entity, EnhancedChat):
        _log(entity.id, "conversation", "unassign")
        return entity.model_copy(update={"assignment": None})

    update: dict[str, object] = {"assignee": None}
    if now is not None:
        update["updated_at"] = now
    _log(entity.id, "submission", "unassign")
    return entity.model_copy(update=update)


def assigned_to(entity: SubmissionBase | EnhancedChat) -> str | None:
    """Current owner's staff id, if any."""
    if isinstance(entity, EnhancedChat):
        return entity.assignment.assigned_to.id if entity.assignment else None
    return entity.assignee.staff_id if entity.assignee else None


# =============================================================================
# Directory-validated assignment
# =============================================================================


def get_staff(directory: Iterable[StaffMember], staff_id: str) -> StaffMember:
    for member in directory:
        if member.id == staff_id:
            return member
    raise StaffNotFoundError(f"Staff member {staff_id} not found")


def assign_from_directory(
    entity: E,
    directory: Iterable[StaffMember],
    staff_id: str,
    assigned_by: StaffRef,
    now: datetime,
) -> E:
    """Assign after checking ``staff_id`` against the staff directory."""
    member = get_staff(directory, staff_id)
    return assign(entity, member.id, member.full_name, assigned_by, now)


def bulk_assign(
    entities: Sequence[E],
    entity_ids: Iterable[str],
    staff_id: str,
    staff_name: str,
    assigned_by: StaffRef,
    now: datetime,
) -> list[E]:
    """Assign every listed entity; the whole batch fails on an unknown id."""
    wanted = set(entity_ids)
    missing = wanted - {entity.id for entity in entities}
    if missing:
        raise EntityNotFoundError(f"Unknown ids: {', '.join(sorted(missing))}")

    return [
        assign(entity, staff_id, staff_name, assigned_by, now) if entity.id in wanted else entity
        for entity in entities
    ]


def _log(entity_id: str, entity_type: str, operation: str, staff_id: str | None = None) -> None:
    logger.info(
        "Assignment %s on %s",
        operation,
        entity_type,
        extra=build_log_context(
            staff_id=staff_id,
            entity_id=entity_id,
            entity_type=entity_type,
            operation=operation,
        ),
    )
