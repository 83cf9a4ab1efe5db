"""Filter criteria values consumed by the filter services.

Filters are immutable values passed into the filter functions; the "change
one selection" helpers return a new value instead of mutating UI state.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from crm_console.core.constants import FILTER_ALL
from crm_console.enums import DEFAULT_INBOX_TAB, DisplayStatus, InboxTab, SubmissionType


class SubmissionFilters(BaseModel):
    """Lead list filter selection."""

    model_config = ConfigDict(frozen=True)

    type_filter: Literal["all"] | SubmissionType = FILTER_ALL
    search_term: str = ""
    status_filter: Literal["all"] | DisplayStatus = FILTER_ALL
    # "all", "unassigned" or a staff id
    assignee_filter: str = FILTER_ALL

    def with_type(self, type_filter: Literal["all"] | SubmissionType) -> SubmissionFilters:
        """Switch type; status vocabularies differ per type so status resets."""
        return self.model_copy(update={"type_filter": type_filter, "status_filter": FILTER_ALL})

    def cleared(self) -> SubmissionFilters:
        """Drop status/assignee selections, keeping type and search."""
        return self.model_copy(update={"status_filter": FILTER_ALL, "assignee_filter": FILTER_ALL})

    @property
    def active_filter_count(self) -> int:
        return int(self.status_filter != FILTER_ALL) + int(self.assignee_filter != FILTER_ALL)


class ConversationFilters(BaseModel):
    """Inbox filter selection."""

    model_config = ConfigDict(frozen=True)

    tab: InboxTab = DEFAULT_INBOX_TAB
    search_term: str = ""
    label_filter: frozenset[str] = Field(default_factory=frozenset)
    # None disables the filter; "unassigned" or a staff id otherwise
    assignment_filter: str | None = None

    @property
    def has_active_filters(self) -> bool:
        return bool(self.label_filter) or self.assignment_filter is not None
