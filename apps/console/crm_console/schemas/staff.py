"""Pydantic schemas for the staff directory."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from crm_console.enums import StaffRole
from crm_console.schemas.conversation import StaffRef


class StaffMember(BaseModel):
    """Directory entry for an assignable staff member."""

    model_config = ConfigDict(frozen=True)

    id: str
    first_name: str
    last_name: str
    is_online: bool = False
    role: StaffRole = StaffRole.SALES_REP

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()

    def ref(self) -> StaffRef:
        """Identity as carried on assignments."""
        return StaffRef(id=self.id, name=self.full_name)
