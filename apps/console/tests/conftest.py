"""
Test configuration and fixtures.

Provides:
- A fixed reference instant (Wednesday 2025-03-05 13:00 UTC)
- Factories for inquiry, signup and onboarding submissions
- Factories for inbox conversations, labels and staff
"""
from datetime import datetime, timezone
from typing import Any, Callable

import pytest

from crm_console.enums import LabelColor, StaffRole
from crm_console.schemas import (
    AssigneeRef,
    Contact,
    ConversationLabel,
    EnhancedChat,
    MessagePreview,
    StaffMember,
    StaffRef,
    parse_submission,
)


# =============================================================================
# Clock
# =============================================================================

@pytest.fixture
def now() -> datetime:
    """Wednesday 2025-03-05 13:00 UTC."""
    return datetime(2025, 3, 5, 13, 0, tzinfo=timezone.utc)


# =============================================================================
# Submissions
# =============================================================================

def _common(number: str, created_at: datetime, **overrides: Any) -> dict[str, Any]:
    data: dict[str, Any] = {
        "id": f"id-{number}",
        "submission_number": number,
        "customer_name": "Hana Sato",
        "customer_email": "hana@example.com",
        "customer_phone": "+81 90 1234 5678",
        "country": "Japan",
        "subject": "General question",
        "message": "Hello",
        "created_at": created_at,
    }
    data.update(overrides)
    return data


@pytest.fixture
def make_inquiry(now) -> Callable[..., Any]:
    def _make(number: str = "INQ-01000", metadata: dict[str, Any] | None = None, **overrides: Any):
        data = _common(number, overrides.pop("created_at", now), **overrides)
        data["type"] = "inquiry"
        data["metadata"] = {
            "vehicle_id": "veh-1",
            "vehicle_title": "2023 Toyota Supra GR",
            "vehicle_price": 52000,
            "vehicle_mileage": 5000,
            "inquiry_type": "price",
            **(metadata or {}),
        }
        return parse_submission(data)

    return _make


@pytest.fixture
def make_signup(now) -> Callable[..., Any]:
    def _make(number: str = "SGN-01000", metadata: dict[str, Any] | None = None, **overrides: Any):
        data = _common(number, overrides.pop("created_at", now), **overrides)
        data["type"] = "signup"
        data["metadata"] = {
            "first_name": "Hana",
            "last_name": "Sato",
            "country": "Germany",
            "hear_about_us": "YouTube",
            "verification_status": "pending",
            **(metadata or {}),
        }
        return parse_submission(data)

    return _make


@pytest.fixture
def make_onboarding(now) -> Callable[..., Any]:
    def _make(number: str = "ONB-01000", metadata: dict[str, Any] | None = None, **overrides: Any):
        data = _common(number, overrides.pop("created_at", now), **overrides)
        data["type"] = "onboarding"
        data["subject"] = overrides.get("subject", "Vehicle Consultation Request")
        data["metadata"] = {
            "vehicles": [
                {"make": "Nissan", "model": "GT-R", "year_range": "2010-2020"},
                {"make": "Mazda", "model": "RX-7", "year_range": "Pre-2000"},
            ],
            "destination_country": "Australia",
            "wants_call": True,
            **(metadata or {}),
        }
        return parse_submission(data)

    return _make


# =============================================================================
# Staff
# =============================================================================

@pytest.fixture
def staff_directory() -> list[StaffMember]:
    return [
        StaffMember(id="s1", first_name="Mike", last_name="Johnson", role=StaffRole.SALES_MANAGER, is_online=True),
        StaffMember(id="s2", first_name="Sarah", last_name="Williams", role=StaffRole.SALES_REP),
    ]


@pytest.fixture
def manager() -> StaffRef:
    return StaffRef(id="s1", name="Mike Johnson")


@pytest.fixture
def assignee_ref() -> AssigneeRef:
    return AssigneeRef(staff_id="s2", name="Sarah Williams")


# =============================================================================
# Conversations
# =============================================================================

@pytest.fixture
def labels() -> list[ConversationLabel]:
    return [
        ConversationLabel(id="lbl-vip", name="VIP", color=LabelColor.PURPLE),
        ConversationLabel(id="lbl-ship", name="Shipping", color=LabelColor.BLUE),
        ConversationLabel(id="lbl-pay", name="Payment", color=LabelColor.GREEN),
    ]


@pytest.fixture
def make_chat(now) -> Callable[..., EnhancedChat]:
    def _make(
        chat_id: str = "chat-1",
        name: str | None = "Kenji Tanaka",
        number: str = "819012345678",
        text: str | None = "Is the Supra still available?",
        **overrides: Any,
    ) -> EnhancedChat:
        data: dict[str, Any] = {
            "id": chat_id,
            "contact": Contact(id=f"contact-{chat_id}", push_name=name, number=number),
            "last_message": (
                MessagePreview(id=f"msg-{chat_id}", text=text, sent_at=now) if text is not None else None
            ),
        }
        data.update(overrides)
        return EnhancedChat(**data)

    return _make
