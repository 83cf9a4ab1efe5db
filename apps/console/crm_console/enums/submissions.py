"""Submission-related enums."""

from enum import Enum


class SubmissionType(str, Enum):
    """Kinds of customer-initiated submissions."""

    INQUIRY = "inquiry"
    SIGNUP = "signup"
    ONBOARDING = "onboarding"


class SubmissionStatus(str, Enum):
    """
    Generic status stored on every submission.

    Only authoritative for inquiries. Signups carry their verification status
    in the payload and onboarding status is derived; see
    submission_status_service.resolve_display_status.
    """

    NEW = "new"
    IN_PROGRESS = "in_progress"
    RESPONDED = "responded"
    CLOSED = "closed"


class InquiryType(str, Enum):
    """Topic of a vehicle inquiry."""

    PRICE = "price"
    AVAILABILITY = "availability"
    SHIPPING = "shipping"
    INSPECTION = "inspection"
    GENERAL = "general"


class VerificationStatus(str, Enum):
    """Signup account verification state."""

    PENDING = "pending"
    VERIFIED = "verified"
    REJECTED = "rejected"


class DisplayStatus(str, Enum):
    """Normalized status spanning all three submission vocabularies."""

    # Inquiry
    NEW = "new"
    IN_PROGRESS = "in_progress"
    RESPONDED = "responded"
    CLOSED = "closed"
    # Signup
    PENDING = "pending"
    VERIFIED = "verified"
    REJECTED = "rejected"
    # Onboarding
    SCHEDULED = "scheduled"
    COMPLETED = "completed"
    CANCELLED = "cancelled"

    @classmethod
    def terminal(cls) -> frozenset["DisplayStatus"]:
        """Statuses that end a submission's lifecycle."""
        return frozenset({cls.CLOSED, cls.COMPLETED, cls.REJECTED, cls.CANCELLED})

    @classmethod
    def awaiting_response(cls) -> frozenset["DisplayStatus"]:
        """Statuses where the customer is still waiting on staff."""
        return frozenset({cls.NEW, cls.PENDING, cls.IN_PROGRESS})
