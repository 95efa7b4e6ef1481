"""Audit event models for the intake trail.

Events are immutable once created (Pydantic frozen=True) and carry UTC
timestamps.
"""

from datetime import UTC, datetime
from enum import Enum
from typing import Any

from pydantic import BaseModel, Field


def _utc_now() -> datetime:
    """Return current UTC time (timezone-aware)."""
    return datetime.now(UTC)


class AuditAction(str, Enum):
    """Types of intake actions that can be audited."""

    SUBMISSION_RECEIVED = "submission_received"
    SUBMISSION_REJECTED = "submission_rejected"
    NOTIFICATION_SENT = "notification_sent"
    NOTIFICATION_FAILED = "notification_failed"


class AuditEvent(BaseModel):
    """A single audit trail entry.

    Attributes:
        event_id: Unique identifier for this event.
        timestamp: UTC timestamp when event occurred.
        action: Type of action being logged.
        resource_type: Type of resource affected.
        resource_id: ID of the affected submission, or "-" when the
            request was rejected before a submission existed.
        details: Action-specific details.
    """

    model_config = {"frozen": True}

    event_id: str = Field(..., description="Unique event identifier")
    timestamp: datetime = Field(
        default_factory=_utc_now,
        description="UTC timestamp of the event",
    )
    action: AuditAction = Field(..., description="Type of action performed")
    resource_type: str = Field(default="submission")
    resource_id: str = Field(..., description="ID of the affected resource")
    details: dict[str, Any] = Field(
        default_factory=dict,
        description="Action-specific details",
    )
