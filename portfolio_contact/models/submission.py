"""Contact submission models."""

import uuid
from datetime import UTC, datetime

from pydantic import BaseModel, Field

REQUIRED_FIELDS = ("name", "email", "subject", "message")


def _utc_now() -> datetime:
    """Return current UTC time (timezone-aware)."""
    return datetime.now(UTC)


def generate_submission_id(now: datetime | None = None) -> str:
    """Generate a unique, creation-ordered submission ID.

    Format: SUB-{timestamp}-{uuid4_short}
    Example: SUB-20240115143052-a1b2c3d4
    """
    if now is None:
        now = _utc_now()
    timestamp = now.strftime("%Y%m%d%H%M%S")
    short_uuid = uuid.uuid4().hex[:8]
    return f"SUB-{timestamp}-{short_uuid}"


class ContactRequest(BaseModel):
    """A validated contact form request, before it is persisted."""

    model_config = {"frozen": True}

    name: str = Field(..., description="Sender's name")
    email: str = Field(..., description="Sender's email address")
    subject: str = Field(..., description="Message subject")
    message: str = Field(..., description="Message body, may contain newlines")


class Submission(BaseModel):
    """A durably recorded contact form entry.

    Submissions are immutable once created. The ``id`` and ``timestamp``
    are assigned by the store, never by the caller.
    """

    model_config = {"frozen": True}

    id: str = Field(..., description="Unique submission identifier")
    name: str = Field(..., min_length=1, description="Sender's name")
    email: str = Field(..., min_length=1, description="Sender's email address")
    subject: str = Field(..., min_length=1, description="Message subject")
    message: str = Field(..., min_length=1, description="Message body")
    timestamp: datetime = Field(
        default_factory=_utc_now,
        description="UTC time the submission was recorded",
    )

    @classmethod
    def from_request(
        cls, request: ContactRequest, now: datetime | None = None
    ) -> "Submission":
        """Create a new submission from a validated request.

        Args:
            request: The validated contact request.
            now: Creation time. Defaults to current UTC time.

        Returns:
            Submission with a freshly generated id and timestamp.
        """
        if now is None:
            now = _utc_now()
        return cls(
            id=generate_submission_id(now),
            name=request.name,
            email=request.email,
            subject=request.subject,
            message=request.message,
            timestamp=now,
        )
