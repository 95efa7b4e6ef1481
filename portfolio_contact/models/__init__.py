"""Data models for the contact intake service."""

from portfolio_contact.models.enums import DeliveryFailureKind, ValidationReason
from portfolio_contact.models.submission import (
    REQUIRED_FIELDS,
    ContactRequest,
    Submission,
    generate_submission_id,
)

__all__ = [
    # Enums
    "DeliveryFailureKind",
    "ValidationReason",
    # Submission models
    "REQUIRED_FIELDS",
    "ContactRequest",
    "Submission",
    "generate_submission_id",
]
