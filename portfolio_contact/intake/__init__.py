"""Intake pipeline for contact form submissions."""

from portfolio_contact.intake.service import (
    SUCCESS_MESSAGE,
    IntakeResult,
    IntakeService,
    failure_message,
)
from portfolio_contact.intake.validation import (
    EMAIL_PATTERN,
    find_missing_fields,
    is_valid_email,
    validate_contact_request,
)

__all__ = [
    "EMAIL_PATTERN",
    "SUCCESS_MESSAGE",
    "IntakeResult",
    "IntakeService",
    "failure_message",
    "find_missing_fields",
    "is_valid_email",
    "validate_contact_request",
]
