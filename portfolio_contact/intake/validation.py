"""Validation of inbound contact form payloads."""

import re
from collections.abc import Mapping
from typing import Any

from portfolio_contact.errors import ValidationError
from portfolio_contact.models.enums import ValidationReason
from portfolio_contact.models.submission import REQUIRED_FIELDS, ContactRequest

# local-part@domain.tld with no whitespace anywhere
EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")


def is_valid_email(email: str) -> bool:
    """Check an address against the syntactic email pattern."""
    return EMAIL_PATTERN.match(email) is not None


def find_missing_fields(raw: Mapping[str, Any]) -> list[str]:
    """Return required fields that are absent, not strings, or blank."""
    missing = []
    for field in REQUIRED_FIELDS:
        value = raw.get(field)
        if not isinstance(value, str) or not value.strip():
            missing.append(field)
    return missing


def validate_contact_request(raw: Mapping[str, Any]) -> ContactRequest:
    """Validate a raw payload and build a trimmed ContactRequest.

    Checks run in order and the first failure wins: every required field
    must be present and non-empty after trimming, then the email must
    look like ``local-part@domain.tld``.

    Args:
        raw: Inbound payload, typically a decoded JSON object.

    Returns:
        ContactRequest with surrounding whitespace removed from each field.

    Raises:
        ValidationError: With reason MISSING_FIELDS or INVALID_EMAIL.
    """
    missing = find_missing_fields(raw)
    if missing:
        raise ValidationError(ValidationReason.MISSING_FIELDS, fields=missing)

    values = {field: raw[field].strip() for field in REQUIRED_FIELDS}
    if not is_valid_email(values["email"]):
        raise ValidationError(ValidationReason.INVALID_EMAIL, fields=["email"])

    return ContactRequest(**values)
