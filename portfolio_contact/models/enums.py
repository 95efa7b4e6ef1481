"""Enumerations for the contact intake service."""

from enum import Enum


class ValidationReason(str, Enum):
    """Why an inbound contact request was rejected."""

    MISSING_FIELDS = "missing_fields"
    INVALID_EMAIL = "invalid_email"


class DeliveryFailureKind(str, Enum):
    """Category of an outbound notification failure."""

    AUTH = "auth"
    CONNECTION = "connection"
    OTHER = "other"
