"""Append-only audit trail of intake activity."""

from portfolio_contact.audit.logger import AuditLogger, generate_event_id
from portfolio_contact.audit.models import AuditAction, AuditEvent

__all__ = [
    "AuditAction",
    "AuditEvent",
    "AuditLogger",
    "generate_event_id",
]
