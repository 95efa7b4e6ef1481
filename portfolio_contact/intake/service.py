"""Contact intake service.

Each call to ``IntakeService.submit`` runs one linear pipeline:

1. Validate the payload
2. Check the mail transport is configured
3. Append the submission to the store
4. Notify the site owner by email

The configuration check runs before the write so that submissions that
can never be notified are not recorded. A delivery failure after the
write leaves the submission stored.
"""

import logging
from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, Field

from portfolio_contact.audit.logger import AuditLogger
from portfolio_contact.audit.models import AuditAction
from portfolio_contact.errors import (
    ConfigurationError,
    DeliveryError,
    IntakeError,
    PersistenceError,
    ValidationError,
)
from portfolio_contact.intake.validation import validate_contact_request
from portfolio_contact.models.enums import DeliveryFailureKind, ValidationReason
from portfolio_contact.models.submission import ContactRequest, Submission
from portfolio_contact.notify.config import MailConfig
from portfolio_contact.notify.mailer import Mailer, SMTPMailer
from portfolio_contact.notify.message import compose_notification
from portfolio_contact.storage.store import StorageError, SubmissionStore

logger = logging.getLogger(__name__)

SUCCESS_MESSAGE = "Message sent successfully! I'll get back to you soon."

VALIDATION_MESSAGES = {
    ValidationReason.MISSING_FIELDS: "Please fill in all required fields.",
    ValidationReason.INVALID_EMAIL: "Please provide a valid email address.",
}

CONFIGURATION_MESSAGE = (
    "The contact service is temporarily unavailable. Please try again later."
)
PERSISTENCE_MESSAGE = "We couldn't save your message. Please try again later."

DELIVERY_MESSAGES = {
    DeliveryFailureKind.AUTH: (
        "Email service authentication failed. Please try again later."
    ),
    DeliveryFailureKind.CONNECTION: (
        "Could not connect to the email service. Please try again later."
    ),
    DeliveryFailureKind.OTHER: "Failed to send message. Please try again later.",
}


class IntakeResult(BaseModel):
    """Uniform outcome of one intake request."""

    success: bool = Field(..., description="Whether the intake succeeded")
    message: str = Field(..., description="Human-readable message for the caller")
    error_code: str | None = Field(
        default=None, description="Machine-readable failure code"
    )
    status_code: int = Field(default=200, description="HTTP status for a binding")
    submission_id: str | None = Field(
        default=None, description="ID of the stored submission, if any"
    )

    def to_response(self) -> dict[str, Any]:
        """Return the caller-facing payload: success flag and message only."""
        return {"success": self.success, "message": self.message}


def failure_message(error: IntakeError) -> str:
    """Map an intake error to its caller-facing message."""
    if isinstance(error, ValidationError):
        return VALIDATION_MESSAGES[error.reason]
    if isinstance(error, ConfigurationError):
        return CONFIGURATION_MESSAGE
    if isinstance(error, PersistenceError):
        return PERSISTENCE_MESSAGE
    if isinstance(error, DeliveryError):
        return DELIVERY_MESSAGES[error.kind]
    return DELIVERY_MESSAGES[DeliveryFailureKind.OTHER]


class IntakeService:
    """Validate, persist and notify for inbound contact submissions.

    Attributes:
        store: Durable submission store.
        mail_config: Outbound mail configuration.
        mailer: Transport used to send notifications.
        audit_logger: Optional audit trail.
    """

    def __init__(
        self,
        store: SubmissionStore,
        mail_config: MailConfig,
        mailer: Mailer | None = None,
        audit_logger: AuditLogger | None = None,
    ) -> None:
        self.store = store
        self.mail_config = mail_config
        self.mailer = mailer if mailer is not None else SMTPMailer(mail_config)
        self.audit_logger = audit_logger

    def _audit(
        self, action: AuditAction, resource_id: str, details: dict[str, Any]
    ) -> None:
        if self.audit_logger is None:
            return
        try:
            self.audit_logger.record(action, resource_id, details)
        except OSError as e:
            logger.error("Audit write for %s failed: %s", resource_id, e)

    def _check_configuration(self) -> None:
        missing = self.mail_config.missing_settings()
        if missing:
            raise ConfigurationError(
                "Mail transport is not configured", missing=missing
            )

    def _persist(self, request: ContactRequest) -> Submission:
        try:
            return self.store.append(request)
        except StorageError as e:
            raise PersistenceError(str(e)) from e

    def _notify(self, submission: Submission) -> None:
        message = compose_notification(submission, self.mail_config)
        try:
            self.mailer.send(message)
        except DeliveryError as e:
            self._audit(
                AuditAction.NOTIFICATION_FAILED,
                submission.id,
                {"kind": e.kind.value},
            )
            raise
        self._audit(
            AuditAction.NOTIFICATION_SENT,
            submission.id,
            {"to": self.mail_config.notify_to},
        )

    def _failure(self, error: IntakeError) -> IntakeResult:
        if isinstance(error, ValidationError):
            logger.info(
                "Rejected contact submission (%s): %s", error.code, error.fields
            )
            self._audit(
                AuditAction.SUBMISSION_REJECTED,
                "-",
                {"error_code": error.code, "fields": error.fields},
            )
        elif isinstance(error, ConfigurationError):
            logger.error(
                "Contact intake unavailable, missing mail settings: %s",
                ", ".join(error.missing),
            )
            self._audit(
                AuditAction.SUBMISSION_REJECTED,
                "-",
                {"error_code": error.code, "missing": error.missing},
            )
        else:
            logger.error("Contact intake failed (%s): %s", error.code, error)

        return IntakeResult(
            success=False,
            message=failure_message(error),
            error_code=error.code,
            status_code=error.status_code,
        )

    def submit(self, raw: Mapping[str, Any]) -> IntakeResult:
        """Run the intake pipeline for one contact form payload.

        Args:
            raw: Payload with ``name``, ``email``, ``subject`` and ``message``.
                Anything that is not a mapping is treated as having no fields.

        Returns:
            IntakeResult; failures never raise past this method.
        """
        if not isinstance(raw, Mapping):
            raw = {}

        submission: Submission | None = None
        try:
            request = validate_contact_request(raw)
            self._check_configuration()
            submission = self._persist(request)
            self._audit(
                AuditAction.SUBMISSION_RECEIVED,
                submission.id,
                {"email": submission.email, "subject": submission.subject},
            )
            self._notify(submission)
        except IntakeError as e:
            result = self._failure(e)
            if submission is not None:
                result.submission_id = submission.id
            return result

        logger.info("Accepted contact submission %s", submission.id)
        return IntakeResult(
            success=True,
            message=SUCCESS_MESSAGE,
            submission_id=submission.id,
        )

    def list(self) -> list[Submission]:
        """Return every stored submission, unchanged from the store.

        Raises:
            StorageCorruptError: If the backing collection is unreadable.
        """
        return self.store.list()
