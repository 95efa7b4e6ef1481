"""Intake error taxonomy.

Every failure of the intake pipeline is an ``IntakeError`` carrying a
machine-readable ``code`` and the HTTP status a binding should answer
with. These never cross the service boundary; ``IntakeService.submit``
converts them into a uniform result.
"""

from portfolio_contact.models.enums import DeliveryFailureKind, ValidationReason


class IntakeError(Exception):
    """Base exception for intake pipeline errors."""

    code: str = "intake_error"
    status_code: int = 500


class ValidationError(IntakeError):
    """Caller input defect."""

    status_code = 400

    def __init__(self, reason: ValidationReason, fields: list[str] | None = None):
        super().__init__(f"Validation failed: {reason.value}")
        self.reason = reason
        self.fields = fields or []

    @property
    def code(self) -> str:  # type: ignore[override]
        return self.reason.value


class ConfigurationError(IntakeError):
    """The mail transport cannot be used in this deployment."""

    code = "configuration"
    status_code = 503

    def __init__(self, message: str, missing: list[str] | None = None):
        super().__init__(message)
        self.missing = missing or []


class PersistenceError(IntakeError):
    """The submission could not be durably recorded."""

    code = "persistence"


class DeliveryError(IntakeError):
    """The notification transport failed after the submission was stored."""

    def __init__(self, kind: DeliveryFailureKind, message: str):
        super().__init__(message)
        self.kind = kind

    @property
    def code(self) -> str:  # type: ignore[override]
        return f"delivery_{self.kind.value}"
