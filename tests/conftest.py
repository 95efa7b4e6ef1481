"""Pytest configuration and fixtures."""

from email.message import EmailMessage
from pathlib import Path
from typing import Any

import pytest

from portfolio_contact.audit.logger import AuditLogger
from portfolio_contact.errors import DeliveryError
from portfolio_contact.intake.service import IntakeService
from portfolio_contact.models.enums import DeliveryFailureKind
from portfolio_contact.notify.config import MailConfig
from portfolio_contact.storage.store import FileSubmissionStore


class FakeMailer:
    """Mailer that records messages instead of sending them."""

    def __init__(self, fail_with: DeliveryFailureKind | None = None) -> None:
        self.fail_with = fail_with
        self.sent: list[EmailMessage] = []

    def send(self, message: EmailMessage) -> None:
        if self.fail_with is not None:
            raise DeliveryError(self.fail_with, "simulated failure")
        self.sent.append(message)


@pytest.fixture
def project_root() -> Path:
    """Return the project root directory."""
    return Path(__file__).parent.parent


@pytest.fixture
def data_file(tmp_path: Path) -> Path:
    """Return a not-yet-existing submission store path."""
    return tmp_path / "data" / "submissions.json"


@pytest.fixture
def store(data_file: Path) -> FileSubmissionStore:
    """Create a file store in a temporary directory."""
    return FileSubmissionStore(data_file)


@pytest.fixture
def mail_config() -> MailConfig:
    """Create a fully configured mail config."""
    return MailConfig(
        username="owner@example.com",
        password="app-password",
        smtp_host="smtp.example.com",
        smtp_port=587,
    )


@pytest.fixture
def mailer() -> FakeMailer:
    """Create a mailer that records sent messages."""
    return FakeMailer()


@pytest.fixture
def audit_logger(tmp_path: Path) -> AuditLogger:
    """Create an audit logger in a temporary directory."""
    return AuditLogger(tmp_path / "audit_logs")


@pytest.fixture
def service(
    store: FileSubmissionStore,
    mail_config: MailConfig,
    mailer: FakeMailer,
    audit_logger: AuditLogger,
) -> IntakeService:
    """Create an intake service with a fake mailer."""
    return IntakeService(
        store=store,
        mail_config=mail_config,
        mailer=mailer,
        audit_logger=audit_logger,
    )


@pytest.fixture
def valid_payload() -> dict[str, Any]:
    """Return a valid contact form payload."""
    return {
        "name": "Ann",
        "email": "ann@x.com",
        "subject": "Hi",
        "message": "Hello there",
    }


@pytest.fixture
def failing_service(
    store: FileSubmissionStore,
    mail_config: MailConfig,
    audit_logger: AuditLogger,
):
    """Return a factory for services whose mailer fails with a given kind."""

    def _make(kind: DeliveryFailureKind) -> IntakeService:
        return IntakeService(
            store=store,
            mail_config=mail_config,
            mailer=FakeMailer(fail_with=kind),
            audit_logger=audit_logger,
        )

    return _make
