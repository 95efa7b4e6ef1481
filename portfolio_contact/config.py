"""Application settings and service wiring."""

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path

from portfolio_contact.audit.logger import DEFAULT_AUDIT_DIR, AuditLogger
from portfolio_contact.intake.service import IntakeService
from portfolio_contact.notify.config import MailConfig
from portfolio_contact.notify.mailer import Mailer
from portfolio_contact.storage.store import DEFAULT_DATA_FILE, FileSubmissionStore

DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 5000
DEFAULT_RESUME_PATH = Path("AI_Resume.pdf")
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def _parse_origins(value: str) -> list[str]:
    return [origin.strip() for origin in value.split(",") if origin.strip()]


@dataclass
class Settings:
    """Deployment settings for the contact service."""

    data_file: Path = DEFAULT_DATA_FILE
    audit_dir: Path | None = DEFAULT_AUDIT_DIR
    resume_path: Path = DEFAULT_RESUME_PATH
    cors_origins: list[str] = field(default_factory=lambda: ["*"])
    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "Settings":
        """Create settings from environment variables.

        Optional environment variables:
            CONTACT_DATA_FILE: Submission store file (default: data/submissions.json)
            AUDIT_LOG_DIR: Audit log directory, empty to disable (default: audit_logs)
            RESUME_PATH: Resume PDF served for download (default: AI_Resume.pdf)
            CORS_ORIGINS: Comma-separated allowed origins (default: *)
            HOST: Bind address (default: 0.0.0.0)
            PORT: Bind port (default: 5000)
            LOG_LEVEL: Logging level (default: INFO)

        Raises:
            ValueError: If PORT is not an integer.
        """
        audit_dir = os.getenv("AUDIT_LOG_DIR", str(DEFAULT_AUDIT_DIR))
        return cls(
            data_file=Path(os.getenv("CONTACT_DATA_FILE", str(DEFAULT_DATA_FILE))),
            audit_dir=Path(audit_dir) if audit_dir else None,
            resume_path=Path(os.getenv("RESUME_PATH", str(DEFAULT_RESUME_PATH))),
            cors_origins=_parse_origins(os.getenv("CORS_ORIGINS", "*")) or ["*"],
            host=os.getenv("HOST", DEFAULT_HOST),
            port=int(os.getenv("PORT", str(DEFAULT_PORT))),
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        )


def configure_logging(level: str = "INFO") -> None:
    """Configure root logging for the CLI and server entry points."""
    logging.basicConfig(level=level.upper(), format=LOG_FORMAT)


def build_service(
    settings: Settings,
    mail_config: MailConfig | None = None,
    mailer: Mailer | None = None,
) -> IntakeService:
    """Wire an IntakeService from settings.

    Args:
        settings: Deployment settings.
        mail_config: Mail configuration. Loaded from environment if omitted.
        mailer: Optional transport override.

    Returns:
        IntakeService backed by a file store and, when enabled, an audit log.
    """
    if mail_config is None:
        mail_config = MailConfig.from_env()
    audit_logger = AuditLogger(settings.audit_dir) if settings.audit_dir else None
    return IntakeService(
        store=FileSubmissionStore(settings.data_file),
        mail_config=mail_config,
        mailer=mailer,
        audit_logger=audit_logger,
    )
