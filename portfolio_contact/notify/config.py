"""Mail transport configuration."""

import os
from dataclasses import dataclass

# Defaults match a Gmail account with an app password
DEFAULT_SMTP_HOST = "smtp.gmail.com"
DEFAULT_SMTP_PORT = 587
DEFAULT_SUBJECT_PREFIX = "Contact Form: "
DEFAULT_TIMEOUT = 10.0

_FALSE_VALUES = {"0", "false", "no", "off"}


@dataclass
class MailConfig:
    """Configuration for the outbound notification transport.

    A config with missing credentials is still a valid object; callers
    check ``is_configured`` before relying on it.
    """

    username: str | None = None
    password: str | None = None
    smtp_host: str = DEFAULT_SMTP_HOST
    smtp_port: int = DEFAULT_SMTP_PORT
    notify_to: str | None = None
    from_address: str | None = None
    subject_prefix: str = DEFAULT_SUBJECT_PREFIX
    use_tls: bool = True
    timeout: float = DEFAULT_TIMEOUT

    def __post_init__(self) -> None:
        """Fill addresses that default to the account itself."""
        if not self.notify_to:
            self.notify_to = self.username
        if not self.from_address:
            self.from_address = self.username

    @classmethod
    def from_env(cls) -> "MailConfig":
        """Create config from environment variables.

        Credential variables:
            EMAIL_USER: SMTP account (also the default recipient and sender)
            EMAIL_PASS: SMTP password or app password

        Optional environment variables:
            SMTP_HOST: SMTP server (default: smtp.gmail.com)
            SMTP_PORT: SMTP port (default: 587)
            NOTIFY_TO: Address that receives notifications
            MAIL_FROM: Sender address
            MAIL_SUBJECT_PREFIX: Prefix for notification subjects
            SMTP_USE_TLS: Whether to issue STARTTLS (default: true)
            SMTP_TIMEOUT: Transport timeout in seconds (default: 10)

        Raises:
            ValueError: If a numeric variable cannot be parsed.
        """
        return cls(
            username=os.getenv("EMAIL_USER") or None,
            password=os.getenv("EMAIL_PASS") or None,
            smtp_host=os.getenv("SMTP_HOST") or DEFAULT_SMTP_HOST,
            smtp_port=int(os.getenv("SMTP_PORT", str(DEFAULT_SMTP_PORT))),
            notify_to=os.getenv("NOTIFY_TO") or None,
            from_address=os.getenv("MAIL_FROM") or None,
            subject_prefix=os.getenv("MAIL_SUBJECT_PREFIX", DEFAULT_SUBJECT_PREFIX),
            use_tls=os.getenv("SMTP_USE_TLS", "true").strip().lower()
            not in _FALSE_VALUES,
            timeout=float(os.getenv("SMTP_TIMEOUT", str(DEFAULT_TIMEOUT))),
        )

    def missing_settings(self) -> list[str]:
        """Return the names of required settings that are absent."""
        missing = []
        if not self.username:
            missing.append("EMAIL_USER")
        if not self.password:
            missing.append("EMAIL_PASS")
        if not self.notify_to:
            missing.append("NOTIFY_TO")
        if not self.smtp_host:
            missing.append("SMTP_HOST")
        return missing

    @property
    def is_configured(self) -> bool:
        """Whether notifications can be sent with this config."""
        return not self.missing_settings()
