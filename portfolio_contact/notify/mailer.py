"""SMTP transport for owner notifications."""

import logging
import smtplib
from email.message import EmailMessage
from typing import Protocol

from portfolio_contact.errors import DeliveryError
from portfolio_contact.models.enums import DeliveryFailureKind
from portfolio_contact.notify.config import MailConfig

logger = logging.getLogger(__name__)


class Mailer(Protocol):
    """Protocol for sending a composed notification."""

    def send(self, message: EmailMessage) -> None:
        """Send the message.

        Raises:
            DeliveryError: If the transport fails.
        """
        ...


def classify_delivery_failure(error: Exception) -> DeliveryFailureKind:
    """Map a transport exception to a delivery failure kind.

    Args:
        error: Exception raised while talking to the SMTP server.

    Returns:
        AUTH for rejected credentials, CONNECTION for failures to reach or
        keep the server, OTHER for timeouts and everything else.
    """
    if isinstance(error, smtplib.SMTPAuthenticationError):
        return DeliveryFailureKind.AUTH
    # TimeoutError is an OSError, so check it first
    if isinstance(error, TimeoutError):
        return DeliveryFailureKind.OTHER
    if isinstance(error, (smtplib.SMTPConnectError, smtplib.SMTPServerDisconnected)):
        return DeliveryFailureKind.CONNECTION
    if isinstance(error, smtplib.SMTPException):
        return DeliveryFailureKind.OTHER
    if isinstance(error, OSError):
        return DeliveryFailureKind.CONNECTION
    return DeliveryFailureKind.OTHER


class SMTPMailer:
    """Blocking SMTP mailer with an explicit per-connection timeout."""

    def __init__(self, config: MailConfig) -> None:
        self.config = config

    def send(self, message: EmailMessage) -> None:
        """Deliver a message through the configured SMTP server.

        Args:
            message: Fully composed message with From/To headers.

        Raises:
            DeliveryError: If connecting, authenticating or sending fails,
                including timeouts.
        """
        config = self.config
        try:
            with smtplib.SMTP(
                config.smtp_host, config.smtp_port, timeout=config.timeout
            ) as server:
                if config.use_tls:
                    server.starttls()
                if config.username and config.password:
                    server.login(config.username, config.password)
                server.send_message(message)
        except (smtplib.SMTPException, OSError) as e:
            kind = classify_delivery_failure(e)
            logger.error(
                "Notification delivery via %s:%d failed (%s): %s",
                config.smtp_host,
                config.smtp_port,
                kind.value,
                e,
            )
            raise DeliveryError(kind, f"SMTP delivery failed: {e}") from e

        logger.info("Sent notification to %s", message["To"])
