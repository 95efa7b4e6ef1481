"""Outbound email notification for new submissions."""

from portfolio_contact.notify.config import MailConfig
from portfolio_contact.notify.mailer import (
    Mailer,
    SMTPMailer,
    classify_delivery_failure,
)
from portfolio_contact.notify.message import (
    compose_notification,
    render_html_body,
    render_text_body,
)

__all__ = [
    "MailConfig",
    "Mailer",
    "SMTPMailer",
    "classify_delivery_failure",
    "compose_notification",
    "render_html_body",
    "render_text_body",
]
