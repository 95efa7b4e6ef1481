"""Notification email composition."""

import html
from email.message import EmailMessage

from portfolio_contact.models.submission import Submission
from portfolio_contact.notify.config import MailConfig


def render_text_body(submission: Submission) -> str:
    """Render the plain-text notification body."""
    return (
        f"Name: {submission.name}\n"
        f"Email: {submission.email}\n"
        f"Subject: {submission.subject}\n"
        f"Message:\n{submission.message}\n"
    )


def render_html_body(submission: Submission) -> str:
    """Render the HTML notification body.

    All fields are escaped; newlines in the message become line breaks.
    """
    message_html = "<br>".join(
        html.escape(line) for line in submission.message.splitlines()
    )
    return (
        "<h2>New Contact Form Submission</h2>\n"
        f"<p><strong>Name:</strong> {html.escape(submission.name)}</p>\n"
        f"<p><strong>Email:</strong> {html.escape(submission.email)}</p>\n"
        f"<p><strong>Subject:</strong> {html.escape(submission.subject)}</p>\n"
        "<hr/>\n"
        f"<p>{message_html}</p>\n"
    )


def compose_notification(submission: Submission, config: MailConfig) -> EmailMessage:
    """Build the owner notification for a stored submission.

    Args:
        submission: The submission that was just recorded.
        config: Mail configuration supplying addresses and subject prefix.

    Returns:
        A multipart/alternative message with text and HTML parts, replying
        to the submitter.
    """
    msg = EmailMessage()
    # Header values may not contain line breaks
    subject = " ".join(submission.subject.split())
    msg["Subject"] = f"{config.subject_prefix}{subject}"
    msg["From"] = config.from_address or ""
    msg["To"] = config.notify_to or ""
    msg["Reply-To"] = submission.email
    msg.set_content(render_text_body(submission))
    msg.add_alternative(render_html_body(submission), subtype="html")
    return msg
