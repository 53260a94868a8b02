"""
Reservation notifications - plain-text email via Resend.
"""

import logging
from typing import Any

from django.conf import settings
from django.template import TemplateDoesNotExist, TemplateSyntaxError
from django.template.loader import render_to_string

import resend

logger = logging.getLogger(__name__)


class NotificationError(Exception):
    """Raised when a notification could not be rendered or sent."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


def render_body(template_name: str, context: dict[str, Any]) -> str:
    """Render a plain-text email body from reservations/email/."""
    try:
        body = render_to_string(f"reservations/email/{template_name}", context)
    except (TemplateDoesNotExist, TemplateSyntaxError) as e:
        logger.exception("Could not render email template %s", template_name)
        raise NotificationError(f"Could not render email: {e}") from e
    return body.strip()


def send_email(to_email: str, subject: str, body: str) -> str:
    """
    Send a plain-text email from DEFAULT_FROM_EMAIL.

    Returns:
        Resend email ID

    Raises:
        NotificationError: No recipient, Resend not configured, or the send failed
    """
    if not to_email:
        raise NotificationError("Recipient email address is required")

    api_key = getattr(settings, "RESEND_API_KEY", None)
    if not api_key:
        raise NotificationError("Resend API key not configured")
    resend.api_key = api_key

    try:
        response = resend.Emails.send(
            {  # type: ignore[arg-type]
                "from": settings.DEFAULT_FROM_EMAIL,
                "to": to_email,
                "subject": subject,
                "text": body,
            }
        )
    except Exception as e:
        logger.exception("Failed to send '%s' to %s", subject, to_email)
        raise NotificationError(f"Failed to send email: {e}") from e

    email_id = response.get("id", "") if isinstance(response, dict) else ""
    logger.info("Sent '%s' to %s (ID: %s)", subject, to_email, email_id)
    return str(email_id)
