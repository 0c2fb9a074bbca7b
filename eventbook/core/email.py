# eventbook/core/email.py
"""
Email service using Resend for sending reminder emails.
"""
import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional

import resend
from jinja2 import Environment, FileSystemLoader, select_autoescape

from eventbook.core.config import settings
from eventbook.core.errors import UpstreamFailure

logger = logging.getLogger(__name__)

BRAND_NAME = "Platform One"

TEMPLATE_DIR = Path(__file__).parent.parent / "templates"
REMINDER_TEMPLATE = "reminder_email.html"

_jinja_env = Environment(
    loader=FileSystemLoader(str(TEMPLATE_DIR)),
    autoescape=select_autoescape(["html"]),
)


def is_email_configured() -> bool:
    """Without an API key reminders run in mock mode."""
    return bool(settings.RESEND_API_KEY)


def init_resend():
    """Initialize Resend with API key."""
    resend.api_key = settings.RESEND_API_KEY


def format_event_date(value: datetime) -> str:
    """Long date with weekday and time, e.g. 'Wednesday, January 8, 2025 at 02:00 PM'."""
    return f"{value:%A, %B} {value.day}, {value.year} at {value:%I:%M %p}"


def build_confirmation_url(token: str) -> str:
    return f"{settings.APP_BASE_URL.rstrip('/')}/confirm/{token}"


def render_reminder_email(
    recipient_name: str,
    event_name: str,
    event_date: str,
    event_location: str,
    message: str,
    confirmation_url: Optional[str] = None,
) -> str:
    """
    Render the reminder email HTML.

    The free-text message is escaped and keeps its line breaks. The
    confirmation call to action is only rendered when a URL is given.
    """
    template = _jinja_env.get_template(REMINDER_TEMPLATE)
    return template.render(
        brand_name=BRAND_NAME,
        recipient_name=recipient_name,
        event_name=event_name,
        event_date=event_date,
        event_location=event_location,
        message=message,
        confirmation_url=confirmation_url,
        year=datetime.now(timezone.utc).year,
    )


def send_email(to_email: str, subject: str, html: str) -> dict:
    """
    Send a single email through Resend.

    Returns:
        Resend API response

    Raises:
        UpstreamFailure: if Resend rejects the message
    """
    init_resend()

    params = {
        "from": settings.RESEND_FROM_EMAIL,
        "to": [to_email],
        "subject": subject,
        "html": html,
    }

    try:
        response = resend.Emails.send(params)
    except Exception as e:
        raise UpstreamFailure(str(e), recipient=to_email) from e

    logger.info(f"[EMAIL] Reminder sent to {to_email}: {subject}")
    return response
