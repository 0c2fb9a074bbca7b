# eventbook/services/reminder_dispatcher.py
"""
Staff reminder sending.

Resolves an event's bookings for the chosen recipient filter, collapses
duplicate email addresses, optionally mints a confirmation token per
recipient, renders one email each and sends them all concurrently. A
failed send only counts against the failure tally; it never stops the
others. Nothing here is transactional across recipients: tokens that were
created stay created even if their email later fails.
"""

import asyncio
import logging
from dataclasses import dataclass
from typing import Iterable, List, Optional

from sqlalchemy.orm import Session

from eventbook import crud
from eventbook.constants.confirmation import BookingRole
from eventbook.core.config import settings
from eventbook.core.email import (
    build_confirmation_url,
    format_event_date,
    is_email_configured,
    render_reminder_email,
    send_email,
)
from eventbook.core.errors import BadRequestError, NotFoundError
from eventbook.models.booking import Booking
from eventbook.schemas.reminder import (
    DispatchStats,
    RecipientType,
    ReminderDispatchResult,
)

logger = logging.getLogger(__name__)

ROLE_FILTERS = {
    RecipientType.all: None,
    RecipientType.participants: BookingRole.PARTICIPANT,
    RecipientType.volunteers: BookingRole.VOLUNTEER,
}


@dataclass
class ReminderRecipient:
    email: str
    name: str
    booking_id: str
    confirmation_token: Optional[str] = None


@dataclass
class OutgoingEmail:
    to: str
    subject: str
    html: str


def unique_by_email(bookings: Iterable[Booking]) -> List[Booking]:
    """Keep the first booking seen for each email address, preserving order."""
    seen = set()
    unique = []
    for booking in bookings:
        email = booking.user.email
        if email in seen:
            continue
        seen.add(email)
        unique.append(booking)
    return unique


async def dispatch_emails(
    emails: List[OutgoingEmail], *, concurrency: int
) -> List[bool]:
    """
    Send every email with at most `concurrency` in flight and wait for all
    of them to settle.

    Returns:
        One success flag per email, in input order
    """
    semaphore = asyncio.Semaphore(max(1, concurrency))

    async def send_with_semaphore(email: OutgoingEmail):
        async with semaphore:
            # The Resend SDK is blocking, so each send gets a worker thread
            return await asyncio.to_thread(send_email, email.to, email.subject, email.html)

    results = await asyncio.gather(
        *[send_with_semaphore(email) for email in emails],
        return_exceptions=True,
    )

    outcomes = []
    for email, result in zip(emails, results):
        if isinstance(result, BaseException):
            logger.error(
                f"[EMAIL ERROR] Failed to send reminder to {email.to}: {result}",
                exc_info=result,
            )
            outcomes.append(False)
        else:
            outcomes.append(True)
    return outcomes


def _resolve_recipients(
    db: Session, *, event_id: str, recipient_type: RecipientType
) -> List[Booking]:
    bookings = crud.booking.get_multi_by_event(
        db, event_id=event_id, role=ROLE_FILTERS[recipient_type]
    )
    if not bookings:
        raise BadRequestError("No recipients found for the selected criteria")
    return unique_by_email(bookings)


async def send_reminders(
    db: Session,
    *,
    event_id: str,
    subject: str,
    message: str,
    recipient_type: RecipientType = RecipientType.all,
    include_confirmation_link: bool = False,
) -> ReminderDispatchResult:
    event = crud.event.get(db, id=event_id)
    if not event:
        raise NotFoundError("Event not found")

    bookings = _resolve_recipients(db, event_id=event.id, recipient_type=recipient_type)

    # Tokens are created one at a time; each email needs its own token.
    recipients: List[ReminderRecipient] = []
    for booking in bookings:
        token = None
        if include_confirmation_link:
            token = crud.confirmation.create_for_booking(db, booking_id=booking.id).token
        recipients.append(
            ReminderRecipient(
                email=booking.user.email,
                name=booking.user.name,
                booking_id=booking.id,
                confirmation_token=token,
            )
        )

    tokens_created = len(recipients) if include_confirmation_link else 0
    recipient_emails = [r.email for r in recipients]

    if not is_email_configured():
        logger.warning(
            f"RESEND_API_KEY not configured. Mock sending reminders for event {event.id} "
            f"to: {recipient_emails}"
        )
        return ReminderDispatchResult(
            message=(
                f"Email would be sent to {len(recipients)} recipient(s) "
                "(API key not configured)"
            ),
            recipients=recipient_emails,
            confirmation_tokens_created=tokens_created,
            mock=True,
        )

    event_date = format_event_date(event.start)
    emails = [
        OutgoingEmail(
            to=recipient.email,
            subject=subject,
            html=render_reminder_email(
                recipient_name=recipient.name,
                event_name=event.name,
                event_date=event_date,
                event_location=event.location,
                message=message,
                confirmation_url=(
                    build_confirmation_url(recipient.confirmation_token)
                    if recipient.confirmation_token
                    else None
                ),
            ),
        )
        for recipient in recipients
    ]

    outcomes = await dispatch_emails(emails, concurrency=settings.REMINDER_SEND_CONCURRENCY)
    successful = sum(1 for ok in outcomes if ok)
    failed = len(outcomes) - successful

    logger.info(
        f"Reminders for event {event.id}: {successful}/{len(outcomes)} sent, "
        f"{failed} failed, {tokens_created} confirmation tokens created"
    )

    return ReminderDispatchResult(
        message="Emails sent successfully",
        stats=DispatchStats(total=len(recipients), successful=successful, failed=failed),
        recipients=recipient_emails,
        confirmation_tokens_created=tokens_created,
    )
