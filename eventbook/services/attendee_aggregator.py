# eventbook/services/attendee_aggregator.py
"""Attendee list and RSVP summary for the staff reminder console."""

from typing import List

from sqlalchemy.orm import Session

from eventbook import crud
from eventbook.constants.confirmation import BookingRole, ConfirmationStatus
from eventbook.core.errors import NotFoundError
from eventbook.models.booking import Booking
from eventbook.schemas.event import EventSummary
from eventbook.schemas.reminder import Attendee, AttendeeView, ConfirmationStats


def _to_attendee(booking: Booking) -> Attendee:
    # Confirmations are loaded newest first
    latest = booking.confirmations[0] if booking.confirmations else None
    return Attendee(
        id=booking.user.id,
        booking_id=booking.id,
        name=booking.user.name,
        email=booking.user.email,
        role=booking.role_at_booking,
        confirmation_status=latest.status if latest else None,
        last_reminder_sent=latest.sent_at if latest else None,
    )


def summarize(attendees: List[Attendee]) -> ConfirmationStats:
    stats = ConfirmationStats()
    for attendee in attendees:
        status = attendee.confirmation_status
        if status is None:
            stats.not_sent += 1
        elif status == ConfirmationStatus.CONFIRMED:
            stats.confirmed += 1
        elif status == ConfirmationStatus.DECLINED:
            stats.declined += 1
        else:
            stats.pending += 1
    return stats


def get_attendee_view(db: Session, event_id: str) -> AttendeeView:
    event = crud.event.get_with_bookings(db, event_id=event_id)
    if not event:
        raise NotFoundError("Event not found")

    participants = [
        _to_attendee(b) for b in event.bookings
        if b.role_at_booking == BookingRole.PARTICIPANT
    ]
    volunteers = [
        _to_attendee(b) for b in event.bookings
        if b.role_at_booking == BookingRole.VOLUNTEER
    ]
    everyone = participants + volunteers

    return AttendeeView(
        event=EventSummary.model_validate(event),
        participants=participants,
        volunteers=volunteers,
        total_attendees=len(everyone),
        confirmation_stats=summarize(everyone),
    )
