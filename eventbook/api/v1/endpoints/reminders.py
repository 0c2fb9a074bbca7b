# eventbook/api/v1/endpoints/reminders.py
"""
Staff reminder console: attendee status and reminder sending.
"""
from typing import Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from eventbook.api import deps
from eventbook.core.errors import BadRequestError
from eventbook.db.session import get_db
from eventbook.schemas.reminder import (
    AttendeeView,
    ReminderDispatchResult,
    SendReminderRequest,
)
from eventbook.schemas.token import TokenPayload
from eventbook.services import attendee_aggregator, reminder_dispatcher

router = APIRouter(prefix="/reminders", tags=["Reminders"])


@router.post(
    "",
    response_model=ReminderDispatchResult,
    response_model_exclude_none=True,
)
async def send_reminders(
    reminder_in: SendReminderRequest,
    db: Session = Depends(get_db),
    current_user: TokenPayload = Depends(deps.get_current_staff_user),
):
    """
    Email a reminder to the attendees of an event.

    `recipientType` selects `all`, `participants` or `volunteers`. With
    `includeConfirmationLink` every recipient gets a fresh RSVP link. When no
    email API key is configured the send is simulated and the response carries
    `mock: true`.

    **Errors**:
    - 400: Missing fields or no recipients match the filter
    - 404: Event not found
    """
    return await reminder_dispatcher.send_reminders(
        db,
        event_id=reminder_in.event_id,
        subject=reminder_in.subject,
        message=reminder_in.message,
        recipient_type=reminder_in.recipient_type,
        include_confirmation_link=reminder_in.include_confirmation_link,
    )


@router.get("", response_model=AttendeeView)
def read_attendees(
    event_id: Optional[str] = Query(None, alias="eventId"),
    db: Session = Depends(get_db),
    current_user: TokenPayload = Depends(deps.get_current_staff_user),
):
    """
    List an event's participants and volunteers with their latest RSVP status.
    """
    if not event_id:
        raise BadRequestError("Missing eventId parameter", field="eventId")
    return attendee_aggregator.get_attendee_view(db, event_id)
