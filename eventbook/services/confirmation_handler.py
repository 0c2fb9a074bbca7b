# eventbook/services/confirmation_handler.py
"""
Recipient-facing RSVP operations addressed by confirmation token.

Possession of the token is the only credential: the link was emailed to the
recipient, so whoever holds it may read and answer the confirmation.
"""

import logging
from typing import Optional

from sqlalchemy.orm import Session

from eventbook import crud
from eventbook.constants.confirmation import ConfirmationAction, ConfirmationStatus
from eventbook.core.config import settings
from eventbook.core.errors import BadRequestError, ConflictError, NotFoundError
from eventbook.models.reminder_confirmation import ReminderConfirmation
from eventbook.schemas.confirmation import (
    ConfirmationDetail,
    ConfirmationResponse,
    ConfirmationUser,
)
from eventbook.schemas.event import EventSummary

logger = logging.getLogger(__name__)

INVALID_LINK_MESSAGE = "Invalid or expired confirmation link"

RESPONSE_MESSAGES = {
    ConfirmationAction.CONFIRM: "Your attendance has been confirmed!",
    ConfirmationAction.DECLINE: "Your response has been recorded.",
}


def _get_or_404(db: Session, token: str) -> ReminderConfirmation:
    confirmation = crud.confirmation.get_by_token(db, token=token)
    if not confirmation:
        raise NotFoundError(INVALID_LINK_MESSAGE)
    return confirmation


def get_confirmation(db: Session, token: str) -> ConfirmationDetail:
    confirmation = _get_or_404(db, token)
    booking = confirmation.booking
    return ConfirmationDetail(
        id=confirmation.id,
        token=confirmation.token,
        status=confirmation.status,
        sent_at=confirmation.sent_at,
        responded_at=confirmation.responded_at,
        event=EventSummary.model_validate(booking.event),
        user=ConfirmationUser(name=booking.user.name, email=booking.user.email),
    )


def respond(
    db: Session,
    token: str,
    action: Optional[str],
    *,
    allow_changes: Optional[bool] = None,
) -> ConfirmationResponse:
    """
    Record a confirm/decline answer.

    By default an answered confirmation can be answered again and the last
    answer wins. With `allow_changes` False (default: ALLOW_RESPONSE_CHANGES)
    only PENDING confirmations accept an answer.
    """
    if not ConfirmationAction.is_valid(action):
        raise BadRequestError(
            "Invalid action. Must be 'confirm' or 'decline'", field="action"
        )

    confirmation = _get_or_404(db, token)

    if allow_changes is None:
        allow_changes = settings.ALLOW_RESPONSE_CHANGES
    if not allow_changes and confirmation.status != ConfirmationStatus.PENDING:
        raise ConflictError(
            f"You have already responded to this reminder ({confirmation.status})."
        )

    event_name = confirmation.booking.event.name
    new_status = ConfirmationAction.to_status(action)
    previous_status = confirmation.status

    updated = crud.confirmation.set_status(db, confirmation=confirmation, status=new_status)
    logger.info(
        f"Confirmation {updated.id} for booking {updated.booking_id}: "
        f"{previous_status} -> {updated.status}"
    )

    return ConfirmationResponse(
        message=RESPONSE_MESSAGES[action],
        status=updated.status,
        event_name=event_name,
    )
