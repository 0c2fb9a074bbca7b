# eventbook/crud/crud_confirmation.py
"""
CRUD operations for reminder confirmations.

Handles token creation when reminders are sent and status updates when a
recipient answers the confirmation link.
"""

import logging
from datetime import datetime, timezone
from typing import Optional

from sqlalchemy.orm import Session, joinedload

from .base import CRUDBase
from eventbook.constants.confirmation import ConfirmationStatus
from eventbook.models.booking import Booking
from eventbook.models.reminder_confirmation import (
    ReminderConfirmation,
    generate_confirmation_token,
)

logger = logging.getLogger(__name__)


class CRUDConfirmation(CRUDBase[ReminderConfirmation]):
    def create_for_booking(self, db: Session, *, booking_id: str) -> ReminderConfirmation:
        """
        Create a fresh PENDING confirmation with a new token.

        Earlier confirmations for the same booking are left untouched.
        """
        confirmation = self.model(
            token=generate_confirmation_token(),
            booking_id=booking_id,
            status=ConfirmationStatus.PENDING,
            sent_at=datetime.now(timezone.utc),
        )
        db.add(confirmation)
        db.commit()
        db.refresh(confirmation)
        return confirmation

    def get_by_token(self, db: Session, *, token: str) -> Optional[ReminderConfirmation]:
        """Look up a confirmation by token with its booking, event and user."""
        return (
            db.query(self.model)
            .options(
                joinedload(self.model.booking).joinedload(Booking.event),
                joinedload(self.model.booking).joinedload(Booking.user),
            )
            .filter(self.model.token == token)
            .first()
        )

    def set_status(
        self, db: Session, *, confirmation: ReminderConfirmation, status: str
    ) -> ReminderConfirmation:
        """Record a terminal response. The last write wins."""
        try:
            confirmation.status = status
            confirmation.responded_at = datetime.now(timezone.utc)
            db.commit()
            db.refresh(confirmation)
            return confirmation
        except Exception as e:
            logger.error(
                f"Failed to update confirmation {confirmation.id}: {str(e)}",
                exc_info=True,
                extra={"confirmation_id": confirmation.id, "status": status},
            )
            db.rollback()
            raise


# Singleton instance
confirmation = CRUDConfirmation(ReminderConfirmation)
