# eventbook/models/reminder_confirmation.py
"""
Reminder confirmation model.

Each reminder sent with a confirmation link creates one record. The token in
the link is the only credential the recipient needs to read or answer it, so
it must be unique and unguessable. A booking may accumulate several records;
its current status is the one on the most recently sent record.
"""

import uuid
import secrets
from datetime import datetime, timezone
from sqlalchemy import Column, String, DateTime, ForeignKey, Index, text
from sqlalchemy.orm import relationship

from eventbook.db.base_class import Base


def generate_confirmation_token():
    """Generate a secure random token for a confirmation link."""
    return secrets.token_urlsafe(32)


class ReminderConfirmation(Base):
    __tablename__ = "reminder_confirmations"

    id = Column(
        String, primary_key=True, default=lambda: f"rcf_{uuid.uuid4().hex[:12]}"
    )
    token = Column(
        String(64), nullable=False, unique=True, index=True,
        default=generate_confirmation_token,
    )
    booking_id = Column(
        String,
        ForeignKey("bookings.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    status = Column(String(20), nullable=False, server_default=text("'PENDING'"))
    sent_at = Column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )
    # Null while PENDING
    responded_at = Column(DateTime(timezone=True), nullable=True)

    booking = relationship("Booking", back_populates="confirmations")

    __table_args__ = (
        Index("idx_reminder_confirmations_latest", "booking_id", "sent_at"),
    )

    def __repr__(self) -> str:
        return f"<ReminderConfirmation {self.id} booking={self.booking_id} status={self.status}>"
