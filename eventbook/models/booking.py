# eventbook/models/booking.py
import uuid
from datetime import datetime, timezone
from sqlalchemy import Column, String, DateTime, ForeignKey
from sqlalchemy.orm import relationship
from eventbook.db.base_class import Base


class Booking(Base):
    __tablename__ = "bookings"

    id = Column(
        String, primary_key=True, default=lambda: f"bkg_{uuid.uuid4().hex[:12]}"
    )
    event_id = Column(String, ForeignKey("events.id"), nullable=False, index=True)
    user_id = Column(String, ForeignKey("users.id"), nullable=False, index=True)
    role_at_booking = Column(String(20), nullable=False)  # PARTICIPANT, VOLUNTEER
    created_at = Column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )

    event = relationship("Event", back_populates="bookings")
    user = relationship("User")
    confirmations = relationship(
        "ReminderConfirmation",
        back_populates="booking",
        order_by="ReminderConfirmation.sent_at.desc()",
    )
