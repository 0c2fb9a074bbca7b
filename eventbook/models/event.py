# eventbook/models/event.py
import uuid
from sqlalchemy import Column, String, DateTime, text
from sqlalchemy.orm import relationship
from eventbook.db.base_class import Base


class Event(Base):
    __tablename__ = "events"

    id = Column(
        String, primary_key=True, default=lambda: f"evt_{uuid.uuid4().hex[:12]}"
    )
    name = Column(String, nullable=False)
    start = Column(DateTime(timezone=True), nullable=False, index=True)
    end = Column(DateTime(timezone=True), nullable=False)
    location = Column(String, nullable=False)
    created_by = Column(String, nullable=True)

    # Lowest loyalty tier allowed to book: BRONZE, SILVER, GOLD, PLATINUM
    min_tier = Column(String(20), nullable=False, server_default=text("'BRONZE'"))

    bookings = relationship(
        "Booking", back_populates="event", order_by="Booking.created_at"
    )
