# eventbook/models/user.py
import uuid
from sqlalchemy import Column, String
from eventbook.db.base_class import Base


class User(Base):
    __tablename__ = "users"

    id = Column(
        String, primary_key=True, default=lambda: f"usr_{uuid.uuid4().hex[:12]}"
    )
    name = Column(String, nullable=False)
    # Recipient address for reminders; not unique, bookings are deduplicated by it
    email = Column(String, nullable=False, index=True)
    tier = Column(String(20), nullable=True)  # BRONZE, SILVER, GOLD, PLATINUM
