# eventbook/models/__init__.py
# Import all models to ensure SQLAlchemy can resolve relationships

from eventbook.db.base_class import Base
from eventbook.models.event import Event
from eventbook.models.user import User
from eventbook.models.booking import Booking
from eventbook.models.reminder_confirmation import ReminderConfirmation

__all__ = [
    "Base",
    "Event",
    "User",
    "Booking",
    "ReminderConfirmation",
]
