# eventbook/crud/__init__.py

from .crud_booking import booking
from .crud_confirmation import confirmation
from .crud_event import event
