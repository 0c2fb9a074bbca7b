# eventbook/crud/crud_event.py
from typing import List

from sqlalchemy.orm import Session, selectinload

from .base import CRUDBase
from eventbook.models.booking import Booking
from eventbook.models.event import Event


class CRUDEvent(CRUDBase[Event]):
    def get_with_bookings(self, db: Session, *, event_id: str) -> Event | None:
        """
        Fetch an event with its bookings, each booking's user and its
        confirmation records (newest first) loaded up front.
        """
        return (
            db.query(self.model)
            .options(
                selectinload(self.model.bookings).joinedload(Booking.user),
                selectinload(self.model.bookings).selectinload(Booking.confirmations),
            )
            .filter(self.model.id == event_id)
            .first()
        )

    def get_multi_ordered(
        self, db: Session, *, skip: int = 0, limit: int = 100
    ) -> List[Event]:
        return (
            db.query(self.model)
            .order_by(self.model.start.asc())
            .offset(skip)
            .limit(limit)
            .all()
        )


event = CRUDEvent(Event)
