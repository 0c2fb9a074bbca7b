# eventbook/crud/crud_booking.py
from typing import List, Optional

from sqlalchemy.orm import Session, joinedload

from .base import CRUDBase
from eventbook.models.booking import Booking


class CRUDBooking(CRUDBase[Booking]):
    def get_multi_by_event(
        self, db: Session, *, event_id: str, role: Optional[str] = None
    ) -> List[Booking]:
        """
        Bookings for an event in booking order, with the user eager-loaded.
        Pass `role` to keep only PARTICIPANT or VOLUNTEER bookings.
        """
        query = (
            db.query(self.model)
            .options(joinedload(self.model.user))
            .filter(self.model.event_id == event_id)
        )
        if role:
            query = query.filter(self.model.role_at_booking == role)
        return query.order_by(self.model.created_at.asc(), self.model.id.asc()).all()


booking = CRUDBooking(Booking)
