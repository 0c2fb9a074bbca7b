# eventbook/api/v1/endpoints/events.py
from typing import List, Optional

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from eventbook.crud import crud_event
from eventbook.db.session import get_db
from eventbook.models.event import Event
from eventbook.schemas.event import CategoryColors, EventListItem
from eventbook.schemas.tier import LoyaltyTier
from eventbook.utils.event_colors import get_category_from_name, get_event_colors
from eventbook.utils.tiers import can_book

router = APIRouter(prefix="/events", tags=["Events"])


def to_list_item(event: Event, tier: Optional[LoyaltyTier] = None) -> EventListItem:
    min_tier = event.min_tier or LoyaltyTier.BRONZE
    return EventListItem(
        id=event.id,
        name=event.name,
        start=event.start,
        end=event.end,
        location=event.location,
        created_by=event.created_by,
        category=get_category_from_name(event.name),
        colors=CategoryColors(**get_event_colors(event.name)),
        min_tier=min_tier,
        can_book=can_book(tier, min_tier) if tier is not None else None,
    )


@router.get("", response_model=List[EventListItem])
def list_events(
    tier: Optional[LoyaltyTier] = None,
    skip: int = 0,
    limit: int = 100,
    db: Session = Depends(get_db),
):
    """
    List events by start time with their display category and colors.

    Pass `tier` to get a `canBook` flag for a user of that loyalty tier.
    """
    events = crud_event.event.get_multi_ordered(db, skip=skip, limit=limit)
    return [to_list_item(event, tier) for event in events]
