# eventbook/schemas/event.py
from datetime import datetime
from typing import Optional
from pydantic import BaseModel, Field

from eventbook.schemas.tier import LoyaltyTier


class EventSummary(BaseModel):
    id: str
    name: str
    start: datetime
    end: datetime
    location: str

    model_config = {"from_attributes": True}


class CategoryColors(BaseModel):
    color: str
    dot_color: str = Field(..., alias="dotColor")
    border_color: str = Field(..., alias="borderColor")

    model_config = {"populate_by_name": True}


class EventListItem(EventSummary):
    """An event as shown on the calendar and in the staff event picker."""
    created_by: Optional[str] = Field(None, alias="createdBy")
    category: str
    colors: CategoryColors
    min_tier: LoyaltyTier = Field(LoyaltyTier.BRONZE, alias="minTier")
    # Only filled in when the caller states their tier
    can_book: Optional[bool] = Field(None, alias="canBook")

    model_config = {"populate_by_name": True, "from_attributes": True}
