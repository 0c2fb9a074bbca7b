# eventbook/schemas/confirmation.py
from datetime import datetime
from enum import Enum
from typing import Optional
from pydantic import BaseModel, Field

from eventbook.constants import confirmation as confirmation_constants
from eventbook.schemas.event import EventSummary


# Same values as the stored status strings
ConfirmationStatus = Enum(
    "ConfirmationStatus",
    {value: value for value in confirmation_constants.ConfirmationStatus.all_values()},
    type=str,
)


class ConfirmationRespondRequest(BaseModel):
    # Checked by the confirmation handler so that bad values get the
    # dedicated "Invalid action" error rather than a schema error.
    action: Optional[str] = Field(None, json_schema_extra={"example": "confirm"})


class ConfirmationUser(BaseModel):
    name: str
    email: str


class ConfirmationDetail(BaseModel):
    """Everything the recipient page needs to render an RSVP link."""
    id: str
    token: str
    status: ConfirmationStatus
    sent_at: datetime = Field(..., alias="sentAt")
    responded_at: Optional[datetime] = Field(None, alias="respondedAt")
    event: EventSummary
    user: ConfirmationUser

    model_config = {"populate_by_name": True}


class ConfirmationResponse(BaseModel):
    success: bool = True
    message: str
    status: ConfirmationStatus
    event_name: str = Field(..., alias="eventName")

    model_config = {"populate_by_name": True}
