# eventbook/schemas/reminder.py
from datetime import datetime
from enum import Enum
from typing import List, Optional
from pydantic import BaseModel, Field

from eventbook.schemas.confirmation import ConfirmationStatus
from eventbook.schemas.event import EventSummary


class RecipientType(str, Enum):
    all = "all"
    participants = "participants"
    volunteers = "volunteers"


class SendReminderRequest(BaseModel):
    event_id: str = Field(..., alias="eventId", min_length=1)
    subject: str = Field(..., min_length=1)
    message: str = Field(..., min_length=1)
    recipient_type: RecipientType = Field(RecipientType.all, alias="recipientType")
    include_confirmation_link: bool = Field(False, alias="includeConfirmationLink")

    model_config = {"populate_by_name": True}


class DispatchStats(BaseModel):
    total: int
    successful: int
    failed: int


class ReminderDispatchResult(BaseModel):
    success: bool = True
    message: str
    # Absent in mock mode, where nothing is actually sent
    stats: Optional[DispatchStats] = None
    recipients: List[str]
    confirmation_tokens_created: int = Field(0, alias="confirmationTokensCreated")
    mock: Optional[bool] = None

    model_config = {"populate_by_name": True}


class Attendee(BaseModel):
    id: str
    booking_id: str = Field(..., alias="bookingId")
    name: str
    email: str
    role: str
    confirmation_status: Optional[ConfirmationStatus] = Field(
        None, alias="confirmationStatus"
    )
    last_reminder_sent: Optional[datetime] = Field(None, alias="lastReminderSent")

    model_config = {"populate_by_name": True}


class ConfirmationStats(BaseModel):
    confirmed: int = 0
    declined: int = 0
    pending: int = 0
    not_sent: int = Field(0, alias="notSent")

    model_config = {"populate_by_name": True}


class AttendeeView(BaseModel):
    event: EventSummary
    participants: List[Attendee]
    volunteers: List[Attendee]
    total_attendees: int = Field(..., alias="totalAttendees")
    confirmation_stats: ConfirmationStats = Field(..., alias="confirmationStats")

    model_config = {"populate_by_name": True}
