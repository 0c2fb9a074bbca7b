# eventbook/api/v1/endpoints/confirmations.py
"""
Public RSVP endpoints reached from the link in a reminder email.
"""
from fastapi import APIRouter, Depends, Request
from sqlalchemy.orm import Session

from eventbook.core.config import settings
from eventbook.core.limiter import limiter
from eventbook.db.session import get_db
from eventbook.schemas.confirmation import (
    ConfirmationDetail,
    ConfirmationRespondRequest,
    ConfirmationResponse,
)
from eventbook.services import confirmation_handler

router = APIRouter(prefix="/confirm", tags=["Confirmations"])


@router.get("/{token}", response_model=ConfirmationDetail)
def read_confirmation(token: str, db: Session = Depends(get_db)):
    """
    Fetch a confirmation with the event and recipient it belongs to.

    **Errors**:
    - 404: Unknown token
    """
    return confirmation_handler.get_confirmation(db, token)


@router.post("/{token}", response_model=ConfirmationResponse)
@limiter.limit(settings.CONFIRM_RATE_LIMIT)
def respond_to_confirmation(
    token: str,
    request: Request,
    respond_in: ConfirmationRespondRequest,
    db: Session = Depends(get_db),
):
    """
    Confirm or decline attendance.

    **Errors**:
    - 400: `action` missing or not one of `confirm` / `decline`
    - 404: Unknown token
    - 409: Already answered and changing answers is disabled
    """
    return confirmation_handler.respond(db, token, respond_in.action)
