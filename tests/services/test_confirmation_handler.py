"""
Tests for token-addressed confirm/decline handling.
"""

import pytest

from eventbook.constants.confirmation import ConfirmationStatus as StoredStatus
from eventbook.core.config import settings
from eventbook.core.errors import BadRequestError, ConflictError, NotFoundError
from eventbook.crud import crud_confirmation
from eventbook.models.reminder_confirmation import ReminderConfirmation
from eventbook.schemas.confirmation import ConfirmationStatus
from eventbook.services.confirmation_handler import get_confirmation, respond
from tests.utils.booking import book, create_random_event


@pytest.fixture
def pending(db_session):
    event = create_random_event(db_session, name="Weekend Workshop", location="Workshop Space")
    booking = book(db_session, event, "Ana", "ana@example.com")
    return crud_confirmation.confirmation.create_for_booking(db_session, booking_id=booking.id)


def test_get_confirmation_includes_event_and_user(db_session, pending):
    detail = get_confirmation(db_session, pending.token)

    assert detail.token == pending.token
    assert detail.status == "PENDING"
    assert detail.responded_at is None
    assert detail.event.name == "Weekend Workshop"
    assert detail.event.location == "Workshop Space"
    assert detail.user.name == "Ana"
    assert detail.user.email == "ana@example.com"


def test_get_unknown_token_is_not_found(db_session):
    with pytest.raises(NotFoundError):
        get_confirmation(db_session, "not-a-token")


@pytest.mark.parametrize(
    "action,status,message",
    [
        ("confirm", "CONFIRMED", "Your attendance has been confirmed!"),
        ("decline", "DECLINED", "Your response has been recorded."),
    ],
)
def test_respond_sets_status_and_timestamp(db_session, pending, action, status, message):
    result = respond(db_session, pending.token, action)

    assert result.success is True
    assert result.status == status
    assert result.message == message
    assert result.event_name == "Weekend Workshop"

    stored = db_session.query(ReminderConfirmation).filter_by(token=pending.token).one()
    assert stored.status == status
    assert stored.responded_at is not None


@pytest.mark.parametrize("action", [None, "", "maybe", "CONFIRM"])
def test_respond_rejects_invalid_action(db_session, pending, action):
    with pytest.raises(BadRequestError):
        respond(db_session, pending.token, action)

    db_session.refresh(pending)
    assert pending.status == "PENDING"


def test_invalid_action_is_reported_before_unknown_token(db_session):
    with pytest.raises(BadRequestError):
        respond(db_session, "not-a-token", "maybe")


def test_respond_unknown_token_is_not_found(db_session):
    with pytest.raises(NotFoundError):
        respond(db_session, "not-a-token", "confirm")


def test_changing_answer_is_allowed_by_default(db_session, pending):
    respond(db_session, pending.token, "confirm")
    result = respond(db_session, pending.token, "decline")

    assert result.status == "DECLINED"


def test_strict_policy_rejects_second_answer(db_session, pending, monkeypatch):
    monkeypatch.setattr(settings, "ALLOW_RESPONSE_CHANGES", False)

    respond(db_session, pending.token, "confirm")
    with pytest.raises(ConflictError):
        respond(db_session, pending.token, "decline")

    db_session.refresh(pending)
    assert pending.status == "CONFIRMED"


def test_explicit_policy_argument_overrides_settings(db_session, pending):
    respond(db_session, pending.token, "decline")

    with pytest.raises(ConflictError):
        respond(db_session, pending.token, "confirm", allow_changes=False)


def test_response_status_enum_matches_stored_values(db_session, pending):
    assert [s.value for s in ConfirmationStatus] == StoredStatus.all_values()

    detail = get_confirmation(db_session, pending.token)
    assert detail.status is ConfirmationStatus.PENDING
    assert detail.status == StoredStatus.PENDING
