# tests/api/v1/test_reminders.py

from unittest.mock import MagicMock

from fastapi.testclient import TestClient
from jose import jwt
from sqlalchemy.orm import Session

from eventbook.core.config import settings
from eventbook.models.reminder_confirmation import ReminderConfirmation
from eventbook.services import reminder_dispatcher
from tests.utils.auth import get_user_authentication_headers
from tests.utils.booking import book, create_random_event


def _seed(db_session: Session):
    event = create_random_event(db_session, name="Community Park")
    book(db_session, event, "Ana", "ana@example.com", "PARTICIPANT")
    book(db_session, event, "Ben", "ben@example.com", "PARTICIPANT")
    book(db_session, event, "Cleo", "cleo@example.com", "VOLUNTEER")
    return event


def test_send_reminders_mock_mode(test_client_e2e: TestClient, db_session: Session):
    event = _seed(db_session)

    response = test_client_e2e.post(
        "/api/v1/reminders",
        json={
            "eventId": event.id,
            "subject": "See you tomorrow",
            "message": "Doors open at 2pm",
            "recipientType": "all",
            "includeConfirmationLink": True,
        },
    )

    assert response.status_code == 200
    body = response.json()
    assert body["success"] is True
    assert body["mock"] is True
    assert body["recipients"] == ["ana@example.com", "ben@example.com", "cleo@example.com"]
    assert body["confirmationTokensCreated"] == 3
    assert "stats" not in body
    assert db_session.query(ReminderConfirmation).count() == 3


def test_send_reminders_live(monkeypatch, test_client_e2e: TestClient, db_session: Session):
    event = _seed(db_session)
    monkeypatch.setattr(settings, "RESEND_API_KEY", "re_test_key")
    sender = MagicMock(return_value={"id": "msg_1"})
    monkeypatch.setattr(reminder_dispatcher, "send_email", sender)

    response = test_client_e2e.post(
        "/api/v1/reminders",
        json={
            "eventId": event.id,
            "subject": "Volunteers needed",
            "message": "Please arrive early",
            "recipientType": "volunteers",
        },
    )

    assert response.status_code == 200
    body = response.json()
    assert body["stats"] == {"total": 1, "successful": 1, "failed": 0}
    assert body["recipients"] == ["cleo@example.com"]
    assert body["confirmationTokensCreated"] == 0
    assert "mock" not in body
    sender.assert_called_once()
    assert sender.call_args[0][0] == "cleo@example.com"


def test_send_reminders_missing_fields(test_client_e2e: TestClient):
    response = test_client_e2e.post(
        "/api/v1/reminders", json={"eventId": "evt_1", "subject": ""}
    )

    assert response.status_code == 400
    assert "subject" in response.json()["error"]
    assert "message" in response.json()["error"]


def test_send_reminders_unknown_event(test_client_e2e: TestClient):
    response = test_client_e2e.post(
        "/api/v1/reminders",
        json={"eventId": "evt_missing", "subject": "s", "message": "m"},
    )

    assert response.status_code == 404
    assert response.json()["error"] == "Event not found"


def test_send_reminders_no_recipients(test_client_e2e: TestClient, db_session: Session):
    event = create_random_event(db_session)
    book(db_session, event, "Ana", "ana@example.com", "PARTICIPANT")

    response = test_client_e2e.post(
        "/api/v1/reminders",
        json={
            "eventId": event.id,
            "subject": "s",
            "message": "m",
            "recipientType": "volunteers",
            "includeConfirmationLink": True,
        },
    )

    assert response.status_code == 400
    assert response.json()["error"] == "No recipients found for the selected criteria"
    assert db_session.query(ReminderConfirmation).count() == 0


def test_attendee_view(test_client_e2e: TestClient, db_session: Session):
    event = _seed(db_session)
    test_client_e2e.post(
        "/api/v1/reminders",
        json={
            "eventId": event.id,
            "subject": "s",
            "message": "m",
            "recipientType": "participants",
            "includeConfirmationLink": True,
        },
    )
    token = db_session.query(ReminderConfirmation).first().token
    test_client_e2e.post(f"/api/v1/confirm/{token}", json={"action": "confirm"})

    response = test_client_e2e.get(f"/api/v1/reminders?eventId={event.id}")

    assert response.status_code == 200
    body = response.json()
    assert body["event"]["name"] == "Community Park"
    assert len(body["participants"]) == 2
    assert len(body["volunteers"]) == 1
    assert body["totalAttendees"] == 3
    assert body["confirmationStats"] == {
        "confirmed": 1,
        "declined": 0,
        "pending": 1,
        "notSent": 1,
    }
    assert body["volunteers"][0]["confirmationStatus"] is None
    assert body["volunteers"][0]["lastReminderSent"] is None
    assert body["participants"][0]["bookingId"]


def test_attendee_view_requires_event_id(test_client_e2e: TestClient):
    response = test_client_e2e.get("/api/v1/reminders")

    assert response.status_code == 400
    assert response.json()["error"] == "Missing eventId parameter"


def test_attendee_view_unknown_event(test_client_e2e: TestClient):
    response = test_client_e2e.get("/api/v1/reminders?eventId=evt_missing")

    assert response.status_code == 404


# --- Staff authorization ---

def test_reminders_require_token(test_client_unauthenticated: TestClient):
    response = test_client_unauthenticated.get("/api/v1/reminders?eventId=evt_1")

    assert response.status_code == 401


def test_reminders_reject_bad_tokens(test_client_unauthenticated: TestClient):
    forged = jwt.encode(
        {"sub": "staff_1", "role": "STAFF", "exp": 9999999999},
        "not-the-server-secret",
        algorithm="HS256",
    )

    for token in ("not-a-jwt", forged):
        response = test_client_unauthenticated.get(
            "/api/v1/reminders?eventId=evt_1",
            headers={"Authorization": f"Bearer {token}"},
        )
        assert response.status_code == 401
        assert response.headers["www-authenticate"] == "Bearer"


def test_reminders_require_staff_role(test_client_unauthenticated: TestClient):
    headers = get_user_authentication_headers(role="PARTICIPANT")

    response = test_client_unauthenticated.post(
        "/api/v1/reminders",
        json={"eventId": "evt_1", "subject": "s", "message": "m"},
        headers=headers,
    )

    assert response.status_code == 403


def test_staff_token_is_accepted(test_client_unauthenticated: TestClient, db_session: Session):
    event = _seed(db_session)
    headers = get_user_authentication_headers(role="STAFF")

    response = test_client_unauthenticated.get(
        f"/api/v1/reminders?eventId={event.id}", headers=headers
    )

    assert response.status_code == 200
