"""
test_chat_api.py
================
HTTP tests for the assistant API.
Covers:
 - chat replies and the booking action payload
 - error responses for malformed bodies and internal faults
 - roster, health, and UI endpoints
"""

from carebook.routes import chat as chat_route
from carebook.routes.chat import APOLOGY
from carebook.services.responder import HELP_MENU


# --------------------------------------------------------------------------
# CHAT
# --------------------------------------------------------------------------

def test_booking_returns_action_and_payload(client):
    res = client.post(
        "/api/chat",
        json={"message": "Book Dr. Michael Chen at 3:00 PM", "appointments": []},
    )
    assert res.status_code == 200

    data = res.json()
    assert data["action"] == "book_appointment"
    assert data["appointmentData"] == {
        "doctorName": "Dr. Michael Chen",
        "specialty": "Cardiologist",
        "date": "Tomorrow",
        "time": "3:00 pm",
    }
    assert "Dr. Michael Chen (Cardiologist)" in data["reply"]


def test_plain_reply_omits_action_fields(client):
    res = client.post("/api/chat", json={"message": "hello"})
    assert res.status_code == 200
    assert res.json() == {"reply": HELP_MENU}


def test_appointments_may_be_null(client):
    res = client.post("/api/chat", json={"message": "list doctors", "appointments": None})
    assert res.status_code == 200
    assert res.json()["reply"].startswith("We have 4 excellent doctors")


def test_existing_appointments_are_accepted(client):
    appointments = [
        {
            "id": "1700000000000",
            "doctorName": "Dr. Sarah Johnson",
            "specialty": "General Physician",
            "date": "Friday",
            "time": "9 am",
            "status": "Confirmed",
        }
    ]
    res = client.post(
        "/api/chat",
        json={"message": "Is a pediatrician available?", "appointments": appointments},
    )
    assert res.status_code == 200
    assert "Dr. James Wilson: 8:00 AM, 10:00 AM, 1:00 PM, 3:00 PM" in res.json()["reply"]


def test_same_message_same_reply(client):
    body = {"message": "book with a dermatologist on monday"}
    first = client.post("/api/chat", json=body).json()
    second = client.post("/api/chat", json=body).json()
    assert first == second
    assert "action" not in first


# --------------------------------------------------------------------------
# ERRORS
# --------------------------------------------------------------------------

def test_invalid_json_returns_apology(client):
    res = client.post(
        "/api/chat", content="not json", headers={"Content-Type": "application/json"}
    )
    assert res.status_code == 500
    assert res.json() == {"reply": APOLOGY}


def test_missing_message_returns_apology(client):
    res = client.post("/api/chat", json={"appointments": []})
    assert res.status_code == 500
    assert res.json() == {"reply": APOLOGY}


def test_non_string_message_returns_apology(client):
    res = client.post("/api/chat", json={"message": 42})
    assert res.status_code == 500
    assert res.json() == {"reply": APOLOGY}


def test_malformed_appointment_returns_apology(client):
    res = client.post(
        "/api/chat", json={"message": "hi", "appointments": [{"doctorName": "x"}]}
    )
    assert res.status_code == 500
    assert res.json() == {"reply": APOLOGY}


def test_appointment_without_status_returns_apology(client):
    appointment = {
        "id": "1700000000000",
        "doctorName": "Dr. Sarah Johnson",
        "specialty": "General Physician",
        "date": "Friday",
        "time": "9 am",
    }
    res = client.post("/api/chat", json={"message": "hi", "appointments": [appointment]})
    assert res.status_code == 500
    assert res.json() == {"reply": APOLOGY}


def test_internal_fault_is_logged_and_answered(client, monkeypatch, caplog):
    def boom(message, roster):
        raise RuntimeError("classifier exploded")

    monkeypatch.setattr(chat_route, "classify", boom)
    res = client.post("/api/chat", json={"message": "book"})

    assert res.status_code == 500
    assert res.json() == {"reply": APOLOGY}
    assert "chat_error" in caplog.text


# --------------------------------------------------------------------------
# OTHER ENDPOINTS
# --------------------------------------------------------------------------

def test_list_doctors_endpoint(client):
    res = client.get("/api/doctors")
    assert res.status_code == 200

    doctors = res.json()
    assert [d["name"] for d in doctors] == [
        "Dr. Sarah Johnson",
        "Dr. Michael Chen",
        "Dr. Emily Rodriguez",
        "Dr. James Wilson",
    ]
    assert doctors[1] == {
        "id": "2",
        "name": "Dr. Michael Chen",
        "specialty": "Cardiologist",
        "availability": ["10:00 AM", "1:00 PM", "3:00 PM"],
        "rating": 4.9,
    }


def test_health(client):
    res = client.get("/health")
    assert res.status_code == 200
    assert res.json() == {"status": "ok"}


def test_ui_is_served(client):
    res = client.get("/")
    assert res.status_code == 200
    assert "text/html" in res.headers["content-type"]
    assert "/static/app.js" in res.text
