from __future__ import annotations

from datetime import date, datetime, time, timedelta

import pytest

from leavetrack.main import create_app
from leavetrack.store.seed import DEMO_PASSWORD


@pytest.fixture
def app():
    return create_app("leavetrack.config.testing")


@pytest.fixture
def client(app):
    return app.test_client()


def login(client, email):
    return client.post("/auth/login", json={"email": email, "password": DEMO_PASSWORD})


def test_login_required(client):
    assert client.get("/dashboard").status_code == 401
    assert client.post("/leaves/2/approve").status_code == 401


def test_bad_credentials(client):
    resp = client.post("/auth/login", json={"email": "admin@example.com", "password": "nope"})

    assert resp.status_code == 401
    assert "error" in resp.get_json()


def test_member_dashboard(client):
    resp = login(client, "member@example.com")
    assert resp.status_code == 200
    assert resp.get_json()["role"] == "member"

    body = client.get("/dashboard").get_json()
    assert body["summary"] == {
        "approved": 1,
        "rejected": 0,
        "pending": 1,
        "total": 2,
        "used_days": 5.0,
        "remaining_days": 15.0,
    }
    assert [lv["id"] for lv in body["leaves"]] == [1, 2]


def test_demo_login(client):
    resp = client.post("/auth/demo-login")

    assert resp.status_code == 200
    assert resp.get_json()["email"] == "member@example.com"
    assert client.get("/auth/me").get_json()["id"] == 2

    client.post("/auth/logout")
    assert client.get("/auth/me").status_code == 401


def test_admin_reviews_pending_request_once(client):
    login(client, "admin@example.com")

    first = client.post("/leaves/2/approve", json={"note": "Enjoy"})
    assert first.status_code == 200
    assert first.get_json()["status"] == "approved"
    assert first.get_json()["reviewed_by"] == 1
    assert first.get_json()["review_note"] == "Enjoy"

    again = client.post("/leaves/2/reject")
    assert again.status_code == 409

    summary = client.get("/leaves/summary/2").get_json()
    assert summary["used_days"] == 5.5
    assert summary["remaining_days"] == 14.5


def test_member_cannot_review(client):
    login(client, "member@example.com")

    assert client.post("/leaves/2/approve").status_code == 403
    assert client.get("/leaves/summary/3").status_code == 403


def test_not_found_and_validation(client):
    login(client, "admin@example.com")

    assert client.post("/leaves/99/approve").status_code == 404
    assert client.get("/leaves/summary/99").status_code == 404

    resp = client.post(
        "/leaves",
        json={"type": "annual", "start_date": "2026-03-05", "end_date": "2026-03-01"},
    )
    assert resp.status_code == 400


def test_half_day_on_range_conflicts(client):
    login(client, "member@example.com")

    resp = client.post(
        "/leaves",
        json={"type": "annual", "start_date": "2026-03-02", "end_date": "2026-03-03", "half_day": "morning"},
    )
    assert resp.status_code == 409


def test_submit_leave(client):
    login(client, "member@example.com")

    resp = client.post(
        "/leaves",
        json={"type": "normal", "start_date": "2026-03-02", "end_date": "2026-03-02", "reason": "Moving"},
    )

    assert resp.status_code == 201
    body = resp.get_json()
    assert body["status"] == "pending"
    assert body["user_id"] == 2
    assert client.get("/dashboard").get_json()["summary"]["pending"] == 2


def test_calendar_day_shows_teammate(client):
    login(client, "member@example.com")
    day = (date.today() + timedelta(days=10)).isoformat()

    body = client.get(f"/calendar/day?date={day}").get_json()

    assert body["own_leaves"] == []
    assert [(lv["user_id"], lv["user_name"]) for lv in body["team_leaves"]] == [(4, "Michael Chen")]


def test_calendar_day_rejects_bad_date(client):
    login(client, "member@example.com")

    assert client.get("/calendar/day?date=tomorrow").status_code == 400


def test_project_calendar_membership(client):
    login(client, "member@example.com")

    assert client.get("/projects/2/calendar").status_code == 403
    assert client.get("/projects/1/calendar").status_code == 200


def test_settings_admin_only(client):
    login(client, "member@example.com")
    assert client.put("/settings", json={"country": "UK"}).status_code == 403
    assert "US" in client.get("/settings").get_json()["countries"]

    client.post("/auth/logout")
    login(client, "admin@example.com")
    resp = client.put("/settings", json={"country": "uk"})
    assert resp.status_code == 200
    assert resp.get_json()["country"] == "UK"


def test_create_user_with_non_text_name_is_rejected(client):
    login(client, "admin@example.com")

    resp = client.post(
        "/users",
        json={"first_name": 5, "last_name": "Lovelace", "email": "ada@example.com", "job_description": "Analyst"},
    )

    assert resp.status_code == 400
    assert "First name" in resp.get_json()["error"]
    assert len(client.get("/users").get_json()) == 5


def test_users_list_includes_leave_summary(client):
    login(client, "admin@example.com")

    rows = {row["id"]: row for row in client.get("/users").get_json()}

    assert rows[2]["summary"]["used_days"] == 5.0
    assert rows[2]["summary"]["pending"] == 1
    assert rows[3]["summary"]["rejected"] == 1
    assert rows[4]["summary"]["remaining_days"] == 19.5


def test_delete_project(client):
    login(client, "member@example.com")
    assert client.delete("/projects/1").status_code == 403

    client.post("/auth/logout")
    login(client, "admin@example.com")
    assert client.delete("/projects/1").status_code == 200
    assert client.get("/projects/1").status_code == 404
    assert client.delete("/projects/1").status_code == 404
    assert 1 not in client.get("/users/4").get_json()["projects"]


def test_calendar_day_defaults_to_current_day(client, monkeypatch):
    later = datetime.combine(date.today() + timedelta(days=10), time(12, 0))
    monkeypatch.setattr("leavetrack.calendar_view.controller.now_local", lambda: later)
    login(client, "member@example.com")

    body = client.get("/calendar/day").get_json()

    assert body["date"] == later.date().isoformat()
    assert [lv["user_id"] for lv in body["team_leaves"]] == [4]
