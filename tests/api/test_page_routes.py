"""Integration tests for the page endpoints."""

from __future__ import annotations

from io import BytesIO

from fastapi.testclient import TestClient
from openpyxl import load_workbook

from mentorconnect.application.use_cases.pages import DASHBOARD_ERROR, StudentDashboardPage
from mentorconnect.infrastructure.reports import EXCEL_CONTENT_TYPE


def test_pages_require_a_session(client: TestClient) -> None:
    for path in ("/dashboard", "/mentorship", "/messages", "/forum/posts", "/events"):
        assert client.get(path).status_code == 401


def test_student_dashboard(client: TestClient, login) -> None:
    login("student@example.com")

    body = client.get("/dashboard").json()

    assert body["error"] is None
    data = body["data"]
    assert data["layout"] == "student"
    assert data["navigation"][0]["path"] == "/student/profile"
    assert data["dashboard"]["stats"]["unread_messages"] == 3
    assert len(data["dashboard"]["recommended_mentors"]) == 3


def test_admin_dashboard_reports(client: TestClient, login) -> None:
    login("admin@example.com")

    data = client.get("/dashboard").json()["data"]
    assert data["layout"] == "admin"
    assert data["dashboard"]["stats"]["total_users"] == 256

    response = client.post("/dashboard/reports/1/resolve")
    assert response.status_code == 200
    assert response.json()["status"] == "resolved"
    assert client.post("/dashboard/reports/42/dismiss").status_code == 404


def test_alumni_dashboard_accept_request(client: TestClient, login) -> None:
    login("alumni@example.com")

    response = client.post("/dashboard/requests/1/accept")

    assert response.status_code == 200
    stats = client.get("/dashboard").json()["data"]["dashboard"]["stats"]
    assert stats["pending_requests"] == 1
    assert stats["active_mentorships"] == 2


def test_dashboard_fetch_failure_becomes_banner(client: TestClient, login, monkeypatch) -> None:
    def broken(cls, now):
        raise RuntimeError("fixture failure")

    monkeypatch.setattr(StudentDashboardPage, "from_fixtures", classmethod(broken))
    login("student@example.com")

    response = client.get("/dashboard")

    assert response.status_code == 200
    assert response.json() == {"data": None, "error": DASHBOARD_ERROR}


def test_student_mentorship_flow(client: TestClient, login) -> None:
    login("student@example.com")

    board = client.get("/mentorship", params={"search": "product"}).json()["data"]
    assert board["layout"] == "student"
    assert [m["id"] for m in board["mentors"]] == ["m2"]

    created = client.post("/mentorship/requests", json={"mentor_id": "m1"})
    assert created.status_code == 201
    request_id = created.json()["id"]

    cancelled = client.post(f"/mentorship/requests/{request_id}/cancel").json()
    assert cancelled["status"] == "rejected"

    assert client.post("/mentorship/slots").status_code == 403


def test_alumni_mentorship_flow(client: TestClient, login) -> None:
    login("alumni@example.com")

    session = client.post("/mentorship/requests/1/accept").json()
    assert session["duration"] == 60
    assert session["id"] == "new-1"

    board = client.get("/mentorship").json()["data"]
    assert board["layout"] == "alumni"
    assert board["pending_requests"] == []

    slot = client.post("/mentorship/slots")
    assert slot.status_code == 201
    assert client.delete(f"/mentorship/slots/{slot.json()['id']}").status_code == 204
    assert client.post("/mentorship/availability/toggle").json() == {"is_available": False}


def test_admin_has_no_mentorship_page(client: TestClient, login) -> None:
    login("admin@example.com")

    assert client.get("/mentorship").status_code == 403


def test_messages_with_ai_reply(client: TestClient, login, backend) -> None:
    login("student@example.com")

    conversations = client.get("/messages", params={"search": "sarah"}).json()["data"]
    assert [c["id"] for c in conversations] == ["1"]

    view = client.get("/messages/1").json()
    assert view["layout"] == "student"
    assert "Career journey" in view["conversation_starters"]

    sent = client.post("/messages/1", json={"content": "Are you free?", "ai_reply": True}).json()
    assert sent["message"]["content"] == "Are you free?"
    assert sent["reply"]["content"] == backend.llm_reply
    assert "/api/chat" in backend.paths()


def test_blank_message_is_ignored(client: TestClient, login) -> None:
    login("student@example.com")

    sent = client.post("/messages/1", json={"content": "   ", "ai_reply": True}).json()

    assert sent == {"message": None, "reply": None}


def test_ai_reply_falls_back_to_apology(client: TestClient, login, backend) -> None:
    login("alumni@example.com")
    backend.llm_online = False

    sent = client.post("/messages/2", json={"content": "Hello", "ai_reply": True}).json()

    assert sent["reply"]["content"].startswith("I'm sorry")


def test_alumni_conversation_pin(client: TestClient, login) -> None:
    login("alumni@example.com")

    pinned = client.post("/messages/1/messages/2/pin").json()
    view = client.get("/messages/1").json()

    assert pinned["is_pinned"] is True
    assert view["layout"] == "alumni"
    assert [m["id"] for m in view["pinned"]] == ["2"]


def test_student_cannot_pin(client: TestClient, login) -> None:
    login("student@example.com")

    assert client.post("/messages/1/messages/2/pin").status_code == 403


def test_forum_flow_and_logout_drops_page_state(client: TestClient, login) -> None:
    login("student@example.com")

    created = client.post(
        "/forum/posts",
        json={"title": "Study group", "content": "Who is in?", "tags": "Study, Group"},
    )
    assert created.status_code == 201
    post_id = created.json()["id"]
    assert client.get("/forum/posts").json()["data"][0]["id"] == post_id

    comment = client.post(f"/forum/posts/{post_id}/comments", json={"content": "Me!"})
    assert comment.status_code == 201
    assert client.post(f"/forum/posts/{post_id}/comments", json={"content": " "}).status_code == 400
    assert client.post("/forum/posts", json={"title": "", "content": "x"}).status_code == 400

    client.post("/session/logout")
    login("student@example.com")

    ids = [post["id"] for post in client.get("/forum/posts").json()["data"]]
    assert post_id not in ids


def test_events_registration(client: TestClient, login) -> None:
    login("student@example.com")

    registered = client.post("/events/e1/register").json()
    assert registered["is_registered"] is True
    assert registered["attendees"] == 46
    assert client.post("/events/missing/register").status_code == 404
    assert client.get("/events", params={"filter": "hosting"}).status_code == 400
    assert (
        client.post(
            "/events",
            json={"title": "x", "date": "2024-05-01", "time": "10:00", "location": "Hall"},
        ).status_code
        == 403
    )


def test_alumni_hosts_event(client: TestClient, login) -> None:
    login("alumni@example.com")

    created = client.post(
        "/events",
        json={
            "title": "Mock interviews",
            "date": "2024-05-01",
            "time": "10:00 - 12:00",
            "location": "Room 4",
            "type": "workshop",
        },
    )

    assert created.status_code == 201
    hosting = client.get("/events", params={"filter": "hosting"}).json()["data"]
    assert created.json()["id"] in [event["id"] for event in hosting]


def test_resources_and_activity(client: TestClient, login) -> None:
    login("alumni@example.com")

    videos = client.get("/resources", params={"type": "video"}).json()["data"]
    assert [r["id"] for r in videos] == ["r2"]

    activity = client.get("/resources/r1/activity").json()
    assert activity["shares"] == 23
    assert len(activity["views"]) == 9
    assert client.get("/resources/missing/activity").status_code == 404


def test_profile_round_trip(client: TestClient, login, backend) -> None:
    login("student@example.com")

    profile = client.get("/profile").json()
    assert profile["layout"] == "student"
    assert "career_goals" in profile["sections"]

    updated = client.put("/profile", json={"bio": "Aspiring engineer"}).json()
    assert updated["profile"]["bio"] == "Aspiring engineer"

    uploaded = client.post(
        "/profile/image", files={"image": ("me.png", b"\x89PNG data", "image/png")}
    )
    assert uploaded.status_code == 200
    assert uploaded.json()["imageUrl"].endswith("avatar.png")
    assert "/api/profile/upload-image" in backend.paths()


def test_alumni_profile_layout(client: TestClient, login) -> None:
    login("alumni@example.com")

    profile = client.get("/profile").json()

    assert profile["layout"] == "alumni"
    assert "experience" in profile["sections"]


def test_analytics_is_alumni_only(client: TestClient, login) -> None:
    login("student@example.com")

    assert client.get("/analytics").status_code == 403
    assert client.get("/analytics/export").status_code == 403


def test_analytics_report_and_export(client: TestClient, login) -> None:
    login("alumni@example.com")

    report = client.get("/analytics").json()["data"]
    assert report["mentorship"]["total_mentees"] == 15

    response = client.get("/analytics/export")
    assert response.status_code == 200
    assert response.headers["content-type"] == EXCEL_CONTENT_TYPE
    assert "attachment" in response.headers["content-disposition"]
    workbook = load_workbook(BytesIO(response.content))
    assert workbook.sheetnames == ["Mentorship", "Resources", "Events"]


def test_assistant_endpoints(client: TestClient, login, backend) -> None:
    status = client.get("/assistant/status").json()
    assert status == {"available": True, "model": "llama3.2"}

    login("student@example.com")
    generated = client.post("/assistant/generate", json={"prompt": "Tips for interviews?"})
    assert generated.json() == {"response": backend.llm_reply}

    backend.llm_online = False
    assert client.get("/assistant/status").json()["available"] is False
