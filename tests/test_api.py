"""
Tests for the HTTP app (FastAPI TestClient, submitter overridden).
"""

import pytest
from fastapi.testclient import TestClient

from main import app, get_submitter
from services.errors import SubmissionError
from services.templates import render_booking_form


@pytest.fixture
def sent():
    return []


@pytest.fixture
def client(sent):
    async def submitter(booking):
        sent.append(booking)

    app.dependency_overrides[get_submitter] = lambda: submitter
    yield TestClient(app)
    app.dependency_overrides.clear()


def test_health(client):
    resp = client.get("/health")
    assert resp.status_code == 200
    assert resp.json() == {"status": "ok"}


def test_page_renders_form(client):
    resp = client.get("/")
    assert resp.status_code == 200
    assert "text/html" in resp.headers["content-type"]
    assert "Book Your Campaign" in resp.text
    assert 'name="businessName"' in resp.text
    assert "Submit Booking Request" in resp.text


def test_booking_accepted(client, sent, raw_form):
    resp = client.post("/api/booking", json=raw_form)
    assert resp.status_code == 200
    data = resp.json()
    assert data["ok"] is True
    assert data["notification"]["title"] == "Success!"
    assert data["notification"]["variant"] == "default"
    assert len(sent) == 1


def test_booking_field_errors(client, sent, raw_form):
    raw_form["businessLink"] = ""
    raw_form["email"] = "nope"
    resp = client.post("/api/booking", json=raw_form)
    assert resp.status_code == 422
    assert resp.json() == {
        "ok": False,
        "errors": {
            "businessLink": "Business website is required",
            "email": "Please enter a valid email",
        },
    }
    assert sent == []


def test_booking_webhook_failure(raw_form):
    async def failing(booking):
        raise SubmissionError(status=500, body="server error")

    app.dependency_overrides[get_submitter] = lambda: failing
    try:
        resp = TestClient(app).post("/api/booking", json=raw_form)
    finally:
        app.dependency_overrides.clear()

    assert resp.status_code == 502
    assert resp.json()["notification"] == {
        "title": "Error",
        "description": "Failed to submit form: 500",
        "variant": "destructive",
    }


def test_booking_unexpected_submitter_error_is_json_502(raw_form):
    async def broken(booking):
        raise RuntimeError("webhook client misconfigured")

    app.dependency_overrides[get_submitter] = lambda: broken
    try:
        resp = TestClient(app).post("/api/booking", json=raw_form)
    finally:
        app.dependency_overrides.clear()

    assert resp.status_code == 502
    assert resp.json() == {
        "ok": False,
        "notification": {
            "title": "Error",
            "description": "webhook client misconfigured",
            "variant": "destructive",
        },
    }


@pytest.mark.parametrize("body", ["[1, 2]", "not json"])
def test_booking_rejects_non_object_body(client, body):
    resp = client.post("/api/booking", content=body, headers={"Content-Type": "application/json"})
    assert resp.status_code == 422
    assert "body" in resp.json()["errors"]


def test_render_shows_errors_and_escapes_values():
    html = render_booking_form(
        values={"name": '<script>alert("x")</script>'},
        errors={"email": "Please enter a valid email"},
        is_submitting=True,
    )
    assert '<script>alert("x")</script>' not in html
    assert "&lt;script&gt;" in html
    assert "Please enter a valid email" in html
    assert "Submitting..." in html
    assert 'data-testid="button-submit" disabled' in html
