from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from api.app import create_app
from config.settings import get_settings
from db.connection import open_db
from db.repos.contacts_repo import ContactsRepo


API_KEY = "test-extension-key"
HEADERS = {"x-api-key": API_KEY}


@pytest.fixture
def client(tmp_path, monkeypatch):
    monkeypatch.setenv("DB_PATH", str(tmp_path / "api.db"))
    monkeypatch.setenv("EXTENSION_API_KEY", API_KEY)
    get_settings.cache_clear()
    app = create_app()
    with open_db(get_settings().db_path) as conn:
        ContactsRepo(conn).insert_contact(
            "Jane Doe",
            "https://www.linkedin.com/in/jane-doe/",
            title="Recruiter",
            company="Acme",
            mutual_connections=["Bob Lee"],
        )
    return TestClient(app)


def test_requests_without_valid_key_are_rejected(client):
    resp = client.post("/api/extension/lookup-contact", json={"linkedin_url": "https://linkedin.com/in/jane-doe"})
    assert resp.status_code == 401
    assert resp.json()["found"] is False

    resp = client.post(
        "/api/extension/sync-connections",
        json={"linkedin_url": "x", "mutual_connections": []},
        headers={"x-api-key": "wrong"},
    )
    assert resp.status_code == 401
    assert resp.json() == {"success": False, "error": "Invalid or missing API key"}


def test_lookup_contact(client):
    resp = client.post("/api/extension/lookup-contact", json={"linkedin_url": "https://linkedin.com/in/JANE-DOE"}, headers=HEADERS)
    assert resp.status_code == 200
    body = resp.json()
    assert body["found"] is True
    assert body["contact"]["name"] == "Jane Doe"
    assert body["contact"]["mutual_connections"] == ["Bob Lee"]

    resp = client.post("/api/extension/lookup-contact", json={"linkedin_url": "https://linkedin.com/in/nobody"}, headers=HEADERS)
    assert resp.status_code == 200
    assert resp.json() == {"found": False}


def test_lookup_contact_requires_url(client):
    resp = client.post("/api/extension/lookup-contact", json={}, headers=HEADERS)
    assert resp.status_code == 400
    resp = client.post("/api/extension/lookup-contact", json=["not", "an", "object"], headers=HEADERS)
    assert resp.status_code == 400


def test_sync_connections(client):
    resp = client.post(
        "/api/extension/sync-connections",
        json={"linkedin_url": "https://www.linkedin.com/in/jane-doe", "mutual_connections": ["bob lee", "Cara Diaz"]},
        headers=HEADERS,
    )
    assert resp.status_code == 200
    body = resp.json()
    assert body["success"] is True
    assert body["added"] == ["Cara Diaz"]
    assert body["already_existed"] == ["bob lee"]
    assert body["total_connections"] == 2


def test_sync_connections_validation_and_not_found(client):
    resp = client.post(
        "/api/extension/sync-connections",
        json={"mutual_connections": ["Bob Lee"]},
        headers=HEADERS,
    )
    assert resp.status_code == 400

    resp = client.post(
        "/api/extension/sync-connections",
        json={"linkedin_url": "https://linkedin.com/in/jane-doe", "mutual_connections": "Bob Lee"},
        headers=HEADERS,
    )
    assert resp.status_code == 400
    assert resp.json()["error"] == "mutual_connections must be an array"

    resp = client.post(
        "/api/extension/sync-connections",
        json={"linkedin_url": "https://linkedin.com/in/ghost", "mutual_connections": ["Bob Lee"]},
        headers=HEADERS,
    )
    assert resp.status_code == 404
    assert resp.json() == {"success": False, "error": "Contact not found with that LinkedIn URL"}


def test_add_job(client):
    resp = client.post(
        "/api/extension/jobs",
        json={
            "job_title": "Staff Engineer",
            "company": "Acme",
            "location": "Remote",
            "job_url": "https://careers.example.com/jobs/1",
            "notes": "Source: careers.example.com",
        },
        headers=HEADERS,
    )
    assert resp.status_code == 201
    body = resp.json()
    assert body["success"] is True
    assert body["job"]["id"] > 0
    assert body["job"]["job_title"] == "Staff Engineer"
    assert body["job"]["status"] == "interested"


def test_add_job_requires_title_and_company(client):
    resp = client.post("/api/extension/jobs", json={"job_title": "Staff Engineer"}, headers=HEADERS)
    assert resp.status_code == 400
    assert resp.json()["success"] is False


def test_cors_preflight(client):
    resp = client.options(
        "/api/extension/sync-connections",
        headers={
            "Origin": "chrome-extension://abcdefghijklmnop",
            "Access-Control-Request-Method": "POST",
            "Access-Control-Request-Headers": "content-type,x-api-key",
        },
    )
    assert resp.status_code == 200
    assert resp.headers["access-control-allow-origin"] == "*"


def test_add_job_accepts_numeric_salary_and_null_status(client):
    resp = client.post(
        "/api/extension/jobs",
        json={"job_title": "Data Analyst", "company": "Umbrella", "salary": 120000, "status": None, "location": ""},
        headers=HEADERS,
    )
    assert resp.status_code == 201
    job = resp.json()["job"]
    assert job["salary"] == "120000"
    assert job["status"] == "interested"
    assert job["location"] is None
