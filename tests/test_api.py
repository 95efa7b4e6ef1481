"""Tests for the FastAPI binding."""

from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from portfolio_contact.api import create_app
from portfolio_contact.config import Settings
from portfolio_contact.intake.service import SUCCESS_MESSAGE, IntakeService
from portfolio_contact.notify.config import MailConfig
from portfolio_contact.storage.store import FileSubmissionStore


@pytest.fixture
def settings(tmp_path: Path, data_file: Path) -> Settings:
    """Create settings pointing at temporary paths."""
    return Settings(
        data_file=data_file,
        audit_dir=None,
        resume_path=tmp_path / "AI_Resume.pdf",
    )


@pytest.fixture
def client(service: IntakeService, settings: Settings) -> TestClient:
    """Create a test client around the intake service."""
    return TestClient(create_app(service, settings))


class TestSendEmail:
    """Tests for POST /api/send-email."""

    def test_success(self, client: TestClient, mailer, valid_payload: dict) -> None:
        response = client.post("/api/send-email", json=valid_payload)

        assert response.status_code == 200
        assert response.json() == {"success": True, "message": SUCCESS_MESSAGE}
        assert len(mailer.sent) == 1

    def test_missing_fields(self, client: TestClient, valid_payload: dict) -> None:
        valid_payload["subject"] = ""

        response = client.post("/api/send-email", json=valid_payload)

        assert response.status_code == 400
        assert response.json() == {
            "success": False,
            "message": "Please fill in all required fields.",
        }

    def test_invalid_email(self, client: TestClient, valid_payload: dict) -> None:
        valid_payload["email"] = "not-an-email"

        response = client.post("/api/send-email", json=valid_payload)

        assert response.status_code == 400
        assert response.json()["success"] is False
        assert "valid email" in response.json()["message"]

    @pytest.mark.parametrize("body", ["{not json", "[1, 2]", ""])
    def test_non_object_body(self, client: TestClient, body: str) -> None:
        response = client.post(
            "/api/send-email",
            content=body,
            headers={"Content-Type": "application/json"},
        )

        assert response.status_code == 400
        assert response.json()["success"] is False

    def test_unconfigured_mail(
        self, store: FileSubmissionStore, settings: Settings, valid_payload: dict
    ) -> None:
        service = IntakeService(store=store, mail_config=MailConfig())
        client = TestClient(create_app(service, settings))

        response = client.post("/api/send-email", json=valid_payload)

        assert response.status_code == 503
        assert response.json()["success"] is False
        assert store.list() == []


class TestListSubmissions:
    """Tests for GET /api/submissions."""

    def test_empty(self, client: TestClient) -> None:
        response = client.get("/api/submissions")

        assert response.status_code == 200
        assert response.json() == {"items": []}

    def test_lists_stored(self, client: TestClient, valid_payload: dict) -> None:
        client.post("/api/send-email", json=valid_payload)

        items = client.get("/api/submissions").json()["items"]

        assert len(items) == 1
        assert items[0]["name"] == "Ann"
        assert items[0]["id"].startswith("SUB-")
        assert "timestamp" in items[0]

    def test_corrupt_store(self, client: TestClient, data_file: Path) -> None:
        data_file.parent.mkdir(parents=True)
        data_file.write_text("not json")

        response = client.get("/api/submissions")

        assert response.status_code == 500
        assert response.json()["success"] is False

    def test_undecodable_store(self, client: TestClient, data_file: Path) -> None:
        data_file.parent.mkdir(parents=True)
        data_file.write_bytes(b"[\xff\xfe]")

        response = client.get("/api/submissions")

        assert response.status_code == 500
        assert response.json()["success"] is False


class TestResume:
    """Tests for GET /api/generate-resume."""

    def test_missing_resume(self, client: TestClient) -> None:
        response = client.get("/api/generate-resume")

        assert response.status_code == 500
        assert response.text == "Failed to download resume"

    def test_download(self, client: TestClient, settings: Settings) -> None:
        settings.resume_path.write_bytes(b"%PDF-1.4 test")

        response = client.get("/api/generate-resume")

        assert response.status_code == 200
        assert response.content == b"%PDF-1.4 test"
        assert "AI_Resume.pdf" in response.headers["content-disposition"]


def test_health(client: TestClient) -> None:
    assert client.get("/api/health").json() == {"status": "ok"}
