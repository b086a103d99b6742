"""Tests for the webhook receiver endpoints."""

import json
from unittest.mock import patch

import pytest
from fastapi.testclient import TestClient

from src.receiver.app import app, event_processor, settings
from tests.conftest import FORM_BODY, FORM_SHA1_SIGNATURE, SECRET, compute_signature


@pytest.fixture
def client() -> TestClient:
    """Create a test client."""
    return TestClient(app)


@pytest.fixture
def unsigned_allowed():
    """Run with no secret and unsigned deliveries allowed."""
    with (
        patch.object(settings, "github_webhook_secret", ""),
        patch.object(settings, "allow_unsigned_deliveries", True),
    ):
        yield


class TestHealthCheck:
    """Tests for the health check endpoint."""

    def test_health_check(self, client: TestClient) -> None:
        """Test that health check returns healthy status."""
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json() == {"status": "healthy"}


class TestEventTypes:
    """Tests for the event type listing."""

    def test_lists_event_types(self, client: TestClient) -> None:
        """Test that every decodable event type is listed in order."""
        response = client.get("/event-types")

        assert response.status_code == 200
        event_types = response.json()["event_types"]
        assert len(event_types) == 68
        assert event_types == sorted(event_types)
        assert "workflow_run" in event_types


class TestWebhook:
    """Tests for the webhook endpoint."""

    @pytest.mark.usefixtures("unsigned_allowed")
    def test_webhook_workflow_run_without_signature(
        self, client: TestClient, workflow_run_payload: dict
    ) -> None:
        """Test webhook accepts unsigned workflow_run when explicitly allowed."""
        response = client.post(
            "/webhook",
            json=workflow_run_payload,
            headers={
                "X-GitHub-Event": "workflow_run",
                "X-GitHub-Delivery": "test-delivery-123",
            },
        )
        assert response.status_code == 202
        data = response.json()
        assert data["event"] == "workflow_run"
        assert data["delivery"] == "test-delivery-123"

    def test_webhook_rejects_unsigned_by_default(
        self, client: TestClient, workflow_run_payload: dict
    ) -> None:
        """Test webhook rejects unsigned deliveries unless they are allowed."""
        with (
            patch.object(settings, "github_webhook_secret", ""),
            patch.object(settings, "allow_unsigned_deliveries", False),
        ):
            response = client.post(
                "/webhook",
                json=workflow_run_payload,
                headers={"X-GitHub-Event": "workflow_run"},
            )
        assert response.status_code == 401

    def test_webhook_requires_signature_with_secret(
        self, client: TestClient, workflow_run_payload: dict
    ) -> None:
        """Test webhook rejects a missing signature when a secret is configured."""
        with (
            patch.object(settings, "github_webhook_secret", "test-secret"),
            patch.object(settings, "allow_unsigned_deliveries", True),
        ):
            response = client.post(
                "/webhook",
                json=workflow_run_payload,
                headers={"X-GitHub-Event": "workflow_run"},
            )
        assert response.status_code == 401

    def test_webhook_rejects_invalid_signature(
        self, client: TestClient, workflow_run_payload: dict
    ) -> None:
        """Test webhook rejects invalid signature."""
        with patch.object(settings, "github_webhook_secret", "test-secret"):
            response = client.post(
                "/webhook",
                json=workflow_run_payload,
                headers={
                    "X-GitHub-Event": "workflow_run",
                    "X-GitHub-Delivery": "test-delivery-123",
                    "X-Hub-Signature-256": "sha256=invalid",
                },
            )
        assert response.status_code == 401
        assert "test-secret" not in response.text

    def test_webhook_rejects_wrong_secret(
        self, client: TestClient, workflow_run_payload: dict
    ) -> None:
        """Test webhook rejects a well-formed signature made with another secret."""
        payload_bytes = json.dumps(workflow_run_payload).encode("utf-8")

        with patch.object(settings, "github_webhook_secret", "test-secret"):
            response = client.post(
                "/webhook",
                content=payload_bytes,
                headers={
                    "Content-Type": "application/json",
                    "X-GitHub-Event": "workflow_run",
                    "X-Hub-Signature-256": compute_signature(payload_bytes, "other-secret"),
                },
            )
        assert response.status_code == 401

    @pytest.mark.parametrize("algorithm", ["sha1", "sha256"])
    def test_webhook_accepts_valid_signature(
        self, client: TestClient, workflow_run_payload: dict, algorithm: str
    ) -> None:
        """Test webhook accepts valid signature."""
        secret = "test-secret"
        payload_bytes = json.dumps(workflow_run_payload).encode("utf-8")
        signature = compute_signature(payload_bytes, secret, algorithm)
        header = "X-Hub-Signature-256" if algorithm == "sha256" else "X-Hub-Signature"

        with patch.object(settings, "github_webhook_secret", secret):
            response = client.post(
                "/webhook",
                content=payload_bytes,
                headers={
                    "Content-Type": "application/json",
                    "X-GitHub-Event": "workflow_run",
                    "X-GitHub-Delivery": "test-delivery-123",
                    header: signature,
                },
            )
        assert response.status_code == 202

    def test_webhook_form_encoded(self, client: TestClient) -> None:
        """Test webhook accepts a signed form-encoded delivery."""
        with patch.object(settings, "github_webhook_secret", SECRET):
            response = client.post(
                "/webhook",
                content=FORM_BODY,
                headers={
                    "Content-Type": "application/x-www-form-urlencoded",
                    "X-GitHub-Event": "ping",
                    "X-Hub-Signature": FORM_SHA1_SIGNATURE,
                },
            )
        assert response.status_code == 202
        assert response.json()["event"] == "ping"

    @pytest.mark.usefixtures("unsigned_allowed")
    def test_webhook_ignores_unknown_events(self, client: TestClient) -> None:
        """Test webhook acknowledges event types it cannot decode."""
        response = client.post(
            "/webhook",
            json={"action": "opened"},
            headers={
                "X-GitHub-Event": "not_an_event",
                "X-GitHub-Delivery": "test-delivery-123",
            },
        )
        assert response.status_code == 200
        data = response.json()
        assert data["message"] == "Event type not processed"
        assert data["event"] == "not_an_event"

    @pytest.mark.usefixtures("unsigned_allowed")
    def test_webhook_event_without_handlers(self, client: TestClient) -> None:
        """Test webhook accepts known events that have no handlers."""
        response = client.post(
            "/webhook",
            json={"action": "opened", "issue": {"number": 1}},
            headers={"X-GitHub-Event": "issues"},
        )
        assert response.status_code == 202

    @pytest.mark.usefixtures("unsigned_allowed")
    def test_webhook_workflow_job(self, client: TestClient, workflow_job_payload: dict) -> None:
        """Test webhook accepts workflow_job events."""
        response = client.post(
            "/webhook",
            json=workflow_job_payload,
            headers={
                "X-GitHub-Event": "workflow_job",
                "X-GitHub-Delivery": "test-delivery-456",
            },
        )
        assert response.status_code == 202
        data = response.json()
        assert data["event"] == "workflow_job"

    @pytest.mark.usefixtures("unsigned_allowed")
    def test_webhook_invalid_json(self, client: TestClient) -> None:
        """Test webhook rejects invalid JSON."""
        response = client.post(
            "/webhook",
            content=b"not json",
            headers={
                "Content-Type": "application/json",
                "X-GitHub-Event": "workflow_run",
                "X-GitHub-Delivery": "test-delivery-789",
            },
        )
        assert response.status_code == 400

    @pytest.mark.usefixtures("unsigned_allowed")
    def test_webhook_form_without_payload(self, client: TestClient) -> None:
        """Test webhook rejects a form body without a payload field."""
        response = client.post(
            "/webhook",
            content=b"foo=bar",
            headers={
                "Content-Type": "application/x-www-form-urlencoded",
                "X-GitHub-Event": "ping",
            },
        )
        assert response.status_code == 400

    @pytest.mark.usefixtures("unsigned_allowed")
    @pytest.mark.parametrize("content_type", ["text/plain", "application/json; charset="])
    def test_webhook_unsupported_content_type(
        self, client: TestClient, content_type: str
    ) -> None:
        """Test webhook rejects content types it cannot extract a payload from."""
        response = client.post(
            "/webhook",
            content=b"{}",
            headers={"Content-Type": content_type, "X-GitHub-Event": "ping"},
        )
        assert response.status_code == 415

    @pytest.mark.usefixtures("unsigned_allowed")
    def test_webhook_payload_too_large(
        self, client: TestClient, workflow_run_payload: dict
    ) -> None:
        """Test webhook refuses bodies over the configured limit."""
        with patch.object(settings, "max_body_bytes", 16):
            response = client.post(
                "/webhook",
                json=workflow_run_payload,
                headers={"X-GitHub-Event": "workflow_run"},
            )
        assert response.status_code == 413

    @pytest.mark.usefixtures("unsigned_allowed")
    def test_webhook_handler_failure(
        self, client: TestClient, workflow_run_payload: dict
    ) -> None:
        """Test webhook reports failed handlers."""
        with patch.object(event_processor, "process", return_value=False):
            response = client.post(
                "/webhook",
                json=workflow_run_payload,
                headers={"X-GitHub-Event": "workflow_run"},
            )
        assert response.status_code == 500
