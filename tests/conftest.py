"""Shared test utilities."""

import hashlib
import hmac
import io

import pytest

# Known-good signatures of BODY and FORM_BODY under SECRET
SECRET = "0123456789abcdef"
BODY = b'{"yo":true}'
SHA1_SIGNATURE = "sha1=126f2c800419c60137ce748d7672e77b65cf16d6"
SHA256_SIGNATURE = "sha256=b1f8020f5b4cd42042f807dd939015c4a418bc1ff7f604dd55b0a19b5d953d9b"
SHA512_SIGNATURE = (
    "sha512=8456767023c1195682e182a23b3f5d19150ecea598fde8cb85918f7281b16079"
    "471b1329f92b912c4d8bd7455cb159777db8f29608b20c7c87323ba65ae62e1f"
)
FORM_BODY = b"payload=%7B%22yo%22%3Atrue%7D"
FORM_SHA1_SIGNATURE = "sha1=3374ef144403e8035423b23b02e2c9d7a4c50368"


def compute_signature(payload: bytes, secret: str, algorithm: str = "sha256") -> str:
    """Compute a valid GitHub signature for testing.

    Args:
        payload: Raw request body bytes
        secret: The webhook secret
        algorithm: hashlib name of the digest, "sha1", "sha256" or "sha512"

    Returns:
        Signature string in format "<algorithm>=<hex_digest>"
    """
    signature = hmac.new(
        key=secret.encode("utf-8"),
        msg=payload,
        digestmod=getattr(hashlib, algorithm),
    ).hexdigest()
    return f"{algorithm}={signature}"


class BadReader(io.RawIOBase):
    """Stream whose reads always fail."""

    def readable(self) -> bool:
        return True

    def read(self, size: int = -1) -> bytes:
        raise OSError("bad reader")


class ChunkedReader(io.RawIOBase):
    """Stream that returns at most a few bytes per read, like a socket."""

    def __init__(self, data: bytes, chunk_size: int = 4):
        self._data = data
        self._chunk_size = chunk_size

    def readable(self) -> bool:
        return True

    def read(self, size: int = -1) -> bytes:
        if size < 0:
            size = len(self._data)
        chunk = self._data[: min(size, self._chunk_size)]
        self._data = self._data[len(chunk) :]
        return chunk


class NonBlockingReader(io.RawIOBase):
    """Non-blocking stream with no data ready."""

    def readable(self) -> bool:
        return True

    def read(self, size: int = -1) -> None:
        return None


@pytest.fixture
def workflow_run_payload() -> dict:
    """Create a sample workflow_run event payload."""
    return {
        "action": "completed",
        "workflow_run": {
            "id": 123456,
            "name": "CI",
            "workflow_id": 789,
            "head_branch": "main",
            "head_sha": "abc123",
            "status": "completed",
            "conclusion": "success",
            "run_number": 42,
            "run_attempt": 1,
            "event": "push",
            "created_at": "2024-01-01T00:00:00Z",
            "updated_at": "2024-01-01T00:10:00Z",
            "run_started_at": "2024-01-01T00:01:00Z",
            "html_url": "https://github.com/owner/repo/actions/runs/123456",
        },
        "repository": {
            "id": 111,
            "name": "repo",
            "full_name": "owner/repo",
            "private": False,
            "html_url": "https://github.com/owner/repo",
        },
        "sender": {
            "id": 1,
            "login": "user",
            "type": "User",
        },
    }


@pytest.fixture
def workflow_job_payload() -> dict:
    """Create a sample workflow_job event payload."""
    return {
        "action": "completed",
        "workflow_job": {
            "id": 789012,
            "name": "build",
            "run_id": 123456,
            "workflow_name": "CI",
            "status": "completed",
            "conclusion": "success",
            "created_at": "2024-01-01T00:01:00Z",
            "started_at": "2024-01-01T00:02:00Z",
            "completed_at": "2024-01-01T00:08:00Z",
            "html_url": "https://github.com/owner/repo/actions/runs/123456/jobs/789012",
            "runner_name": "runner-1",
            "runner_group_name": "Default",
            "labels": ["ubuntu-latest"],
            "steps": [
                {
                    "name": "Checkout",
                    "status": "completed",
                    "conclusion": "success",
                    "number": 1,
                    "started_at": "2024-01-01T00:02:00Z",
                    "completed_at": "2024-01-01T00:02:30Z",
                }
            ],
        },
        "repository": {
            "id": 111,
            "name": "repo",
            "full_name": "owner/repo",
            "private": False,
            "html_url": "https://github.com/owner/repo",
        },
        "sender": {
            "id": 1,
            "login": "user",
            "type": "User",
        },
    }
