from __future__ import annotations

import sys
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from app.core.config import SETTINGS
from app.main import app
from app.repos.unit_of_work import InMemoryUnitOfWork
from app.services import registry, token_service
from app.services.event_publisher import event_publisher

# Ensure repo root is on sys.path so `import app` works under pytest.
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

UNIVERSITY = "0x1111111111111111111111111111111111111111"
EMPLOYER = "0x2222222222222222222222222222222222222222"
STUDENT = "0x3333333333333333333333333333333333333333"
NULL_ADDRESS = "0x0000000000000000000000000000000000000000"


@pytest.fixture(autouse=True)
def reset_registry_state() -> None:
    """Fresh in-memory ledger for every test."""
    if isinstance(registry.unit_of_work, InMemoryUnitOfWork):
        registry.unit_of_work.reset()


@pytest.fixture(autouse=True)
def reset_published_events() -> None:
    if hasattr(event_publisher, "_published"):
        event_publisher._published.clear()  # type: ignore[union-attr]


@pytest.fixture
def client() -> TestClient:
    return TestClient(app)


def mint_token(identity: str = "test-user") -> str:
    """Create a valid ES256 JWT for testing."""
    return token_service.create_access_token(sub=identity)


def auth_header(identity: str) -> dict[str, str]:
    return {"Authorization": f"Bearer {mint_token(identity)}"}


@pytest.fixture
def admin_headers() -> dict[str, str]:
    return auth_header(SETTINGS.registry_admin)


# ---------------------------------------------------------------------------
# Registry helpers
# ---------------------------------------------------------------------------


def grant(client: TestClient, role: str, issuer: str, name: str) -> None:
    """Authorize *issuer* under *role* ("universities" | "employers")."""
    resp = client.post(
        f"/v1/authorities/{role}",
        json={"issuer": issuer, "name": name},
        headers=auth_header(SETTINGS.registry_admin),
    )
    assert resp.status_code == 204, resp.text


def degree_body(subject: str = STUDENT, **overrides: str) -> dict[str, str]:
    body = {
        "subject": subject,
        "student_name": "Alice",
        "student_id": "S-001",
        "degree_name": "BSc",
        "major": "Computer Science",
        "issue_date": "2024-06-01",
    }
    body.update(overrides)
    return body


def experience_body(subject: str = STUDENT, **overrides: str) -> dict[str, str]:
    body = {
        "subject": subject,
        "user_name": "Alice",
        "role": "Engineer",
        "start_date": "2024-07-01",
        "end_date": "2025-07-01",
        "employer_comments": "Great",
    }
    body.update(overrides)
    return body
