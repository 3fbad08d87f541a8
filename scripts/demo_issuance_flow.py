"""Demo: authorize a university, issue a degree, read the holdings back.

Uses FastAPI TestClient against the in-memory registry.

Run with:
    python scripts/demo_issuance_flow.py
"""

from __future__ import annotations

from fastapi.testclient import TestClient

from app.core.config import SETTINGS
from app.main import app
from app.services.token_service import create_access_token

UNIVERSITY = "0x1111111111111111111111111111111111111111"
EMPLOYER = "0x2222222222222222222222222222222222222222"
STUDENT = "0x3333333333333333333333333333333333333333"


def _auth(identity: str) -> dict[str, str]:
    return {"Authorization": f"Bearer {create_access_token(sub=identity)}"}


def main() -> None:
    client = TestClient(app)
    admin = _auth(SETTINGS.registry_admin)

    # ── Step 1: an unauthorized issuer is rejected ──────────────────
    body = {
        "subject": STUDENT,
        "student_name": "Alice",
        "student_id": "S-001",
        "degree_name": "BSc",
        "major": "Computer Science",
        "issue_date": "2024-06-01",
    }
    r = client.post("/v1/degrees", json=body, headers=_auth(UNIVERSITY))
    print(f"1. POST /v1/degrees (unauthorized)  → {r.status_code}")

    # ── Step 2: administrator authorizes issuers ────────────────────
    r = client.post(
        "/v1/authorities/universities",
        json={"issuer": UNIVERSITY, "name": "MIT"},
        headers=admin,
    )
    print(f"2. grant university                  → {r.status_code}")
    r = client.post(
        "/v1/authorities/employers",
        json={"issuer": EMPLOYER, "name": "Acme Corp"},
        headers=admin,
    )
    print(f"   grant employer                    → {r.status_code}")

    # ── Step 3: issue records ───────────────────────────────────────
    r = client.post("/v1/degrees", json=body, headers=_auth(UNIVERSITY))
    print(f"3. POST /v1/degrees                  → {r.status_code}  {r.json()}")
    r = client.post(
        "/v1/work-experiences",
        json={
            "subject": STUDENT,
            "user_name": "Alice",
            "role": "Engineer",
            "start_date": "2024-07-01",
            "end_date": "2025-07-01",
            "employer_comments": "Great",
        },
        headers=_auth(EMPLOYER),
    )
    print(f"   POST /v1/work-experiences         → {r.status_code}  {r.json()}")

    # ── Step 4: subject writes a profile ────────────────────────────
    r = client.put(
        "/v1/profiles/me",
        json={"name": "Alice", "skills": "Python"},
        headers=_auth(STUDENT),
    )
    print(f"4. PUT  /v1/profiles/me              → {r.status_code}")

    # ── Step 5: aggregate read ──────────────────────────────────────
    r = client.get(f"/v1/subjects/{STUDENT}/profile-and-records")
    print(f"5. GET  profile-and-records          → {r.status_code}")
    print(f"   {r.json()}")

    r = client.get("/v1/events")
    print(f"6. GET  /v1/events                   → {r.status_code}  {len(r.json())} events")


if __name__ == "__main__":
    main()
