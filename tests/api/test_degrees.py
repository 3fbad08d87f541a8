from __future__ import annotations

from fastapi.testclient import TestClient

from tests.conftest import (
    EMPLOYER,
    NULL_ADDRESS,
    STUDENT,
    UNIVERSITY,
    auth_header,
    degree_body,
    grant,
)


def test_issue_requires_token(client: TestClient) -> None:
    resp = client.post("/v1/degrees", json=degree_body())
    assert resp.status_code == 401


def test_employer_cannot_issue_degree(client: TestClient) -> None:
    grant(client, "employers", EMPLOYER, "Acme Corp")
    resp = client.post("/v1/degrees", json=degree_body(), headers=auth_header(EMPLOYER))
    assert resp.status_code == 403
    assert resp.json()["detail"] == "Caller is not authorized university"


def test_null_subject_is_unprocessable(client: TestClient) -> None:
    grant(client, "universities", UNIVERSITY, "MIT")
    resp = client.post(
        "/v1/degrees",
        json=degree_body(subject=NULL_ADDRESS),
        headers=auth_header(UNIVERSITY),
    )
    assert resp.status_code == 422

    # Nothing was minted.
    assert client.get("/v1/records/1/owner").status_code == 404


def test_missing_field_is_unprocessable(client: TestClient) -> None:
    grant(client, "universities", UNIVERSITY, "MIT")
    body = degree_body()
    del body["major"]
    resp = client.post("/v1/degrees", json=body, headers=auth_header(UNIVERSITY))
    assert resp.status_code == 422


def test_issued_degree_round_trips(client: TestClient) -> None:
    grant(client, "universities", UNIVERSITY, "MIT")
    created = client.post(
        "/v1/degrees", json=degree_body(), headers=auth_header(UNIVERSITY)
    ).json()
    assert created == {
        "record_id": 1,
        "student_name": "Alice",
        "student_id": "S-001",
        "university_name": "MIT",
        "degree_name": "BSc",
        "major": "Computer Science",
        "issue_date": "2024-06-01",
    }
    assert client.get("/v1/degrees/1").json() == created

    owner = client.get("/v1/records/1/owner").json()
    assert owner == {"record_id": 1, "owner": STUDENT, "kind": "degree"}


def test_work_experience_id_is_not_a_degree(client: TestClient) -> None:
    grant(client, "employers", EMPLOYER, "Acme Corp")
    client.post(
        "/v1/work-experiences",
        json={
            "subject": STUDENT,
            "user_name": "Alice",
            "role": "Engineer",
            "start_date": "2024-07-01",
            "end_date": "2025-07-01",
        },
        headers=auth_header(EMPLOYER),
    )
    assert client.get("/v1/degrees/1").status_code == 404
    assert client.get("/v1/work-experiences/1").status_code == 200


def test_long_subject_identity_is_stored(client: TestClient) -> None:
    grant(client, "universities", UNIVERSITY, "MIT")
    subject = "did:example:" + "a" * 500
    resp = client.post(
        "/v1/degrees",
        json=degree_body(subject=subject),
        headers=auth_header(UNIVERSITY),
    )
    assert resp.status_code == 201

    assert client.get("/v1/records/1/owner").json()["owner"] == subject
    data = client.get(f"/v1/subjects/{subject}/profile-and-records").json()
    assert [d["record_id"] for d in data["degrees"]] == [1]
