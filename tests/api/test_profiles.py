from __future__ import annotations

from fastapi.testclient import TestClient

from tests.conftest import STUDENT, auth_header


def test_update_requires_token(client: TestClient) -> None:
    resp = client.put("/v1/profiles/me", json={"name": "Alice"})
    assert resp.status_code == 401


def test_second_update_replaces_first(client: TestClient) -> None:
    headers = auth_header(STUDENT)
    client.put(
        "/v1/profiles/me",
        json={"name": "Alice", "skills": "Python", "strengths": "Focus"},
        headers=headers,
    )
    resp = client.put("/v1/profiles/me", json={"name": "Alice B."}, headers=headers)
    assert resp.status_code == 200

    resp = client.get(f"/v1/profiles/{STUDENT}")
    assert resp.json() == {
        "name": "Alice B.",
        "skills": "",
        "strengths": "",
        "self_introduction": "",
        "additional_info": "",
    }


def test_profile_belongs_to_token_identity(client: TestClient) -> None:
    client.put("/v1/profiles/me", json={"name": "Mallory"}, headers=auth_header("0xm"))
    assert client.get(f"/v1/profiles/{STUDENT}").status_code == 404
    assert client.get("/v1/profiles/0xm").json()["name"] == "Mallory"


def test_never_set_profile_is_distinct_from_empty(client: TestClient) -> None:
    resp = client.get(f"/v1/subjects/{STUDENT}/profile-and-records")
    assert resp.json()["profile_set"] is False

    client.put("/v1/profiles/me", json={}, headers=auth_header(STUDENT))
    resp = client.get(f"/v1/subjects/{STUDENT}/profile-and-records")
    data = resp.json()
    assert data["profile_set"] is True
    assert data["profile"]["name"] == ""


def test_long_caller_identity_can_write_profile(client: TestClient) -> None:
    caller = "did:example:" + "b" * 400
    resp = client.put(
        "/v1/profiles/me", json={"name": "Long"}, headers=auth_header(caller)
    )
    assert resp.status_code == 200
    assert client.get(f"/v1/profiles/{caller}").json()["name"] == "Long"
