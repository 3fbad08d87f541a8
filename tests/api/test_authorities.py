from __future__ import annotations

from fastapi.testclient import TestClient

from tests.conftest import EMPLOYER, NULL_ADDRESS, auth_header, grant


def test_grant_requires_token(client: TestClient) -> None:
    resp = client.post(
        "/v1/authorities/employers", json={"issuer": EMPLOYER, "name": "Acme"}
    )
    assert resp.status_code == 401
    assert resp.headers["www-authenticate"] == "Bearer"


def test_invalid_token_rejected(client: TestClient) -> None:
    resp = client.post(
        "/v1/authorities/employers",
        json={"issuer": EMPLOYER, "name": "Acme"},
        headers={"Authorization": "Bearer not-a-jwt"},
    )
    assert resp.status_code == 401
    assert resp.json()["detail"] == "Invalid token"


def test_lookup_reports_display_name(client: TestClient) -> None:
    grant(client, "employers", EMPLOYER, "Acme Corp")
    resp = client.get(f"/v1/authorities/employers/{EMPLOYER}")
    assert resp.status_code == 200
    assert resp.json() == {
        "identity": EMPLOYER,
        "role": "employer",
        "authorized": True,
        "display_name": "Acme Corp",
    }


def test_roles_are_separate(client: TestClient) -> None:
    grant(client, "employers", EMPLOYER, "Acme Corp")
    resp = client.get(f"/v1/authorities/universities/{EMPLOYER}")
    assert resp.json()["authorized"] is False


def test_blank_name_rejected(client: TestClient, admin_headers: dict) -> None:
    resp = client.post(
        "/v1/authorities/employers",
        json={"issuer": EMPLOYER, "name": "  "},
        headers=admin_headers,
    )
    assert resp.status_code == 422


def test_null_issuer_rejected(client: TestClient, admin_headers: dict) -> None:
    resp = client.post(
        "/v1/authorities/universities",
        json={"issuer": NULL_ADDRESS, "name": "Nobody U"},
        headers=admin_headers,
    )
    assert resp.status_code == 422


def test_revoke_requires_admin(client: TestClient) -> None:
    grant(client, "employers", EMPLOYER, "Acme Corp")
    resp = client.delete(
        f"/v1/authorities/employers/{EMPLOYER}", headers=auth_header(EMPLOYER)
    )
    assert resp.status_code == 403
    resp = client.get(f"/v1/authorities/employers/{EMPLOYER}")
    assert resp.json()["authorized"] is True
