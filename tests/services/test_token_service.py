from __future__ import annotations

import jwt
import pytest
from fastapi.testclient import TestClient

from app.services import token_service


def test_token_round_trip_carries_identity() -> None:
    token = token_service.create_access_token(sub="0xabc")
    claims = token_service.decode_access_token(token)
    assert claims["sub"] == "0xabc"
    assert claims["iss"] == token_service.ISSUER
    assert claims["aud"] == token_service.AUDIENCE


def test_expired_token_rejected() -> None:
    token = token_service.create_access_token(sub="0xabc", ttl_minutes=-1)
    with pytest.raises(jwt.ExpiredSignatureError):
        token_service.decode_access_token(token)


def test_hs256_token_rejected() -> None:
    forged = jwt.encode(
        {"sub": "registry-admin", "aud": token_service.AUDIENCE},
        "secret",
        algorithm="HS256",
    )
    with pytest.raises(jwt.InvalidTokenError):
        token_service.decode_access_token(forged)


def test_expired_token_is_401_over_http(client: TestClient) -> None:
    token = token_service.create_access_token(sub="0xabc", ttl_minutes=-1)
    resp = client.put(
        "/v1/profiles/me",
        json={"name": "x"},
        headers={"Authorization": f"Bearer {token}"},
    )
    assert resp.status_code == 401
    assert resp.json()["detail"] == "Token expired"
