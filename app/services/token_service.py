"""JWT access token creation and validation (ES256).

The registry does not run a login flow: callers present a bearer token
whose ``sub`` claim is their identity.  This module centralizes the key
and the claims schema so the dependency layer (validation), the tests
and scripts/mint_token.py (creation) agree on both.
"""

from __future__ import annotations

import logging
import uuid
from datetime import UTC, datetime, timedelta
from pathlib import Path

import jwt
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import ec

from app.core.config import SETTINGS

logger = logging.getLogger(__name__)

ALGORITHM = "ES256"
ISSUER = "credential-registry"
AUDIENCE = "credential-registry"
ACCESS_TOKEN_TTL_MIN = 15


def _load_private_key() -> ec.EllipticCurvePrivateKey:
    # Dev/test: ephemeral key pair generated on import.
    # Shared deployments: PEM file from JWT_PRIVATE_KEY_PATH.
    if SETTINGS.jwt_private_key_path is None:
        return ec.generate_private_key(ec.SECP256R1())

    pem = Path(SETTINGS.jwt_private_key_path).read_bytes()
    key = serialization.load_pem_private_key(pem, password=None)
    if not isinstance(key, ec.EllipticCurvePrivateKey):
        raise ValueError("JWT_PRIVATE_KEY_PATH must hold an EC private key")
    logger.info("Loaded JWT signing key from %s", SETTINGS.jwt_private_key_path)
    return key


_private_key = _load_private_key()
_public_key = _private_key.public_key()


def create_access_token(*, sub: str, ttl_minutes: int = ACCESS_TOKEN_TTL_MIN) -> str:
    """Build and sign a JWT access token for identity *sub*."""
    now = datetime.now(UTC)
    payload = {
        "sub": sub,
        "iss": ISSUER,
        "aud": AUDIENCE,
        "exp": now + timedelta(minutes=ttl_minutes),
        "iat": now,
        "jti": str(uuid.uuid4()),
    }
    return jwt.encode(payload, _private_key, algorithm=ALGORITHM)


def decode_access_token(token: str) -> dict:
    """Verify signature and claims, return the payload.

    Pins algorithm to ES256 to prevent alg:none and alg-switching attacks.
    Raises jwt.ExpiredSignatureError, jwt.InvalidTokenError on failure.
    """
    return jwt.decode(
        token,
        _public_key,
        algorithms=[ALGORITHM],
        issuer=ISSUER,
        audience=AUDIENCE,
        options={"require": ["sub", "exp", "iat", "jti"]},
    )
