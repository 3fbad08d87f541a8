"""Mint a bearer token for an identity.

The signing key comes from JWT_PRIVATE_KEY_PATH, so the token is only
useful against a server started with the same key.

Run with:
    JWT_PRIVATE_KEY_PATH=keys/registry.pem python scripts/mint_token.py 0xabc... [ttl_minutes]
"""

from __future__ import annotations

import sys

from app.core.config import SETTINGS
from app.services.token_service import create_access_token


def main(argv: list[str]) -> int:
    if len(argv) not in (2, 3):
        print(__doc__, file=sys.stderr)
        return 2
    if SETTINGS.jwt_private_key_path is None:
        print("JWT_PRIVATE_KEY_PATH is not set; the token would be signed "
              "with a throwaway key", file=sys.stderr)
        return 1
    ttl = int(argv[2]) if len(argv) == 3 else 15
    print(create_access_token(sub=argv[1], ttl_minutes=ttl))
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv))
