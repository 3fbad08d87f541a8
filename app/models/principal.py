from __future__ import annotations

from dataclasses import dataclass

# Zero address used by ledger-style clients to mean "no identity".
NULL_IDENTITY = "0x0000000000000000000000000000000000000000"


def is_null_identity(identity: str | None) -> bool:
    """True for identities that can never own a record or hold a role."""
    if identity is None:
        return True
    value = identity.strip()
    return not value or value.lower() == NULL_IDENTITY


@dataclass(frozen=True, slots=True)
class Principal:
    """Authenticated caller extracted from a validated JWT.

    Carried through the request via FastAPI's dependency system.
    Endpoints receive this instead of a raw token, and services receive
    ``principal.identity`` as the explicit caller of every mutation.

        identity: subject from JWT (opaque, compared by equality only)
    """

    identity: str
