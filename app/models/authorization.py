from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum


class IssuerRole(StrEnum):
    UNIVERSITY = "university"
    EMPLOYER = "employer"


@dataclass(frozen=True, slots=True)
class AuthorizationEntry:
    """Issuer display name per (role, identity).

    A revoked entry keeps its row with ``display_name=None`` (tombstone).
    """

    role: IssuerRole
    identity: str
    display_name: str | None = None

    @property
    def is_authorized(self) -> bool:
        return bool(self.display_name)
