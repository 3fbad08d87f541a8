"""Domain errors raised by the registry services.

API endpoints translate these into HTTP responses; services never
raise HTTPException themselves.
"""

from __future__ import annotations

from app.models.records import RecordKind


class RegistryError(Exception):
    pass


class UnauthorizedError(RegistryError):
    """Caller lacks the role the operation requires."""

    def __init__(self, caller: str, required: str) -> None:
        super().__init__(f"{caller!r} is not authorized as {required}")
        self.caller = caller
        self.required = required


class InvalidSubjectError(RegistryError, ValueError):
    """Null or blank subject identity on issuance."""


class InvalidIssuerError(RegistryError, ValueError):
    """Null issuer identity or blank display name on grant/revoke."""


class RecordNotFoundError(RegistryError, LookupError):
    def __init__(self, kind: RecordKind | None, record_id: int) -> None:
        label = kind.value if kind is not None else "record"
        super().__init__(f"{label} {record_id} not found")
        self.kind = kind
        self.record_id = record_id


class RecordAlreadyExistsError(RegistryError):
    """A record id was written twice. Records are write-once."""

    def __init__(self, record_id: int) -> None:
        super().__init__(f"record {record_id} already exists")
        self.record_id = record_id
