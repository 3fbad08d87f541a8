from __future__ import annotations

import datetime
from dataclasses import dataclass, replace
from enum import StrEnum
from typing import Any

from app.models.authorization import IssuerRole
from app.models.profile import Profile


class EventType(StrEnum):
    DEGREE_ISSUED = "DegreeIssued"
    WORK_EXPERIENCE_ISSUED = "WorkExperienceIssued"
    PROFILE_UPDATED = "ProfileUpdated"
    ISSUER_AUTHORIZED = "IssuerAuthorized"
    ISSUER_REVOKED = "IssuerRevoked"


def _now() -> int:
    return int(datetime.datetime.now(datetime.UTC).timestamp())


@dataclass(frozen=True, slots=True)
class RegistryEvent:
    """Entry in the append-only event log.

    ``sequence`` is None until the event log accepts the event.
    """

    type: EventType
    payload: dict[str, Any]
    occurred_at: int
    sequence: int | None = None

    def with_sequence(self, sequence: int) -> RegistryEvent:
        return replace(self, sequence=sequence)

    @staticmethod
    def degree_issued(
        *, record_id: int, subject: str, issuer: str, degree_name: str
    ) -> RegistryEvent:
        return RegistryEvent(
            type=EventType.DEGREE_ISSUED,
            payload={
                "record_id": record_id,
                "subject": subject,
                "issuer": issuer,
                "degree_name": degree_name,
            },
            occurred_at=_now(),
        )

    @staticmethod
    def work_experience_issued(
        *, record_id: int, subject: str, issuer: str, company_name: str, role: str
    ) -> RegistryEvent:
        return RegistryEvent(
            type=EventType.WORK_EXPERIENCE_ISSUED,
            payload={
                "record_id": record_id,
                "subject": subject,
                "issuer": issuer,
                "company_name": company_name,
                "role": role,
            },
            occurred_at=_now(),
        )

    @staticmethod
    def profile_updated(*, subject: str, profile: Profile) -> RegistryEvent:
        return RegistryEvent(
            type=EventType.PROFILE_UPDATED,
            payload={
                "subject": subject,
                "name": profile.name,
                "skills": profile.skills,
                "strengths": profile.strengths,
                "self_introduction": profile.self_introduction,
                "additional_info": profile.additional_info,
            },
            occurred_at=_now(),
        )

    @staticmethod
    def issuer_authorized(
        *, role: IssuerRole, issuer: str, display_name: str
    ) -> RegistryEvent:
        return RegistryEvent(
            type=EventType.ISSUER_AUTHORIZED,
            payload={"role": str(role), "issuer": issuer, "display_name": display_name},
            occurred_at=_now(),
        )

    @staticmethod
    def issuer_revoked(*, role: IssuerRole, issuer: str) -> RegistryEvent:
        return RegistryEvent(
            type=EventType.ISSUER_REVOKED,
            payload={"role": str(role), "issuer": issuer},
            occurred_at=_now(),
        )
