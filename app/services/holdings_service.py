"""Read side: profile + holdings reconstruction and point lookups.

All reads run inside one unit-of-work snapshot, so the ownership index
and the record store are never observed mid-issuance.
"""

from __future__ import annotations

import logging

from app.models.events import RegistryEvent
from app.models.profile import Holdings
from app.models.records import Degree, RecordKind, WorkExperience
from app.repos.unit_of_work import UnitOfWork
from app.services.errors import RecordNotFoundError, RegistryError

logger = logging.getLogger(__name__)


class HoldingsService:
    def __init__(self, *, uow: UnitOfWork) -> None:
        self._uow = uow

    async def get_user_profile_and_records(self, subject: str) -> Holdings:
        async with self._uow.snapshot() as repos:
            profile = await repos.profiles.get(subject)
            entries = await repos.ownership.list_for(subject)

            degree_ids = [e.record_id for e in entries if e.kind is RecordKind.DEGREE]
            experience_ids = [
                e.record_id for e in entries if e.kind is RecordKind.WORK_EXPERIENCE
            ]
            degrees = await repos.records.get_degrees(degree_ids)
            experiences = await repos.records.get_work_experiences(experience_ids)

        missing = [i for i in degree_ids if i not in degrees] + [
            i for i in experience_ids if i not in experiences
        ]
        if missing:
            # Every indexed id is written in the same transaction as its record.
            logger.error(
                "Ownership index for subject=%s references missing records %s",
                subject,
                missing,
            )
            raise RegistryError(f"ownership index references missing records {missing}")

        return Holdings(
            subject=subject,
            profile=profile,
            degrees=[degrees[i] for i in degree_ids],
            work_experiences=[experiences[i] for i in experience_ids],
        )

    async def get_degree(self, record_id: int) -> Degree:
        async with self._uow.snapshot() as repos:
            degree = await repos.records.get_degree(record_id)
        if degree is None:
            raise RecordNotFoundError(RecordKind.DEGREE, record_id)
        return degree

    async def get_work_experience(self, record_id: int) -> WorkExperience:
        async with self._uow.snapshot() as repos:
            experience = await repos.records.get_work_experience(record_id)
        if experience is None:
            raise RecordNotFoundError(RecordKind.WORK_EXPERIENCE, record_id)
        return experience

    async def list_events(self, *, after: int = 0, limit: int = 100) -> list[RegistryEvent]:
        async with self._uow.snapshot() as repos:
            return await repos.events.list_after(after, limit)
