"""PostgreSQL implementations of the registry repositories.

Every repo shares the AsyncSession of the surrounding PgUnitOfWork
transaction; none of them commits on its own.
"""

from __future__ import annotations

import json
from collections.abc import Sequence

from sqlalchemy import BigInteger, any_, bindparam, select
from sqlalchemy.dialects.postgresql import ARRAY
from sqlalchemy.dialects.postgresql import insert as pg_insert
from sqlalchemy.ext.asyncio import AsyncSession

from app.db.tables import (
    AssetOwnerRow,
    DegreeRow,
    IssuerAuthorizationRow,
    OwnershipEntryRow,
    ProfileRow,
    RecordCounterRow,
    RegistryEventRow,
    WorkExperienceRow,
)
from app.models.authorization import AuthorizationEntry, IssuerRole
from app.models.events import EventType, RegistryEvent
from app.models.profile import Profile
from app.models.records import (
    AssetOwnership,
    Degree,
    OwnershipEntry,
    RecordKind,
    WorkExperience,
)
from app.services.errors import RecordAlreadyExistsError

_COUNTER_ROW_ID = 1


def _id_in(column, record_ids: Sequence[int]):
    """``column = ANY(:record_ids)``: one array parameter however many ids."""
    return column == any_(
        bindparam("record_ids", list(record_ids), type_=ARRAY(BigInteger))
    )


class PgAuthorizationRepo:
    """Satisfies the AuthorizationRepo Protocol."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def get(self, role: IssuerRole, identity: str) -> AuthorizationEntry | None:
        row = await self._session.get(IssuerAuthorizationRow, (str(role), identity))
        if row is None:
            return None
        return AuthorizationEntry(
            role=IssuerRole(row.role),
            identity=row.identity,
            display_name=row.display_name,
        )

    async def put(self, entry: AuthorizationEntry) -> None:
        stmt = pg_insert(IssuerAuthorizationRow).values(
            role=str(entry.role),
            identity=entry.identity,
            display_name=entry.display_name,
        )
        stmt = stmt.on_conflict_do_update(
            index_elements=["role", "identity"],
            set_={"display_name": stmt.excluded.display_name},
        )
        await self._session.execute(stmt)


class PgRecordRepo:
    """Satisfies the RecordRepo Protocol. Rows are inserted, never updated."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def _ensure_unused(self, record_id: int) -> None:
        for table in (DegreeRow, WorkExperienceRow):
            if await self._session.get(table, record_id) is not None:
                raise RecordAlreadyExistsError(record_id)

    async def add_degree(self, degree: Degree) -> None:
        await self._ensure_unused(degree.record_id)
        self._session.add(
            DegreeRow(
                record_id=degree.record_id,
                student_name=degree.student_name,
                student_id=degree.student_id,
                university_name=degree.university_name,
                degree_name=degree.degree_name,
                major=degree.major,
                issue_date=degree.issue_date,
            )
        )
        await self._session.flush()

    async def add_work_experience(self, experience: WorkExperience) -> None:
        await self._ensure_unused(experience.record_id)
        self._session.add(
            WorkExperienceRow(
                record_id=experience.record_id,
                user_name=experience.user_name,
                company_name=experience.company_name,
                role=experience.role,
                start_date=experience.start_date,
                end_date=experience.end_date,
                employer_comments=experience.employer_comments,
            )
        )
        await self._session.flush()

    async def get_degree(self, record_id: int) -> Degree | None:
        row = await self._session.get(DegreeRow, record_id)
        return _row_to_degree(row) if row is not None else None

    async def get_work_experience(self, record_id: int) -> WorkExperience | None:
        row = await self._session.get(WorkExperienceRow, record_id)
        return _row_to_experience(row) if row is not None else None

    async def get_degrees(self, record_ids: Sequence[int]) -> dict[int, Degree]:
        if not record_ids:
            return {}
        stmt = select(DegreeRow).where(_id_in(DegreeRow.record_id, record_ids))
        rows = (await self._session.execute(stmt)).scalars().all()
        return {row.record_id: _row_to_degree(row) for row in rows}

    async def get_work_experiences(
        self, record_ids: Sequence[int]
    ) -> dict[int, WorkExperience]:
        if not record_ids:
            return {}
        stmt = select(WorkExperienceRow).where(
            _id_in(WorkExperienceRow.record_id, record_ids)
        )
        rows = (await self._session.execute(stmt)).scalars().all()
        return {row.record_id: _row_to_experience(row) for row in rows}


class PgAssetRepo:
    """Satisfies the AssetRepo Protocol.

    The counter row is locked FOR UPDATE, so concurrent issuances
    serialize on it and a rolled-back issuance leaves it untouched.
    """

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def last_record_id(self) -> int:
        row = await self._session.get(RecordCounterRow, _COUNTER_ROW_ID)
        return row.last_record_id if row is not None else 0

    async def reserve_next_id(self) -> int:
        await self._session.execute(
            pg_insert(RecordCounterRow)
            .values(id=_COUNTER_ROW_ID, last_record_id=0)
            .on_conflict_do_nothing(index_elements=["id"])
        )
        stmt = (
            select(RecordCounterRow)
            .where(RecordCounterRow.id == _COUNTER_ROW_ID)
            .with_for_update()
        )
        counter = (await self._session.execute(stmt)).scalar_one()
        counter.last_record_id += 1
        await self._session.flush()
        return counter.last_record_id

    async def bind(self, ownership: AssetOwnership) -> None:
        self._session.add(
            AssetOwnerRow(
                record_id=ownership.record_id,
                owner=ownership.owner,
                kind=str(ownership.kind),
            )
        )
        await self._session.flush()

    async def get(self, record_id: int) -> AssetOwnership | None:
        row = await self._session.get(AssetOwnerRow, record_id)
        if row is None:
            return None
        return AssetOwnership(
            record_id=row.record_id, owner=row.owner, kind=RecordKind(row.kind)
        )


class PgOwnershipRepo:
    """Satisfies the OwnershipRepo Protocol."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def append(self, subject: str, entry: OwnershipEntry) -> None:
        self._session.add(
            OwnershipEntryRow(
                subject=subject, record_id=entry.record_id, kind=str(entry.kind)
            )
        )
        await self._session.flush()

    async def list_for(self, subject: str) -> list[OwnershipEntry]:
        stmt = (
            select(OwnershipEntryRow)
            .where(OwnershipEntryRow.subject == subject)
            .order_by(OwnershipEntryRow.record_id)
        )
        rows = (await self._session.execute(stmt)).scalars().all()
        return [
            OwnershipEntry(kind=RecordKind(row.kind), record_id=row.record_id)
            for row in rows
        ]


class PgProfileRepo:
    """Satisfies the ProfileRepo Protocol."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def get(self, subject: str) -> Profile | None:
        row = await self._session.get(ProfileRow, subject)
        if row is None:
            return None
        return Profile(
            name=row.name,
            skills=row.skills,
            strengths=row.strengths,
            self_introduction=row.self_introduction,
            additional_info=row.additional_info,
        )

    async def put(self, subject: str, profile: Profile) -> None:
        values = {
            "name": profile.name,
            "skills": profile.skills,
            "strengths": profile.strengths,
            "self_introduction": profile.self_introduction,
            "additional_info": profile.additional_info,
        }
        stmt = pg_insert(ProfileRow).values(subject=subject, **values)
        stmt = stmt.on_conflict_do_update(index_elements=["subject"], set_=values)
        await self._session.execute(stmt)


class PgEventRepo:
    """Satisfies the EventRepo Protocol.

    Sequences come from a database identity column: strictly increasing,
    but a rolled-back transaction may leave a gap.
    """

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def append(self, event: RegistryEvent) -> RegistryEvent:
        row = RegistryEventRow(
            type=str(event.type),
            occurred_at=event.occurred_at,
            payload_json=json.dumps(event.payload, sort_keys=True),
        )
        self._session.add(row)
        await self._session.flush()
        return event.with_sequence(row.sequence)

    async def list_after(self, after: int, limit: int) -> list[RegistryEvent]:
        stmt = (
            select(RegistryEventRow)
            .where(RegistryEventRow.sequence > after)
            .order_by(RegistryEventRow.sequence)
            .limit(limit)
        )
        rows = (await self._session.execute(stmt)).scalars().all()
        return [
            RegistryEvent(
                type=EventType(row.type),
                payload=json.loads(row.payload_json),
                occurred_at=row.occurred_at,
                sequence=row.sequence,
            )
            for row in rows
        ]


def _row_to_degree(row: DegreeRow) -> Degree:
    return Degree(
        record_id=row.record_id,
        student_name=row.student_name,
        student_id=row.student_id,
        university_name=row.university_name,
        degree_name=row.degree_name,
        major=row.major,
        issue_date=row.issue_date,
    )


def _row_to_experience(row: WorkExperienceRow) -> WorkExperience:
    return WorkExperience(
        record_id=row.record_id,
        user_name=row.user_name,
        company_name=row.company_name,
        role=row.role,
        start_date=row.start_date,
        end_date=row.end_date,
        employer_comments=row.employer_comments,
    )
