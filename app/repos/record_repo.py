from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol

from app.models.records import Degree, WorkExperience
from app.repos.journal import UndoJournal
from app.services.errors import RecordAlreadyExistsError


class RecordRepo(Protocol):
    async def add_degree(self, degree: Degree) -> None: ...
    async def add_work_experience(self, experience: WorkExperience) -> None: ...
    async def get_degree(self, record_id: int) -> Degree | None: ...
    async def get_work_experience(self, record_id: int) -> WorkExperience | None: ...
    async def get_degrees(self, record_ids: Sequence[int]) -> dict[int, Degree]: ...
    async def get_work_experiences(
        self, record_ids: Sequence[int]
    ) -> dict[int, WorkExperience]: ...


class InMemoryRecordRepo:
    """Write-once store keyed by record id.

    Presence is the key itself, so a record whose text fields are all
    empty is still found.
    """

    def __init__(self, journal: UndoJournal) -> None:
        self._journal = journal
        self._degrees: dict[int, Degree] = {}
        self._experiences: dict[int, WorkExperience] = {}

    def _ensure_unused(self, record_id: int) -> None:
        # Ids are global across both kinds.
        if record_id in self._degrees or record_id in self._experiences:
            raise RecordAlreadyExistsError(record_id)

    async def add_degree(self, degree: Degree) -> None:
        self._ensure_unused(degree.record_id)
        self._journal.record(lambda: self._degrees.pop(degree.record_id, None))
        self._degrees[degree.record_id] = degree

    async def add_work_experience(self, experience: WorkExperience) -> None:
        self._ensure_unused(experience.record_id)
        self._journal.record(lambda: self._experiences.pop(experience.record_id, None))
        self._experiences[experience.record_id] = experience

    async def get_degree(self, record_id: int) -> Degree | None:
        return self._degrees.get(record_id)

    async def get_work_experience(self, record_id: int) -> WorkExperience | None:
        return self._experiences.get(record_id)

    async def get_degrees(self, record_ids: Sequence[int]) -> dict[int, Degree]:
        return {i: self._degrees[i] for i in record_ids if i in self._degrees}

    async def get_work_experiences(
        self, record_ids: Sequence[int]
    ) -> dict[int, WorkExperience]:
        return {i: self._experiences[i] for i in record_ids if i in self._experiences}
