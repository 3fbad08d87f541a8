from __future__ import annotations

from typing import Protocol

from app.models.profile import Profile
from app.repos.journal import UndoJournal


class ProfileRepo(Protocol):
    async def get(self, subject: str) -> Profile | None: ...
    async def put(self, subject: str, profile: Profile) -> None: ...


class InMemoryProfileRepo:
    def __init__(self, journal: UndoJournal) -> None:
        self._journal = journal
        self._by_subject: dict[str, Profile] = {}

    async def get(self, subject: str) -> Profile | None:
        return self._by_subject.get(subject)

    async def put(self, subject: str, profile: Profile) -> None:
        previous = self._by_subject.get(subject)

        def _undo() -> None:
            if previous is None:
                self._by_subject.pop(subject, None)
            else:
                self._by_subject[subject] = previous

        self._journal.record(_undo)
        self._by_subject[subject] = profile
