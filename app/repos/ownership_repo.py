from __future__ import annotations

from typing import Protocol

from app.models.records import OwnershipEntry
from app.repos.journal import UndoJournal


class OwnershipRepo(Protocol):
    async def append(self, subject: str, entry: OwnershipEntry) -> None: ...
    async def list_for(self, subject: str) -> list[OwnershipEntry]: ...


class InMemoryOwnershipRepo:
    """Per-subject append-only index. Insertion order is the only order."""

    def __init__(self, journal: UndoJournal) -> None:
        self._journal = journal
        self._by_subject: dict[str, list[OwnershipEntry]] = {}

    async def append(self, subject: str, entry: OwnershipEntry) -> None:
        self._journal.record(lambda: self._drop_last(subject))
        self._by_subject.setdefault(subject, []).append(entry)

    def _drop_last(self, subject: str) -> None:
        entries = self._by_subject[subject]
        entries.pop()
        if not entries:
            del self._by_subject[subject]

    async def list_for(self, subject: str) -> list[OwnershipEntry]:
        return list(self._by_subject.get(subject, ()))
