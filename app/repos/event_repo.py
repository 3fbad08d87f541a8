from __future__ import annotations

from typing import Protocol

from app.models.events import RegistryEvent
from app.repos.journal import UndoJournal


class EventRepo(Protocol):
    async def append(self, event: RegistryEvent) -> RegistryEvent: ...
    async def list_after(self, after: int, limit: int) -> list[RegistryEvent]: ...


class InMemoryEventRepo:
    """Append-only event log. Sequence numbers start at 1."""

    def __init__(self, journal: UndoJournal) -> None:
        self._journal = journal
        self._events: list[RegistryEvent] = []

    async def append(self, event: RegistryEvent) -> RegistryEvent:
        stored = event.with_sequence(len(self._events) + 1)
        self._journal.record(self._events.pop)
        self._events.append(stored)
        return stored

    async def list_after(self, after: int, limit: int) -> list[RegistryEvent]:
        # sequence == index + 1
        return self._events[max(after, 0) : max(after, 0) + limit]
