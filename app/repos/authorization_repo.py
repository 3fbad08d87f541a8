from __future__ import annotations

from typing import Protocol

from app.models.authorization import AuthorizationEntry, IssuerRole
from app.repos.journal import UndoJournal


class AuthorizationRepo(Protocol):
    async def get(self, role: IssuerRole, identity: str) -> AuthorizationEntry | None: ...
    async def put(self, entry: AuthorizationEntry) -> None: ...


class InMemoryAuthorizationRepo:
    def __init__(self, journal: UndoJournal) -> None:
        self._journal = journal
        self._entries: dict[tuple[IssuerRole, str], AuthorizationEntry] = {}

    async def get(self, role: IssuerRole, identity: str) -> AuthorizationEntry | None:
        return self._entries.get((role, identity))

    async def put(self, entry: AuthorizationEntry) -> None:
        key = (entry.role, entry.identity)
        previous = self._entries.get(key)

        def _undo() -> None:
            if previous is None:
                self._entries.pop(key, None)
            else:
                self._entries[key] = previous

        self._journal.record(_undo)
        self._entries[key] = entry
