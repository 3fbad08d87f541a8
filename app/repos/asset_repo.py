from __future__ import annotations

from typing import Protocol

from app.models.records import AssetOwnership
from app.repos.journal import UndoJournal


class AssetRepo(Protocol):
    async def last_record_id(self) -> int: ...
    async def reserve_next_id(self) -> int: ...
    async def bind(self, ownership: AssetOwnership) -> None: ...
    async def get(self, record_id: int) -> AssetOwnership | None: ...


class InMemoryAssetRepo:
    def __init__(self, journal: UndoJournal) -> None:
        self._journal = journal
        self._last_id = 0
        self._owners: dict[int, AssetOwnership] = {}

    async def last_record_id(self) -> int:
        return self._last_id

    async def reserve_next_id(self) -> int:
        previous = self._last_id

        def _undo() -> None:
            self._last_id = previous

        self._journal.record(_undo)
        self._last_id = previous + 1
        return self._last_id

    async def bind(self, ownership: AssetOwnership) -> None:
        if ownership.record_id in self._owners:
            raise ValueError(f"asset {ownership.record_id} already minted")
        self._journal.record(lambda: self._owners.pop(ownership.record_id, None))
        self._owners[ownership.record_id] = ownership

    async def get(self, record_id: int) -> AssetOwnership | None:
        return self._owners.get(record_id)
