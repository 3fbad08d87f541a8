"""Unit of work: the atomic boundary around every registry mutation.

A transaction hands out one bundle of repositories.  Either every write
made through that bundle becomes visible, or none does.  Reads go
through ``snapshot()``, which never observes a half-applied transaction.

The in-memory implementation serializes writers on an asyncio.Lock and
rolls back through an undo journal.  See pg_unit_of_work.py for the
PostgreSQL implementation.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import AsyncIterator
from contextlib import AbstractAsyncContextManager, asynccontextmanager
from dataclasses import dataclass
from typing import Protocol

from app.repos.asset_repo import AssetRepo, InMemoryAssetRepo
from app.repos.authorization_repo import AuthorizationRepo, InMemoryAuthorizationRepo
from app.repos.event_repo import EventRepo, InMemoryEventRepo
from app.repos.journal import UndoJournal
from app.repos.ownership_repo import InMemoryOwnershipRepo, OwnershipRepo
from app.repos.profile_repo import InMemoryProfileRepo, ProfileRepo
from app.repos.record_repo import InMemoryRecordRepo, RecordRepo

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class RegistryRepos:
    authorizations: AuthorizationRepo
    records: RecordRepo
    assets: AssetRepo
    ownership: OwnershipRepo
    profiles: ProfileRepo
    events: EventRepo


class UnitOfWork(Protocol):
    def transaction(self) -> AbstractAsyncContextManager[RegistryRepos]: ...
    def snapshot(self) -> AbstractAsyncContextManager[RegistryRepos]: ...


class InMemoryUnitOfWork:
    """Single-process ledger for dev and tests — no database needed.

    In-memory repo methods never suspend, so a reader that starts after
    the writer finished runs to completion before the next writer can
    begin.  Readers only wait while a writer is mid-transaction.
    """

    def __init__(self) -> None:
        self.reset()

    def reset(self) -> None:
        """Drop all state (used by tests)."""
        self._journal = UndoJournal()
        self._lock = asyncio.Lock()
        self._idle = asyncio.Event()
        self._idle.set()
        self._repos = RegistryRepos(
            authorizations=InMemoryAuthorizationRepo(self._journal),
            records=InMemoryRecordRepo(self._journal),
            assets=InMemoryAssetRepo(self._journal),
            ownership=InMemoryOwnershipRepo(self._journal),
            profiles=InMemoryProfileRepo(self._journal),
            events=InMemoryEventRepo(self._journal),
        )

    @asynccontextmanager
    async def transaction(self) -> AsyncIterator[RegistryRepos]:
        async with self._lock:
            self._journal.begin()
            self._idle.clear()
            try:
                yield self._repos
            except BaseException:
                self._journal.rollback()
                logger.debug("In-memory transaction rolled back")
                raise
            else:
                self._journal.commit()
            finally:
                self._idle.set()

    @asynccontextmanager
    async def snapshot(self) -> AsyncIterator[RegistryRepos]:
        await self._idle.wait()
        yield self._repos
