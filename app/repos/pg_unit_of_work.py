"""PostgreSQL unit of work.

One AsyncSession per logical operation.  ``transaction()`` commits on
success and rolls back on any exception.  ``snapshot()`` runs its reads
under REPEATABLE READ so the ownership index and the record store are
read from the same point in time.
"""

from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from app.repos.pg_registry_repos import (
    PgAssetRepo,
    PgAuthorizationRepo,
    PgEventRepo,
    PgOwnershipRepo,
    PgProfileRepo,
    PgRecordRepo,
)
from app.repos.unit_of_work import RegistryRepos


def _repos_for(session: AsyncSession) -> RegistryRepos:
    return RegistryRepos(
        authorizations=PgAuthorizationRepo(session),
        records=PgRecordRepo(session),
        assets=PgAssetRepo(session),
        ownership=PgOwnershipRepo(session),
        profiles=PgProfileRepo(session),
        events=PgEventRepo(session),
    )


class PgUnitOfWork:
    """Satisfies the UnitOfWork Protocol using PostgreSQL via SQLAlchemy."""

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]) -> None:
        self._session_factory = session_factory

    @asynccontextmanager
    async def transaction(self) -> AsyncIterator[RegistryRepos]:
        async with self._session_factory() as session:
            async with session.begin():
                yield _repos_for(session)

    @asynccontextmanager
    async def snapshot(self) -> AsyncIterator[RegistryRepos]:
        async with self._session_factory() as session:
            async with session.begin():
                await session.connection(
                    execution_options={"isolation_level": "REPEATABLE READ"}
                )
                yield _repos_for(session)
