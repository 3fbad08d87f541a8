"""Asset ledger: mint-once, uniquely numbered, owner-bound assets.

Each issuance mints exactly one asset.  The asset number is the record
id: global across record kinds, starting at 1, advanced only when the
surrounding transaction commits.  Ownership is fixed at mint time and
there is no transfer path.
"""

from __future__ import annotations

from app.models.principal import is_null_identity
from app.models.records import AssetOwnership, RecordKind
from app.repos.unit_of_work import RegistryRepos, UnitOfWork
from app.services.errors import InvalidSubjectError, RecordNotFoundError


class AssetLedger:
    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    async def mint(self, repos: RegistryRepos, *, subject: str, kind: RecordKind) -> int:
        if is_null_identity(subject):
            raise InvalidSubjectError("cannot mint to a null subject")
        record_id = await repos.assets.reserve_next_id()
        await repos.assets.bind(
            AssetOwnership(record_id=record_id, owner=subject, kind=kind)
        )
        return record_id

    async def owner_of(self, record_id: int) -> AssetOwnership:
        async with self._uow.snapshot() as repos:
            ownership = await repos.assets.get(record_id)
        if ownership is None:
            raise RecordNotFoundError(None, record_id)
        return ownership

    async def last_record_id(self) -> int:
        async with self._uow.snapshot() as repos:
            return await repos.assets.last_record_id()
