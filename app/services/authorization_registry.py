"""Issuer authorization registry.

One instance per issuer role.  An identity is an authorized issuer of
that role iff a non-empty display name is stored for it.  Only the
registry administrator (fixed at startup) may grant or revoke.
"""

from __future__ import annotations

import logging

from app.core.metrics import AUTHORIZATION_CHANGES
from app.models.authorization import AuthorizationEntry, IssuerRole
from app.models.events import RegistryEvent
from app.models.principal import is_null_identity
from app.repos.unit_of_work import RegistryRepos, UnitOfWork
from app.services.errors import InvalidIssuerError, UnauthorizedError
from app.services.event_publisher import EventPublisher, publish_committed

logger = logging.getLogger(__name__)


class AuthorizationRegistry:
    def __init__(
        self,
        role: IssuerRole,
        *,
        uow: UnitOfWork,
        admin_identity: str,
        publisher: EventPublisher,
    ) -> None:
        self.role = role
        self._uow = uow
        self._admin_identity = admin_identity
        self._publisher = publisher

    def _require_admin(self, caller: str) -> None:
        if caller != self._admin_identity:
            logger.warning(
                "Access denied: caller=%s attempted to change %s issuers",
                caller,
                self.role,
                extra={"caller": caller},
            )
            raise UnauthorizedError(caller, "registry administrator")

    async def grant(
        self, caller: str, issuer: str, display_name: str
    ) -> AuthorizationEntry:
        """Authorize *issuer* under *display_name*, overwriting any prior entry."""
        self._require_admin(caller)
        if is_null_identity(issuer):
            raise InvalidIssuerError("issuer identity must not be null")
        if not display_name.strip():
            raise InvalidIssuerError("display name must be non-empty")

        entry = AuthorizationEntry(
            role=self.role, identity=issuer, display_name=display_name
        )
        async with self._uow.transaction() as repos:
            await repos.authorizations.put(entry)
            event = await repos.events.append(
                RegistryEvent.issuer_authorized(
                    role=self.role, issuer=issuer, display_name=display_name
                )
            )

        AUTHORIZATION_CHANGES.labels(role=str(self.role), action="grant").inc()
        logger.info("Granted %s issuer=%s name=%r", self.role, issuer, display_name)
        await publish_committed(self._publisher, event)
        return entry

    async def revoke(self, caller: str, issuer: str) -> None:
        """Tombstone *issuer*'s entry. Already-issued records keep their names.

        Revoking an identity that holds no authorization changes nothing.
        """
        self._require_admin(caller)
        if is_null_identity(issuer):
            raise InvalidIssuerError("issuer identity must not be null")

        async with self._uow.transaction() as repos:
            current = await repos.authorizations.get(self.role, issuer)
            if current is None or not current.is_authorized:
                logger.info(
                    "Revoke of %s issuer=%s skipped: not authorized", self.role, issuer
                )
                return
            await repos.authorizations.put(
                AuthorizationEntry(role=self.role, identity=issuer, display_name=None)
            )
            event = await repos.events.append(
                RegistryEvent.issuer_revoked(role=self.role, issuer=issuer)
            )

        AUTHORIZATION_CHANGES.labels(role=str(self.role), action="revoke").inc()
        logger.info("Revoked %s issuer=%s", self.role, issuer)
        await publish_committed(self._publisher, event)

    async def display_name(self, identity: str) -> str | None:
        async with self._uow.snapshot() as repos:
            entry = await repos.authorizations.get(self.role, identity)
        if entry is None or not entry.is_authorized:
            return None
        return entry.display_name

    async def is_authorized(self, identity: str) -> bool:
        return await self.display_name(identity) is not None

    async def require_issuer(self, repos: RegistryRepos, caller: str) -> str:
        """Return the caller's display name inside an open transaction.

        Raises UnauthorizedError when the caller holds no entry for this role.
        """
        entry = await repos.authorizations.get(self.role, caller)
        name = entry.display_name if entry is not None else None
        if not name:
            raise UnauthorizedError(caller, f"authorized {self.role}")
        return name
