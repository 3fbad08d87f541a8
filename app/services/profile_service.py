from __future__ import annotations

import logging

from app.core.metrics import PROFILE_UPDATES
from app.models.events import RegistryEvent
from app.models.principal import is_null_identity
from app.models.profile import Profile
from app.repos.unit_of_work import UnitOfWork
from app.services.errors import InvalidSubjectError
from app.services.event_publisher import EventPublisher, publish_committed

logger = logging.getLogger(__name__)


class ProfileService:
    """Self-authored profiles: last write wins, no history, no merge."""

    def __init__(self, *, uow: UnitOfWork, publisher: EventPublisher) -> None:
        self._uow = uow
        self._publisher = publisher

    async def update_profile(self, caller: str, profile: Profile) -> Profile:
        if is_null_identity(caller):
            raise InvalidSubjectError("profile owner must not be null")

        async with self._uow.transaction() as repos:
            await repos.profiles.put(caller, profile)
            event = await repos.events.append(
                RegistryEvent.profile_updated(subject=caller, profile=profile)
            )

        PROFILE_UPDATES.inc()
        logger.info("Profile replaced for subject=%s", caller, extra={"subject": caller})
        await publish_committed(self._publisher, event)
        return profile

    async def get_profile(self, subject: str) -> Profile | None:
        """None means the subject never set a profile."""
        async with self._uow.snapshot() as repos:
            return await repos.profiles.get(subject)
