"""Module-level service singletons.

Same conditional pattern as the repos and the publisher: PostgreSQL when
DATABASE_URL is configured, in-memory otherwise.
"""

from __future__ import annotations

from app.core.config import SETTINGS
from app.db.engine import async_session_factory
from app.models.authorization import IssuerRole
from app.repos.pg_unit_of_work import PgUnitOfWork
from app.repos.unit_of_work import InMemoryUnitOfWork, UnitOfWork
from app.services.asset_ledger import AssetLedger
from app.services.authorization_registry import AuthorizationRegistry
from app.services.event_publisher import event_publisher
from app.services.holdings_service import HoldingsService
from app.services.issuance_service import IssuanceService
from app.services.profile_service import ProfileService

if async_session_factory is not None:
    unit_of_work: UnitOfWork = PgUnitOfWork(async_session_factory)
else:
    unit_of_work = InMemoryUnitOfWork()

universities = AuthorizationRegistry(
    IssuerRole.UNIVERSITY,
    uow=unit_of_work,
    admin_identity=SETTINGS.registry_admin,
    publisher=event_publisher,
)
employers = AuthorizationRegistry(
    IssuerRole.EMPLOYER,
    uow=unit_of_work,
    admin_identity=SETTINGS.registry_admin,
    publisher=event_publisher,
)
asset_ledger = AssetLedger(unit_of_work)

issuance_service = IssuanceService(
    uow=unit_of_work,
    universities=universities,
    employers=employers,
    ledger=asset_ledger,
    publisher=event_publisher,
)
profile_service = ProfileService(uow=unit_of_work, publisher=event_publisher)
holdings_service = HoldingsService(uow=unit_of_work)
