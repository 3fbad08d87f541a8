"""Service-level fixtures: an isolated ledger per test, no HTTP."""

from __future__ import annotations

from dataclasses import dataclass

import pytest

from app.models.authorization import IssuerRole
from app.repos.unit_of_work import InMemoryUnitOfWork
from app.services.asset_ledger import AssetLedger
from app.services.authorization_registry import AuthorizationRegistry
from app.services.event_publisher import InMemoryEventPublisher
from app.services.holdings_service import HoldingsService
from app.services.issuance_service import IssuanceService
from app.services.profile_service import ProfileService

ADMIN = "admin"


@dataclass
class Registry:
    uow: InMemoryUnitOfWork
    publisher: InMemoryEventPublisher
    universities: AuthorizationRegistry
    employers: AuthorizationRegistry
    ledger: AssetLedger
    issuance: IssuanceService
    profiles: ProfileService
    holdings: HoldingsService


@pytest.fixture
def reg() -> Registry:
    uow = InMemoryUnitOfWork()
    publisher = InMemoryEventPublisher()
    universities = AuthorizationRegistry(
        IssuerRole.UNIVERSITY, uow=uow, admin_identity=ADMIN, publisher=publisher
    )
    employers = AuthorizationRegistry(
        IssuerRole.EMPLOYER, uow=uow, admin_identity=ADMIN, publisher=publisher
    )
    ledger = AssetLedger(uow)
    return Registry(
        uow=uow,
        publisher=publisher,
        universities=universities,
        employers=employers,
        ledger=ledger,
        issuance=IssuanceService(
            uow=uow,
            universities=universities,
            employers=employers,
            ledger=ledger,
            publisher=publisher,
        ),
        profiles=ProfileService(uow=uow, publisher=publisher),
        holdings=HoldingsService(uow=uow),
    )
