"""Authorization-gated issuance of degrees and work experiences.

Each issuance is one unit-of-work transaction:

  1. caller must hold the issuer role        → UnauthorizedError
  2. subject must be a real identity          → InvalidSubjectError
  3. mint: next record id, bound to subject
  4. write the record; the issuer name comes from the registry entry
  5. append (kind, id) to the subject's ownership index
  6. append the issuance event to the event log

Any exception in 1–6 rolls all of them back, counter included.  The
event is fanned out to the publisher only after commit.
"""

from __future__ import annotations

import logging

from app.core.metrics import ISSUANCE_REJECTIONS, RECORDS_ISSUED
from app.models.events import RegistryEvent
from app.models.principal import is_null_identity
from app.models.records import Degree, OwnershipEntry, RecordKind, WorkExperience
from app.repos.unit_of_work import RegistryRepos, UnitOfWork
from app.services.asset_ledger import AssetLedger
from app.services.authorization_registry import AuthorizationRegistry
from app.services.errors import InvalidSubjectError, UnauthorizedError
from app.services.event_publisher import EventPublisher, publish_committed

logger = logging.getLogger(__name__)


class IssuanceService:
    def __init__(
        self,
        *,
        uow: UnitOfWork,
        universities: AuthorizationRegistry,
        employers: AuthorizationRegistry,
        ledger: AssetLedger,
        publisher: EventPublisher,
    ) -> None:
        self._uow = uow
        self._universities = universities
        self._employers = employers
        self._ledger = ledger
        self._publisher = publisher

    async def _admit(
        self,
        registry: AuthorizationRegistry,
        repos: RegistryRepos,
        caller: str,
        subject: str,
        kind: RecordKind,
    ) -> str:
        try:
            issuer_name = await registry.require_issuer(repos, caller)
        except UnauthorizedError:
            ISSUANCE_REJECTIONS.labels(kind=str(kind), reason="unauthorized").inc()
            logger.warning(
                "Rejected %s issuance: caller=%s is not an authorized %s",
                kind,
                caller,
                registry.role,
                extra={"caller": caller},
            )
            raise

        if is_null_identity(subject):
            ISSUANCE_REJECTIONS.labels(kind=str(kind), reason="invalid_subject").inc()
            logger.warning(
                "Rejected %s issuance: null subject from caller=%s",
                kind,
                caller,
                extra={"caller": caller},
            )
            raise InvalidSubjectError("subject identity must not be null")

        return issuer_name

    async def issue_degree(
        self,
        caller: str,
        subject: str,
        *,
        student_name: str,
        student_id: str,
        degree_name: str,
        major: str,
        issue_date: str,
    ) -> Degree:
        kind = RecordKind.DEGREE
        async with self._uow.transaction() as repos:
            university_name = await self._admit(
                self._universities, repos, caller, subject, kind
            )
            record_id = await self._ledger.mint(repos, subject=subject, kind=kind)
            degree = Degree(
                record_id=record_id,
                student_name=student_name,
                student_id=student_id,
                university_name=university_name,
                degree_name=degree_name,
                major=major,
                issue_date=issue_date,
            )
            await repos.records.add_degree(degree)
            await repos.ownership.append(subject, OwnershipEntry(kind, record_id))
            event = await repos.events.append(
                RegistryEvent.degree_issued(
                    record_id=record_id,
                    subject=subject,
                    issuer=caller,
                    degree_name=degree_name,
                )
            )

        RECORDS_ISSUED.labels(kind=str(kind)).inc()
        logger.info(
            "Issued degree id=%d to subject=%s by %s",
            record_id,
            subject,
            caller,
            extra={"caller": caller, "subject": subject, "record_id": record_id},
        )
        await publish_committed(self._publisher, event)
        return degree

    async def issue_work_experience(
        self,
        caller: str,
        subject: str,
        *,
        user_name: str,
        role: str,
        start_date: str,
        end_date: str,
        employer_comments: str,
    ) -> WorkExperience:
        kind = RecordKind.WORK_EXPERIENCE
        async with self._uow.transaction() as repos:
            company_name = await self._admit(
                self._employers, repos, caller, subject, kind
            )
            record_id = await self._ledger.mint(repos, subject=subject, kind=kind)
            experience = WorkExperience(
                record_id=record_id,
                user_name=user_name,
                company_name=company_name,
                role=role,
                start_date=start_date,
                end_date=end_date,
                employer_comments=employer_comments,
            )
            await repos.records.add_work_experience(experience)
            await repos.ownership.append(subject, OwnershipEntry(kind, record_id))
            event = await repos.events.append(
                RegistryEvent.work_experience_issued(
                    record_id=record_id,
                    subject=subject,
                    issuer=caller,
                    company_name=company_name,
                    role=role,
                )
            )

        RECORDS_ISSUED.labels(kind=str(kind)).inc()
        logger.info(
            "Issued work experience id=%d to subject=%s by %s",
            record_id,
            subject,
            caller,
            extra={"caller": caller, "subject": subject, "record_id": record_id},
        )
        await publish_committed(self._publisher, event)
        return experience
