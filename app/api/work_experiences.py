"""Work-experience issuance and lookup.

POST /v1/work-experiences              — issue (authorized employers only)
GET  /v1/work-experiences/{record_id}  — public lookup
"""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel

from app.api.dependencies import require_caller
from app.api.errors import HANDLED_ERRORS, http_error
from app.models.principal import Principal
from app.models.records import WorkExperience
from app.services.registry import holdings_service, issuance_service

router = APIRouter(prefix="/v1/work-experiences", tags=["work-experiences"])


class IssueWorkExperienceIn(BaseModel):
    subject: str
    user_name: str
    role: str
    start_date: str
    end_date: str
    employer_comments: str = ""


class WorkExperienceOut(BaseModel):
    record_id: int
    user_name: str
    company_name: str
    role: str
    start_date: str
    end_date: str
    employer_comments: str

    @staticmethod
    def from_domain(experience: WorkExperience) -> WorkExperienceOut:
        return WorkExperienceOut(
            record_id=experience.record_id,
            user_name=experience.user_name,
            company_name=experience.company_name,
            role=experience.role,
            start_date=experience.start_date,
            end_date=experience.end_date,
            employer_comments=experience.employer_comments,
        )


@router.post("", response_model=WorkExperienceOut, status_code=status.HTTP_201_CREATED)
async def issue_work_experience(
    body: IssueWorkExperienceIn,
    principal: Annotated[Principal, Depends(require_caller)],
) -> WorkExperienceOut:
    try:
        experience = await issuance_service.issue_work_experience(
            principal.identity,
            body.subject,
            user_name=body.user_name,
            role=body.role,
            start_date=body.start_date,
            end_date=body.end_date,
            employer_comments=body.employer_comments,
        )
    except HANDLED_ERRORS as e:
        raise http_error(e) from None
    return WorkExperienceOut.from_domain(experience)


@router.get("/{record_id}", response_model=WorkExperienceOut)
async def get_work_experience(record_id: int) -> WorkExperienceOut:
    try:
        experience = await holdings_service.get_work_experience(record_id)
    except HANDLED_ERRORS as e:
        raise http_error(e) from None
    return WorkExperienceOut.from_domain(experience)
