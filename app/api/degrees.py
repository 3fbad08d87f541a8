"""Degree issuance and lookup.

POST /v1/degrees              — issue (authorized universities only)
GET  /v1/degrees/{record_id}  — public lookup
"""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel

from app.api.dependencies import require_caller
from app.api.errors import HANDLED_ERRORS, http_error
from app.models.principal import Principal
from app.models.records import Degree
from app.services.registry import holdings_service, issuance_service

router = APIRouter(prefix="/v1/degrees", tags=["degrees"])


class IssueDegreeIn(BaseModel):
    subject: str
    student_name: str
    student_id: str
    degree_name: str
    major: str
    issue_date: str


class DegreeOut(BaseModel):
    record_id: int
    student_name: str
    student_id: str
    university_name: str
    degree_name: str
    major: str
    issue_date: str

    @staticmethod
    def from_domain(degree: Degree) -> DegreeOut:
        return DegreeOut(
            record_id=degree.record_id,
            student_name=degree.student_name,
            student_id=degree.student_id,
            university_name=degree.university_name,
            degree_name=degree.degree_name,
            major=degree.major,
            issue_date=degree.issue_date,
        )


@router.post("", response_model=DegreeOut, status_code=status.HTTP_201_CREATED)
async def issue_degree(
    body: IssueDegreeIn,
    principal: Annotated[Principal, Depends(require_caller)],
) -> DegreeOut:
    """Mint a degree to ``body.subject``.

    The university name is taken from the caller's registry entry, so an
    issuer cannot sign records under another institution's name.
    """
    try:
        degree = await issuance_service.issue_degree(
            principal.identity,
            body.subject,
            student_name=body.student_name,
            student_id=body.student_id,
            degree_name=body.degree_name,
            major=body.major,
            issue_date=body.issue_date,
        )
    except HANDLED_ERRORS as e:
        raise http_error(e) from None
    return DegreeOut.from_domain(degree)


@router.get("/{record_id}", response_model=DegreeOut)
async def get_degree(record_id: int) -> DegreeOut:
    try:
        degree = await holdings_service.get_degree(record_id)
    except HANDLED_ERRORS as e:
        raise http_error(e) from None
    return DegreeOut.from_domain(degree)
