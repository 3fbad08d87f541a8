"""Aggregate read: a subject's profile plus every record it holds."""

from __future__ import annotations

from fastapi import APIRouter
from pydantic import BaseModel

from app.api.degrees import DegreeOut
from app.api.profile import ProfileOut
from app.api.work_experiences import WorkExperienceOut
from app.models.profile import Profile
from app.services.registry import holdings_service

router = APIRouter(prefix="/v1/subjects", tags=["subjects"])


class ProfileAndRecordsOut(BaseModel):
    subject: str
    # False when the subject never set a profile; ``profile`` is then all
    # empty strings.
    profile_set: bool
    profile: ProfileOut
    degrees: list[DegreeOut]
    work_experiences: list[WorkExperienceOut]


@router.get("/{subject}/profile-and-records", response_model=ProfileAndRecordsOut)
async def get_profile_and_records(subject: str) -> ProfileAndRecordsOut:
    holdings = await holdings_service.get_user_profile_and_records(subject)
    return ProfileAndRecordsOut(
        subject=holdings.subject,
        profile_set=holdings.profile is not None,
        profile=ProfileOut.from_domain(holdings.profile or Profile()),
        degrees=[DegreeOut.from_domain(d) for d in holdings.degrees],
        work_experiences=[
            WorkExperienceOut.from_domain(w) for w in holdings.work_experiences
        ],
    )
