"""Self-authored profile endpoints.

PUT /v1/profiles/me         — replace the caller's own profile
GET /v1/profiles/{subject}  — read any subject's profile (404 if never set)

There is no way to write someone else's profile: the owner is always
the token's identity, never a path or body field.
"""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status
from pydantic import BaseModel

from app.api.dependencies import require_caller
from app.api.errors import HANDLED_ERRORS, http_error
from app.models.principal import Principal
from app.models.profile import Profile
from app.services.registry import profile_service

router = APIRouter(prefix="/v1/profiles", tags=["profiles"])


class ProfileIn(BaseModel):
    name: str = ""
    skills: str = ""
    strengths: str = ""
    self_introduction: str = ""
    additional_info: str = ""


class ProfileOut(BaseModel):
    name: str
    skills: str
    strengths: str
    self_introduction: str
    additional_info: str

    @staticmethod
    def from_domain(profile: Profile) -> ProfileOut:
        return ProfileOut(
            name=profile.name,
            skills=profile.skills,
            strengths=profile.strengths,
            self_introduction=profile.self_introduction,
            additional_info=profile.additional_info,
        )


@router.put("/me", response_model=ProfileOut)
async def update_my_profile(
    body: ProfileIn,
    principal: Annotated[Principal, Depends(require_caller)],
) -> ProfileOut:
    """Replace the caller's profile. Omitted fields become empty strings."""
    try:
        profile = await profile_service.update_profile(
            principal.identity,
            Profile(
                name=body.name,
                skills=body.skills,
                strengths=body.strengths,
                self_introduction=body.self_introduction,
                additional_info=body.additional_info,
            ),
        )
    except HANDLED_ERRORS as e:
        raise http_error(e) from None
    return ProfileOut.from_domain(profile)


@router.get("/{subject}", response_model=ProfileOut)
async def get_profile(subject: str) -> ProfileOut:
    profile = await profile_service.get_profile(subject)
    if profile is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="profile not set")
    return ProfileOut.from_domain(profile)
