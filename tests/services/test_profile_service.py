from __future__ import annotations

import asyncio

import pytest

from app.models.events import EventType
from app.models.profile import Profile
from app.services.errors import InvalidSubjectError
from tests.conftest import STUDENT
from tests.services.conftest import Registry


def test_profile_absent_until_set(reg: Registry) -> None:
    assert asyncio.run(reg.profiles.get_profile(STUDENT)) is None


def test_update_replaces_whole_profile(reg: Registry) -> None:
    asyncio.run(
        reg.profiles.update_profile(STUDENT, Profile(name="Alice", skills="Python"))
    )
    asyncio.run(reg.profiles.update_profile(STUDENT, Profile(name="Alice B.")))

    # skills not carried over: last write wins, no merge
    assert asyncio.run(reg.profiles.get_profile(STUDENT)) == Profile(name="Alice B.")


def test_update_emits_profile_updated_with_all_fields(reg: Registry) -> None:
    profile = Profile(
        name="Alice",
        skills="Python",
        strengths="Focus",
        self_introduction="Hi",
        additional_info="n/a",
    )
    asyncio.run(reg.profiles.update_profile(STUDENT, profile))

    (event,) = reg.publisher.published
    assert event.type is EventType.PROFILE_UPDATED
    assert event.payload == {
        "subject": STUDENT,
        "name": "Alice",
        "skills": "Python",
        "strengths": "Focus",
        "self_introduction": "Hi",
        "additional_info": "n/a",
    }


def test_null_owner_rejected(reg: Registry) -> None:
    with pytest.raises(InvalidSubjectError):
        asyncio.run(reg.profiles.update_profile("", Profile(name="x")))
