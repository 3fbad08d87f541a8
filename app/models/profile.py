from __future__ import annotations

from dataclasses import dataclass, field

from app.models.records import Degree, WorkExperience


@dataclass(frozen=True, slots=True)
class Profile:
    """Self-authored profile. Replaced wholesale on every update."""

    name: str = ""
    skills: str = ""
    strengths: str = ""
    self_introduction: str = ""
    additional_info: str = ""


@dataclass(frozen=True, slots=True)
class Holdings:
    """Read model: a subject's profile plus every record it owns.

    ``profile`` is None when the subject never set one.  Each list keeps
    issuance order for its kind.
    """

    subject: str
    profile: Profile | None
    degrees: list[Degree] = field(default_factory=list)
    work_experiences: list[WorkExperience] = field(default_factory=list)
