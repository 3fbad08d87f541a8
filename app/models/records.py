from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum


class RecordKind(StrEnum):
    DEGREE = "degree"
    WORK_EXPERIENCE = "work_experience"


@dataclass(frozen=True, slots=True)
class Degree:
    """Academic degree minted by an authorized university.

    ``university_name`` is copied from the issuer's registered display
    name at issuance, never taken from the request body.
    """

    record_id: int
    student_name: str
    student_id: str
    university_name: str
    degree_name: str
    major: str
    issue_date: str


@dataclass(frozen=True, slots=True)
class WorkExperience:
    """Work-experience attestation minted by an authorized employer."""

    record_id: int
    user_name: str
    company_name: str
    role: str
    start_date: str
    end_date: str
    employer_comments: str


@dataclass(frozen=True, slots=True)
class OwnershipEntry:
    kind: RecordKind
    record_id: int


@dataclass(frozen=True, slots=True)
class AssetOwnership:
    """Binding made by the asset ledger at mint time. Never changes."""

    record_id: int
    owner: str
    kind: RecordKind
