"""SQLAlchemy table definitions.

These map to the frozen dataclass domain models in app/models/.
The domain models stay as-is — these tables are the persistence layer.
Pg repos convert between SQLAlchemy rows and domain dataclasses.
"""

from __future__ import annotations

from sqlalchemy import BigInteger, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from app.db.engine import Base

# --- Authorization registry ---


class IssuerAuthorizationRow(Base):
    __tablename__ = "issuer_authorizations"

    role: Mapped[str] = mapped_column(String(32), primary_key=True)  # university|employer
    identity: Mapped[str] = mapped_column(Text, primary_key=True)
    # NULL once revoked (tombstone)
    display_name: Mapped[str | None] = mapped_column(Text, nullable=True)


# --- Asset ledger ---


class RecordCounterRow(Base):
    """Single-row allocator. Locked FOR UPDATE by every issuance."""

    __tablename__ = "record_counter"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    last_record_id: Mapped[int] = mapped_column(BigInteger, nullable=False, default=0)


class AssetOwnerRow(Base):
    __tablename__ = "asset_owners"

    record_id: Mapped[int] = mapped_column(BigInteger, primary_key=True)
    owner: Mapped[str] = mapped_column(Text, nullable=False, index=True)
    kind: Mapped[str] = mapped_column(String(32), nullable=False)


# --- Record store (write-once) ---


class DegreeRow(Base):
    __tablename__ = "degrees"

    record_id: Mapped[int] = mapped_column(BigInteger, primary_key=True)
    student_name: Mapped[str] = mapped_column(Text, nullable=False)
    student_id: Mapped[str] = mapped_column(Text, nullable=False)
    university_name: Mapped[str] = mapped_column(Text, nullable=False)
    degree_name: Mapped[str] = mapped_column(Text, nullable=False)
    major: Mapped[str] = mapped_column(Text, nullable=False)
    issue_date: Mapped[str] = mapped_column(Text, nullable=False)


class WorkExperienceRow(Base):
    __tablename__ = "work_experiences"

    record_id: Mapped[int] = mapped_column(BigInteger, primary_key=True)
    user_name: Mapped[str] = mapped_column(Text, nullable=False)
    company_name: Mapped[str] = mapped_column(Text, nullable=False)
    role: Mapped[str] = mapped_column(Text, nullable=False)
    start_date: Mapped[str] = mapped_column(Text, nullable=False)
    end_date: Mapped[str] = mapped_column(Text, nullable=False)
    employer_comments: Mapped[str] = mapped_column(Text, nullable=False)


# --- Ownership index ---


class OwnershipEntryRow(Base):
    """Append-only.  Record ids are allocated in issuance order, so
    ordering by record_id reproduces insertion order per subject."""

    __tablename__ = "ownership_entries"

    subject: Mapped[str] = mapped_column(Text, primary_key=True)
    record_id: Mapped[int] = mapped_column(BigInteger, primary_key=True)
    kind: Mapped[str] = mapped_column(String(32), nullable=False)


# --- Profiles ---


class ProfileRow(Base):
    __tablename__ = "profiles"

    subject: Mapped[str] = mapped_column(Text, primary_key=True)
    name: Mapped[str] = mapped_column(Text, nullable=False, default="")
    skills: Mapped[str] = mapped_column(Text, nullable=False, default="")
    strengths: Mapped[str] = mapped_column(Text, nullable=False, default="")
    self_introduction: Mapped[str] = mapped_column(Text, nullable=False, default="")
    additional_info: Mapped[str] = mapped_column(Text, nullable=False, default="")


# --- Event log ---


class RegistryEventRow(Base):
    __tablename__ = "registry_events"

    sequence: Mapped[int] = mapped_column(
        BigInteger, primary_key=True, autoincrement=True
    )
    type: Mapped[str] = mapped_column(String(64), nullable=False)
    occurred_at: Mapped[int] = mapped_column(BigInteger, nullable=False)
    payload_json: Mapped[str] = mapped_column(Text, nullable=False)
