"""create registry tables

Revision ID: 3b7e2c91d4a0
Revises:
Create Date: 2026-10-18 00:00:00.000000

"""

from collections.abc import Sequence

import sqlalchemy as sa

from alembic import op

# revision identifiers, used by Alembic.
revision: str = "3b7e2c91d4a0"
down_revision: str | Sequence[str] | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def upgrade() -> None:
    op.create_table(
        "issuer_authorizations",
        sa.Column("role", sa.String(length=32), nullable=False),
        sa.Column("identity", sa.Text(), nullable=False),
        sa.Column("display_name", sa.Text(), nullable=True),
        sa.PrimaryKeyConstraint("role", "identity"),
    )
    op.create_table(
        "record_counter",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("last_record_id", sa.BigInteger(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    op.execute("INSERT INTO record_counter (id, last_record_id) VALUES (1, 0)")
    op.create_table(
        "asset_owners",
        sa.Column("record_id", sa.BigInteger(), nullable=False),
        sa.Column("owner", sa.Text(), nullable=False),
        sa.Column("kind", sa.String(length=32), nullable=False),
        sa.PrimaryKeyConstraint("record_id"),
    )
    op.create_index("ix_asset_owners_owner", "asset_owners", ["owner"])
    op.create_table(
        "degrees",
        sa.Column("record_id", sa.BigInteger(), nullable=False),
        sa.Column("student_name", sa.Text(), nullable=False),
        sa.Column("student_id", sa.Text(), nullable=False),
        sa.Column("university_name", sa.Text(), nullable=False),
        sa.Column("degree_name", sa.Text(), nullable=False),
        sa.Column("major", sa.Text(), nullable=False),
        sa.Column("issue_date", sa.Text(), nullable=False),
        sa.PrimaryKeyConstraint("record_id"),
    )
    op.create_table(
        "work_experiences",
        sa.Column("record_id", sa.BigInteger(), nullable=False),
        sa.Column("user_name", sa.Text(), nullable=False),
        sa.Column("company_name", sa.Text(), nullable=False),
        sa.Column("role", sa.Text(), nullable=False),
        sa.Column("start_date", sa.Text(), nullable=False),
        sa.Column("end_date", sa.Text(), nullable=False),
        sa.Column("employer_comments", sa.Text(), nullable=False),
        sa.PrimaryKeyConstraint("record_id"),
    )
    op.create_table(
        "ownership_entries",
        sa.Column("subject", sa.Text(), nullable=False),
        sa.Column("record_id", sa.BigInteger(), nullable=False),
        sa.Column("kind", sa.String(length=32), nullable=False),
        sa.PrimaryKeyConstraint("subject", "record_id"),
    )
    op.create_table(
        "profiles",
        sa.Column("subject", sa.Text(), nullable=False),
        sa.Column("name", sa.Text(), nullable=False, server_default=""),
        sa.Column("skills", sa.Text(), nullable=False, server_default=""),
        sa.Column("strengths", sa.Text(), nullable=False, server_default=""),
        sa.Column("self_introduction", sa.Text(), nullable=False, server_default=""),
        sa.Column("additional_info", sa.Text(), nullable=False, server_default=""),
        sa.PrimaryKeyConstraint("subject"),
    )
    op.create_table(
        "registry_events",
        sa.Column("sequence", sa.BigInteger(), autoincrement=True, nullable=False),
        sa.Column("type", sa.String(length=64), nullable=False),
        sa.Column("occurred_at", sa.BigInteger(), nullable=False),
        sa.Column("payload_json", sa.Text(), nullable=False),
        sa.PrimaryKeyConstraint("sequence"),
    )


def downgrade() -> None:
    op.drop_table("registry_events")
    op.drop_table("profiles")
    op.drop_table("ownership_entries")
    op.drop_table("work_experiences")
    op.drop_table("degrees")
    op.drop_index("ix_asset_owners_owner", table_name="asset_owners")
    op.drop_table("asset_owners")
    op.drop_table("record_counter")
    op.drop_table("issuer_authorizations")
