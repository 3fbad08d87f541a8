"""PostgreSQL schema and query shape, checked without a live database."""

from __future__ import annotations

import pytest
from sqlalchemy import Text, select
from sqlalchemy.dialects import postgresql

from app.db.tables import (
    AssetOwnerRow,
    DegreeRow,
    IssuerAuthorizationRow,
    OwnershipEntryRow,
    ProfileRow,
)
from app.repos.pg_registry_repos import _id_in


@pytest.mark.parametrize(
    "column",
    [
        IssuerAuthorizationRow.__table__.c.identity,
        AssetOwnerRow.__table__.c.owner,
        OwnershipEntryRow.__table__.c.subject,
        ProfileRow.__table__.c.subject,
    ],
)
def test_identity_columns_are_unbounded(column) -> None:
    """Identities are opaque strings of any length."""
    assert isinstance(column.type, Text)
    assert column.type.length is None


def test_batch_lookup_binds_ids_as_one_array() -> None:
    ids = list(range(1, 40_001))
    stmt = select(DegreeRow).where(_id_in(DegreeRow.record_id, ids))
    compiled = stmt.compile(dialect=postgresql.dialect())

    assert "ANY" in str(compiled)
    assert compiled.params == {"record_ids": ids}
